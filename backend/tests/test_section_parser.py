import pytest

from services.section_parser import (
    SECTION_NAMES,
    experience_level,
    extract_experience,
    extract_sections,
)


SAMPLE_RESUME = """John Doe
john.doe@email.com | (555) 123-4567
linkedin.com/in/johndoe | github.com/johndoe

Summary
Experienced software engineer with 5+ years building web applications.

Experience
Senior Software Engineer | TechCorp | 2021 - Present
- Built REST APIs serving 1M requests/day

Education
B.S. Computer Science | State University | 2019

Skills
Python, JavaScript, React, Docker, AWS, PostgreSQL, Git
"""


def test_extract_sections_detects_core_sections():
    sections = extract_sections(SAMPLE_RESUME)
    for name in ("contact", "summary", "experience", "education", "skills"):
        assert sections[name], name
    assert not sections["projects"]
    assert not sections["certifications"]
    assert not sections["achievements"]


def test_extract_sections_reports_every_known_section():
    assert set(extract_sections("")) == set(SECTION_NAMES)
    assert len(SECTION_NAMES) == 8


def test_objective_alone_sets_summary():
    sections = extract_sections("Objective: build things")
    assert sections["summary"]
    assert sum(sections.values()) == 1


def test_section_synonyms_are_case_insensitive():
    sections = extract_sections("EMPLOYMENT\nPORTFOLIO\nAWARDS")
    assert sections["experience"]
    assert sections["projects"]
    assert sections["achievements"]


@pytest.mark.parametrize(
    "text, years",
    [
        ("5+ years of Python", 5),
        ("10 years in industry", 10),
        ("1 year internship", 1),
        ("3 yrs backend", 3),
        ("no numbers here", 0),
        ("", 0),
    ],
)
def test_extract_experience(text, years):
    assert extract_experience(text) == years


def test_extract_experience_first_mention_wins():
    assert extract_experience("2 years at Acme, then 4 years at Initech") == 2


@pytest.mark.parametrize(
    "years, level",
    [(0, "Entry Level"), (1, "Junior"), (2, "Junior"), (3, "Mid-Level"), (4, "Mid-Level"),
     (5, "Senior"), (7, "Senior"), (8, "Senior/Lead"), (20, "Senior/Lead")],
)
def test_job_experience_bands(years, level):
    assert experience_level(years, "job") == level


@pytest.mark.parametrize(
    "years, level",
    [(0, "Entry Level"), (2, "Entry Level"), (3, "Intermediate"), (5, "Senior"),
     (8, "Senior/Lead")],
)
def test_resume_experience_bands(years, level):
    assert experience_level(years, "resume") == level
