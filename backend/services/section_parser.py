"""Section presence detection and years-of-experience extraction."""

import re

# Each section is present when any of its synonyms appears anywhere in the
# text. Sections are independent flags, not positional segments.
SECTION_PATTERNS: dict[str, list[str]] = {
    "summary": [r"summary", r"objective", r"profile"],
    "experience": [r"experience", r"employment", r"work history"],
    "education": [r"education", r"academic", r"degree", r"university"],
    "skills": [r"skills", r"technical", r"competencies"],
    "projects": [r"projects", r"portfolio"],
    "certifications": [r"certification", r"certificate", r"licensed"],
    "achievements": [r"achievement", r"award", r"honor"],
    "contact": [r"email", r"phone", r"linkedin", r"github"],
}

_COMPILED: dict[str, re.Pattern] = {
    section: re.compile("|".join(patterns), re.IGNORECASE)
    for section, patterns in SECTION_PATTERNS.items()
}

SECTION_NAMES: tuple[str, ...] = tuple(SECTION_PATTERNS)

# Ordered: the first pattern that matches anywhere wins, and only its first
# group is used (the lower bound for ranges).
EXPERIENCE_PATTERNS: list[re.Pattern] = [
    re.compile(r"(\d+)\+?\s*years?", re.IGNORECASE),
    re.compile(r"(\d+)\+?\s*yrs?", re.IGNORECASE),
    re.compile(r"(\d+)\s*-\s*(\d+)\s*years?", re.IGNORECASE),
]

# Closed lower bounds, checked from the top. Labels differ per document type
# only for the two lowest bands.
_LEVEL_BANDS: list[tuple[int, dict[str, str]]] = [
    (8, {"job": "Senior/Lead", "resume": "Senior/Lead"}),
    (5, {"job": "Senior", "resume": "Senior"}),
    (3, {"job": "Mid-Level", "resume": "Intermediate"}),
    (1, {"job": "Junior", "resume": "Entry Level"}),
]
_DEFAULT_LEVEL = "Entry Level"


def extract_sections(text: str) -> dict[str, bool]:
    """Map every known section name to whether a synonym occurs in ``text``."""
    return {
        section: bool(pattern.search(text))
        for section, pattern in _COMPILED.items()
    }


def extract_experience(text: str) -> int:
    """Years of experience stated in ``text``, or 0 if none is stated."""
    for pattern in EXPERIENCE_PATTERNS:
        match = pattern.search(text)
        if match:
            return int(match.group(1))
    return 0


def experience_level(years: int, document_type: str = "job") -> str:
    """Seniority label for ``years`` ("job" or "resume" vocabulary)."""
    for lower_bound, labels in _LEVEL_BANDS:
        if years >= lower_bound:
            return labels[document_type]
    return _DEFAULT_LEVEL
