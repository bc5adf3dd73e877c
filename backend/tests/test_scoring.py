import pytest

from services.scoring import (
    calculate_match_score,
    calculate_overall_score,
    compare_resume_to_job,
    generate_match_recommendations,
    missing_skills,
)

PREFERRED_ONLY_JOB = """Backend Engineer
We build delightful products for small teams.
Nice to have: docker, kubernetes and graphql experience is a bonus."""

CLOSING_TIPS = [
    "Tailor your resume to include keywords from this job description.",
    "Highlight projects or experiences that demonstrate the required skills.",
]


class TestMatchScore:
    def test_no_required_skills_scores_fifty(self):
        assert calculate_match_score(["python"], [], ["docker"]) == 50
        assert calculate_match_score(["docker"], [], ["docker"]) == 50
        assert calculate_match_score([], [], []) == 50

    def test_partial_required_full_preferred_credit_when_none_listed(self):
        assert calculate_match_score(["python"], ["python"], []) == 100

    def test_weighted_mix(self):
        score = calculate_match_score(["python", "docker"], ["python", "postgresql"], ["docker"])
        assert score == 65

    def test_nothing_matched(self):
        assert calculate_match_score([], ["python"], ["docker"]) == 0

    def test_containment_counts_as_match(self):
        assert calculate_match_score(["React Native"], ["react"], []) == 100

    def test_rounds_half_up(self):
        # 70 * 1/4 + 30 = 47.5
        assert calculate_match_score(["python"], ["python", "golang", "rust", "scala"], []) == 48

    def test_bounded(self):
        for resume in ([], ["python"], ["python", "docker", "kubernetes"]):
            score = calculate_match_score(resume, ["python", "sql"], ["docker", "kubernetes"])
            assert 0 <= score <= 100


def test_missing_skills():
    assert missing_skills(["Node.js", "react"], ["node.js", "docker", "React"]) == ["docker"]


@pytest.mark.parametrize(
    "sections, skills, years, sentiment, expected",
    [
        (8, 10, 5, "positive", 100),
        (0, 0, 0, "negative", 5),
        (4, 5, 0, "neutral", 45),
        (0, 30, 0, "neutral", 40),
        (8, 50, 12, "positive", 100),
    ],
)
def test_overall_score(sections, skills, years, sentiment, expected):
    assert calculate_overall_score(sections, skills, years, sentiment) == expected


class TestMatchRecommendations:
    def test_missing_required_and_preferred(self):
        recs = generate_match_recommendations(["python"], ["python", "postgresql"], ["docker"])
        assert recs == [
            "Critical: Add these required skills to your resume: postgresql",
            "Consider taking online courses or building projects to gain these skills.",
            "Enhance your profile with these preferred skills: docker",
            *CLOSING_TIPS,
        ]

    def test_lists_are_capped(self):
        required = ["a1", "b2", "c3", "d4", "e5", "f6"]
        preferred = ["g7", "h8", "i9", "j0"]
        recs = generate_match_recommendations([], required, preferred)
        assert recs[0].endswith("a1, b2, c3, d4, e5")
        assert recs[2].endswith("g7, h8, i9")

    def test_everything_matched(self):
        assert generate_match_recommendations(["python"], ["python"], []) == CLOSING_TIPS


class TestCompare:
    def test_preferred_only_job_scores_fifty(self):
        resume = "Skilled with Docker, Kubernetes and GraphQL in production for years."
        result = compare_resume_to_job(resume, PREFERRED_ONLY_JOB)
        assert result.required_skills == []
        assert result.preferred_skills == ["docker", "kubernetes", "graphql"]
        assert result.match_score == 50
        assert result.recommendations == CLOSING_TIPS
        assert result.role == "Backend Engineer"

    def test_missing_required_skill_is_reported(self):
        job = (
            "Data Engineer\n"
            "Python and PostgreSQL are required for this role, plus strong SQL habits."
        )
        result = compare_resume_to_job("I write Python every day.", job)
        assert "python" in result.required_skills
        assert result.match_score < 100
        assert result.recommendations[0].startswith("Critical: Add these required skills")
        assert "postgresql" in result.recommendations[0]
