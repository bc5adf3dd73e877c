"""Composite scores and resume-vs-job comparison.

Match score (0-100):
    required coverage  up to 70 points
    preferred coverage up to 30 points (full 30 when none are listed)
    no required skills -> fixed 50, regardless of anything else

Resume overall score (0-100):
    sections   40 x found / 8
    skills     30 x found / 10, capped at 30
    experience 15 if any years are stated
    sentiment  15 / 10 / 5 for positive / neutral / negative
"""

import logging

from models.schemas.job_analysis import MatchResult
from services.job_analyzer import analyze_job
from services.section_parser import SECTION_NAMES
from services.similarity import matches_any
from services.skill_extractor import extract_skills

logger = logging.getLogger(__name__)

REQUIRED_WEIGHT = 70
PREFERRED_WEIGHT = 30
NO_REQUIREMENTS_SCORE = 50

W_SECTIONS = 40
W_SKILLS = 30
W_EXPERIENCE = 15
SENTIMENT_POINTS: dict[str, int] = {"positive": 15, "neutral": 10, "negative": 5}
SKILL_TARGET = 10
TOTAL_SECTIONS = len(SECTION_NAMES)

MAX_CRITICAL_SKILLS = 5
MAX_PREFERRED_SKILLS = 3


def _round_half_up(value: float) -> int:
    return int(value + 0.5)


def missing_skills(resume_skills: list[str], job_skills: list[str]) -> list[str]:
    """Job skills with no bidirectional-containment match among resume skills."""
    return [s for s in job_skills if not matches_any(s, resume_skills)]


def calculate_match_score(
    resume_skills: list[str],
    required_skills: list[str],
    preferred_skills: list[str],
) -> int:
    if not required_skills:
        return NO_REQUIREMENTS_SCORE

    matched_required = len(required_skills) - len(missing_skills(resume_skills, required_skills))
    score = REQUIRED_WEIGHT * matched_required / len(required_skills)

    if preferred_skills:
        matched_preferred = len(preferred_skills) - len(
            missing_skills(resume_skills, preferred_skills)
        )
        score += PREFERRED_WEIGHT * matched_preferred / len(preferred_skills)
    else:
        score += PREFERRED_WEIGHT

    return _round_half_up(score)


def calculate_overall_score(
    found_sections: int,
    found_skills: int,
    experience_years: int,
    sentiment_assessment: str,
) -> int:
    score = W_SECTIONS * found_sections / TOTAL_SECTIONS
    score += min(W_SKILLS * found_skills / SKILL_TARGET, W_SKILLS)
    score += W_EXPERIENCE if experience_years > 0 else 0
    score += SENTIMENT_POINTS.get(sentiment_assessment, SENTIMENT_POINTS["neutral"])
    return min(_round_half_up(score), 100)


def generate_match_recommendations(
    resume_skills: list[str],
    required_skills: list[str],
    preferred_skills: list[str],
) -> list[str]:
    """Ordered advice: missing required skills first, then preferred, then tips."""
    recommendations: list[str] = []

    missing_required = missing_skills(resume_skills, required_skills)
    if missing_required:
        recommendations.append(
            "Critical: Add these required skills to your resume: "
            + ", ".join(missing_required[:MAX_CRITICAL_SKILLS])
        )
        recommendations.append(
            "Consider taking online courses or building projects to gain these skills."
        )

    missing_preferred = missing_skills(resume_skills, preferred_skills)
    if missing_preferred:
        recommendations.append(
            "Enhance your profile with these preferred skills: "
            + ", ".join(missing_preferred[:MAX_PREFERRED_SKILLS])
        )

    recommendations.append("Tailor your resume to include keywords from this job description.")
    recommendations.append(
        "Highlight projects or experiences that demonstrate the required skills."
    )
    return recommendations


def compare_resume_to_job(resume_text: str, job_text: str) -> MatchResult:
    """Analyze the job and score the resume's skills against it."""
    job = analyze_job(job_text)
    resume_skills = extract_skills(resume_text)

    match_score = calculate_match_score(
        resume_skills, job.required_skills, job.preferred_skills
    )
    recommendations = generate_match_recommendations(
        resume_skills, job.required_skills, job.preferred_skills
    )
    logger.debug("Match score %d against %r", match_score, job.role)

    return MatchResult(
        **job.model_dump(exclude={"match_score", "recommendations"}),
        match_score=match_score,
        recommendations=recommendations,
    )
