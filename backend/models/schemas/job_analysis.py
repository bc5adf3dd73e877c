"""Job description analysis and resume-vs-job comparison results."""

from pydantic import BaseModel


class ExperienceLevel(BaseModel):
    """Years of experience requested by a job posting."""
    minimum: int = 0
    preferred: int = 0
    level: str = "Entry Level"


class JobAnalysis(BaseModel):
    """Structured analysis of one job description.

    ``match_score`` and ``recommendations`` stay ``None`` unless the analysis
    was produced by comparing a resume against the job (see MatchResult).
    """
    role: str = "Not specified"
    required_skills: list[str] = []
    preferred_skills: list[str] = []
    experience_level: ExperienceLevel = ExperienceLevel()
    keywords: list[str] = []
    responsibilities: list[str] = []
    qualifications: list[str] = []
    match_score: int | None = None
    recommendations: list[str] | None = None


class MatchResult(JobAnalysis):
    """Job analysis with the comparison fields populated."""
    match_score: int
    recommendations: list[str]
