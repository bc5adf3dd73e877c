"""Resume quality analysis result."""

from pydantic import BaseModel


class SectionReport(BaseModel):
    found: list[str] = []
    missing: list[str] = []  # required sections only
    recommendations: list[str] = []


class SkillReport(BaseModel):
    found: list[str] = []
    suggested: list[str] = []
    by_category: dict[str, list[str]] = {}


class ExperienceReport(BaseModel):
    years: int = 0
    level: str = "Entry Level"


class SentimentReport(BaseModel):
    score: float = 0.0
    assessment: str = "neutral"
    feedback: str = ""


class ResumeAnalysis(BaseModel):
    """Structured analysis of one resume, scored 0-100."""
    overall_score: int = 0
    sections: SectionReport = SectionReport()
    skills: SkillReport = SkillReport()
    experience: ExperienceReport = ExperienceReport()
    keywords: list[str] = []
    sentiment: SentimentReport = SentimentReport()
    improvements: list[str] = []
