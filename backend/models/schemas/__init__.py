"""Value objects exchanged between the analyzers and the API layer."""

from models.schemas.features import ExtractedFeatures, SentimentResult
from models.schemas.interview_prep import InterviewPreparation, InterviewQuestion
from models.schemas.job_analysis import ExperienceLevel, JobAnalysis, MatchResult
from models.schemas.resume_analysis import ResumeAnalysis
from models.schemas.skill_recommendation import (
    RecommendedSkill,
    SkillCategorySummary,
    SkillRecommendation,
)

__all__ = [
    "ExtractedFeatures",
    "SentimentResult",
    "InterviewPreparation",
    "InterviewQuestion",
    "ExperienceLevel",
    "JobAnalysis",
    "MatchResult",
    "ResumeAnalysis",
    "RecommendedSkill",
    "SkillCategorySummary",
    "SkillRecommendation",
]
