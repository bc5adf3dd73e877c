"""Skill-gap recommendation results."""

from typing import Literal

from pydantic import BaseModel

Priority = Literal["high", "medium", "low"]


class RecommendedSkill(BaseModel):
    skill: str
    category: str
    priority: Priority
    reason: str


class LearningResource(BaseModel):
    skill: str
    resources: list[str] = []


class SkillRecommendation(BaseModel):
    """Skills to learn next, where to learn them, and matching career paths."""
    current_skills: list[str] = []
    target_role: str | None = None
    recommended_skills: list[RecommendedSkill] = []
    learning_resources: list[LearningResource] = []
    career_paths: list[str] = []


class SkillCategorySummary(BaseModel):
    category: str
    skill_count: int
    related_roles: list[str] = []
    sample_skills: list[str] = []
