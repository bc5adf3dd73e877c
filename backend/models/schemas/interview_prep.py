"""Interview question bank entries and interview preparation results."""

from typing import Literal

from pydantic import BaseModel

Difficulty = Literal["easy", "medium", "hard"]


class InterviewQuestion(BaseModel):
    """A single bank question, tagged by the skills it exercises."""
    question: str
    category: str
    difficulty: Difficulty
    skills: list[str] = []


class InterviewPreparation(BaseModel):
    skills: list[str] = []
    target_role: str | None = None
    questions: list[InterviewQuestion] = []  # at most 15, unique by text
    prep_tips: list[str] = []
    focus_areas: list[str] = []
