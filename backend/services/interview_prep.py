"""Interview preparation: question selection, focus areas and tips."""

import logging

from models.schemas.interview_prep import InterviewPreparation, InterviewQuestion
from services.question_bank import (
    DIFFICULTIES,
    get_questions_by_category,
    get_questions_by_skills,
)
from services.skill_extractor import extract_skills

logger = logging.getLogger(__name__)

MAX_QUESTIONS = 15
PER_DIFFICULTY = 5

# (role substrings, bank categories to add)
ROLE_CATEGORIES: list[tuple[tuple[str, ...], tuple[str, ...]]] = [
    (("frontend",), ("Frontend",)),
    (("backend",), ("Backend",)),
    (("full stack", "fullstack"), ("Frontend", "Backend", "System Design")),
]

GENERAL_TIPS = [
    "Practice explaining your projects using the STAR method (Situation, Task, Action, Result)",
    "Review data structures and algorithms - they're common in technical interviews",
    "Prepare questions to ask the interviewer about the role and company",
    "Research the company thoroughly before the interview",
    "Practice coding problems on LeetCode or HackerRank",
]

FRONTEND_TIP_SKILLS = frozenset({"react", "angular", "vue"})
FRONTEND_TIPS = [
    "Be ready to discuss component lifecycle and state management",
    "Prepare to explain how you optimize frontend performance",
]

BACKEND_TIP_SKILLS = frozenset({"nodejs", "node.js", "backend"})
BACKEND_TIPS = [
    "Review API design principles and RESTful conventions",
    "Be prepared to discuss database optimization and scaling",
]

DEFAULT_FOCUS_AREAS = [
    "General Technical Knowledge",
    "Problem Solving",
    "System Design Basics",
]


def get_role_specific_questions(role: str) -> list[InterviewQuestion]:
    role_lower = role.lower()
    questions: list[InterviewQuestion] = []
    for markers, categories in ROLE_CATEGORIES:
        if any(marker in role_lower for marker in markers):
            for category in categories:
                questions.extend(get_questions_by_category(category))
    return questions


def _unique_by_text(questions: list[InterviewQuestion]) -> list[InterviewQuestion]:
    seen: set[str] = set()
    unique: list[InterviewQuestion] = []
    for q in questions:
        if q.question not in seen:
            seen.add(q.question)
            unique.append(q)
    return unique


def diversify_questions(questions: list[InterviewQuestion]) -> list[InterviewQuestion]:
    """Up to five questions per difficulty (easy first), then the rest."""
    diversified: list[InterviewQuestion] = []
    for difficulty in DIFFICULTIES:
        diversified.extend(
            [q for q in questions if q.difficulty == difficulty][:PER_DIFFICULTY]
        )
    diversified.extend(questions)
    return _unique_by_text(diversified)[:MAX_QUESTIONS]


def identify_focus_areas(questions: list[InterviewQuestion]) -> list[str]:
    """One entry per category with hard questions, in first-appearance order."""
    hard_counts: dict[str, int] = {}
    for q in questions:
        hard_counts.setdefault(q.category, 0)
        if q.difficulty == "hard":
            hard_counts[q.category] += 1

    focus_areas = [
        f"{category}: Focus on advanced concepts - {count} challenging questions identified"
        for category, count in hard_counts.items()
        if count > 0
    ]
    return focus_areas or list(DEFAULT_FOCUS_AREAS)


def get_interview_prep_tips(skills: list[str]) -> list[str]:
    skills_lower = {s.lower() for s in skills}
    tips = list(GENERAL_TIPS)
    if skills_lower & FRONTEND_TIP_SKILLS:
        tips.extend(FRONTEND_TIPS)
    if skills_lower & BACKEND_TIP_SKILLS:
        tips.extend(BACKEND_TIPS)
    return tips


def prepare_interview(skills_text: str, target_role: str | None = None) -> InterviewPreparation:
    """Select bank questions for the stated skills and optional target role."""
    skills = extract_skills(skills_text)
    questions = get_questions_by_skills(skills)
    if target_role:
        questions.extend(get_role_specific_questions(target_role))
    questions = _unique_by_text(questions)

    logger.debug(
        "Interview prep: %d skills, %d candidate questions, role=%r",
        len(skills), len(questions), target_role,
    )
    return InterviewPreparation(
        skills=skills,
        target_role=target_role,
        questions=diversify_questions(questions),
        prep_tips=get_interview_prep_tips(skills),
        focus_areas=identify_focus_areas(questions),
    )
