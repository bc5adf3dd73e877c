"""Skill-gap recommendations, learning resources and career paths."""

import logging

from models.schemas.skill_recommendation import (
    LearningResource,
    RecommendedSkill,
    SkillCategorySummary,
    SkillRecommendation,
)
from services.skill_extractor import extract_skills
from services.taxonomy import SKILL_CATEGORIES

logger = logging.getLogger(__name__)

MAX_RECOMMENDATIONS = 10
MAX_RESOURCE_SKILLS = 5

PRIORITY_ORDER: dict[str, int] = {"high": 1, "medium": 2, "low": 3}

FRONTEND_FRAMEWORKS = frozenset({"react", "angular", "vue", "vue.js"})
BACKEND_RUNTIMES = frozenset({"nodejs", "node.js", "express", "express.js", "nestjs"})

# (trigger skills or None for "always", skills that satisfy the rule, recommendation)
GAP_RULES: list[tuple[frozenset[str] | None, frozenset[str], RecommendedSkill]] = [
    (
        FRONTEND_FRAMEWORKS,
        frozenset({"typescript"}),
        RecommendedSkill(
            skill="TypeScript",
            category="Frontend Development",
            priority="high",
            reason="Essential for modern frontend development",
        ),
    ),
    (
        BACKEND_RUNTIMES,
        frozenset({"mongodb", "postgresql"}),
        RecommendedSkill(
            skill="PostgreSQL",
            category="Databases",
            priority="high",
            reason="Backend developers need database skills",
        ),
    ),
    (
        None,
        frozenset({"jest", "testing", "cypress"}),
        RecommendedSkill(
            skill="Jest (Unit Testing)",
            category="Testing & QA",
            priority="high",
            reason="Testing is crucial for software quality",
        ),
    ),
    (
        None,
        frozenset({"aws", "azure", "gcp"}),
        RecommendedSkill(
            skill="AWS",
            category="DevOps & Cloud",
            priority="medium",
            reason="Cloud skills are highly demanded in the industry",
        ),
    ),
]

LEARNING_RESOURCES: dict[str, list[str]] = {
    "javascript": [
        "FreeCodeCamp - JavaScript Algorithms",
        "MDN Web Docs",
        "JavaScript.info",
    ],
    "typescript": [
        "TypeScript Official Docs",
        "TypeScript Deep Dive (Book)",
        "Execute Program - TypeScript",
    ],
    "react": [
        "React Official Tutorial",
        "Scrimba - Learn React",
        "Epic React by Kent C. Dodds",
    ],
    "nodejs": [
        "Node.js Official Docs",
        "Node.js Design Patterns (Book)",
        "Learn Node by Wes Bos",
    ],
    "python": [
        "Python.org Tutorial",
        "Automate the Boring Stuff with Python",
        "Real Python",
    ],
    "docker": [
        "Docker Official Tutorial",
        "Docker for Beginners - FreeCodeCamp",
        "Play with Docker",
    ],
    "aws": [
        "AWS Free Tier",
        "AWS Certified Cloud Practitioner",
        "A Cloud Guru",
    ],
}
LEARNING_RESOURCES["node.js"] = LEARNING_RESOURCES["nodejs"]

# Ordered (any-of signature, path). Full stack needs both signatures.
_FRONTEND_PATH_SKILLS = frozenset({"react", "angular", "vue", "html", "css"})
_BACKEND_PATH_SKILLS = frozenset({"nodejs", "node.js", "python", "java", "api"})
_FULLSTACK_FRONT = frozenset({"react", "angular", "vue"})
_FULLSTACK_BACK = frozenset({"nodejs", "node.js", "python", "java"})

CAREER_PATH_RULES: list[tuple[tuple[frozenset[str], ...], str]] = [
    ((_FRONTEND_PATH_SKILLS,), "Frontend Developer → Senior Frontend → Frontend Architect"),
    ((_BACKEND_PATH_SKILLS,), "Backend Developer → Senior Backend → Backend Architect"),
    (
        (_FULLSTACK_FRONT, _FULLSTACK_BACK),
        "Full Stack Developer → Senior Full Stack → Tech Lead",
    ),
    (
        (frozenset({"docker", "kubernetes", "aws", "cicd", "ci/cd"}),),
        "DevOps Engineer → Senior DevOps → DevOps Architect",
    ),
    (
        (frozenset({"python", "sql", "machine learning"}),),
        "Data Analyst → Data Scientist → ML Engineer",
    ),
]
DEFAULT_CAREER_PATH = "Software Developer → Senior Developer → Tech Lead → Engineering Manager"


def generate_skill_recommendations(current_skills: list[str]) -> list[RecommendedSkill]:
    """Prioritised skills to learn next, at most ten, high priority first."""
    current_lower = {s.lower() for s in current_skills}
    recommendations: list[RecommendedSkill] = []

    for category in SKILL_CATEGORIES:
        if not any(s.lower() in current_lower for s in category.skills):
            continue
        for skill in category.skills:
            if skill.lower() not in current_lower:
                recommendations.append(RecommendedSkill(
                    skill=skill,
                    category=category.name,
                    priority="medium",
                    reason=f"Complements your existing {category.name} skills",
                ))

    for triggers, satisfiers, recommendation in GAP_RULES:
        triggered = triggers is None or bool(current_lower & triggers)
        if triggered and not current_lower & satisfiers:
            recommendations.append(recommendation.model_copy())

    # sorted() is stable, so equal priorities keep discovery order
    ranked = sorted(recommendations, key=lambda r: PRIORITY_ORDER[r.priority])

    unique: list[RecommendedSkill] = []
    seen: set[str] = set()
    for rec in ranked:
        if rec.skill.lower() not in seen:
            seen.add(rec.skill.lower())
            unique.append(rec)
    return unique[:MAX_RECOMMENDATIONS]


def get_learning_resources(skills: list[str]) -> list[LearningResource]:
    return [
        LearningResource(
            skill=skill,
            resources=LEARNING_RESOURCES.get(skill.lower(), [
                f'Search for "{skill} tutorial" on YouTube',
                f"Check Udemy for {skill} courses",
                f"Visit official {skill} documentation",
            ]),
        )
        for skill in skills
    ]


def suggest_career_paths(skills: list[str]) -> list[str]:
    """Career paths whose skill signatures match; never empty."""
    skills_lower = {s.lower() for s in skills}
    paths = [
        path for signatures, path in CAREER_PATH_RULES
        if all(skills_lower & signature for signature in signatures)
    ]
    return paths or [DEFAULT_CAREER_PATH]


def recommend_skills(skills_text: str, target_role: str | None = None) -> SkillRecommendation:
    current_skills = extract_skills(skills_text)
    recommended = generate_skill_recommendations(current_skills)
    logger.debug(
        "Recommended %d skills for %d current skills", len(recommended), len(current_skills)
    )
    return SkillRecommendation(
        current_skills=current_skills,
        target_role=target_role,
        recommended_skills=recommended,
        learning_resources=get_learning_resources(
            [r.skill for r in recommended][:MAX_RESOURCE_SKILLS]
        ),
        career_paths=suggest_career_paths(current_skills),
    )


def list_skill_categories() -> list[SkillCategorySummary]:
    return [
        SkillCategorySummary(
            category=c.name,
            skill_count=len(c.skills),
            related_roles=list(c.related_roles),
            sample_skills=list(c.skills[:5]),
        )
        for c in SKILL_CATEGORIES
    ]
