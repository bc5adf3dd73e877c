"""Resume analysis: section coverage, skills, experience, language, score.

Pipeline:
1. Feature extraction (keywords, skills, sections, years, sentiment)
2. Section report against required / recommended section lists
3. Skill report with taxonomy grouping and complementary suggestions
4. Experience band and sentiment feedback
5. Improvement list and overall score
"""

import logging

from models.schemas.features import ExtractedFeatures, SentimentResult
from models.schemas.resume_analysis import (
    ExperienceReport,
    ResumeAnalysis,
    SectionReport,
    SentimentReport,
    SkillReport,
)
from services.scoring import calculate_overall_score
from services.section_parser import experience_level
from services.taxonomy import categorize_skills
from services.text_features import extract_features

logger = logging.getLogger(__name__)

RESUME_KEYWORD_COUNT = 15

REQUIRED_SECTIONS = ["contact", "summary", "experience", "education", "skills"]
RECOMMENDED_SECTIONS = ["projects", "certifications", "achievements"]

MIN_SKILL_COUNT = 5

FRONTEND_FRAMEWORKS = frozenset({"react", "angular", "vue", "vue.js"})
BACKEND_RUNTIMES = frozenset({"nodejs", "node.js", "python", "java"})
DATABASES = frozenset({"mongodb", "postgresql", "mysql"})

# (trigger skills, skills or substrings that satisfy the rule, suggestion,
# match mode). A rule fires when a trigger is present and nothing satisfies it.
# "contains" checks substrings of found skills, "exact" checks membership.
SUGGESTION_RULES: list[tuple[frozenset[str], frozenset[str], str, str]] = [
    (FRONTEND_FRAMEWORKS, frozenset({"typescript"}), "TypeScript", "contains"),
    (FRONTEND_FRAMEWORKS, frozenset({"testing"}), "Jest or Cypress (Testing)", "contains"),
    (BACKEND_RUNTIMES, DATABASES, "Database skills (MongoDB/PostgreSQL)", "exact"),
    (BACKEND_RUNTIMES, frozenset({"docker"}), "Docker (Containerization)", "contains"),
]

SENTIMENT_FEEDBACK: dict[str, str] = {
    "positive": "Great! Your resume uses confident, positive language.",
    "negative": "Consider using more positive and action-oriented language.",
    "neutral": (
        "Your resume language is neutral. "
        "Try adding more action verbs and achievements."
    ),
}


def analyze_sections(sections: dict[str, bool]) -> SectionReport:
    found: list[str] = []
    missing: list[str] = []
    recommendations: list[str] = []

    for section in REQUIRED_SECTIONS:
        if sections.get(section):
            found.append(section)
        else:
            missing.append(section)
            recommendations.append(
                f"Add a {section} section - this is essential for a complete resume"
            )

    for section in RECOMMENDED_SECTIONS:
        if sections.get(section):
            found.append(section)
        else:
            recommendations.append(
                f"Consider adding a {section} section to strengthen your resume"
            )

    return SectionReport(found=found, missing=missing, recommendations=recommendations)


def _is_satisfied(found_lower: list[str], satisfiers: frozenset[str], mode: str) -> bool:
    if mode == "exact":
        return any(s in satisfiers for s in found_lower)
    return any(term in s for s in found_lower for term in satisfiers)


def suggest_skills(found_skills: list[str]) -> list[str]:
    """Complementary skills to add, from fixed co-occurrence rules."""
    found_lower = [s.lower() for s in found_skills]
    suggested: list[str] = []

    for triggers, satisfiers, suggestion, mode in SUGGESTION_RULES:
        if any(s in triggers for s in found_lower) and not _is_satisfied(
            found_lower, satisfiers, mode
        ):
            suggested.append(suggestion)

    if len(found_skills) < MIN_SKILL_COUNT:
        suggested.append("Add more technical skills relevant to your target role")

    if not any("git" in s for s in found_lower):
        suggested.append("Git (Version Control) - Essential for developers")

    return suggested


def analyze_skills(found_skills: list[str]) -> SkillReport:
    return SkillReport(
        found=found_skills,
        suggested=suggest_skills(found_skills),
        by_category=categorize_skills(found_skills),
    )


def analyze_experience(years: int) -> ExperienceReport:
    return ExperienceReport(years=years, level=experience_level(years, "resume"))


def analyze_language(sentiment: SentimentResult) -> SentimentReport:
    return SentimentReport(
        score=sentiment.score,
        assessment=sentiment.assessment,
        feedback=SENTIMENT_FEEDBACK[sentiment.assessment],
    )


def generate_improvements(
    sections: SectionReport,
    skills: SkillReport,
    experience: ExperienceReport,
    sentiment: SentimentReport,
) -> list[str]:
    improvements: list[str] = []

    if sections.missing:
        improvements.append(
            f"Missing critical sections: {', '.join(sections.missing)}. "
            "Add these to make your resume complete."
        )

    if len(skills.found) < MIN_SKILL_COUNT:
        improvements.append(
            "Add more relevant technical skills. "
            "Aim for at least 8-10 skills related to your target role."
        )

    if skills.suggested:
        improvements.append(
            f"Consider learning these in-demand skills: {', '.join(skills.suggested[:3])}"
        )

    if experience.years == 0:
        improvements.append(
            "Clearly mention your years of experience in each role or add a "
            "professional summary highlighting your experience."
        )

    if sentiment.assessment != "positive":
        improvements.append(
            'Use strong action verbs (e.g., "developed", "led", "implemented") '
            "to describe your achievements."
        )

    improvements.append("Quantify your achievements with numbers and metrics where possible.")
    improvements.append(
        "Tailor your resume for each job application by matching keywords "
        "from the job description."
    )
    return improvements


def build_analysis(features: ExtractedFeatures) -> ResumeAnalysis:
    """Assemble a ResumeAnalysis from already extracted features."""
    sections = analyze_sections(features.sections)
    skills = analyze_skills(features.skills)
    experience = analyze_experience(features.experience_years)
    sentiment = analyze_language(features.sentiment)

    overall_score = calculate_overall_score(
        len(sections.found),
        len(skills.found),
        experience.years,
        sentiment.assessment,
    )

    return ResumeAnalysis(
        overall_score=overall_score,
        sections=sections,
        skills=skills,
        experience=experience,
        keywords=features.keywords,
        sentiment=sentiment,
        improvements=generate_improvements(sections, skills, experience, sentiment),
    )


def analyze_resume(resume_text: str) -> ResumeAnalysis:
    """Run the full resume analysis over plain text."""
    features = extract_features(resume_text, RESUME_KEYWORD_COUNT)
    analysis = build_analysis(features)
    logger.debug(
        "Resume analysis: score=%d sections=%d skills=%d years=%d",
        analysis.overall_score,
        len(analysis.sections.found),
        len(analysis.skills.found),
        analysis.experience.years,
    )
    return analysis
