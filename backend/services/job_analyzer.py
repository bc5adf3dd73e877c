"""Job description analysis.

Extracts the role title, required vs. preferred skills, experience
requirements, and the responsibilities / qualifications bullet blocks of a
posting.
"""

import logging
import re

from models.schemas.job_analysis import ExperienceLevel, JobAnalysis
from services.document_parser import strip_bullet
from services.keyword_extractor import extract_keywords
from services.section_parser import experience_level, extract_experience
from services.skill_extractor import extract_skills

logger = logging.getLogger(__name__)

JOB_KEYWORD_COUNT = 20
DEFAULT_ROLE = "Not specified"

# ---------------------------------------------------------------------------
# Role title
# ---------------------------------------------------------------------------

_ROLE_SCAN_LINES = 5
_MAX_TITLE_LENGTH = 50

ROLE_PATTERNS: list[re.Pattern] = [
    re.compile(r"\b(?:position|role|title|job)\s*:\s*(.+)", re.IGNORECASE),
    # A label opening the line may omit the colon ("Role Senior Engineer"),
    # but not when it is part of a heading such as "Job Description"
    re.compile(
        r"^(?:position|role|title|job)\b\s*:?\s*"
        r"(?!(?:description|summary|overview|details|type|responsibilities)\b)(\S.*)",
        re.IGNORECASE,
    ),
    re.compile(r"hiring\s+(?:an?\s+)?(.+?)(?:\s+to\b|\s+for\b|$)", re.IGNORECASE),
]

# ---------------------------------------------------------------------------
# Required / preferred classification
# ---------------------------------------------------------------------------

CONTEXT_WINDOW = 100

# Evaluated in order; the first rule with a phrase inside the window wins
CONTEXT_RULES: list[tuple[tuple[str, ...], str]] = [
    (("required", "must have", "essential"), "required"),
    (("preferred", "nice to have", "bonus"), "preferred"),
]
DEFAULT_BUCKET = "required"

# ---------------------------------------------------------------------------
# Experience
# ---------------------------------------------------------------------------

# A years figure followed on the same line by "preferred"/"ideal" without
# another years figure in between
_PREFERRED_YEARS_RE = re.compile(
    r"(\d+)\+?\s*(?:years?|yrs?)"
    r"(?:(?!\d+\+?\s*(?:years?|yrs?))[^\n])*?"
    r"\b(?:preferred|ideal)",
    re.IGNORECASE,
)

# ---------------------------------------------------------------------------
# Bullet blocks
# ---------------------------------------------------------------------------

MAX_BLOCK_ITEMS = 8
_MIN_ITEM_LENGTH = 20
_MAX_ITEM_LENGTH = 200

RESPONSIBILITIES_START = re.compile(r"responsibilities|duties|what you'll do", re.IGNORECASE)
RESPONSIBILITIES_END = re.compile(r"qualifications|requirements|skills", re.IGNORECASE)
QUALIFICATIONS_START = re.compile(
    r"qualifications|requirements|what we're looking for", re.IGNORECASE
)
QUALIFICATIONS_END = re.compile(r"responsibilities|about us|company", re.IGNORECASE)


def extract_role(job_text: str) -> str:
    """Find the job title among the first few non-blank lines."""
    lines = [line.strip() for line in job_text.splitlines() if line.strip()]

    for line in lines[:_ROLE_SCAN_LINES]:
        for pattern in ROLE_PATTERNS:
            match = pattern.search(line)
            if match and match.group(1).strip():
                return match.group(1).strip()
        # A short capitalised line is most likely the title itself
        if len(line) < _MAX_TITLE_LENGTH and line[0].isupper():
            return line

    return DEFAULT_ROLE


def classify_context(context: str) -> str:
    for phrases, bucket in CONTEXT_RULES:
        if any(phrase in context for phrase in phrases):
            return bucket
    return DEFAULT_BUCKET


def classify_skills(job_text: str, skills: list[str]) -> tuple[list[str], list[str]]:
    """Split ``skills`` into (required, preferred) using nearby wording.

    The window is taken around each skill's first occurrence. Skills with no
    signal either way default to required.
    """
    lower_text = job_text.lower()
    buckets: dict[str, dict[str, None]] = {"required": {}, "preferred": {}}

    for skill in skills:
        index = lower_text.find(skill.lower())
        if index == -1:
            continue
        start = max(0, index - CONTEXT_WINDOW)
        end = min(len(lower_text), index + CONTEXT_WINDOW)
        bucket = classify_context(lower_text[start:end])
        buckets[bucket].setdefault(skill, None)

    return list(buckets["required"]), list(buckets["preferred"])


def extract_experience_level(job_text: str) -> ExperienceLevel:
    """Minimum and preferred years, plus the seniority band of the minimum."""
    minimum = extract_experience(job_text)
    preferred_match = _PREFERRED_YEARS_RE.search(job_text)
    preferred = int(preferred_match.group(1)) if preferred_match else minimum
    return ExperienceLevel(
        minimum=minimum,
        preferred=preferred,
        level=experience_level(minimum, "job"),
    )


def _extract_block(job_text: str, start: re.Pattern, end: re.Pattern) -> list[str]:
    items: list[str] = []
    in_block = False

    for line in job_text.splitlines():
        trimmed = line.strip()
        if start.search(trimmed):
            in_block = True
            continue
        if in_block and end.search(trimmed):
            break
        if in_block:
            cleaned = strip_bullet(trimmed)
            if _MIN_ITEM_LENGTH < len(cleaned) < _MAX_ITEM_LENGTH:
                items.append(cleaned)

    return items[:MAX_BLOCK_ITEMS]


def extract_responsibilities(job_text: str) -> list[str]:
    return _extract_block(job_text, RESPONSIBILITIES_START, RESPONSIBILITIES_END)


def extract_qualifications(job_text: str) -> list[str]:
    return _extract_block(job_text, QUALIFICATIONS_START, QUALIFICATIONS_END)


def analyze_job(job_text: str) -> JobAnalysis:
    """Build the structured analysis of a job description."""
    required, preferred = classify_skills(job_text, extract_skills(job_text))
    analysis = JobAnalysis(
        role=extract_role(job_text),
        required_skills=required,
        preferred_skills=preferred,
        experience_level=extract_experience_level(job_text),
        keywords=extract_keywords(job_text, JOB_KEYWORD_COUNT),
        responsibilities=extract_responsibilities(job_text),
        qualifications=extract_qualifications(job_text),
    )
    logger.debug(
        "Job analysis: role=%r required=%d preferred=%d",
        analysis.role, len(required), len(preferred),
    )
    return analysis
