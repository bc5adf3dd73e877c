"""Skill detection against a fixed lexicon plus acronym spotting.

Lexicon terms are matched as case-insensitive substrings of the whole text,
so "java" is reported for "JavaScript" as well. All-capital tokens such as
"AWS" or "SDK" are reported as acronym skills even when they are not in the
lexicon, unless they are a section-heading word or an English stop word.
"""

import logging
import re

from nltk.tokenize import RegexpTokenizer
from sklearn.feature_extraction.text import ENGLISH_STOP_WORDS

from services.section_parser import SECTION_PATTERNS
from services.taxonomy import get_all_skills

logger = logging.getLogger(__name__)

TECH_SKILLS: tuple[str, ...] = (
    "javascript", "python", "java", "react", "angular", "vue",
    "nodejs", "nestjs", "express", "mongodb", "sql", "postgresql",
    "docker", "kubernetes", "aws", "azure", "gcp", "git",
    "typescript", "html", "css", "rest", "graphql", "api",
)

SOFT_SKILLS: tuple[str, ...] = (
    "leadership", "communication", "teamwork", "problem solving",
    "analytical", "creative", "management", "collaboration",
)

# Taxonomy skills shorter than this ("R") would match almost any text
_MIN_TAXONOMY_TERM = 3


def _build_lexicon() -> tuple[str, ...]:
    terms = list(TECH_SKILLS) + list(SOFT_SKILLS)
    terms += [s.lower() for s in get_all_skills() if len(s) >= _MIN_TAXONOMY_TERM]
    return tuple(dict.fromkeys(terms))


SKILL_LEXICON: tuple[str, ...] = _build_lexicon()

_word_tokenizer = RegexpTokenizer(r"[A-Za-z][A-Za-z0-9]*")
_ACRONYM_RE = re.compile(r"^[A-Z]{2,}$")

_EXTRA_HEADING_WORDS = (
    "professional", "work", "contact", "personal", "information", "career",
    "qualifications", "responsibilities", "requirements", "references",
    "interests", "languages", "tools", "about", "history",
)


def _build_heading_words() -> frozenset[str]:
    words: set[str] = set()
    for synonyms in SECTION_PATTERNS.values():
        for synonym in synonyms:
            words.update(synonym.split())
    words.update(_EXTRA_HEADING_WORDS)
    # Headings are usually plural ("CERTIFICATIONS", "AWARDS")
    words.update({w + "s" for w in words})
    return frozenset(w.upper() for w in words)


HEADING_WORDS: frozenset[str] = _build_heading_words()


def extract_lexicon_skills(text: str) -> list[str]:
    """Lexicon terms that occur anywhere in the text, in lexicon order."""
    text_lower = text.lower()
    return [term for term in SKILL_LEXICON if term in text_lower]


def extract_acronyms(text: str) -> list[str]:
    """All-capital tokens of two or more letters, in order of first appearance.

    Section-heading words ("EDUCATION", "TECHNICAL SKILLS") and stop words
    ("AND", "THE") are skipped; other tokens on the same line are kept.
    """
    acronyms: dict[str, None] = {}
    for token in _word_tokenizer.tokenize(text):
        if not _ACRONYM_RE.match(token):
            continue
        if token in HEADING_WORDS or token.lower() in ENGLISH_STOP_WORDS:
            continue
        acronyms.setdefault(token, None)
    return list(acronyms)


def extract_skills(text: str) -> list[str]:
    """Return the unique skills mentioned in ``text``.

    Lexicon hits come first (lowercase, lexicon order), followed by acronyms
    whose lowercase form was not already reported.
    """
    skills = extract_lexicon_skills(text)
    seen = set(skills)
    for acronym in extract_acronyms(text):
        if acronym.lower() not in seen:
            seen.add(acronym.lower())
            skills.append(acronym)
    logger.debug("Detected %d skills", len(skills))
    return skills
