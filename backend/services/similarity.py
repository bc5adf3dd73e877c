"""String similarity helpers shared by the skill-matching code."""

from rapidfuzz.distance import JaroWinkler


def calculate_similarity(text_a: str, text_b: str) -> float:
    """Case-insensitive Jaro-Winkler similarity in [0, 1]."""
    return float(JaroWinkler.similarity(text_a.lower(), text_b.lower()))


def is_containment_match(a: str, b: str) -> bool:
    """True if either string is a case-insensitive substring of the other.

    Deliberately permissive so that "react" matches "React Native" and
    "rest" matches "REST API".
    """
    a_lower = a.lower()
    b_lower = b.lower()
    return a_lower in b_lower or b_lower in a_lower


def matches_any(skill: str, candidates: list[str]) -> bool:
    return any(is_containment_match(skill, c) for c in candidates)
