"""One-call feature extraction over a single text blob."""

from models.schemas.features import ExtractedFeatures
from services.keyword_extractor import extract_keywords
from services.section_parser import extract_experience, extract_sections
from services.sentiment import analyze_sentiment
from services.skill_extractor import extract_skills


def extract_features(text: str, top_n: int = 10) -> ExtractedFeatures:
    """Run every extractor over ``text`` and bundle the results."""
    return ExtractedFeatures(
        keywords=extract_keywords(text, top_n),
        skills=extract_skills(text),
        sections=extract_sections(text),
        experience_years=extract_experience(text),
        sentiment=analyze_sentiment(text),
    )
