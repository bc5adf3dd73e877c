"""Per-document text features produced by the feature extractor."""

from pydantic import BaseModel


class SentimentResult(BaseModel):
    """Lexicon-based polarity of a text."""
    score: float = 0.0  # mean polarity weight per token, unbounded
    assessment: str = "neutral"  # positive, neutral, negative


class ExtractedFeatures(BaseModel):
    """Signals extracted from a single text blob.

    Built fresh for each analysis and discarded with the response.
    """
    keywords: list[str] = []
    skills: list[str] = []
    sections: dict[str, bool] = {}
    experience_years: int = 0
    sentiment: SentimentResult = SentimentResult()
