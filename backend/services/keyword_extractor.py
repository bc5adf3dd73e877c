"""Keyword ranking for a single document.

TF-IDF is computed with the input text as the only document of the corpus,
so the inverse document frequency is constant and the ranking reduces to a
frequency ranking within that text. The vectorizer is built inside each call
and discarded afterwards; nothing is accumulated across documents.
"""

import logging

import numpy as np
from sklearn.feature_extraction.text import TfidfVectorizer

logger = logging.getLogger(__name__)

# Tokens of this length or shorter are never keywords
MIN_KEYWORD_LENGTH = 3


def _first_occurrence_terms(vectorizer: TfidfVectorizer, text: str) -> list[str]:
    """Vocabulary terms in order of their first appearance in the text."""
    analyze = vectorizer.build_analyzer()
    vocabulary = vectorizer.vocabulary_
    seen: dict[str, None] = {}
    for token in analyze(text):
        if len(token) > MIN_KEYWORD_LENGTH and token in vocabulary:
            seen.setdefault(token, None)
    return list(seen)


def extract_keywords(text: str, top_n: int = 10) -> list[str]:
    """Return the ``top_n`` most important terms, highest score first.

    Ties keep the order in which the terms first appear in the text, so the
    result is fully deterministic for a given input.
    """
    if not text.strip() or top_n <= 0:
        return []

    vectorizer = TfidfVectorizer(stop_words="english", lowercase=True)
    try:
        tfidf_matrix = vectorizer.fit_transform([text])
    except ValueError:
        # Only stop words or no tokens at all
        return []

    terms = _first_occurrence_terms(vectorizer, text)
    if not terms:
        return []

    row = tfidf_matrix[0].toarray().flatten()
    scores = np.array([row[vectorizer.vocabulary_[t]] for t in terms])
    order = np.argsort(-scores, kind="stable")[:top_n]
    keywords = [terms[i] for i in order]
    logger.debug("Ranked %d candidate terms, kept %d", len(terms), len(keywords))
    return keywords
