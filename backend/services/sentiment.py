"""Rule-based sentiment scoring over the AFINN word-polarity lexicon.

The score is the sum of the AFINN weights (-5..5) of all tokens divided by
the number of tokens, so it has no fixed bound but is usually within [-5, 5].
"""

import logging
from functools import lru_cache

from afinn import Afinn
from nltk.stem import PorterStemmer
from nltk.tokenize import RegexpTokenizer

from models.schemas.features import SentimentResult

logger = logging.getLogger(__name__)

POSITIVE_THRESHOLD = 0.3
NEGATIVE_THRESHOLD = -0.3

_afinn = Afinn(language="en")
_tokenizer = RegexpTokenizer(r"\w+")
_stemmer = PorterStemmer()


@lru_cache(maxsize=4096)
def _token_weight(token: str) -> float:
    # The stem only fills gaps: an exact lexicon entry always wins
    weight = _afinn.score(token)
    if weight:
        return weight
    stem = _stemmer.stem(token)
    return _afinn.score(stem) if stem != token else 0.0


def classify_score(score: float) -> str:
    if score > POSITIVE_THRESHOLD:
        return "positive"
    if score < NEGATIVE_THRESHOLD:
        return "negative"
    return "neutral"


def analyze_sentiment(text: str) -> SentimentResult:
    """Score the polarity of ``text`` and bucket it."""
    tokens = _tokenizer.tokenize(text.lower())
    if not tokens:
        return SentimentResult(score=0.0, assessment="neutral")

    score = sum(_token_weight(t) for t in tokens) / len(tokens)
    logger.debug("Sentiment %.3f over %d tokens", score, len(tokens))
    return SentimentResult(score=score, assessment=classify_score(score))
