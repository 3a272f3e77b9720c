"""Sentiment scorers for journal text.

A scorer returns a continuous score in [-1, 1], or None when the text gives
it nothing to work with (empty, whitespace, no words).
"""

import re
from typing import Optional, Protocol

import structlog

logger = structlog.get_logger()

_WORD_RE = re.compile(r"\b\w+\b", re.UNICODE)

# Lexicon-based sentiment (no external deps needed)
_POSITIVE = {
    # English
    "great", "good", "excellent", "happy", "excited", "proud", "accomplished",
    "progress", "success", "win", "awesome", "fantastic", "love", "enjoy",
    "enjoyed", "productive", "motivated", "inspired", "grateful", "thankful",
    "confident", "calm", "relaxed", "peaceful", "solved", "achieved",
    "improved", "optimistic", "energized", "satisfied", "fun", "rewarding",
    "thriving", "beautiful", "wonderful", "glad", "joy", "smile", "laughed",
    # Italian
    "felice", "contento", "contenta", "bello", "bella", "bene", "ottimo",
    "ottima", "fantastico", "grato", "grata", "sereno", "serena", "rilassato",
    "rilassata", "soddisfatto", "soddisfatta", "amore", "gioia", "divertente",
}

_NEGATIVE = {
    # English
    "bad", "terrible", "awful", "sad", "frustrated", "stuck", "stressed",
    "anxious", "overwhelmed", "exhausted", "burnout", "failed", "struggling",
    "confused", "worried", "disappointed", "tired", "difficult", "hard",
    "lost", "lonely", "drained", "angry", "annoyed", "boring", "painful",
    "hopeless", "doubt", "cried", "hate", "sick", "upset", "miserable",
    # Italian
    "triste", "stanco", "stanca", "arrabbiato", "arrabbiata", "male",
    "brutto", "brutta", "terribile", "stressato", "stressata", "ansioso",
    "ansiosa", "preoccupato", "preoccupata", "deluso", "delusa", "solo",
    "sola", "difficile", "odio", "noioso", "noiosa",
}


class SentimentScorer(Protocol):
    """Anything that can turn text into a sentiment score."""

    def score(self, text: str) -> Optional[float]: ...


class LexiconScorer:
    """Keyword-matching scorer using the built-in English/Italian lexicon."""

    def score(self, text: str) -> Optional[float]:
        words = set(_WORD_RE.findall(text.lower()))
        if not words:
            return None

        pos = len(words & _POSITIVE)
        neg = len(words & _NEGATIVE)
        total = pos + neg
        if total == 0:
            return 0.0
        return round((pos - neg) / total, 2)


class VaderScorer:
    """VADER compound score (English-tuned)."""

    def __init__(self, analyzer=None):
        if analyzer is not None:
            self.analyzer = analyzer
            return

        try:
            from vaderSentiment.vaderSentiment import SentimentIntensityAnalyzer
        except ImportError:
            raise ValueError("vaderSentiment package not installed. Run: pip install vaderSentiment")

        self.analyzer = SentimentIntensityAnalyzer()

    def score(self, text: str) -> Optional[float]:
        if not text.strip():
            return None
        return float(self.analyzer.polarity_scores(text)["compound"])


_SCORERS = {
    "lexicon": LexiconScorer,
    "vader": VaderScorer,
}


def create_scorer(name: str = "lexicon") -> SentimentScorer:
    """Create a scorer by name ("lexicon" or "vader")."""
    try:
        factory = _SCORERS[name]
    except KeyError:
        raise ValueError(f"Unknown sentiment analyzer: {name}. Use: {', '.join(_SCORERS)}")
    logger.debug("sentiment_scorer_created", analyzer=name)
    return factory()
