from .aggregation import WindowStats, average, filter_by_window, trend, window_stats
from .scale import MOOD_BANDS, MoodBand, MoodReading, normalize
from .sentiment import LexiconScorer, SentimentScorer, VaderScorer, create_scorer

__all__ = [
    "MOOD_BANDS",
    "MoodBand",
    "MoodReading",
    "normalize",
    "SentimentScorer",
    "LexiconScorer",
    "VaderScorer",
    "create_scorer",
    "WindowStats",
    "filter_by_window",
    "average",
    "trend",
    "window_stats",
]
