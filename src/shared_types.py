"""Shared enums and types for moodjournal."""

from enum import StrEnum


class MoodCategory(StrEnum):
    VERY_NEGATIVE = "very_negative"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"
    POSITIVE = "positive"
    VERY_POSITIVE = "very_positive"


class TrendDirection(StrEnum):
    UP = "up"
    DOWN = "down"
    NEUTRAL = "neutral"

    @property
    def text(self) -> str:
        return _TREND_TEXT[self]


_TREND_TEXT = {
    TrendDirection.UP: "In improvement",
    TrendDirection.DOWN: "Declining",
    TrendDirection.NEUTRAL: "Stable",
}


class ChartWindow(StrEnum):
    WEEK = "week"
    MONTH = "month"


class UnavailableReason(StrEnum):
    DEVICE_NOT_ELIGIBLE = "device_not_eligible"
    FEATURE_DISABLED = "feature_disabled"
    MODEL_NOT_READY = "model_not_ready"
    OTHER = "other"
