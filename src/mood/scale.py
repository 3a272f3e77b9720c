"""Mood scale: raw sentiment -> display value and mood category.

Raw sentiment scores live in [-1, 1]. The application displays mood on a
fixed 0-10 scale:

    display = (raw + 1) * 5

Categories are looked up over the raw score. Every band is low-inclusive and
high-exclusive except the top one, which is closed, so the five bands
partition the domain with no gap and no overlap. The same table carries the
matching display boundaries used by the chart (see ``mood.chart``).
"""

from dataclasses import dataclass
from typing import Optional

from shared_types import MoodCategory

RAW_MIN = -1.0
RAW_MAX = 1.0
DISPLAY_MIN = 0.0
DISPLAY_MAX = 10.0

# Score used when the analyzer has nothing to say about the text
NEUTRAL_RAW_SCORE = 0.0

_DISPLAY_SCALE = (DISPLAY_MAX - DISPLAY_MIN) / (RAW_MAX - RAW_MIN)


@dataclass(frozen=True)
class MoodBand:
    """One of the five mood buckets."""

    key: MoodCategory
    emoji: str
    label: str
    description: str
    raw_low: float
    raw_high: float
    display_low: float
    display_high: float


MOOD_BANDS: tuple[MoodBand, ...] = (
    MoodBand(
        key=MoodCategory.VERY_NEGATIVE,
        emoji="😢",
        label="Very Sad",
        description="A heavy day. Be gentle with yourself.",
        raw_low=-1.0,
        raw_high=-0.6,
        display_low=0.0,
        display_high=2.0,
    ),
    MoodBand(
        key=MoodCategory.NEGATIVE,
        emoji="😕",
        label="A Bit Down",
        description="Some things weighed on you today.",
        raw_low=-0.6,
        raw_high=-0.2,
        display_low=2.0,
        display_high=4.0,
    ),
    MoodBand(
        key=MoodCategory.NEUTRAL,
        emoji="😐",
        label="Neutral",
        description="A balanced, even-keeled day.",
        raw_low=-0.2,
        raw_high=0.2,
        display_low=4.0,
        display_high=6.0,
    ),
    MoodBand(
        key=MoodCategory.POSITIVE,
        emoji="🙂",
        label="Content",
        description="Things went well and it shows.",
        raw_low=0.2,
        raw_high=0.6,
        display_low=6.0,
        display_high=8.0,
    ),
    MoodBand(
        key=MoodCategory.VERY_POSITIVE,
        emoji="😄",
        label="Very Happy",
        description="A great day worth remembering.",
        raw_low=0.6,
        raw_high=1.0,
        display_low=8.0,
        display_high=10.0,
    ),
)

_BANDS_BY_KEY = {band.key: band for band in MOOD_BANDS}


@dataclass(frozen=True)
class MoodReading:
    """Normalized view of a single sentiment score."""

    raw_score: float
    display_value: float
    category: MoodBand


def clamp_raw(raw: float) -> float:
    """Clamp a raw score into [-1, 1]."""
    return max(RAW_MIN, min(RAW_MAX, float(raw)))


def to_display(raw: float) -> float:
    """Map a raw score onto the 0-10 display scale."""
    return DISPLAY_MIN + (clamp_raw(raw) - RAW_MIN) * _DISPLAY_SCALE


def band_for_raw(raw: float) -> MoodBand:
    """Find the mood band for a raw score (clamped before lookup)."""
    value = clamp_raw(raw)
    for band in MOOD_BANDS:
        if band.raw_low <= value < band.raw_high:
            return band
    return MOOD_BANDS[-1]


def band_by_key(key: str | MoodCategory) -> MoodBand:
    """Look up a band by category key."""
    return _BANDS_BY_KEY[MoodCategory(key)]


def normalize(raw: Optional[float]) -> MoodReading:
    """Normalize an analyzer result into display value + category.

    Args:
        raw: Raw sentiment in [-1, 1], or None when the analyzer returned
            no result. None is read as a neutral score.

    Returns:
        MoodReading with the clamped raw score, display value and band.
    """
    value = NEUTRAL_RAW_SCORE if raw is None else clamp_raw(raw)
    return MoodReading(
        raw_score=value,
        display_value=to_display(value),
        category=band_for_raw(value),
    )
