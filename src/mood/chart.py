"""Chart bucketing for mood values on the display scale."""

from dataclasses import dataclass

from .scale import DISPLAY_MAX, DISPLAY_MIN, MOOD_BANDS, MoodBand

AXIS_TICKS: tuple[float, ...] = (0.0, 2.5, 5.0, 7.5, 10.0)


@dataclass(frozen=True)
class LegendItem:
    emoji: str
    range_label: str
    label: str


def bucket(display_value: float) -> MoodBand:
    """Return the band a display value falls into.

    Same boundaries as the mood categories: low-inclusive, high-exclusive,
    top band closed. Values outside 0-10 are clamped.
    """
    value = max(DISPLAY_MIN, min(DISPLAY_MAX, float(display_value)))
    for band in MOOD_BANDS:
        if band.display_low <= value < band.display_high:
            return band
    return MOOD_BANDS[-1]


def range_label(band: MoodBand) -> str:
    """Human-readable range, e.g. '2.0 - 4.0'."""
    return f"{band.display_low:.1f} - {band.display_high:.1f}"


def axis_labels() -> list[tuple[float, str]]:
    """Emoji label for each y-axis tick."""
    return [(tick, bucket(tick).emoji) for tick in AXIS_TICKS]


def legend() -> list[LegendItem]:
    """Static legend, one item per band."""
    return [
        LegendItem(emoji=band.emoji, range_label=range_label(band), label=band.label)
        for band in MOOD_BANDS
    ]
