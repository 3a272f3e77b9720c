"""Window filtering, averages and trend direction over mood entries."""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Iterable, Optional, Protocol, Sequence, TypeVar

from shared_types import ChartWindow, TrendDirection

from .chart import bucket
from .scale import MoodBand

# Minimum change between second-half and first-half averages to call a trend
TREND_THRESHOLD = 0.1

WINDOW_SPANS = {
    ChartWindow.WEEK: timedelta(days=7),
    ChartWindow.MONTH: timedelta(days=30),
}


class TimedMood(Protocol):
    timestamp: datetime

    @property
    def mood_value(self) -> float: ...


E = TypeVar("E", bound=TimedMood)


@dataclass(frozen=True)
class WindowStats:
    """Aggregate view of one chart window."""

    window: ChartWindow
    entries: tuple
    average: Optional[float]
    trend: TrendDirection
    average_band: Optional[MoodBand]

    @property
    def count(self) -> int:
        return len(self.entries)


def window_span(window: ChartWindow | str) -> timedelta:
    """Length of a chart window. Raises ValueError for unknown windows."""
    try:
        return WINDOW_SPANS[ChartWindow(window)]
    except (ValueError, KeyError):
        raise ValueError(
            f"Invalid window '{window}'. Must be one of {[w.value for w in ChartWindow]}"
        )


def filter_by_window(
    entries: Iterable[E], window: ChartWindow | str, now: datetime
) -> tuple[E, ...]:
    """Keep entries with now - span <= timestamp <= now, preserving order."""
    cutoff = now - window_span(window)
    return tuple(e for e in entries if cutoff <= e.timestamp <= now)


def average(values: Sequence[float]) -> Optional[float]:
    """Arithmetic mean, or None when there is nothing to average."""
    if not values:
        return None
    return sum(values) / len(values)


def trend(values: Sequence[float], threshold: float = TREND_THRESHOLD) -> TrendDirection:
    """Compare the newer half of a series against the older half.

    Values must be ordered oldest to newest. For odd counts the middle value
    belongs to neither half.
    """
    if len(values) < 2:
        return TrendDirection.NEUTRAL

    half = len(values) // 2
    first_avg = sum(values[:half]) / half
    second_avg = sum(values[-half:]) / half
    difference = second_avg - first_avg

    if difference > threshold:
        return TrendDirection.UP
    if difference < -threshold:
        return TrendDirection.DOWN
    return TrendDirection.NEUTRAL


def window_stats(
    entries: Iterable[E],
    window: ChartWindow | str,
    now: Optional[datetime] = None,
    threshold: float = TREND_THRESHOLD,
) -> WindowStats:
    """Filter a snapshot to a window and compute its average and trend."""
    now = now or datetime.now()
    selected = filter_by_window(entries, window, now)
    values = [e.mood_value for e in selected]
    avg = average(values)
    return WindowStats(
        window=ChartWindow(window),
        entries=selected,
        average=avg,
        trend=trend(values, threshold=threshold),
        average_band=bucket(avg) if avg is not None else None,
    )
