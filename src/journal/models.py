"""Journal entry model."""

from dataclasses import dataclass
from datetime import datetime

from mood.scale import MoodBand, band_for_raw, to_display


@dataclass(frozen=True)
class JournalEntry:
    """A saved journal entry.

    Only the raw score is stored; the display value and category are derived
    from it on every access so they cannot drift apart.
    """

    id: str
    text: str
    raw_score: float
    summary: str
    timestamp: datetime

    @property
    def mood_value(self) -> float:
        return to_display(self.raw_score)

    @property
    def category(self) -> MoodBand:
        return band_for_raw(self.raw_score)
