"""Save flow: text -> mood reading + summary -> persisted entry."""

from datetime import datetime
from typing import Optional

import structlog

from mood.aggregation import TREND_THRESHOLD, WindowStats, window_stats
from mood.scale import MoodReading, normalize
from mood.sentiment import SentimentScorer
from shared_types import ChartWindow
from summarize.summarizer import Summarizer

from .models import JournalEntry
from .storage import EntryStore

logger = structlog.get_logger()


class JournalService:
    """Ties scoring, summarization and storage together."""

    def __init__(
        self,
        store: EntryStore,
        scorer: SentimentScorer,
        summarizer: Summarizer,
        trend_threshold: float = TREND_THRESHOLD,
    ):
        self.store = store
        self.scorer = scorer
        self.summarizer = summarizer
        self.trend_threshold = trend_threshold

    def preview(self, text: str) -> MoodReading:
        """Mood reading for text that has not been saved yet."""
        return normalize(self.scorer.score(text))

    async def save(self, text: str, now: Optional[datetime] = None) -> JournalEntry:
        """Score, summarize and persist a new entry.

        Nothing is written until the summary has resolved, so cancelling the
        awaiting task leaves the store untouched.

        Raises:
            ValueError: If text is blank
        """
        content = text.strip()
        if not content:
            raise ValueError("Cannot save an empty journal entry")

        reading = self.preview(content)
        summary = await self.summarizer.summarize(content)

        timestamp = now or datetime.now()
        entry = JournalEntry(
            id=self.store.new_id(timestamp, summary),
            text=content,
            raw_score=reading.raw_score,
            summary=summary,
            timestamp=timestamp,
        )
        self.store.insert(entry)
        logger.info(
            "entry_saved",
            entry_id=entry.id,
            mood_value=round(entry.mood_value, 2),
            category=entry.category.key.value,
        )
        return entry

    def delete(self, entry_id: str) -> bool:
        return self.store.delete(entry_id)

    def get(self, entry_id: str) -> Optional[JournalEntry]:
        return self.store.get(entry_id)

    def snapshot(self) -> tuple[JournalEntry, ...]:
        """Immutable, oldest-first view of all entries."""
        return self.store.query_all()

    def stats(self, window: ChartWindow | str, now: Optional[datetime] = None) -> WindowStats:
        return window_stats(self.snapshot(), window, now=now, threshold=self.trend_threshold)
