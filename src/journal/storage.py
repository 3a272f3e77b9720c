"""Markdown journal entry store."""

import re
from datetime import datetime
from pathlib import Path
from typing import Optional, Protocol

import frontmatter
import structlog
import yaml

from .models import JournalEntry

logger = structlog.get_logger()

MAX_CONTENT_LENGTH = 100_000  # 100KB
MAX_SLUG_LENGTH = 40


def _sanitize_slug(text: str) -> str:
    """Sanitize text into safe filename slug. Only [a-z0-9-] allowed."""
    slug = text.lower().replace(" ", "-")
    slug = re.sub(r"[^a-z0-9-]", "", slug)
    return slug.strip("-")[:MAX_SLUG_LENGTH] or "entry"


def _parse_timestamp(value) -> datetime:
    if isinstance(value, datetime):
        return value.replace(tzinfo=None)
    return datetime.fromisoformat(str(value).replace("Z", "+00:00")).replace(tzinfo=None)


class EntryStore(Protocol):
    """Persistence operations the journal needs."""

    def new_id(self, timestamp: datetime, summary: str) -> str: ...

    def insert(self, entry: JournalEntry) -> None: ...

    def delete(self, entry_id: str) -> bool: ...

    def get(self, entry_id: str) -> Optional[JournalEntry]: ...

    def query_all(self) -> tuple[JournalEntry, ...]: ...


class MoodJournalStorage:
    """Stores each entry as a markdown file with YAML frontmatter."""

    def __init__(self, journal_dir: str | Path):
        self.journal_dir = Path(journal_dir).expanduser().resolve()
        self.journal_dir.mkdir(parents=True, exist_ok=True)

    def _validate_path(self, filepath: Path) -> Path:
        """Ensure resolved path is inside journal_dir."""
        resolved = filepath.resolve()
        if not resolved.is_relative_to(self.journal_dir):
            raise ValueError(f"Path escapes journal directory: {filepath}")
        return resolved

    def _path_for(self, entry_id: str) -> Path:
        return self._validate_path(self.journal_dir / f"{entry_id}.md")

    def new_id(self, timestamp: datetime, summary: str) -> str:
        """Unique id from timestamp and summary, e.g. 2025-11-13_093000_good-day."""
        base = f"{timestamp:%Y-%m-%d_%H%M%S}_{_sanitize_slug(summary)}"
        entry_id = base
        counter = 1
        while self._path_for(entry_id).exists():
            entry_id = f"{base}_{counter}"
            counter += 1
        return entry_id

    def insert(self, entry: JournalEntry) -> None:
        """Write a new entry.

        Raises:
            ValueError: If content too long, id already taken, or path escapes journal dir
        """
        if len(entry.text) > MAX_CONTENT_LENGTH:
            raise ValueError(f"Content exceeds max length ({MAX_CONTENT_LENGTH} chars)")

        filepath = self._path_for(entry.id)
        if filepath.exists():
            raise ValueError(f"Entry already exists: {entry.id}")

        post = frontmatter.Post(entry.text)
        post["created"] = entry.timestamp.isoformat()
        post["raw_score"] = entry.raw_score
        post["mood_value"] = round(entry.mood_value, 2)
        post["mood"] = entry.category.emoji
        post["category"] = entry.category.key.value
        post["summary"] = entry.summary

        with open(filepath, "w", encoding="utf-8") as f:
            f.write(frontmatter.dumps(post))

        logger.debug("entry_inserted", entry_id=entry.id)

    def delete(self, entry_id: str) -> bool:
        filepath = self._path_for(entry_id)
        if filepath.exists():
            filepath.unlink()
            logger.debug("entry_deleted", entry_id=entry_id)
            return True
        return False

    def get(self, entry_id: str) -> Optional[JournalEntry]:
        filepath = self._path_for(entry_id)
        if not filepath.exists():
            return None
        return self._load(filepath)

    def query_all(self) -> tuple[JournalEntry, ...]:
        """All readable entries, oldest first."""
        entries = []
        for f in self.journal_dir.glob("*.md"):
            try:
                entries.append(self._load(f))
            except (OSError, ValueError, KeyError, TypeError, yaml.YAMLError) as e:
                logger.warning("entry_unreadable", path=str(f), error=str(e))
                continue
        entries.sort(key=lambda e: e.timestamp)
        return tuple(entries)

    @staticmethod
    def _load(filepath: Path) -> JournalEntry:
        post = frontmatter.load(filepath)
        return JournalEntry(
            id=filepath.stem,
            text=post.content,
            raw_score=float(post["raw_score"]),
            summary=str(post.get("summary", "")),
            timestamp=_parse_timestamp(post["created"]),
        )
