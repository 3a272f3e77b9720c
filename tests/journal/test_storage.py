"""Tests for the markdown entry store."""

from datetime import datetime

import frontmatter
import pytest

from journal.models import JournalEntry
from journal.storage import MAX_CONTENT_LENGTH, MoodJournalStorage


def _entry(entry_id="2025-11-20_120000_a-day", raw=0.4, ts=None, text="A day. More text."):
    return JournalEntry(
        id=entry_id,
        text=text,
        raw_score=raw,
        summary="A day.",
        timestamp=ts or datetime(2025, 11, 20, 12, 0, 0),
    )


class TestMoodJournalStorage:
    def test_insert_and_get(self, journal_dir):
        storage = MoodJournalStorage(journal_dir)
        entry = _entry()

        storage.insert(entry)

        assert (journal_dir / f"{entry.id}.md").exists()
        assert storage.get(entry.id) == entry

    def test_frontmatter_fields(self, journal_dir):
        storage = MoodJournalStorage(journal_dir)
        entry = _entry(raw=0.4)
        storage.insert(entry)

        post = frontmatter.load(journal_dir / f"{entry.id}.md")

        assert post.content == entry.text
        assert post["raw_score"] == 0.4
        assert post["mood_value"] == 7.0
        assert post["mood"] == "🙂"
        assert post["category"] == "positive"
        assert post["summary"] == "A day."

    def test_category_recomputed_after_reload(self, journal_dir):
        storage = MoodJournalStorage(journal_dir)
        entry = _entry(raw=-0.65)
        storage.insert(entry)

        reloaded = storage.get(entry.id)

        assert reloaded.category == entry.category
        assert reloaded.mood_value == entry.mood_value

    def test_query_all_sorted_oldest_first(self, journal_dir):
        storage = MoodJournalStorage(journal_dir)
        newer = _entry("b-newer", ts=datetime(2025, 11, 20))
        older = _entry("z-older", ts=datetime(2025, 11, 1))
        storage.insert(newer)
        storage.insert(older)

        assert [e.id for e in storage.query_all()] == ["z-older", "b-newer"]

    def test_query_all_skips_unreadable(self, journal_dir):
        storage = MoodJournalStorage(journal_dir)
        storage.insert(_entry())
        (journal_dir / "broken.md").write_text("---\nraw_score: [unclosed\n---\nbody")
        (journal_dir / "no-score.md").write_text("---\ncreated: 2025-01-01\n---\nbody")

        entries = storage.query_all()

        assert len(entries) == 1

    def test_delete(self, journal_dir):
        storage = MoodJournalStorage(journal_dir)
        entry = _entry()
        storage.insert(entry)

        assert storage.delete(entry.id) is True
        assert storage.get(entry.id) is None
        assert storage.delete(entry.id) is False

    def test_duplicate_insert_rejected(self, journal_dir):
        storage = MoodJournalStorage(journal_dir)
        storage.insert(_entry())
        with pytest.raises(ValueError, match="already exists"):
            storage.insert(_entry())

    def test_content_too_long(self, journal_dir):
        storage = MoodJournalStorage(journal_dir)
        with pytest.raises(ValueError, match="max length"):
            storage.insert(_entry(text="x" * (MAX_CONTENT_LENGTH + 1)))

    def test_path_traversal_rejected(self, journal_dir):
        storage = MoodJournalStorage(journal_dir)
        with pytest.raises(ValueError, match="escapes"):
            storage.get("../../etc/passwd")


class TestNewId:
    def test_format(self, journal_dir):
        storage = MoodJournalStorage(journal_dir)
        entry_id = storage.new_id(datetime(2025, 11, 20, 9, 30, 5), "Great day, at the beach!")
        assert entry_id == "2025-11-20_093005_great-day-at-the-beach"

    def test_unique_on_collision(self, journal_dir):
        storage = MoodJournalStorage(journal_dir)
        ts = datetime(2025, 11, 20, 9, 30)
        first = storage.new_id(ts, "Same")
        storage.insert(_entry(first))

        second = storage.new_id(ts, "Same")

        assert second == f"{first}_1"

    def test_unsluggable_summary(self, journal_dir):
        storage = MoodJournalStorage(journal_dir)
        assert storage.new_id(datetime(2025, 1, 2), "😀!!").endswith("_entry")
