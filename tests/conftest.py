"""Shared test fixtures for moodjournal."""

import sys
from datetime import datetime, timedelta
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from journal.models import JournalEntry  # noqa: E402
from observability import metrics  # noqa: E402
from shared_types import UnavailableReason  # noqa: E402
from summarize.availability import Available, Unavailable  # noqa: E402


@pytest.fixture(autouse=True)
def reset_metrics():
    metrics.reset()
    yield
    metrics.reset()


@pytest.fixture
def now():
    return datetime(2025, 11, 20, 12, 0, 0)


@pytest.fixture
def make_entry(now):
    """Factory for entries `days_ago` before `now` with a given raw score."""
    counter = iter(range(10_000))

    def _make(raw_score: float = 0.0, days_ago: float = 0, summary: str = "A day."):
        return JournalEntry(
            id=f"entry-{next(counter)}",
            text=f"{summary} More text.",
            raw_score=raw_score,
            summary=summary,
            timestamp=now - timedelta(days=days_ago),
        )

    return _make


@pytest.fixture
def fixed_detector():
    """Language detector double that always answers English."""
    detector = MagicMock()
    detector.detect.return_value = "en"
    return detector


def _model(availability, response="I had a calm, productive day."):
    model = MagicMock()
    model.availability = availability
    model.respond = AsyncMock(return_value=response)
    return model


@pytest.fixture
def available_model():
    return _model(Available())


@pytest.fixture(params=list(UnavailableReason))
def unavailable_model(request):
    """One model double per unavailable reason."""
    return _model(Unavailable(request.param))


@pytest.fixture
def failing_model():
    model = _model(Available())
    model.respond = AsyncMock(side_effect=RuntimeError("model crashed"))
    return model


@pytest.fixture
def journal_dir(tmp_path):
    path = tmp_path / "journal"
    path.mkdir()
    return path
