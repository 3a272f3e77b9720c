"""CLI command modules."""

from .journal import journal
from .mood import legend, score, stats

__all__ = ["journal", "score", "stats", "legend"]
