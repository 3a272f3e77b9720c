"""Availability state of a summarization model."""

from dataclasses import dataclass

from shared_types import UnavailableReason


@dataclass(frozen=True)
class Available:
    """Model can be invoked."""


@dataclass(frozen=True)
class Unavailable:
    """Model cannot be invoked right now."""

    reason: UnavailableReason = UnavailableReason.OTHER


Availability = Available | Unavailable
