"""
Aggregate component - Data models.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from datetime import date

from src.domain.fields import Record

Predicate = Callable[[Record], bool]


@dataclass(frozen=True)
class StatusBreakdown:
    """
    Per-status counts over a collection.

    Invariant: sum(counts.values()) + other == total.
    """

    total: int
    counts: dict[str, int] = field(default_factory=dict)
    other: int = 0  # Records whose status is not one of the requested ones

    def get(self, status: str) -> int:
        return self.counts.get(status.strip().lower(), 0)


@dataclass(frozen=True)
class DailyCount:
    """Number of records created on one calendar day (UTC)."""

    day: date
    count: int

    @property
    def label(self) -> str:
        """Short label such as 'Jan 5'."""
        return f"{self.day.strftime('%b')} {self.day.day}"


# --- Input/Output ---


@dataclass(frozen=True)
class AggregateInput:
    """Input for counting records that satisfy a predicate."""

    records: Sequence[Record]
    predicate: Predicate


@dataclass(frozen=True)
class AggregateOutput:
    """Output from counting."""

    count: int
    total: int
