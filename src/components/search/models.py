"""
Search component - Data models.

Fuzzy search over a record collection and a fixed list of keys.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from src.domain.fields import Record

DEFAULT_THRESHOLD = 0.3


# --- Configuration ---


class SearchConfigError(ValueError):
    """Search configuration is invalid."""


@dataclass(frozen=True)
class SearchConfig:
    """
    Search tuning.

    `threshold` is the loosest score still counted as a match, on a 0..1
    scale where 0 is an exact match.
    """

    threshold: float = DEFAULT_THRESHOLD
    ignore_case: bool = True
    min_query_length: int = 1

    def __post_init__(self) -> None:
        if not 0.0 <= self.threshold <= 1.0:
            raise SearchConfigError(f"threshold must be within [0, 1], got {self.threshold}")
        if self.min_query_length < 1:
            raise SearchConfigError("min_query_length must be at least 1")


# --- Index ---


@dataclass(frozen=True)
class IndexEntry:
    """One indexed record: its position in the source and its key texts."""

    position: int
    record: Record
    texts: tuple[str, ...]


@dataclass(frozen=True)
class SearchIndex:
    """
    Immutable index over a collection snapshot.

    Built by build_index(); never updated in place. When the collection
    changes, build a new one.
    """

    keys: tuple[str, ...]
    entries: tuple[IndexEntry, ...] = ()

    def __len__(self) -> int:
        return len(self.entries)

    def covers(self, records: Sequence[Record]) -> bool:
        """True if this index was built from exactly these records, in order."""
        if len(records) != len(self.entries):
            return False
        return all(entry.record is rec for entry, rec in zip(self.entries, records, strict=True))


@dataclass(frozen=True)
class SearchMatch:
    """A matching record with its relevance score (lower is better)."""

    record: Record
    score: float
    position: int


# --- Input/Output ---


@dataclass(frozen=True)
class SearchInput:
    """Input for a one-shot search."""

    records: Sequence[Record]
    keys: tuple[str, ...]
    query: str = ""


@dataclass(frozen=True)
class SearchOutput:
    """Output from a search."""

    matches: list[SearchMatch] = field(default_factory=list)
    is_query: bool = False  # False when the query was blank

    @property
    def records(self) -> list[Record]:
        return [m.record for m in self.matches]
