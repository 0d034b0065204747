"""
Sorting component - Data models.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum

from src.domain.fields import FieldSpec, Record


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    def flipped(self) -> SortDirection:
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


@dataclass(frozen=True)
class SortState:
    """
    Active sort column and direction.

    field=None means "no sort": records keep their input order.
    """

    field: str | None = None
    direction: SortDirection = SortDirection.ASC


# --- Input/Output ---


@dataclass(frozen=True)
class SortInput:
    """Input for sorting a collection."""

    records: Sequence[Record]
    fields: Mapping[str, FieldSpec]
    state: SortState = field(default_factory=SortState)


@dataclass(frozen=True)
class SortOutput:
    """Output from sorting."""

    records: list[Record]
    applied: bool = False  # False when no sort (or an unsupported field) was requested
