"""
Table view component - Data models.

The view model consumed by admin list screens: ordered, annotated rows
plus the summary badge and empty-state signals.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from src.components.aggregate.models import Predicate
from src.components.sorting.models import SortDirection, SortState
from src.domain.fields import FieldSpec, Record


class CollectionKind(str, Enum):
    """Collections served by the record store."""

    SUBSCRIBERS = "subscribers"
    USERS = "users"
    BLOGS = "blogs"
    EMAILS = "emails"


class EmptyState(str, Enum):
    """Why a view has no rows. The two cases are presented differently."""

    NO_RECORDS = "no_records"
    NO_RESULTS = "no_results"


# --- Configuration ---


@dataclass(frozen=True)
class DisplayConfig:
    """Formatting of derived display fields."""

    date_format: str | None = None  # strftime pattern; None gives "Jan 5, 2024"
    missing_date_label: str = "N/A"


Annotator = Callable[[Record, DisplayConfig], dict[str, str]]


@dataclass(frozen=True)
class ViewDefinition:
    """
    Static description of one admin list view.

    `row_actions` and `view_actions` are the action tags the view knows how
    to render; what is actually shown is their intersection with the
    caller's capability set.
    """

    kind: CollectionKind
    fields: Mapping[str, FieldSpec]
    annotate: Annotator
    badge_predicate: Predicate | None = None  # None: badge is the total
    search_keys: tuple[str, ...] = ()
    row_actions: frozenset[str] = frozenset()
    view_actions: frozenset[str] = frozenset()

    @property
    def resource(self) -> str:
        return self.kind.value

    @property
    def searchable(self) -> bool:
        return bool(self.search_keys)


# --- Output ---


@dataclass(frozen=True)
class Row:
    """One renderable row: the untouched record plus display-only fields."""

    id: str
    record: Record
    display: dict[str, str] = field(default_factory=dict)
    actions: frozenset[str] = frozenset()


@dataclass(frozen=True)
class ViewModel:
    """Output of the assembler."""

    rows: tuple[Row, ...]
    is_empty: bool
    is_empty_for_query: bool
    badge_count: int
    total: int
    query: str = ""
    sort: SortState = field(default_factory=SortState)
    actions: frozenset[str] = frozenset()

    @property
    def empty_state(self) -> EmptyState | None:
        if self.is_empty:
            return EmptyState.NO_RECORDS
        if self.is_empty_for_query:
            return EmptyState.NO_RESULTS
        return None


# --- Input ---


@dataclass(frozen=True)
class ViewModelInput:
    """Inputs of one recomputation pass."""

    records: Sequence[Record]
    view: ViewDefinition
    query: str = ""
    sort_field: str | None = None
    sort_direction: SortDirection = SortDirection.ASC
    capabilities: frozenset[str] = frozenset()


# --- Errors ---


class RecordStoreError(Exception):
    """The record store could not serve a collection."""

    def __init__(self, kind: str, reason: str) -> None:
        self.kind = kind
        self.reason = reason
        super().__init__(f"Record store error for '{kind}': {reason}")


class UnknownCollectionError(RecordStoreError):
    """No such collection."""

    def __init__(self, kind: str) -> None:
        super().__init__(kind, "unknown collection")


def as_kind(value: Any) -> CollectionKind:
    """Parse a collection name, raising UnknownCollectionError."""
    try:
        return CollectionKind(value)
    except ValueError:
        raise UnknownCollectionError(str(value)) from None
