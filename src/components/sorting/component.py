"""
Sort component (functional core).

Orders a record collection by one column and direction.

Key behaviors:
- Strings compare case-insensitively; null/missing is ""
- Timestamps compare as instants; missing/unparsable is the epoch
- Booleans order False before True
- Stable in both directions: equal keys keep input order
- Unknown field or no field leaves input order unchanged
- Never mutates the input; always returns a new list
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import datetime
from typing import Any

from src.components.sorting.models import SortDirection, SortInput, SortOutput, SortState
from src.domain.fields import (
    FieldKind,
    FieldSpec,
    Record,
    as_flag,
    as_instant,
    as_text,
    read_field,
)

SortKey = str | datetime | bool


def sort_key(record: Record, spec: FieldSpec) -> SortKey:
    """Comparable key for one record under one column."""
    value: Any = read_field(record, spec)
    if spec.kind is FieldKind.TIMESTAMP:
        return as_instant(value)
    if spec.kind is FieldKind.BOOLEAN:
        return as_flag(value)
    return as_text(value).lower()


def parse_direction(value: str | SortDirection | None) -> SortDirection:
    """Parse a direction; anything unrecognised is ascending."""
    if isinstance(value, SortDirection):
        return value
    if value and value.strip().lower() == SortDirection.DESC.value:
        return SortDirection.DESC
    return SortDirection.ASC


def sort_records(
    records: Sequence[Record],
    field: str | None,
    direction: SortDirection = SortDirection.ASC,
    fields: Mapping[str, FieldSpec] | None = None,
) -> list[Record]:
    """
    Return `records` ordered by `field`.

    Args:
        records: Collection to order (not modified)
        field: Column name, or None for no sort
        direction: Ascending or descending
        fields: Column definitions for the view

    Returns:
        New list. Input order when the field is None or unknown.
    """
    spec = (fields or {}).get(field) if field else None
    if spec is None:
        return list(records)

    # sorted() is stable, and stays stable with reverse=True.
    return sorted(
        records,
        key=lambda r: sort_key(r, spec),
        reverse=direction is SortDirection.DESC,
    )


def toggle_sort(state: SortState, field: str) -> SortState:
    """
    Column header click.

    Same field flips direction; a new field starts ascending.
    """
    if state.field == field:
        return SortState(field=field, direction=state.direction.flipped())
    return SortState(field=field, direction=SortDirection.ASC)


def run(inp: SortInput) -> SortOutput:
    """
    Main component entry point (Atomic Component Pattern).

    Args:
        inp: Records, column definitions and sort state

    Returns:
        SortOutput with the ordered records
    """
    if not isinstance(inp, SortInput):
        raise ValueError(f"Unknown input type: {type(inp)}")

    applied = inp.state.field is not None and inp.state.field in inp.fields
    ordered = sort_records(inp.records, inp.state.field, inp.state.direction, inp.fields)
    return SortOutput(records=ordered, applied=applied)
