"""
Aggregate component (functional core).

Scalar summaries over the full, unfiltered collection: the active
subscriber badge, dashboard status breakdowns and the trailing daily
creation series. All functions are pure reductions.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from datetime import date, timedelta

from src.components.aggregate.models import (
    AggregateInput,
    AggregateOutput,
    DailyCount,
    Predicate,
    StatusBreakdown,
)
from src.domain.fields import (
    FieldSpec,
    Record,
    SubscriberStatus,
    as_text,
    parse_instant,
    read_field,
)


def count(records: Sequence[Record], predicate: Predicate) -> int:
    """Number of records for which `predicate` holds."""
    return sum(1 for record in records if predicate(record))


def field_equals(spec: FieldSpec | str, value: str) -> Predicate:
    """Predicate: the field's text equals `value`, ignoring case and surrounding spaces."""
    field_spec = spec if isinstance(spec, FieldSpec) else FieldSpec(spec)
    wanted = value.strip().lower()

    def predicate(record: Record) -> bool:
        return as_text(read_field(record, field_spec)).strip().lower() == wanted

    return predicate


def is_active_subscriber(record: Record) -> bool:
    return SubscriberStatus.parse(record.get("status")) is SubscriberStatus.ACTIVE


def count_active_subscribers(records: Sequence[Record]) -> int:
    return count(records, is_active_subscriber)


def status_breakdown(
    records: Sequence[Record],
    statuses: Sequence[str],
    field: FieldSpec | str = "status",
) -> StatusBreakdown:
    """
    Count records per status.

    Args:
        records: Full collection
        statuses: Status values to report (others are counted in `other`)
        field: Status column

    Returns:
        StatusBreakdown with one entry per requested status
    """
    field_spec = field if isinstance(field, FieldSpec) else FieldSpec(field)
    seen = Counter(
        as_text(read_field(record, field_spec)).strip().lower() for record in records
    )
    counts: dict[str, int] = {}
    for status in statuses:
        key = status.strip().lower()
        if key not in counts:
            counts[key] = seen.get(key, 0)
    return StatusBreakdown(
        total=len(records),
        counts=counts,
        other=len(records) - sum(counts.values()),
    )


def daily_counts(
    records: Sequence[Record],
    field: FieldSpec,
    *,
    today: date,
    days: int = 7,
) -> list[DailyCount]:
    """
    Records created per day over the trailing window ending `today`.

    Oldest day first. Records with missing or unparsable dates are ignored.
    """
    if days < 1:
        return []

    window = [today - timedelta(days=offset) for offset in range(days - 1, -1, -1)]
    per_day: Counter[date] = Counter()
    for record in records:
        instant = parse_instant(read_field(record, field))
        if instant is not None:
            per_day[instant.date()] += 1

    return [DailyCount(day=day, count=per_day.get(day, 0)) for day in window]


def run(inp: AggregateInput) -> AggregateOutput:
    """
    Main component entry point (Atomic Component Pattern).

    Args:
        inp: Full collection and predicate

    Returns:
        AggregateOutput with the matching count and collection size
    """
    if not isinstance(inp, AggregateInput):
        raise ValueError(f"Unknown input type: {type(inp)}")

    return AggregateOutput(count=count(inp.records, inp.predicate), total=len(inp.records))
