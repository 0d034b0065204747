"""
Aggregate component - Counts and breakdowns over record collections.
"""

from src.components.aggregate.component import (
    count,
    count_active_subscribers,
    daily_counts,
    field_equals,
    is_active_subscriber,
    run,
    status_breakdown,
)
from src.components.aggregate.models import (
    AggregateInput,
    AggregateOutput,
    DailyCount,
    Predicate,
    StatusBreakdown,
)

__all__ = [
    "run",
    "count",
    "count_active_subscribers",
    "is_active_subscriber",
    "field_equals",
    "status_breakdown",
    "daily_counts",
    "AggregateInput",
    "AggregateOutput",
    "DailyCount",
    "Predicate",
    "StatusBreakdown",
]
