from typing import Any

from pydantic import BaseModel, Field

from src.components.aggregate import DailyCount, StatusBreakdown
from src.components.table_view import Row, ViewModel


class RowResponse(BaseModel):
    """One table row: raw record plus display strings and allowed actions."""

    id: str
    record: dict[str, Any]
    display: dict[str, str]
    actions: list[str] = Field(default_factory=list)


class ViewModelResponse(BaseModel):
    rows: list[RowResponse]
    is_empty: bool = Field(..., description="The collection itself is empty")
    is_empty_for_query: bool = Field(..., description="The search matched nothing")
    empty_state: str | None = Field(None, description="no_records | no_results")
    badge_count: int = Field(..., description="Summary badge value")
    total: int = Field(..., description="Size of the unfiltered collection")
    query: str
    sort_field: str | None
    sort_direction: str
    actions: list[str] = Field(default_factory=list)


class SubscriberStatsResponse(BaseModel):
    total: int
    active: int
    unsubscribed: int
    unknown: int


class StatusBreakdownResponse(BaseModel):
    total: int
    counts: dict[str, int]
    other: int


class SeriesPointResponse(BaseModel):
    """Items created on one day."""

    date: str
    label: str
    blogs: int
    emails: int


class DashboardResponse(BaseModel):
    blogs: StatusBreakdownResponse
    emails: StatusBreakdownResponse
    series: list[SeriesPointResponse]


class ErrorResponse(BaseModel):
    detail: str


# --- Helper Functions ---


def row_to_response(row: Row) -> RowResponse:
    return RowResponse(
        id=row.id,
        record=dict(row.record),
        display=row.display,
        actions=sorted(row.actions),
    )


def view_model_to_response(vm: ViewModel) -> ViewModelResponse:
    return ViewModelResponse(
        rows=[row_to_response(r) for r in vm.rows],
        is_empty=vm.is_empty,
        is_empty_for_query=vm.is_empty_for_query,
        empty_state=vm.empty_state.value if vm.empty_state else None,
        badge_count=vm.badge_count,
        total=vm.total,
        query=vm.query,
        sort_field=vm.sort.field,
        sort_direction=vm.sort.direction.value,
        actions=sorted(vm.actions),
    )


def breakdown_to_response(breakdown: StatusBreakdown) -> StatusBreakdownResponse:
    return StatusBreakdownResponse(
        total=breakdown.total,
        counts=dict(breakdown.counts),
        other=breakdown.other,
    )


def series_to_response(
    blogs: list[DailyCount], emails: list[DailyCount]
) -> list[SeriesPointResponse]:
    """Zip two daily series over the same window."""
    return [
        SeriesPointResponse(date=b.day.isoformat(), label=b.label, blogs=b.count, emails=e.count)
        for b, e in zip(blogs, emails, strict=True)
    ]
