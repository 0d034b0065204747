"""
Admin dashboard API endpoint.

Endpoints:
- GET /api/admin/dashboard - Blog/email status counts and daily series
"""

from __future__ import annotations

from datetime import UTC, date, datetime

from fastapi import APIRouter, Depends

from src.api.deps import (
    fetch_or_503,
    get_capability_resolver,
    get_current_role,
    get_record_store,
    get_rules,
)
from src.api.routes.admin_subscribers import require_view
from src.api.schemas import (
    DashboardResponse,
    ErrorResponse,
    breakdown_to_response,
    series_to_response,
)
from src.components.aggregate import daily_counts, status_breakdown
from src.components.table_view import CollectionKind, RecordStorePort
from src.domain.fields import POST_FIELDS
from src.domain.policy import CapabilityResolver
from src.rules.models import Rules

router = APIRouter()


def get_today() -> date:
    """Current UTC date (overridable in tests)."""
    return datetime.now(UTC).date()


@router.get(
    "",
    response_model=DashboardResponse,
    responses={403: {"model": ErrorResponse}, 503: {"model": ErrorResponse}},
    summary="Dashboard summary",
    description="Status breakdowns for blogs and emails plus items created per day.",
)
def dashboard(
    role: str | None = Depends(get_current_role),
    resolver: CapabilityResolver = Depends(get_capability_resolver),
    store: RecordStorePort = Depends(get_record_store),
    rules: Rules = Depends(get_rules),
    today: date = Depends(get_today),
) -> DashboardResponse:
    require_view(resolver.capabilities_for(role, "dashboard"))

    blogs = fetch_or_503(store, CollectionKind.BLOGS.value)
    emails = fetch_or_503(store, CollectionKind.EMAILS.value)

    statuses = rules.dashboard.statuses
    window = rules.dashboard.trailing_days
    created = POST_FIELDS["created"]

    return DashboardResponse(
        blogs=breakdown_to_response(status_breakdown(blogs, statuses)),
        emails=breakdown_to_response(status_breakdown(emails, statuses)),
        series=series_to_response(
            daily_counts(blogs, created, today=today, days=window),
            daily_counts(emails, created, today=today, days=window),
        ),
    )
