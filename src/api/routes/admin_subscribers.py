"""
Admin subscribers table API endpoints.

Endpoints:
- GET /api/admin/subscribers - Searchable, sortable subscriber table
- GET /api/admin/subscribers/stats - Subscriber status counts
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status

from src.api.deps import (
    fetch_or_503,
    get_capability_resolver,
    get_current_role,
    get_display_config,
    get_record_store,
    get_scorer,
    get_search_config,
)
from src.api.schemas import (
    ErrorResponse,
    SubscriberStatsResponse,
    ViewModelResponse,
    view_model_to_response,
)
from src.components.aggregate import status_breakdown
from src.components.search import ScorerPort, SearchConfig
from src.components.sorting import parse_direction
from src.components.table_view import (
    SUBSCRIBERS_VIEW,
    CollectionKind,
    DisplayConfig,
    RecordStorePort,
    compute_view_model,
)
from src.domain.fields import SubscriberStatus
from src.domain.policy import CapabilityResolver

router = APIRouter()

RESOURCE = CollectionKind.SUBSCRIBERS.value


def require_view(capabilities: frozenset[str]) -> None:
    if "view" not in capabilities:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not allowed to view this table",
        )


@router.get(
    "",
    response_model=ViewModelResponse,
    responses={403: {"model": ErrorResponse}, 503: {"model": ErrorResponse}},
    summary="Subscribers table",
    description="Fuzzy-search and sort the subscriber list.",
)
def list_subscribers(
    q: str = Query("", description="Fuzzy search query"),
    sort: str | None = Query(None, description="Sort field"),
    direction: str = Query("asc", alias="dir", description="Sort direction (asc | desc)"),
    role: str | None = Depends(get_current_role),
    resolver: CapabilityResolver = Depends(get_capability_resolver),
    store: RecordStorePort = Depends(get_record_store),
    scorer: ScorerPort = Depends(get_scorer),
    config: SearchConfig = Depends(get_search_config),
    display: DisplayConfig = Depends(get_display_config),
) -> ViewModelResponse:
    """
    Assemble the subscribers view model.

    Badge shows active subscribers across the whole list; a query that
    matches nothing yields an empty row list with is_empty_for_query set.
    """
    capabilities = resolver.capabilities_for(role, RESOURCE)
    require_view(capabilities)

    records = fetch_or_503(store, RESOURCE)
    vm = compute_view_model(
        records,
        q,
        sort,
        parse_direction(direction),
        view=SUBSCRIBERS_VIEW,
        capabilities=capabilities,
        scorer=scorer,
        config=config,
        display=display,
    )
    return view_model_to_response(vm)


@router.get(
    "/stats",
    response_model=SubscriberStatsResponse,
    responses={403: {"model": ErrorResponse}, 503: {"model": ErrorResponse}},
    summary="Subscriber stats",
    description="Total, active and unsubscribed subscriber counts.",
)
def subscriber_stats(
    role: str | None = Depends(get_current_role),
    resolver: CapabilityResolver = Depends(get_capability_resolver),
    store: RecordStorePort = Depends(get_record_store),
) -> SubscriberStatsResponse:
    require_view(resolver.capabilities_for(role, RESOURCE))

    breakdown = status_breakdown(
        fetch_or_503(store, RESOURCE),
        [SubscriberStatus.ACTIVE.value, SubscriberStatus.UNSUBSCRIBED.value],
    )
    return SubscriberStatsResponse(
        total=breakdown.total,
        active=breakdown.get(SubscriberStatus.ACTIVE.value),
        unsubscribed=breakdown.get(SubscriberStatus.UNSUBSCRIBED.value),
        unknown=breakdown.other,
    )
