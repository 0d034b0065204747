"""
Admin users table API endpoint.

Endpoints:
- GET /api/admin/users - Sortable signed-up users table
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from src.api.deps import (
    fetch_or_503,
    get_capability_resolver,
    get_current_role,
    get_display_config,
    get_record_store,
)
from src.api.routes.admin_subscribers import require_view
from src.api.schemas import ErrorResponse, ViewModelResponse, view_model_to_response
from src.components.sorting import parse_direction
from src.components.table_view import (
    USERS_VIEW,
    CollectionKind,
    DisplayConfig,
    RecordStorePort,
    compute_view_model,
)
from src.domain.policy import CapabilityResolver

router = APIRouter()

RESOURCE = CollectionKind.USERS.value


@router.get(
    "",
    response_model=ViewModelResponse,
    responses={403: {"model": ErrorResponse}, 503: {"model": ErrorResponse}},
    summary="Users table",
    description="Sort the signed-up users list. The users table has no search.",
)
def list_users(
    sort: str | None = Query(None, description="Sort field"),
    direction: str = Query("asc", alias="dir", description="Sort direction (asc | desc)"),
    role: str | None = Depends(get_current_role),
    resolver: CapabilityResolver = Depends(get_capability_resolver),
    store: RecordStorePort = Depends(get_record_store),
    display: DisplayConfig = Depends(get_display_config),
) -> ViewModelResponse:
    capabilities = resolver.capabilities_for(role, RESOURCE)
    require_view(capabilities)

    vm = compute_view_model(
        fetch_or_503(store, RESOURCE),
        "",
        sort,
        parse_direction(direction),
        view=USERS_VIEW,
        capabilities=capabilities,
        display=display,
    )
    return view_model_to_response(vm)
