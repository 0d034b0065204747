"""
TableView component - Search/sort/aggregate view model for admin lists.
"""

from src.components.table_view._views import (
    PROVIDER_LABELS,
    SUBSCRIBERS_VIEW,
    USERS_VIEW,
    VIEWS,
    annotate_subscriber,
    annotate_user,
    format_date,
    initials,
)
from src.components.table_view.component import (
    annotate_row,
    compute_aggregate,
    compute_badge,
    compute_view_model,
    run,
)
from src.components.table_view.models import (
    CollectionKind,
    DisplayConfig,
    EmptyState,
    RecordStoreError,
    Row,
    UnknownCollectionError,
    ViewDefinition,
    ViewModel,
    ViewModelInput,
    as_kind,
)
from src.components.table_view.ports import RecordStorePort, RoleResolverPort

__all__ = [
    # Component
    "run",
    # Pure functions
    "compute_view_model",
    "compute_aggregate",
    "compute_badge",
    "annotate_row",
    "annotate_subscriber",
    "annotate_user",
    "format_date",
    "initials",
    # Views
    "SUBSCRIBERS_VIEW",
    "USERS_VIEW",
    "VIEWS",
    "PROVIDER_LABELS",
    # Models
    "CollectionKind",
    "DisplayConfig",
    "EmptyState",
    "Row",
    "ViewDefinition",
    "ViewModel",
    "ViewModelInput",
    "as_kind",
    # Errors
    "RecordStoreError",
    "UnknownCollectionError",
    # Ports
    "RecordStorePort",
    "RoleResolverPort",
]
