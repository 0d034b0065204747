"""
Sorting component - Column sort for admin tables.
"""

from src.components.sorting.component import (
    parse_direction,
    run,
    sort_key,
    sort_records,
    toggle_sort,
)
from src.components.sorting.models import (
    SortDirection,
    SortInput,
    SortOutput,
    SortState,
)

__all__ = [
    # Component
    "run",
    # Pure functions
    "sort_records",
    "sort_key",
    "toggle_sort",
    "parse_direction",
    # Models
    "SortDirection",
    "SortState",
    # Input/Output
    "SortInput",
    "SortOutput",
]
