"""
Search component - Fuzzy search over record collections.
"""

from src.components.search._scorers import (
    SCORERS,
    EditDistanceScorer,
    TrigramScorer,
    scorer_by_name,
)
from src.components.search.component import (
    DEFAULT_SCORER,
    build_index,
    is_blank,
    normalize_query,
    run,
    score_entry,
    search,
    search_records,
)
from src.components.search.models import (
    DEFAULT_THRESHOLD,
    IndexEntry,
    SearchConfig,
    SearchConfigError,
    SearchIndex,
    SearchInput,
    SearchMatch,
    SearchOutput,
)
from src.components.search.ports import ScorerPort

__all__ = [
    # Component
    "run",
    # Pure functions
    "build_index",
    "search",
    "search_records",
    "score_entry",
    "normalize_query",
    "is_blank",
    # Scorers
    "DEFAULT_SCORER",
    "EditDistanceScorer",
    "TrigramScorer",
    "SCORERS",
    "scorer_by_name",
    # Models
    "DEFAULT_THRESHOLD",
    "IndexEntry",
    "SearchConfig",
    "SearchConfigError",
    "SearchIndex",
    "SearchMatch",
    # Input/Output
    "SearchInput",
    "SearchOutput",
    # Ports
    "ScorerPort",
]
