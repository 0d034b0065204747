"""
TableView component (functional core).

Assembles the admin list view model:

    raw collection -> search -> sort -> annotated rows
    raw collection -> aggregate -> badge

Key behaviors:
- Search always precedes sort; sort applies to the filtered subset only
- The badge is computed over the full collection, never the filtered one
- Empty collection and empty search result are distinct signals
- Row/view actions are the capability set intersected with what the view
  offers; roles are never inspected here
- Pure: every call derives fresh output from its inputs
"""

from __future__ import annotations

from collections.abc import Sequence

from src.components.aggregate.component import count
from src.components.aggregate.models import Predicate
from src.components.search.component import is_blank, normalize_query, search_records
from src.components.search.models import SearchConfig
from src.components.search.ports import ScorerPort
from src.components.sorting.component import parse_direction, sort_records
from src.components.sorting.models import SortDirection, SortState
from src.components.table_view._views import SUBSCRIBERS_VIEW
from src.components.table_view.models import (
    DisplayConfig,
    Row,
    ViewDefinition,
    ViewModel,
    ViewModelInput,
)
from src.domain.fields import Record, as_text


def compute_aggregate(records: Sequence[Record], predicate: Predicate) -> int:
    """Count records in the full collection matching `predicate`."""
    return count(records, predicate)


def compute_badge(records: Sequence[Record], view: ViewDefinition) -> int:
    if view.badge_predicate is None:
        return len(records)
    return compute_aggregate(records, view.badge_predicate)


def annotate_row(
    record: Record,
    view: ViewDefinition,
    capabilities: frozenset[str] = frozenset(),
    display: DisplayConfig | None = None,
) -> Row:
    """Wrap a record with its display fields and permitted row actions."""
    cfg = display or DisplayConfig()
    return Row(
        id=as_text(record.get("id") or record.get("uid")),
        record=record,
        display=view.annotate(record, cfg),
        actions=frozenset(capabilities) & view.row_actions,
    )


def compute_view_model(
    records: Sequence[Record],
    query: str | None = "",
    sort_field: str | None = None,
    sort_direction: SortDirection | str = SortDirection.ASC,
    *,
    view: ViewDefinition = SUBSCRIBERS_VIEW,
    capabilities: frozenset[str] = frozenset(),
    scorer: ScorerPort | None = None,
    config: SearchConfig | None = None,
    display: DisplayConfig | None = None,
) -> ViewModel:
    """
    Derive the view model for one recomputation pass.

    Args:
        records: Full collection as fetched from the store
        query: Free-text search; blank means no search
        sort_field: Column to sort by, or None
        sort_direction: "asc" / "desc"
        view: View definition (columns, search keys, actions)
        capabilities: Opaque action tags granted to the current user
        scorer: Similarity function for search (Optional)
        config: Search configuration (Optional)
        display: Display formatting (Optional)

    Returns:
        ViewModel with ordered rows, badge and empty-state flags
    """
    text = normalize_query(query)
    direction = parse_direction(sort_direction)

    if view.searchable:
        searched = search_records(records, view.search_keys, text, scorer=scorer, config=config)
    else:
        searched = list(records)

    applied = sort_field is not None and sort_field in view.fields
    ordered = sort_records(searched, sort_field, direction, view.fields)
    rows = tuple(annotate_row(r, view, capabilities, display) for r in ordered)

    is_empty = len(records) == 0
    return ViewModel(
        rows=rows,
        is_empty=is_empty,
        is_empty_for_query=not is_empty and not is_blank(text) and len(rows) == 0,
        badge_count=compute_badge(records, view),
        total=len(records),
        query=text,
        sort=SortState(field=sort_field, direction=direction) if applied else SortState(),
        actions=frozenset(capabilities) & view.view_actions,
    )


def run(
    inp: ViewModelInput,
    *,
    scorer: ScorerPort | None = None,
    config: SearchConfig | None = None,
    display: DisplayConfig | None = None,
) -> ViewModel:
    """
    Main component entry point (Atomic Component Pattern).

    Args:
        inp: Collection, view, query, sort and capabilities
        scorer: Similarity function (Optional)
        config: Search configuration (Optional)
        display: Display formatting (Optional)

    Returns:
        ViewModel
    """
    if not isinstance(inp, ViewModelInput):
        raise ValueError(f"Unknown input type: {type(inp)}")

    return compute_view_model(
        inp.records,
        inp.query,
        inp.sort_field,
        inp.sort_direction,
        view=inp.view,
        capabilities=inp.capabilities,
        scorer=scorer,
        config=config,
        display=display,
    )
