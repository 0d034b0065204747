"""
Search component (functional core).

Builds an approximate text index over a collection and answers free-text
queries with a relevance-ordered subset.

Key behaviors:
- Blank query returns the whole collection in store order
- Null or missing key values index as empty strings
- A record's score is its best score across the configured keys
- Matches ordered best first; equal scores keep collection order
- Indexes are immutable snapshots, rebuilt whenever the collection changes
"""

from __future__ import annotations

from collections.abc import Sequence

from src.components.search._scorers import EditDistanceScorer
from src.components.search.models import (
    IndexEntry,
    SearchConfig,
    SearchIndex,
    SearchInput,
    SearchMatch,
    SearchOutput,
)
from src.components.search.ports import ScorerPort
from src.domain.fields import Record, as_text

DEFAULT_SCORER = EditDistanceScorer()


def normalize_query(query: str | None) -> str:
    """Trim a raw query; None becomes empty."""
    return (query or "").strip()


def is_blank(query: str | None) -> bool:
    return not normalize_query(query)


def build_index(
    records: Sequence[Record],
    keys: Sequence[str],
    *,
    config: SearchConfig | None = None,
) -> SearchIndex:
    """
    Index a collection snapshot over the given keys.

    Pure function of (records, keys): no state is kept between calls.
    """
    cfg = config or SearchConfig()
    entries = []
    for position, record in enumerate(records):
        texts = tuple(_prepare(as_text(record.get(key)), cfg) for key in keys)
        entries.append(IndexEntry(position=position, record=record, texts=texts))
    return SearchIndex(keys=tuple(keys), entries=tuple(entries))


def _prepare(text: str, cfg: SearchConfig) -> str:
    text = text.strip()
    return text.lower() if cfg.ignore_case else text


def score_entry(entry: IndexEntry, query: str, scorer: ScorerPort) -> float:
    """Best (lowest) score of the query against any of the entry's texts."""
    if not entry.texts:
        return 1.0
    return min(scorer.score(query, text) for text in entry.texts)


def search(
    index: SearchIndex,
    query: str | None,
    *,
    scorer: ScorerPort | None = None,
    config: SearchConfig | None = None,
) -> list[SearchMatch]:
    """
    Query an index.

    Args:
        index: Index built from the current collection
        query: Free text; blank means "no search"
        scorer: Similarity function (defaults to edit distance)
        config: Threshold and case handling

    Returns:
        Matching records, best first
    """
    cfg = config or SearchConfig()
    text = normalize_query(query)

    if not text:
        return [SearchMatch(record=e.record, score=0.0, position=e.position) for e in index.entries]

    if len(text) < cfg.min_query_length or not index.keys:
        return [SearchMatch(record=e.record, score=0.0, position=e.position) for e in index.entries]

    needle = text.lower() if cfg.ignore_case else text
    active_scorer = scorer or DEFAULT_SCORER

    matches = []
    for entry in index.entries:
        score = score_entry(entry, needle, active_scorer)
        if score <= cfg.threshold:
            matches.append(SearchMatch(record=entry.record, score=score, position=entry.position))

    matches.sort(key=lambda m: (m.score, m.position))
    return matches


def search_records(
    records: Sequence[Record],
    keys: Sequence[str],
    query: str | None,
    *,
    scorer: ScorerPort | None = None,
    config: SearchConfig | None = None,
) -> list[Record]:
    """Build an index for `records` and return the matching records."""
    if is_blank(query):
        return list(records)
    index = build_index(records, keys, config=config)
    return [m.record for m in search(index, query, scorer=scorer, config=config)]


def run(
    inp: SearchInput,
    *,
    scorer: ScorerPort | None = None,
    config: SearchConfig | None = None,
) -> SearchOutput:
    """
    Main component entry point (Atomic Component Pattern).

    Args:
        inp: Records, keys and query
        scorer: Similarity function (Optional)
        config: Search configuration (Optional)

    Returns:
        SearchOutput with ordered matches
    """
    if not isinstance(inp, SearchInput):
        raise ValueError(f"Unknown input type: {type(inp)}")

    index = build_index(inp.records, inp.keys, config=config)
    matches = search(index, inp.query, scorer=scorer, config=config)
    return SearchOutput(matches=matches, is_query=not is_blank(inp.query))
