"""
Search component unit tests.

Covers:
- Blank query identity (order preserved)
- Fuzzy matching within threshold, best first
- Null/missing values never raise
- Index staleness detection
- Pluggable scorer
"""

from __future__ import annotations

from typing import Any

import pytest

from src.components.search import (
    DEFAULT_THRESHOLD,
    EditDistanceScorer,
    SearchConfig,
    SearchConfigError,
    SearchInput,
    TrigramScorer,
    build_index,
    run,
    scorer_by_name,
    search,
    search_records,
)

KEYS = ("email", "name", "status")


# --- Fixtures ---


@pytest.fixture
def subscribers() -> list[dict[str, Any]]:
    return [
        {"id": "1", "email": "bob@example.com", "name": "Bob", "status": "active"},
        {"id": "2", "email": "alicia@example.com", "name": "Alicia", "status": "active"},
        {"id": "3", "email": "alice@example.com", "name": None, "status": "unsubscribed"},
        {"id": "4", "email": "carol@example.com", "status": "active"},
    ]


class FixedScorer:
    """Scorer that matches only texts containing a marker."""

    def __init__(self, marker: str) -> None:
        self.marker = marker
        self.calls = 0

    def score(self, query: str, text: str) -> float:
        self.calls += 1
        return 0.0 if self.marker in text else 1.0


# --- Scorer Tests ---


class TestEditDistanceScorer:
    def test_exact_substring_scores_zero(self) -> None:
        assert EditDistanceScorer().score("alice", "alice@example.com") == 0.0

    def test_one_substitution(self) -> None:
        assert EditDistanceScorer().score("alixe", "alice@example.com") == pytest.approx(0.2)

    def test_empty_text_scores_one(self) -> None:
        assert EditDistanceScorer().score("abc", "") == 1.0

    def test_empty_query_scores_zero(self) -> None:
        assert EditDistanceScorer().score("", "anything") == 0.0

    def test_score_capped_at_one(self) -> None:
        assert EditDistanceScorer().score("zzzzzzzz", "ab") <= 1.0


class TestTrigramScorer:
    def test_contained_query_scores_zero(self) -> None:
        assert TrigramScorer().score("alice", "alice@example.com") == 0.0

    def test_unrelated_text_scores_high(self) -> None:
        assert TrigramScorer().score("zzz", "alice") == 1.0

    def test_lookup_by_name(self) -> None:
        assert isinstance(scorer_by_name("trigram"), TrigramScorer)
        assert isinstance(scorer_by_name("edit_distance"), EditDistanceScorer)

    def test_unknown_name_rejected(self) -> None:
        with pytest.raises(ValueError):
            scorer_by_name("soundex")


# --- Config Tests ---


class TestSearchConfig:
    def test_default_threshold(self) -> None:
        assert SearchConfig().threshold == DEFAULT_THRESHOLD == 0.3

    @pytest.mark.parametrize("threshold", [-0.1, 1.5])
    def test_threshold_out_of_range(self, threshold: float) -> None:
        with pytest.raises(SearchConfigError):
            SearchConfig(threshold=threshold)

    def test_min_query_length_validated(self) -> None:
        with pytest.raises(SearchConfigError):
            SearchConfig(min_query_length=0)


# --- Search Tests ---


class TestBlankQuery:
    @pytest.mark.parametrize("query", ["", "   ", "\t\n", None])
    def test_blank_query_is_identity(
        self, subscribers: list[dict[str, Any]], query: str | None
    ) -> None:
        result = search_records(subscribers, KEYS, query)
        assert result == subscribers
        assert all(a is b for a, b in zip(result, subscribers, strict=True))

    def test_blank_query_returns_new_list(self, subscribers: list[dict[str, Any]]) -> None:
        result = search_records(subscribers, KEYS, "")
        assert result is not subscribers

    def test_blank_query_on_empty_collection(self) -> None:
        assert search_records([], KEYS, "") == []


class TestFuzzyMatching:
    def test_exact_match_found(self, subscribers: list[dict[str, Any]]) -> None:
        result = search_records(subscribers, KEYS, "carol")
        assert [r["id"] for r in result] == ["4"]

    def test_ranked_best_first(self, subscribers: list[dict[str, Any]]) -> None:
        index = build_index(subscribers, KEYS)
        matches = search(index, "alice")
        assert [m.record["id"] for m in matches] == ["3", "2"]
        assert matches[0].score == 0.0
        assert matches[1].score == pytest.approx(0.2)

    def test_typo_tolerated(self, subscribers: list[dict[str, Any]]) -> None:
        result = search_records(subscribers, KEYS, "carl")
        assert [r["id"] for r in result] == ["4"]

    def test_case_insensitive(self, subscribers: list[dict[str, Any]]) -> None:
        result = search_records(subscribers, KEYS, "BOB")
        assert [r["id"] for r in result] == ["1"]

    def test_case_sensitive_config(self, subscribers: list[dict[str, Any]]) -> None:
        cfg = SearchConfig(threshold=0.0, ignore_case=False)
        assert search_records(subscribers, KEYS, "BOB", config=cfg) == []
        assert [r["id"] for r in search_records(subscribers, KEYS, "Bob", config=cfg)] == ["1"]

    def test_no_match(self, subscribers: list[dict[str, Any]]) -> None:
        assert search_records(subscribers, KEYS, "zzz-no-match") == []

    def test_status_key_searchable(self, subscribers: list[dict[str, Any]]) -> None:
        result = search_records(subscribers, KEYS, "unsubscribed")
        assert [r["id"] for r in result] == ["3"]

    def test_equal_scores_keep_collection_order(self, subscribers: list[dict[str, Any]]) -> None:
        result = search_records(subscribers, KEYS, "active")
        assert [r["id"] for r in result] == ["1", "2", "4"]

    def test_missing_and_null_values_do_not_raise(self) -> None:
        records: list[dict[str, Any]] = [{"id": "x"}, {"id": "y", "email": None, "name": 42}]
        assert search_records(records, KEYS, "anything") == []
        assert [r["id"] for r in search_records(records, KEYS, "42")] == ["y"]

    def test_input_not_mutated(self, subscribers: list[dict[str, Any]]) -> None:
        before = [dict(s) for s in subscribers]
        search_records(subscribers, KEYS, "alice")
        assert subscribers == before

    def test_no_keys_means_no_filtering(self, subscribers: list[dict[str, Any]]) -> None:
        assert search_records(subscribers, (), "zzz") == subscribers


class TestPluggableScorer:
    def test_custom_scorer_used(self, subscribers: list[dict[str, Any]]) -> None:
        scorer = FixedScorer("carol")
        result = search_records(subscribers, KEYS, "anything", scorer=scorer)
        assert [r["id"] for r in result] == ["4"]
        assert scorer.calls > 0

    def test_trigram_scorer_swap(self, subscribers: list[dict[str, Any]]) -> None:
        result = search_records(subscribers, KEYS, "carol", scorer=TrigramScorer())
        assert [r["id"] for r in result] == ["4"]


class TestIndex:
    def test_index_covers_source(self, subscribers: list[dict[str, Any]]) -> None:
        index = build_index(subscribers, KEYS)
        assert len(index) == 4
        assert index.covers(subscribers) is True

    def test_index_stale_after_change(self, subscribers: list[dict[str, Any]]) -> None:
        index = build_index(subscribers, KEYS)
        changed = [*subscribers, {"id": "5", "email": "dave@example.com"}]
        assert index.covers(changed) is False
        replaced = [dict(s) for s in subscribers]
        assert index.covers(replaced) is False

    def test_rebuild_is_pure(self, subscribers: list[dict[str, Any]]) -> None:
        assert build_index(subscribers, KEYS) == build_index(subscribers, KEYS)

    def test_null_values_indexed_as_empty(self, subscribers: list[dict[str, Any]]) -> None:
        index = build_index(subscribers, KEYS)
        assert index.entries[2].texts[1] == ""
        assert index.entries[3].texts[1] == ""


class TestRun:
    def test_run_with_query(self, subscribers: list[dict[str, Any]]) -> None:
        out = run(SearchInput(records=subscribers, keys=KEYS, query="bob"))
        assert out.is_query is True
        assert [r["id"] for r in out.records] == ["1"]

    def test_run_blank(self, subscribers: list[dict[str, Any]]) -> None:
        out = run(SearchInput(records=subscribers, keys=KEYS))
        assert out.is_query is False
        assert out.records == subscribers

    def test_run_rejects_unknown_input(self) -> None:
        with pytest.raises(ValueError):
            run("bob")  # type: ignore[arg-type]
