"""
Scorer implementations for the search component.

EditDistanceScorer: approximate substring matching. The score is the
fewest edits needed to turn the query into any substring of the text,
divided by the query length.

TrigramScorer: share of the query's character trigrams that also occur
in the text.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EditDistanceScorer:
    """Approximate substring Levenshtein scorer (default)."""

    def score(self, query: str, text: str) -> float:
        m = len(query)
        if m == 0:
            return 0.0
        if not text:
            return 1.0

        # Row i holds the cost of matching query[:i] ending at each text position.
        # Row 0 is all zeros: a match may start anywhere in the text.
        previous = [0] * (len(text) + 1)
        for i in range(1, m + 1):
            current = [i] + [0] * len(text)
            q_char = query[i - 1]
            for j in range(1, len(text) + 1):
                substitution = previous[j - 1] + (q_char != text[j - 1])
                current[j] = min(previous[j] + 1, current[j - 1] + 1, substitution)
            previous = current

        best = min(previous)
        return min(best / m, 1.0)


def _trigrams(value: str) -> set[str]:
    padded = f"  {value} "
    return {padded[i : i + 3] for i in range(len(padded) - 2)}


@dataclass(frozen=True)
class TrigramScorer:
    """Trigram containment scorer."""

    def score(self, query: str, text: str) -> float:
        if not query:
            return 0.0
        if not text:
            return 1.0
        wanted = _trigrams(query)
        if query in text:
            return 0.0
        present = wanted & _trigrams(text)
        return 1.0 - len(present) / len(wanted)


SCORERS = {
    "edit_distance": EditDistanceScorer,
    "trigram": TrigramScorer,
}


def scorer_by_name(name: str) -> EditDistanceScorer | TrigramScorer:
    """Look up a scorer by its rules.yaml name."""
    try:
        return SCORERS[name]()
    except KeyError:
        raise ValueError(f"Unknown scorer: {name}") from None
