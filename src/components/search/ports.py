"""
Search component - Port interfaces.
"""

from __future__ import annotations

from typing import Protocol


class ScorerPort(Protocol):
    """
    String similarity function.

    Swapping the scorer changes how text is matched without touching the
    index or the view assembler.
    """

    def score(self, query: str, text: str) -> float:
        """
        Score how well `query` matches somewhere in `text`.

        Returns:
            A value in [0, 1]: 0 for an exact match, 1 for no resemblance.
        """
        ...
