"""
Table view component - Port interfaces.

Collaborators that live outside the pure core. The core never calls them
itself; the shell fetches and passes plain data in.
"""

from __future__ import annotations

from typing import Protocol

from src.domain.fields import Record


class RecordStorePort(Protocol):
    """
    Tabular record store.

    Owns fetching, caching and retries. Raises RecordStoreError when it
    cannot serve a collection.
    """

    def fetch_collection(self, kind: str) -> list[Record]:
        """
        Fetch a read-only snapshot of a collection.

        Args:
            kind: Collection name ("subscribers", "users", ...)

        Returns:
            Records in the store's default order
        """
        ...


class RoleResolverPort(Protocol):
    """Maps the signed-in user's email to a role name."""

    def resolve_role(self, email: str) -> str | None:
        """Role for `email`, or None when the user has no team role."""
        ...
