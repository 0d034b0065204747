"""
In-memory record store.

Implements RecordStorePort and RoleResolverPort over plain dicts.
Used for tests and local development.

Key behaviors:
- fetch_collection returns fresh copies (a snapshot), never the stored dicts
- Unknown collection names raise UnknownCollectionError
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from src.components.table_view.models import CollectionKind, as_kind

logger = logging.getLogger(__name__)


@dataclass
class InMemoryRecordStore:
    """Dict-backed record store."""

    collections: dict[CollectionKind, list[dict[str, Any]]] = field(default_factory=dict)
    roles: dict[str, str] = field(default_factory=dict)  # lowercased email -> role
    fetch_count: int = 0

    def add(self, kind: str | CollectionKind, records: Iterable[Mapping[str, Any]]) -> None:
        bucket = self.collections.setdefault(as_kind(kind), [])
        bucket.extend(dict(r) for r in records)

    def set_role(self, email: str, role: str) -> None:
        self.roles[email.strip().lower()] = role

    def fetch_collection(self, kind: str) -> list[dict[str, Any]]:
        collection = as_kind(kind)
        self.fetch_count += 1
        rows = [dict(r) for r in self.collections.get(collection, [])]
        logger.debug("Fetched %d %s from memory", len(rows), collection.value)
        return rows

    def resolve_role(self, email: str) -> str | None:
        if not email:
            return None
        return self.roles.get(email.strip().lower())
