"""
SQLite record store (RecordStorePort / RoleResolverPort implementation).

Read-only access to the admin collections plus the teams table used to
resolve roles. Rows come back as plain dicts in each collection's default
order, newest first.

Failures are logged and re-raised as RecordStoreError so the shell can
report them; the pure core never sees them.
"""

from __future__ import annotations

import logging
import sqlite3
from collections.abc import Iterable, Mapping
from typing import Any

from src.components.table_view.models import CollectionKind, RecordStoreError, as_kind

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Schema
# -----------------------------------------------------------------------------

SCHEMA = """
CREATE TABLE IF NOT EXISTS subscribers (
    id TEXT PRIMARY KEY,
    email TEXT NOT NULL UNIQUE,
    name TEXT,
    status TEXT NOT NULL DEFAULT 'active',
    subscribed_at TEXT,
    unsubscribed_at TEXT,
    created_at TEXT,
    updated_at TEXT
);
CREATE TABLE IF NOT EXISTS users (
    id TEXT PRIMARY KEY,
    uid TEXT,
    email TEXT,
    name TEXT,
    display_name TEXT,
    photo_url TEXT,
    provider TEXT,
    email_verified INTEGER NOT NULL DEFAULT 0,
    created_at TEXT,
    last_sign_in TEXT,
    updated_at TEXT
);
CREATE TABLE IF NOT EXISTS blogs (
    id TEXT PRIMARY KEY,
    title TEXT NOT NULL,
    slug TEXT,
    status TEXT NOT NULL DEFAULT 'draft',
    created_at TEXT,
    updated_at TEXT
);
CREATE TABLE IF NOT EXISTS emails (
    id TEXT PRIMARY KEY,
    subject TEXT NOT NULL,
    status TEXT NOT NULL DEFAULT 'draft',
    created_at TEXT,
    updated_at TEXT
);
CREATE TABLE IF NOT EXISTS teams (
    id TEXT PRIMARY KEY,
    email TEXT NOT NULL UNIQUE,
    role TEXT NOT NULL,
    created_at TEXT
);
"""

# Default order per collection (matches what the admin lists expect).
ORDER_BY: dict[CollectionKind, str] = {
    CollectionKind.SUBSCRIBERS: "subscribed_at DESC",
    CollectionKind.USERS: "created_at DESC",
    CollectionKind.BLOGS: "created_at DESC",
    CollectionKind.EMAILS: "created_at DESC",
}

# Columns holding SQLite integers that the core reads as booleans.
BOOLEAN_COLUMNS: dict[CollectionKind, tuple[str, ...]] = {
    CollectionKind.USERS: ("email_verified",),
}


def dict_factory(cursor: sqlite3.Cursor, row: tuple[Any, ...]) -> dict[str, Any]:
    """Convert SQLite row to dictionary."""
    return {col[0]: row[idx] for idx, col in enumerate(cursor.description)}


class SQLiteRecordStore:
    """SQLite-backed record store."""

    def __init__(self, db_path: str, connection: sqlite3.Connection | None = None):
        self.db_path = db_path
        self._external_conn = connection
        if connection is not None:
            connection.row_factory = dict_factory

    def _get_conn(self) -> sqlite3.Connection:
        """Get database connection (uses external if provided)."""
        if self._external_conn is not None:
            return self._external_conn

        conn = sqlite3.connect(self.db_path)
        conn.row_factory = dict_factory
        return conn

    def _release(self, conn: sqlite3.Connection | None) -> None:
        if conn is not None and self._external_conn is None:
            conn.close()

    def ensure_schema(self) -> None:
        conn = None
        try:
            conn = self._get_conn()
            conn.executescript(SCHEMA)
            conn.commit()
        except sqlite3.Error as e:
            logger.error("Failed to create schema: %s", e)
            raise RecordStoreError("schema", str(e)) from e
        finally:
            self._release(conn)

    def fetch_collection(self, kind: str) -> list[dict[str, Any]]:
        collection = as_kind(kind)
        sql = f"SELECT * FROM {collection.value} ORDER BY {ORDER_BY[collection]}"  # noqa: S608

        conn = None
        try:
            conn = self._get_conn()
            rows = conn.execute(sql).fetchall()
        except sqlite3.Error as e:
            logger.error("Failed to fetch %s: %s", collection.value, e)
            raise RecordStoreError(collection.value, str(e)) from e
        finally:
            self._release(conn)

        records = [self._map_row(collection, row) for row in rows]
        logger.debug("Fetched %d %s", len(records), collection.value)
        return records

    def resolve_role(self, email: str) -> str | None:
        """Team role for `email`, matched case-insensitively."""
        normalized = (email or "").strip().lower()
        if not normalized:
            return None

        conn = None
        try:
            conn = self._get_conn()
            row = conn.execute(
                "SELECT role FROM teams WHERE lower(email) = ? LIMIT 1",
                (normalized,),
            ).fetchone()
        except sqlite3.Error as e:
            logger.error("Failed to resolve role for %s: %s", normalized, e)
            raise RecordStoreError("teams", str(e)) from e
        finally:
            self._release(conn)

        return None if row is None else row["role"]

    def insert(self, kind: str | CollectionKind, records: Iterable[Mapping[str, Any]]) -> int:
        """Insert rows (used by the seeder and tests). Returns rows written."""
        return self._insert(as_kind(kind).value, records)

    def add_team_member(self, member_id: str, email: str, role: str, created_at: str) -> None:
        self._insert(
            "teams",
            [{"id": member_id, "email": email, "role": role, "created_at": created_at}],
        )

    def _insert(self, table: str, records: Iterable[Mapping[str, Any]]) -> int:
        written = 0
        conn = None
        try:
            conn = self._get_conn()
            for record in records:
                columns = list(record.keys())
                placeholders = ", ".join("?" for _ in columns)
                conn.execute(
                    f"INSERT INTO {table} ({', '.join(columns)}) VALUES ({placeholders})",  # noqa: S608
                    [record[c] for c in columns],
                )
                written += 1
            conn.commit()
        except sqlite3.Error as e:
            if conn is not None:
                conn.rollback()
            logger.error("Failed to insert into %s: %s", table, e)
            raise RecordStoreError(table, str(e)) from e
        finally:
            self._release(conn)
        return written

    def _map_row(self, collection: CollectionKind, row: Mapping[str, Any]) -> dict[str, Any]:
        record = dict(row)
        for column in BOOLEAN_COLUMNS.get(collection, ()):
            if column in record and record[column] is not None:
                record[column] = bool(record[column])
        return record
