"""
Record field access and coercion.

Records arrive from the record store as flat mappings whose keys may be
snake_case or camelCase depending on the producer. Every read goes through
a FieldSpec so that aliases, nulls and malformed values are handled in one
place and never raise.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import UTC, date, datetime
from enum import Enum
from typing import Any

Record = Mapping[str, Any]

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)

_TRUE_STRINGS = frozenset({"true", "t", "1", "yes", "y"})


class FieldKind(str, Enum):
    """Comparison semantics of a column."""

    STRING = "string"
    TIMESTAMP = "timestamp"
    BOOLEAN = "boolean"


@dataclass(frozen=True)
class FieldSpec:
    """
    A named column over a record.

    `aliases` are tried in order; the first non-null value wins. `default`
    is used for display when every alias is missing.
    """

    name: str
    kind: FieldKind = FieldKind.STRING
    aliases: tuple[str, ...] = ()
    default: Any = None

    @property
    def keys(self) -> tuple[str, ...]:
        return self.aliases or (self.name,)


def read_field(record: Record, spec: FieldSpec) -> Any:
    """Return the first non-null value among the spec's keys, else its default."""
    for key in spec.keys:
        value = record.get(key)
        if value is not None and value != "":
            return value
    return spec.default


def read(record: Record, name: str) -> Any:
    """Read a plain key (no aliases)."""
    return record.get(name)


def as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def parse_instant(value: Any) -> datetime | None:
    """
    Parse a timestamp-ish value to an aware UTC datetime, or None.

    Accepts datetimes, dates, ISO-8601 strings (including a trailing "Z")
    and numeric epoch seconds.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)

    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=UTC)

    if isinstance(value, int | float):
        try:
            return datetime.fromtimestamp(value, tz=UTC)
        except (OverflowError, OSError, ValueError):
            return None

    if isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            return parse_instant(datetime.fromisoformat(text))
        except ValueError:
            return None

    return None


def as_instant(value: Any) -> datetime:
    """Like parse_instant, but missing or unparsable values become EPOCH."""
    instant = parse_instant(value)
    return EPOCH if instant is None else instant


def as_flag(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    if isinstance(value, int | float):
        return value != 0
    return False


# --- Closed enumerations ---


class _TolerantEnum(str, Enum):
    """Enum whose parse() maps anything unrecognised to UNKNOWN."""

    @classmethod
    def parse(cls, value: Any) -> _TolerantEnum:
        text = as_text(value).strip().lower()
        for member in cls:
            if member.value == text:
                return member
        return cls["UNKNOWN"]


class SubscriberStatus(_TolerantEnum):
    ACTIVE = "active"
    UNSUBSCRIBED = "unsubscribed"
    UNKNOWN = "unknown"


class AuthProvider(_TolerantEnum):
    GOOGLE = "google"
    EMAIL = "email"
    UNKNOWN = "unknown"


class PostStatus(_TolerantEnum):
    """Status of blogs and email campaigns."""

    PUBLISHED = "published"
    DRAFT = "draft"
    SCHEDULED = "scheduled"
    UNKNOWN = "unknown"


# --- Column sets per record shape ---

SUBSCRIBER_FIELDS: dict[str, FieldSpec] = {
    "email": FieldSpec("email"),
    "name": FieldSpec("name"),
    "status": FieldSpec("status"),
    "subscribed_at": FieldSpec(
        "subscribed_at", FieldKind.TIMESTAMP, aliases=("subscribed_at", "subscribedAt")
    ),
}

USER_FIELDS: dict[str, FieldSpec] = {
    "user": FieldSpec(
        "user",
        aliases=("name", "display_name", "displayName"),
        default="Unknown",
    ),
    "email": FieldSpec("email"),
    "provider": FieldSpec("provider"),
    "email_verified": FieldSpec(
        "email_verified", FieldKind.BOOLEAN, aliases=("email_verified", "emailVerified")
    ),
    "created": FieldSpec("created", FieldKind.TIMESTAMP, aliases=("created_at", "createdAt")),
    "last_sign_in": FieldSpec(
        "last_sign_in", FieldKind.TIMESTAMP, aliases=("last_sign_in", "lastSignIn")
    ),
}

POST_FIELDS: dict[str, FieldSpec] = {
    "title": FieldSpec("title"),
    "status": FieldSpec("status"),
    "created": FieldSpec("created", FieldKind.TIMESTAMP, aliases=("created_at", "createdAt")),
}
