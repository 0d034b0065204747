"""
Built-in view definitions and their display annotators.
"""

from __future__ import annotations

from typing import Any

from src.components.aggregate.component import is_active_subscriber
from src.components.table_view.models import CollectionKind, DisplayConfig, ViewDefinition
from src.domain.fields import (
    SUBSCRIBER_FIELDS,
    USER_FIELDS,
    AuthProvider,
    Record,
    SubscriberStatus,
    as_flag,
    as_text,
    parse_instant,
    read_field,
)

PROVIDER_LABELS = {
    AuthProvider.GOOGLE: "Google",
    AuthProvider.EMAIL: "Email",
    AuthProvider.UNKNOWN: "Unknown",
}


def format_date(value: Any, config: DisplayConfig | None = None) -> str:
    """Display a timestamp as 'Jan 5, 2024', or the missing-date label."""
    cfg = config or DisplayConfig()
    instant = parse_instant(value)
    if instant is None:
        return cfg.missing_date_label
    if cfg.date_format:
        return instant.strftime(cfg.date_format)
    return f"{instant.strftime('%b')} {instant.day}, {instant.year}"


def initials(name: str) -> str:
    """'Ada Lovelace' -> 'AL'."""
    return "".join(part[0] for part in name.split() if part).upper() or "U"


def annotate_subscriber(record: Record, config: DisplayConfig) -> dict[str, str]:
    status = SubscriberStatus.parse(record.get("status"))
    return {
        "email": as_text(record.get("email")),
        "name": as_text(record.get("name")),
        "status": status.value,
        "subscribed_at": format_date(read_field(record, SUBSCRIBER_FIELDS["subscribed_at"]), config),
    }


def annotate_user(record: Record, config: DisplayConfig) -> dict[str, str]:
    name = as_text(read_field(record, USER_FIELDS["user"]))
    provider = AuthProvider.parse(record.get("provider"))
    verified = as_flag(read_field(record, USER_FIELDS["email_verified"]))
    return {
        "user": name,
        "initials": initials(name),
        "uid": as_text(record.get("uid") or record.get("id")),
        "email": as_text(record.get("email")),
        "provider": PROVIDER_LABELS[provider],
        "email_verified": "Verified" if verified else "Unverified",
        "created": format_date(read_field(record, USER_FIELDS["created"]), config),
        "last_sign_in": format_date(read_field(record, USER_FIELDS["last_sign_in"]), config),
    }


SUBSCRIBERS_VIEW = ViewDefinition(
    kind=CollectionKind.SUBSCRIBERS,
    fields=SUBSCRIBER_FIELDS,
    annotate=annotate_subscriber,
    badge_predicate=is_active_subscriber,
    search_keys=("email", "name", "status"),
    row_actions=frozenset({"delete"}),
    view_actions=frozenset({"create"}),
)

USERS_VIEW = ViewDefinition(
    kind=CollectionKind.USERS,
    fields=USER_FIELDS,
    annotate=annotate_user,
)

VIEWS: dict[CollectionKind, ViewDefinition] = {
    CollectionKind.SUBSCRIBERS: SUBSCRIBERS_VIEW,
    CollectionKind.USERS: USERS_VIEW,
}
