import argparse
import logging
import os
import sys
from collections.abc import Sequence
from pathlib import Path

from src.adapters.sqlite_store import SQLiteRecordStore
from src.components.aggregate import status_breakdown
from src.components.search import scorer_by_name
from src.components.sorting import SortDirection
from src.components.table_view import (
    VIEWS,
    CollectionKind,
    RecordStoreError,
    ViewModel,
    compute_view_model,
)
from src.domain.fields import SubscriberStatus
from src.domain.policy import CapabilityResolver
from src.rules.loader import display_config, load_rules, search_config
from src.rules.models import Rules

logger = logging.getLogger("cli")

DB_PATH = os.path.join(os.environ.get("APP_DATA_DIR", "./data"), "admin.db")
RULES_PATH = os.environ.get("APP_RULES_PATH", "rules.yaml")

# Columns printed per view, in order.
COLUMNS: dict[CollectionKind, tuple[str, ...]] = {
    CollectionKind.SUBSCRIBERS: ("email", "name", "status", "subscribed_at"),
    CollectionKind.USERS: ("user", "email", "provider", "email_verified", "created", "last_sign_in"),
}


def get_rules(path: str) -> Rules:
    if not Path(path).exists():
        logger.error(f"Rules file {path} not found.")
        sys.exit(1)
    return load_rules(Path(path))


def get_store(path: str) -> SQLiteRecordStore:
    if not Path(path).exists():
        logger.error(f"Database {path} not found. Run seed_db.py first.")
        sys.exit(1)
    return SQLiteRecordStore(path)


def render(vm: ViewModel, columns: Sequence[str]) -> str:
    lines = [f"{len(vm.rows)} of {vm.total} rows, badge {vm.badge_count}"]
    if vm.is_empty:
        lines.append("No records yet.")
    elif vm.is_empty_for_query:
        lines.append(f"No results for '{vm.query}'.")
    else:
        lines.append("\t".join(columns))
        lines.extend("\t".join(row.display.get(c, "") for c in columns) for row in vm.rows)
    return "\n".join(lines)


def handle_view(store: SQLiteRecordStore, rules: Rules, args: argparse.Namespace) -> None:
    kind = CollectionKind(args.collection)
    view = VIEWS[kind]
    resolver = CapabilityResolver(rules)
    role = store.resolve_role(args.email) if args.email else None

    vm = compute_view_model(
        store.fetch_collection(kind.value),
        args.query,
        args.sort,
        SortDirection.DESC if args.desc else SortDirection.ASC,
        view=view,
        capabilities=resolver.capabilities_for(role, view.resource),
        scorer=scorer_by_name(rules.search.scorer),
        config=search_config(rules),
        display=display_config(rules),
    )
    print(render(vm, COLUMNS[kind]))
    if vm.actions:
        print(f"Actions: {', '.join(sorted(vm.actions))}")


def handle_stats(store: SQLiteRecordStore, rules: Rules) -> None:
    subscribers = status_breakdown(
        store.fetch_collection(CollectionKind.SUBSCRIBERS.value),
        [SubscriberStatus.ACTIVE.value, SubscriberStatus.UNSUBSCRIBED.value],
    )
    print(
        f"Subscribers: {subscribers.total} total, "
        f"{subscribers.get(SubscriberStatus.ACTIVE.value)} active, "
        f"{subscribers.get(SubscriberStatus.UNSUBSCRIBED.value)} unsubscribed"
    )
    users = store.fetch_collection(CollectionKind.USERS.value)
    print(f"Users: {len(users)}")

    for kind in (CollectionKind.BLOGS, CollectionKind.EMAILS):
        breakdown = status_breakdown(store.fetch_collection(kind.value), rules.dashboard.statuses)
        counts = ", ".join(f"{s} {n}" for s, n in breakdown.counts.items())
        print(f"{kind.value.capitalize()}: {breakdown.total} total ({counts})")


def main(argv: Sequence[str] | None = None) -> None:
    logging.basicConfig(level=logging.INFO)

    parser = argparse.ArgumentParser(description="Admin table CLI")
    parser.add_argument("--db", default=DB_PATH, help="Path to the SQLite database")
    parser.add_argument("--rules", default=RULES_PATH, help="Path to rules.yaml")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # view
    view_parser = subparsers.add_parser("view", help="Print an admin table")
    view_parser.add_argument("collection", choices=[k.value for k in COLUMNS])
    view_parser.add_argument("--query", default="", help="Fuzzy search query")
    view_parser.add_argument("--sort", help="Field to sort by")
    view_parser.add_argument("--desc", action="store_true", help="Sort descending")
    view_parser.add_argument("--email", help="Act as this team member's role")

    # stats
    subparsers.add_parser("stats", help="Print collection counts")

    args = parser.parse_args(argv)

    rules = get_rules(args.rules)
    store = get_store(args.db)

    try:
        if args.command == "view":
            handle_view(store, rules, args)
        elif args.command == "stats":
            handle_stats(store, rules)
    except RecordStoreError as e:
        logger.error(f"Record store unavailable: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
