import os
import sys
from datetime import UTC, datetime, timedelta
from uuid import uuid4

# Add root to pythonpath
sys.path.append(os.getcwd())

from src.adapters.sqlite_store import SQLiteRecordStore  # noqa: E402

SUBSCRIBERS = [
    ("alice@example.com", "Alice Martin", "active"),
    ("bob@example.com", "Bob Chen", "active"),
    ("carol@example.org", "Carol Diaz", "unsubscribed"),
    ("dave@example.net", None, "active"),
    ("erin@example.com", "Erin Walsh", "unsubscribed"),
]

USERS = [
    ("Alice Martin", "alice@example.com", "google", 1),
    ("Frank Ode", "frank@example.com", "email", 0),
    (None, "ghost@example.com", "github", 0),
]

POSTS = [
    ("Launch notes", "published"),
    ("Roadmap draft", "draft"),
    ("Spring update", "scheduled"),
    ("Archive sweep", "archived"),
]


def seed():
    data_dir = os.environ.get("APP_DATA_DIR", "./data")
    os.makedirs(data_dir, exist_ok=True)

    db_path = f"{data_dir}/admin.db"
    print(f"Seeding to {db_path}")

    store = SQLiteRecordStore(db_path)
    store.ensure_schema()

    if store.fetch_collection("subscribers"):
        print("Database already seeded")
        return

    now = datetime.now(UTC)

    def stamp(days_ago: int) -> str:
        return (now - timedelta(days=days_ago)).isoformat()

    store.insert(
        "subscribers",
        [
            {
                "id": str(uuid4()),
                "email": email,
                "name": name,
                "status": status,
                # Last subscriber predates the subscribed_at column
                "subscribed_at": stamp(i * 3) if i < len(SUBSCRIBERS) - 1 else None,
                "created_at": stamp(i * 3),
            }
            for i, (email, name, status) in enumerate(SUBSCRIBERS)
        ],
    )
    store.insert(
        "users",
        [
            {
                "id": str(uuid4()),
                "uid": f"uid-{i}",
                "email": email,
                "display_name": name,
                "provider": provider,
                "email_verified": verified,
                "created_at": stamp(i * 10),
                "last_sign_in": stamp(i) if verified else None,
            }
            for i, (name, email, provider, verified) in enumerate(USERS)
        ],
    )
    store.insert(
        "blogs",
        [
            {"id": str(uuid4()), "title": title, "status": status, "created_at": stamp(i)}
            for i, (title, status) in enumerate(POSTS)
        ],
    )
    store.insert(
        "emails",
        [
            {"id": str(uuid4()), "subject": f"Issue #{i + 1}", "status": status, "created_at": stamp(i * 2)}
            for i, (_, status) in enumerate(POSTS)
        ],
    )
    store.add_team_member(str(uuid4()), "admin@example.com", "admin", now.isoformat())
    store.add_team_member(str(uuid4()), "editor@example.com", "editor", now.isoformat())
    print("Seeded subscribers, users, blogs, emails and team roles")
    print("Team: admin@example.com (admin), editor@example.com (editor)")


if __name__ == "__main__":
    seed()
