from pathlib import Path

import pytest

from src.adapters.memory_store import InMemoryRecordStore
from src.domain.policy import CapabilityResolver
from src.rules.loader import load_rules

RULES_PATH = Path(__file__).parent.parent / "rules.yaml"


@pytest.fixture
def rules():
    """Load the REAL rules from project root."""
    return load_rules(RULES_PATH)


@pytest.fixture
def resolver(rules):
    return CapabilityResolver(rules)


@pytest.fixture
def subscribers():
    return [
        {"id": "s1", "email": "b@x.com", "name": "Bea", "status": "active",
         "subscribed_at": "2024-03-02T10:00:00Z"},
        {"id": "s2", "email": "a@x.com", "name": "Al", "status": "unsubscribed",
         "subscribed_at": "2024-01-05T08:00:00Z"},
        {"id": "s3", "email": "c@x.com", "name": "Cy", "status": "active",
         "subscribedAt": None},
    ]


@pytest.fixture
def users():
    return [
        {"id": "u1", "uid": "uid-1", "email": "ada@example.com", "display_name": "Ada Lovelace",
         "provider": "google", "email_verified": True, "created_at": "2024-02-01T00:00:00Z",
         "last_sign_in": "2024-02-10T00:00:00Z"},
        {"id": "u2", "uid": "uid-2", "email": "nameless@example.com", "provider": "github",
         "emailVerified": False, "createdAt": "2024-01-01T00:00:00Z"},
    ]


@pytest.fixture
def memory_store(subscribers, users):
    store = InMemoryRecordStore()
    store.add("subscribers", subscribers)
    store.add("users", users)
    store.set_role("Admin@Example.com", "admin")
    store.set_role("editor@example.com", "editor")
    return store
