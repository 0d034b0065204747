import logging
import os
from functools import lru_cache
from pathlib import Path

from fastapi import Depends, Header, HTTPException, status

from src.adapters.sqlite_store import SQLiteRecordStore
from src.components.search import ScorerPort, SearchConfig, scorer_by_name
from src.components.table_view import (
    DisplayConfig,
    RecordStoreError,
    RecordStorePort,
    RoleResolverPort,
    UnknownCollectionError,
)
from src.domain.fields import Record
from src.domain.policy import CapabilityResolver
from src.rules.loader import display_config, load_rules, search_config
from src.rules.models import Rules

logger = logging.getLogger(__name__)


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.data_dir = Path(os.environ.get("APP_DATA_DIR", "./data"))
        self.db_path = str(self.data_dir / "admin.db")
        self.rules_path = Path(os.environ.get("APP_RULES_PATH", str(self.base_dir / "rules.yaml")))


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
def get_rules(settings: Settings = Depends(get_settings)) -> Rules:
    return _load_rules_cached(settings.rules_path)


@lru_cache
def _load_rules_cached(path: Path) -> Rules:
    return load_rules(path)


def get_search_config(rules: Rules = Depends(get_rules)) -> SearchConfig:
    return search_config(rules)


def get_display_config(rules: Rules = Depends(get_rules)) -> DisplayConfig:
    return display_config(rules)


def get_scorer(rules: Rules = Depends(get_rules)) -> ScorerPort:
    return scorer_by_name(rules.search.scorer)


def get_capability_resolver(rules: Rules = Depends(get_rules)) -> CapabilityResolver:
    return CapabilityResolver(rules)


# --- Record store ---
def get_record_store(settings: Settings = Depends(get_settings)) -> SQLiteRecordStore:
    return SQLiteRecordStore(settings.db_path)


def get_role_resolver(
    store: SQLiteRecordStore = Depends(get_record_store),
) -> RoleResolverPort:
    return store


# --- Current role ---
async def get_current_role(
    x_user_email: str | None = Header(default=None),
    resolver: RoleResolverPort = Depends(get_role_resolver),
) -> str | None:
    """
    Role of the signed-in user.

    The identity provider sits in front of the API and forwards the user's
    email; missing email or no team membership yields None (default role).
    """
    if not x_user_email:
        return None
    try:
        return resolver.resolve_role(x_user_email)
    except RecordStoreError as e:
        raise store_unavailable(e) from e


# --- Fetch helper ---
def fetch_or_503(store: RecordStorePort, kind: str) -> list[Record]:
    """Fetch a collection, mapping store failures to HTTP errors."""
    try:
        return store.fetch_collection(kind)
    except UnknownCollectionError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except RecordStoreError as e:
        raise store_unavailable(e) from e


def store_unavailable(error: RecordStoreError) -> HTTPException:
    logger.error("Record store unavailable: %s", error)
    return HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail="Record store unavailable",
    )
