"""Runtime configuration sourced from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import FrozenSet, Optional

DEFAULT_DATABASE_URL = "sqlite+pysqlite:///proofs.db"


@dataclass(frozen=True)
class Settings:
    database_url: str
    sql_echo: bool
    log_level: str
    admins: FrozenSet[str]


def _normalize_bool(value: str | None, default: bool = False) -> bool:
    """Return normalized boolean from environment-style value."""
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"", "0", "false", "no", "off"}:
        return False
    if normalized in {"1", "true", "yes", "on"}:
        return True
    return default


def _normalize_list_env(var_name: str) -> FrozenSet[str]:
    raw = os.getenv(var_name, "")
    values = set()
    for entry in raw.split(","):
        cleaned = entry.strip().strip('"').strip("'")
        if cleaned:
            values.add(cleaned)
    return frozenset(values)


def _get_database_url() -> str:
    # Explicit test override wins, then the service-specific URL, then the
    # generic DATABASE_URL shared with other tooling.
    for var_name in ("PROOFSTORE_TEST_DB", "PROOFSTORE_DATABASE_URL", "DATABASE_URL"):
        value = os.getenv(var_name)
        if value:
            return value
    return DEFAULT_DATABASE_URL


@lru_cache(maxsize=None)
def get_settings() -> Settings:
    """Return the cached settings built from the environment."""
    return Settings(
        database_url=_get_database_url(),
        sql_echo=_normalize_bool(os.getenv("PROOFSTORE_SQL_ECHO")),
        log_level=(os.getenv("PROOFSTORE_LOG_LEVEL") or "INFO").strip().upper(),
        admins=_normalize_list_env("PROOFSTORE_ADMINS"),
    )


def refresh_settings_cache() -> None:
    """Invalidate cached settings (useful for tests)."""
    get_settings.cache_clear()


def database_url(override: Optional[str] = None) -> str:
    return override or get_settings().database_url
