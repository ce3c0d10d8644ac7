import pytest

from proofstore.config import refresh_settings_cache
from proofstore.store import ProofStore

MEMORY_URL = "sqlite+pysqlite:///:memory:"

_ENV_VARS = (
    "PROOFSTORE_TEST_DB",
    "PROOFSTORE_DATABASE_URL",
    "PROOFSTORE_ADMINS",
    "PROOFSTORE_SQL_ECHO",
    "PROOFSTORE_LOG_LEVEL",
    "DATABASE_URL",
)


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    """Keep the developer's environment out of cached settings."""
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("PROOFSTORE_TEST_DB", MEMORY_URL)
    refresh_settings_cache()
    yield
    refresh_settings_cache()


@pytest.fixture
def store():
    """Fresh in-memory store per test."""
    s = ProofStore(MEMORY_URL)
    try:
        yield s
    finally:
        s.close()
