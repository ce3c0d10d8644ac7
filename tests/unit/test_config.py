import pytest

from proofstore.config import DEFAULT_DATABASE_URL, database_url, get_settings, refresh_settings_cache


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("PROOFSTORE_TEST_DB", raising=False)
    refresh_settings_cache()
    yield
    refresh_settings_cache()


def test_defaults():
    settings = get_settings()
    assert settings.database_url == DEFAULT_DATABASE_URL
    assert settings.sql_echo is False
    assert settings.log_level == "INFO"
    assert settings.admins == frozenset()


def test_url_precedence(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://generic/db")
    refresh_settings_cache()
    assert get_settings().database_url == "postgresql://generic/db"

    monkeypatch.setenv("PROOFSTORE_DATABASE_URL", "postgresql://service/db")
    refresh_settings_cache()
    assert get_settings().database_url == "postgresql://service/db"

    monkeypatch.setenv("PROOFSTORE_TEST_DB", "sqlite+pysqlite:///:memory:")
    refresh_settings_cache()
    assert get_settings().database_url == "sqlite+pysqlite:///:memory:"


def test_database_url_override_wins():
    assert database_url("sqlite:///other.db") == "sqlite:///other.db"
    assert database_url() == DEFAULT_DATABASE_URL


def test_admin_list_parsing(monkeypatch):
    monkeypatch.setenv("PROOFSTORE_ADMINS", ' a@x.com, "b@x.com" ,,\'c@x.com\' ')
    refresh_settings_cache()
    assert get_settings().admins == frozenset({"a@x.com", "b@x.com", "c@x.com"})


@pytest.mark.parametrize("raw,expected", [("1", True), ("yes", True), ("off", False), ("bogus", False)])
def test_sql_echo_flag(monkeypatch, raw, expected):
    monkeypatch.setenv("PROOFSTORE_SQL_ECHO", raw)
    refresh_settings_cache()
    assert get_settings().sql_echo is expected


def test_settings_are_cached(monkeypatch):
    first = get_settings()
    monkeypatch.setenv("PROOFSTORE_LOG_LEVEL", "debug")
    assert get_settings() is first
    refresh_settings_cache()
    assert get_settings().log_level == "DEBUG"
