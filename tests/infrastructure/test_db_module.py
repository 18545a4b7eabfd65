"""Tests for the infrastructure.db module."""

import pytest

from src.infrastructure import db as db_module


def test_get_env_var_reads_environment(monkeypatch):
    """_get_env_var should load .env and return the requested value."""
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setenv("SUMMARY_DB_URL", "postgresql://expenses")

    assert db_module._get_env_var("SUMMARY_DB_URL") == "postgresql://expenses"


@pytest.mark.parametrize("value", [None, ""])
def test_get_env_var_raises_when_missing_or_empty(monkeypatch, value):
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    if value is None:
        monkeypatch.delenv("SUMMARY_DB_URL", raising=False)
    else:
        monkeypatch.setenv("SUMMARY_DB_URL", value)

    with pytest.raises(RuntimeError, match="SUMMARY_DB_URL"):
        db_module._get_env_var("SUMMARY_DB_URL")


def test_create_engine_configures_small_checked_pool(monkeypatch):
    captured = {}

    def fake_create_engine(db_url, **kwargs):
        captured["db_url"] = db_url
        captured.update(kwargs)
        return "engine"

    monkeypatch.setattr(db_module, "create_engine", fake_create_engine)

    assert db_module._create_engine("sqlite:///expenses.db") == "engine"
    assert captured["db_url"] == "sqlite:///expenses.db"
    assert captured["poolclass"] is db_module.QueuePool
    assert (captured["pool_size"], captured["max_overflow"]) == (5, 5)
    assert captured["pool_pre_ping"] is True


def test_get_engine_is_created_once(monkeypatch):
    """get_engine should memoize the engine built from SUMMARY_DB_URL."""
    monkeypatch.setattr(db_module, "_engine", None)
    created = []

    def fake_create_engine(url):
        created.append(url)
        return f"engine:{url}"

    monkeypatch.setattr(db_module, "_create_engine", fake_create_engine)
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setenv(db_module.DB_URL_ENV, "postgresql://expenses")

    first = db_module.get_engine()
    second = db_module.get_engine()

    assert first is second
    assert created == ["postgresql://expenses"]


def test_adapter_proxies_module_engine(monkeypatch):
    monkeypatch.setattr(db_module, "get_engine", lambda: "expenses_engine")

    adapter = db_module.SqlAlchemyDatabaseEngineAdapter()

    assert adapter.get_engine() == "expenses_engine"
