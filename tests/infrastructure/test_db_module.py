"""Tests for the accounts engine wiring."""

import pytest
from sqlalchemy import text

from src.infrastructure import db as db_module


@pytest.fixture
def no_dotenv(monkeypatch):
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)


def test_env_var_is_returned_when_set(monkeypatch, no_dotenv):
    monkeypatch.setenv("ACCOUNTS_DB_URL", "postgresql://mirror")

    assert db_module._get_env_var("ACCOUNTS_DB_URL") == "postgresql://mirror"


def test_missing_db_url_names_the_variable(monkeypatch, no_dotenv):
    monkeypatch.delenv("ACCOUNTS_DB_URL", raising=False)

    with pytest.raises(RuntimeError, match="ACCOUNTS_DB_URL"):
        db_module._get_env_var("ACCOUNTS_DB_URL")


def test_server_urls_get_a_pre_pinged_queue_pool(monkeypatch):
    calls = []

    def fake_create_engine(db_url, **kwargs):
        calls.append((db_url, kwargs))
        return "engine"

    monkeypatch.setattr(db_module, "create_engine", fake_create_engine)
    monkeypatch.setattr(
        db_module,
        "enable_sqlite_transactions",
        lambda engine: pytest.fail("server URLs keep driver transactions"),
    )

    assert db_module._create_engine("postgresql://mirror") == "engine"

    [(db_url, kwargs)] = calls
    assert db_url == "postgresql://mirror"
    assert kwargs["poolclass"] is db_module.QueuePool
    assert (kwargs["pool_size"], kwargs["max_overflow"]) == (5, 5)
    assert kwargs["pool_pre_ping"] is True


def test_sqlite_engine_keeps_savepoints_inside_the_transaction(tmp_path):
    """After a SELECT, a released savepoint stays uncommitted."""
    engine = db_module._create_engine(f"sqlite:///{tmp_path / 'mirror.db'}")
    with engine.begin() as conn:
        conn.execute(text("CREATE TABLE t (v TEXT)"))

    conn = engine.connect()
    conn.execute(text("SELECT COUNT(*) FROM t")).scalar_one()
    with conn.begin_nested():
        conn.execute(text("INSERT INTO t VALUES ('pending')"))
    conn.rollback()
    conn.close()

    with engine.connect() as check:
        assert check.execute(text("SELECT COUNT(*) FROM t")).scalar_one() == 0
    engine.dispose()


def test_accounts_engine_is_created_once(monkeypatch, no_dotenv):
    monkeypatch.setattr(db_module, "_accounts_engine", None)
    created = []
    monkeypatch.setattr(
        db_module,
        "_create_engine",
        lambda url: created.append(url) or f"engine:{url}",
    )
    monkeypatch.setenv("ACCOUNTS_DB_URL", "sqlite:///mirror.db")

    first = db_module.get_accounts_engine()

    assert db_module.get_accounts_engine() is first
    assert created == ["sqlite:///mirror.db"]


def test_adapter_serves_the_shared_engine(monkeypatch):
    monkeypatch.setattr(db_module, "get_accounts_engine", lambda: "shared")

    assert db_module.SqlAlchemyDatabaseEngineAdapter().get_accounts_engine() == (
        "shared"
    )
