"""Engine wiring for the local accounts database.

``ACCOUNTS_DB_URL`` names the target. One pooled engine is shared by the
store and the read repository for the life of the process.
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort


def _get_env_var(name: str) -> str:
    """Return a required variable, loading ``.env`` first.

    Raises:
        RuntimeError: If the variable is missing or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def enable_sqlite_transactions(engine: Engine) -> Engine:
    """Let SQLAlchemy own transaction boundaries on pysqlite.

    pysqlite only opens a transaction before DML, so a SAVEPOINT issued
    after a plain SELECT becomes the outermost transaction and its RELEASE
    commits. Disabling the driver's handling and emitting BEGIN ourselves
    keeps savepoints nested inside the batch transaction.

    Args:
        engine: Engine bound to a SQLite database.

    Returns:
        Engine: The same engine, with the listeners attached.
    """

    @event.listens_for(engine, "connect")
    def _disable_driver_transactions(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _emit_begin(conn):
        conn.exec_driver_sql("BEGIN")

    return engine


def _create_engine(db_url: str) -> Engine:
    """Create the pooled engine for ``db_url``.

    SQLite URLs also get ``enable_sqlite_transactions`` so batches commit
    only on flush.
    """
    engine = create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )
    if make_url(db_url).get_backend_name() == "sqlite":
        enable_sqlite_transactions(engine)
    return engine


_accounts_engine: Optional[Engine] = None


def get_accounts_engine() -> Engine:
    """Return the process-wide accounts engine, creating it on first use."""
    global _accounts_engine
    if _accounts_engine is None:
        db_url = _get_env_var("ACCOUNTS_DB_URL")
        _accounts_engine = _create_engine(db_url)
    return _accounts_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort serving the shared accounts engine."""

    def get_accounts_engine(self) -> Engine:
        return get_accounts_engine()


__all__ = [
    "enable_sqlite_transactions",
    "get_accounts_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
