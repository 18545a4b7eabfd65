"""SQLAlchemy engine management for the expenses database.

The engine URL is read from ``SUMMARY_DB_URL`` (a ``.env`` file is honoured)
the first time an engine is requested, then the engine is reused for the
lifetime of the process.
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort

DB_URL_ENV = "SUMMARY_DB_URL"

_engine: Optional[Engine] = None


def _get_env_var(name: str) -> str:
    """Return a required environment variable after loading ``.env``.

    Raises:
        RuntimeError: If the variable is unset or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    """Create the pooled engine used by the record store.

    Summaries run a handful of short read queries per request, so a small
    pool with pre-ping is enough.

    Args:
        db_url: SQLAlchemy URL including driver and credentials.

    Returns:
        Engine: New SQLAlchemy engine.
    """
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


def get_engine() -> Engine:
    """Return the process-wide expenses engine, creating it on first use."""
    global _engine
    if _engine is None:
        _engine = _create_engine(_get_env_var(DB_URL_ENV))
    return _engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort backed by the module-level engine."""

    def get_engine(self) -> Engine:
        return get_engine()


__all__ = [
    "DB_URL_ENV",
    "get_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
