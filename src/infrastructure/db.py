"""Engine wiring for the ledger database.

One SQLAlchemy engine is built per process from ``LEDGER_DB_URL`` and shared
by every repository through ``SqlAlchemyDatabaseEngineAdapter``. Server
databases get a small pre-pinged ``QueuePool``; SQLite URLs, used for local
runs and fixtures, keep SQLAlchemy's default pool.
"""

import os
from typing import Any, Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort

LEDGER_DB_URL_ENV = "LEDGER_DB_URL"
LEDGER_DB_ECHO_ENV = "LEDGER_DB_ECHO"

_POOL_OPTIONS: dict[str, Any] = {
    "poolclass": QueuePool,
    "pool_size": 5,
    "max_overflow": 5,
    "pool_pre_ping": True,
}
_TRUTHY = {"1", "true", "yes", "on"}


def _get_env_var(name: str) -> str:
    """Return a required setting, loading a local ``.env`` file first.

    Raises:
        RuntimeError: If the variable is unset or blank.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _echo_enabled() -> bool:
    return os.getenv(LEDGER_DB_ECHO_ENV, "").strip().lower() in _TRUTHY


def _engine_options(db_url: str, echo: bool) -> dict[str, Any]:
    """Build ``create_engine`` keyword arguments for a database URL.

    Args:
        db_url: SQLAlchemy URL of the ledger database.
        echo: Whether SQLAlchemy should log every statement.

    Returns:
        dict[str, Any]: Pool options for server backends, thread-check
        relaxation for SQLite.
    """
    options: dict[str, Any] = {"echo": echo, "future": True}
    if make_url(db_url).get_backend_name() == "sqlite":
        options["connect_args"] = {"check_same_thread": False}
    else:
        options.update(_POOL_OPTIONS)
    return options


def _create_engine(db_url: str, echo: bool = False) -> Engine:
    return create_engine(db_url, **_engine_options(db_url, echo))


_ledger_engine: Optional[Engine] = None


def get_ledger_engine() -> Engine:
    """Return the process-wide ledger engine, creating it on first use.

    ``LEDGER_DB_ECHO`` set to a truthy value turns on statement logging.
    """
    global _ledger_engine
    if _ledger_engine is None:
        db_url = _get_env_var(LEDGER_DB_URL_ENV)
        _ledger_engine = _create_engine(db_url, echo=_echo_enabled())
    return _ledger_engine


def dispose_ledger_engine() -> None:
    """Close pooled connections and forget the cached engine."""
    global _ledger_engine
    if _ledger_engine is not None:
        _ledger_engine.dispose()
        _ledger_engine = None


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort backed by the module-level ledger engine."""

    def get_ledger_engine(self) -> Engine:
        return get_ledger_engine()

    def dispose(self) -> None:
        dispose_ledger_engine()


__all__ = [
    "LEDGER_DB_ECHO_ENV",
    "LEDGER_DB_URL_ENV",
    "dispose_ledger_engine",
    "get_ledger_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
