"""CLI checking that the ledger database is reachable and has its tables.

Exit status is 0 when the connection works and every ledger table exists,
1 otherwise.
"""

from sqlalchemy import inspect
from sqlalchemy.engine import Engine

from src.infrastructure.container import build_database_adapter
from src.infrastructure.logging.logger import get_app_logger

LEDGER_TABLES = ("category", "transaction", "transaction_participant", "budget")


def missing_ledger_tables(engine: Engine) -> list[str]:
    """List the ledger tables absent from the connected database.

    Args:
        engine: Engine connected to the ledger database.

    Returns:
        list[str]: Missing table names, in ``LEDGER_TABLES`` order.
    """
    present = set(inspect(engine).get_table_names())
    return [table for table in LEDGER_TABLES if table not in present]


def main() -> int:
    """Ping the configured ledger database and verify its schema."""
    logger = get_app_logger()
    adapter = build_database_adapter()
    engine = adapter.get_ledger_engine()
    logger.info(f"Ledger DB: {engine.url.render_as_string(hide_password=True)}")

    try:
        with engine.connect() as conn:
            conn.exec_driver_sql("SELECT 1")
        missing = missing_ledger_tables(engine)
    finally:
        adapter.dispose()

    if missing:
        logger.warning(f"Ledger schema is missing tables: {', '.join(missing)}")
        return 1
    logger.info("Ledger connection is working.")
    return 0


__all__ = ["LEDGER_TABLES", "main", "missing_ledger_tables"]


if __name__ == "__main__":
    raise SystemExit(main())
