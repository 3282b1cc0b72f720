"""Composition root for wiring infrastructure adapters."""

from src.application.ports.budgets_repository import BudgetsRepositoryPort
from src.application.ports.database import DatabaseEnginePort
from src.application.ports.legs_repository import LegsRepositoryPort
from src.infrastructure.budgets_repository import SqlAlchemyBudgetsRepository
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.legs_repository import SqlAlchemyLegsRepository
from src.infrastructure.settings import LedgerSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_settings() -> LedgerSettings:
    """Return ledger settings sourced from the environment."""
    return LedgerSettings.from_env()


def build_legs_repository(
    db_port: DatabaseEnginePort | None = None,
    settings: LedgerSettings | None = None,
) -> LegsRepositoryPort:
    """Return the repository reading transaction legs."""
    resolved_db = db_port or build_database_adapter()
    resolved_settings = settings or build_settings()
    return SqlAlchemyLegsRepository(
        resolved_db,
        currency=resolved_settings.currency_code,
        scale=resolved_settings.minor_unit_scale,
    )


def build_budgets_repository(
    db_port: DatabaseEnginePort | None = None,
    settings: LedgerSettings | None = None,
) -> BudgetsRepositoryPort:
    """Return the repository reading budget windows."""
    resolved_db = db_port or build_database_adapter()
    resolved_settings = settings or build_settings()
    return SqlAlchemyBudgetsRepository(
        resolved_db,
        currency=resolved_settings.currency_code,
        scale=resolved_settings.minor_unit_scale,
    )


__all__ = [
    "build_database_adapter",
    "build_settings",
    "build_legs_repository",
    "build_budgets_repository",
]
