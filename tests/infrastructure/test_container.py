"""Tests for the composition root."""

from unittest.mock import MagicMock

from src.infrastructure import container
from src.infrastructure.budgets_repository import SqlAlchemyBudgetsRepository
from src.infrastructure.legs_repository import SqlAlchemyLegsRepository
from src.infrastructure.settings import LedgerSettings


def test_build_legs_repository_uses_settings() -> None:
    """The legs repository should carry the configured currency."""
    db_port = MagicMock()
    settings = LedgerSettings(currency_code="USD", minor_unit_scale=2)

    repository = container.build_legs_repository(db_port, settings)

    assert isinstance(repository, SqlAlchemyLegsRepository)
    assert repository._db_port is db_port
    assert repository._currency == "USD"
    assert repository._scale == 2


def test_build_budgets_repository_reads_settings_from_env(monkeypatch) -> None:
    """Missing settings should be resolved from the environment."""
    db_port = MagicMock()
    monkeypatch.setattr(
        container,
        "build_settings",
        lambda: LedgerSettings(currency_code="JPY", minor_unit_scale=0),
    )

    repository = container.build_budgets_repository(db_port)

    assert isinstance(repository, SqlAlchemyBudgetsRepository)
    assert repository._currency == "JPY"
    assert repository._scale == 0


def test_build_database_adapter_returns_sqlalchemy_adapter() -> None:
    adapter = container.build_database_adapter()

    assert isinstance(adapter, container.SqlAlchemyDatabaseEngineAdapter)
