"""Tests for the SQLAlchemy budgets repository."""

from datetime import date

import pytest
from sqlalchemy import text

from src.domain.models import Money
from src.infrastructure.budgets_repository import SqlAlchemyBudgetsRepository


@pytest.fixture
def seeded_port(ledger_engine, db_port):
    with ledger_engine.begin() as conn:
        conn.execute(
            text(
                "INSERT INTO budget "
                "(id, user_id, category_id, amount, start_date, end_date) "
                "VALUES (:id, :user_id, :category_id, :amount, :start_date, :end_date)"
            ),
            [
                {"id": "b1", "user_id": "alice", "category_id": "food", "amount": "100", "start_date": "2025-01-01", "end_date": "2025-01-31"},
                {"id": "b2", "user_id": "alice", "category_id": "rent", "amount": "500", "start_date": "2025-02-01", "end_date": "2025-02-28"},
                {"id": "b3", "user_id": "bob", "category_id": "food", "amount": "50", "start_date": "2025-01-01", "end_date": "2025-01-31"},
            ],
        )
    return db_port


def test_fetch_budget_windows_returns_user_budgets(seeded_port) -> None:
    repository = SqlAlchemyBudgetsRepository(seeded_port)

    windows = repository.fetch_budget_windows("alice", None, None)

    assert [window.budget_id for window in windows] == ["b1", "b2"]
    first = windows[0]
    assert first.category_id == "food"
    assert first.category_name == "Food"
    assert first.amount == Money(10000, "INR")
    assert first.start_date == date(2025, 1, 1)
    assert first.end_date == date(2025, 1, 31)


def test_fetch_budget_windows_keeps_intersecting_windows(seeded_port) -> None:
    """A window touching the period on its last day is kept."""
    repository = SqlAlchemyBudgetsRepository(seeded_port)

    windows = repository.fetch_budget_windows(
        "alice",
        date(2025, 1, 31),
        date(2025, 1, 31),
    )

    assert [window.budget_id for window in windows] == ["b1"]


def test_fetch_budget_windows_skips_disjoint_windows(seeded_port) -> None:
    repository = SqlAlchemyBudgetsRepository(seeded_port)

    windows = repository.fetch_budget_windows(
        "alice",
        date(2025, 3, 1),
        date(2025, 3, 31),
    )

    assert windows == []
