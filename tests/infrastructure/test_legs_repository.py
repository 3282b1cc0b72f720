"""Tests for the SQLAlchemy legs repository."""

from datetime import date

import pytest
from sqlalchemy import text

from src.domain.models import Direction, LegSort, Money
from src.infrastructure.legs_repository import SqlAlchemyLegsRepository


@pytest.fixture
def seeded_port(ledger_engine, db_port):
    with ledger_engine.begin() as conn:
        conn.execute(
            text(
                'INSERT INTO "transaction" (id, date, description, is_deleted) '
                "VALUES (:id, :date, :description, :is_deleted)"
            ),
            [
                {"id": "t1", "date": "2025-01-05", "description": "Dinner", "is_deleted": 0},
                {"id": "t2", "date": "2025-01-20", "description": "January rent", "is_deleted": 0},
                {"id": "t3", "date": "2025-02-01", "description": "Payday", "is_deleted": 0},
                {"id": "t4", "date": "2025-01-10", "description": "Removed", "is_deleted": 1},
            ],
        )
        conn.execute(
            text(
                "INSERT INTO transaction_participant "
                "(transaction_id, user_id, amount, type, category_id) "
                "VALUES (:transaction_id, :user_id, :amount, :type, :category_id)"
            ),
            [
                {"transaction_id": "t1", "user_id": "alice", "amount": "33.34", "type": "EXPENSE", "category_id": "food"},
                {"transaction_id": "t1", "user_id": "bob", "amount": "33.33", "type": "EXPENSE", "category_id": "food"},
                {"transaction_id": "t2", "user_id": "alice", "amount": "500", "type": "EXPENSE", "category_id": "rent"},
                {"transaction_id": "t3", "user_id": "alice", "amount": "2000", "type": "INCOME", "category_id": "salary"},
                {"transaction_id": "t4", "user_id": "alice", "amount": "99", "type": "EXPENSE", "category_id": "food"},
            ],
        )
    return db_port


def test_fetch_legs_returns_user_legs_of_live_transactions(seeded_port) -> None:
    """Deleted transactions and other users' legs are excluded."""
    repository = SqlAlchemyLegsRepository(seeded_port)

    legs = repository.fetch_legs("alice", None, None)

    assert [leg.transaction_id for leg in legs] == ["t1", "t2", "t3"]
    assert all(leg.participant_id == "alice" for leg in legs)
    dinner = legs[0]
    assert dinner.amount == Money(3334, "INR")
    assert dinner.direction is Direction.EXPENSE
    assert dinner.date == date(2025, 1, 5)
    assert dinner.category_name == "Food"
    assert dinner.category_icon == "utensils"
    assert dinner.description == "Dinner"
    assert legs[2].direction is Direction.INCOME


def test_fetch_legs_applies_inclusive_date_bounds(seeded_port) -> None:
    repository = SqlAlchemyLegsRepository(seeded_port)

    legs = repository.fetch_legs("alice", date(2025, 1, 5), date(2025, 1, 20))

    assert [leg.transaction_id for leg in legs] == ["t1", "t2"]


def test_fetch_legs_filters_categories(seeded_port) -> None:
    repository = SqlAlchemyLegsRepository(seeded_port)

    legs = repository.fetch_legs("alice", None, None, category_ids=["rent", " "])

    assert [leg.category_id for leg in legs] == ["rent"]


def test_fetch_legs_uses_configured_currency(seeded_port) -> None:
    repository = SqlAlchemyLegsRepository(seeded_port, currency="USD", scale=2)

    legs = repository.fetch_legs("bob", None, None)

    assert legs[0].amount == Money(3333, "USD", 2)


def test_fetch_legs_returns_empty_list_for_unknown_user(seeded_port) -> None:
    repository = SqlAlchemyLegsRepository(seeded_port)

    assert repository.fetch_legs("carol", None, None) == []


@pytest.fixture
def listing_port(ledger_engine, db_port):
    with ledger_engine.begin() as conn:
        conn.execute(
            text(
                'INSERT INTO "transaction" (id, date, description, notes, is_deleted) '
                "VALUES (:id, :date, :description, :notes, :is_deleted)"
            ),
            [
                {"id": "t1", "date": "2025-01-05", "description": "Dinner at Luigi's", "notes": None, "is_deleted": 0},
                {"id": "t2", "date": "2025-01-20", "description": "January rent", "notes": "Paid via bank", "is_deleted": 0},
                {"id": "t3", "date": "2025-02-01", "description": "Payday", "notes": "50% bonus", "is_deleted": 0},
                {"id": "t4", "date": "2025-01-10", "description": "Removed dinner", "notes": None, "is_deleted": 1},
                {"id": "t5", "date": "2025-01-25", "description": "Groceries", "notes": "Weekly DINNER prep", "is_deleted": 0},
                {"id": "t6", "date": "2025-01-25", "description": None, "notes": "500 grams of coffee", "is_deleted": 0},
            ],
        )
        conn.execute(
            text(
                "INSERT INTO transaction_participant "
                "(transaction_id, user_id, amount, type, category_id) "
                "VALUES (:transaction_id, :user_id, :amount, :type, :category_id)"
            ),
            [
                {"transaction_id": "t1", "user_id": "alice", "amount": "33.34", "type": "EXPENSE", "category_id": "food"},
                {"transaction_id": "t1", "user_id": "bob", "amount": "33.33", "type": "EXPENSE", "category_id": "food"},
                {"transaction_id": "t2", "user_id": "alice", "amount": "500", "type": "EXPENSE", "category_id": "rent"},
                {"transaction_id": "t3", "user_id": "alice", "amount": "2000", "type": "INCOME", "category_id": "salary"},
                {"transaction_id": "t4", "user_id": "alice", "amount": "99", "type": "EXPENSE", "category_id": "food"},
                {"transaction_id": "t5", "user_id": "alice", "amount": "80", "type": "EXPENSE", "category_id": "food"},
                {"transaction_id": "t6", "user_id": "alice", "amount": "12.50", "type": "EXPENSE", "category_id": "food"},
            ],
        )
    return db_port


def _ids(page) -> list[str]:
    return [leg.transaction_id for leg in page.legs]


def test_search_legs_defaults_to_newest_first(listing_port) -> None:
    repository = SqlAlchemyLegsRepository(listing_port)

    page = repository.search_legs("alice", None, None)

    assert _ids(page) == ["t3", "t6", "t5", "t2", "t1"]
    assert page.total_count == 5
    assert page.has_more is False
    assert page.legs[3].notes == "Paid via bank"


def test_search_legs_matches_description_or_notes_ignoring_case(
    listing_port,
) -> None:
    repository = SqlAlchemyLegsRepository(listing_port)

    page = repository.search_legs("alice", None, None, search="  dinner ")

    assert _ids(page) == ["t5", "t1"]
    assert page.total_count == 2


def test_search_legs_treats_wildcards_literally(listing_port) -> None:
    repository = SqlAlchemyLegsRepository(listing_port)

    page = repository.search_legs("alice", None, None, search="50%")

    assert _ids(page) == ["t3"]


def test_search_legs_paginates_by_amount(listing_port) -> None:
    repository = SqlAlchemyLegsRepository(listing_port)

    first = repository.search_legs(
        "alice", None, None, sort=LegSort.AMOUNT_DESC, limit=2
    )
    last = repository.search_legs(
        "alice", None, None, sort=LegSort.AMOUNT_DESC, limit=2, offset=4
    )

    assert _ids(first) == ["t3", "t2"]
    assert first.total_count == 5
    assert first.has_more is True
    assert _ids(last) == ["t6"]
    assert last.total_count == 5
    assert last.has_more is False


def test_search_legs_sorts_by_amount_ascending(listing_port) -> None:
    repository = SqlAlchemyLegsRepository(listing_port)

    page = repository.search_legs("alice", None, None, sort=LegSort.AMOUNT_ASC)

    assert [leg.amount for leg in page.legs] == [
        Money.of("12.50"),
        Money.of("33.34"),
        Money.of("80"),
        Money.of("500"),
        Money.of("2000"),
    ]


def test_search_legs_combines_dates_and_categories(listing_port) -> None:
    repository = SqlAlchemyLegsRepository(listing_port)

    page = repository.search_legs(
        "alice",
        date(2025, 1, 1),
        date(2025, 1, 31),
        category_ids=["food"],
        sort=LegSort.DATE_ASC,
    )

    assert _ids(page) == ["t1", "t5", "t6"]
    assert page.total_count == 3
