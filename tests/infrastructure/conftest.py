"""Shared fixtures for repository tests backed by in-memory SQLite."""

from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine, text
from sqlalchemy.pool import StaticPool

SCHEMA = [
    """
    CREATE TABLE category (
        id TEXT PRIMARY KEY,
        name TEXT NOT NULL,
        icon TEXT
    )
    """,
    """
    CREATE TABLE "transaction" (
        id TEXT PRIMARY KEY,
        date DATE NOT NULL,
        description TEXT,
        notes TEXT,
        is_deleted BOOLEAN NOT NULL DEFAULT 0
    )
    """,
    """
    CREATE TABLE transaction_participant (
        transaction_id TEXT NOT NULL,
        user_id TEXT NOT NULL,
        amount NUMERIC(12, 2) NOT NULL,
        type TEXT NOT NULL,
        category_id TEXT NOT NULL
    )
    """,
    """
    CREATE TABLE budget (
        id TEXT PRIMARY KEY,
        user_id TEXT NOT NULL,
        category_id TEXT NOT NULL,
        amount NUMERIC(12, 2) NOT NULL,
        start_date DATE NOT NULL,
        end_date DATE NOT NULL
    )
    """,
]


@pytest.fixture
def ledger_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    with engine.begin() as conn:
        for statement in SCHEMA:
            conn.execute(text(statement))
        conn.execute(
            text("INSERT INTO category (id, name, icon) VALUES (:id, :name, :icon)"),
            [
                {"id": "food", "name": "Food", "icon": "utensils"},
                {"id": "rent", "name": "Rent", "icon": "home"},
                {"id": "salary", "name": "Salary", "icon": None},
            ],
        )
    yield engine
    engine.dispose()


@pytest.fixture
def db_port(ledger_engine):
    port = MagicMock()
    port.get_ledger_engine.return_value = ledger_engine
    return port
