"""Tests for the CSV export helpers."""

from datetime import date
from decimal import Decimal

from src.domain.models import (
    Direction,
    FinanceSummary,
    LargestExpense,
    Leg,
    Money,
)
from src.domain.services.export import legs_to_csv, summary_to_csv


def test_legs_to_csv_signs_amounts_and_escapes_descriptions() -> None:
    legs = [
        Leg(
            participant_id="alice",
            amount=Money.of("33.34"),
            direction=Direction.EXPENSE,
            category_id="food",
            transaction_id="t1",
            date=date(2025, 1, 5),
            category_name="Food",
            description='Dinner at "Luigi\'s", downtown',
        ),
        Leg(
            participant_id="alice",
            amount=Money.of("2000"),
            direction=Direction.INCOME,
            category_id="salary",
            transaction_id="t2",
            date=date(2025, 2, 1),
        ),
    ]

    assert legs_to_csv(legs) == (
        "Date,Description,Category,Amount,Type\n"
        '2025-01-05,"Dinner at ""Luigi\'s"", downtown",Food,-33.34,expense\n'
        "2025-02-01,,salary,2000.00,income\n"
    )


def test_legs_to_csv_without_legs_keeps_header() -> None:
    assert legs_to_csv([]) == "Date,Description,Category,Amount,Type\n"


def test_summary_to_csv_quotes_every_cell() -> None:
    summary = FinanceSummary(
        total_income=Money.of("2000"),
        total_expense=Money.of("500"),
        net_savings=Money.of("1500"),
        savings_rate=Decimal("75.00"),
        largest_expense=LargestExpense(
            category_id="rent",
            category_name="Rent",
            amount=Money.of("500"),
            percentage=Decimal("100.00"),
        ),
    )

    assert summary_to_csv(summary).splitlines() == [
        '"Metric","Value"',
        '"Total Income","2000.00"',
        '"Total Expenses","500.00"',
        '"Net Savings","1500.00"',
        '"Savings Rate","75.00%"',
        '"Largest Expense Category","Rent"',
        '"Largest Expense Amount","500.00"',
        '"Largest Expense Percentage","100.00%"',
    ]


def test_summary_to_csv_without_expenses_reports_placeholder() -> None:
    summary = FinanceSummary(
        total_income=Money.of("10"),
        total_expense=Money.zero(),
        net_savings=Money.of("10"),
        savings_rate=Decimal("100.00"),
    )

    rows = summary_to_csv(summary).splitlines()

    assert rows[-3:] == [
        '"Largest Expense Category","N/A"',
        '"Largest Expense Amount","0.00"',
        '"Largest Expense Percentage","0.00%"',
    ]
