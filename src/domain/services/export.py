"""CSV renderings of leg listings and finance summaries."""

import csv
from collections.abc import Iterable
from decimal import Decimal
from io import StringIO

from src.domain.models import FinanceSummary, Leg

TRANSACTION_HEADERS = ["Date", "Description", "Category", "Amount", "Type"]
SUMMARY_HEADERS = ["Metric", "Value"]
NO_LARGEST_EXPENSE = "N/A"


def _percent(value: Decimal) -> str:
    return f"{value:.2f}%"


def legs_to_csv(legs: Iterable[Leg]) -> str:
    """Render legs as CSV, one row per leg.

    Amounts are signed from the participant's side (income positive,
    expenses negative) and the type column is lowercase.

    Args:
        legs: Legs in the order they should appear.

    Returns:
        str: CSV text with a header row and ``\\n`` line endings.
    """
    buffer = StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(TRANSACTION_HEADERS)
    for leg in legs:
        writer.writerow(
            [
                leg.date.isoformat(),
                leg.description or "",
                leg.category_name or leg.category_id,
                str(leg.signed_amount.amount),
                leg.direction.value.lower(),
            ]
        )
    return buffer.getvalue()


def summary_to_csv(summary: FinanceSummary) -> str:
    """Render a finance summary as quoted Metric/Value rows.

    Without a largest expense, the category reads ``N/A`` and its amount
    and percentage are zero.
    """
    largest = summary.largest_expense
    if largest is None:
        largest_rows = [
            ["Largest Expense Category", NO_LARGEST_EXPENSE],
            [
                "Largest Expense Amount",
                str(summary.total_expense.with_minor_units(0).amount),
            ],
            ["Largest Expense Percentage", _percent(Decimal(0))],
        ]
    else:
        largest_rows = [
            [
                "Largest Expense Category",
                largest.category_name or largest.category_id,
            ],
            ["Largest Expense Amount", str(largest.amount.amount)],
            ["Largest Expense Percentage", _percent(largest.percentage)],
        ]
    buffer = StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(SUMMARY_HEADERS)
    writer.writerows(
        [
            ["Total Income", str(summary.total_income.amount)],
            ["Total Expenses", str(summary.total_expense.amount)],
            ["Net Savings", str(summary.net_savings.amount)],
            ["Savings Rate", _percent(summary.savings_rate)],
        ]
        + largest_rows
    )
    return buffer.getvalue()


__all__ = [
    "NO_LARGEST_EXPENSE",
    "SUMMARY_HEADERS",
    "TRANSACTION_HEADERS",
    "legs_to_csv",
    "summary_to_csv",
]
