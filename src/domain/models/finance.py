"""Domain models for derived budget and analytics figures.

Every value here is recomputed per query and never persisted.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum

from src.domain.models.money import Money


class BudgetClassification(str, Enum):
    """Spending level of a budget window."""

    WITHIN_LIMIT = "WITHIN_LIMIT"
    NEAR_LIMIT = "NEAR_LIMIT"
    OVER_LIMIT = "OVER_LIMIT"


@dataclass(frozen=True)
class LargestExpense:
    """Single largest expense leg of a window."""

    category_id: str
    category_name: str | None
    amount: Money
    percentage: Decimal


@dataclass(frozen=True)
class FinanceSummary:
    """Income and expense totals over a window.

    Attributes:
        total_income: Sum of income legs.
        total_expense: Sum of expense legs.
        net_savings: Income minus expense.
        savings_rate: Net savings as a percentage of income.
        largest_expense: Largest expense leg, if any.
    """

    total_income: Money
    total_expense: Money
    net_savings: Money
    savings_rate: Decimal
    largest_expense: LargestExpense | None = None


@dataclass(frozen=True)
class CategoryTotal:
    """Expense total aggregated for a given category."""

    category_id: str
    category_name: str | None
    category_icon: str | None
    amount: Money
    percentage: Decimal


@dataclass(frozen=True)
class MonthlyTrendPoint:
    """Expense totals for one calendar month."""

    month: date
    total: Money
    category_totals: dict[str, Money] = field(default_factory=dict)


@dataclass(frozen=True)
class IncomeExpensePoint:
    """Income and expense totals for one calendar month."""

    month: date
    income: Money
    expenses: Money


@dataclass(frozen=True)
class BudgetStatus:
    """Budget-versus-actual figures for one budget window."""

    budget_id: str
    category_id: str
    category_name: str | None
    budgeted: Money
    spent: Money
    percentage_used: Decimal
    classification: BudgetClassification

    @property
    def remaining(self) -> Money:
        """Return budgeted minus spent (negative when over budget)."""
        return self.budgeted - self.spent


@dataclass(frozen=True)
class BudgetOverview:
    """Aggregate view over a set of budget windows."""

    total_budgeted: Money
    total_spent: Money
    percentage_used: Decimal
    remaining_days: int
    over_limit: list[BudgetStatus]
    near_limit: list[BudgetStatus]


@dataclass(frozen=True)
class PeriodComparison:
    """Summary of a window next to the window right before it."""

    current: FinanceSummary
    previous: FinanceSummary
    income_change: Decimal
    expense_change: Decimal
    balance_change: Decimal


__all__ = [
    "BudgetClassification",
    "BudgetOverview",
    "BudgetStatus",
    "CategoryTotal",
    "FinanceSummary",
    "IncomeExpensePoint",
    "LargestExpense",
    "MonthlyTrendPoint",
    "PeriodComparison",
]
