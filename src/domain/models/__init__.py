"""Domain models package."""

from .allocation import (
    Allocation,
    ParticipantId,
    ParticipantInput,
    SplitPolicy,
)
from .finance import (
    BudgetClassification,
    BudgetOverview,
    BudgetStatus,
    CategoryTotal,
    FinanceSummary,
    IncomeExpensePoint,
    LargestExpense,
    MonthlyTrendPoint,
    PeriodComparison,
)
from .ledger import (
    BudgetWindow,
    Direction,
    Leg,
    LegPage,
    LegSort,
    ReportingWindow,
)
from .money import Money, sum_money

__all__ = [
    "Allocation",
    "ParticipantId",
    "ParticipantInput",
    "SplitPolicy",
    "BudgetClassification",
    "BudgetOverview",
    "BudgetStatus",
    "CategoryTotal",
    "FinanceSummary",
    "IncomeExpensePoint",
    "LargestExpense",
    "MonthlyTrendPoint",
    "PeriodComparison",
    "BudgetWindow",
    "Direction",
    "Leg",
    "LegPage",
    "LegSort",
    "ReportingWindow",
    "Money",
    "sum_money",
]
