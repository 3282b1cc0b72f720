"""Domain package for allocation rules, budget analytics and core models."""

from .constants import DEFAULT_CURRENCY, minor_unit_scale
from .errors import (
    DivisionDegenerate,
    InvalidAmount,
    InvalidSplit,
    InvalidWindow,
    LedgerCoreError,
)
from .models import (
    Allocation,
    BudgetClassification,
    BudgetOverview,
    BudgetStatus,
    BudgetWindow,
    CategoryTotal,
    Direction,
    FinanceSummary,
    IncomeExpensePoint,
    Leg,
    Money,
    MonthlyTrendPoint,
    ParticipantInput,
    PeriodComparison,
    ReportingWindow,
    SplitPolicy,
)
from .policies import classify_budget_usage
from .services import (
    allocate,
    breakdown_by_category,
    budget_overview,
    budget_status,
    build_legs,
    compare_periods,
    find_overlapping_budget,
    income_expense_series,
    monthly_trend,
    summarize,
)

__all__ = [
    "DEFAULT_CURRENCY",
    "minor_unit_scale",
    "DivisionDegenerate",
    "InvalidAmount",
    "InvalidSplit",
    "InvalidWindow",
    "LedgerCoreError",
    "Allocation",
    "BudgetClassification",
    "BudgetOverview",
    "BudgetStatus",
    "BudgetWindow",
    "CategoryTotal",
    "Direction",
    "FinanceSummary",
    "IncomeExpensePoint",
    "Leg",
    "Money",
    "MonthlyTrendPoint",
    "ParticipantInput",
    "PeriodComparison",
    "ReportingWindow",
    "SplitPolicy",
    "classify_budget_usage",
    "allocate",
    "breakdown_by_category",
    "budget_overview",
    "budget_status",
    "build_legs",
    "compare_periods",
    "find_overlapping_budget",
    "income_expense_series",
    "monthly_trend",
    "summarize",
]
