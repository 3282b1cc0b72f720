"""Application use cases package."""

from .allocate_expense import AllocateExpenseUseCase, AllocationResult
from .compare_periods import ComparePeriodsUseCase
from .export_report import ExportReportUseCase
from .get_budget_status import GetBudgetStatusUseCase
from .get_category_breakdown import GetCategoryBreakdownUseCase
from .get_finance_summary import GetFinanceSummaryUseCase
from .get_monthly_trend import GetMonthlyTrendUseCase
from .list_legs import ListLegsUseCase

__all__ = [
    "AllocateExpenseUseCase",
    "AllocationResult",
    "ComparePeriodsUseCase",
    "ExportReportUseCase",
    "GetBudgetStatusUseCase",
    "GetCategoryBreakdownUseCase",
    "GetFinanceSummaryUseCase",
    "GetMonthlyTrendUseCase",
    "ListLegsUseCase",
]
