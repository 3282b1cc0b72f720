"""Domain services package."""

from .aggregation import (
    breakdown_by_category,
    budget_overview,
    budget_status,
    compare_periods,
    income_expense_series,
    monthly_trend,
    summarize,
)
from .allocation import allocate, build_legs, split_equal
from .export import legs_to_csv, summary_to_csv
from .normalization import (
    normalize_category_filter,
    normalize_participant_id,
    normalize_search_term,
)
from .validation import (
    find_overlapping_budget,
    validate_budget_windows,
    validate_legs,
    validate_page,
    validate_window,
)

__all__ = [
    "allocate",
    "build_legs",
    "split_equal",
    "breakdown_by_category",
    "budget_overview",
    "budget_status",
    "compare_periods",
    "income_expense_series",
    "monthly_trend",
    "summarize",
    "legs_to_csv",
    "summary_to_csv",
    "normalize_category_filter",
    "normalize_participant_id",
    "normalize_search_term",
    "find_overlapping_budget",
    "validate_budget_windows",
    "validate_legs",
    "validate_page",
    "validate_window",
]
