"""Tests for domain validation helpers."""

from datetime import date

import pytest

from src.domain.errors import InvalidWindow
from src.domain.models import BudgetWindow, Money, ReportingWindow
from src.domain.services.normalization import normalize_category_filter
from src.domain.services.validation import (
    find_overlapping_budget,
    validate_window,
)


def _budget(budget_id, category_id, start, end) -> BudgetWindow:
    return BudgetWindow(
        budget_id=budget_id,
        category_id=category_id,
        amount=Money.of("100"),
        start_date=start,
        end_date=end,
    )


EXISTING = [
    _budget("b1", "food", date(2025, 1, 1), date(2025, 1, 31)),
    _budget("b2", "rent", date(2025, 1, 1), date(2025, 12, 31)),
]


def test_validate_window_defaults_to_all_time() -> None:
    assert validate_window(None).is_all_time


def test_validate_window_accepts_single_day_window() -> None:
    window = ReportingWindow(date(2025, 1, 1), date(2025, 1, 1))

    assert validate_window(window) is window


def test_validate_window_rejects_reversed_bounds() -> None:
    with pytest.raises(InvalidWindow):
        validate_window(ReportingWindow(date(2025, 1, 2), date(2025, 1, 1)))


def test_overlap_detected_on_shared_boundary_day() -> None:
    candidate = _budget("new", "food", date(2025, 1, 31), date(2025, 2, 28))

    assert find_overlapping_budget(candidate, EXISTING) is EXISTING[0]


def test_overlap_ignores_other_categories_and_own_id() -> None:
    next_month = _budget("new", "food", date(2025, 2, 1), date(2025, 2, 28))
    edited = _budget("b1", "food", date(2025, 1, 10), date(2025, 1, 20))

    assert find_overlapping_budget(next_month, EXISTING) is None
    assert find_overlapping_budget(edited, EXISTING) is None


def test_overlap_check_rejects_reversed_candidate() -> None:
    candidate = _budget("new", "food", date(2025, 3, 1), date(2025, 2, 1))

    with pytest.raises(InvalidWindow):
        find_overlapping_budget(candidate, EXISTING)


def test_category_filter_normalization() -> None:
    assert normalize_category_filter(None) is None
    assert normalize_category_filter([]) is None
    assert normalize_category_filter([" ", ""]) is None
    assert normalize_category_filter([" food ", "rent"]) == frozenset(
        {"food", "rent"}
    )


def test_category_filter_accepts_single_string() -> None:
    assert normalize_category_filter("food") == frozenset({"food"})
    assert normalize_category_filter(" rent ") == frozenset({"rent"})
    assert normalize_category_filter("  ") is None


def test_preceding_window_has_equal_length() -> None:
    window = ReportingWindow(date(2025, 3, 1), date(2025, 3, 31))

    previous = window.preceding()

    assert previous == ReportingWindow(date(2025, 1, 29), date(2025, 2, 28))
