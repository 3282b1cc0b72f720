"""Tests for the budget classification policy."""

import pytest

from src.domain.models import BudgetClassification, Money
from src.domain.policies import classify_budget_usage


@pytest.mark.parametrize(
    ("spent", "budgeted", "expected"),
    [
        ("0", "100", BudgetClassification.WITHIN_LIMIT),
        ("79.99", "100", BudgetClassification.WITHIN_LIMIT),
        ("80.00", "100", BudgetClassification.NEAR_LIMIT),
        ("100.00", "100", BudgetClassification.NEAR_LIMIT),
        ("100.01", "100", BudgetClassification.OVER_LIMIT),
        ("50", "0", BudgetClassification.WITHIN_LIMIT),
    ],
)
def test_classify_budget_usage_thresholds(spent, budgeted, expected) -> None:
    assert classify_budget_usage(Money.of(spent), Money.of(budgeted)) is expected
