"""Budget usage classification policy."""

from src.domain.constants import NEAR_LIMIT_PERCENTAGE, OVER_LIMIT_PERCENTAGE
from src.domain.models import BudgetClassification, Money


def classify_budget_usage(
    spent: Money,
    budgeted: Money,
) -> BudgetClassification:
    """Classify spending against a budgeted amount.

    The comparison uses exact minor units so a percentage that rounds to
    80.0 or 100.0 does not flip the classification.

    Args:
        spent: Amount spent within the budget window.
        budgeted: Budgeted amount of the window.

    Returns:
        BudgetClassification: WITHIN_LIMIT below 80 %, NEAR_LIMIT from 80 %
        up to and including 100 %, OVER_LIMIT above 100 %. A zero budget is
        always WITHIN_LIMIT.
    """
    if budgeted.minor_units <= 0:
        return BudgetClassification.WITHIN_LIMIT
    used = spent.minor_units * 100
    if used > budgeted.minor_units * OVER_LIMIT_PERCENTAGE:
        return BudgetClassification.OVER_LIMIT
    if used >= budgeted.minor_units * NEAR_LIMIT_PERCENTAGE:
        return BudgetClassification.NEAR_LIMIT
    return BudgetClassification.WITHIN_LIMIT


__all__ = ["classify_budget_usage"]
