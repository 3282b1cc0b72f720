"""Domain validation helpers.

Aggregation inputs are checked up front so that a malformed leg or window
fails the whole call instead of being clamped.
"""

from collections.abc import Iterable

from src.domain.errors import InvalidAmount, InvalidPage, InvalidWindow
from src.domain.models import BudgetWindow, Leg, Money, ReportingWindow


def validate_window(window: ReportingWindow | None) -> ReportingWindow:
    """Return a usable reporting window.

    Args:
        window: Optional window supplied by the caller.

    Returns:
        ReportingWindow: The window, or an all-time window when None.

    Raises:
        InvalidWindow: If the window starts after it ends.
    """
    if window is None:
        return ReportingWindow()
    if (
        window.start is not None
        and window.end is not None
        and window.start > window.end
    ):
        raise InvalidWindow(
            f"Window start {window.start} is after end {window.end}"
        )
    return window


def validate_page(limit: int, offset: int) -> None:
    """Check listing pagination arguments.

    Raises:
        InvalidPage: If the limit is not positive or the offset is negative.
    """
    if limit <= 0:
        raise InvalidPage(f"Page limit must be positive, got {limit}")
    if offset < 0:
        raise InvalidPage(f"Page offset must not be negative, got {offset}")


def validate_legs(legs: Iterable[Leg], currency: str | None = None) -> list[Leg]:
    """Materialize legs and check their amounts.

    Args:
        legs: Legs supplied by the caller.
        currency: Expected currency; defaults to the first leg's currency.

    Returns:
        list[Leg]: The legs in their original order.

    Raises:
        InvalidAmount: If a leg is negative or uses another currency.
    """
    materialized = list(legs)
    reference: Money | None = None
    for leg in materialized:
        if leg.amount.is_negative:
            raise InvalidAmount(
                f"Leg amount is negative for transaction "
                f"{leg.transaction_id}: {leg.amount}"
            )
        if reference is None:
            reference = leg.amount
            if currency is not None and reference.currency != currency:
                raise InvalidAmount(
                    f"Leg currency {reference.currency} does not match "
                    f"{currency}"
                )
            continue
        if (
            leg.amount.currency != reference.currency
            or leg.amount.scale != reference.scale
        ):
            raise InvalidAmount(
                "Legs mix currencies: "
                f"{reference.currency} and {leg.amount.currency}"
            )
    return materialized


def validate_budget_windows(
    budget_windows: Iterable[BudgetWindow],
) -> list[BudgetWindow]:
    """Materialize budget windows and check their bounds and amounts.

    Raises:
        InvalidWindow: If a window starts after it ends.
        InvalidAmount: If a budgeted amount is negative.
    """
    materialized = list(budget_windows)
    for budget in materialized:
        if budget.start_date > budget.end_date:
            raise InvalidWindow(
                f"Budget {budget.budget_id} starts {budget.start_date} "
                f"after it ends {budget.end_date}"
            )
        if budget.amount.is_negative:
            raise InvalidAmount(
                f"Budget {budget.budget_id} has a negative amount: "
                f"{budget.amount}"
            )
    return materialized


def find_overlapping_budget(
    candidate: BudgetWindow,
    existing: Iterable[BudgetWindow],
) -> BudgetWindow | None:
    """Return an existing budget clashing with a candidate, if any.

    Two budgets clash when they target the same category and share at
    least one day. The candidate's own id is ignored so edits can be
    checked against the stored set.

    Args:
        candidate: Budget window being created or edited.
        existing: Budget windows already defined by the user.

    Returns:
        BudgetWindow | None: First clashing window in input order.
    """
    validate_budget_windows([candidate])
    for budget in existing:
        if budget.budget_id == candidate.budget_id:
            continue
        if budget.category_id != candidate.category_id:
            continue
        if budget.overlaps(candidate):
            return budget
    return None


__all__ = [
    "find_overlapping_budget",
    "validate_budget_windows",
    "validate_legs",
    "validate_page",
    "validate_window",
]
