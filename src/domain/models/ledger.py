"""Domain models for transaction legs and date windows."""

from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum

from src.domain.models.money import Money


class Direction(str, Enum):
    """Direction of a leg from the participant's point of view."""

    INCOME = "INCOME"
    EXPENSE = "EXPENSE"


@dataclass(frozen=True)
class Leg:
    """One participant's monetary entry within a transaction."""

    participant_id: str
    amount: Money
    direction: Direction
    category_id: str
    transaction_id: str
    date: date
    category_name: str | None = None
    category_icon: str | None = None
    description: str | None = None
    notes: str | None = None

    @property
    def signed_amount(self) -> Money:
        """Return the amount with expenses negated."""
        if self.direction is Direction.EXPENSE:
            return -self.amount
        return self.amount


class LegSort(str, Enum):
    """Orderings accepted when listing legs."""

    DATE_ASC = "date-asc"
    DATE_DESC = "date-desc"
    AMOUNT_ASC = "amount-asc"
    AMOUNT_DESC = "amount-desc"


@dataclass(frozen=True)
class LegPage:
    """One page of a filtered leg listing.

    Attributes:
        legs: Legs of the page, in the requested order.
        total_count: Number of legs matching the filters across all pages.
        limit: Maximum page size that was requested.
        offset: Number of matching legs skipped before this page.
    """

    legs: list[Leg]
    total_count: int
    limit: int
    offset: int = 0

    @property
    def has_more(self) -> bool:
        return self.offset + len(self.legs) < self.total_count


@dataclass(frozen=True)
class ReportingWindow:
    """Inclusive date range; a missing bound is open-ended.

    Attributes:
        start: First day included, or None for no lower bound.
        end: Last day included, or None for no upper bound.
    """

    start: date | None = None
    end: date | None = None

    @property
    def is_all_time(self) -> bool:
        return self.start is None and self.end is None

    def contains(self, day: date) -> bool:
        """Return True when the day falls inside the window."""
        if self.start is not None and day < self.start:
            return False
        if self.end is not None and day > self.end:
            return False
        return True

    def preceding(self) -> "ReportingWindow":
        """Return the window of equal length ending the day before start.

        Raises:
            ValueError: If either bound is missing.
        """
        if self.start is None or self.end is None:
            raise ValueError("A bounded window is required")
        length = self.end - self.start
        previous_end = self.start - timedelta(days=1)
        return ReportingWindow(start=previous_end - length, end=previous_end)


@dataclass(frozen=True)
class BudgetWindow:
    """User-defined spending limit for a category over a date range."""

    budget_id: str
    category_id: str
    amount: Money
    start_date: date
    end_date: date
    category_name: str | None = None

    def contains(self, day: date) -> bool:
        """Return True when the day falls within [start_date, end_date]."""
        return self.start_date <= day <= self.end_date

    def overlaps(self, other: "BudgetWindow") -> bool:
        """Return True when both windows share at least one day."""
        return (
            self.start_date <= other.end_date
            and other.start_date <= self.end_date
        )


__all__ = [
    "BudgetWindow",
    "Direction",
    "Leg",
    "LegPage",
    "LegSort",
    "ReportingWindow",
]
