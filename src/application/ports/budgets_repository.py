"""Port for reading budget windows."""

from datetime import date
from typing import Protocol

from src.domain.models import BudgetWindow


class BudgetsRepositoryPort(Protocol):
    """Port exposing the budget windows a user defined."""

    def fetch_budget_windows(
        self,
        user_id: str,
        start_date: date | None,
        end_date: date | None,
    ) -> list[BudgetWindow]:
        """Return budget windows intersecting the dates."""


__all__ = ["BudgetsRepositoryPort"]
