"""Use case to compute monthly spending series."""

from collections.abc import Iterable
from datetime import date

from src.application.ports.legs_repository import LegsRepositoryPort
from src.domain.constants import DEFAULT_CURRENCY
from src.domain.models import (
    IncomeExpensePoint,
    MonthlyTrendPoint,
    ReportingWindow,
)
from src.domain.services.aggregation import (
    income_expense_series,
    monthly_trend,
)
from src.domain.services.normalization import normalize_category_filter
from src.infrastructure.logging.logger import get_app_logger


class GetMonthlyTrendUseCase:
    """Bucket a user's legs by calendar month."""

    def __init__(
        self,
        legs_repository: LegsRepositoryPort,
        logger=None,
        currency: str = DEFAULT_CURRENCY,
    ) -> None:
        self._legs_repository = legs_repository
        self._logger = logger or get_app_logger()
        self._currency = currency

    def execute(
        self,
        user_id: str,
        start_date: date | None = None,
        end_date: date | None = None,
        category_ids: Iterable[str] | None = None,
    ) -> list[MonthlyTrendPoint]:
        """Return monthly expense totals in ascending month order."""
        categories = normalize_category_filter(category_ids)
        legs = self._legs_repository.fetch_legs(
            user_id,
            start_date,
            end_date,
            category_ids=categories,
        )
        points = monthly_trend(
            legs,
            ReportingWindow(start=start_date, end=end_date),
            categories,
            currency=self._currency,
        )
        self._logger.info(f"Computed {len(points)} trend months for {user_id}")
        return points

    def income_vs_expenses(
        self,
        user_id: str,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[IncomeExpensePoint]:
        """Return monthly income and expense totals in ascending order."""
        legs = self._legs_repository.fetch_legs(user_id, start_date, end_date)
        points = income_expense_series(
            legs,
            ReportingWindow(start=start_date, end=end_date),
            currency=self._currency,
        )
        self._logger.info(
            f"Computed {len(points)} income/expense months for {user_id}"
        )
        return points


__all__ = ["GetMonthlyTrendUseCase"]
