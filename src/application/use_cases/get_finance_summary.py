"""Use case to compute income, expense and savings for a user."""

from datetime import date

from src.application.ports.legs_repository import LegsRepositoryPort
from src.domain.constants import DEFAULT_CURRENCY
from src.domain.errors import LedgerCoreError
from src.domain.models import FinanceSummary, ReportingWindow
from src.domain.services.aggregation import summarize
from src.infrastructure.logging.logger import get_app_logger


class GetFinanceSummaryUseCase:
    """Compute the finance summary of a user over a period."""

    def __init__(
        self,
        legs_repository: LegsRepositoryPort,
        logger=None,
        currency: str = DEFAULT_CURRENCY,
    ) -> None:
        """Initialize the use case.

        Args:
            legs_repository: Port providing the user's legs.
            logger: Optional logger compatible with logging.Logger-like API.
            currency: Currency reported when the user has no legs.
        """
        self._legs_repository = legs_repository
        self._logger = logger or get_app_logger()
        self._currency = currency

    def execute(
        self,
        user_id: str,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> FinanceSummary:
        """Return totals, net savings and savings rate for the period.

        Args:
            user_id: Identifier of the requesting user.
            start_date: Optional inclusive lower bound.
            end_date: Optional inclusive upper bound.

        Returns:
            FinanceSummary: Aggregated figures for the period.
        """
        window = ReportingWindow(start=start_date, end=end_date)
        legs = self._legs_repository.fetch_legs(user_id, start_date, end_date)
        self._logger.info(f"Fetched {len(legs)} legs for user {user_id}")
        try:
            summary = summarize(legs, window, currency=self._currency)
        except LedgerCoreError as exc:
            self._logger.warning(f"Finance summary failed for {user_id}: {exc}")
            raise
        self._logger.info(
            f"Summary for {user_id}: income={summary.total_income}, "
            f"expense={summary.total_expense}, "
            f"savings_rate={summary.savings_rate}"
        )
        return summary


__all__ = ["GetFinanceSummaryUseCase"]
