"""Use case to break a user's expenses down by category."""

from collections.abc import Iterable
from datetime import date

from src.application.ports.legs_repository import LegsRepositoryPort
from src.domain.constants import DEFAULT_CURRENCY
from src.domain.errors import LedgerCoreError
from src.domain.models import CategoryTotal, ReportingWindow
from src.domain.services.aggregation import breakdown_by_category
from src.domain.services.normalization import normalize_category_filter
from src.infrastructure.logging.logger import get_app_logger


class GetCategoryBreakdownUseCase:
    """Group a user's expenses by category."""

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
        category_ids: Iterable[str] | None = None,
    ) -> list[CategoryTotal]:
        """Return category totals sorted by amount descending.

        Args:
            user_id: Identifier of the requesting user.
            start_date: Optional inclusive lower bound.
            end_date: Optional inclusive upper bound.
            category_ids: Optional categories to restrict the breakdown to.

        Returns:
            list[CategoryTotal]: Totals with their share of the filtered
            expense total.
        """
        categories = normalize_category_filter(category_ids)
        legs = self._legs_repository.fetch_legs(
            user_id,
            start_date,
            end_date,
            category_ids=categories,
        )
        try:
            breakdown = breakdown_by_category(
                legs,
                ReportingWindow(start=start_date, end=end_date),
                categories,
                currency=self._currency,
            )
        except LedgerCoreError as exc:
            self._logger.warning(
                f"Category breakdown failed for {user_id}: {exc}"
            )
            raise
        self._logger.info(
            f"Computed {len(breakdown)} category totals for {user_id}"
        )
        return breakdown


__all__ = ["GetCategoryBreakdownUseCase"]
