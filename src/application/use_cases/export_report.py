"""Use case exporting a user's legs and finance summary as CSV."""

from collections.abc import Iterable
from datetime import date

from src.application.ports.legs_repository import LegsRepositoryPort
from src.application.use_cases.get_finance_summary import (
    GetFinanceSummaryUseCase,
)
from src.application.use_cases.list_legs import ListLegsUseCase
from src.domain.constants import DEFAULT_CURRENCY, EXPORT_ROW_LIMIT
from src.domain.models import LegSort
from src.domain.services.export import legs_to_csv, summary_to_csv
from src.infrastructure.logging.logger import get_app_logger


class ExportReportUseCase:
    """Build CSV exports from the same data as the listing and summary."""

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

    def transactions_csv(
        self,
        user_id: str,
        start_date: date | None = None,
        end_date: date | None = None,
        category_ids: Iterable[str] | None = None,
        search: str | None = None,
        sort: LegSort | str | None = LegSort.DATE_DESC,
    ) -> str:
        """Export the filtered legs, up to ``EXPORT_ROW_LIMIT`` rows.

        Args:
            user_id: Identifier of the requesting user.
            start_date: Optional inclusive lower bound.
            end_date: Optional inclusive upper bound.
            category_ids: Optional categories to keep.
            search: Optional text matched against description and notes.
            sort: Row ordering, as accepted by ``ListLegsUseCase``.

        Returns:
            str: CSV with Date, Description, Category, Amount and Type.
        """
        page = ListLegsUseCase(self._legs_repository, logger=self._logger).execute(
            user_id,
            start_date,
            end_date,
            category_ids=category_ids,
            search=search,
            sort=sort,
            limit=EXPORT_ROW_LIMIT,
        )
        if page.has_more:
            self._logger.warning(
                f"Export for {user_id} truncated to {len(page.legs)} "
                f"of {page.total_count} legs"
            )
        self._logger.info(f"Exported {len(page.legs)} legs for {user_id}")
        return legs_to_csv(page.legs)

    def summary_csv(
        self,
        user_id: str,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> str:
        """Export the finance summary of the period as Metric/Value rows."""
        summary = GetFinanceSummaryUseCase(
            self._legs_repository,
            logger=self._logger,
            currency=self._currency,
        ).execute(user_id, start_date, end_date)
        return summary_to_csv(summary)


__all__ = ["ExportReportUseCase"]
