"""Use case comparing a period with the one preceding it."""

from datetime import date

from src.application.ports.legs_repository import LegsRepositoryPort
from src.domain.constants import DEFAULT_CURRENCY
from src.domain.errors import InvalidWindow, LedgerCoreError
from src.domain.models import PeriodComparison, ReportingWindow
from src.domain.services.aggregation import compare_periods
from src.domain.services.validation import validate_window
from src.infrastructure.logging.logger import get_app_logger


class ComparePeriodsUseCase:
    """Compare a bounded period with the equally long period before it."""

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
        start_date: date,
        end_date: date,
    ) -> PeriodComparison:
        """Return both summaries and their change percentages.

        Raises:
            InvalidWindow: If the period is unbounded or reversed.
        """
        try:
            window = validate_window(
                ReportingWindow(start=start_date, end=end_date)
            )
            if window.start is None or window.end is None:
                raise InvalidWindow("Period comparison requires a bounded window")
        except InvalidWindow as exc:
            self._logger.warning(f"Cannot compare periods for {user_id}: {exc}")
            raise
        previous = window.preceding()
        legs = self._legs_repository.fetch_legs(
            user_id,
            previous.start,
            end_date,
        )
        try:
            comparison = compare_periods(legs, window, currency=self._currency)
        except LedgerCoreError as exc:
            self._logger.warning(f"Period comparison failed for {user_id}: {exc}")
            raise
        self._logger.info(
            f"Compared {start_date}..{end_date} with "
            f"{previous.start}..{previous.end} for {user_id}"
        )
        return comparison


__all__ = ["ComparePeriodsUseCase"]
