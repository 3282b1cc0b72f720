"""Use case listing a user's legs with filters, search and pagination."""

from collections.abc import Iterable
from datetime import date

from src.application.ports.legs_repository import LegsRepositoryPort
from src.domain.constants import DEFAULT_PAGE_SIZE
from src.domain.errors import LedgerCoreError
from src.domain.models import LegPage, LegSort, ReportingWindow
from src.domain.services.normalization import (
    normalize_category_filter,
    normalize_search_term,
)
from src.domain.services.validation import validate_page, validate_window
from src.infrastructure.logging.logger import get_app_logger


class ListLegsUseCase:
    """Return one page of a user's legs."""

    def __init__(self, legs_repository: LegsRepositoryPort, logger=None) -> None:
        """Initialize the use case.

        Args:
            legs_repository: Port providing the user's legs.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._legs_repository = legs_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        user_id: str,
        start_date: date | None = None,
        end_date: date | None = None,
        category_ids: Iterable[str] | None = None,
        search: str | None = None,
        sort: LegSort | str | None = LegSort.DATE_DESC,
        limit: int = DEFAULT_PAGE_SIZE,
        offset: int = 0,
    ) -> LegPage:
        """List legs matching the filters.

        Args:
            user_id: Identifier of the requesting user.
            start_date: Optional inclusive lower bound.
            end_date: Optional inclusive upper bound.
            category_ids: Optional categories to keep.
            search: Optional text matched against description and notes.
            sort: Ordering name such as ``"amount-desc"``; unknown names
                fall back to newest first.
            limit: Maximum number of legs on the page.
            offset: Number of matching legs to skip.

        Returns:
            LegPage: The requested page and the total match count.

        Raises:
            InvalidWindow: If the start date is after the end date.
            InvalidPage: If limit or offset is out of range.
        """
        try:
            validate_window(ReportingWindow(start=start_date, end=end_date))
            validate_page(limit, offset)
        except LedgerCoreError as exc:
            self._logger.warning(f"Leg listing rejected for {user_id}: {exc}")
            raise
        page = self._legs_repository.search_legs(
            user_id,
            start_date,
            end_date,
            category_ids=normalize_category_filter(category_ids),
            search=normalize_search_term(search),
            sort=self._resolve_sort(sort),
            limit=limit,
            offset=offset,
        )
        self._logger.info(
            f"Listed {len(page.legs)} of {page.total_count} legs for {user_id}"
        )
        return page

    def _resolve_sort(self, sort: LegSort | str | None) -> LegSort:
        if sort is None:
            return LegSort.DATE_DESC
        try:
            return LegSort(sort)
        except ValueError:
            self._logger.warning(
                f"Unknown sort '{sort}', using {LegSort.DATE_DESC.value}"
            )
            return LegSort.DATE_DESC


__all__ = ["ListLegsUseCase"]
