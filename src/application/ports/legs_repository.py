"""Port for reading transaction legs."""

from collections.abc import Iterable
from datetime import date
from typing import Protocol

from src.domain.constants import DEFAULT_PAGE_SIZE
from src.domain.models import Leg, LegPage, LegSort


class LegsRepositoryPort(Protocol):
    """Port exposing the legs a user takes part in."""

    def fetch_legs(
        self,
        user_id: str,
        start_date: date | None,
        end_date: date | None,
        category_ids: Iterable[str] | None = None,
    ) -> list[Leg]:
        """Return legs of non-deleted transactions within the dates."""

    def search_legs(
        self,
        user_id: str,
        start_date: date | None,
        end_date: date | None,
        category_ids: Iterable[str] | None = None,
        search: str | None = None,
        sort: LegSort = LegSort.DATE_DESC,
        limit: int = DEFAULT_PAGE_SIZE,
        offset: int = 0,
    ) -> LegPage:
        """Return one ordered page of matching legs and the match count.

        ``search`` matches the transaction description or notes,
        case-insensitively.
        """


__all__ = ["LegsRepositoryPort"]
