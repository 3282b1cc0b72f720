"""SQLAlchemy-backed repository for transaction legs."""

from collections.abc import Iterable
from datetime import date

from sqlalchemy import Date, Integer, bindparam, text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.legs_repository import LegsRepositoryPort
from src.domain.constants import DEFAULT_CURRENCY, DEFAULT_PAGE_SIZE
from src.domain.models import Direction, Leg, LegPage, LegSort, Money
from src.domain.services.normalization import (
    normalize_category_filter,
    normalize_search_term,
)
from src.utils.date_utils import coerce_date
from src.utils.decimal_utils import coerce_decimal

_LEG_COLUMNS = """
        SELECT tp.user_id AS user_id,
               tp.amount AS amount,
               tp.type AS type,
               tp.category_id AS category_id,
               tp.transaction_id AS transaction_id,
               t.date AS date,
               c.name AS category_name,
               c.icon AS category_icon,
               t.description AS description,
               t.notes AS notes
"""

_LEG_SOURCE = """
        FROM transaction_participant tp
        JOIN "transaction" t ON t.id = tp.transaction_id
        JOIN category c ON c.id = tp.category_id
        WHERE tp.user_id = :user_id
          AND t.is_deleted = :is_deleted
"""

_ORDER_BY = {
    LegSort.DATE_ASC: "t.date ASC, tp.transaction_id ASC, tp.category_id ASC",
    LegSort.DATE_DESC: "t.date DESC, tp.transaction_id DESC, tp.category_id DESC",
    LegSort.AMOUNT_ASC: "tp.amount ASC, t.date DESC, tp.transaction_id DESC",
    LegSort.AMOUNT_DESC: "tp.amount DESC, t.date DESC, tp.transaction_id DESC",
}

# '!' escapes LIKE wildcards typed by the user.
_SEARCH_CLAUSE = """
          AND (LOWER(COALESCE(t.description, '')) LIKE :search ESCAPE '!'
               OR LOWER(COALESCE(t.notes, '')) LIKE :search ESCAPE '!')
"""


def _like_pattern(term: str) -> str:
    escaped = (
        term.lower()
        .replace("!", "!!")
        .replace("%", "!%")
        .replace("_", "!_")
    )
    return f"%{escaped}%"


class SqlAlchemyLegsRepository(LegsRepositoryPort):
    """Repository reading legs from the transaction participant table."""

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        currency: str = DEFAULT_CURRENCY,
        scale: int | None = None,
    ) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
            currency: Currency the stored amounts are expressed in.
            scale: Optional minor-unit scale override.
        """
        self._db_port = db_port
        self._currency = currency
        self._scale = scale

    def fetch_legs(
        self,
        user_id: str,
        start_date: date | None,
        end_date: date | None,
        category_ids: Iterable[str] | None = None,
    ) -> list[Leg]:
        categories = normalize_category_filter(category_ids)
        filters, binds = self._build_filters(start_date, end_date, categories, None)
        query = text(_LEG_COLUMNS + _LEG_SOURCE + filters).bindparams(*binds)
        params = self._build_params(user_id, start_date, end_date, categories, None)
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            rows = conn.execute(query, params).all()
        legs = [self._to_leg(row) for row in rows]
        return sorted(
            legs,
            key=lambda leg: (leg.date, leg.transaction_id, leg.category_id),
        )

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
        """Return one page of legs plus the number of matches.

        The count and the page run on the same connection with identical
        filters.

        Args:
            user_id: Participant whose legs are listed.
            start_date: Optional inclusive lower bound.
            end_date: Optional inclusive upper bound.
            category_ids: Optional categories to keep.
            search: Optional case-insensitive substring of description or
                notes.
            sort: Ordering of the page.
            limit: Maximum number of legs returned.
            offset: Number of matching legs skipped.

        Returns:
            LegPage: Ordered legs and the total match count.
        """
        categories = normalize_category_filter(category_ids)
        term = normalize_search_term(search)
        filters, binds = self._build_filters(start_date, end_date, categories, term)
        count_query = text(
            "SELECT COUNT(*) AS total" + _LEG_SOURCE + filters
        ).bindparams(*binds)
        page_query = text(
            _LEG_COLUMNS
            + _LEG_SOURCE
            + filters
            + f" ORDER BY {_ORDER_BY[LegSort(sort)]}"
            + " LIMIT :limit OFFSET :offset"
        ).bindparams(
            *binds,
            bindparam("limit", type_=Integer),
            bindparam("offset", type_=Integer),
        )
        params = self._build_params(user_id, start_date, end_date, categories, term)
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            total = conn.execute(count_query, params).scalar_one()
            rows = conn.execute(
                page_query,
                {**params, "limit": limit, "offset": offset},
            ).all()
        return LegPage(
            legs=[self._to_leg(row) for row in rows],
            total_count=int(total),
            limit=limit,
            offset=offset,
        )

    def _to_leg(self, row) -> Leg:
        return Leg(
            participant_id=row.user_id,
            amount=Money.of(
                coerce_decimal(row.amount),
                self._currency,
                self._scale,
            ),
            direction=Direction(row.type),
            category_id=row.category_id,
            transaction_id=row.transaction_id,
            date=coerce_date(row.date),
            category_name=row.category_name,
            category_icon=row.category_icon,
            description=row.description,
            notes=row.notes,
        )

    @staticmethod
    def _build_filters(
        start_date: date | None,
        end_date: date | None,
        category_ids: frozenset[str] | None,
        search: str | None,
    ) -> tuple[str, list]:
        sql = ""
        binds = []
        if start_date:
            sql += " AND t.date >= :start_date"
            binds.append(bindparam("start_date", type_=Date))
        if end_date:
            sql += " AND t.date <= :end_date"
            binds.append(bindparam("end_date", type_=Date))
        if category_ids:
            sql += " AND tp.category_id IN :category_ids"
            binds.append(bindparam("category_ids", expanding=True))
        if search:
            sql += _SEARCH_CLAUSE
        return sql, binds

    @staticmethod
    def _build_params(
        user_id: str,
        start_date: date | None,
        end_date: date | None,
        category_ids: frozenset[str] | None,
        search: str | None,
    ) -> dict[str, object]:
        params: dict[str, object] = {"user_id": user_id, "is_deleted": False}
        if start_date:
            params["start_date"] = start_date
        if end_date:
            params["end_date"] = end_date
        if category_ids:
            params["category_ids"] = sorted(category_ids)
        if search:
            params["search"] = _like_pattern(search)
        return params


__all__ = ["SqlAlchemyLegsRepository"]
