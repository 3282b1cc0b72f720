"""SQLAlchemy-backed repository for budget windows."""

from datetime import date

from sqlalchemy import Date, bindparam, text

from src.application.ports.budgets_repository import BudgetsRepositoryPort
from src.application.ports.database import DatabaseEnginePort
from src.domain.constants import DEFAULT_CURRENCY
from src.domain.models import BudgetWindow, Money
from src.utils.date_utils import coerce_date
from src.utils.decimal_utils import coerce_decimal


class SqlAlchemyBudgetsRepository(BudgetsRepositoryPort):
    """Repository reading budget windows from the budget table."""

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        currency: str = DEFAULT_CURRENCY,
        scale: int | None = None,
    ) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
            currency: Currency the stored budgets are expressed in.
            scale: Optional minor-unit scale override.
        """
        self._db_port = db_port
        self._currency = currency
        self._scale = scale

    def fetch_budget_windows(
        self,
        user_id: str,
        start_date: date | None,
        end_date: date | None,
    ) -> list[BudgetWindow]:
        base_sql = """
        SELECT b.id AS budget_id,
               b.category_id AS category_id,
               b.amount AS amount,
               b.start_date AS start_date,
               b.end_date AS end_date,
               c.name AS category_name
        FROM budget b
        JOIN category c ON c.id = b.category_id
        WHERE b.user_id = :user_id
        """
        binds = []
        params: dict[str, object] = {"user_id": user_id}
        # A budget is relevant when its range intersects the requested one.
        if start_date:
            base_sql += " AND b.end_date >= :start_date"
            binds.append(bindparam("start_date", type_=Date))
            params["start_date"] = start_date
        if end_date:
            base_sql += " AND b.start_date <= :end_date"
            binds.append(bindparam("end_date", type_=Date))
            params["end_date"] = end_date
        query = text(base_sql).bindparams(*binds)

        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            rows = conn.execute(query, params).all()
        windows = [
            BudgetWindow(
                budget_id=str(row.budget_id),
                category_id=row.category_id,
                amount=Money.of(
                    coerce_decimal(row.amount),
                    self._currency,
                    self._scale,
                ),
                start_date=coerce_date(row.start_date),
                end_date=coerce_date(row.end_date),
                category_name=row.category_name,
            )
            for row in rows
        ]
        return sorted(
            windows,
            key=lambda window: (window.start_date, window.category_id, window.budget_id),
        )


__all__ = ["SqlAlchemyBudgetsRepository"]
