"""Use case comparing a user's budgets with actual spending."""

from datetime import date

from src.application.ports.budgets_repository import BudgetsRepositoryPort
from src.application.ports.legs_repository import LegsRepositoryPort
from src.domain.constants import DEFAULT_CURRENCY
from src.domain.errors import LedgerCoreError
from src.domain.models import BudgetOverview, BudgetStatus, BudgetWindow, Leg
from src.domain.services.aggregation import budget_overview, budget_status
from src.infrastructure.logging.logger import get_app_logger


class GetBudgetStatusUseCase:
    """Compute budget usage for every budget window of a period."""

    def __init__(
        self,
        legs_repository: LegsRepositoryPort,
        budgets_repository: BudgetsRepositoryPort,
        logger=None,
        currency: str = DEFAULT_CURRENCY,
    ) -> None:
        """Initialize the use case.

        Args:
            legs_repository: Port providing the user's legs.
            budgets_repository: Port providing the user's budget windows.
            logger: Optional logger compatible with logging.Logger-like API.
            currency: Currency reported when the user has no budgets.
        """
        self._legs_repository = legs_repository
        self._budgets_repository = budgets_repository
        self._logger = logger or get_app_logger()
        self._currency = currency

    def execute(
        self,
        user_id: str,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[BudgetStatus]:
        """Return one status per budget window intersecting the period.

        Args:
            user_id: Identifier of the requesting user.
            start_date: Optional inclusive lower bound.
            end_date: Optional inclusive upper bound.

        Returns:
            list[BudgetStatus]: Statuses in repository order.
        """
        budgets, legs = self._load(user_id, start_date, end_date)
        return self._statuses(user_id, budgets, legs)

    def overview(
        self,
        user_id: str,
        today: date,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> BudgetOverview:
        """Return totals and limit lists for the period.

        Args:
            user_id: Identifier of the requesting user.
            today: Reference date for the remaining-days count.
            start_date: Optional inclusive lower bound.
            end_date: Optional inclusive upper bound; also used as the
                period end for the remaining-days count.

        Returns:
            BudgetOverview: Aggregated budget usage.
        """
        budgets, legs = self._load(user_id, start_date, end_date)
        return self._overview(user_id, budgets, legs, today, end_date)

    def report(
        self,
        user_id: str,
        today: date,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> tuple[list[BudgetStatus], BudgetOverview]:
        """Return per-budget statuses and the overview from a single read.

        Args:
            user_id: Identifier of the requesting user.
            today: Reference date for the remaining-days count.
            start_date: Optional inclusive lower bound.
            end_date: Optional inclusive upper bound.

        Returns:
            tuple[list[BudgetStatus], BudgetOverview]: Same results as
            ``execute`` and ``overview``.
        """
        budgets, legs = self._load(user_id, start_date, end_date)
        statuses = self._statuses(user_id, budgets, legs)
        result = self._overview(user_id, budgets, legs, today, end_date)
        return statuses, result

    def _statuses(
        self,
        user_id: str,
        budgets: list[BudgetWindow],
        legs: list[Leg],
    ) -> list[BudgetStatus]:
        try:
            statuses = budget_status(budgets, legs)
        except LedgerCoreError as exc:
            self._logger.warning(f"Budget status failed for {user_id}: {exc}")
            raise
        self._logger.info(
            f"Computed {len(statuses)} budget statuses for {user_id}"
        )
        return statuses

    def _overview(
        self,
        user_id: str,
        budgets: list[BudgetWindow],
        legs: list[Leg],
        today: date,
        end_date: date | None,
    ) -> BudgetOverview:
        try:
            result = budget_overview(
                budgets,
                legs,
                today=today,
                period_end=end_date,
                currency=self._currency,
            )
        except LedgerCoreError as exc:
            self._logger.warning(f"Budget overview failed for {user_id}: {exc}")
            raise
        if result.over_limit:
            self._logger.warning(
                f"{len(result.over_limit)} budgets over limit for {user_id}"
            )
        return result

    def _load(
        self,
        user_id: str,
        start_date: date | None,
        end_date: date | None,
    ) -> tuple[list[BudgetWindow], list[Leg]]:
        budgets = self._budgets_repository.fetch_budget_windows(
            user_id,
            start_date,
            end_date,
        )
        if not budgets:
            return [], []
        # Legs must cover every budget window, not only the requested period.
        legs_start = min(budget.start_date for budget in budgets)
        legs_end = max(budget.end_date for budget in budgets)
        categories = {budget.category_id for budget in budgets}
        legs = self._legs_repository.fetch_legs(
            user_id,
            legs_start,
            legs_end,
            category_ids=categories,
        )
        self._logger.info(
            f"Fetched {len(budgets)} budgets and {len(legs)} legs for {user_id}"
        )
        return budgets, legs


__all__ = ["GetBudgetStatusUseCase"]
