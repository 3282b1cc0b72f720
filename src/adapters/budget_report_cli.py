"""CLI adapter printing a user's budget report."""

from datetime import date
import os

from src.application.use_cases.get_budget_status import GetBudgetStatusUseCase
from src.application.use_cases.get_category_breakdown import (
    GetCategoryBreakdownUseCase,
)
from src.application.use_cases.get_finance_summary import (
    GetFinanceSummaryUseCase,
)
from src.domain.errors import LedgerCoreError
from src.infrastructure.container import (
    build_budgets_repository,
    build_database_adapter,
    build_legs_repository,
    build_settings,
)
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger


def _parse_date(value: str | None, logger) -> date | None:
    """Parse an ISO date string into a date.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        date | None: Parsed date or None when invalid.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None


def main() -> None:
    """Print the finance summary, category breakdown and budgets of a user."""
    logger = get_app_logger()
    user_id = (os.getenv("REPORT_USER_ID") or "").strip()
    if not user_id:
        logger.warning("REPORT_USER_ID is required to build a report.")
        return

    start_date = _parse_date(os.getenv("REPORT_START_DATE"), logger)
    end_date = _parse_date(os.getenv("REPORT_END_DATE"), logger)
    today = _parse_date(os.getenv("REPORT_TODAY"), logger) or date.today()

    settings = build_settings()
    db_adapter = build_database_adapter()
    legs_repository = build_legs_repository(db_adapter, settings)
    budgets_repository = build_budgets_repository(db_adapter, settings)
    currency = settings.currency_code

    get_usage_logger().info(
        f"Budget report requested by {user_id} "
        f"(start={start_date}, end={end_date})"
    )
    try:
        summary = GetFinanceSummaryUseCase(
            legs_repository,
            logger=logger,
            currency=currency,
        ).execute(user_id, start_date, end_date)
        breakdown = GetCategoryBreakdownUseCase(
            legs_repository,
            logger=logger,
            currency=currency,
        ).execute(user_id, start_date, end_date)
        statuses, overview = GetBudgetStatusUseCase(
            legs_repository,
            budgets_repository,
            logger=logger,
            currency=currency,
        ).report(user_id, today, start_date, end_date)
    except LedgerCoreError as exc:
        logger.error(f"Report failed for {user_id}: {exc}")
        return

    print(
        f"Report for {user_id} "
        f"(currency={currency}, start={start_date}, end={end_date})"
    )
    print(
        f"Income: {summary.total_income} | Expense: {summary.total_expense} | "
        f"Net: {summary.net_savings} | Savings rate: {summary.savings_rate}%"
    )
    if summary.largest_expense is not None:
        largest = summary.largest_expense
        print(
            f"Largest expense: {largest.category_name or largest.category_id} "
            f"{largest.amount} ({largest.percentage}%)"
        )
    print("Categories:")
    for item in breakdown:
        label = item.category_name or item.category_id
        print(f"  {label}: {item.amount} ({item.percentage}%)")
    print("Budgets:")
    for status in statuses:
        label = status.category_name or status.category_id
        print(
            f"  {label}: {status.spent} / {status.budgeted} "
            f"({status.percentage_used}%) {status.classification.value}"
        )
    print(
        f"Overall: {overview.total_spent} / {overview.total_budgeted} "
        f"({overview.percentage_used}%), "
        f"{overview.remaining_days} days remaining"
    )


if __name__ == "__main__":  # pragma: no cover
    main()
