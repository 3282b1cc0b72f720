"""Domain services aggregating legs into budget and analytics figures.

Callers supply legs already restricted to the requesting user and to
non-deleted transactions. Every function validates its whole input before
summing, so a malformed leg or window fails the call rather than being
skipped.
"""

from calendar import monthrange
from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from src.domain.constants import (
    BUDGET_PERCENTAGE_PLACES,
    CATEGORY_PERCENTAGE_PLACES,
    DEFAULT_CURRENCY,
    RATE_PERCENTAGE_PLACES,
)
from src.domain.errors import InvalidWindow
from src.domain.models import (
    BudgetClassification,
    BudgetOverview,
    BudgetStatus,
    BudgetWindow,
    CategoryTotal,
    Direction,
    FinanceSummary,
    IncomeExpensePoint,
    LargestExpense,
    Leg,
    Money,
    MonthlyTrendPoint,
    PeriodComparison,
    ReportingWindow,
)
from src.domain.policies import classify_budget_usage
from src.domain.services.normalization import normalize_category_filter
from src.domain.services.validation import (
    validate_budget_windows,
    validate_legs,
    validate_window,
)
from src.utils.decimal_utils import apportion_percentages, percentage_of

_HUNDRED = Decimal("100")


def summarize(
    legs: Iterable[Leg],
    window: ReportingWindow | None = None,
    *,
    currency: str = DEFAULT_CURRENCY,
) -> FinanceSummary:
    """Compute income, expense, net savings and savings rate.

    Args:
        legs: Legs of the requesting user.
        window: Optional inclusive date window; None means all time.
        currency: Currency of the zero amounts returned for empty input.

    Returns:
        FinanceSummary: Totals for the window. The savings rate is 0 when
        there is no income.
    """
    selected = _select(legs, window)
    zero = _zero_for(selected, currency)
    income = _total(selected, Direction.INCOME, zero)
    expense = _total(selected, Direction.EXPENSE, zero)
    net = income - expense
    return FinanceSummary(
        total_income=income,
        total_expense=expense,
        net_savings=net,
        savings_rate=percentage_of(
            net.amount, income.amount, RATE_PERCENTAGE_PLACES
        ),
        largest_expense=_largest_expense(selected, expense),
    )


def breakdown_by_category(
    legs: Iterable[Leg],
    window: ReportingWindow | None = None,
    category_filter: Iterable[str] | None = None,
    *,
    currency: str = DEFAULT_CURRENCY,
) -> list[CategoryTotal]:
    """Group expense legs by category.

    Args:
        legs: Legs of the requesting user.
        window: Optional inclusive date window.
        category_filter: Optional category ids to keep.
        currency: Currency used when no leg is selected.

    Returns:
        list[CategoryTotal]: Totals sorted by amount descending, ties by
        category id. Percentages are relative to the filtered expense
        total and add up to exactly 100 when it is non-zero.
    """
    expenses = _expenses(
        _select(legs, window),
        normalize_category_filter(category_filter),
    )
    zero = _zero_for(expenses, currency)
    totals: dict[str, Money] = {}
    labels: dict[str, tuple[str | None, str | None]] = {}
    for leg in expenses:
        totals[leg.category_id] = totals.get(leg.category_id, zero) + leg.amount
        name, icon = labels.get(leg.category_id, (None, None))
        labels[leg.category_id] = (
            name or leg.category_name,
            icon or leg.category_icon,
        )

    ordered = sorted(
        totals.items(),
        key=lambda item: (-item[1].minor_units, item[0]),
    )
    percentages = apportion_percentages(
        [amount.minor_units for _, amount in ordered],
        CATEGORY_PERCENTAGE_PLACES,
    )
    return [
        CategoryTotal(
            category_id=category_id,
            category_name=labels[category_id][0],
            category_icon=labels[category_id][1],
            amount=amount,
            percentage=percentage,
        )
        for (category_id, amount), percentage in zip(ordered, percentages)
    ]


def monthly_trend(
    legs: Iterable[Leg],
    window: ReportingWindow | None = None,
    category_filter: Iterable[str] | None = None,
    *,
    currency: str = DEFAULT_CURRENCY,
) -> list[MonthlyTrendPoint]:
    """Bucket expense legs by the calendar month of their date.

    Months without legs are omitted.

    Returns:
        list[MonthlyTrendPoint]: Points in ascending month order, each with
        per-category totals keyed by category id.
    """
    expenses = _expenses(
        _select(legs, window),
        normalize_category_filter(category_filter),
    )
    zero = _zero_for(expenses, currency)
    buckets: dict[date, dict[str, Money]] = {}
    for leg in expenses:
        month = _month_start(leg.date)
        categories = buckets.setdefault(month, {})
        categories[leg.category_id] = (
            categories.get(leg.category_id, zero) + leg.amount
        )

    points: list[MonthlyTrendPoint] = []
    for month in sorted(buckets):
        categories = buckets[month]
        total = zero
        for amount in categories.values():
            total = total + amount
        points.append(
            MonthlyTrendPoint(
                month=month,
                total=total,
                category_totals=dict(sorted(categories.items())),
            )
        )
    return points


def income_expense_series(
    legs: Iterable[Leg],
    window: ReportingWindow | None = None,
    *,
    currency: str = DEFAULT_CURRENCY,
) -> list[IncomeExpensePoint]:
    """Return monthly income and expense totals in ascending month order."""
    selected = _select(legs, window)
    zero = _zero_for(selected, currency)
    buckets: dict[date, tuple[Money, Money]] = {}
    for leg in selected:
        month = _month_start(leg.date)
        income, expenses = buckets.get(month, (zero, zero))
        if leg.direction is Direction.INCOME:
            income = income + leg.amount
        else:
            expenses = expenses + leg.amount
        buckets[month] = (income, expenses)
    return [
        IncomeExpensePoint(month=month, income=income, expenses=expenses)
        for month, (income, expenses) in sorted(buckets.items())
    ]


def budget_status(
    budget_windows: Iterable[BudgetWindow],
    legs: Iterable[Leg],
) -> list[BudgetStatus]:
    """Compare each budget window with the expense legs it covers.

    A leg counts toward a window when its category matches and its date is
    within ``[start_date, end_date]``, both inclusive.

    Args:
        budget_windows: Budget windows of the requesting user.
        legs: Legs of the requesting user.

    Returns:
        list[BudgetStatus]: One status per window, in input order. Windows
        with a zero budget report 0 % and WITHIN_LIMIT.
    """
    budgets = validate_budget_windows(budget_windows)
    expenses = [
        leg for leg in validate_legs(legs) if leg.direction is Direction.EXPENSE
    ]
    statuses: list[BudgetStatus] = []
    for budget in budgets:
        spent = budget.amount.with_minor_units(0)
        for leg in expenses:
            if leg.category_id == budget.category_id and budget.contains(leg.date):
                spent = spent + leg.amount
        statuses.append(
            BudgetStatus(
                budget_id=budget.budget_id,
                category_id=budget.category_id,
                category_name=budget.category_name,
                budgeted=budget.amount,
                spent=spent,
                percentage_used=percentage_of(
                    Decimal(spent.minor_units),
                    Decimal(budget.amount.minor_units),
                    BUDGET_PERCENTAGE_PLACES,
                ),
                classification=classify_budget_usage(spent, budget.amount),
            )
        )
    return statuses


def budget_overview(
    budget_windows: Iterable[BudgetWindow],
    legs: Iterable[Leg],
    *,
    today: date,
    period_end: date | None = None,
    currency: str = DEFAULT_CURRENCY,
) -> BudgetOverview:
    """Summarize every budget window of a period.

    Args:
        budget_windows: Budget windows active in the period.
        legs: Legs of the requesting user.
        today: Reference date supplied by the caller.
        period_end: Last day of the period; defaults to the end of
            ``today``'s month.
        currency: Currency used when there is no budget window.

    Returns:
        BudgetOverview: Totals, overall usage, days left in the period, and
        the over-limit and near-limit statuses.
    """
    statuses = budget_status(budget_windows, legs)
    zero = (
        statuses[0].budgeted.with_minor_units(0)
        if statuses
        else Money.zero(currency)
    )
    total_budgeted = zero
    total_spent = zero
    for status in statuses:
        total_budgeted = total_budgeted + status.budgeted
        total_spent = total_spent + status.spent

    end = period_end or _month_end(today)
    return BudgetOverview(
        total_budgeted=total_budgeted,
        total_spent=total_spent,
        percentage_used=percentage_of(
            Decimal(total_spent.minor_units),
            Decimal(total_budgeted.minor_units),
            BUDGET_PERCENTAGE_PLACES,
        ),
        remaining_days=max((end - today).days, 0),
        over_limit=[
            status
            for status in statuses
            if status.classification is BudgetClassification.OVER_LIMIT
        ],
        near_limit=[
            status
            for status in statuses
            if status.classification is BudgetClassification.NEAR_LIMIT
        ],
    )


def compare_periods(
    legs: Iterable[Leg],
    window: ReportingWindow,
    *,
    currency: str = DEFAULT_CURRENCY,
) -> PeriodComparison:
    """Compare a bounded window with the equally long window before it.

    Change percentages are ``(current - previous) / previous * 100`` when
    the previous figure is positive, otherwise 100 when the current figure
    is positive and 0 when it is not.

    Raises:
        InvalidWindow: If the window is unbounded or starts after it ends.
    """
    window = validate_window(window)
    if window.start is None or window.end is None:
        raise InvalidWindow("Period comparison requires a bounded window")
    materialized = validate_legs(legs)
    current = summarize(materialized, window, currency=currency)
    previous = summarize(materialized, window.preceding(), currency=currency)
    return PeriodComparison(
        current=current,
        previous=previous,
        income_change=_change(current.total_income, previous.total_income),
        expense_change=_change(current.total_expense, previous.total_expense),
        balance_change=_change(current.net_savings, previous.net_savings),
    )


def _select(
    legs: Iterable[Leg],
    window: ReportingWindow | None,
) -> list[Leg]:
    resolved = validate_window(window)
    materialized = validate_legs(legs)
    if resolved.is_all_time:
        return materialized
    return [leg for leg in materialized if resolved.contains(leg.date)]


def _expenses(
    legs: list[Leg],
    category_filter: frozenset[str] | None,
) -> list[Leg]:
    return [
        leg
        for leg in legs
        if leg.direction is Direction.EXPENSE
        and (category_filter is None or leg.category_id in category_filter)
    ]


def _zero_for(legs: list[Leg], currency: str) -> Money:
    if legs:
        return legs[0].amount.with_minor_units(0)
    return Money.zero(currency)


def _total(legs: list[Leg], direction: Direction, zero: Money) -> Money:
    total = zero
    for leg in legs:
        if leg.direction is direction:
            total = total + leg.amount
    return total


def _largest_expense(
    legs: list[Leg],
    total_expense: Money,
) -> LargestExpense | None:
    largest: Leg | None = None
    for leg in legs:
        if leg.direction is not Direction.EXPENSE:
            continue
        if largest is None or leg.amount > largest.amount:
            largest = leg
    if largest is None:
        return None
    return LargestExpense(
        category_id=largest.category_id,
        category_name=largest.category_name,
        amount=largest.amount,
        percentage=percentage_of(
            Decimal(largest.amount.minor_units),
            Decimal(total_expense.minor_units),
            RATE_PERCENTAGE_PLACES,
        ),
    )


def _change(current: Money, previous: Money) -> Decimal:
    if previous.minor_units > 0:
        return percentage_of(
            Decimal(current.minor_units - previous.minor_units),
            Decimal(previous.minor_units),
            RATE_PERCENTAGE_PLACES,
        )
    if current.minor_units > 0:
        return _HUNDRED
    return Decimal("0")


def _month_start(day: date) -> date:
    return day.replace(day=1)


def _month_end(day: date) -> date:
    return day.replace(day=monthrange(day.year, day.month)[1])


__all__ = [
    "breakdown_by_category",
    "budget_overview",
    "budget_status",
    "compare_periods",
    "income_expense_series",
    "monthly_trend",
    "summarize",
]
