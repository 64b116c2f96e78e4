"""Daily financial series generation."""

import logging
from datetime import date, timedelta
from typing import Iterable, Mapping, Optional, Sequence

from farmledger.domain.aggregation import (
    aggregate_expenses,
    aggregate_sales,
    breakdown_names,
    collect_occupations,
    merge_occupations,
)
from farmledger.domain.entities import (
    DailyExpenses,
    DailyFinancialEntry,
    ExpenseCategoryConfig,
    ExpenseRecord,
    FinancialSeries,
    MetricBreakdown,
    SaleRecord,
    SubTypeValue,
)
from farmledger.utils.date_parser import DATE_KEY_FORMAT, RecordDate, to_local_date

logger = logging.getLogger(__name__)

HISTORICAL_WINDOW_DAYS = 180


def _project(
    metric: Optional[MetricBreakdown], occupations: Sequence[str]
) -> MetricBreakdown:
    """Lay a day's metric out over the full occupation list, zero-filling gaps.

    The accumulated total is carried over as-is.
    """
    if metric is None:
        return MetricBreakdown.zero(occupations)
    values = metric.as_dict()
    return MetricBreakdown(
        total=metric.total,
        breakdown=tuple(
            SubTypeValue(name=name, value=values.get(name, 0.0)) for name in occupations
        ),
    )


def _subtract(
    minuend: MetricBreakdown, subtrahend: MetricBreakdown, occupations: Sequence[str]
) -> MetricBreakdown:
    left = minuend.as_dict()
    right = subtrahend.as_dict()
    return MetricBreakdown(
        total=minuend.total - subtrahend.total,
        breakdown=tuple(
            SubTypeValue(name=name, value=left.get(name, 0.0) - right.get(name, 0.0))
            for name in occupations
        ),
    )


def build_entry(
    day: date,
    occupations: Sequence[str],
    revenue: Optional[MetricBreakdown] = None,
    expenses_for_day: Optional[DailyExpenses] = None,
) -> DailyFinancialEntry:
    """Derive one day's entry from its (possibly absent) actual data."""
    revenue = _project(revenue, occupations)
    cogs = _project(expenses_for_day.cogs if expenses_for_day else None, occupations)
    expenses = _project(
        expenses_for_day.expenses if expenses_for_day else None, occupations
    )
    gross_profit = _subtract(revenue, cogs, occupations)
    net_profit = _subtract(gross_profit, expenses, occupations)
    return DailyFinancialEntry(
        date=day,
        revenue=revenue,
        cogs=cogs,
        gross_profit=gross_profit,
        expenses=expenses,
        net_profit=net_profit,
    )


def generate_series(
    window_size_days: int,
    occupations: Sequence[str],
    sales_by_day: Optional[Mapping[str, MetricBreakdown]] = None,
    expenses_by_day: Optional[Mapping[str, DailyExpenses]] = None,
    reference_date: Optional[RecordDate] = None,
) -> list[DailyFinancialEntry]:
    """Generate a gap-free daily series ending on the reference date.

    Args:
        window_size_days: Number of consecutive days to produce
        occupations: Occupations every day's breakdowns must contain
        sales_by_day: Output of ``aggregate_sales``, or None
        expenses_by_day: Output of ``aggregate_expenses``, or None
        reference_date: Last day of the window, defaults to local today

    Returns:
        Entries ordered oldest to newest, exactly ``window_size_days`` long
        (empty for a non-positive window). Occupations found only in the
        aggregated buckets are appended after ``occupations``.
    """
    sales_by_day = sales_by_day or {}
    expenses_by_day = expenses_by_day or {}
    end = to_local_date(reference_date) if reference_date is not None else date.today()
    unified = merge_occupations(
        occupations, breakdown_names(sales_by_day, expenses_by_day)
    )

    entries: list[DailyFinancialEntry] = []
    day = end - timedelta(days=window_size_days - 1)
    for _ in range(window_size_days):
        key = day.strftime(DATE_KEY_FORMAT)
        entries.append(
            build_entry(day, unified, sales_by_day.get(key), expenses_by_day.get(key))
        )
        day += timedelta(days=1)
    return entries


def build_financial_series(
    sales: Iterable[SaleRecord],
    expenses: Iterable[ExpenseRecord],
    config: ExpenseCategoryConfig,
    declared_occupations: Iterable[str] = (),
    target_occupation: Optional[str] = None,
    window_size_days: int = HISTORICAL_WINDOW_DAYS,
    reference_date: Optional[RecordDate] = None,
) -> FinancialSeries:
    """Run the full pipeline: occupation set, aggregation, series generation.

    Args:
        sales: Sale records for one user
        expenses: Expense records for the same user
        config: Expense classification rules for the active domain
        declared_occupations: Occupations the user declared
        target_occupation: Occupation a single-occupation screen is scoped to
        window_size_days: Number of trailing days to produce
        reference_date: Last day of the window, defaults to local today

    Returns:
        FinancialSeries with the entries and the occupation set they cover
    """
    sales = list(sales)
    expenses = list(expenses)
    occupations = collect_occupations(
        declared_occupations, target_occupation, sales, expenses
    )

    sales_by_day = aggregate_sales(sales, occupations)
    expenses_by_day = aggregate_expenses(expenses, occupations, config)
    entries = generate_series(
        window_size_days,
        occupations,
        sales_by_day,
        expenses_by_day,
        reference_date=reference_date,
    )
    logger.debug(
        "Built %d-day series over %d occupation(s) from %d sale(s) and %d expense(s)",
        len(entries),
        len(occupations),
        len(sales),
        len(expenses),
    )
    return FinancialSeries(entries=tuple(entries), occupations=occupations)
