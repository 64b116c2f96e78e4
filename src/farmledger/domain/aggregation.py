"""Daily aggregation of sales and expense records."""

import logging
from typing import Iterable, Optional, Sequence

from farmledger.domain.classification import classify
from farmledger.domain.entities import (
    UNCATEGORIZED,
    DailyExpenses,
    ExpenseCategoryConfig,
    ExpenseRecord,
    ExpenseType,
    MetricBreakdown,
    SaleRecord,
    SubTypeValue,
)
from farmledger.utils.amount_parser import coerce_number
from farmledger.utils.date_parser import date_key

logger = logging.getLogger(__name__)


def resolve_occupation(occupation: Optional[str]) -> str:
    """Return the record's occupation, or the Uncategorized sentinel."""
    return occupation or UNCATEGORIZED


def sale_total(sale: SaleRecord) -> float:
    """Compute the sale amount as the sum of quantity * price per line.

    A sale whose price array is missing, or whose item, quantity and price
    arrays differ in length, totals 0. Unusable quantities or prices count
    as 0 for their line.
    """
    items = sale.items_sold
    quantities = sale.quantities_sold
    prices = sale.prices_per_unit
    if not items or not quantities or not prices:
        return 0.0
    if not (len(items) == len(quantities) == len(prices)):
        return 0.0

    total = 0.0
    for quantity, price in zip(quantities, prices):
        total += coerce_number(quantity) * coerce_number(price)
    return total


def collect_occupations(
    declared: Iterable[str] = (),
    target_occupation: Optional[str] = None,
    sales: Iterable[SaleRecord] = (),
    expenses: Iterable[ExpenseRecord] = (),
) -> tuple[str, ...]:
    """Build the ordered occupation set for one aggregation run.

    Order: declared occupations, the target occupation, the Uncategorized
    sentinel, then occupations first seen on sale and expense records.
    """
    occupations: dict[str, None] = dict.fromkeys(o for o in declared if o)
    if target_occupation:
        occupations.setdefault(target_occupation)
    occupations.setdefault(UNCATEGORIZED)
    for sale in sales:
        occupations.setdefault(resolve_occupation(sale.occupation))
    for expense in expenses:
        occupations.setdefault(resolve_occupation(expense.occupation))
    return tuple(occupations)


class BreakdownAccumulator:
    """Mutable running total with per-occupation values."""

    def __init__(self, occupations: Iterable[str]):
        self.total = 0.0
        self.values: dict[str, float] = dict.fromkeys(occupations, 0.0)

    def add(self, occupation: str, amount: float) -> None:
        self.total += amount
        self.values[occupation] = self.values.get(occupation, 0.0) + amount

    def freeze(self) -> MetricBreakdown:
        return MetricBreakdown(
            total=self.total,
            breakdown=tuple(
                SubTypeValue(name=name, value=value)
                for name, value in self.values.items()
            ),
        )


def aggregate_sales(
    sales: Iterable[SaleRecord], occupations: Iterable[str]
) -> dict[str, MetricBreakdown]:
    """Bucket sale revenue by local calendar day and occupation.

    Args:
        sales: Sale records
        occupations: Occupations every day bucket is seeded with

    Returns:
        Map from ``YYYY-MM-DD`` day key to that day's revenue breakdown
    """
    known: dict[str, None] = dict.fromkeys(occupations)
    days: dict[str, BreakdownAccumulator] = {}

    for sale in sales:
        amount = sale_total(sale)
        occupation = resolve_occupation(sale.occupation)
        known.setdefault(occupation)

        key = date_key(sale.sale_date)
        day = days.get(key)
        if day is None:
            day = days[key] = BreakdownAccumulator(known)
        day.add(occupation, amount)

    logger.debug("Aggregated %d sale day(s)", len(days))
    return {key: day.freeze() for key, day in days.items()}


def aggregate_expenses(
    expenses: Iterable[ExpenseRecord],
    occupations: Iterable[str],
    config: ExpenseCategoryConfig,
) -> dict[str, DailyExpenses]:
    """Bucket classified expenses by local calendar day and occupation.

    Expenses whose category the config does not recognize are skipped and
    affect neither the COGS nor the operating-expense totals.

    Args:
        expenses: Expense records
        occupations: Occupations every day bucket is seeded with
        config: Classification rules for the active domain

    Returns:
        Map from ``YYYY-MM-DD`` day key to that day's COGS and expense buckets
    """
    known: dict[str, None] = dict.fromkeys(occupations)
    days: dict[str, dict[ExpenseType, BreakdownAccumulator]] = {}
    skipped = 0

    for expense in expenses:
        expense_type = classify(expense.category, config)
        if expense_type is None:
            skipped += 1
            continue

        occupation = resolve_occupation(expense.occupation)
        known.setdefault(occupation)

        key = date_key(expense.date_created)
        day = days.get(key)
        if day is None:
            day = days[key] = {
                ExpenseType.COGS: BreakdownAccumulator(known),
                ExpenseType.EXPENSES: BreakdownAccumulator(known),
            }
        day[expense_type].add(occupation, coerce_number(expense.amount))

    if skipped:
        logger.debug(
            "Skipped %d expense(s) with categories unknown to config '%s'",
            skipped,
            config.name,
        )
    return {
        key: DailyExpenses(
            cogs=day[ExpenseType.COGS].freeze(),
            expenses=day[ExpenseType.EXPENSES].freeze(),
        )
        for key, day in days.items()
    }


def breakdown_names(
    sales_by_day: Optional[dict[str, MetricBreakdown]] = None,
    expenses_by_day: Optional[dict[str, DailyExpenses]] = None,
) -> tuple[str, ...]:
    """List every occupation name appearing in aggregated day buckets."""
    names: dict[str, None] = {}
    for revenue in (sales_by_day or {}).values():
        names.update(dict.fromkeys(revenue.names()))
    for day in (expenses_by_day or {}).values():
        names.update(dict.fromkeys(day.cogs.names()))
        names.update(dict.fromkeys(day.expenses.names()))
    return tuple(names)


def merge_occupations(*groups: Sequence[str]) -> tuple[str, ...]:
    """Concatenate occupation lists, keeping first-seen order without repeats."""
    merged: dict[str, None] = {}
    for group in groups:
        merged.update(dict.fromkeys(group))
    return tuple(merged)
