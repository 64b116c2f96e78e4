"""Dashboard reporting over a generated financial series.

Helpers here take the daily entries produced by
:func:`farmledger.domain.series.generate_series` and shape them the way the
dashboard cards and graphs consume them: pick a time range, select its days,
total a metric over it, lay out per-occupation trend rows, compare two
metrics side by side, and page through the result.
"""

import math
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional, Sequence, TypeVar

from farmledger.domain.aggregation import BreakdownAccumulator
from farmledger.domain.entities import DailyFinancialEntry, MetricBreakdown
from farmledger.domain.series import build_entry
from farmledger.utils.date_parser import each_day, get_date_range

ITEMS_PER_PAGE = 7

T = TypeVar("T")


class FinancialMetric(Enum):
    """Metric of a daily entry, valued by the entry attribute it reads."""

    REVENUE = "revenue"
    COGS = "cogs"
    GROSS_PROFIT = "gross_profit"
    EXPENSES = "expenses"
    NET_PROFIT = "net_profit"

    @property
    def label(self) -> str:
        return METRIC_LABELS[self]

    def of(self, entry: DailyFinancialEntry) -> MetricBreakdown:
        return getattr(entry, self.value)

    @classmethod
    def parse(cls, text: str) -> "FinancialMetric":
        """Parse a metric from its attribute name or display label.

        Raises:
            ValueError: If the text names no metric
        """
        normalized = text.strip().lower().replace("-", "_").replace(" ", "_")
        for metric in cls:
            if normalized in (metric.value, metric.label.lower().replace(" ", "_")):
                return metric
        choices = ", ".join(metric.label for metric in cls)
        raise ValueError(f"Unknown metric: '{text}'. Supported metrics: {choices}")


METRIC_LABELS = {
    FinancialMetric.REVENUE: "Revenue",
    FinancialMetric.COGS: "COGS",
    FinancialMetric.GROSS_PROFIT: "Gross Profit",
    FinancialMetric.EXPENSES: "Expenses",
    FinancialMetric.NET_PROFIT: "Net Profit",
}


class TimeRange(Enum):
    """Preset dashboard time ranges."""

    WEEKLY = "weekly"
    MONTHLY = "monthly"
    THREE_MONTHS = "3-months"


@dataclass(frozen=True)
class ComparisonRow:
    """Absolute totals of two metrics on one day."""

    date: date
    first: float
    second: float


def resolve_interval(
    time_range: TimeRange = TimeRange.MONTHLY,
    today: Optional[date] = None,
    start: Optional[date] = None,
    end: Optional[date] = None,
) -> tuple[date, date]:
    """Resolve the interval a card displays.

    A custom start/end pair wins when both are given and end is not before
    start; otherwise the preset time range applies.
    """
    if start is not None and end is not None and end >= start:
        return start, end
    return get_date_range(time_range.value, today)


def series_occupations(entries: Sequence[DailyFinancialEntry]) -> tuple[str, ...]:
    """Occupation names a series covers, read from its first entry."""
    if not entries:
        return ()
    return entries[0].revenue.names()


def select_interval(
    entries: Sequence[DailyFinancialEntry],
    start: date,
    end: date,
    occupations: Optional[Sequence[str]] = None,
) -> list[DailyFinancialEntry]:
    """Return one entry per day from start to end inclusive.

    Days the series does not cover (before its window, or in the future)
    are filled with all-zero entries over the series' occupations.
    """
    if occupations is None:
        occupations = series_occupations(entries)
    by_day = {entry.date: entry for entry in entries}
    selected = []
    for day in each_day(start, end):
        entry = by_day.get(day)
        if entry is None:
            entry = build_entry(day, occupations)
        selected.append(entry)
    return selected


def summarize_interval(
    entries: Sequence[DailyFinancialEntry],
    metric: FinancialMetric,
    occupations: Optional[Sequence[str]] = None,
) -> MetricBreakdown:
    """Sum a metric over a run of entries, total and per occupation."""
    if occupations is None:
        occupations = series_occupations(entries)
    accumulator = BreakdownAccumulator(occupations)
    for entry in entries:
        value = metric.of(entry)
        accumulator.total += value.total
        for item in value.breakdown:
            accumulator.values[item.name] = (
                accumulator.values.get(item.name, 0.0) + item.value
            )
    return accumulator.freeze()


def trend_rows(
    entries: Sequence[DailyFinancialEntry],
    metric: FinancialMetric,
    occupations: Optional[Sequence[str]] = None,
) -> list[tuple[date, tuple[float, ...]]]:
    """Per-day metric values in occupation order, for multi-line trend graphs."""
    if occupations is None:
        occupations = series_occupations(entries)
    rows = []
    for entry in entries:
        value = metric.of(entry)
        rows.append((entry.date, tuple(value.value_for(name) for name in occupations)))
    return rows


def compare_metrics(
    entries: Sequence[DailyFinancialEntry],
    first: FinancialMetric,
    second: FinancialMetric,
) -> list[ComparisonRow]:
    """Pair the absolute daily totals of two metrics."""
    return [
        ComparisonRow(
            date=entry.date,
            first=abs(first.of(entry).total),
            second=abs(second.of(entry).total),
        )
        for entry in entries
    ]


def page_count(item_count: int, per_page: int = ITEMS_PER_PAGE) -> int:
    return math.ceil(item_count / per_page) if item_count > 0 else 0


def paginate(items: Sequence[T], page: int, per_page: int = ITEMS_PER_PAGE) -> list[T]:
    """Return the zero-based page of items (empty past the last page)."""
    if page < 0:
        return []
    start = page * per_page
    return list(items[start : start + per_page])
