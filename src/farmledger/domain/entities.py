"""Domain model entities for farmledger.

These are pure data classes representing the raw records the backend hands
us and the financial series derived from them, independent of the database
schema used to store the raw records locally.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Sequence

from farmledger.utils.date_parser import RecordDate

UNCATEGORIZED = "Uncategorized"


class ExpenseType(str, Enum):
    """Financial bucket an expense category is classified into."""

    COGS = "cogs"
    EXPENSES = "expenses"


@dataclass(frozen=True)
class UserProfile:
    """Platform user with the sub-occupations they declared."""

    id: int
    name: str
    occupations: tuple[str, ...] = ()


@dataclass(frozen=True)
class SaleRecord:
    """One sales transaction.

    ``items_sold``, ``quantities_sold`` and ``prices_per_unit`` are parallel
    arrays. The sale total is never stored; see
    :func:`farmledger.domain.aggregation.sale_total`.
    """

    sale_date: RecordDate
    occupation: Optional[str] = None
    items_sold: Sequence[str] = ()
    quantities_sold: Sequence[float] = ()
    prices_per_unit: Optional[Sequence[float]] = None
    sale_id: Optional[int] = None
    user_id: Optional[int] = None


@dataclass(frozen=True)
class ExpenseRecord:
    """One expense transaction."""

    date_created: RecordDate
    category: str
    amount: float
    occupation: Optional[str] = None
    expense_id: Optional[int] = None
    user_id: Optional[int] = None


@dataclass(frozen=True, eq=False)
class ExpenseCategoryConfig:
    """Expense classification rules for one business domain.

    ``detailed_categories`` maps each main group to its subcategories. The
    main group named ``cogs_group`` holds cost-of-goods categories and the
    one named ``operating_group`` holds operating-expense categories.

    The category lists are copied into a read-only mapping of tuples, and
    instances compare and hash by identity, so the derived category lookup
    can be memoized per config.
    """

    detailed_categories: Mapping[str, Sequence[str]]
    cogs_group: str
    operating_group: str
    name: str = "custom"

    def __post_init__(self):
        frozen = MappingProxyType(
            {group: tuple(subs) for group, subs in self.detailed_categories.items()}
        )
        object.__setattr__(self, "detailed_categories", frozen)


@dataclass(frozen=True)
class SubTypeValue:
    """Value of a metric for one occupation."""

    name: str
    value: float


@dataclass(frozen=True)
class MetricBreakdown:
    """A metric total with its per-occupation decomposition."""

    total: float
    breakdown: tuple[SubTypeValue, ...] = ()

    @classmethod
    def zero(cls, occupations: Sequence[str]) -> "MetricBreakdown":
        """Build an all-zero breakdown with one entry per occupation."""
        return cls(
            total=0.0,
            breakdown=tuple(SubTypeValue(name=name, value=0.0) for name in occupations),
        )

    def value_for(self, occupation: str) -> float:
        """Return the value recorded for an occupation, 0 if it has none."""
        for item in self.breakdown:
            if item.name == occupation:
                return item.value
        return 0.0

    def names(self) -> tuple[str, ...]:
        return tuple(item.name for item in self.breakdown)

    def as_dict(self) -> dict[str, float]:
        return {item.name: item.value for item in self.breakdown}


@dataclass(frozen=True)
class DailyExpenses:
    """COGS and operating-expense buckets for a single day."""

    cogs: MetricBreakdown
    expenses: MetricBreakdown


@dataclass(frozen=True)
class DailyFinancialEntry:
    """One calendar day's full metric set."""

    date: date
    revenue: MetricBreakdown
    cogs: MetricBreakdown
    gross_profit: MetricBreakdown
    expenses: MetricBreakdown
    net_profit: MetricBreakdown


@dataclass(frozen=True)
class FinancialSeries:
    """Daily entries for a window plus the occupation set they cover."""

    entries: tuple[DailyFinancialEntry, ...]
    occupations: tuple[str, ...] = field(default_factory=tuple)
