"""Domain layer for farmledger.

Only the pure aggregation engine is re-exported here; services that need a
database are imported from their own modules.
"""

from farmledger.domain.classification import build_category_lookup, classify
from farmledger.domain.aggregation import aggregate_expenses, aggregate_sales, sale_total
from farmledger.domain.series import (
    HISTORICAL_WINDOW_DAYS,
    build_financial_series,
    generate_series,
)

__all__ = [
    "build_category_lookup",
    "classify",
    "aggregate_sales",
    "aggregate_expenses",
    "sale_total",
    "generate_series",
    "build_financial_series",
    "HISTORICAL_WINDOW_DAYS",
]
