"""Expense category classification."""

from functools import lru_cache
from types import MappingProxyType
from typing import Mapping, Optional

from farmledger.domain.entities import ExpenseCategoryConfig, ExpenseType


def build_category_lookup(config: ExpenseCategoryConfig) -> Mapping[str, str]:
    """Build a read-only map from subcategory name to its main group.

    Groups are registered in the order ``detailed_categories`` yields them.
    A subcategory listed under more than one group resolves to the group
    registered last.
    """
    lookup: dict[str, str] = {}
    for main_group, sub_categories in config.detailed_categories.items():
        for sub_category in sub_categories:
            lookup[sub_category] = main_group
    return MappingProxyType(lookup)


@lru_cache(maxsize=64)
def category_lookup(config: ExpenseCategoryConfig) -> Mapping[str, str]:
    """Memoized :func:`build_category_lookup`, keyed by config identity."""
    return build_category_lookup(config)


def classify(category: str, config: ExpenseCategoryConfig) -> Optional[ExpenseType]:
    """Classify an expense category as COGS or operating expense.

    Args:
        category: Fine-grained category name (e.g. "Electricity")
        config: Classification rules for the active domain

    Returns:
        ExpenseType.COGS, ExpenseType.EXPENSES, or None when the config does
        not recognize the category. Callers drop unrecognized expenses from
        both buckets.
    """
    main_group = category_lookup(config).get(category)
    if main_group is None:
        return None
    if main_group == config.cogs_group:
        return ExpenseType.COGS
    if main_group == config.operating_group:
        return ExpenseType.EXPENSES
    return None
