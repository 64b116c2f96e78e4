"""Expense category presets for each supported business domain."""

from farmledger.domain.entities import ExpenseCategoryConfig
from farmledger.domain.errors import NotFoundError, expense_config_not_found

GOODS_AND_SERVICES = "Goods & Services"
UTILITY_EXPENSES = "Utility Expenses"


POULTRY_EXPENSE_CONFIG = ExpenseCategoryConfig(
    name="poultry",
    detailed_categories={
        GOODS_AND_SERVICES: ("Farm Utilities", "Agricultural Feeds", "Consulting"),
        UTILITY_EXPENSES: (
            "Electricity",
            "Labour Salary",
            "Water Supply",
            "Taxes",
            "Others",
        ),
    },
    cogs_group=GOODS_AND_SERVICES,
    operating_group=UTILITY_EXPENSES,
)

FISHERY_EXPENSE_CONFIG = ExpenseCategoryConfig(
    name="fishery",
    detailed_categories={
        GOODS_AND_SERVICES: (
            "Farm Utilities",
            "Agricultural Feeds",
            "Consulting",
            "Fish Seed",
            "Pond Preparation",
        ),
        UTILITY_EXPENSES: (
            "Electricity",
            "Labour Salary",
            "Water Supply",
            "Taxes",
            "Others",
            "Equipment Maintenance",
        ),
    },
    cogs_group=GOODS_AND_SERVICES,
    operating_group=UTILITY_EXPENSES,
)

APICULTURE_EXPENSE_CONFIG = ExpenseCategoryConfig(
    name="apiculture",
    detailed_categories={
        GOODS_AND_SERVICES: (
            "Beehives",
            "Queen Bees",
            "Sugar Feed",
            "Pollen Patties",
            "Medication",
        ),
        UTILITY_EXPENSES: (
            "Equipment (Smoker, Hive Tool)",
            "Protective Gear",
            "Transportation",
            "Licenses & Permits",
            "Others",
        ),
    },
    cogs_group=GOODS_AND_SERVICES,
    operating_group=UTILITY_EXPENSES,
)

# The all-occupations dashboard uses the poultry taxonomy.
GENERIC_EXPENSE_CONFIG = ExpenseCategoryConfig(
    name="generic",
    detailed_categories=POULTRY_EXPENSE_CONFIG.detailed_categories,
    cogs_group=GOODS_AND_SERVICES,
    operating_group=UTILITY_EXPENSES,
)

EXPENSE_CONFIGS = {
    config.name: config
    for config in (
        GENERIC_EXPENSE_CONFIG,
        POULTRY_EXPENSE_CONFIG,
        FISHERY_EXPENSE_CONFIG,
        APICULTURE_EXPENSE_CONFIG,
    )
}


def get_expense_config(name: str) -> ExpenseCategoryConfig:
    """Look up a preset by domain name (case-insensitive).

    Raises:
        NotFoundError: If no preset has that name
    """
    config = EXPENSE_CONFIGS.get(name.strip().lower())
    if config is None:
        raise NotFoundError(expense_config_not_found(name, sorted(EXPENSE_CONFIGS)))
    return config
