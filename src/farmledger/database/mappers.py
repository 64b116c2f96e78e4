"""Mapper functions to convert SQLAlchemy models into domain entities."""

from farmledger.domain import entities as domain
from farmledger.database.models import (
    User as ORMUser,
    Sale as ORMSale,
    Expense as ORMExpense,
)


def user_to_domain(orm_user: ORMUser) -> domain.UserProfile:
    """Convert SQLAlchemy User model to domain UserProfile entity."""
    return domain.UserProfile(
        id=orm_user.id,
        name=orm_user.name,
        occupations=tuple(orm_user.occupations or ()),
    )


def sale_to_domain(orm_sale: ORMSale) -> domain.SaleRecord:
    """Convert SQLAlchemy Sale model to domain SaleRecord entity."""
    prices = orm_sale.prices_per_unit
    return domain.SaleRecord(
        sale_id=orm_sale.external_id,
        user_id=orm_sale.user_id,
        sale_date=orm_sale.sale_date,
        occupation=orm_sale.occupation,
        items_sold=tuple(orm_sale.items_sold or ()),
        quantities_sold=tuple(orm_sale.quantities_sold or ()),
        prices_per_unit=tuple(prices) if prices is not None else None,
    )


def expense_to_domain(orm_expense: ORMExpense) -> domain.ExpenseRecord:
    """Convert SQLAlchemy Expense model to domain ExpenseRecord entity."""
    return domain.ExpenseRecord(
        expense_id=orm_expense.external_id,
        user_id=orm_expense.user_id,
        date_created=orm_expense.date_created,
        occupation=orm_expense.occupation,
        category=orm_expense.category,
        amount=orm_expense.amount,
    )
