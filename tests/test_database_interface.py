"""Tests for Database interface returning domain models."""

import pytest
from datetime import date

from farmledger.domain import entities
from farmledger.domain.errors import ConflictError, NotFoundError


def _sale(sale_id=None, sale_date="2024-03-15", occupation="Poultry"):
    return entities.SaleRecord(
        sale_id=sale_id,
        sale_date=sale_date,
        occupation=occupation,
        items_sold=("Eggs",),
        quantities_sold=("10",),
        prices_per_unit=(5,),
    )


class TestDatabaseInterface:
    """Tests to verify Database interface returns domain models."""

    def test_get_user_returns_domain_model(self, temp_db):
        """Test that get_user returns a domain UserProfile entity."""
        user_id = temp_db.create_user(name="alice", occupations=["Poultry"])

        user = temp_db.get_user(user_id)

        assert isinstance(user, entities.UserProfile)
        assert user.id == user_id
        assert user.occupations == ("Poultry",)

    def test_get_missing_user_returns_none(self, temp_db):
        assert temp_db.get_user(1) is None
        assert temp_db.get_user_by_name("nobody") is None

    def test_create_user_rejects_duplicate_name(self, temp_db):
        temp_db.create_user(name="alice")

        with pytest.raises(ConflictError):
            temp_db.create_user(name="alice")

    def test_add_sale_normalizes_values(self, temp_db, sample_user):
        """Test that stored sales come back as domain SaleRecords."""
        temp_db.add_sale(sample_user.id, _sale(sale_id=7, sale_date="2024-03-15T09:30:00"))

        (sale,) = temp_db.list_sales(sample_user.id)

        assert isinstance(sale, entities.SaleRecord)
        assert sale.sale_id == 7
        assert sale.user_id == sample_user.id
        assert sale.sale_date == date(2024, 3, 15)
        assert sale.quantities_sold == (10.0,)

    def test_add_sale_keeps_missing_prices(self, temp_db, sample_user):
        sale = entities.SaleRecord(sale_date=date(2024, 3, 15), items_sold=("Eggs",))
        temp_db.add_sale(sample_user.id, sale)

        (stored,) = temp_db.list_sales(sample_user.id)

        assert stored.prices_per_unit is None
        assert stored.occupation is None

    def test_list_sales_oldest_first(self, temp_db, sample_user):
        for day in ("2024-03-20", "2024-03-01", "2024-03-10"):
            temp_db.add_sale(sample_user.id, _sale(sale_date=day))

        sales = temp_db.list_sales(sample_user.id)

        assert [s.sale_date for s in sales] == [
            date(2024, 3, 1),
            date(2024, 3, 10),
            date(2024, 3, 20),
        ]

    def test_sale_exists_is_scoped_to_user(self, temp_db, sample_user):
        other_id = temp_db.create_user(name="bob")
        temp_db.add_sale(sample_user.id, _sale(sale_id=1))

        assert temp_db.sale_exists(sample_user.id, 1)
        assert not temp_db.sale_exists(other_id, 1)

    def test_add_expense_returns_domain_model(self, temp_db, sample_user):
        expense = entities.ExpenseRecord(
            expense_id=3,
            date_created="2024-03-15",
            category="Electricity",
            amount="12.5",
        )
        temp_db.add_expense(sample_user.id, expense)

        (stored,) = temp_db.list_expenses(sample_user.id)

        assert isinstance(stored, entities.ExpenseRecord)
        assert stored.amount == 12.5
        assert stored.date_created == date(2024, 3, 15)
        assert temp_db.expense_exists(sample_user.id, 3)
        assert not temp_db.expense_exists(sample_user.id, 4)

    def test_records_require_existing_user(self, temp_db):
        with pytest.raises(NotFoundError):
            temp_db.add_sale(99, _sale())
        with pytest.raises(NotFoundError):
            temp_db.set_user_occupations(99, ["Poultry"])
