"""Financial series domain service."""

from datetime import date
from typing import Optional

from farmledger.database.base import Database
from farmledger.domain.entities import ExpenseCategoryConfig, FinancialSeries
from farmledger.domain.errors import ValidationError, negative_window
from farmledger.domain.series import HISTORICAL_WINDOW_DAYS, build_financial_series
from farmledger.domain.user import UserService


class FinanceService:
    """Service that builds dashboard financial series from stored records."""

    def __init__(self, db: Database):
        """Initialize finance service.

        Args:
            db: Database instance
        """
        self.db = db
        self.user_service = UserService(db)

    def build_series(
        self,
        user_id: int,
        config: ExpenseCategoryConfig,
        target_occupation: Optional[str] = None,
        window_size_days: int = HISTORICAL_WINDOW_DAYS,
        reference_date: Optional[date] = None,
    ) -> FinancialSeries:
        """Build the daily series for one user.

        Args:
            user_id: User whose records are aggregated
            config: Expense classification rules for the active domain
            target_occupation: Occupation a single-occupation dashboard is
                scoped to; None for the all-occupations dashboard
            window_size_days: Number of trailing days to produce
            reference_date: Last day of the window, defaults to local today

        Returns:
            FinancialSeries covering the window

        Raises:
            NotFoundError: If the user doesn't exist
            ValidationError: If the window size is negative
        """
        if window_size_days < 0:
            raise ValidationError(negative_window(window_size_days))
        user = self.user_service.require_user(user_id)

        return build_financial_series(
            sales=self.db.list_sales(user.id),
            expenses=self.db.list_expenses(user.id),
            config=config,
            declared_occupations=user.occupations,
            target_occupation=target_occupation,
            window_size_days=window_size_days,
            reference_date=reference_date,
        )
