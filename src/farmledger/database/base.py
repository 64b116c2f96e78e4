"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from farmledger.domain.entities import ExpenseRecord, SaleRecord, UserProfile


class Database(ABC):
    """Abstract store for users and their raw sale and expense records."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # User operations
    @abstractmethod
    def create_user(self, name: str, occupations: Sequence[str] = ()) -> int:
        """Create a new user. Returns user ID."""
        pass

    @abstractmethod
    def get_user(self, user_id: int) -> Optional[UserProfile]:
        """Get user by ID."""
        pass

    @abstractmethod
    def get_user_by_name(self, name: str) -> Optional[UserProfile]:
        """Get user by name."""
        pass

    @abstractmethod
    def list_users(self) -> list[UserProfile]:
        """List all users."""
        pass

    @abstractmethod
    def set_user_occupations(self, user_id: int, occupations: Sequence[str]) -> None:
        """Replace the user's declared occupations."""
        pass

    # Sale operations
    @abstractmethod
    def add_sale(self, user_id: int, sale: SaleRecord) -> int:
        """Store a sale record. Returns the stored row ID."""
        pass

    @abstractmethod
    def sale_exists(self, user_id: int, sale_id: int) -> bool:
        """Check whether a backend sale ID is already stored for the user."""
        pass

    @abstractmethod
    def list_sales(self, user_id: int) -> list[SaleRecord]:
        """List the user's sales, oldest first."""
        pass

    # Expense operations
    @abstractmethod
    def add_expense(self, user_id: int, expense: ExpenseRecord) -> int:
        """Store an expense record. Returns the stored row ID."""
        pass

    @abstractmethod
    def expense_exists(self, user_id: int, expense_id: int) -> bool:
        """Check whether a backend expense ID is already stored for the user."""
        pass

    @abstractmethod
    def list_expenses(self, user_id: int) -> list[ExpenseRecord]:
        """List the user's expenses, oldest first."""
        pass
