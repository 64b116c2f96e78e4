"""User domain service."""

from typing import Any, Iterable, Optional

from farmledger.database.base import Database
from farmledger.domain.entities import UserProfile
from farmledger.domain.errors import (
    ConflictError,
    NotFoundError,
    duplicate_user_name,
    user_not_found,
)


def parse_occupations(raw: Any) -> list[str]:
    """Normalize a backend ``sub_type`` value into a list of occupations.

    The backend sends either a JSON list or a Postgres array literal such as
    ``{Poultry,"Apiculture"}``. Blank entries and duplicates are dropped.
    """
    if isinstance(raw, str):
        for char in '{}"':
            raw = raw.replace(char, "")
        items = raw.split(",")
    elif isinstance(raw, (list, tuple)):
        items = [str(item) for item in raw if item is not None]
    else:
        return []
    return list(dict.fromkeys(item.strip() for item in items if item.strip()))


class UserService:
    """Service for managing users and their declared occupations."""

    def __init__(self, db: Database):
        """Initialize user service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_user(self, name: str, occupations: Iterable[str] = ()) -> int:
        """Create a user.

        Args:
            name: Unique user name
            occupations: Declared sub-occupations (e.g. "Poultry")

        Returns:
            User ID

        Raises:
            ConflictError: If a user with that name already exists
        """
        if self.db.get_user_by_name(name) is not None:
            raise ConflictError(duplicate_user_name(name))
        return self.db.create_user(name=name, occupations=parse_occupations(list(occupations)))

    def get_user(self, user_id: int) -> Optional[UserProfile]:
        return self.db.get_user(user_id)

    def require_user(self, user_id: int) -> UserProfile:
        """Get user by ID, raising NotFoundError if missing."""
        user = self.db.get_user(user_id)
        if user is None:
            raise NotFoundError(user_not_found(user_id))
        return user

    def list_users(self) -> list[UserProfile]:
        return self.db.list_users()

    def resolve_user(self, user: str | int) -> UserProfile:
        """Resolve a user name or ID.

        Args:
            user: User name, or ID (int or string representation of int)

        Raises:
            NotFoundError: If no user matches
        """
        if isinstance(user, int):
            return self.require_user(user)

        try:
            user_id = int(user)
        except (ValueError, TypeError):
            user_id = None
        if user_id is not None:
            return self.require_user(user_id)

        profile = self.db.get_user_by_name(user)
        if profile is None:
            raise NotFoundError(f"User '{user}' not found")
        return profile

    def set_occupations(self, user_id: int, occupations: Any) -> list[str]:
        """Replace the user's declared occupations.

        Accepts the same shapes as the backend ``sub_type`` field.

        Returns:
            The normalized occupation list that was stored
        """
        self.require_user(user_id)
        normalized = parse_occupations(occupations)
        self.db.set_user_occupations(user_id, normalized)
        return normalized

    def add_occupation(self, user_id: int, occupation: str) -> list[str]:
        """Append one occupation to the user's declared list if missing."""
        user = self.require_user(user_id)
        return self.set_occupations(user_id, [*user.occupations, occupation])
