"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity or configuration does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


def user_not_found(user_id: int) -> str:
    """Return message for missing user."""
    return f"User {user_id} not found"


def duplicate_user_name(name: str) -> str:
    """Return message for an already registered user name."""
    return f"User with name '{name}' already exists"


def expense_config_not_found(name: str, known: list[str]) -> str:
    """Return message for an unknown expense category preset."""
    return f"Expense category config '{name}' not found. Available: {', '.join(known)}"


def invalid_record(kind: str, index: int, reason: str) -> str:
    """Return message for a payload record that cannot be imported."""
    return f"{kind} #{index}: {reason}"


def negative_window(days: int) -> str:
    """Return message for a negative historical window size."""
    return f"Window size must be zero or more days, got {days}"
