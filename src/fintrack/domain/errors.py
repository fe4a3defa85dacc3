"""Shared domain error messages and error types."""

from typing import Optional


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic.

    Carries a mapping of field name to message so callers can report
    every problem with the input at once.
    """

    def __init__(self, errors: dict[str, str]):
        self.errors = dict(errors)
        super().__init__("; ".join(self.errors.values()))


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ForbiddenError(DomainError):
    """Entity exists but the caller does not own it."""


class UnauthenticatedError(DomainError):
    """No usable caller identity was provided."""


class StorageError(DomainError):
    """Persistence layer failure.

    The message is generic; the database layer logs the cause.
    """

    def __init__(self, operation: str, message: Optional[str] = None):
        self.operation = operation
        super().__init__(message or storage_failure(operation))


def transaction_not_found(transaction_id: int) -> str:
    """Return message for missing transaction."""
    return f"Transaction {transaction_id} not found"


def transaction_forbidden(transaction_id: int, action: str) -> str:
    """Return message when the caller does not own a transaction."""
    return f"Not authorized to {action} transaction {transaction_id}"


def storage_failure(operation: str) -> str:
    """Return generic message for a failed storage operation."""
    return f"Server error {operation}"
