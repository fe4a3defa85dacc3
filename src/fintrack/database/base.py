"""Abstract database interface."""

from abc import ABC, abstractmethod
from datetime import date
from decimal import Decimal
from typing import Optional

# Import entities directly to avoid circular import through domain/__init__.py
from fintrack.domain.entities import Transaction, TransactionKind


class Database(ABC):
    """Abstract database interface for fintrack.

    Every operation either succeeds or raises StorageError.
    """

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

    # Transaction operations
    @abstractmethod
    def create_transaction(
        self,
        owner_id: str,
        kind: TransactionKind,
        amount: Decimal,
        category: str,
        occurred_at: date,
        description: str = "",
    ) -> int:
        """Create a transaction. Returns transaction ID."""
        pass

    @abstractmethod
    def get_transaction(self, transaction_id: int) -> Optional[Transaction]:
        """Get transaction by ID."""
        pass

    @abstractmethod
    def list_transactions(self, owner_id: str) -> list[Transaction]:
        """List transactions of an owner, newest business date first."""
        pass

    @abstractmethod
    def update_transaction(
        self,
        transaction_id: int,
        kind: Optional[TransactionKind] = None,
        amount: Optional[Decimal] = None,
        category: Optional[str] = None,
        description: Optional[str] = None,
        occurred_at: Optional[date] = None,
    ) -> None:
        """Update transaction fields. Fields left as None are unchanged.

        Raises:
            NotFoundError: If the transaction doesn't exist
        """
        pass

    @abstractmethod
    def delete_transaction(self, transaction_id: int) -> None:
        """Delete a transaction permanently.

        Raises:
            NotFoundError: If the transaction doesn't exist
        """
        pass
