"""Transaction domain service."""

import logging
from datetime import date
from decimal import Decimal
from typing import Any, Optional

from fintrack.database.base import Database
from fintrack.domain.aggregation import (
    DEFAULT_MONTHS,
    compute_category_totals,
    compute_monthly_series,
    compute_summary,
)
from fintrack.domain.authorization import require_owner
from fintrack.domain.entities import (
    CategoryTotal,
    MonthlyTotal,
    Summary,
    Transaction,
    TransactionKind,
    TransactionUpdate,
)
from fintrack.domain.errors import ForbiddenError, NotFoundError, transaction_not_found
from fintrack.domain.validation import validate_new_transaction, validate_update

logger = logging.getLogger(__name__)


class TransactionService:
    """Service for managing a user's transactions.

    Every operation takes the caller identity first and only ever exposes
    transactions owned by that caller.
    """

    def __init__(self, db: Database):
        """Initialize transaction service.

        Args:
            db: Database instance
        """
        self.db = db

    def list_transactions(self, caller_id: str) -> list[Transaction]:
        """List all transactions owned by the caller.

        Args:
            caller_id: Caller identity

        Returns:
            Transactions ordered by business date, newest first
        """
        return self.db.list_transactions(caller_id)

    def create_transaction(
        self,
        caller_id: str,
        kind: TransactionKind | str,
        amount: Decimal | str | int | float,
        category: str,
        occurred_at: date | str,
        description: Optional[str] = None,
    ) -> Transaction:
        """Create a transaction owned by the caller.

        Args:
            caller_id: Caller identity, recorded as the owner
            kind: Income or expense
            amount: Strictly positive amount
            category: Category name
            occurred_at: Business date of the transaction
            description: Optional description, defaults to empty

        Returns:
            The stored transaction

        Raises:
            ValidationError: If any field is invalid
        """
        fields = validate_new_transaction(
            kind=kind,
            amount=amount,
            category=category,
            occurred_at=occurred_at,
            description=description,
        )
        transaction_id = self.db.create_transaction(owner_id=caller_id, **fields)
        logger.info("User %s created transaction %s", caller_id, transaction_id)
        return self._get_existing(transaction_id)

    def get_transaction(self, caller_id: str, transaction_id: int) -> Transaction:
        """Get a transaction owned by the caller.

        Raises:
            NotFoundError: If the transaction doesn't exist
            ForbiddenError: If the caller doesn't own it
        """
        return self._get_owned(caller_id, transaction_id, "view")

    def update_transaction(
        self,
        caller_id: str,
        transaction_id: int,
        update: Optional[TransactionUpdate] = None,
        **fields: Any,
    ) -> Transaction:
        """Apply a partial update to a transaction owned by the caller.

        Supplied fields are validated before the record is looked up, so
        a rejected update never touches the store.

        Args:
            caller_id: Caller identity
            transaction_id: Transaction ID to update
            update: Partial update; alternatively pass fields as keywords
            **fields: Keyword form of TransactionUpdate fields

        Returns:
            The updated transaction

        Raises:
            ValidationError: If a supplied field is invalid
            NotFoundError: If the transaction doesn't exist
            ForbiddenError: If the caller doesn't own it
        """
        if update is None:
            update = TransactionUpdate(**fields)
        elif fields:
            raise TypeError("Pass either an update or keyword fields, not both")

        changes = validate_update(update)
        existing = self._get_owned(caller_id, transaction_id, "update")
        if not changes:
            return existing

        self.db.update_transaction(transaction_id, **changes)
        logger.info(
            "User %s updated transaction %s (%s)",
            caller_id,
            transaction_id,
            ", ".join(sorted(changes)),
        )
        return self._get_existing(transaction_id)

    def delete_transaction(self, caller_id: str, transaction_id: int) -> None:
        """Permanently delete a transaction owned by the caller.

        Raises:
            NotFoundError: If the transaction doesn't exist
            ForbiddenError: If the caller doesn't own it
        """
        self._get_owned(caller_id, transaction_id, "delete")
        self.db.delete_transaction(transaction_id)
        logger.info("User %s deleted transaction %s", caller_id, transaction_id)

    def get_summary(self, caller_id: str) -> Summary:
        """Get income, expense and balance totals for the caller."""
        return compute_summary(self.list_transactions(caller_id))

    def get_category_totals(self, caller_id: str) -> list[CategoryTotal]:
        """Get per-category expense totals for the caller."""
        return compute_category_totals(self.list_transactions(caller_id))

    def get_monthly_series(
        self, caller_id: str, months: int = DEFAULT_MONTHS
    ) -> list[MonthlyTotal]:
        """Get income/expense totals for the caller's most recent months."""
        return compute_monthly_series(self.list_transactions(caller_id), months=months)

    def _get_existing(self, transaction_id: int) -> Transaction:
        txn = self.db.get_transaction(transaction_id)
        if txn is None:
            raise NotFoundError(transaction_not_found(transaction_id))
        return txn

    def _get_owned(self, caller_id: str, transaction_id: int, action: str) -> Transaction:
        # Existence is checked before ownership: missing -> 404, foreign -> 403
        txn = self._get_existing(transaction_id)
        try:
            require_owner(caller_id, txn, action)
        except ForbiddenError:
            logger.warning(
                "User %s denied %s on transaction %s", caller_id, action, transaction_id
            )
            raise
        return txn
