"""Ownership-based authorization for transactions."""

from enum import Enum
from typing import Any

from fintrack.domain.entities import Transaction
from fintrack.domain.errors import ForbiddenError, transaction_forbidden


class Decision(Enum):
    """Outcome of an authorization check."""

    ALLOW = "allow"
    DENY = "deny"


def is_owner(caller_id: Any, owner_id: Any) -> bool:
    """Return True if both identifiers denote the same user.

    Identifiers are opaque and compared by their string form, so an integer
    user ID matches its stored string representation.
    """
    if caller_id is None or owner_id is None:
        return False
    return str(caller_id) == str(owner_id)


def authorize(caller_id: Any, transaction: Transaction) -> Decision:
    """Decide whether the caller may act on a transaction."""
    if is_owner(caller_id, transaction.owner_id):
        return Decision.ALLOW
    return Decision.DENY


def require_owner(caller_id: Any, transaction: Transaction, action: str) -> None:
    """Raise ForbiddenError unless the caller owns the transaction.

    Args:
        caller_id: Caller identity
        transaction: Existing transaction
        action: Verb used in the error message (e.g. "update")

    Raises:
        ForbiddenError: If the caller is not the owner
    """
    if authorize(caller_id, transaction) is Decision.DENY:
        raise ForbiddenError(transaction_forbidden(transaction.id, action))
