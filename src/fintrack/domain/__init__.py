"""Domain layer for fintrack application.

Services live in their own modules (``fintrack.domain.transaction``) and are
not re-exported here, since the database layer imports the entities below.
"""

from fintrack.domain.entities import (
    CategoryTotal,
    MonthlyTotal,
    Summary,
    Transaction,
    TransactionKind,
    TransactionUpdate,
)
from fintrack.domain.errors import (
    DomainError,
    ForbiddenError,
    NotFoundError,
    StorageError,
    UnauthenticatedError,
    ValidationError,
)

__all__ = [
    "CategoryTotal",
    "MonthlyTotal",
    "Summary",
    "Transaction",
    "TransactionKind",
    "TransactionUpdate",
    "DomainError",
    "ForbiddenError",
    "NotFoundError",
    "StorageError",
    "UnauthenticatedError",
    "ValidationError",
]
