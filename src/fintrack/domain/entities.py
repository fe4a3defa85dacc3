"""Domain model entities for fintrack.

These are pure data classes representing business concepts, independent of
database schema. The service and aggregation layers only ever see these,
never ORM rows.
"""

from dataclasses import dataclass
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional


class TransactionKind(str, Enum):
    """Income/expense discriminator of a transaction."""

    INCOME = "income"
    EXPENSE = "expense"


@dataclass(frozen=True)
class Transaction:
    """Transaction domain entity."""

    id: int
    owner_id: str
    kind: TransactionKind
    amount: Decimal
    category: str
    description: str
    occurred_at: date
    created_at: datetime


@dataclass(frozen=True)
class TransactionUpdate:
    """Partial update for a transaction.

    A field left as None is not supplied and keeps its stored value.
    """

    kind: Optional[TransactionKind | str] = None
    amount: Optional[Decimal | str | int | float] = None
    category: Optional[str] = None
    description: Optional[str] = None
    occurred_at: Optional[date | str] = None

    def is_empty(self) -> bool:
        """Return True if no field is supplied."""
        return all(
            value is None
            for value in (
                self.kind,
                self.amount,
                self.category,
                self.description,
                self.occurred_at,
            )
        )


@dataclass(frozen=True)
class Summary:
    """Income, expense and balance totals for a set of transactions."""

    total_income: Decimal
    total_expense: Decimal
    balance: Decimal


@dataclass(frozen=True)
class CategoryTotal:
    """Expense total for a single category."""

    category: str
    total: Decimal


@dataclass(frozen=True)
class MonthlyTotal:
    """Income and expense totals for one calendar month."""

    month: str
    label: str
    income: Decimal
    expense: Decimal
