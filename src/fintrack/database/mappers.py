"""Mapper functions to convert SQLAlchemy models into domain entities."""

from decimal import Decimal

from fintrack.domain import entities as domain
from fintrack.database.models import Transaction as ORMTransaction


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        id=orm_transaction.id,
        owner_id=orm_transaction.owner_id,
        kind=domain.TransactionKind(orm_transaction.kind),
        amount=Decimal(orm_transaction.amount),
        category=orm_transaction.category,
        description=orm_transaction.description or "",
        occurred_at=orm_transaction.occurred_at,
        created_at=orm_transaction.created_at,
    )
