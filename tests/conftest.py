"""Shared pytest fixtures for fintrack tests."""

from datetime import date, datetime
from decimal import Decimal

import pytest

from fintrack.database.factories import create_sqlite_database
from fintrack.domain.entities import Transaction, TransactionKind
from fintrack.domain.transaction import TransactionService

OWNER_ID = "user-alice"
OTHER_USER_ID = "user-bob"


@pytest.fixture
def temp_db(tmp_path):
    """Create a temporary database for testing."""
    db_path = tmp_path / "fintrack.db"

    db = create_sqlite_database(database_path=str(db_path))
    # Store the path for CLI tests that need it
    db.database_path = str(db_path)
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()


@pytest.fixture
def transaction_service(temp_db):
    """Create a TransactionService with a temporary database."""
    return TransactionService(temp_db)


@pytest.fixture
def owner_id():
    """Identity of the user owning the sample transactions."""
    return OWNER_ID


@pytest.fixture
def other_user_id():
    """Identity of a user who owns none of the sample transactions."""
    return OTHER_USER_ID


@pytest.fixture
def sample_transactions(transaction_service, owner_id):
    """Create one income and two food expenses across January and February 2024."""
    return [
        transaction_service.create_transaction(
            owner_id,
            kind="income",
            amount="1000",
            category="Salary",
            occurred_at=date(2024, 1, 5),
        ),
        transaction_service.create_transaction(
            owner_id,
            kind="expense",
            amount="200",
            category="Food",
            occurred_at=date(2024, 1, 10),
            description="Groceries",
        ),
        transaction_service.create_transaction(
            owner_id,
            kind="expense",
            amount="300",
            category="Food",
            occurred_at=date(2024, 2, 1),
        ),
    ]


@pytest.fixture
def make_transaction():
    """Build in-memory Transaction entities for pure aggregation tests."""
    counter = {"next_id": 1}

    def _make(
        kind: str,
        amount: str,
        occurred_at: date,
        category: str = "Other",
        owner_id: str = OWNER_ID,
        description: str = "",
    ) -> Transaction:
        txn = Transaction(
            id=counter["next_id"],
            owner_id=owner_id,
            kind=TransactionKind(kind),
            amount=Decimal(amount),
            category=category,
            description=description,
            occurred_at=occurred_at,
            created_at=datetime(2024, 1, 1, 12, 0, 0),
        )
        counter["next_id"] += 1
        return txn

    return _make


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
