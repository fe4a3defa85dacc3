"""Tests for TransactionService CRUD, ownership and summary views."""

import logging
from datetime import date
from decimal import Decimal

import pytest

from fintrack.domain.entities import Summary, TransactionKind, TransactionUpdate
from fintrack.domain.errors import ForbiddenError, NotFoundError, ValidationError


class TestCreateAndList:
    """Tests for create_transaction and list_transactions."""

    def test_create_then_list_round_trip(self, transaction_service, owner_id):
        created = transaction_service.create_transaction(
            owner_id,
            kind="expense",
            amount="42.50",
            category="Food & Dining",
            occurred_at=date(2024, 3, 9),
            description="Dinner",
        )

        listed = transaction_service.list_transactions(owner_id)

        assert listed == [created]
        txn = listed[0]
        assert txn.owner_id == owner_id
        assert txn.kind is TransactionKind.EXPENSE
        assert txn.amount == Decimal("42.50")
        assert txn.category == "Food & Dining"
        assert txn.description == "Dinner"
        assert txn.occurred_at == date(2024, 3, 9)
        assert txn.created_at is not None

    def test_description_defaults_to_empty(self, transaction_service, owner_id):
        txn = transaction_service.create_transaction(
            owner_id, kind="income", amount=100, category="Gift", occurred_at="2024-01-01"
        )

        assert txn.description == ""

    def test_category_is_trimmed(self, transaction_service, owner_id):
        txn = transaction_service.create_transaction(
            owner_id, kind="income", amount=1, category="  Salary ", occurred_at="2024-01-01"
        )

        assert txn.category == "Salary"

    def test_zero_amount_rejected(self, transaction_service, owner_id):
        with pytest.raises(ValidationError) as exc_info:
            transaction_service.create_transaction(
                owner_id, kind="expense", amount=0, category="Food", occurred_at="2024-01-01"
            )

        assert "amount" in exc_info.value.errors
        assert transaction_service.list_transactions(owner_id) == []

    def test_huge_amount_rejected(self, transaction_service, owner_id):
        with pytest.raises(ValidationError) as exc_info:
            transaction_service.create_transaction(
                owner_id, kind="income", amount="1e30", category="Salary", occurred_at="2024-01-01"
            )

        assert "must not exceed" in exc_info.value.errors["amount"]
        assert transaction_service.list_transactions(owner_id) == []

    def test_invalid_kind_rejected(self, transaction_service, owner_id):
        with pytest.raises(ValidationError):
            transaction_service.create_transaction(
                owner_id, kind="refund", amount=5, category="Food", occurred_at="2024-01-01"
            )

    def test_list_is_scoped_to_owner(
        self, transaction_service, sample_transactions, other_user_id
    ):
        other = transaction_service.create_transaction(
            other_user_id, kind="income", amount=1, category="Gift", occurred_at="2024-01-01"
        )

        assert transaction_service.list_transactions(other_user_id) == [other]
        assert other.id not in {
            txn.id for txn in transaction_service.list_transactions(sample_transactions[0].owner_id)
        }

    def test_list_newest_business_date_first(self, transaction_service, sample_transactions, owner_id):
        listed = transaction_service.list_transactions(owner_id)

        assert [txn.occurred_at for txn in listed] == [
            date(2024, 2, 1),
            date(2024, 1, 10),
            date(2024, 1, 5),
        ]

    def test_list_same_date_newest_record_first(self, transaction_service, owner_id):
        first = transaction_service.create_transaction(
            owner_id, kind="expense", amount=1, category="A", occurred_at="2024-06-01"
        )
        second = transaction_service.create_transaction(
            owner_id, kind="expense", amount=2, category="B", occurred_at="2024-06-01"
        )

        assert [txn.id for txn in transaction_service.list_transactions(owner_id)] == [
            second.id,
            first.id,
        ]

    def test_list_unknown_user_is_empty(self, transaction_service, sample_transactions):
        assert transaction_service.list_transactions("nobody") == []


class TestGetTransaction:
    """Tests for get_transaction."""

    def test_owner_can_get(self, transaction_service, sample_transactions, owner_id):
        txn = sample_transactions[1]

        assert transaction_service.get_transaction(owner_id, txn.id) == txn

    def test_missing_is_not_found(self, transaction_service, owner_id):
        with pytest.raises(NotFoundError, match="Transaction 999 not found"):
            transaction_service.get_transaction(owner_id, 999)

    def test_other_user_is_forbidden(self, transaction_service, sample_transactions, other_user_id):
        with pytest.raises(ForbiddenError):
            transaction_service.get_transaction(other_user_id, sample_transactions[0].id)


class TestUpdateTransaction:
    """Tests for update_transaction."""

    def test_partial_update_changes_only_supplied_fields(
        self, transaction_service, sample_transactions, owner_id
    ):
        original = sample_transactions[1]

        updated = transaction_service.update_transaction(
            owner_id, original.id, TransactionUpdate(amount="250.75")
        )

        assert updated.amount == Decimal("250.75")
        assert updated.kind == original.kind
        assert updated.category == original.category
        assert updated.description == original.description
        assert updated.occurred_at == original.occurred_at
        assert updated.owner_id == original.owner_id
        assert updated.created_at == original.created_at

    def test_keyword_fields(self, transaction_service, sample_transactions, owner_id):
        txn = sample_transactions[0]

        updated = transaction_service.update_transaction(
            owner_id, txn.id, kind="expense", category="Rent", occurred_at="2024-03-01"
        )

        assert updated.kind is TransactionKind.EXPENSE
        assert updated.category == "Rent"
        assert updated.occurred_at == date(2024, 3, 1)

    def test_update_and_keywords_together_rejected(
        self, transaction_service, sample_transactions, owner_id
    ):
        with pytest.raises(TypeError):
            transaction_service.update_transaction(
                owner_id, sample_transactions[0].id, TransactionUpdate(amount=1), category="x"
            )

    def test_description_can_be_cleared(self, transaction_service, sample_transactions, owner_id):
        txn = sample_transactions[1]
        assert txn.description == "Groceries"

        updated = transaction_service.update_transaction(
            owner_id, txn.id, TransactionUpdate(description="")
        )

        assert updated.description == ""

    def test_empty_update_returns_existing(self, transaction_service, sample_transactions, owner_id):
        txn = sample_transactions[2]

        assert transaction_service.update_transaction(owner_id, txn.id, TransactionUpdate()) == txn

    def test_zero_amount_rejected_and_record_unchanged(
        self, transaction_service, sample_transactions, owner_id
    ):
        txn = sample_transactions[1]

        with pytest.raises(ValidationError):
            transaction_service.update_transaction(
                owner_id, txn.id, TransactionUpdate(amount=0, category="Travel")
            )

        assert transaction_service.get_transaction(owner_id, txn.id) == txn

    def test_empty_category_rejected(self, transaction_service, sample_transactions, owner_id):
        with pytest.raises(ValidationError) as exc_info:
            transaction_service.update_transaction(
                owner_id, sample_transactions[1].id, TransactionUpdate(category="  ")
            )

        assert set(exc_info.value.errors) == {"category"}

    def test_missing_is_not_found(self, transaction_service, owner_id):
        with pytest.raises(NotFoundError):
            transaction_service.update_transaction(owner_id, 404, TransactionUpdate(amount=1))

    def test_validation_reported_before_existence(self, transaction_service, owner_id):
        with pytest.raises(ValidationError):
            transaction_service.update_transaction(owner_id, 404, TransactionUpdate(amount=0))

    @pytest.mark.parametrize(
        "update",
        [
            TransactionUpdate(amount="1"),
            TransactionUpdate(kind="income", category="Stolen", description=""),
            TransactionUpdate(occurred_at="2030-01-01"),
        ],
    )
    def test_non_owner_is_forbidden_and_nothing_changes(
        self, transaction_service, sample_transactions, owner_id, other_user_id, update
    ):
        txn = sample_transactions[1]

        with pytest.raises(ForbiddenError):
            transaction_service.update_transaction(other_user_id, txn.id, update)

        assert transaction_service.get_transaction(owner_id, txn.id) == txn

    def test_forbidden_update_is_logged(
        self, transaction_service, sample_transactions, other_user_id, caplog
    ):
        txn = sample_transactions[0]

        with caplog.at_level(logging.WARNING, logger="fintrack.domain.transaction"):
            with pytest.raises(ForbiddenError):
                transaction_service.update_transaction(other_user_id, txn.id, amount="5")

        assert f"denied update on transaction {txn.id}" in caplog.text


class TestDeleteTransaction:
    """Tests for delete_transaction."""

    def test_delete_removes_from_list(self, transaction_service, sample_transactions, owner_id):
        txn = sample_transactions[0]

        transaction_service.delete_transaction(owner_id, txn.id)

        assert txn.id not in {t.id for t in transaction_service.list_transactions(owner_id)}
        with pytest.raises(NotFoundError):
            transaction_service.get_transaction(owner_id, txn.id)

    def test_delete_twice_is_not_found(self, transaction_service, sample_transactions, owner_id):
        txn = sample_transactions[0]
        transaction_service.delete_transaction(owner_id, txn.id)

        with pytest.raises(NotFoundError):
            transaction_service.delete_transaction(owner_id, txn.id)

    def test_non_owner_cannot_delete(
        self, transaction_service, sample_transactions, owner_id, other_user_id
    ):
        txn = sample_transactions[2]

        with pytest.raises(ForbiddenError):
            transaction_service.delete_transaction(other_user_id, txn.id)

        assert len(transaction_service.list_transactions(owner_id)) == 3

    def test_delete_logged(self, transaction_service, sample_transactions, owner_id, caplog):
        txn = sample_transactions[0]

        with caplog.at_level(logging.INFO, logger="fintrack.domain.transaction"):
            transaction_service.delete_transaction(owner_id, txn.id)

        assert f"deleted transaction {txn.id}" in caplog.text


class TestSummaryViews:
    """Tests for summary and chart views over the caller's transactions."""

    def test_summary(self, transaction_service, sample_transactions, owner_id):
        assert transaction_service.get_summary(owner_id) == Summary(
            total_income=Decimal("1000"),
            total_expense=Decimal("500"),
            balance=Decimal("500"),
        )

    def test_summary_for_user_without_transactions(
        self, transaction_service, sample_transactions, other_user_id
    ):
        summary = transaction_service.get_summary(other_user_id)

        assert summary.total_income == summary.total_expense == summary.balance == Decimal("0")

    def test_summary_excludes_other_users(
        self, transaction_service, sample_transactions, owner_id, other_user_id
    ):
        transaction_service.create_transaction(
            other_user_id, kind="expense", amount=999, category="Food", occurred_at="2024-01-01"
        )

        assert transaction_service.get_summary(owner_id).total_expense == Decimal("500")

    def test_category_totals(self, transaction_service, sample_transactions, owner_id):
        totals = transaction_service.get_category_totals(owner_id)

        assert [(item.category, item.total) for item in totals] == [("Food", Decimal("500.00"))]

    def test_monthly_series(self, transaction_service, sample_transactions, owner_id):
        series = transaction_service.get_monthly_series(owner_id)

        assert [(item.label, item.income, item.expense) for item in series] == [
            ("Jan 2024", Decimal("1000.00"), Decimal("200.00")),
            ("Feb 2024", Decimal("0.00"), Decimal("300.00")),
        ]

    def test_monthly_series_with_early_year(self, transaction_service, sample_transactions, owner_id):
        transaction_service.create_transaction(
            owner_id, kind="expense", amount=5, category="Food", occurred_at="0999-01-01"
        )

        series = transaction_service.get_monthly_series(owner_id)

        assert [item.month for item in series] == ["0999-01", "2024-01", "2024-02"]

    def test_summary_reflects_updates(self, transaction_service, sample_transactions, owner_id):
        transaction_service.update_transaction(
            owner_id, sample_transactions[2].id, TransactionUpdate(kind="income")
        )

        summary = transaction_service.get_summary(owner_id)

        assert summary.total_income == Decimal("1300")
        assert summary.total_expense == Decimal("200")
        assert summary.balance == Decimal("1100")
