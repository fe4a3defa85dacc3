"""Aggregation of transactions into summary and chart views.

All functions here are pure: they take a sequence of Transaction entities
and never touch the database. Amounts are summed as Decimal so totals stay
exact when rendered to two decimal places.
"""

from collections import defaultdict
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Sequence

from fintrack.domain.entities import (
    CategoryTotal,
    MonthlyTotal,
    Summary,
    Transaction,
    TransactionKind,
)

DEFAULT_MONTHS = 6
ZERO = Decimal("0")
CENTS = Decimal("0.01")


def _as_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    # Decimal(0.1) != Decimal("0.1")
    return Decimal(str(value))


def round_amount(value: Decimal) -> Decimal:
    """Round an amount half-up to two decimal places."""
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


def _sum_amounts(transactions: Iterable[Transaction], kind: TransactionKind) -> Decimal:
    return sum(
        (_as_decimal(txn.amount) for txn in transactions if txn.kind == kind),
        ZERO,
    )


def compute_summary(transactions: Sequence[Transaction]) -> Summary:
    """Compute income, expense and balance totals.

    Args:
        transactions: Transactions to aggregate

    Returns:
        Summary with balance equal to total income minus total expense
    """
    total_income = _sum_amounts(transactions, TransactionKind.INCOME)
    total_expense = _sum_amounts(transactions, TransactionKind.EXPENSE)
    return Summary(
        total_income=total_income,
        total_expense=total_expense,
        balance=total_income - total_expense,
    )


def compute_category_totals(transactions: Sequence[Transaction]) -> list[CategoryTotal]:
    """Sum expense amounts per category.

    Income transactions are ignored. Groups appear in the order their
    category is first seen; callers re-sort as needed.
    """
    totals: dict[str, Decimal] = defaultdict(lambda: ZERO)

    for txn in transactions:
        if txn.kind != TransactionKind.EXPENSE:
            continue
        totals[txn.category] += _as_decimal(txn.amount)

    return [
        CategoryTotal(category=category, total=round_amount(total))
        for category, total in totals.items()
    ]


def month_key(txn: Transaction) -> str:
    """Return the YYYY-MM key of a transaction's business date."""
    return f"{txn.occurred_at.year:04d}-{txn.occurred_at.month:02d}"


def format_month_label(key: str) -> str:
    """Render a YYYY-MM key as a short label such as 'Jan 2024'."""
    year, month = (int(part) for part in key.split("-"))
    return f"{date(year, month, 1):%b} {year}"


def compute_monthly_series(
    transactions: Sequence[Transaction], months: int = DEFAULT_MONTHS
) -> list[MonthlyTotal]:
    """Build the income/expense series for the most recent populated months.

    Only months with at least one transaction count towards the limit, so
    gaps in the data do not shorten the series.

    Args:
        transactions: Transactions of both kinds
        months: Maximum number of months to return

    Returns:
        MonthlyTotal entries sorted ascending by month
    """
    if months <= 0:
        return []

    monthly: dict[str, dict[TransactionKind, Decimal]] = defaultdict(
        lambda: {TransactionKind.INCOME: ZERO, TransactionKind.EXPENSE: ZERO}
    )

    for txn in transactions:
        monthly[month_key(txn)][txn.kind] += _as_decimal(txn.amount)

    recent_keys = sorted(monthly.keys())[-months:]
    return [
        MonthlyTotal(
            month=key,
            label=format_month_label(key),
            income=round_amount(monthly[key][TransactionKind.INCOME]),
            expense=round_amount(monthly[key][TransactionKind.EXPENSE]),
        )
        for key in recent_keys
    ]
