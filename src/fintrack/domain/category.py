"""Suggested category vocabularies.

Categories are free-form text; these lists are offered as suggestions when
entering transactions and are never enforced.
"""

from typing import Optional

from fintrack.domain.entities import TransactionKind

EXPENSE_CATEGORIES = (
    "Food & Dining",
    "Transportation",
    "Shopping",
    "Entertainment",
    "Bills & Utilities",
    "Healthcare",
    "Education",
    "Travel",
    "Personal Care",
    "Other",
)

INCOME_CATEGORIES = (
    "Salary",
    "Freelance",
    "Business",
    "Investment",
    "Gift",
    "Other",
)


def suggested_categories(kind: Optional[TransactionKind] = None) -> tuple[str, ...]:
    """Return suggested categories for a kind, or all of them if kind is None."""
    if kind == TransactionKind.INCOME:
        return INCOME_CATEGORIES
    if kind == TransactionKind.EXPENSE:
        return EXPENSE_CATEGORIES
    # Preserve order, drop the shared "Other" duplicate
    return tuple(dict.fromkeys(EXPENSE_CATEGORIES + INCOME_CATEGORIES))
