"""Input validation for transaction fields.

Each ``validate_*`` function normalizes a single raw value or raises
ValueError with a user-facing message. The ``validate_new_transaction`` and
``validate_update`` helpers run the field validators and collect every
failure into one ValidationError keyed by field name.
"""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Callable, Optional

from dateutil import parser as date_parser

from fintrack.domain.entities import TransactionKind, TransactionUpdate
from fintrack.domain.errors import ValidationError
from fintrack.utils.amount_parser import parse_amount

MINIMUM_AMOUNT = Decimal("0.01")
# Largest value a Numeric(12, 2) column holds
MAXIMUM_AMOUNT = Decimal("9999999999.99")
CENTS = Decimal("0.01")


def validate_kind(value: Any) -> TransactionKind:
    """Validate a transaction kind given as enum member or string."""
    if isinstance(value, TransactionKind):
        return value
    if isinstance(value, str):
        try:
            return TransactionKind(value.strip().lower())
        except ValueError:
            pass
    raise ValueError("Type must be income or expense")


def validate_amount(value: Any) -> Decimal:
    """Validate a strictly positive amount and round it to cents."""
    if value is None or isinstance(value, bool):
        raise ValueError("Amount must be a positive number")

    try:
        if isinstance(value, Decimal):
            amount = value
        elif isinstance(value, (int, float)):
            amount = Decimal(str(value))
        elif isinstance(value, str):
            amount = parse_amount(value)
        else:
            raise ValueError(f"Unsupported amount type {type(value).__name__}")
    except (ValueError, InvalidOperation):
        raise ValueError("Amount must be a positive number")

    if not amount.is_finite() or amount < MINIMUM_AMOUNT:
        raise ValueError("Amount must be a positive number")
    if amount > MAXIMUM_AMOUNT:
        raise ValueError(f"Amount must not exceed {MAXIMUM_AMOUNT:,.2f}")
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


def validate_category(value: Any) -> str:
    """Validate a category name, returning it trimmed."""
    if not isinstance(value, str) or not value.strip():
        raise ValueError("Category is required")
    return value.strip()


def validate_description(value: Any) -> str:
    """Validate an optional description; None becomes an empty string."""
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError("Description must be text")
    return value.strip()


def validate_occurred_at(value: Any) -> date:
    """Validate a business date given as date, datetime or ISO 8601 string."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value.strip():
        try:
            return date_parser.isoparse(value.strip()).date()
        except (ValueError, OverflowError):
            pass
    raise ValueError("Valid date is required")


FIELD_VALIDATORS: dict[str, Callable[[Any], Any]] = {
    "kind": validate_kind,
    "amount": validate_amount,
    "category": validate_category,
    "description": validate_description,
    "occurred_at": validate_occurred_at,
}


def _collect(values: dict[str, Any]) -> dict[str, Any]:
    cleaned: dict[str, Any] = {}
    errors: dict[str, str] = {}
    for field, value in values.items():
        try:
            cleaned[field] = FIELD_VALIDATORS[field](value)
        except ValueError as e:
            errors[field] = str(e)
    if errors:
        raise ValidationError(errors)
    return cleaned


def validate_new_transaction(
    kind: Any,
    amount: Any,
    category: Any,
    occurred_at: Any,
    description: Optional[Any] = None,
) -> dict[str, Any]:
    """Validate all fields of a new transaction.

    Returns:
        Dict of normalized field values keyed by field name

    Raises:
        ValidationError: If any field is invalid
    """
    return _collect(
        {
            "kind": kind,
            "amount": amount,
            "category": category,
            "description": description,
            "occurred_at": occurred_at,
        }
    )


def validate_update(update: TransactionUpdate) -> dict[str, Any]:
    """Validate the supplied fields of a partial update.

    Fields left as None are not supplied and are absent from the result.
    Any supplied value, including 0 or an empty category, is validated under
    the same rules as on create. An empty description is a valid value.
    """
    supplied = {
        field: getattr(update, field)
        for field in FIELD_VALIDATORS
        if getattr(update, field) is not None
    }
    return _collect(supplied)
