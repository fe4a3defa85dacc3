"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re

CURRENCY_SYMBOLS = re.compile(r"[$€£¥₹]")


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles various formats:
    - "123.45"
    - "₹123.45" or "$123.45"
    - "1,234.56"
    - "(123.45)" (negative in parentheses)

    Sign is preserved; range checks belong to validation.

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    cleaned = amount_str.strip()

    is_negative = False
    if cleaned.startswith("(") and cleaned.endswith(")"):
        is_negative = True
        cleaned = cleaned[1:-1]

    cleaned = CURRENCY_SYMBOLS.sub("", cleaned).replace(",", "").strip()

    try:
        amount = Decimal(cleaned)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{amount_str.strip()}'")

    return -amount if is_negative else amount
