"""Date parsing utilities."""

import re
from datetime import date, timedelta
from dateutil import parser as date_parser

DAYS_AGO = re.compile(r"^(\d+)\s+days?\s+ago$")


def parse_date(date_str: str, today: date | None = None) -> date:
    """Parse a date string into a date object.

    Supports:
    - ISO dates: "2024-01-15"
    - Other absolute dates dateutil understands: "January 15, 2024"
    - Relative dates: "today", "yesterday", "tomorrow", "3 days ago"

    Args:
        date_str: Date string
        today: Reference date for relative forms (defaults to date.today())

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    normalized = date_str.strip().lower()
    today = today or date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }
    if normalized in relative_dates:
        return relative_dates[normalized]

    match = DAYS_AGO.match(normalized)
    if match:
        return today - timedelta(days=int(match.group(1)))

    if not normalized:
        raise ValueError("Empty date string")

    try:
        return date_parser.parse(normalized).date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str.strip()}': {e}")
