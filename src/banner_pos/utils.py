"""Shared utilities for banner-pos.

Examples:
    >>> from datetime import datetime
    >>> from banner_pos.utils import parse_date
    >>> parse_date("2025-01-15")
    datetime.date(2025, 1, 15)

"""

from __future__ import annotations

from datetime import date, datetime


def parse_date(s: str) -> date:
    """Parse a date string in YYYY-MM-DD format.

    Args:
        s: Date string in ISO format (YYYY-MM-DD).

    Returns:
        Parsed date object.

    Raises:
        ValueError: If the date string is not in YYYY-MM-DD format.

    Examples:
        >>> parse_date("2023-01-15")
        datetime.date(2023, 1, 15)

    """
    return datetime.strptime(s, "%Y-%m-%d").date()


def timestamp_id(now: datetime) -> str:
    """Record identifier from a creation time, in epoch milliseconds.

    Examples:
        >>> from datetime import timezone
        >>> timestamp_id(datetime(2025, 1, 15, tzinfo=timezone.utc))
        '1736899200000'

    """
    return str(int(now.timestamp() * 1000))
