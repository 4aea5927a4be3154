"""Select transactions by calendar day or calendar month.

Transaction dates are stored as text. Anything pandas can parse is accepted
(ISO-8601 timestamps written by this package, and most locale strings written
by the old browser till). Records whose date cannot be parsed are silently left
out of every date-scoped view.

Day matching compares calendar fields (year, month, day) directly; time of
day is ignored.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from datetime import date, datetime

import pandas as pd

from banner_pos.models import Transaction

logger = logging.getLogger(__name__)

FRAME_COLUMNS = ["id", "date", "customer_name", "item_count", "total", "payment"]


def parse_transaction_date(value: object) -> datetime | None:
    """Parse a stored transaction date.

    Timezone-aware values keep their wall-clock time and lose the offset, so a
    sale made at 23:30 local time stays on that local day.

    Args:
        value: The stored date text.

    Returns:
        A naive datetime, or None if the value cannot be parsed.

    Examples:
        >>> parse_transaction_date("2025-03-14T09:30:00")
        datetime.datetime(2025, 3, 14, 9, 30)
        >>> parse_transaction_date("not a date") is None
        True

    """
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        ts = pd.to_datetime(value, errors="coerce")
    except (TypeError, ValueError, OverflowError):
        return None
    if pd.isna(ts):
        return None
    if ts.tzinfo is not None:
        ts = ts.tz_localize(None)
    return ts.to_pydatetime()


def iter_dated(transactions: Iterable[Transaction]) -> Iterator[tuple[Transaction, datetime]]:
    """Yield (transaction, parsed date) pairs, skipping unparseable dates."""
    for txn in transactions:
        parsed = parse_transaction_date(txn.date)
        if parsed is None:
            logger.debug("Skipping transaction %s with unparseable date %r", txn.id, txn.date)
            continue
        yield txn, parsed


def validate_month(year: int, month: int) -> None:
    if not 1 <= month <= 12:
        raise ValueError(f"Month must be between 1 and 12, got {month}")
    if year < 1:
        raise ValueError(f"Invalid year {year}")


def filter_by_day(transactions: Iterable[Transaction], day: date) -> list[Transaction]:
    """Return transactions made on the given calendar day, in input order.

    Args:
        transactions: Full transaction collection.
        day: Target day. A datetime is accepted; its time is ignored.

    Returns:
        Transactions whose parsed date has the same year, month and day.

    """
    if isinstance(day, datetime):
        day = day.date()
    return [
        txn
        for txn, parsed in iter_dated(transactions)
        if (parsed.year, parsed.month, parsed.day) == (day.year, day.month, day.day)
    ]


def filter_by_month(
    transactions: Iterable[Transaction],
    year: int,
    month: int,
) -> list[Transaction]:
    """Return transactions made within the given calendar month, in input order.

    Args:
        transactions: Full transaction collection.
        year: Four-digit year.
        month: Month number, 1-indexed (January is 1).

    Raises:
        ValueError: If month is not between 1 and 12.

    """
    validate_month(year, month)
    return [
        txn
        for txn, parsed in iter_dated(transactions)
        if parsed.year == year and parsed.month == month
    ]


def transactions_frame(transactions: Iterable[Transaction]) -> pd.DataFrame:
    """Build a DataFrame with one row per transaction with a parseable date.

    Columns: id, date (datetime64), customer_name, item_count, total, payment.
    """
    records = [
        {
            "id": txn.id,
            "date": parsed,
            "customer_name": txn.customer_name,
            "item_count": txn.item_count,
            "total": txn.total,
            "payment": txn.payment,
        }
        for txn, parsed in iter_dated(transactions)
    ]
    df = pd.DataFrame.from_records(records, columns=FRAME_COLUMNS)
    df["date"] = pd.to_datetime(df["date"])
    df["item_count"] = df["item_count"].astype("int64")
    df["total"] = df["total"].astype("float64")
    df["payment"] = df["payment"].astype("float64")
    return df
