"""Reduce transactions into daily and monthly sales summaries.

Both aggregates are pure functions of their inputs: they never touch storage,
and calling them twice on the same transactions gives the same result.

Daily aggregate:
    - One row per transaction made on the day (input order)
    - Total sales, transaction count, total item quantity

Monthly aggregate:
    - One row per calendar day of the month (28-31 rows, ascending), zero-filled
    - Month total sales and transaction count
"""

from __future__ import annotations

import calendar
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date

import numpy as np
import pandas as pd

from banner_pos.models import PAID_LABEL, PARTIAL_LABEL, Transaction, payment_status
from banner_pos.reports.filter import (
    filter_by_day,
    filter_by_month,
    transactions_frame,
    validate_month,
)

logger = logging.getLogger(__name__)

DAILY_ROW_COLUMNS = [
    "no",
    "id",
    "time",
    "customer_name",
    "item_count",
    "total",
    "payment",
    "status",
]

__all__ = [
    "DailyAggregate",
    "MonthlyAggregate",
    "compute_daily_aggregate",
    "compute_monthly_aggregate",
    "days_in_month",
    "payment_status",
]


@dataclass(frozen=True)
class DailyAggregate:
    """Summary of one calendar day.

    Attributes:
        day: The reported day.
        total: Sum of transaction totals.
        count: Number of transactions.
        item_count: Sum of line quantities across all transactions.
        rows: One row per transaction, columns as in DAILY_ROW_COLUMNS.

    """

    day: date
    total: float
    count: int
    item_count: int
    rows: pd.DataFrame = field(compare=False, repr=False)

    @property
    def is_empty(self) -> bool:
        return self.count == 0


@dataclass(frozen=True)
class MonthlyAggregate:
    """Summary of one calendar month.

    Attributes:
        year: Reported year.
        month: Reported month, 1-indexed.
        total: Sum of transaction totals in the month.
        count: Number of transactions in the month.
        per_day: Columns ``date`` (datetime.date) and ``sales`` (float), one row
            per calendar day in ascending order.

    """

    year: int
    month: int
    total: float
    count: int
    per_day: pd.DataFrame = field(compare=False, repr=False)

    @property
    def is_empty(self) -> bool:
        return self.count == 0


def days_in_month(year: int, month: int) -> int:
    """Number of days in a month, leap years included.

    Examples:
        >>> days_in_month(2024, 2)
        29
        >>> days_in_month(2023, 2)
        28

    """
    validate_month(year, month)
    return calendar.monthrange(year, month)[1]


def compute_daily_aggregate(transactions: Iterable[Transaction], day: date) -> DailyAggregate:
    """Aggregate the transactions made on one calendar day.

    Args:
        transactions: Full transaction collection (filtered here by day).
        day: Target day.

    Returns:
        DailyAggregate. An empty day yields zeros and an empty rows frame.

    """
    df = transactions_frame(filter_by_day(transactions, day))

    rows = pd.DataFrame(
        {
            "no": np.arange(1, len(df) + 1),
            "id": df["id"].to_numpy(),
            "time": df["date"].dt.strftime("%H:%M:%S").to_numpy(),
            "customer_name": df["customer_name"].to_numpy(),
            "item_count": df["item_count"].to_numpy(),
            "total": df["total"].to_numpy(),
            "payment": df["payment"].to_numpy(),
            "status": np.where(df["payment"] >= df["total"], PAID_LABEL, PARTIAL_LABEL),
        },
        columns=DAILY_ROW_COLUMNS,
    )

    result = DailyAggregate(
        day=day,
        total=float(df["total"].sum()),
        count=int(len(df)),
        item_count=int(df["item_count"].sum()),
        rows=rows,
    )
    logger.debug(
        "Daily aggregate %s: %d transactions, total %.2f", day, result.count, result.total
    )
    return result


def compute_monthly_aggregate(
    transactions: Iterable[Transaction],
    year: int,
    month: int,
) -> MonthlyAggregate:
    """Aggregate the transactions made in one calendar month into day buckets.

    Every day of the month gets a bucket initialised to zero; each in-month
    transaction's total is added to the bucket of its calendar date.

    Args:
        transactions: Full transaction collection (filtered here by month).
        year: Four-digit year.
        month: Month number, 1-indexed.

    Returns:
        MonthlyAggregate with exactly days_in_month(year, month) per-day rows.

    Raises:
        ValueError: If month is not between 1 and 12.

    """
    n_days = days_in_month(year, month)
    index = pd.date_range(start=date(year, month, 1), periods=n_days, freq="D")

    df = transactions_frame(filter_by_month(transactions, year, month))
    by_day = df.groupby(df["date"].dt.normalize())["total"].sum()
    sales = by_day.reindex(index, fill_value=0.0)

    per_day = pd.DataFrame(
        {
            "date": [ts.date() for ts in index],
            "sales": sales.to_numpy(dtype="float64"),
        }
    )

    result = MonthlyAggregate(
        year=year,
        month=month,
        total=float(df["total"].sum()),
        count=int(len(df)),
        per_day=per_day,
    )
    logger.debug(
        "Monthly aggregate %d-%02d: %d transactions, total %.2f",
        year,
        month,
        result.count,
        result.total,
    )
    return result
