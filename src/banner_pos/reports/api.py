"""Public API for sales reports.

This module provides the entry points the report screens use: load the
transactions through the repository, then aggregate them for a day or a month.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING

from banner_pos.reports.aggregate import (
    DailyAggregate,
    MonthlyAggregate,
    compute_daily_aggregate,
    compute_monthly_aggregate,
)

if TYPE_CHECKING:
    from banner_pos.storage import Repository

logger = logging.getLogger(__name__)


def daily_report(repo: Repository, day: date) -> DailyAggregate:
    """Load all transactions and aggregate the given day.

    A missing or corrupt transaction collection yields an empty report.

    Examples:
        >>> from banner_pos.storage import MemoryStore, Repository
        >>> daily_report(Repository(MemoryStore()), date(2025, 1, 15)).count
        0

    """
    transactions = repo.load_transactions()
    logger.info("Building daily report for %s from %d transactions", day, len(transactions))
    return compute_daily_aggregate(transactions, day)


def monthly_report(repo: Repository, year: int, month: int) -> MonthlyAggregate:
    """Load all transactions and aggregate the given month (1-indexed).

    Raises:
        ValueError: If month is not between 1 and 12.

    """
    transactions = repo.load_transactions()
    logger.info(
        "Building monthly report for %d-%02d from %d transactions",
        year,
        month,
        len(transactions),
    )
    return compute_monthly_aggregate(transactions, year, month)


def parse_month(value: str) -> tuple[int, int]:
    """Parse a YYYY-MM string into (year, month).

    Raises:
        ValueError: If the value is not in YYYY-MM format.

    Examples:
        >>> parse_month("2024-02")
        (2024, 2)

    """
    try:
        year_str, month_str = value.split("-")
        year, month = int(year_str), int(month_str)
    except ValueError as e:
        raise ValueError(f"Invalid month '{value}', expected YYYY-MM") from e
    if not 1 <= month <= 12:
        raise ValueError(f"Invalid month '{value}', expected YYYY-MM")
    return year, month
