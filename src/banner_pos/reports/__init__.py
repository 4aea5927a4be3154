"""Sales reporting: filter, aggregate and export transactions.

- **filter**: select transactions by calendar day or calendar month.
- **aggregate**: daily summary (total, count, items, per-transaction rows) and
  monthly summary (per-day sales series, total, count).
- **export**: write the summaries as Excel workbooks.

Example:
    >>> from datetime import date
    >>> from banner_pos import StorePaths
    >>> from banner_pos.storage import open_repository
    >>> from banner_pos.reports import daily_report, export_report
    >>>
    >>> paths = StorePaths.from_root("data")
    >>> repo = open_repository(paths)
    >>> aggregate = daily_report(repo, date(2025, 1, 15))
    >>> export_report(aggregate, paths.reports_dir)
"""

from banner_pos.reports.aggregate import (
    DailyAggregate,
    MonthlyAggregate,
    compute_daily_aggregate,
    compute_monthly_aggregate,
)
from banner_pos.reports.api import daily_report, monthly_report
from banner_pos.reports.export import export_report, format_rupiah
from banner_pos.reports.filter import filter_by_day, filter_by_month

__all__ = [
    "DailyAggregate",
    "MonthlyAggregate",
    "compute_daily_aggregate",
    "compute_monthly_aggregate",
    "daily_report",
    "export_report",
    "filter_by_day",
    "filter_by_month",
    "format_rupiah",
    "monthly_report",
]
