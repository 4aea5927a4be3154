"""Export daily and monthly sales reports as Excel workbooks.

Daily workbook (``Laporan_Harian_<dd-mm-yyyy>.xlsx``):
    Sheet "Laporan Harian": No, Waktu, Pelanggan, Total Item, Total Harga, Status,
    followed by three summary rows (total sales, transactions, items sold).

Monthly workbook (``Laporan_Bulanan_<Bulan>_<yyyy>.xlsx``):
    Sheet "Penjualan Harian": Tanggal, Penjualan (one row per day of the month).
    Sheet "Ringkasan": Keterangan, Nilai (month total sales, transaction count).

Exporting an empty scope raises NothingToExportError and writes nothing.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from banner_pos.date_formatters import format_date_dashed, format_date_long, month_name
from banner_pos.exceptions import NothingToExportError
from banner_pos.reports.aggregate import DailyAggregate, MonthlyAggregate

logger = logging.getLogger(__name__)

CURRENCY_PREFIX = "Rp."
CUSTOMER_PLACEHOLDER = "-"

DAILY_SHEET = "Laporan Harian"
MONTHLY_DAYS_SHEET = "Penjualan Harian"
MONTHLY_SUMMARY_SHEET = "Ringkasan"

DAILY_COLUMNS = ["No", "Waktu", "Pelanggan", "Total Item", "Total Harga", "Status"]


def format_rupiah(amount: float) -> str:
    """Format an amount with thousands separators and the Rupiah prefix.

    Whole amounts are printed without decimals.

    Examples:
        >>> format_rupiah(1500000)
        'Rp. 1,500,000'
        >>> format_rupiah(1234.5)
        'Rp. 1,234.50'

    """
    if float(amount).is_integer():
        return f"{CURRENCY_PREFIX} {int(amount):,}"
    return f"{CURRENCY_PREFIX} {amount:,.2f}"


def daily_report_filename(aggregate: DailyAggregate) -> str:
    return f"Laporan_Harian_{format_date_dashed(aggregate.day)}.xlsx"


def monthly_report_filename(aggregate: MonthlyAggregate) -> str:
    return f"Laporan_Bulanan_{month_name(aggregate.month)}_{aggregate.year}.xlsx"


def build_daily_sheet(aggregate: DailyAggregate) -> pd.DataFrame:
    """Build the daily report sheet: one row per transaction plus summary rows."""
    rows = aggregate.rows
    customers = rows["customer_name"].fillna("").astype(str).str.strip()

    body = pd.DataFrame(
        {
            "No": rows["no"],
            "Waktu": rows["time"],
            "Pelanggan": customers.where(customers != "", CUSTOMER_PLACEHOLDER),
            "Total Item": rows["item_count"],
            "Total Harga": rows["total"].map(format_rupiah),
            "Status": rows["status"],
        },
        columns=DAILY_COLUMNS,
    )

    # Summary labels go in "Total Item", values in "Total Harga"
    summary = pd.DataFrame(
        [
            ["", "", "", "Total Penjualan:", format_rupiah(aggregate.total), ""],
            ["", "", "", "Total Transaksi:", aggregate.count, ""],
            ["", "", "", "Total Item Terjual:", aggregate.item_count, ""],
        ],
        columns=DAILY_COLUMNS,
    )

    return pd.concat([body.astype(object), summary], ignore_index=True)


def build_monthly_sheets(aggregate: MonthlyAggregate) -> tuple[pd.DataFrame, pd.DataFrame]:
    """Build the per-day sheet and the summary sheet of a monthly report."""
    per_day = aggregate.per_day
    days = pd.DataFrame(
        {
            "Tanggal": [format_date_long(d) for d in per_day["date"]],
            "Penjualan": per_day["sales"].map(format_rupiah).tolist(),
        }
    )
    summary = pd.DataFrame(
        [
            ["Total Penjualan Bulan Ini", format_rupiah(aggregate.total)],
            ["Jumlah Transaksi Bulan Ini", aggregate.count],
        ],
        columns=["Keterangan", "Nilai"],
    )
    return days, summary


def export_daily_report(aggregate: DailyAggregate, output_dir: str | Path) -> Path:
    """Write the daily report workbook.

    Args:
        aggregate: Result of compute_daily_aggregate.
        output_dir: Directory to write into (created if missing).

    Returns:
        Path of the written workbook.

    Raises:
        NothingToExportError: If the day has no transactions.

    """
    if aggregate.is_empty:
        raise NothingToExportError(f"No transactions on {aggregate.day.isoformat()} to export")

    sheet = build_daily_sheet(aggregate)

    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / daily_report_filename(aggregate)

    with pd.ExcelWriter(output_path, engine="xlsxwriter") as xw:
        sheet.to_excel(xw, sheet_name=DAILY_SHEET, index=False)

    logger.info("Wrote daily report (%d transactions) to %s", aggregate.count, output_path)
    return output_path


def export_monthly_report(aggregate: MonthlyAggregate, output_dir: str | Path) -> Path:
    """Write the monthly report workbook.

    Args:
        aggregate: Result of compute_monthly_aggregate.
        output_dir: Directory to write into (created if missing).

    Returns:
        Path of the written workbook.

    Raises:
        NothingToExportError: If the month has no transactions.

    """
    if aggregate.is_empty:
        raise NothingToExportError(
            f"No transactions in {month_name(aggregate.month)} {aggregate.year} to export"
        )

    days, summary = build_monthly_sheets(aggregate)

    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / monthly_report_filename(aggregate)

    with pd.ExcelWriter(output_path, engine="xlsxwriter") as xw:
        days.to_excel(xw, sheet_name=MONTHLY_DAYS_SHEET, index=False)
        summary.to_excel(xw, sheet_name=MONTHLY_SUMMARY_SHEET, index=False)

    logger.info(
        "Wrote monthly report %d-%02d (%d transactions) to %s",
        aggregate.year,
        aggregate.month,
        aggregate.count,
        output_path,
    )
    return output_path


def export_report(aggregate: DailyAggregate | MonthlyAggregate, output_dir: str | Path) -> Path:
    """Export either kind of aggregate; the scope decides the layout and file name."""
    if isinstance(aggregate, DailyAggregate):
        return export_daily_report(aggregate, output_dir)
    if isinstance(aggregate, MonthlyAggregate):
        return export_monthly_report(aggregate, output_dir)
    raise TypeError(f"Cannot export {type(aggregate).__name__}")
