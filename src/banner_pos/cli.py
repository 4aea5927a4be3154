"""Command-line entry point for banner-pos.

Usage:
    banner-pos daily --date 2025-01-15 --export
    banner-pos monthly --month 2025-01 --export
    banner-pos journal --search budi
    banner-pos receipt 1736928000000
    banner-pos work-order 1736928000000
    banner-pos products --search banner
    banner-pos settings --store-name "Mitra Banner"
    banner-pos usage

The data root defaults to $BANNER_POS_DATA (or ./data).
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from datetime import date
from pathlib import Path

from banner_pos.catalog import search_products
from banner_pos.config import StorePaths
from banner_pos.date_formatters import month_name
from banner_pos.exceptions import BannerPosError, NothingToExportError
from banner_pos.journal import get_transaction, list_transactions, search_transactions
from banner_pos.models import payment_status
from banner_pos.printing import render_receipt, render_work_order
from banner_pos.reports import (
    DailyAggregate,
    MonthlyAggregate,
    daily_report,
    export_report,
    format_rupiah,
    monthly_report,
)
from banner_pos.reports.api import parse_month
from banner_pos.storage import Repository, open_repository
from banner_pos.utils import parse_date

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="banner-pos",
        description="Sales reports and journal for the banner shop till.",
    )
    p.add_argument(
        "--data-root",
        default=None,
        help="Data directory (default: $BANNER_POS_DATA or ./data)."
    )
    p.add_argument(
        "--quiet",
        action="store_true",
        help="Less logging output."
    )
    p.add_argument(
        "--verbose", "--debug",
        action="store_true",
        dest="verbose",
        help="Verbose/debug logging output."
    )
    sub = p.add_subparsers(dest="command", required=True)

    daily = sub.add_parser("daily", help="Daily sales report.")
    daily.add_argument("--date", default=None, help="Day in YYYY-MM-DD (default: today).")
    daily.add_argument("--export", action="store_true", help="Write the Excel report.")
    daily.add_argument("-o", "--output-dir", default=None, help="Export directory.")

    monthly = sub.add_parser("monthly", help="Monthly sales report.")
    monthly.add_argument("--month", default=None, help="Month in YYYY-MM (default: this month).")
    monthly.add_argument("--export", action="store_true", help="Write the Excel report.")
    monthly.add_argument("-o", "--output-dir", default=None, help="Export directory.")

    journal = sub.add_parser("journal", help="List transactions, newest first.")
    journal.add_argument("--search", default="", help="Filter by customer, date or id.")

    receipt = sub.add_parser("receipt", help="Print the receipt of a transaction.")
    receipt.add_argument("transaction_id")

    work_order = sub.add_parser("work-order", help="Print the work order (SPK) of a transaction.")
    work_order.add_argument("transaction_id")

    products = sub.add_parser("products", help="List catalog products.")
    products.add_argument("--search", default="", help="Filter by product name.")

    settings = sub.add_parser("settings", help="Show or update the store settings.")
    settings.add_argument("--store-name", default=None)
    settings.add_argument("--address", default=None)
    settings.add_argument("--phone-number", default=None)
    settings.add_argument("--footer", default=None)

    sub.add_parser("usage", help="Show storage usage.")
    return p


def _export(aggregate: DailyAggregate | MonthlyAggregate, output_dir: Path) -> int:
    try:
        path = export_report(aggregate, output_dir)
    except NothingToExportError as e:
        print(f"Nothing to export: {e}")
        return 1
    print(f"\nWrote {path}")
    return 0


def _cmd_daily(repo: Repository, paths: StorePaths, args: argparse.Namespace) -> int:
    day = parse_date(args.date) if args.date else date.today()
    aggregate = daily_report(repo, day)

    print(f"Laporan Penjualan Harian {day.isoformat()}")
    print("=" * 60)
    print(f"Total Penjualan:    {format_rupiah(aggregate.total)}")
    print(f"Jumlah Transaksi:   {aggregate.count}")
    print(f"Total Item Terjual: {aggregate.item_count}")
    print("")
    if aggregate.is_empty:
        print("Tidak ada transaksi pada tanggal ini")
    else:
        print(aggregate.rows.to_string(index=False))

    if args.export:
        return _export(aggregate, Path(args.output_dir) if args.output_dir else paths.reports_dir)
    return 0


def _cmd_monthly(repo: Repository, paths: StorePaths, args: argparse.Namespace) -> int:
    if args.month:
        year, month = parse_month(args.month)
    else:
        today = date.today()
        year, month = today.year, today.month
    aggregate = monthly_report(repo, year, month)

    print(f"Laporan Penjualan Bulanan {month_name(month)} {year}")
    print("=" * 60)
    print(f"Total Penjualan Bulan Ini:  {format_rupiah(aggregate.total)}")
    print(f"Jumlah Transaksi Bulan Ini: {aggregate.count}")
    print("")
    for _, row in aggregate.per_day.iterrows():
        print(f"  {row['date'].isoformat()}: {format_rupiah(row['sales'])}")

    if args.export:
        return _export(aggregate, Path(args.output_dir) if args.output_dir else paths.reports_dir)
    return 0


def _cmd_journal(repo: Repository, args: argparse.Namespace) -> int:
    transactions = search_transactions(list_transactions(repo), args.search)
    if not transactions:
        print("Tidak ada transaksi")
        return 0
    for txn in transactions:
        status = payment_status(txn.total, txn.payment)
        customer = txn.customer_name or "-"
        print(f"{txn.id}  {txn.date}  {customer:<20} {format_rupiah(txn.total):>16}  {status}")
    return 0


def _cmd_products(repo: Repository, args: argparse.Namespace) -> int:
    products = search_products(repo.load_products(), args.search)
    if not products:
        print("Tidak ada produk")
        return 0
    for product in products:
        print(
            f"{product.id}  {product.name:<24} {format_rupiah(product.price):>16}"
            f"  stok {product.stock}"
        )
    return 0


def _cmd_settings(repo: Repository, args: argparse.Namespace) -> int:
    settings = repo.load_store_settings()
    changed = False
    for attr in ("store_name", "address", "phone_number", "footer"):
        value = getattr(args, attr)
        if value is not None:
            setattr(settings, attr, value)
            changed = True
    if changed:
        repo.save_store_settings(settings)
        logger.info("Store settings updated")

    print(f"Nama Toko: {settings.store_name}")
    print(f"Alamat:    {settings.address}")
    print(f"Telepon:   {settings.phone_number}")
    print(f"Footer:    {settings.receipt_footer}")
    return 0


def _cmd_usage(repo: Repository) -> int:
    usage = repo.storage_usage()
    print(f"Penyimpanan Terpakai: {usage.used_mb} MB")
    print(f"Total Penyimpanan: {usage.total_mb:g} MB")
    print(f"{usage.percent:.1f}% terpakai")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    log_level = logging.DEBUG if args.verbose else (logging.WARNING if args.quiet else logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s: %(message)s",
    )

    try:
        paths = StorePaths.from_root(args.data_root) if args.data_root else StorePaths.from_env()
        repo = open_repository(paths)

        if args.command == "daily":
            return _cmd_daily(repo, paths, args)
        if args.command == "monthly":
            return _cmd_monthly(repo, paths, args)
        if args.command == "journal":
            return _cmd_journal(repo, args)
        if args.command == "receipt":
            txn = get_transaction(repo, args.transaction_id)
            print(render_receipt(txn, repo.load_store_settings()))
            return 0
        if args.command == "work-order":
            txn = get_transaction(repo, args.transaction_id)
            print(render_work_order(txn, repo.load_store_settings()))
            return 0
        if args.command == "products":
            return _cmd_products(repo, args)
        if args.command == "settings":
            return _cmd_settings(repo, args)
        return _cmd_usage(repo)
    except (BannerPosError, ValueError) as e:
        logger.error(f"Error: {e}", exc_info=args.verbose)
        print(f"ERROR: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
