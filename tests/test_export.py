"""Tests for Excel report export."""

from datetime import date
from pathlib import Path
from tempfile import TemporaryDirectory

import pandas as pd
import pytest

from banner_pos.exceptions import NothingToExportError
from banner_pos.reports.aggregate import compute_daily_aggregate, compute_monthly_aggregate
from banner_pos.reports.export import (
    DAILY_SHEET,
    MONTHLY_DAYS_SHEET,
    MONTHLY_SUMMARY_SHEET,
    build_daily_sheet,
    export_daily_report,
    export_monthly_report,
    export_report,
    format_rupiah,
)
from tests.test_utils import make_item, make_transaction


@pytest.fixture
def transactions() -> list:
    return [
        make_transaction(
            "2025-02-14T09:15:00",
            total=1500000,
            items=[make_item("p1", 750000, 2)],
            customer_name="CV Maju Jaya",
        ),
        make_transaction(
            "2025-02-14T16:40:00",
            total=250000,
            payment=100000,
            items=[make_item("p2", 50000, 5)],
        ),
        make_transaction("2025-02-20T11:00:00", total=80000),
    ]


@pytest.mark.parametrize(
    ("amount", "expected"),
    [
        (0, "Rp. 0"),
        (999, "Rp. 999"),
        (1500000, "Rp. 1,500,000"),
        (1500000.0, "Rp. 1,500,000"),
        (1234.5, "Rp. 1,234.50"),
        (-2500, "Rp. -2,500"),
    ],
)
def test_format_rupiah(amount: float, expected: str) -> None:
    assert format_rupiah(amount) == expected


def test_build_daily_sheet(transactions: list) -> None:
    """Transaction rows followed by three summary rows."""
    aggregate = compute_daily_aggregate(transactions, date(2025, 2, 14))
    sheet = build_daily_sheet(aggregate)

    assert list(sheet.columns) == ["No", "Waktu", "Pelanggan", "Total Item", "Total Harga", "Status"]
    assert len(sheet) == 5

    assert list(sheet["Pelanggan"][:2]) == ["CV Maju Jaya", "-"]
    assert list(sheet["Waktu"][:2]) == ["09:15:00", "16:40:00"]
    assert list(sheet["Total Harga"][:2]) == ["Rp. 1,500,000", "Rp. 250,000"]
    assert list(sheet["Status"][:2]) == ["Lunas", "Dp"]

    assert list(sheet["Total Item"][2:]) == [
        "Total Penjualan:",
        "Total Transaksi:",
        "Total Item Terjual:",
    ]
    assert list(sheet["Total Harga"][2:]) == ["Rp. 1,750,000", 2, 7]


def test_export_daily_report_writes_workbook(transactions: list) -> None:
    with TemporaryDirectory() as tmpdir:
        aggregate = compute_daily_aggregate(transactions, date(2025, 2, 14))
        path = export_daily_report(aggregate, Path(tmpdir) / "out")

        assert path.name == "Laporan_Harian_14-02-2025.xlsx"
        assert path.exists()

        sheets = pd.read_excel(path, sheet_name=None, engine="openpyxl")
        assert list(sheets) == [DAILY_SHEET]
        sheet = sheets[DAILY_SHEET]
        assert len(sheet) == 5
        assert sheet["Pelanggan"].iloc[0] == "CV Maju Jaya"
        assert sheet["Total Item"].iloc[2] == "Total Penjualan:"


def test_export_monthly_report_writes_two_sheets(transactions: list) -> None:
    with TemporaryDirectory() as tmpdir:
        aggregate = compute_monthly_aggregate(transactions, 2025, 2)
        path = export_monthly_report(aggregate, tmpdir)

        assert path.name == "Laporan_Bulanan_Februari_2025.xlsx"

        sheets = pd.read_excel(path, sheet_name=None, engine="openpyxl")
        assert list(sheets) == [MONTHLY_DAYS_SHEET, MONTHLY_SUMMARY_SHEET]

        days = sheets[MONTHLY_DAYS_SHEET]
        assert list(days.columns) == ["Tanggal", "Penjualan"]
        assert len(days) == 28
        assert days["Tanggal"].iloc[0] == "01 Februari 2025"
        assert days["Penjualan"].iloc[13] == "Rp. 1,750,000"
        assert days["Penjualan"].iloc[0] == "Rp. 0"

        summary = sheets[MONTHLY_SUMMARY_SHEET]
        assert list(summary["Keterangan"]) == [
            "Total Penjualan Bulan Ini",
            "Jumlah Transaksi Bulan Ini",
        ]
        assert summary["Nilai"].iloc[0] == "Rp. 1,830,000"
        assert int(summary["Nilai"].iloc[1]) == 3


def test_export_report_dispatches_on_scope(transactions: list) -> None:
    with TemporaryDirectory() as tmpdir:
        daily = export_report(compute_daily_aggregate(transactions, date(2025, 2, 20)), tmpdir)
        monthly = export_report(compute_monthly_aggregate(transactions, 2025, 2), tmpdir)
        assert daily.name == "Laporan_Harian_20-02-2025.xlsx"
        assert monthly.name == "Laporan_Bulanan_Februari_2025.xlsx"


def test_export_report_rejects_other_types() -> None:
    with pytest.raises(TypeError):
        export_report(object(), ".")


def test_empty_day_has_nothing_to_export(transactions: list) -> None:
    """The guard raises and no file is written."""
    with TemporaryDirectory() as tmpdir:
        out = Path(tmpdir) / "reports"
        aggregate = compute_daily_aggregate(transactions, date(2025, 2, 15))
        with pytest.raises(NothingToExportError):
            export_daily_report(aggregate, out)
        assert not out.exists()


def test_empty_month_has_nothing_to_export(transactions: list) -> None:
    with TemporaryDirectory() as tmpdir:
        aggregate = compute_monthly_aggregate(transactions, 2025, 3)
        with pytest.raises(NothingToExportError):
            export_report(aggregate, tmpdir)
        assert list(Path(tmpdir).iterdir()) == []
