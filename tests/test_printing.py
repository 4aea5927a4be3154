"""Tests for receipt and work order rendering."""

from banner_pos.models import DEFAULT_RECEIPT_FOOTER, LineItem, StoreSettings, Transaction
from banner_pos.printing import format_display_date, render_receipt, render_work_order


def _transaction(**overrides) -> Transaction:
    fields = {
        "id": "1736928000000",
        "date": "2025-01-15T10:30:00",
        "items": [
            LineItem("p1", "Banner Flexi", 10000, 2, length=100, width=50),
            LineItem("p2", "Pin", 2500, 4),
        ],
        "total": 30000,
        "payment": 10000,
        "change": -20000,
        "customer_name": "Budi",
        "deadline": "2025-01-18",
    }
    fields.update(overrides)
    return Transaction(**fields)


SETTINGS = StoreSettings(
    store_name="Mitra Banner",
    address="Jl. Merdeka 1",
    phone_number="0812",
    footer="Sampai jumpa",
)


def test_format_display_date() -> None:
    assert format_display_date("2025-01-15T10:30:00") == "15/01/2025"
    assert format_display_date("kemarin") == "kemarin"
    assert format_display_date(None) == ""


class TestReceipt:
    def test_header_and_footer(self) -> None:
        text = render_receipt(_transaction(), SETTINGS)
        lines = text.splitlines()
        assert lines[0].strip() == "Mitra Banner"
        assert lines[1].strip() == "Jl. Merdeka 1"
        assert lines[2].strip() == "Telp: 0812"
        assert lines[-1].strip() == "Sampai jumpa"

    def test_default_footer(self) -> None:
        text = render_receipt(_transaction())
        assert text.splitlines()[-1].strip() == DEFAULT_RECEIPT_FOOTER

    def test_items_and_totals(self) -> None:
        text = render_receipt(_transaction(), SETTINGS)
        assert "Pelanggan: Budi" in text
        assert "Deadline: 18/01/2025" in text
        assert "Banner Flexi x2" in text
        assert "Rp. 20,000" in text
        assert "  Ukuran: 100 x 50" in text
        assert "Kembalian" in text
        assert "Rp. -20,000" in text
        assert text.count("Ukuran") == 1

    def test_status_line(self) -> None:
        partial = render_receipt(_transaction(), SETTINGS)
        paid = render_receipt(_transaction(payment=30000, change=0), SETTINGS)
        assert partial.splitlines()[-3].split()[-1] == "Dp"
        assert paid.splitlines()[-3].split()[-1] == "Lunas"

    def test_optional_fields_omitted(self) -> None:
        text = render_receipt(_transaction(customer_name="", deadline=None))
        assert "Pelanggan" not in text
        assert "Deadline" not in text


class TestWorkOrder:
    def test_layout(self) -> None:
        text = render_work_order(_transaction(), SETTINGS)
        lines = text.splitlines()
        assert lines[0].strip() == "Mitra Banner"
        assert lines[1].strip() == "SURAT PERINTAH KERJA"
        assert "No: 1736928000000" in lines
        assert "Tanggal: 15/01/2025" in lines
        assert "Pelanggan: Budi" in lines
        assert "Deadline: 18/01/2025" in lines

    def test_items_numbered(self) -> None:
        text = render_work_order(_transaction())
        assert "1. Banner Flexi" in text
        assert "2. Pin" in text
        assert text.count("  Harga") == 2
        assert "Rp. 2,500" in text

    def test_size_only_for_dimensioned_items(self) -> None:
        items = [LineItem("p1", "Banner", 1000, 1, length=0, width=0)]
        text = render_work_order(_transaction(items=items))
        assert "Ukuran" not in text

    def test_missing_customer_placeholder(self) -> None:
        text = render_work_order(_transaction(customer_name=""))
        assert "Pelanggan: -" in text.splitlines()
