"""Plain-text renderings of receipts and work orders (SPK).

Both documents are fixed-width text suitable for a thermal printer or a
console. Amounts use the same Rupiah formatting as the exported reports.
"""

from __future__ import annotations

from banner_pos.date_formatters import format_date_slash
from banner_pos.models import LineItem, StoreSettings, Transaction, payment_status
from banner_pos.reports.export import format_rupiah
from banner_pos.reports.filter import parse_transaction_date

LINE_WIDTH = 40


def _row(left: str, right: str, width: int = LINE_WIDTH) -> str:
    gap = max(1, width - len(left) - len(right))
    return f"{left}{' ' * gap}{right}"


def _dimension(value: float | None) -> str:
    if not value:
        return "-"
    return f"{value:g}"


def format_display_date(value: str | None) -> str:
    """Format a stored date as dd/mm/yyyy, falling back to the raw text."""
    if not value:
        return ""
    parsed = parse_transaction_date(value)
    if parsed is None:
        return value
    return format_date_slash(parsed)


def _totals(transaction: Transaction) -> list[str]:
    return [
        _row("Total", format_rupiah(transaction.total)),
        _row("Pembayaran", format_rupiah(transaction.payment)),
        _row("Kembalian", format_rupiah(transaction.change)),
        _row("Status", payment_status(transaction.total, transaction.payment)),
    ]


def _size_line(item: LineItem) -> str:
    return f"  Ukuran: {_dimension(item.length)} x {_dimension(item.width)}"


def render_receipt(transaction: Transaction, settings: StoreSettings | None = None) -> str:
    """Build the customer receipt for a transaction.

    Args:
        transaction: The sale to print.
        settings: Store identity for the header and footer.

    Returns:
        Receipt text, one printed line per text line.

    """
    settings = settings or StoreSettings()
    lines = []

    if settings.store_name:
        lines.append(settings.store_name.center(LINE_WIDTH).rstrip())
    if settings.address:
        lines.append(settings.address.center(LINE_WIDTH).rstrip())
    if settings.phone_number:
        lines.append(f"Telp: {settings.phone_number}".center(LINE_WIDTH).rstrip())
    lines.append("=" * LINE_WIDTH)

    if transaction.customer_name:
        lines.append(f"Pelanggan: {transaction.customer_name}")
    if transaction.deadline:
        lines.append(f"Deadline: {format_display_date(transaction.deadline)}")
    lines.append("-" * LINE_WIDTH)

    for item in transaction.items:
        lines.append(_row(f"{item.name} x{item.quantity}", format_rupiah(item.subtotal)))
        if item.length is not None or item.width is not None:
            lines.append(_size_line(item))

    lines.append("-" * LINE_WIDTH)
    lines.extend(_totals(transaction))
    lines.append("=" * LINE_WIDTH)
    lines.append(settings.receipt_footer.center(LINE_WIDTH).rstrip())

    return "\n".join(lines)


def render_work_order(transaction: Transaction, settings: StoreSettings | None = None) -> str:
    """Build the work order (Surat Perintah Kerja) handed to the production floor."""
    lines = []
    if settings and settings.store_name:
        lines.append(settings.store_name.center(LINE_WIDTH).rstrip())
    lines.append("SURAT PERINTAH KERJA".center(LINE_WIDTH).rstrip())
    lines.append("=" * LINE_WIDTH)
    lines.append(f"No: {transaction.id}")
    lines.append(f"Tanggal: {format_display_date(transaction.date)}")
    lines.append(f"Pelanggan: {transaction.customer_name or '-'}")
    if transaction.deadline:
        lines.append(f"Deadline: {format_display_date(transaction.deadline)}")
    lines.append("-" * LINE_WIDTH)

    for index, item in enumerate(transaction.items, start=1):
        lines.append(_row(f"{index}. {item.name}", f"x{item.quantity}"))
        if item.length or item.width:
            lines.append(_size_line(item))
        lines.append(_row("  Harga", format_rupiah(item.price)))

    lines.append("-" * LINE_WIDTH)
    lines.extend(_totals(transaction))

    return "\n".join(lines)
