"""Indonesian date formatting utilities.

This module provides constants and functions for formatting dates the way the
shop prints them on receipts, work orders and exported reports.
"""

from __future__ import annotations

from datetime import date

# Indonesian month names (January through December)
INDONESIAN_MONTHS = [
    "Januari", "Februari", "Maret", "April", "Mei", "Juni",
    "Juli", "Agustus", "September", "Oktober", "November", "Desember"
]


def month_name(month: int) -> str:
    """Return the Indonesian name of a 1-indexed month.

    Raises:
        ValueError: If month is not between 1 and 12.

    """
    if not 1 <= month <= 12:
        raise ValueError(f"Month must be between 1 and 12, got {month}")
    return INDONESIAN_MONTHS[month - 1]


def format_date_long(d: date) -> str:
    """Format date like '05 Oktober 2026'.

    Args:
        d: Date object to format

    Returns:
        Zero-padded day, Indonesian month name and year

    """
    return f"{d.day:02d} {month_name(d.month)} {d.year}"


def format_date_slash(d: date) -> str:
    """Format date like '05/10/2026' (dd/mm/yyyy)."""
    return d.strftime("%d/%m/%Y")


def format_date_dashed(d: date) -> str:
    """Format date like '05-10-2026' (dd-mm-yyyy), used in report file names."""
    return d.strftime("%d-%m-%Y")
