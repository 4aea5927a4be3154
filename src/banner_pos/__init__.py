"""banner-pos - point of sale for a small print and banner shop.

This package provides the data layer and the sales reporting pipeline of the
shop's till:

- **storage**: typed access to the persisted collections (products,
  transactions, store settings) kept in a key-value store
- **checkout**: converts a cart into a transaction and adjusts stock
- **reports**: daily/monthly aggregation and Excel export
- **journal**: browse, edit and delete recorded sales
- **catalog**: product management with area-based pricing
- **printing**: receipt and work order (SPK) text

Quick Start:
    >>> from datetime import date
    >>> from banner_pos import StorePaths
    >>> from banner_pos.storage import open_repository
    >>> from banner_pos.checkout import checkout
    >>> from banner_pos.models import Cart
    >>> from banner_pos.reports import daily_report, export_report
    >>>
    >>> paths = StorePaths.from_root("data")
    >>> repo = open_repository(paths)
    >>>
    >>> cart = Cart()
    >>> for product in repo.load_products()[:1]:
    ...     cart.add(product)
    >>> if cart.can_checkout(payment=50000):
    ...     checkout(repo, cart.items, payment=50000, customer_name="Budi")
    >>>
    >>> report = daily_report(repo, date.today())
    >>> export_report(report, paths.reports_dir)
"""

__version__ = "0.1.0"

from banner_pos.config import StorePaths
from banner_pos.exceptions import BannerPosError, ConfigError, NothingToExportError

__all__ = [
    "BannerPosError",
    "ConfigError",
    "NothingToExportError",
    "StorePaths",
    "__version__",
]
