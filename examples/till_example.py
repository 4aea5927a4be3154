"""Simple example: ring up a sale, print it, and export the day's report.

This demonstrates the key usage patterns for the catalog, the cart, checkout
and the report exporter against a throwaway data directory.
"""

from datetime import date, datetime
from pathlib import Path

from banner_pos import StorePaths
from banner_pos.catalog import add_product
from banner_pos.checkout import checkout
from banner_pos.models import Cart, Product, StoreSettings
from banner_pos.printing import render_receipt, render_work_order
from banner_pos.reports import daily_report, export_report, format_rupiah
from banner_pos.storage import open_repository

# Setup
paths = StorePaths.from_root(Path("data/example"))
repo = open_repository(paths)
repo.save_store_settings(StoreSettings(store_name="Mitra Banner", phone_number="0812-0000-0000"))

# Example 1: Add a product priced by area (100 x 50 cm at Rp. 2 per cm²)
print("Example 1: Catalog")
print("-" * 60)
banner = add_product(
    repo,
    Product(id="", name="Banner Flexi", length=100, width=50, unit="2", stock=20),
)
print(f"{banner.name}: {format_rupiah(banner.price)}, stok {banner.stock}\n")

# Example 2: Fill a cart and check out with a down payment
print("Example 2: Checkout")
print("-" * 60)
cart = Cart()
cart.add(banner)
cart.add(banner)
payment = 15000
print(f"Total {format_rupiah(cart.total)}, status {cart.payment_status(payment)}")
if cart.can_checkout(payment):
    txn = checkout(
        repo,
        cart.items,
        payment,
        customer_name="Budi",
        deadline="2025-01-18",
        now=datetime(2025, 1, 15, 10, 30),
    )
    cart.reset()
    print(render_receipt(txn, repo.load_store_settings()))
    print()
    print(render_work_order(txn, repo.load_store_settings()))
    print()

# Example 3: Daily report and Excel export
print("Example 3: Daily report")
print("-" * 60)
aggregate = daily_report(repo, date(2025, 1, 15))
print(f"Transactions: {aggregate.count}, total {format_rupiah(aggregate.total)}")
print(f"Wrote {export_report(aggregate, paths.reports_dir)}")
