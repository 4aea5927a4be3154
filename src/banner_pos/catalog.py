"""Product catalog management.

Products are priced by area: price = length x width x unit, where unit is the
price per cm² entered as text. The price is recomputed on add and update
whenever all three inputs are positive; otherwise the entered price is kept.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import TYPE_CHECKING

from banner_pos.exceptions import RecordNotFoundError
from banner_pos.models import Product
from banner_pos.utils import timestamp_id

if TYPE_CHECKING:
    from banner_pos.storage import Repository

logger = logging.getLogger(__name__)


def calculate_price(length: float, width: float, unit: float | str) -> float:
    """Area price: length x width x unit price.

    Examples:
        >>> calculate_price(100, 50, "2")
        10000.0

    """
    return float(length) * float(width) * float(unit)


def with_auto_price(product: Product) -> Product:
    """Return a copy whose price is recomputed when length, width and unit are positive."""
    if product.length > 0 and product.width > 0 and product.unit_price > 0:
        return replace(
            product,
            price=calculate_price(product.length, product.width, product.unit_price),
        )
    return replace(product)


def add_product(repo: Repository, product: Product, now: datetime | None = None) -> Product:
    """Append a new product with a timestamp-derived id.

    Any id already set on ``product`` is replaced.
    """
    now = now or datetime.now()
    products = repo.load_products()
    new_product = replace(with_auto_price(product), id=timestamp_id(now))
    products.append(new_product)
    repo.save_products(products)
    logger.info("Added product %s (%s)", new_product.id, new_product.name)
    return new_product


def update_product(repo: Repository, product: Product) -> Product:
    """Replace the stored product that has the same id.

    Raises:
        RecordNotFoundError: If no product has that id.

    """
    products = repo.load_products()
    updated = with_auto_price(product)
    for index, existing in enumerate(products):
        if existing.id == product.id:
            products[index] = updated
            repo.save_products(products)
            logger.info("Updated product %s", product.id)
            return updated
    raise RecordNotFoundError(f"Product '{product.id}' not found")


def delete_product(repo: Repository, product_id: str) -> None:
    """Remove a product. Past transactions that sold it are left untouched.

    Raises:
        RecordNotFoundError: If no product has that id.

    """
    products = repo.load_products()
    remaining = [p for p in products if p.id != product_id]
    if len(remaining) == len(products):
        raise RecordNotFoundError(f"Product '{product_id}' not found")
    repo.save_products(remaining)
    logger.info("Deleted product %s", product_id)


def search_products(products: list[Product], query: str) -> list[Product]:
    """Case-insensitive substring match on the product name."""
    needle = query.lower()
    return [p for p in products if needle in p.name.lower()]
