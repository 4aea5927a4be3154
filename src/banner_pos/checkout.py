"""Checkout: turn a cart into a persisted transaction and adjust stock.

This is the only code path that creates transactions or changes product stock.
Preconditions (non-empty cart, no zero-quantity lines, positive payment) are
the caller's responsibility; see Cart.can_checkout.

The two collection writes are not atomic. If the second write fails the first
one stays in place.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import replace
from datetime import datetime
from typing import TYPE_CHECKING

from banner_pos.models import LineItem, Transaction
from banner_pos.utils import timestamp_id

if TYPE_CHECKING:
    from banner_pos.storage import Repository

logger = logging.getLogger(__name__)


def build_transaction(
    items: Iterable[LineItem],
    payment: float,
    customer_name: str = "",
    deadline: str | None = None,
    now: datetime | None = None,
) -> Transaction:
    """Create a Transaction from cart lines without persisting it.

    The total is frozen here as the sum of price x quantity; change is
    payment - total and may be negative for a down payment.
    """
    now = now or datetime.now()
    lines = [replace(item) for item in items]
    total = sum(item.subtotal for item in lines)
    return Transaction(
        id=timestamp_id(now),
        date=now.isoformat(timespec="seconds"),
        items=lines,
        total=total,
        payment=payment,
        change=payment - total,
        customer_name=customer_name,
        deadline=deadline or None,
    )


def checkout(
    repo: Repository,
    items: Iterable[LineItem],
    payment: float,
    customer_name: str = "",
    deadline: str | None = None,
    now: datetime | None = None,
) -> Transaction:
    """Persist a new transaction and decrement stock for the sold products.

    Args:
        repo: Repository holding products and transactions.
        items: Cart lines.
        payment: Amount paid by the customer.
        customer_name: Optional customer name.
        deadline: Optional pickup deadline (date string).
        now: Creation time; defaults to the current local time.

    Returns:
        The persisted Transaction.

    Examples:
        >>> from banner_pos.storage import MemoryStore, Repository
        >>> repo = Repository(MemoryStore())
        >>> txn = checkout(repo, [LineItem("p1", "Banner", 1000, 2)], 2000)
        >>> txn.total, txn.change
        (2000, 0)

    """
    txn = build_transaction(items, payment, customer_name, deadline, now)

    transactions = repo.load_transactions()
    transactions.append(txn)
    repo.save_transactions(transactions)

    sold: dict[str, int] = {}
    for item in txn.items:
        sold[item.id] = sold.get(item.id, 0) + item.quantity

    products = repo.load_products()
    for product in products:
        if product.id in sold:
            product.stock = max(0, product.stock - sold[product.id])
    repo.save_products(products)

    logger.info(
        "Checkout %s: %d line(s), total %.2f, payment %.2f",
        txn.id,
        len(txn.items),
        txn.total,
        txn.payment,
    )
    return txn
