"""Sales journal: browse, search, edit and delete recorded transactions.

Only the customer name and the payment of a transaction can be edited. Editing
the payment recomputes the change; the total stays as it was at checkout.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING

from banner_pos.exceptions import RecordNotFoundError
from banner_pos.models import Transaction
from banner_pos.reports.filter import parse_transaction_date

if TYPE_CHECKING:
    from banner_pos.storage import Repository

logger = logging.getLogger(__name__)


def sort_newest_first(transactions: list[Transaction]) -> list[Transaction]:
    """Sort by date descending. Transactions with unparseable dates go last."""
    dated: list[tuple[datetime, Transaction]] = []
    undated: list[Transaction] = []
    for txn in transactions:
        parsed = parse_transaction_date(txn.date)
        if parsed is None:
            undated.append(txn)
        else:
            dated.append((parsed, txn))
    dated.sort(key=lambda pair: pair[0], reverse=True)
    return [txn for _, txn in dated] + undated


def list_transactions(repo: Repository) -> list[Transaction]:
    """Load all transactions, newest first."""
    return sort_newest_first(repo.load_transactions())


def search_transactions(transactions: list[Transaction], query: str) -> list[Transaction]:
    """Filter by customer name or date (case-insensitive) or by id substring."""
    if not query:
        return list(transactions)
    needle = query.lower()
    return [
        t
        for t in transactions
        if needle in t.customer_name.lower() or query in t.id or needle in t.date.lower()
    ]


def get_transaction(repo: Repository, transaction_id: str) -> Transaction:
    """Return one transaction by id.

    Raises:
        RecordNotFoundError: If no transaction has that id.

    """
    for txn in repo.load_transactions():
        if txn.id == transaction_id:
            return txn
    raise RecordNotFoundError(f"Transaction '{transaction_id}' not found")


def edit_transaction(
    repo: Repository,
    transaction_id: str,
    customer_name: str,
    payment: float,
) -> Transaction:
    """Update the customer name and payment of a transaction.

    The change is recomputed as payment - total. The collection is saved
    newest first.

    Raises:
        RecordNotFoundError: If no transaction has that id.

    """
    transactions = repo.load_transactions()
    for txn in transactions:
        if txn.id == transaction_id:
            txn.customer_name = customer_name
            txn.payment = payment
            txn.change = payment - txn.total
            repo.save_transactions(sort_newest_first(transactions))
            logger.info("Updated transaction %s (payment %.2f)", transaction_id, payment)
            return txn
    raise RecordNotFoundError(f"Transaction '{transaction_id}' not found")


def delete_transaction(repo: Repository, transaction_id: str) -> None:
    """Remove a transaction from the journal.

    Raises:
        RecordNotFoundError: If no transaction has that id.

    """
    transactions = repo.load_transactions()
    remaining = [t for t in transactions if t.id != transaction_id]
    if len(remaining) == len(transactions):
        raise RecordNotFoundError(f"Transaction '{transaction_id}' not found")
    repo.save_transactions(remaining)
    logger.info("Deleted transaction %s", transaction_id)
