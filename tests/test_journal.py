"""Tests for the sales journal."""

import pytest

from banner_pos.exceptions import RecordNotFoundError
from banner_pos.journal import (
    delete_transaction,
    edit_transaction,
    get_transaction,
    list_transactions,
    search_transactions,
    sort_newest_first,
)
from tests.test_utils import make_repo, make_transaction


@pytest.fixture
def transactions() -> list:
    return [
        make_transaction("2025-01-10T09:00:00", total=10000, customer_name="Budi", txn_id="101"),
        make_transaction("2025-01-12T15:30:00", total=20000, customer_name="Sari", txn_id="102"),
        make_transaction("bukan tanggal", total=5000, txn_id="103"),
        make_transaction("2025-01-11T08:00:00", total=30000, payment=10000, txn_id="104"),
    ]


def test_sort_newest_first(transactions: list) -> None:
    """Dated transactions descend; unparseable dates go last."""
    ordered = sort_newest_first(transactions)
    assert [t.id for t in ordered] == ["102", "104", "101", "103"]


def test_list_transactions(transactions: list) -> None:
    repo = make_repo(transactions=transactions)
    assert [t.id for t in list_transactions(repo)] == ["102", "104", "101", "103"]


@pytest.mark.parametrize(
    ("query", "expected"),
    [
        ("", ["101", "102", "103", "104"]),
        ("budi", ["101"]),
        ("SARI", ["102"]),
        ("2025-01-1", ["101", "102", "104"]),
        ("104", ["104"]),
        ("10", ["101", "102", "103", "104"]),
        ("nobody", []),
    ],
)
def test_search_transactions(transactions: list, query: str, expected: list) -> None:
    assert [t.id for t in search_transactions(transactions, query)] == expected


def test_get_transaction(transactions: list) -> None:
    repo = make_repo(transactions=transactions)
    assert get_transaction(repo, "102").customer_name == "Sari"
    with pytest.raises(RecordNotFoundError):
        get_transaction(repo, "999")


class TestEditTransaction:
    def test_recomputes_change(self, transactions: list) -> None:
        repo = make_repo(transactions=transactions)
        txn = edit_transaction(repo, "104", "Andi", 30000)

        assert txn.customer_name == "Andi"
        assert txn.payment == 30000
        assert txn.change == 0
        assert txn.total == 30000

        stored = get_transaction(repo, "104")
        assert stored.customer_name == "Andi"
        assert stored.change == 0

    def test_total_is_kept(self, transactions: list) -> None:
        repo = make_repo(transactions=transactions)
        txn = edit_transaction(repo, "101", "Budi", 4000)
        assert txn.total == 10000
        assert txn.change == -6000

    def test_saves_newest_first(self, transactions: list) -> None:
        repo = make_repo(transactions=transactions)
        edit_transaction(repo, "101", "Budi", 10000)
        assert [t.id for t in repo.load_transactions()] == ["102", "104", "101", "103"]

    def test_unknown_id(self, transactions: list) -> None:
        repo = make_repo(transactions=transactions)
        with pytest.raises(RecordNotFoundError):
            edit_transaction(repo, "999", "X", 1)
        assert [t.id for t in repo.load_transactions()] == ["101", "102", "103", "104"]


class TestDeleteTransaction:
    def test_removes_only_that_transaction(self, transactions: list) -> None:
        repo = make_repo(transactions=transactions)
        delete_transaction(repo, "102")
        assert [t.id for t in repo.load_transactions()] == ["101", "103", "104"]

    def test_unknown_id(self, transactions: list) -> None:
        repo = make_repo(transactions=transactions)
        with pytest.raises(RecordNotFoundError):
            delete_transaction(repo, "999")
        assert len(repo.load_transactions()) == 4
