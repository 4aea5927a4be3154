"""Tests for product catalog management."""

from datetime import datetime

import pytest

from banner_pos.catalog import (
    add_product,
    calculate_price,
    delete_product,
    search_products,
    update_product,
    with_auto_price,
)
from banner_pos.exceptions import RecordNotFoundError
from banner_pos.models import Product
from tests.test_utils import make_repo


@pytest.mark.parametrize(
    ("length", "width", "unit", "expected"),
    [
        (100, 50, "2", 10000.0),
        (100, 50, 2, 10000.0),
        (120, 60, "1.5", 10800.0),
        (0, 50, "2", 0.0),
    ],
)
def test_calculate_price(length: float, width: float, unit, expected: float) -> None:
    assert calculate_price(length, width, unit) == expected


class TestAutoPrice:
    def test_recomputed_when_all_inputs_positive(self) -> None:
        product = Product(id="p1", name="Banner", length=100, width=50, unit="2", price=1)
        assert with_auto_price(product).price == 10000.0

    @pytest.mark.parametrize(
        ("length", "width", "unit"),
        [(0, 50, "2"), (100, 0, "2"), (100, 50, "0"), (100, 50, "abc")],
    )
    def test_entered_price_kept(self, length: float, width: float, unit: str) -> None:
        product = Product(id="p1", name="Pin", length=length, width=width, unit=unit, price=7500)
        assert with_auto_price(product).price == 7500

    def test_returns_copy(self) -> None:
        product = Product(id="p1", name="Banner", length=10, width=10, unit="1")
        priced = with_auto_price(product)
        assert priced is not product
        assert product.price == 0.0


class TestCatalog:
    def test_add_product_assigns_id(self) -> None:
        repo = make_repo()
        now = datetime(2025, 1, 15, 8, 0, 0)
        added = add_product(
            repo, Product(id="", name="Spanduk", length=200, width=100, unit="0.5", stock=3), now
        )

        assert added.id == str(int(now.timestamp() * 1000))
        assert added.price == 10000.0
        assert repo.load_products() == [added]

    def test_update_product(self) -> None:
        repo = make_repo(products=[Product(id="p1", name="Banner", price=5000, stock=2)])
        updated = update_product(repo, Product(id="p1", name="Banner Besar", price=8000, stock=4))

        assert updated.name == "Banner Besar"
        [stored] = repo.load_products()
        assert stored.name == "Banner Besar"
        assert stored.price == 8000
        assert stored.stock == 4

    def test_update_unknown_product(self) -> None:
        repo = make_repo(products=[])
        with pytest.raises(RecordNotFoundError):
            update_product(repo, Product(id="nope", name="X"))

    def test_delete_product(self) -> None:
        repo = make_repo(
            products=[Product(id="p1", name="Banner"), Product(id="p2", name="Stiker")]
        )
        delete_product(repo, "p1")
        assert [p.id for p in repo.load_products()] == ["p2"]

        with pytest.raises(RecordNotFoundError):
            delete_product(repo, "p1")


def test_search_products() -> None:
    products = [
        Product(id="1", name="Banner Flexi"),
        Product(id="2", name="X-Banner"),
        Product(id="3", name="Stiker"),
    ]
    assert [p.id for p in search_products(products, "banner")] == ["1", "2"]
    assert [p.id for p in search_products(products, "")] == ["1", "2", "3"]
    assert search_products(products, "kartu") == []
