"""Record types persisted in the key-value store.

Each record converts to and from the JSON shape the store keeps on disk. The
persisted keys are camelCase (``customerName``, ``storeName``...) so that data
written by earlier versions of the shop's till can still be read.

``from_dict`` raises ValueError when a record is malformed; callers loading a
whole collection decide what to do with a bad record (see
``banner_pos.storage.repository``).
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any


def _require_str(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        raise ValueError(f"Missing required field '{key}'")
    return str(value)


def _number(data: dict[str, Any], key: str, default: float | None = None) -> float:
    value = data.get(key, default)
    if value is None or isinstance(value, bool):
        raise ValueError(f"Field '{key}' must be a number, got {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Field '{key}' must be a number, got {value!r}") from e
    if not math.isfinite(number):
        raise ValueError(f"Field '{key}' must be finite, got {value!r}")
    return number


def _optional_number(data: dict[str, Any], key: str) -> float | None:
    if data.get(key) is None:
        return None
    return _number(data, key)


# Payment status labels as printed on receipts and reports
PAID_LABEL = "Lunas"
PARTIAL_LABEL = "Dp"


def payment_status(total: float, payment: float) -> str:
    """Return "Lunas" when the payment covers the total, otherwise "Dp" (down payment).

    This is a presentation rule; the status is never stored.

    Examples:
        >>> payment_status(2000, 2000)
        'Lunas'
        >>> payment_status(2000, 500)
        'Dp'

    """
    return PAID_LABEL if payment >= total else PARTIAL_LABEL


@dataclass
class Product:
    """A catalog product.

    Attributes:
        id: Unique identifier (creation timestamp in milliseconds).
        name: Display name.
        length: Length in cm.
        width: Width in cm.
        unit: Price per cm², kept as text the way it was entered.
        price: Unit price. Computed as length x width x unit when all three are positive.
        stock: Units on hand, never negative.
        description: Free text.

    """

    id: str
    name: str
    length: float = 0.0
    width: float = 0.0
    price: float = 0.0
    stock: int = 0
    description: str = ""
    unit: str = "0"

    @property
    def unit_price(self) -> float:
        """Price per area unit as a number (0 when the text is not numeric)."""
        try:
            return float(self.unit)
        except ValueError:
            return 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "length": self.length,
            "width": self.width,
            "price": self.price,
            "stock": self.stock,
            "description": self.description,
            "unit": self.unit,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Product:
        stock = int(_number(data, "stock", 0))
        return cls(
            id=_require_str(data, "id"),
            name=_require_str(data, "name"),
            length=_number(data, "length", 0),
            width=_number(data, "width", 0),
            price=_number(data, "price", 0),
            stock=max(0, stock),
            description=str(data.get("description") or ""),
            unit=str(data.get("unit", "0")),
        )


@dataclass
class LineItem:
    """One line of a cart or of a persisted transaction."""

    id: str
    name: str
    price: float
    quantity: int
    length: float | None = None
    width: float | None = None

    @property
    def subtotal(self) -> float:
        return self.price * self.quantity

    @classmethod
    def from_product(cls, product: Product, quantity: int = 1) -> LineItem:
        """Build a cart line from a catalog product, carrying its dimensions."""
        return cls(
            id=product.id,
            name=product.name,
            price=product.price,
            quantity=quantity,
            length=product.length,
            width=product.width,
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "quantity": self.quantity,
        }
        if self.length is not None:
            data["length"] = self.length
        if self.width is not None:
            data["width"] = self.width
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LineItem:
        return cls(
            id=_require_str(data, "id"),
            name=_require_str(data, "name"),
            price=_number(data, "price"),
            quantity=int(_number(data, "quantity")),
            length=_optional_number(data, "length"),
            width=_optional_number(data, "width"),
        )


@dataclass
class Transaction:
    """A completed sale.

    ``total`` and ``change`` are computed once at checkout. ``total`` is never
    recomputed from ``items`` afterwards; ``change`` is recomputed only when the
    payment is edited from the sales journal.
    """

    id: str
    date: str
    items: list[LineItem]
    total: float
    payment: float
    change: float
    customer_name: str = ""
    deadline: str | None = None

    @property
    def item_count(self) -> int:
        """Total quantity across all lines."""
        return sum(item.quantity for item in self.items)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "date": self.date,
            "items": [item.to_dict() for item in self.items],
            "total": self.total,
            "payment": self.payment,
            "change": self.change,
            "customerName": self.customer_name,
            "deadline": self.deadline,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Transaction:
        raw_items = data.get("items")
        if not isinstance(raw_items, list):
            raise ValueError("Field 'items' must be a list")
        items = []
        for raw in raw_items:
            if not isinstance(raw, dict):
                raise ValueError(f"Line item must be an object, got {raw!r}")
            items.append(LineItem.from_dict(raw))

        deadline = data.get("deadline")
        return cls(
            id=_require_str(data, "id"),
            date=_require_str(data, "date"),
            items=items,
            total=_number(data, "total"),
            payment=_number(data, "payment", 0),
            change=_number(data, "change", 0),
            customer_name=str(data.get("customerName") or ""),
            deadline=str(deadline) if deadline else None,
        )


# Printed on receipts when the store has not configured a footer
DEFAULT_RECEIPT_FOOTER = "Terima kasih atas kunjungan Anda"


@dataclass
class StoreSettings:
    """Store identity printed on receipts and work orders."""

    store_name: str = ""
    address: str = ""
    phone_number: str = ""
    footer: str = ""

    @property
    def receipt_footer(self) -> str:
        return self.footer or DEFAULT_RECEIPT_FOOTER

    def to_dict(self) -> dict[str, Any]:
        return {
            "storeName": self.store_name,
            "address": self.address,
            "phoneNumber": self.phone_number,
            "footer": self.footer,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> StoreSettings:
        return cls(
            store_name=str(data.get("storeName") or ""),
            address=str(data.get("address") or ""),
            phone_number=str(data.get("phoneNumber") or ""),
            footer=str(data.get("footer") or ""),
        )


@dataclass
class Cart:
    """Transient shopping cart. Never persisted."""

    items: list[LineItem] = field(default_factory=list)

    def add(self, product: Product) -> LineItem:
        """Add one unit of a product, merging with an existing line of the same id."""
        for item in self.items:
            if item.id == product.id:
                item.quantity += 1
                return item
        item = LineItem.from_product(product)
        self.items.append(item)
        return item

    def update_quantity(self, item_id: str, quantity: int) -> None:
        for item in self.items:
            if item.id == item_id:
                item.quantity = quantity

    def remove(self, item_id: str) -> None:
        self.items = [item for item in self.items if item.id != item_id]

    def reset(self) -> None:
        self.items = []

    @property
    def total(self) -> float:
        return sum(item.subtotal for item in self.items)

    def change_for(self, payment: float) -> float:
        return payment - self.total

    def can_checkout(self, payment: float) -> bool:
        """Whether the checkout action should be enabled.

        Requires a non-empty cart, no zero-quantity lines and a positive payment.
        """
        if not self.items:
            return False
        if any(item.quantity <= 0 for item in self.items):
            return False
        return payment > 0

    def payment_status(self, payment: float) -> str:
        return payment_status(self.total, payment)
