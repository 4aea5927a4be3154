"""Typed access to the persisted collections.

Every component that touches stored data goes through Repository instead of
the raw key-value store. Loading fails closed: a missing, unparseable (bad JSON or bad
UTF-8) or wrongly-shaped collection loads as empty (or as default settings)
and is only logged, so report screens always render. Individual records that fail
validation (including non-finite numbers) are skipped with a warning.

Saving always rewrites the whole collection. Entries that were skipped on load
are written back unchanged after the saved records, so a checkout or an edit
never erases data this version cannot read. Write errors are not caught.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from banner_pos.models import Product, StoreSettings, Transaction
from banner_pos.storage.store import KeyValueStore

logger = logging.getLogger(__name__)

# Storage keys (kept identical to the original browser till)
PRODUCTS_KEY = "products"
TRANSACTIONS_KEY = "transactions"
STORE_SETTINGS_KEY = "storeSettings"
LOGGED_IN_KEY = "isLoggedIn"

# Nominal quota shown in the settings screen, in MB
STORAGE_QUOTA_MB = 5.0

T = TypeVar("T")


@dataclass(frozen=True)
class StorageUsage:
    """Approximate space used by the store.

    Attributes:
        used_mb: Used space in MB (UTF-16 estimate, two bytes per character).
        total_mb: Nominal quota in MB.

    """

    used_mb: float
    total_mb: float = STORAGE_QUOTA_MB

    @property
    def percent(self) -> float:
        if self.total_mb <= 0:
            return 0.0
        return round(self.used_mb / self.total_mb * 100, 1)


class Repository:
    """Load and save the till's collections from a KeyValueStore.

    Example:
        >>> from banner_pos.storage import MemoryStore, Repository
        >>> repo = Repository(MemoryStore())
        >>> repo.load_products()
        []

    """

    def __init__(self, store: KeyValueStore) -> None:
        self.store = store

    # ------------------------------------------------------------------
    # Raw JSON helpers
    # ------------------------------------------------------------------

    def _read_json(self, key: str) -> Any:
        try:
            raw = self.store.get(key)
        except UnicodeDecodeError as e:
            logger.warning("Stored %s is not valid UTF-8, treating as empty: %s", key, e)
            return None
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning("Stored %s is not valid JSON, treating as empty: %s", key, e)
            return None

    def _write_json(self, key: str, value: Any) -> None:
        self.store.set(key, json.dumps(value, ensure_ascii=False))

    def _read_records(
        self,
        key: str,
        parse: Callable[[dict[str, Any]], T],
        warn: bool = True,
    ) -> tuple[list[T], list[Any]]:
        """Split a stored list into parsed records and raw entries that failed to parse."""
        data = self._read_json(key)
        if data is None:
            return [], []
        if not isinstance(data, list):
            if warn:
                logger.warning(
                    "Stored %s is a %s, expected a list; treating as empty",
                    key,
                    type(data).__name__,
                )
            return [], []

        records: list[T] = []
        rejected: list[Any] = []
        for index, raw in enumerate(data):
            try:
                if not isinstance(raw, dict):
                    raise ValueError("not an object")
                records.append(parse(raw))
            except (TypeError, ValueError) as e:
                if warn:
                    logger.warning("Skipping %s[%d]: %s", key, index, e)
                rejected.append(raw)
        return records, rejected

    def _load_list(self, key: str, parse: Callable[[dict[str, Any]], T]) -> list[T]:
        records, _ = self._read_records(key, parse)
        return records

    def _save_list(
        self,
        key: str,
        records: list[Any],
        parse: Callable[[dict[str, Any]], Any],
    ) -> None:
        # Entries skipped on load are written back unchanged after the records
        _, rejected = self._read_records(key, parse, warn=False)
        if rejected:
            logger.warning("Keeping %d unreadable %s entries as stored", len(rejected), key)
        self._write_json(key, [r.to_dict() for r in records] + rejected)

    # ------------------------------------------------------------------
    # Collections
    # ------------------------------------------------------------------

    def load_products(self) -> list[Product]:
        return self._load_list(PRODUCTS_KEY, Product.from_dict)

    def save_products(self, products: list[Product]) -> None:
        self._save_list(PRODUCTS_KEY, products, Product.from_dict)
        logger.debug("Saved %d products", len(products))

    def load_transactions(self) -> list[Transaction]:
        return self._load_list(TRANSACTIONS_KEY, Transaction.from_dict)

    def save_transactions(self, transactions: list[Transaction]) -> None:
        self._save_list(TRANSACTIONS_KEY, transactions, Transaction.from_dict)
        logger.debug("Saved %d transactions", len(transactions))

    def load_store_settings(self) -> StoreSettings:
        data = self._read_json(STORE_SETTINGS_KEY)
        if data is None:
            return StoreSettings()
        if not isinstance(data, dict):
            logger.warning("Stored %s is not an object; using defaults", STORE_SETTINGS_KEY)
            return StoreSettings()
        return StoreSettings.from_dict(data)

    def save_store_settings(self, settings: StoreSettings) -> None:
        self._write_json(STORE_SETTINGS_KEY, settings.to_dict())

    # ------------------------------------------------------------------
    # Session marker
    # ------------------------------------------------------------------

    def is_logged_in(self) -> bool:
        return bool(self.store.get(LOGGED_IN_KEY))

    def log_in(self) -> None:
        self.store.set(LOGGED_IN_KEY, "true")

    def log_out(self) -> None:
        self.store.remove(LOGGED_IN_KEY)

    # ------------------------------------------------------------------
    # Usage
    # ------------------------------------------------------------------

    def storage_usage(self) -> StorageUsage:
        """Estimate space used by all keys, counting two bytes per character."""
        total = 0
        for key in self.store.keys():
            value = self.store.get(key) or ""
            total += (len(value) + len(key)) * 2
        return StorageUsage(used_mb=round(total / (1024 * 1024), 2))
