"""Persisted store accessor.

This module provides the key-value stores and the typed Repository that the
rest of the package uses to read and write collections:

- **products**: list of Product records
- **transactions**: list of Transaction records (append-ordered)
- **storeSettings**: a single StoreSettings record
- **isLoggedIn**: session marker

Example:
    >>> from banner_pos import StorePaths
    >>> from banner_pos.storage import open_repository
    >>>
    >>> repo = open_repository(StorePaths.from_root("data"))
    >>> products = repo.load_products()
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from banner_pos.storage.repository import Repository, StorageUsage
from banner_pos.storage.store import FileStore, KeyValueStore, MemoryStore

if TYPE_CHECKING:
    from banner_pos.config import StorePaths


def open_repository(paths: StorePaths) -> Repository:
    """Open a file-backed Repository under paths.collections_dir."""
    paths.ensure_dirs()
    return Repository(FileStore(paths.collections_dir))


__all__ = [
    "FileStore",
    "KeyValueStore",
    "MemoryStore",
    "Repository",
    "StorageUsage",
    "open_repository",
]
