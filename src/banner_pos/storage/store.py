"""Key-value stores holding one text blob per key.

The till keeps every collection as a single serialized document under a named
key and always reads and writes it whole. Two implementations are provided:

- FileStore: one ``<key>.json`` file per key under a directory.
- MemoryStore: a dict, used by tests and for throwaway sessions.

There is no locking. Two processes writing the same key overwrite each other
(last write wins on the whole collection).
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from pathlib import Path
from typing import Protocol

from banner_pos.exceptions import StorageError

logger = logging.getLogger(__name__)

# Keys become file names, so keep them to a safe alphabet
KEY_RE = re.compile(r"^[A-Za-z0-9_.-]+$")


class KeyValueStore(Protocol):
    """Minimal string store interface (the shape of browser localStorage)."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...

    def keys(self) -> Iterator[str]: ...


def _check_key(key: str) -> str:
    if not KEY_RE.match(key):
        raise StorageError(f"Invalid storage key {key!r}")
    return key


class FileStore:
    """Store each key as ``<root>/<key>.json``.

    Example:
        >>> store = FileStore("data/collections")
        >>> store.set("isLoggedIn", "true")
        >>> store.get("isLoggedIn")
        'true'

    """

    suffix = ".json"

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root)

    def _path(self, key: str) -> Path:
        return self.root / f"{_check_key(key)}{self.suffix}"

    def get(self, key: str) -> str | None:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        # Write failures (disk full, read-only mount) propagate to the caller
        self.root.mkdir(parents=True, exist_ok=True)
        path = self._path(key)
        path.write_text(value, encoding="utf-8")
        logger.debug("Wrote %d chars to %s", len(value), path)

    def remove(self, key: str) -> None:
        path = self._path(key)
        if path.exists():
            path.unlink()
            logger.debug("Removed %s", path)

    def keys(self) -> Iterator[str]:
        if not self.root.is_dir():
            return iter(())
        return iter(sorted(p.stem for p in self.root.glob(f"*{self.suffix}") if p.is_file()))


class MemoryStore:
    """In-memory store backed by a dict."""

    def __init__(self, data: dict[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(data or {})

    def get(self, key: str) -> str | None:
        return self.data.get(_check_key(key))

    def set(self, key: str, value: str) -> None:
        self.data[_check_key(key)] = value

    def remove(self, key: str) -> None:
        self.data.pop(_check_key(key), None)

    def keys(self) -> Iterator[str]:
        return iter(sorted(self.data))
