"""Unified configuration for banner-pos.

This module provides a single, simple configuration class describing where the
key-value store and exported reports live on disk.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from banner_pos.exceptions import ConfigError

# Environment variable holding the data root
DATA_ROOT_ENV = "BANNER_POS_DATA"
DEFAULT_DATA_ROOT = "data"


@dataclass
class StorePaths:
    """All filesystem paths used by the store.

    Attributes:
        data_root: Root directory for persisted collections and reports.

    Directory Structure:
        data_root/
        ├── collections/     # one JSON blob per storage key
        │   ├── products.json
        │   ├── transactions.json
        │   └── storeSettings.json
        └── reports/         # exported .xlsx reports

    """

    data_root: Path

    @classmethod
    def from_root(cls, data_root: str | Path) -> StorePaths:
        """Create StorePaths from a root directory.

        Args:
            data_root: Root directory for store data.

        Returns:
            StorePaths instance.

        Raises:
            ConfigError: If data_root exists but is not a directory.

        Examples:
            >>> paths = StorePaths.from_root("data")
            >>> paths.collections_dir
            PosixPath('data/collections')

        """
        if isinstance(data_root, str):
            data_root = Path(data_root)

        if data_root.exists() and not data_root.is_dir():
            raise ConfigError(f"Data root {data_root} exists and is not a directory")

        return cls(data_root=data_root)

    @classmethod
    def from_env(cls) -> StorePaths:
        """Create StorePaths from the BANNER_POS_DATA environment variable."""
        return cls.from_root(os.environ.get(DATA_ROOT_ENV, DEFAULT_DATA_ROOT))

    @property
    def collections_dir(self) -> Path:
        """Key-value store directory (one file per key)."""
        return self.data_root / "collections"

    @property
    def reports_dir(self) -> Path:
        """Default output directory for exported reports."""
        return self.data_root / "reports"

    def ensure_dirs(self) -> None:
        """Create all directories in the data structure."""
        for path in [self.collections_dir, self.reports_dir]:
            path.mkdir(parents=True, exist_ok=True)
