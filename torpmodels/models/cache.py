"""Disk cache management for downloaded model files."""

from __future__ import annotations

import logging
from pathlib import Path

from .models import CacheEntry, ModelCategory

logger = logging.getLogger(__name__)


class ModelCache:
    """
    Manage the local directory tree of downloaded models.

    Cache structure:
        cache_dir/
        ├── core/
        │   ├── ep_model.rds
        │   └── ...
        └── stat-models/
            ├── goals.rds
            └── ...

    There is no manifest: presence is a filesystem existence check.
    Directories are only created when a file is about to be written.
    """

    def __init__(self, cache_dir: Path):
        """
        Initialize model cache.

        Args:
            cache_dir: Root directory for cached models (created lazily)
        """
        self._cache_dir = Path(cache_dir)

    @property
    def cache_dir(self) -> Path:
        return self._cache_dir

    def category_dir(self, category: ModelCategory) -> Path:
        return self._cache_dir / category.cache_subdir

    def resolve_path(
        self, category: ModelCategory, filename: str, create: bool = False
    ) -> Path:
        """
        Get the cache path for a model file.

        Args:
            category: Model category (selects the subdirectory)
            filename: Canonical model filename
            create: Create the category directory, for callers about to write

        Returns:
            Path to the (possibly absent) cached file
        """
        path = self.category_dir(category) / filename
        if create:
            path.parent.mkdir(parents=True, exist_ok=True)
        return path

    def get(self, category: ModelCategory, filename: str) -> CacheEntry:
        """Look up a cached file and its size."""
        path = self.resolve_path(category, filename)
        if not path.is_file():
            return CacheEntry(path=path, exists=False)
        return CacheEntry(path=path, exists=True, size_bytes=path.stat().st_size)

    def exists(self, category: ModelCategory, filename: str) -> bool:
        return self.get(category, filename).exists

    def list_files(self, category: ModelCategory, suffix: str | None = None) -> list[str]:
        """
        List filenames cached for a category.

        Args:
            category: Model category
            suffix: Only include files with this extension (e.g. ".rds")

        Returns:
            Sorted filenames; empty if the category directory is absent
        """
        directory = self.category_dir(category)
        if not directory.is_dir():
            return []
        return sorted(
            p.name
            for p in directory.iterdir()
            if p.is_file() and (suffix is None or p.suffix == suffix)
        )

    def remove(self, category: ModelCategory, filename: str) -> bool:
        """
        Remove a single cached file.

        Returns:
            True if removed, False if not found
        """
        path = self.resolve_path(category, filename)
        if path.is_file():
            path.unlink()
            logger.info(f"Removed cached model {category.cache_subdir}/{filename}")
            return True
        return False

    def clear(self, category: ModelCategory) -> int:
        """
        Delete every file directly inside a category directory.

        The directory itself is kept. An empty or missing directory
        is not an error.

        Returns:
            Number of files removed
        """
        removed = 0
        for filename in self.list_files(category):
            (self.category_dir(category) / filename).unlink()
            removed += 1

        if removed:
            logger.info(f"Cleared {removed} {category.value} model(s)")
        return removed

    def get_total_size_bytes(self, suffix: str | None = None) -> int:
        """Get total cache size in bytes, optionally only for files with suffix."""
        total = 0
        for category in ModelCategory:
            for filename in self.list_files(category, suffix=suffix):
                total += (self.category_dir(category) / filename).stat().st_size
        return total
