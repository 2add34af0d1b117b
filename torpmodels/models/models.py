"""Data models for model loading and caching."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

BYTES_PER_MB = 1024**2


class ModelCategory(Enum):
    """
    Partition of the model store.

    Each category maps to one cache subdirectory and one release tag.
    """

    CORE = "core"
    STAT = "stat"

    @property
    def cache_subdir(self) -> str:
        """Subdirectory of the cache root holding this category's files."""
        return "core" if self is ModelCategory.CORE else "stat-models"

    @property
    def release_tag(self) -> str:
        """Release tag holding this category's assets."""
        return "core-models" if self is ModelCategory.CORE else "stat-models"


@dataclass(frozen=True)
class ModelDescriptor:
    """
    Resolved form of a logical model name.

    Aliases of the same core model resolve to equal descriptors.
    """

    name: str  # canonical logical name, e.g. "ep" or "goals"
    filename: str  # e.g. "ep_model.rds"
    category: ModelCategory

    @property
    def tag(self) -> str:
        """Release tag the file is published under."""
        return self.category.release_tag

    @property
    def stem(self) -> str:
        """Filename without extension."""
        return Path(self.filename).stem


@dataclass(frozen=True)
class CacheEntry:
    """A model file location in the cache and whether it is present."""

    path: Path
    exists: bool
    size_bytes: int | None = None

    @property
    def size_mb(self) -> float | None:
        if self.size_bytes is None:
            return None
        return round(self.size_bytes / BYTES_PER_MB, 2)


@dataclass(frozen=True)
class CacheStatus:
    """One row of the cache status report."""

    model: str
    category: str  # "core" or "stat"
    cached: bool
    size_mb: float | None

    def to_dict(self) -> dict:
        """Convert to dictionary for display or JSON serialization."""
        return {
            "model": self.model,
            "category": self.category,
            "cached": self.cached,
            "size_mb": self.size_mb,
        }


@dataclass(frozen=True)
class TransportAttempt:
    """
    Outcome of one transport trying to fetch one asset.

    Transports return this instead of raising so the fetcher can
    collect every failure for the final report.
    """

    transport: str
    success: bool
    error: str | None = None

    @classmethod
    def ok(cls, transport: str) -> TransportAttempt:
        return cls(transport=transport, success=True)

    @classmethod
    def failed(cls, transport: str, error: str) -> TransportAttempt:
        return cls(transport=transport, success=False, error=error)


@dataclass
class FetchResult:
    """
    Result of fetching a model through the transport chain.

    Used by the loader to decide between deserializing and failing.
    """

    descriptor: ModelDescriptor
    success: bool
    attempts: list[TransportAttempt] = field(default_factory=list)

    @property
    def error_message(self) -> str | None:
        """Failures joined and labelled by transport, if any."""
        failures = [a for a in self.attempts if not a.success]
        if not failures:
            return None
        return "; ".join(f"{a.transport}: {a.error}" for a in failures)


class LoadState(Enum):
    """States a single load request moves through."""

    CACHE_CHECK = "cache_check"
    FETCHING = "fetching"
    DESERIALIZING = "deserializing"
    DONE = "done"
    FAILED = "failed"
