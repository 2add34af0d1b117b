"""Custom exceptions for model loading and caching."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import TransportAttempt


class TorpModelsError(Exception):
    """Base exception for all torpmodels errors."""

    pass


class ConfigurationError(TorpModelsError):
    """
    Raised when a configuration value cannot be used.

    This can happen when:
    - TORPMODELS_HTTP_TIMEOUT is not a positive number
    - The packaged catalog file is missing or malformed
    """

    pass


# --- Name errors ---


class InvalidModelNameError(TorpModelsError):
    """
    Raised when a stat model name is not well-formed.

    Stat names may contain only lowercase letters and underscores.
    This indicates a caller bug (wrong casing, digits, punctuation)
    rather than a missing asset.
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"Invalid stat name: {name!r}. "
            "Must contain only lowercase letters and underscores."
        )


class UnknownModelError(TorpModelsError):
    """
    Raised when a model name is not in the catalog.

    This can happen when:
    - A core model alias is misspelled
    - A well-formed stat name has no released model
    """

    def __init__(self, name: str, available: Sequence[str]):
        self.name = name
        self.available = tuple(available)
        super().__init__(
            f"Unknown model: {name!r}. Available models: {', '.join(self.available)}"
        )


# --- Download errors ---


class ModelDownloadError(TorpModelsError):
    """
    Raised when every download transport failed for a model.

    The message lists each transport's error labelled by transport name,
    so authentication problems (release-asset client) can be told apart
    from network or availability problems (direct URL).
    """

    def __init__(
        self,
        name: str,
        filename: str,
        tag: str,
        attempts: Sequence[TransportAttempt] = (),
    ):
        self.name = name
        self.filename = filename
        self.tag = tag
        self.attempts = tuple(attempts)
        details = "; ".join(
            f"{a.transport}: {a.error}" for a in self.attempts if not a.success
        )
        message = f"Failed to download model {name!r} ({filename}) from release {tag}"
        if details:
            message = f"{message}. {details}"
        super().__init__(message)


# --- Cache errors ---


class ModelCorruptedError(TorpModelsError):
    """
    Raised when a cached model file cannot be deserialized.

    This can happen when:
    - A previous download was truncated
    - The file on disk was modified or is not a model file

    The cache entry has already been deleted when this is raised, so the
    next load will download a fresh copy.
    """

    def __init__(self, name: str, path: Path, reason: str):
        self.name = name
        self.path = path
        super().__init__(
            f"Model file for {name!r} is corrupted or unreadable: {reason}. "
            "Cache cleared, try again."
        )


class UnsupportedModelFormatError(TorpModelsError):
    """
    Raised when a cached model file is valid but cannot be read here.

    The file is left in the cache, since downloading it again would
    not help. This happens when an R serialized (.rds) model is loaded
    without the optional 'rdata' reader installed.
    """

    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"Cannot read model file {path}: {reason}")
