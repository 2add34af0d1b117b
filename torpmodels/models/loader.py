"""Load models from the local cache, downloading on a miss."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from .cache import ModelCache
from .deserializers import Deserializer, load_model_file
from .errors import ModelCorruptedError, ModelDownloadError, UnsupportedModelFormatError
from .fetcher import ReleaseFetcher
from .models import LoadState, ModelDescriptor
from .resolver import NameResolver

logger = logging.getLogger(__name__)


class ModelLoader:
    """
    Resolve, fetch and deserialize models.

    Each load request moves through:
        CACHE_CHECK -> (FETCHING) -> DESERIALIZING -> DONE
    and ends in FAILED when the download or the deserialization fails.

    A present cache entry is always used unless a refresh is forced;
    no network access happens on a cache hit. A file that fails to
    deserialize is deleted so the next call downloads it again, but
    the current call still fails. A file in a format that needs a
    missing optional reader is kept. Download failures never touch an
    existing cache entry.
    """

    def __init__(
        self,
        resolver: NameResolver,
        cache: ModelCache,
        fetcher: ReleaseFetcher,
        deserializer: Deserializer = load_model_file,
    ):
        """
        Initialize loader.

        Args:
            resolver: Maps logical names to descriptors
            cache: Local model cache
            fetcher: Downloads missing files
            deserializer: Turns a cached file into a model object
        """
        self._resolver = resolver
        self._cache = cache
        self._fetcher = fetcher
        self._deserializer = deserializer

    @property
    def resolver(self) -> NameResolver:
        return self._resolver

    @property
    def cache(self) -> ModelCache:
        return self._cache

    def load_core_model(self, name: str, force_refresh: bool = False) -> Any:
        """
        Load a core model by short name or file stem (e.g. "ep", "ep_model").

        Raises:
            UnknownModelError: If the name is not a core model
            ModelDownloadError: If a download was needed and every transport failed
            ModelCorruptedError: If the file could not be deserialized
        """
        descriptor = self._resolver.resolve_core(name)
        return self.load(descriptor, force_refresh=force_refresh, label=name)

    def load_stat_model(self, name: str, force_refresh: bool = False) -> Any:
        """
        Load a per-statistic model (e.g. "goals").

        Raises:
            InvalidModelNameError: If the name is not lowercase letters/underscores
            UnknownModelError: If the name is not a released stat model
            ModelDownloadError: If a download was needed and every transport failed
            ModelCorruptedError: If the file could not be deserialized
        """
        descriptor = self._resolver.resolve_stat(name)
        return self.load(descriptor, force_refresh=force_refresh, label=name)

    def load(
        self,
        descriptor: ModelDescriptor,
        force_refresh: bool = False,
        label: str | None = None,
    ) -> Any:
        """
        Run one load request for a resolved model.

        Args:
            descriptor: Resolved model
            force_refresh: Download even if a cached copy exists
            label: Name used in messages (defaults to descriptor.name)

        Returns:
            The deserialized model
        """
        label = label or descriptor.name

        self._enter(LoadState.CACHE_CHECK, label)
        entry = self._cache.get(descriptor.category, descriptor.filename)

        if entry.exists and not force_refresh:
            logger.info(f"Loading {label} from local cache")
            path = entry.path
        else:
            self._enter(LoadState.FETCHING, label)
            path = self._fetch(descriptor, label)

        self._enter(LoadState.DESERIALIZING, label)
        model = self._deserialize(path, label, descriptor)

        self._enter(LoadState.DONE, label)
        return model

    def _fetch(self, descriptor: ModelDescriptor, label: str) -> Path:
        logger.info(f"Downloading {label} from release {descriptor.tag}...")
        destination = self._cache.resolve_path(
            descriptor.category, descriptor.filename, create=True
        )

        result = self._fetcher.fetch(descriptor, destination)

        if not result.success or not destination.is_file():
            self._enter(LoadState.FAILED, label)
            raise ModelDownloadError(
                name=label,
                filename=descriptor.filename,
                tag=descriptor.tag,
                attempts=result.attempts,
            )
        return destination

    def _deserialize(self, path: Path, label: str, descriptor: ModelDescriptor) -> Any:
        try:
            return self._deserializer(path)
        except UnsupportedModelFormatError:
            self._enter(LoadState.FAILED, label)
            raise
        except Exception as e:
            self._invalidate(descriptor, label)
            self._enter(LoadState.FAILED, label)
            raise ModelCorruptedError(label, path, f"{type(e).__name__}: {e}") from e

    def _invalidate(self, descriptor: ModelDescriptor, label: str) -> None:
        """Delete a cache entry that failed to deserialize."""
        if self._cache.remove(descriptor.category, descriptor.filename):
            logger.warning(f"Deleted corrupted cache entry for {label}")

    @staticmethod
    def _enter(state: LoadState, label: str) -> None:
        logger.debug(f"{label}: {state.name}")
