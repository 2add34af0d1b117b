"""Model management module for resolving, downloading, and caching models."""

from .cache import ModelCache
from .catalog import CoreModelSpec, ModelCatalog, default_catalog, load_catalog
from .errors import (
    ConfigurationError,
    InvalidModelNameError,
    ModelCorruptedError,
    ModelDownloadError,
    TorpModelsError,
    UnknownModelError,
    UnsupportedModelFormatError,
)
from .factory import create_model_loader, create_transports
from .fetcher import ReleaseFetcher
from .loader import ModelLoader
from .models import (
    CacheEntry,
    CacheStatus,
    FetchResult,
    LoadState,
    ModelCategory,
    ModelDescriptor,
    TransportAttempt,
)
from .resolver import NameResolver
from .transports import DirectURLTransport, ReleaseAssetTransport, Transport

__all__ = [
    # Factory (main entry point)
    "create_model_loader",
    "create_transports",
    # Errors
    "TorpModelsError",
    "ConfigurationError",
    "InvalidModelNameError",
    "UnknownModelError",
    "ModelDownloadError",
    "ModelCorruptedError",
    "UnsupportedModelFormatError",
    # Models
    "ModelCategory",
    "ModelDescriptor",
    "CacheEntry",
    "CacheStatus",
    "TransportAttempt",
    "FetchResult",
    "LoadState",
    # Catalog
    "CoreModelSpec",
    "ModelCatalog",
    "default_catalog",
    "load_catalog",
    # Components (for advanced usage/testing)
    "NameResolver",
    "ModelCache",
    "ReleaseFetcher",
    "ModelLoader",
    "Transport",
    "ReleaseAssetTransport",
    "DirectURLTransport",
]
