"""Factory functions for creating model loading components."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from .cache import ModelCache
from .catalog import ModelCatalog, default_catalog
from .deserializers import Deserializer, load_model_file
from .fetcher import ReleaseFetcher
from .loader import ModelLoader
from .resolver import NameResolver
from .transports import DirectURLTransport, ReleaseAssetTransport, Transport

if TYPE_CHECKING:
    from ..config import Settings


def create_transports(settings: Settings) -> list[Transport]:
    """Default transport chain: releases API first, then the direct URL."""
    return [
        ReleaseAssetTransport(
            repo=settings.repo,
            token=settings.github_token,
            api_url=settings.api_url,
            http_timeout=settings.http_timeout,
        ),
        DirectURLTransport(
            repo=settings.repo,
            host=settings.releases_host,
            http_timeout=settings.http_timeout,
        ),
    ]


def create_model_loader(
    settings: Settings,
    catalog: ModelCatalog | None = None,
    transports: Sequence[Transport] | None = None,
    deserializer: Deserializer = load_model_file,
) -> ModelLoader:
    """
    Create a fully-wired ModelLoader.

    This is the main entry point for the models module.
    Handles all internal wiring of resolver, cache, and fetcher.

    Args:
        settings: Settings read for the current operation
        catalog: Optional custom catalog (uses the packaged one if None)
        transports: Optional custom transport chain (for tests)
        deserializer: Reader for cached files

    Returns:
        Ready-to-use ModelLoader

    Example:
        loader = create_model_loader(get_settings())
        ep_model = loader.load_core_model("ep")
    """
    resolver = NameResolver(catalog or default_catalog())
    cache = ModelCache(settings.models_dir)
    fetcher = ReleaseFetcher(
        transports if transports is not None else create_transports(settings)
    )
    return ModelLoader(
        resolver=resolver,
        cache=cache,
        fetcher=fetcher,
        deserializer=deserializer,
    )
