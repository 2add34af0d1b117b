"""Public functions for loading models and managing the cache."""

from __future__ import annotations

import logging
from typing import Any

from .config import Settings, get_settings
from .models import (
    CacheStatus,
    ModelCache,
    ModelCategory,
    create_model_loader,
    default_catalog,
)

logger = logging.getLogger(__name__)

CLEAR_SCOPES = ("all", "core", "stat")

_SCOPE_CATEGORIES = {
    "all": (ModelCategory.CORE, ModelCategory.STAT),
    "core": (ModelCategory.CORE,),
    "stat": (ModelCategory.STAT,),
}


def load_core_model(
    name: str, force_refresh: bool = False, *, settings: Settings | None = None
) -> Any:
    """
    Load a core model from the local cache or GitHub releases.

    Args:
        name: One of "ep"/"ep_model", "wp"/"wp_model", "shot"/"shot_ocat_mdl",
            "xgb_win"/"xgb_win_model" (case-insensitive)
        force_refresh: Download a fresh copy even if cached
        settings: Settings to use (read from the environment if None)

    Returns:
        The deserialized model

    Raises:
        UnknownModelError: If the name is not a core model
        ModelDownloadError: If a download was needed and failed
        ModelCorruptedError: If the cached file was unreadable (it is deleted)
    """
    loader = create_model_loader(settings or get_settings())
    return loader.load_core_model(name, force_refresh=force_refresh)


load_torp_model = load_core_model


def load_stat_model(
    name: str, force_refresh: bool = False, *, settings: Settings | None = None
) -> Any:
    """
    Load a per-statistic player model (e.g. "goals", "disposals").

    Raises:
        InvalidModelNameError: If the name is not lowercase letters/underscores
        UnknownModelError: If the stat has no released model
        ModelDownloadError: If a download was needed and failed
        ModelCorruptedError: If the cached file was unreadable (it is deleted)
    """
    loader = create_model_loader(settings or get_settings())
    return loader.load_stat_model(name, force_refresh=force_refresh)


def list_available_models() -> dict:
    """Core model descriptions and stat model names that can be loaded."""
    return default_catalog().to_dict()


def check_cache_status(*, settings: Settings | None = None) -> list[CacheStatus]:
    """
    Report which models are cached locally and their sizes.

    Covers every core model, plus every stat model file present on disk.
    """
    settings = settings or get_settings()
    cache = ModelCache(settings.models_dir)
    results: list[CacheStatus] = []

    for spec in default_catalog().core_models.values():
        entry = cache.get(ModelCategory.CORE, spec.filename)
        results.append(
            CacheStatus(
                model=entry.path.stem,
                category="core",
                cached=entry.exists,
                size_mb=entry.size_mb,
            )
        )

    for filename in cache.list_files(ModelCategory.STAT, suffix=".rds"):
        entry = cache.get(ModelCategory.STAT, filename)
        results.append(
            CacheStatus(
                model=entry.path.stem,
                category="stat",
                cached=True,
                size_mb=entry.size_mb,
            )
        )

    return results


def clear_cache(scope: str = "all", *, settings: Settings | None = None) -> int:
    """
    Remove cached model files.

    Args:
        scope: "all", "core", or "stat"
        settings: Settings to use (read from the environment if None)

    Returns:
        Number of files removed

    Raises:
        ValueError: If scope is not one of the accepted values
    """
    if scope not in _SCOPE_CATEGORIES:
        raise ValueError(
            f"Invalid cache scope {scope!r}; should be one of {', '.join(CLEAR_SCOPES)}"
        )

    settings = settings or get_settings()
    cache = ModelCache(settings.models_dir)
    removed = sum(cache.clear(category) for category in _SCOPE_CATEGORIES[scope])
    logger.info(f"Cleared {removed} cached model file(s) ({scope})")
    return removed
