"""
Pre-trained models for AFL analytics.

Models are published as GitHub release assets and cached locally after
the first download:

    from torpmodels import load_core_model, load_stat_model

    ep_model = load_core_model("ep")
    goals_model = load_stat_model("goals")

Core models: ep, wp, shot, xgb_win. Stat models: one per player
statistic, see list_available_models().
"""

from .api import (
    check_cache_status,
    clear_cache,
    list_available_models,
    load_core_model,
    load_stat_model,
    load_torp_model,
)
from .config import Settings, get_settings
from .models import (
    CacheStatus,
    ConfigurationError,
    InvalidModelNameError,
    ModelCorruptedError,
    ModelDownloadError,
    TorpModelsError,
    UnknownModelError,
    UnsupportedModelFormatError,
)

__version__ = "0.2.0"

__all__ = [
    # Loading
    "load_core_model",
    "load_stat_model",
    "load_torp_model",
    # Discovery and cache management
    "list_available_models",
    "check_cache_status",
    "clear_cache",
    "CacheStatus",
    # Config
    "Settings",
    "get_settings",
    # Errors
    "TorpModelsError",
    "ConfigurationError",
    "InvalidModelNameError",
    "UnknownModelError",
    "ModelDownloadError",
    "ModelCorruptedError",
    "UnsupportedModelFormatError",
]
