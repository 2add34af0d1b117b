"""Shared fixtures for models unit tests."""

from __future__ import annotations

from pathlib import Path
from types import MappingProxyType

import pytest

from torpmodels.models import CoreModelSpec, ModelCache, ModelCatalog, NameResolver


@pytest.fixture
def test_catalog() -> ModelCatalog:
    """Small catalog independent of the packaged YAML."""
    core = {
        "ep": CoreModelSpec("ep", "ep_model.rds", "Expected Points"),
        "shot": CoreModelSpec("shot", "shot_ocat_mdl.rds", "Shot outcome"),
    }
    return ModelCatalog(
        core_models=MappingProxyType(core),
        stat_models=("goals", "disposals", "inside50s"),
    )


@pytest.fixture
def resolver(test_catalog: ModelCatalog) -> NameResolver:
    return NameResolver(test_catalog)


@pytest.fixture
def temp_cache_dir(tmp_path: Path) -> Path:
    """Cache root that does not exist yet."""
    return tmp_path / "model_cache"


@pytest.fixture
def cache(temp_cache_dir: Path) -> ModelCache:
    """Create ModelCache instance with temp directory."""
    return ModelCache(temp_cache_dir)
