"""Static catalog of released models."""

from __future__ import annotations

import functools
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType

import yaml

from .errors import ConfigurationError

_CATALOG_PATH = Path(__file__).parent.parent / "data" / "catalog.yaml"


@dataclass(frozen=True)
class CoreModelSpec:
    """A core model entry: short name, canonical file and description."""

    name: str
    filename: str
    description: str


@dataclass(frozen=True)
class ModelCatalog:
    """
    Immutable enumeration of known model names.

    Built once from the packaged YAML file and injected into the
    resolver and loader. Tests build their own instances directly.
    """

    core_models: Mapping[str, CoreModelSpec]
    stat_models: tuple[str, ...]

    @classmethod
    def from_dict(cls, data: dict) -> ModelCatalog:
        """Create from dictionary (YAML deserialization)."""
        try:
            core = {
                name: CoreModelSpec(
                    name=name,
                    filename=entry["file"],
                    description=entry["description"],
                )
                for name, entry in data["core_models"].items()
            }
            stats = tuple(data["stat_models"])
        except (KeyError, TypeError, AttributeError) as e:
            raise ConfigurationError(f"Malformed model catalog: {e}") from e

        return cls(core_models=MappingProxyType(core), stat_models=stats)

    @property
    def core_names(self) -> tuple[str, ...]:
        return tuple(self.core_models)

    def core_descriptions(self) -> dict[str, str]:
        """Map core model name to its human-readable description."""
        return {name: spec.description for name, spec in self.core_models.items()}

    def has_stat(self, name: str) -> bool:
        return name in self.stat_models

    def to_dict(self) -> dict:
        """Discovery view: core name -> description, plus stat names."""
        return {
            "core_models": self.core_descriptions(),
            "stat_models": list(self.stat_models),
        }


def load_catalog(path: Path | None = None) -> ModelCatalog:
    """
    Load a model catalog from YAML.

    Args:
        path: Catalog file (defaults to the packaged catalog)

    Raises:
        ConfigurationError: If the file is missing or malformed
    """
    path = path or _CATALOG_PATH
    if not path.exists():
        raise ConfigurationError(f"Model catalog not found: {path}")
    with open(path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in model catalog {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError(f"Model catalog {path} must be a mapping")
    return ModelCatalog.from_dict(data)


@functools.cache
def default_catalog() -> ModelCatalog:
    """The packaged catalog, loaded once per process."""
    return load_catalog()
