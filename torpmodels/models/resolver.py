"""Map logical model names to release files."""

from __future__ import annotations

import re

from .catalog import ModelCatalog
from .errors import InvalidModelNameError, UnknownModelError
from .models import ModelCategory, ModelDescriptor

STAT_NAME_PATTERN = re.compile(r"[a-z_]+")


class NameResolver:
    """
    Resolve logical model names to descriptors.

    Resolution is pure: no filesystem or network access.

    Core models accept the short name ("ep") and the file stem
    ("ep_model"), case-insensitively. Stat models must match
    ``^[a-z_]+$`` before the catalog is consulted.
    """

    def __init__(self, catalog: ModelCatalog):
        self._catalog = catalog
        self._core_aliases: dict[str, ModelDescriptor] = {}
        for spec in catalog.core_models.values():
            descriptor = ModelDescriptor(
                name=spec.name,
                filename=spec.filename,
                category=ModelCategory.CORE,
            )
            self._core_aliases[spec.name.lower()] = descriptor
            self._core_aliases[descriptor.stem.lower()] = descriptor

    @property
    def catalog(self) -> ModelCatalog:
        return self._catalog

    def resolve_core(self, name: str) -> ModelDescriptor:
        """
        Resolve a core model alias.

        Raises:
            UnknownModelError: If the alias is not known
        """
        descriptor = self._core_aliases.get(name.lower())
        if descriptor is None:
            raise UnknownModelError(name, self._catalog.core_names)
        return descriptor

    def resolve_stat(self, name: str) -> ModelDescriptor:
        """
        Resolve a stat model name.

        Raises:
            InvalidModelNameError: If the name is not lowercase letters/underscores
            UnknownModelError: If the name is well-formed but not released
        """
        if not STAT_NAME_PATTERN.fullmatch(name):
            raise InvalidModelNameError(name)
        if not self._catalog.has_stat(name):
            raise UnknownModelError(name, self._catalog.stat_models)
        return ModelDescriptor(
            name=name,
            filename=f"{name}.rds",
            category=ModelCategory.STAT,
        )
