"""Unit tests for NameResolver."""

from __future__ import annotations

import pytest

from torpmodels.models import (
    InvalidModelNameError,
    ModelCategory,
    ModelDescriptor,
    NameResolver,
    UnknownModelError,
    default_catalog,
)


class TestResolveCore:
    """Tests for NameResolver.resolve_core method."""

    @pytest.mark.parametrize(
        ("short", "stem", "filename"),
        [
            ("ep", "ep_model", "ep_model.rds"),
            ("wp", "wp_model", "wp_model.rds"),
            ("shot", "shot_ocat_mdl", "shot_ocat_mdl.rds"),
            ("xgb_win", "xgb_win_model", "xgb_win_model.rds"),
        ],
    )
    def test_aliases_resolve_to_same_descriptor(
        self, short: str, stem: str, filename: str
    ) -> None:
        """Short name and file stem give an identical descriptor."""
        resolver = NameResolver(default_catalog())

        by_short = resolver.resolve_core(short)
        by_stem = resolver.resolve_core(stem)

        assert by_short == by_stem
        assert by_short.filename == filename
        assert by_short.tag == "core-models"
        assert by_short.category is ModelCategory.CORE

    def test_is_case_insensitive(self, resolver: NameResolver) -> None:
        assert resolver.resolve_core("EP") == resolver.resolve_core("ep")
        assert resolver.resolve_core("Ep_Model").filename == "ep_model.rds"

    @pytest.mark.parametrize("name", ["nonexistent", "", "random_name", "ep_model.rds"])
    def test_unknown_names_raise(self, resolver: NameResolver, name: str) -> None:
        with pytest.raises(UnknownModelError, match="Unknown model"):
            resolver.resolve_core(name)

    def test_error_lists_alternatives(self, resolver: NameResolver) -> None:
        with pytest.raises(UnknownModelError) as exc_info:
            resolver.resolve_core("nonexistent")

        assert exc_info.value.available == ("ep", "shot")
        assert "ep, shot" in str(exc_info.value)


class TestResolveStat:
    """Tests for NameResolver.resolve_stat method."""

    def test_known_stat(self, resolver: NameResolver) -> None:
        descriptor = resolver.resolve_stat("goals")

        assert descriptor == ModelDescriptor(
            name="goals", filename="goals.rds", category=ModelCategory.STAT
        )
        assert descriptor.tag == "stat-models"

    @pytest.mark.parametrize(
        "name",
        [
            "GOALS",
            "Goals",
            "goals-per-game",
            "goals 123",
            "goals1",
            "goals.rds",
            "",
            "goals\n",
            "inside50s",  # in the catalog, but digits are not allowed
        ],
    )
    def test_malformed_names_raise_invalid(self, resolver: NameResolver, name: str) -> None:
        """Format check happens before catalog membership."""
        with pytest.raises(InvalidModelNameError, match="Invalid stat name"):
            resolver.resolve_stat(name)

    def test_well_formed_unknown_raises_unknown(self, resolver: NameResolver) -> None:
        with pytest.raises(UnknownModelError, match="nonexistent_stat"):
            resolver.resolve_stat("nonexistent_stat")

    def test_core_name_is_not_a_stat(self, resolver: NameResolver) -> None:
        with pytest.raises(UnknownModelError):
            resolver.resolve_stat("ep")
