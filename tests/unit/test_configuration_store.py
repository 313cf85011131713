"""Unit tests for ConfigurationStore and ModuleOverride.

These tests verify:
- Defaults and reset
- Validation of global dimensions and material
- Per-module override validation order and durability
- Rejected calls leave the store unchanged
"""

import math

import pytest

from wardrobe.domain import (
    ConfigurationStore,
    GlobalDimensions,
    IndexOutOfRange,
    InvalidDimension,
    ModuleOverride,
    OverrideField,
    UnknownMaterial,
    UnsupportedOverrideField,
)


@pytest.fixture
def store() -> ConfigurationStore:
    return ConfigurationStore()


def _snapshot(store: ConfigurationStore) -> tuple:
    return (store.dimensions, store.material, store.overrides)


class TestDefaults:
    """Tests for the initial store state."""

    def test_initial_state(self, store: ConfigurationStore) -> None:
        """Store starts at 60x60x60 wood with no overrides."""
        assert store.dimensions == GlobalDimensions(width=60, height=60, depth=60)
        assert store.material == "wood"
        assert store.overrides == {}
        assert store.module_count == 1

    def test_materials(self, store: ConfigurationStore) -> None:
        """The recognized set is wood, white, black and gray."""
        assert store.materials == frozenset({"wood", "white", "black", "gray"})

    def test_default_material_must_be_known(self) -> None:
        """A default material outside the set is rejected."""
        with pytest.raises(UnknownMaterial):
            ConfigurationStore(materials={"oak"}, default_material="wood")


class TestGlobalDimensions:
    """Tests for global dimension setters."""

    def test_set_width_changes_module_count(self, store: ConfigurationStore) -> None:
        store.set_global_width(150)
        assert store.dimensions.width == 150
        assert store.module_count == 3

    @pytest.mark.parametrize("width", [0, -10, math.nan, math.inf, "wide", True])
    def test_invalid_width_rejected(self, store: ConfigurationStore, width: object) -> None:
        """Width must be a positive finite number."""
        before = _snapshot(store)
        with pytest.raises(InvalidDimension):
            store.set_global_width(width)  # type: ignore[arg-type]
        assert _snapshot(store) == before

    def test_numeric_string_width_is_accepted(self, store: ConfigurationStore) -> None:
        """Numeric strings coerce to float."""
        store.set_global_width("120")  # type: ignore[arg-type]
        assert store.dimensions.width == 120.0

    def test_height_bounds_inclusive(self, store: ConfigurationStore) -> None:
        store.set_global_height(240)
        assert store.dimensions.height == 240
        store.set_global_height(60)
        assert store.dimensions.height == 60

    @pytest.mark.parametrize("height", [59, 241, math.nan])
    def test_height_out_of_bounds_rejected(self, store: ConfigurationStore, height: float) -> None:
        before = _snapshot(store)
        with pytest.raises(InvalidDimension) as exc_info:
            store.set_global_height(height)
        assert exc_info.value.field == "height"
        assert _snapshot(store) == before

    def test_height_error_reports_bounds(self, store: ConfigurationStore) -> None:
        with pytest.raises(InvalidDimension) as exc_info:
            store.set_global_height(300)
        assert exc_info.value.minimum == 60
        assert exc_info.value.maximum == 240
        assert "between 60 and 240" in str(exc_info.value)

    @pytest.mark.parametrize("depth", [59, 121])
    def test_depth_out_of_bounds_rejected(self, store: ConfigurationStore, depth: float) -> None:
        with pytest.raises(InvalidDimension):
            store.set_global_depth(depth)
        assert store.dimensions.depth == 60

    def test_depth_within_bounds(self, store: ConfigurationStore) -> None:
        store.set_global_depth(120)
        assert store.dimensions.depth == 120


class TestMaterial:
    """Tests for set_material."""

    @pytest.mark.parametrize("name", ["wood", "white", "black", "gray"])
    def test_known_materials_accepted(self, store: ConfigurationStore, name: str) -> None:
        store.set_material(name)
        assert store.material == name

    @pytest.mark.parametrize("name", ["oak", "", "Wood", None])
    def test_unknown_material_rejected(self, store: ConfigurationStore, name: object) -> None:
        with pytest.raises(UnknownMaterial) as exc_info:
            store.set_material(name)  # type: ignore[arg-type]
        assert store.material == "wood"
        assert exc_info.value.available == ["black", "gray", "white", "wood"]


class TestModuleOverride:
    """Tests for per-module overrides."""

    def test_override_creates_record_with_only_that_field(self, store: ConfigurationStore) -> None:
        """Unset fields keep following the globals."""
        store.set_global_width(150)
        record = store.set_module_override(1, OverrideField.HEIGHT, 180)
        assert record == ModuleOverride(height=180, depth=None)
        assert store.override_for(1) == record
        assert store.override_for(0) is None

    def test_field_accepts_string_names(self, store: ConfigurationStore) -> None:
        store.set_module_override(0, "depth", 100)
        assert store.override_for(0) == ModuleOverride(depth=100)

    def test_second_field_merges_into_record(self, store: ConfigurationStore) -> None:
        store.set_module_override(0, "height", 180)
        store.set_module_override(0, "depth", 90)
        assert store.override_for(0) == ModuleOverride(height=180, depth=90)

    @pytest.mark.parametrize("field", ["width", "material", "color"])
    def test_unsupported_field_rejected(self, store: ConfigurationStore, field: str) -> None:
        with pytest.raises(UnsupportedOverrideField):
            store.set_module_override(0, field, 100)
        assert store.overrides == {}

    @pytest.mark.parametrize("index", [-1, 3, 10])
    def test_index_out_of_range(self, store: ConfigurationStore, index: int) -> None:
        store.set_global_width(150)
        with pytest.raises(IndexOutOfRange) as exc_info:
            store.set_module_override(index, "height", 180)
        assert exc_info.value.module_count == 3
        assert store.overrides == {}

    def test_non_integer_index_rejected(self, store: ConfigurationStore) -> None:
        with pytest.raises(IndexOutOfRange):
            store.set_module_override(True, "height", 180)  # type: ignore[arg-type]
        with pytest.raises(IndexOutOfRange):
            store.set_module_override("0", "height", 180)  # type: ignore[arg-type]

    def test_override_value_out_of_bounds(self, store: ConfigurationStore) -> None:
        with pytest.raises(InvalidDimension):
            store.set_module_override(0, "height", 250)
        with pytest.raises(InvalidDimension):
            store.set_module_override(0, "depth", 50)
        assert store.overrides == {}

    def test_index_checked_before_value(self, store: ConfigurationStore) -> None:
        """A bad index is reported even when the value is also bad."""
        with pytest.raises(IndexOutOfRange):
            store.set_module_override(5, "height", 1000)

    def test_field_checked_before_index(self, store: ConfigurationStore) -> None:
        with pytest.raises(UnsupportedOverrideField):
            store.set_module_override(5, "width", 120)

    def test_overrides_retained_when_width_shrinks(self, store: ConfigurationStore) -> None:
        """Orphaned overrides stay in the store."""
        store.set_global_width(180)
        store.set_module_override(2, "height", 200)
        store.set_global_width(60)
        assert store.module_count == 1
        assert store.override_for(2) == ModuleOverride(height=200)

    def test_overrides_copy_is_detached(self, store: ConfigurationStore) -> None:
        store.set_module_override(0, "height", 100)
        copy = store.overrides
        copy.clear()
        assert store.override_for(0) is not None


class TestReset:
    """Tests for reset."""

    def test_reset_restores_defaults(self, store: ConfigurationStore) -> None:
        store.set_global_width(240)
        store.set_global_height(200)
        store.set_global_depth(100)
        store.set_material("black")
        store.set_module_override(3, "height", 180)

        store.reset()

        assert store.dimensions == GlobalDimensions(width=60, height=60, depth=60)
        assert store.material == "wood"
        assert store.overrides == {}


class TestModuleOverrideRecord:
    """Tests for the ModuleOverride value."""

    def test_resolve_falls_back_to_globals(self) -> None:
        dims = GlobalDimensions(width=120, height=100, depth=80)
        assert ModuleOverride().resolve(dims) == (100, 80)
        assert ModuleOverride(height=180).resolve(dims) == (180, 80)
        assert ModuleOverride(depth=110).resolve(dims) == (100, 110)

    def test_is_set(self) -> None:
        record = ModuleOverride(height=180)
        assert record.is_set(OverrideField.HEIGHT)
        assert not record.is_set(OverrideField.DEPTH)
