"""Unit tests for the configuration schema models.

These tests verify:
- ConfiguratorSettings defaults and cross-field validation
- Material finish colors as integers or hex strings
- WardrobeConfiguration version, module and material checks
- Strict rejection of unknown keys
"""

import pytest
from pydantic import ValidationError

from wardrobe.application.config import (
    BoundsConfig,
    ConfiguratorSettings,
    MaterialFinishConfig,
    ModuleOverrideConfig,
    WardrobeConfiguration,
)
from wardrobe.domain import InvalidDimension


class TestConfiguratorSettings:
    """Tests for ConfiguratorSettings."""

    def test_defaults(self) -> None:
        settings = ConfiguratorSettings()
        assert settings.base_module_width == 60
        assert (settings.height_bounds.min, settings.height_bounds.max) == (60, 240)
        assert (settings.depth_bounds.min, settings.depth_bounds.max) == (60, 120)
        assert settings.default_material == "wood"
        assert settings.slider_step == 10
        assert set(settings.materials) == {"wood", "white", "black", "gray"}

    def test_default_finishes(self) -> None:
        materials = ConfiguratorSettings().materials
        assert materials["wood"].color == 0x8B4513
        assert materials["wood"].roughness == 0.8
        assert materials["white"].roughness == 0.3
        assert materials["gray"].color == 0x808080

    def test_default_height_outside_bounds(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            ConfiguratorSettings(default_dimensions={"height": 300})
        assert "height_bounds" in str(exc_info.value)

    def test_default_material_must_exist(self) -> None:
        with pytest.raises(ValidationError):
            ConfiguratorSettings(default_material="oak")

    def test_empty_materials_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ConfiguratorSettings(materials={})

    def test_unknown_key_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ConfiguratorSettings(module_width=50)

    def test_default_width_within_max_width(self) -> None:
        assert ConfiguratorSettings().max_width == 6000
        with pytest.raises(ValidationError) as exc_info:
            ConfiguratorSettings(max_width=100, default_dimensions={"width": 120})
        assert "max_width" in str(exc_info.value)

    def test_check_width(self) -> None:
        settings = ConfiguratorSettings(max_width=600)
        settings.check_width(600)
        with pytest.raises(InvalidDimension) as exc_info:
            settings.check_width(601)
        assert exc_info.value.maximum == 600
        assert "at most 600 cm" in str(exc_info.value)


class TestBoundsConfig:
    """Tests for BoundsConfig."""

    def test_inverted_bounds_rejected(self) -> None:
        with pytest.raises(ValidationError):
            BoundsConfig(min=100, max=60)

    def test_equal_bounds_allowed(self) -> None:
        assert BoundsConfig(min=80, max=80).max == 80


class TestMaterialFinishConfig:
    """Tests for MaterialFinishConfig."""

    @pytest.mark.parametrize("color", ["#8b4513", "8B4513", " #8B4513 "])
    def test_hex_string_color(self, color: str) -> None:
        assert MaterialFinishConfig(color=color).color == 0x8B4513

    def test_invalid_hex_rejected(self) -> None:
        with pytest.raises(ValidationError):
            MaterialFinishConfig(color="#brown")

    def test_color_out_of_range_rejected(self) -> None:
        with pytest.raises(ValidationError):
            MaterialFinishConfig(color=0x1000000)

    def test_roughness_range(self) -> None:
        with pytest.raises(ValidationError):
            MaterialFinishConfig(color=0, roughness=1.5)


class TestModuleOverrideConfig:
    """Tests for ModuleOverrideConfig."""

    def test_requires_a_field(self) -> None:
        with pytest.raises(ValidationError):
            ModuleOverrideConfig(index=0)

    def test_negative_index_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ModuleOverrideConfig(index=-1, height=100)

    def test_width_not_accepted(self) -> None:
        with pytest.raises(ValidationError):
            ModuleOverrideConfig(index=0, width=120)


class TestWardrobeConfiguration:
    """Tests for WardrobeConfiguration."""

    def test_minimal(self) -> None:
        config = WardrobeConfiguration(schema_version="1.0")
        assert config.dimensions.width == 60
        assert config.material is None
        assert config.modules == []

    def test_newer_minor_version_accepted(self) -> None:
        assert WardrobeConfiguration(schema_version="1.3").schema_version == "1.3"

    @pytest.mark.parametrize("version", ["2.0", "0.9", "one", "1"])
    def test_unsupported_version_rejected(self, version: str) -> None:
        with pytest.raises(ValidationError):
            WardrobeConfiguration(schema_version=version)

    def test_duplicate_module_index_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            WardrobeConfiguration(
                schema_version="1.0",
                modules=[{"index": 1, "height": 100}, {"index": 1, "depth": 80}],
            )
        assert "duplicate module index" in str(exc_info.value)

    def test_width_checked_against_max_width(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            WardrobeConfiguration(schema_version="1.0", dimensions={"width": 1e9})
        assert "max_width" in str(exc_info.value)

        config = WardrobeConfiguration(
            schema_version="1.0",
            settings={"max_width": 20000},
            dimensions={"width": 12000},
        )
        assert config.dimensions.width == 12000

    def test_material_checked_against_settings(self) -> None:
        with pytest.raises(ValidationError):
            WardrobeConfiguration(schema_version="1.0", material="oak")

        config = WardrobeConfiguration(
            schema_version="1.0",
            settings={
                "materials": {"oak": {"color": "#c8a165"}},
                "default_material": "oak",
            },
            material="oak",
        )
        assert config.material == "oak"
