"""Unit tests for configuration loading and the configuration adapter."""

import json
from pathlib import Path

import pytest

from wardrobe.application import WardrobeConfigurator
from wardrobe.application.config import (
    ConfigError,
    ConfiguratorSettings,
    apply_configuration,
    load_config,
    load_config_from_dict,
    settings_to_finishes,
    settings_to_store,
)
from wardrobe.domain import IndexOutOfRange, InvalidDimension
from wardrobe.infrastructure import InMemoryRenderSurface


class TestLoadConfig:
    """Tests for load_config."""

    def test_valid_full(self, fixtures_path: Path) -> None:
        config = load_config(fixtures_path / "valid_full.json")
        assert config.dimensions.width == 150
        assert config.material == "white"
        assert [m.index for m in config.modules] == [1, 2]

    def test_file_not_found(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / "missing.json")
        assert exc_info.value.error_type == "file_not_found"
        assert exc_info.value.path == tmp_path / "missing.json"

    def test_invalid_json(self, fixtures_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(fixtures_path / "invalid_json.json")
        error = exc_info.value
        assert error.error_type == "json_parse"
        assert error.details[0]["line"] > 1
        assert "column" in error.details[0]

    def test_unknown_field(self, fixtures_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(fixtures_path / "unknown_field.json")
        error = exc_info.value
        assert error.error_type == "validation"
        assert any(d["path"] == "dimensions.colour" for d in error.details)

    def test_top_level_must_be_object(self, tmp_path: Path) -> None:
        path = tmp_path / "list.json"
        path.write_text(json.dumps([1, 2, 3]))
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        assert exc_info.value.error_type == "validation"


class TestLoadConfigFromDict:
    """Tests for load_config_from_dict."""

    def test_module_path_formatting(self) -> None:
        """Errors inside lists are reported with bracketed indices."""
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(
                {"schema_version": "1.0", "modules": [{"index": 0, "height": -5}]}
            )
        paths = [d["path"] for d in exc_info.value.details]
        assert "modules[0].height" in paths
        assert "modules[0].height" in str(exc_info.value)

    def test_missing_version(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict({})
        assert exc_info.value.details[0]["path"] == "schema_version"


class TestSettingsAdapter:
    """Tests for settings_to_store and settings_to_finishes."""

    def test_store_follows_settings(self) -> None:
        settings = ConfiguratorSettings(
            base_module_width=50,
            height_bounds={"min": 60, "max": 200},
            materials={"oak": {"color": 0xC8A165}},
            default_material="oak",
        )
        store = settings_to_store(settings)
        assert store.base_width == 50
        assert store.height_bounds.maximum == 200
        assert store.material == "oak"
        assert store.materials == frozenset({"oak"})

    def test_finishes(self) -> None:
        finishes = settings_to_finishes(ConfiguratorSettings())
        assert finishes["wood"].color == 0x8B4513
        assert finishes["white"].name == "white"


class TestApplyConfiguration:
    """Tests for apply_configuration."""

    def test_applies_dimensions_material_and_overrides(self, fixtures_path: Path) -> None:
        config = load_config(fixtures_path / "valid_full.json")
        configurator = WardrobeConfigurator(surface=InMemoryRenderSurface())

        apply_configuration(configurator, config)

        layout = configurator.layout
        assert len(layout) == 3
        assert [m.height for m in layout] == [120, 180, 120]
        assert [m.depth for m in layout] == [60, 60, 100]
        assert {m.material for m in layout} == {"white"}

    def test_override_out_of_range(self, fixtures_path: Path) -> None:
        config = load_config(fixtures_path / "override_out_of_range.json")
        configurator = WardrobeConfigurator(surface=InMemoryRenderSurface())
        with pytest.raises(IndexOutOfRange):
            apply_configuration(configurator, config)

    def test_height_out_of_bounds(self, fixtures_path: Path) -> None:
        config = load_config(fixtures_path / "height_out_of_bounds.json")
        configurator = WardrobeConfigurator(surface=InMemoryRenderSurface())
        with pytest.raises(InvalidDimension):
            apply_configuration(configurator, config)
