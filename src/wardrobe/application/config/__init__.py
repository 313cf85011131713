"""Configuration loading, schemas and adapters for the wardrobe configurator.

Example:
    >>> from pathlib import Path
    >>> from wardrobe.application.config import load_config
    >>> config = load_config(Path("wardrobe.json"))
    >>> config.dimensions.width
    150.0
"""

from .adapter import apply_configuration, settings_to_finishes, settings_to_store
from .loader import ConfigError, load_config, load_config_from_dict
from .schema import (
    DEFAULT_MAX_WIDTH,
    SUPPORTED_VERSIONS,
    BoundsConfig,
    ConfiguratorSettings,
    DimensionsConfig,
    MaterialFinishConfig,
    ModuleOverrideConfig,
    WardrobeConfiguration,
)

__all__ = [
    "DEFAULT_MAX_WIDTH",
    "SUPPORTED_VERSIONS",
    "BoundsConfig",
    "ConfigError",
    "ConfiguratorSettings",
    "DimensionsConfig",
    "MaterialFinishConfig",
    "ModuleOverrideConfig",
    "WardrobeConfiguration",
    "apply_configuration",
    "load_config",
    "load_config_from_dict",
    "settings_to_finishes",
    "settings_to_store",
]
