"""Pydantic models for configurator settings and configuration files.

``ConfiguratorSettings`` describes the configurable rules of the engine (base
module width, default dimensions, bound ranges and the material finish
table). ``WardrobeConfiguration`` is a configuration file: optional settings
plus the dimensions, material and module overrides to apply.
"""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from wardrobe.domain import InvalidDimension

# Supported schema versions for configuration files
# Version 1.0: Global dimensions, material and per-module overrides
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

# Widest wardrobe accepted from CLI options, HTTP requests and config files
DEFAULT_MAX_WIDTH = 6000.0


class BoundsConfig(BaseModel):
    """Inclusive range for a bounded dimension, in cm."""

    model_config = ConfigDict(extra="forbid")

    min: float = Field(..., gt=0)
    max: float = Field(..., gt=0)

    @model_validator(mode="after")
    def validate_order(self) -> "BoundsConfig":
        if self.max < self.min:
            raise ValueError(f"max ({self.max:g}) must not be below min ({self.min:g})")
        return self


class MaterialFinishConfig(BaseModel):
    """Surface finish for a material.

    Attributes:
        color: RGB color as an integer (e.g. 0x8B4513) or ``#rrggbb`` string.
        metalness: Metalness factor between 0 and 1.
        roughness: Roughness factor between 0 and 1.
    """

    model_config = ConfigDict(extra="forbid")

    color: int = Field(..., ge=0, le=0xFFFFFF)
    metalness: float = Field(default=0.0, ge=0.0, le=1.0)
    roughness: float = Field(default=0.5, ge=0.0, le=1.0)

    @field_validator("color", mode="before")
    @classmethod
    def parse_hex_color(cls, v: object) -> object:
        """Accept ``#rrggbb`` strings as well as integers."""
        if isinstance(v, str):
            text = v.strip().lstrip("#")
            try:
                return int(text, 16)
            except ValueError:
                raise ValueError(f"invalid hex color: {v!r}") from None
        return v


def _default_materials() -> dict[str, MaterialFinishConfig]:
    return {
        "wood": MaterialFinishConfig(color=0x8B4513, metalness=0.0, roughness=0.8),
        "white": MaterialFinishConfig(color=0xFFFFFF, metalness=0.0, roughness=0.3),
        "black": MaterialFinishConfig(color=0x000000, metalness=0.0, roughness=0.5),
        "gray": MaterialFinishConfig(color=0x808080, metalness=0.0, roughness=0.5),
    }


class DimensionsConfig(BaseModel):
    """Global dimensions in cm."""

    model_config = ConfigDict(extra="forbid")

    width: float = Field(default=60.0, gt=0)
    height: float = Field(default=60.0, gt=0)
    depth: float = Field(default=60.0, gt=0)


class ConfiguratorSettings(BaseModel):
    """Configurable rules of the configurator.

    Attributes:
        base_module_width: Fixed width of every module.
        max_width: Largest total width accepted from outside callers.
        default_dimensions: Dimensions restored by reset.
        height_bounds: Allowed range for global and per-module heights.
        depth_bounds: Allowed range for global and per-module depths.
        materials: Recognized materials and their finishes.
        default_material: Material restored by reset.
        slider_step: Step size offered to per-module controls.
    """

    model_config = ConfigDict(extra="forbid")

    base_module_width: float = Field(default=60.0, gt=0)
    max_width: float = Field(default=DEFAULT_MAX_WIDTH, gt=0)
    default_dimensions: DimensionsConfig = Field(default_factory=DimensionsConfig)
    height_bounds: BoundsConfig = Field(
        default_factory=lambda: BoundsConfig(min=60.0, max=240.0)
    )
    depth_bounds: BoundsConfig = Field(
        default_factory=lambda: BoundsConfig(min=60.0, max=120.0)
    )
    materials: dict[str, MaterialFinishConfig] = Field(
        default_factory=_default_materials
    )
    default_material: str = "wood"
    slider_step: float = Field(default=10.0, gt=0)

    @field_validator("materials")
    @classmethod
    def validate_materials_not_empty(
        cls, v: dict[str, MaterialFinishConfig]
    ) -> dict[str, MaterialFinishConfig]:
        if not v:
            raise ValueError("at least one material must be defined")
        return v

    @model_validator(mode="after")
    def validate_defaults(self) -> "ConfiguratorSettings":
        """Default dimensions and material must satisfy the settings' own rules."""
        defaults = self.default_dimensions
        if defaults.width > self.max_width:
            raise ValueError(
                f"default width {defaults.width:g} exceeds max_width {self.max_width:g}"
            )
        if not self.height_bounds.min <= defaults.height <= self.height_bounds.max:
            raise ValueError(
                f"default height {defaults.height:g} is outside height_bounds "
                f"{self.height_bounds.min:g}-{self.height_bounds.max:g}"
            )
        if not self.depth_bounds.min <= defaults.depth <= self.depth_bounds.max:
            raise ValueError(
                f"default depth {defaults.depth:g} is outside depth_bounds "
                f"{self.depth_bounds.min:g}-{self.depth_bounds.max:g}"
            )
        if self.default_material not in self.materials:
            raise ValueError(
                f"default_material {self.default_material!r} is not in materials"
            )
        return self

    def check_width(self, width: float) -> None:
        """Reject a total width above ``max_width``.

        Raises:
            InvalidDimension: If width exceeds ``max_width``.
        """
        if width > self.max_width:
            raise InvalidDimension("width", width, maximum=self.max_width)


class ModuleOverrideConfig(BaseModel):
    """Per-module override in a configuration file.

    Attributes:
        index: 0-based module index.
        height: Height override in cm, or omitted to follow the global height.
        depth: Depth override in cm, or omitted to follow the global depth.
    """

    model_config = ConfigDict(extra="forbid")

    index: int = Field(..., ge=0)
    height: float | None = Field(default=None, gt=0)
    depth: float | None = Field(default=None, gt=0)

    @model_validator(mode="after")
    def validate_has_field(self) -> "ModuleOverrideConfig":
        if self.height is None and self.depth is None:
            raise ValueError("module override must set height, depth, or both")
        return self


class WardrobeConfiguration(BaseModel):
    """Root model of a wardrobe configuration file."""

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    settings: ConfiguratorSettings = Field(default_factory=ConfiguratorSettings)
    dimensions: DimensionsConfig = Field(default_factory=DimensionsConfig)
    material: str | None = None
    modules: list[ModuleOverrideConfig] = Field(default_factory=list)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that the schema version is supported.

        Newer minor versions within a supported major version are accepted.
        """
        if v in SUPPORTED_VERSIONS:
            return v
        major = v.split(".")[0]
        if any(s.split(".")[0] == major for s in SUPPORTED_VERSIONS):
            return v
        raise ValueError(
            f"unsupported schema_version {v!r}; supported: "
            f"{', '.join(sorted(SUPPORTED_VERSIONS))}"
        )

    @field_validator("modules")
    @classmethod
    def validate_unique_indices(
        cls, v: list[ModuleOverrideConfig]
    ) -> list[ModuleOverrideConfig]:
        seen: set[int] = set()
        for entry in v:
            if entry.index in seen:
                raise ValueError(f"duplicate module index {entry.index}")
            seen.add(entry.index)
        return v

    @model_validator(mode="after")
    def validate_width_limit(self) -> "WardrobeConfiguration":
        if self.dimensions.width > self.settings.max_width:
            raise ValueError(
                f"width {self.dimensions.width:g} exceeds max_width "
                f"{self.settings.max_width:g}"
            )
        return self

    @model_validator(mode="after")
    def validate_material_known(self) -> "WardrobeConfiguration":
        if self.material is not None and self.material not in self.settings.materials:
            raise ValueError(
                f"material {self.material!r} is not one of: "
                f"{', '.join(sorted(self.settings.materials))}"
            )
        return self
