"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class DimensionsSchema(BaseModel):
    """Global dimensions in cm."""

    width: float = Field(..., description="Total width in cm")
    height: float = Field(..., description="Default module height in cm")
    depth: float = Field(..., description="Default module depth in cm")


class SummarySchema(BaseModel):
    """Derived summary of the current layout."""

    total_width: float = Field(..., description="Sum of module widths in cm")
    max_height: float = Field(..., description="Tallest module in cm")
    max_depth: float = Field(..., description="Deepest module in cm")
    module_count: int = Field(..., description="Number of modules")
    counter_label: str = Field(..., description="Display label, e.g. '3 Modules'")


class SliderRangeSchema(BaseModel):
    """Range offered to a per-module control."""

    min: float
    max: float
    step: float


class ModuleSchema(BaseModel):
    """One module of the layout with its effective values."""

    index: int = Field(..., description="0-based module index")
    number: int = Field(..., description="1-based module number")
    label: str = Field(..., description="Display label, e.g. 'Module 2'")
    x: float = Field(..., description="Position along the row in cm")
    width: float = Field(..., description="Module width in cm (fixed)")
    height: float = Field(..., description="Effective height in cm")
    depth: float = Field(..., description="Effective depth in cm")
    material: str = Field(..., description="Material name")
    height_overridden: bool = Field(default=False)
    depth_overridden: bool = Field(default=False)
    height_range: SliderRangeSchema
    depth_range: SliderRangeSchema


class ConfigurationSchema(BaseModel):
    """Full snapshot of the configuration and its layout."""

    dimensions: DimensionsSchema
    material: str
    summary: SummarySchema
    modules: list[ModuleSchema] = Field(default_factory=list)


class MutationResponseSchema(BaseModel):
    """Response for a configuration change."""

    operation: str = Field(..., description="Name of the applied mutation")
    instructions: list[str] = Field(
        default_factory=list,
        description="Render instructions issued, e.g. 'Dispose(1)', 'Create(1)'",
    )
    configuration: ConfigurationSchema


class MaterialSchema(BaseModel):
    """Material finish."""

    name: str
    color: str = Field(..., description="Hex color, e.g. '#8b4513'")
    metalness: float
    roughness: float


class MaterialListSchema(BaseModel):
    """Available materials."""

    materials: list[MaterialSchema] = Field(default_factory=list)
    default: str = Field(..., description="Material used after reset")


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: Any = Field(default=None, description="Additional error details")
