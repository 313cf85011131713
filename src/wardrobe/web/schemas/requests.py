"""Pydantic request schemas for the REST API.

Range checks are left to the configurator so that HTTP clients see the same
errors as every other caller.
"""

from pydantic import BaseModel, Field


class DimensionRequest(BaseModel):
    """Request for setting one global dimension."""

    value: float = Field(..., description="New value in cm")


class MaterialRequest(BaseModel):
    """Request for switching the material of all modules."""

    name: str = Field(..., description="Material name, e.g. 'wood'")


class ModuleOverrideRequest(BaseModel):
    """Request for overriding one dimension of a single module."""

    field: str = Field(..., description="Overridable field: 'height' or 'depth'")
    value: float = Field(..., description="New value in cm")
