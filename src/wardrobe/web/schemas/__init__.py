"""Pydantic schemas for the REST API."""

from wardrobe.web.schemas.requests import (
    DimensionRequest,
    MaterialRequest,
    ModuleOverrideRequest,
)
from wardrobe.web.schemas.responses import (
    ConfigurationSchema,
    DimensionsSchema,
    ErrorResponseSchema,
    MaterialListSchema,
    MaterialSchema,
    ModuleSchema,
    MutationResponseSchema,
    SliderRangeSchema,
    SummarySchema,
)

__all__ = [
    # Requests
    "DimensionRequest",
    "MaterialRequest",
    "ModuleOverrideRequest",
    # Responses
    "ConfigurationSchema",
    "DimensionsSchema",
    "ErrorResponseSchema",
    "MaterialListSchema",
    "MaterialSchema",
    "ModuleSchema",
    "MutationResponseSchema",
    "SliderRangeSchema",
    "SummarySchema",
]
