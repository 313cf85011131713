"""Error handlers for the REST API."""

import math

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from wardrobe.application.config import ConfigError
from wardrobe.domain import (
    ConfiguratorError,
    IndexOutOfRange,
    InvalidDimension,
    InvariantViolation,
    UnknownMaterial,
)


def _json_value(value: object) -> object:
    # NaN and infinity are not valid JSON
    if isinstance(value, (int, float)) and math.isfinite(value):
        return value
    return repr(value)


def _error_details(exc: ConfiguratorError) -> dict | None:
    if isinstance(exc, InvalidDimension):
        return {
            "field": exc.field,
            "value": _json_value(exc.value),
            "minimum": exc.minimum,
            "maximum": exc.maximum,
        }
    if isinstance(exc, UnknownMaterial):
        return {"name": exc.name, "available": list(exc.available)}
    if isinstance(exc, IndexOutOfRange):
        return {"index": exc.index, "module_count": exc.module_count}
    return None


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(ConfiguratorError)
    async def configurator_error_handler(
        request: Request, exc: ConfiguratorError
    ) -> JSONResponse:
        if isinstance(exc, InvariantViolation):
            status_code = 500
        elif isinstance(exc, IndexOutOfRange):
            status_code = 404
        else:
            status_code = 422
        return JSONResponse(
            status_code=status_code,
            content={
                "error": str(exc),
                "error_type": exc.error_type,
                "details": _error_details(exc),
            },
        )

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": exc.details or None,
            },
        )
