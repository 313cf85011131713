"""FastAPI REST API for the wardrobe configurator.

This module exposes one shared configurator session over HTTP: read the
current configuration, change global dimensions, material and per-module
overrides, and reset.

Usage:
    uvicorn wardrobe.web:app --reload
"""

from wardrobe.web.app import app, create_app

__all__ = ["app", "create_app"]
