"""API routers for the REST API."""

from wardrobe.web.routers.configuration import router as configuration_router
from wardrobe.web.routers.materials import router as materials_router

__all__ = [
    "configuration_router",
    "materials_router",
]
