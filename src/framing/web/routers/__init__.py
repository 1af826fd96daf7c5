"""API routers for the REST API."""

from framing.web.routers.catalog import router as catalog_router
from framing.web.routers.compose import router as compose_router
from framing.web.routers.export import router as export_router
from framing.web.routers.validate import router as validate_router

__all__ = [
    "catalog_router",
    "compose_router",
    "export_router",
    "validate_router",
]
