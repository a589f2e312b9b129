"""API layer module.

Contains FastAPI routers, request/response schemas and middleware.
"""

from catalogcore.api.catalog import router as catalog_router
from catalogcore.api.health import router as health_router
from catalogcore.api.variants import router as variants_router

__all__ = [
    "catalog_router",
    "health_router",
    "variants_router",
]
