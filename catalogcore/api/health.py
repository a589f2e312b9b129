"""Health check endpoints.

Provides endpoints for monitoring service health and readiness.
"""

from fastapi import APIRouter
from pydantic import BaseModel

from catalogcore.catalog.service import get_catalog_service

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str
    service: str
    version: str


class ReadinessResponse(BaseModel):
    status: str
    categories: int
    variant_templates: int


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Check service health.

    Returns:
        Health status with service name and version.
    """
    from catalogcore.infrastructure.config import settings

    return HealthResponse(
        status="healthy",
        service="catalogcore",
        version=settings.api_version,
    )


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check() -> ReadinessResponse:
    """Check if the catalog snapshot is loaded.

    Returns:
        Readiness status with catalog counts.
    """
    registry = get_catalog_service().registry
    return ReadinessResponse(
        status="ready",
        categories=len(registry.list_categories()),
        variant_templates=len(registry.list_variant_templates()),
    )
