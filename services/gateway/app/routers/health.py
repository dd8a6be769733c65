# =============================================================================
# Health Check Router
# =============================================================================
# Endpoints for container health checks and readiness probes.
# =============================================================================

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from app.config import Settings, get_settings

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


class ReadyResponse(BaseModel):
    """Readiness check response model."""

    status: str
    services: dict[str, str]


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the service is running.
    """
    from app import __version__

    return HealthResponse(status="healthy", version=__version__)


@router.get("/ready", response_model=ReadyResponse)
async def readiness_check(settings: Settings = Depends(get_settings)) -> ReadyResponse:
    """
    Readiness check endpoint.

    Reports whether the archive configuration is present. The stores
    themselves are not contacted; storage configuration is enforced per
    request on the capture path.
    """
    storage_state = "configured" if settings.storage.is_configured else "missing"

    return ReadyResponse(
        status="ready" if settings.storage.is_configured else "degraded",
        services={
            "object_store": storage_state,
            "mongodb": "unchecked",
        },
    )
