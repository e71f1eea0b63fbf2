"""
Health check router.

Provides a simple health endpoint for liveness/readiness probes.
Returns application status, version and the storage backend in use.
"""

from fastapi import APIRouter, Depends

from app.core.config import Settings
from app.interfaces.employees.dependencies import get_settings
from app.interfaces.employees.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
)
def health_check(settings: Settings = Depends(get_settings)) -> HealthResponse:
    """Return current application health status."""
    return HealthResponse(
        status="ok", version=settings.version, storage=settings.storage_backend
    )
