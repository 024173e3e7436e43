"""
Health check router.

Provides liveness and media-storage readiness endpoints.
No business logic. Returns application status and version.
"""

from fastapi import APIRouter, Depends

from forexdesk.core.config import settings
from forexdesk.domain.uploads.ports import MediaStoragePort
from forexdesk.infrastructure.uploads.cloudinary_storage import CloudinaryStorageAdapter
from forexdesk.interfaces.dependencies import get_media_storage
from forexdesk.interfaces.schemas import (
    ErrorResponse,
    HealthResponse,
    StorageHealthResponse,
)

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application health status and version.",
)
def health_check() -> HealthResponse:
    """Return current application health status."""
    return HealthResponse(status="ok", version=settings.version)


@router.get(
    "/health/storage",
    response_model=StorageHealthResponse,
    summary="Media storage check",
    description="Pings the media storage with the configured credentials.",
    responses={503: {"model": ErrorResponse}},
)
def storage_health(
    storage: MediaStoragePort = Depends(get_media_storage),
) -> StorageHealthResponse:
    """Ping the media storage; errors are rendered by the shared handlers."""
    storage.ping()
    cloud_name = None
    if isinstance(storage, CloudinaryStorageAdapter):
        cloud_name = storage.credentials.cloud_name
    return StorageHealthResponse(status="ok", cloud_name=cloud_name)
