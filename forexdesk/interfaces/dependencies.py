"""
Dependency injection for ForexDesk.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection.
This is the composition root for uploads and notifications.
"""

from functools import lru_cache

from forexdesk.application.uploads.store_upload import StoreUploadUseCase
from forexdesk.core.config import settings
from forexdesk.domain.notifications.ports import EmailNotificationPort
from forexdesk.domain.uploads.entities import UploadParams
from forexdesk.domain.uploads.ports import MediaStoragePort
from forexdesk.infrastructure.notifications.mock_email_service import (
    get_mock_email_service,
)
from forexdesk.infrastructure.uploads.cloudinary_storage import (
    CloudinaryCredentials,
    CloudinaryStorageAdapter,
)
from forexdesk.interfaces.uploads.middleware import UploadMiddleware


def get_upload_params() -> UploadParams:
    """Build upload destination settings from application settings."""
    return UploadParams(
        folder=settings.upload_folder,
        allowed_formats=tuple(fmt.lower() for fmt in settings.upload_allowed_formats),
        resource_type=settings.upload_resource_type,
    )


@lru_cache(maxsize=1)
def get_media_storage() -> MediaStoragePort:
    """Build the Cloudinary adapter with explicitly injected credentials."""
    return CloudinaryStorageAdapter(CloudinaryCredentials.from_settings(settings))


def get_store_upload_use_case() -> StoreUploadUseCase:
    """Build StoreUploadUseCase with its infrastructure dependencies."""
    return StoreUploadUseCase(storage=get_media_storage(), params=get_upload_params())


def get_upload_middleware() -> UploadMiddleware:
    """Build the multipart upload handler used by upload routes."""
    return UploadMiddleware(get_store_upload_use_case())


def get_email_service() -> EmailNotificationPort:
    """Return the email port. Development builds use the mock service."""
    return get_mock_email_service()
