"""
Adapter: Cloudinary media storage.

Implements MediaStoragePort with the Cloudinary SDK.
Credentials are passed explicitly on every call instead of through
``cloudinary.config()``, so several clients can coexist and nothing
depends on module import order.
"""

import io
import logging
from dataclasses import dataclass
from typing import Any, Optional

import cloudinary.api
import cloudinary.uploader
from cloudinary.exceptions import Error as CloudinaryError

from forexdesk.core.config import Settings
from forexdesk.domain.errors import (
    StorageNotConfiguredError,
    StorageUnavailableError,
    StorageUploadError,
)
from forexdesk.domain.uploads.entities import IncomingFile, StoredFile, UploadParams
from forexdesk.domain.uploads.ports import MediaStoragePort

logger = logging.getLogger(__name__)

CREDENTIAL_ENV_VARS = {
    "cloud_name": "CLOUDINARY_CLOUD_NAME",
    "api_key": "CLOUDINARY_API_KEY",
    "api_secret": "CLOUDINARY_API_SECRET",
}


@dataclass(frozen=True)
class CloudinaryCredentials:
    """Cloudinary account credentials."""

    cloud_name: Optional[str] = None
    api_key: Optional[str] = None
    api_secret: Optional[str] = None

    def __repr__(self) -> str:
        return f"CloudinaryCredentials(cloud_name={self.cloud_name!r})"

    @classmethod
    def from_settings(cls, settings: Settings) -> "CloudinaryCredentials":
        return cls(
            cloud_name=settings.cloudinary_cloud_name,
            api_key=settings.cloudinary_api_key,
            api_secret=settings.cloudinary_api_secret,
        )

    def missing(self) -> list[str]:
        """Return the environment variable names of absent credentials."""
        return [
            env_var
            for attr, env_var in CREDENTIAL_ENV_VARS.items()
            if not getattr(self, attr)
        ]

    @property
    def configured(self) -> bool:
        return not self.missing()

    def as_options(self) -> dict[str, str]:
        """Return the credentials as per-call SDK options."""
        return {
            "cloud_name": self.cloud_name or "",
            "api_key": self.api_key or "",
            "api_secret": self.api_secret or "",
        }


class CloudinaryStorageAdapter(MediaStoragePort):
    """Concrete adapter storing media on Cloudinary.

    Args:
        credentials: Account credentials, injected by the composition root.
        uploader: Module or object exposing ``upload(file, **options)``.
        api: Module or object exposing ``ping(**options)``.
    """

    def __init__(
        self,
        credentials: CloudinaryCredentials,
        uploader: Any = cloudinary.uploader,
        api: Any = cloudinary.api,
    ) -> None:
        self._credentials = credentials
        self._uploader = uploader
        self._api = api

    @property
    def credentials(self) -> CloudinaryCredentials:
        return self._credentials

    def _require_credentials(self) -> dict[str, str]:
        missing = self._credentials.missing()
        if missing:
            raise StorageNotConfiguredError(missing)
        return self._credentials.as_options()

    def upload(
        self, file: IncomingFile, public_id: str, params: UploadParams
    ) -> StoredFile:
        """Upload a file to ``params.folder`` under ``public_id``."""
        options = self._require_credentials()
        stream = io.BytesIO(file.data)
        stream.name = file.original_name

        try:
            response = self._uploader.upload(
                stream,
                folder=params.folder,
                public_id=public_id,
                allowed_formats=list(params.allowed_formats),
                resource_type=params.resource_type,
                **options,
            )
        except CloudinaryError as exc:
            logger.warning("Cloudinary rejected %s: %s", public_id, exc)
            raise StorageUploadError(str(exc), public_id=public_id) from exc

        return StoredFile(
            field_name=file.field_name,
            original_name=file.original_name,
            public_id=response.get("public_id", f"{params.folder}/{public_id}"),
            url=response.get("secure_url") or response.get("url", ""),
            format=response.get("format"),
            resource_type=response.get("resource_type"),
            bytes=int(response.get("bytes", file.size)),
        )

    def ping(self) -> dict:
        """Ping the Cloudinary Admin API with the injected credentials."""
        options = self._require_credentials()
        try:
            return dict(self._api.ping(**options))
        except CloudinaryError as exc:
            logger.warning("Cloudinary ping failed: %s", exc)
            raise StorageUnavailableError(str(exc)) from exc
