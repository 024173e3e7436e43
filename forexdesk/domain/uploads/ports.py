"""
Port interfaces (ABCs) for the uploads bounded context.

Infrastructure adapters implement these interfaces.
The domain layer never depends on a concrete storage SDK.
"""

from abc import ABC, abstractmethod

from forexdesk.domain.uploads.entities import IncomingFile, StoredFile, UploadParams


class MediaStoragePort(ABC):
    """Port for a remote media storage service."""

    @abstractmethod
    def upload(
        self, file: IncomingFile, public_id: str, params: UploadParams
    ) -> StoredFile:
        """Store a file under ``public_id`` in ``params.folder``.

        Raises:
            StorageNotConfiguredError: If credentials are missing.
            StorageUploadError: If the storage rejects the upload.
        """
        raise NotImplementedError

    @abstractmethod
    def ping(self) -> dict:
        """Check connectivity and credentials against the storage.

        Raises:
            StorageNotConfiguredError: If credentials are missing.
            StorageUnavailableError: If the storage cannot be reached.
        """
        raise NotImplementedError
