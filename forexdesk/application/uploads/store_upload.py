"""
Use case: Store an uploaded file.

Validates the file against the allow-list, names it, and
delegates the write to the media storage port.
"""

import logging
from typing import Callable

from forexdesk.domain.errors import UnsupportedFileFormatError
from forexdesk.domain.uploads.entities import IncomingFile, StoredFile, UploadParams
from forexdesk.domain.uploads.naming import build_public_id, file_extension
from forexdesk.domain.uploads.ports import MediaStoragePort

logger = logging.getLogger(__name__)


class StoreUploadUseCase:
    """Application service for storing a single uploaded file.

    Args:
        storage: Media storage port.
        params: Destination folder, allow-list and resource type.
        name_factory: Builds the public id from the original file name.
    """

    def __init__(
        self,
        storage: MediaStoragePort,
        params: UploadParams,
        name_factory: Callable[[str], str] = build_public_id,
    ) -> None:
        self._storage = storage
        self._params = params
        self._name_factory = name_factory

    @property
    def params(self) -> UploadParams:
        return self._params

    def check_format(self, file: IncomingFile) -> None:
        """Reject files whose extension is outside the allow-list.

        Files without an extension are passed through; the storage
        applies the same allow-list to the detected format.

        Raises:
            UnsupportedFileFormatError: If the extension is not allowed.
        """
        extension = file_extension(file.original_name)
        if extension and not self._params.allows(extension):
            raise UnsupportedFileFormatError(
                file.original_name, self._params.allowed_formats
            )

    def execute(self, file: IncomingFile) -> StoredFile:
        """Validate, name and store one file.

        Args:
            file: The file received from the client.

        Returns:
            The StoredFile describing the remote object.
        """
        self.check_format(file)
        public_id = self._name_factory(file.original_name)
        stored = self._storage.upload(file, public_id, self._params)
        logger.info(
            "Stored upload field=%s public_id=%s bytes=%d",
            file.field_name,
            stored.public_id,
            stored.bytes,
        )
        return stored
