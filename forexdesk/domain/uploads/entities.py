"""
Domain entities for the uploads bounded context.

Entities are plain dataclasses with no framework imports and no IO.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class UploadParams:
    """Destination settings applied to every upload.

    Attributes:
        folder: Remote folder name.
        allowed_formats: Lower-case file extensions accepted by the storage.
        resource_type: Storage resource type; "auto" lets the storage detect it.
    """

    folder: str
    allowed_formats: tuple[str, ...]
    resource_type: str = "auto"

    def allows(self, extension: str) -> bool:
        return extension.lower() in self.allowed_formats


@dataclass(frozen=True)
class IncomingFile:
    """A file received from a client, before it is stored."""

    field_name: str
    original_name: str
    content_type: Optional[str]
    data: bytes = field(repr=False)

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class StoredFile:
    """A file after it has been written to remote storage.

    Attributes:
        field_name: Form field the file arrived on.
        original_name: Client-side file name.
        public_id: Remote object name, including the folder prefix.
        url: HTTPS delivery URL.
        format: Format detected by the storage.
        resource_type: Resource type detected by the storage.
        bytes: Stored size in bytes.
    """

    field_name: str
    original_name: str
    public_id: str
    url: str
    format: Optional[str] = None
    resource_type: Optional[str] = None
    bytes: int = 0


@dataclass(frozen=True)
class FieldSpec:
    """A form field accepted by ``UploadMiddleware.fields``."""

    name: str
    max_count: Optional[int] = None
