"""
Domain-specific errors for ForexDesk.

All errors raised from the domain and application layers are defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""

from typing import Iterable, Optional


class ForexDeskError(Exception):
    """Base error for all ForexDesk domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class UnsupportedFileFormatError(ForexDeskError):
    """Raised when an uploaded file's extension is not in the allow-list."""

    def __init__(self, filename: str, allowed: Iterable[str]) -> None:
        self.filename = filename
        self.allowed = tuple(allowed)
        super().__init__(
            f"Unsupported file format: {filename}. "
            f"Allowed formats: {', '.join(self.allowed)}"
        )


class UnexpectedFileFieldError(ForexDeskError):
    """Raised when a file arrives on a form field that was not declared."""

    def __init__(self, field_name: str) -> None:
        super().__init__(f"Unexpected file field: {field_name}")
        self.field_name = field_name


class UploadLimitExceededError(ForexDeskError):
    """Raised when a form field carries more files than allowed."""

    def __init__(self, field_name: str, max_count: int) -> None:
        super().__init__(
            f"Too many files for field {field_name}: at most {max_count} allowed"
        )
        self.field_name = field_name
        self.max_count = max_count


class StorageNotConfiguredError(ForexDeskError):
    """Raised when the media storage is used without its credentials."""

    def __init__(self, missing: Iterable[str]) -> None:
        self.missing = tuple(missing)
        super().__init__(
            f"Media storage is not configured. Missing: {', '.join(self.missing)}"
        )


class StorageUploadError(ForexDeskError):
    """Raised when the remote media storage rejects or fails an upload."""

    def __init__(self, reason: str, public_id: Optional[str] = None) -> None:
        super().__init__(f"Media upload failed: {reason}")
        self.reason = reason
        self.public_id = public_id


class InvalidOrderError(ForexDeskError):
    """Raised when an order draft fails client-side validation."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Invalid order: {reason}")
        self.reason = reason


class StorageUnavailableError(ForexDeskError):
    """Raised when the remote media storage cannot be reached."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Media storage unavailable: {reason}")
        self.reason = reason
