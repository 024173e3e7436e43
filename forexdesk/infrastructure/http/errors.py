"""Errors raised by the trading backend HTTP client."""

from typing import Any, Optional

DEFAULT_ERROR_MESSAGE = "API request failed"
ADMIN_ERROR_MESSAGE = "Admin API request failed"


class ApiRequestError(Exception):
    """Raised when the backend answers with a non-success HTTP status.

    Attributes:
        message: The backend's ``message`` field, or a generic fallback.
        status_code: HTTP status of the response.
        payload: Decoded JSON body, or None when it was not JSON.
    """

    def __init__(
        self, message: str, status_code: int, payload: Optional[Any] = None
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.payload = payload
        super().__init__(f"{message} (HTTP {status_code})")
