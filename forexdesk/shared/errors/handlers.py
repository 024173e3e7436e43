"""
Centralized error handlers for FastAPI.

Maps domain-specific errors to HTTP responses.
No stack traces or internal details are exposed to clients.
All error responses share the ``{"success": false, "message": ...}`` shape
that the frontend already consumes.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from forexdesk.domain.errors import (
    ForexDeskError,
    InvalidOrderError,
    StorageNotConfiguredError,
    StorageUnavailableError,
    StorageUploadError,
    UnexpectedFileFieldError,
    UnsupportedFileFormatError,
    UploadLimitExceededError,
)

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_404 = 404
HTTP_500 = 500
HTTP_502 = 502
HTTP_503 = 503

ROUTE_NOT_FOUND = "Route not found"
DEFAULT_NOT_FOUND_DETAIL = "Not Found"
INTERNAL_ERROR = "Internal server error"


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build a consistent JSON error response."""
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(UnsupportedFileFormatError)
    async def handle_unsupported_format(
        _request: Request, exc: UnsupportedFileFormatError
    ) -> JSONResponse:
        """Handle uploads outside the format allow-list."""
        logger.warning("Unsupported upload format: %s", exc.filename)
        return error_response(HTTP_400, exc.message)

    @app.exception_handler(UnexpectedFileFieldError)
    async def handle_unexpected_field(
        _request: Request, exc: UnexpectedFileFieldError
    ) -> JSONResponse:
        """Handle files sent on undeclared form fields."""
        logger.warning("Unexpected upload field: %s", exc.field_name)
        return error_response(HTTP_400, exc.message)

    @app.exception_handler(UploadLimitExceededError)
    async def handle_upload_limit(
        _request: Request, exc: UploadLimitExceededError
    ) -> JSONResponse:
        """Handle too many files on one field."""
        logger.warning("Upload limit exceeded on %s", exc.field_name)
        return error_response(HTTP_400, exc.message)

    @app.exception_handler(InvalidOrderError)
    async def handle_invalid_order(
        _request: Request, exc: InvalidOrderError
    ) -> JSONResponse:
        """Handle malformed order drafts."""
        logger.warning("Invalid order: %s", exc.reason)
        return error_response(HTTP_400, exc.message)

    @app.exception_handler(StorageNotConfiguredError)
    async def handle_storage_not_configured(
        _request: Request, exc: StorageNotConfiguredError
    ) -> JSONResponse:
        """Handle use of the media storage without credentials."""
        logger.error("Media storage not configured, missing %s", ", ".join(exc.missing))
        return error_response(HTTP_503, "Media storage is not configured")

    @app.exception_handler(StorageUnavailableError)
    async def handle_storage_unavailable(
        _request: Request, exc: StorageUnavailableError
    ) -> JSONResponse:
        """Handle an unreachable media storage."""
        logger.error("Media storage unavailable: %s", exc.reason)
        return error_response(HTTP_503, "Media storage unavailable")

    @app.exception_handler(StorageUploadError)
    async def handle_storage_upload(
        _request: Request, exc: StorageUploadError
    ) -> JSONResponse:
        """Handle uploads rejected by the remote storage."""
        logger.error("Media upload failed: %s", exc.reason)
        return error_response(HTTP_502, "Media upload failed")

    @app.exception_handler(ForexDeskError)
    async def handle_domain(_request: Request, exc: ForexDeskError) -> JSONResponse:
        """Catch-all for unhandled domain errors."""
        logger.error("Unhandled domain error: %s", exc.message)
        return error_response(HTTP_500, INTERNAL_ERROR)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http(
        _request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Render framework HTTP errors (404, 405, ...) in the shared shape."""
        if exc.status_code == HTTP_404 and exc.detail == DEFAULT_NOT_FOUND_DETAIL:
            return error_response(HTTP_404, ROUTE_NOT_FOUND)
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return error_response(HTTP_500, INTERNAL_ERROR)
