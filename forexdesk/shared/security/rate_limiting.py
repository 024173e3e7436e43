"""
Rate limiting configuration and setup.

Uses slowapi to enforce a default per-client limit on every route.
Protects the upload and health endpoints against abuse.
"""

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from forexdesk.core.config import settings

RATE_LIMIT_MESSAGE = "Too many requests, please try again later."


def build_limiter(default_limit: str = settings.rate_limit_default) -> Limiter:
    """Create a limiter keyed on the client address."""
    return Limiter(key_func=get_remote_address, default_limits=[default_limit])


limiter = build_limiter()


def rate_limit_exceeded_handler(
    _request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors with a clean JSON response.

    Args:
        _request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 JSON response in the shared error shape.
    """
    return JSONResponse(
        status_code=429,
        content={"success": False, "message": RATE_LIMIT_MESSAGE, "limit": str(exc.detail)},
    )
