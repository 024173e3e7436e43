"""
Pydantic schemas for API responses.

These schemas define the API contract.
No business logic belongs here.
"""

from typing import Optional

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str


class StorageHealthResponse(BaseModel):
    """Response schema for the media storage health check."""

    status: str
    cloud_name: Optional[str] = None


class ErrorResponse(BaseModel):
    """Standard error response returned by all error handlers."""

    success: bool = False
    message: str
