"""
Contacts API — Shared Response Schemas
========================================

What:  Error, acknowledgement and health response models shared by all routes.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """
    Error body returned for every failed request.

    Example:
        {"message": "Contact not found", "request_id": "a1b2c3d4"}
    """
    message: str = Field(description="Human-readable error description")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class MessageResponse(BaseModel):
    """Plain acknowledgement, e.g. {"message": "Contact deleted"}."""
    message: str


class HealthResponse(BaseModel):
    """
    Health check response showing service and store status.

    status is "healthy" when the store answers a ping, "degraded" otherwise.
    """
    status: str = Field(description="Overall service status: healthy, degraded")
    version: str = Field(description="Application version")
    store_backend: str = Field(description="Document store backend: mongodb, memory")
    store: str = Field(description="Store connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
