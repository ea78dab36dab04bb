"""
OrderDesk Backend - Shared Schemas
====================================

What:  Error envelope and health check response shared by all routes.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """
    Error body returned by the global exception handlers.

    Every store failure produces the same `error` code; the cause is only in
    the server log.

    Example:
        {
            "error": "server_error",
            "message": "An internal error occurred. Please try again later.",
            "request_id": "a1b2c3d4"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response showing service and database status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
