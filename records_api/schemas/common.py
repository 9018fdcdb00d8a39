"""
Records API - Shared Response Schemas
=====================================

What:  The response envelope every endpoint returns, the error envelope the
       global handlers render, and the health check payload.

Envelope shape:
    {"success": true,  "msg": "Author created successfully", "data": {...}}
    {"success": true,  "msg": "Authors fetched successfully", "totalAuthors": 2, "data": [...]}
    {"success": false, "msg": "Server error", "error": "connection refused"}

JSON keys follow the published camelCase contract (authorId, totalBooks);
Python attributes stay snake_case and map through field aliases.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class APIModel(BaseModel):
    """Base for schemas with camelCase aliases; accepts either spelling on input."""

    model_config = ConfigDict(populate_by_name=True)


class Envelope(APIModel):
    """Success envelope without payload (delete endpoints)."""

    success: bool = Field(default=True, description="Whether the operation succeeded")
    msg: str = Field(description="Human-readable outcome")


class ErrorResponse(APIModel):
    """
    Failure envelope rendered by the global exception handlers.

    `error` is only present on server errors and carries the raw failure text.
    """

    success: bool = Field(default=False)
    msg: str = Field(description="Human-readable error description")
    error: Optional[str] = Field(default=None, description="Underlying failure text")


class NameRef(APIModel):
    """Partial projection of a referenced record: only its name."""

    name: str


class HealthResponse(BaseModel):
    """Health check response showing service and database status."""

    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    resources: List[str] = Field(description="Entity routers mounted on this instance")
    uptime_seconds: float = Field(description="Seconds since service started")
