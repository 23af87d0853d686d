"""Pydantic models for health and error responses."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Basic health check response."""

    status: str
    version: str


class DetailedHealthResponse(BaseModel):
    """Readiness response with per-check status."""

    status: str = Field(..., description="Overall health status: healthy or unhealthy")
    version: str = Field(..., description="Application version")
    timestamp: datetime = Field(..., description="Current server timestamp")
    checks: dict[str, str] = Field(..., description="Individual readiness check results")
    definitions: int = Field(default=0, description="Number of loaded Tiles definitions")
    uptime_seconds: int = Field(default=0, description="Seconds since startup completed")
    requests: int = Field(default=0, description="Requests handled since startup")


class ErrorResponse(BaseModel):
    """Error payload returned by the exception handlers."""

    code: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)
