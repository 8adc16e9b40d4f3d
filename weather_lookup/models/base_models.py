"""Pydantic models for request/response validation."""

from datetime import datetime

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Service status")
    timestamp: datetime = Field(..., description="Current server timestamp")
    uptime: float = Field(..., ge=0, description="Seconds since the application started")


class ErrorResponse(BaseModel):
    """Error response body shared by every failing endpoint."""

    error: str
