"""API schema models for the admin and error responses."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    error: str = Field(description="Machine readable error code")
    message: str = Field(description="Human readable error description")


class HealthResponse(BaseModel):
    status: str = Field(description="Service status")
    uptime_seconds: int = Field(description="Seconds since the service started")
    version: str = Field(description="Service version")


class MetricsResponse(BaseModel):
    total_requests: int = Field(0, description="Webhook requests received")
    rejected_requests: int = Field(0, description="Webhook requests rejected by the secret check")
    uptime_seconds: int = Field(description="Seconds since the service started")
