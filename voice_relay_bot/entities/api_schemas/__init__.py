"""API schema models package."""

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "MetricsResponse",
    "WebhookResponse",
]

from voice_relay_bot.entities.api_schemas.service_schemas import (
    ErrorResponse,
    HealthResponse,
    MetricsResponse,
)
from voice_relay_bot.entities.api_schemas.webhook_schemas import WebhookResponse
