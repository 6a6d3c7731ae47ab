"""API endpoints package."""

__all__ = [
    "TelegramWebhookEndpoint",
    "HealthCheckEndpoint",
    "MetricsEndpoint",
]

from voice_relay_bot.frameworks.api.endpoints.telegram_webhook import TelegramWebhookEndpoint
from voice_relay_bot.frameworks.api.endpoints.health_check import HealthCheckEndpoint
from voice_relay_bot.frameworks.api.endpoints.metrics import MetricsEndpoint
