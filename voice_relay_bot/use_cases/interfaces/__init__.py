"""Interfaces between the use cases and their adapters."""

__all__ = [
    "NotificationGatewayInterface",
    "NotificationSchedulerInterface",
    "TelegramWebhookHandlerInterface",
    "UpdateParserInterface",
]

from voice_relay_bot.use_cases.interfaces.notification_gateway_interface import (
    NotificationGatewayInterface,
)
from voice_relay_bot.use_cases.interfaces.notification_scheduler_interface import (
    NotificationSchedulerInterface,
)
from voice_relay_bot.use_cases.interfaces.telegram_webhook_handler_interface import (
    TelegramWebhookHandlerInterface,
)
from voice_relay_bot.use_cases.interfaces.update_parser_interface import (
    UpdateParserInterface,
)
