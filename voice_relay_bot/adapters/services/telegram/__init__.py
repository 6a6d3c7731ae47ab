__all__ = ["TelegramNotificationGateway"]

from voice_relay_bot.adapters.services.telegram.telegram_gateway import (
    TelegramNotificationGateway,
)
