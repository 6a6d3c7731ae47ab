"""Webhook handling use cases."""

__all__ = ["WebhookDispatcher"]

from voice_relay_bot.use_cases.webhooks.telegram_webhook_use_case import WebhookDispatcher
