"""Startup and shutdown hooks for long-lived services."""

from __future__ import annotations

from voice_relay_bot import LOGGER
from voice_relay_bot.adapters.services.notification_worker import NotificationWorker
from voice_relay_bot.adapters.services.telegram.telegram_gateway import (
    TelegramNotificationGateway,
)


class ServiceLifecycle:
    """Opens the Telegram client and starts the notification worker.

    Shutdown runs in reverse: the worker is drained before the client closes.
    """

    def __init__(
        self,
        notification_worker: NotificationWorker,
        gateway: TelegramNotificationGateway,
        drain_timeout: float = 5.0,
    ):
        self.notification_worker = notification_worker
        self.gateway = gateway
        self.drain_timeout = drain_timeout

    async def startup(self) -> None:
        LOGGER.info("Starting voice relay bot services")
        await self.gateway.startup()
        await self.notification_worker.start()

    async def shutdown(self) -> None:
        LOGGER.info("Shutting down voice relay bot services")
        try:
            await self.notification_worker.stop(drain_timeout=self.drain_timeout)
            await self.gateway.shutdown()
        except Exception as e:
            LOGGER.error(f"Error during shutdown: {str(e)}")
