from __future__ import annotations

from typing import Optional

from telegram import Bot, ReplyParameters
from telegram.error import TelegramError

from voice_relay_bot import LOGGER
from voice_relay_bot.settings.telegram_settings import TelegramConnectionSettings
from voice_relay_bot.use_cases.interfaces.notification_gateway_interface import (
    NotificationGatewayInterface,
)


class TelegramNotificationGateway(NotificationGatewayInterface):
    """
    Concrete adapter to call the actual Telegram Bot API.
    """

    def __init__(self, settings: TelegramConnectionSettings, bot: Optional[Bot] = None):
        self.bot = bot or Bot(token=settings.BOT_TOKEN.get_secret_value())
        LOGGER.info("telegram client initialized")

    async def send_message(
        self,
        chat_id: int,
        text: str,
        reply_to_message_id: Optional[int] = None,
    ) -> bool:
        reply_parameters = None
        if reply_to_message_id is not None:
            reply_parameters = ReplyParameters(message_id=reply_to_message_id)
        try:
            await self.bot.send_message(
                chat_id=chat_id,
                text=text,
                reply_parameters=reply_parameters,
            )
            return True
        except TelegramError as e:
            LOGGER.error(f"failed to send message to chat {chat_id}: {e.message}")
        except Exception as e:
            LOGGER.error(f"error sending message to chat {chat_id}: {e}", exc_info=True)
        return False

    async def startup(self) -> None:
        """Open the HTTP connection pool and verify the token.

        A rejected token or an unreachable API is logged, and the service
        keeps serving webhooks; sends are still attempted and logged per message.
        """
        try:
            await self.bot.initialize()
            LOGGER.info("telegram client started")
        except TelegramError as e:
            LOGGER.error(f"failed to initialize telegram client: {e.message}")

    async def shutdown(self) -> None:
        await self.bot.shutdown()
        LOGGER.info("telegram client shut down")
