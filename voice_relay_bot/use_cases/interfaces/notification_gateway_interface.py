from __future__ import annotations

from abc import ABC
from abc import abstractmethod
from typing import Optional


class NotificationGatewayInterface(ABC):
    @abstractmethod
    async def send_message(
        self,
        chat_id: int,
        text: str,
        reply_to_message_id: Optional[int] = None,
    ) -> bool:
        """Send a message to a Telegram chat.

        Returns:
            True if the message was delivered, False otherwise. Never raises.
        """
        pass
