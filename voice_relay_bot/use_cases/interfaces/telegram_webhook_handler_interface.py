"""Interface for Telegram webhook handlers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Mapping, Union

from voice_relay_bot.entities.api_schemas import WebhookResponse


class TelegramWebhookHandlerInterface(ABC):
    """Interface for handling Telegram webhook events.
    
    This interface defines the contract for services that process
    raw Telegram webhook requests.
    """
    
    @abstractmethod
    async def handle(
        self,
        request_body: Union[bytes, str],
        request_headers: Mapping[str, str],
    ) -> WebhookResponse:
        """Process one webhook request.
        
        Args:
            request_body: The raw request body
            request_headers: The request headers
            
        Returns:
            The acknowledgment to send back to the caller
        """
        pass
