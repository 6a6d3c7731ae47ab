"""Interface for handing outbound messages off the request path."""

from __future__ import annotations

from abc import ABC, abstractmethod

from voice_relay_bot.entities.outbound_message import OutboundMessage


class NotificationSchedulerInterface(ABC):
    """Accepts messages to be sent later, without waiting for delivery."""

    @abstractmethod
    def submit(self, message: OutboundMessage) -> bool:
        """Schedule a message for delivery.

        Args:
            message: The message to send

        Returns:
            True if the message was accepted, False if it was dropped
        """
        pass
