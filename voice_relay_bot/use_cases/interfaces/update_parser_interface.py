from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from voice_relay_bot.entities.telegram_update import TelegramUpdate


class UpdateParserInterface(ABC):
    @abstractmethod
    def parse(self, raw_json: str) -> Optional[TelegramUpdate]:
        """Parse a raw webhook body.

        Returns:
            The parsed update, or None if the payload could not be parsed.
            Must never raise.
        """
        pass
