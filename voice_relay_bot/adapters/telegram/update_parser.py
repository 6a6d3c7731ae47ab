"""Parser for raw Telegram webhook payloads."""

from __future__ import annotations

from typing import Optional

from pydantic import ValidationError

from voice_relay_bot import LOGGER
from voice_relay_bot.entities.telegram_update import TelegramUpdate
from voice_relay_bot.use_cases.interfaces.update_parser_interface import (
    UpdateParserInterface,
)

# only a prefix of the payload is logged, it may contain user content
PAYLOAD_SNIPPET_LENGTH = 512


class UpdateParser(UpdateParserInterface):
    """Turns untrusted webhook bodies into ``TelegramUpdate`` values.

    Malformed JSON, a payload of the wrong shape and any unexpected error
    all end the same way: a debug log line and ``None``.
    """

    def parse(self, raw_json: str) -> Optional[TelegramUpdate]:
        try:
            return TelegramUpdate.model_validate_json(raw_json)
        except ValidationError as e:
            snippet = str(raw_json)[:PAYLOAD_SNIPPET_LENGTH]
            reason = "malformed" if self._is_syntax_error(e) else "incompatible"
            LOGGER.debug(
                f"failed to parse update ({reason} payload, {e.error_count()} error(s)). "
                f"payload: {snippet}"
            )
            return None
        except Exception as e:
            LOGGER.debug(f"unexpected error parsing update: {e}", exc_info=True)
            return None

    @staticmethod
    def _is_syntax_error(error: ValidationError) -> bool:
        return any(detail.get("type") == "json_invalid" for detail in error.errors())
