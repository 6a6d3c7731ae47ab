from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class UpdateLabel(str, Enum):
    EDITED_MESSAGE = "edited_message"
    CHANNEL_POST = "channel_post"
    CALLBACK_QUERY = "callback_query"
    VOICE_MESSAGE = "voice message"
    COMMAND = "command"
    TEXT_MESSAGE = "text message"
    OTHER = "other"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value


class UpdateClassification(BaseModel):
    """Per-request routing information derived from an update."""

    model_config = ConfigDict(frozen=True)

    label: UpdateLabel = Field(description="Human-readable update type")
    chat_id: Optional[int] = Field(None, description="Chat to route replies to")
    message_id: Optional[int] = Field(None, description="Message to reply to")
    sender_is_bot: bool = Field(False, description="True if the message sender is a bot")
