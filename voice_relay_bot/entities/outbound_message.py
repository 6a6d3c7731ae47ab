from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class OutboundMessage(BaseModel):
    """A message queued for delivery to a Telegram chat."""

    model_config = ConfigDict(frozen=True)

    chat_id: int = Field(description="Target chat")
    text: str = Field(description="Message text")
    reply_to_message_id: Optional[int] = Field(None, description="Message to reply to")
