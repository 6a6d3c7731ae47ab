"""Typed view of the Telegram update payload.

Only the branches and fields the webhook dispatcher inspects are modelled.
Everything else in the payload is ignored, and every modelled field is
optional: Telegram omits fields freely, so absence is never an error.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class UpdateKind(str, Enum):
    """Which update branch is populated."""

    MESSAGE = "message"
    EDITED_MESSAGE = "edited_message"
    CHANNEL_POST = "channel_post"
    CALLBACK_QUERY = "callback_query"
    NONE = "none"


class TelegramModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class Chat(TelegramModel):
    id: Optional[int] = Field(None, description="Unique identifier for this chat")


class User(TelegramModel):
    id: Optional[int] = Field(None, description="Unique identifier for this user or bot")
    is_bot: Optional[bool] = Field(None, description="True, if this user is a bot")


class Voice(TelegramModel):
    file_id: Optional[str] = Field(None, description="Identifier for this file")
    duration: Optional[int] = Field(None, description="Duration of the audio in seconds")
    mime_type: Optional[str] = Field(None, description="MIME type of the file")


class MessageEntity(TelegramModel):
    type: Optional[str] = Field(None, description="Type of the entity, e.g. bot_command")
    offset: Optional[int] = Field(None, description="Offset in UTF-16 code units")
    length: Optional[int] = Field(None, description="Length in UTF-16 code units")


class Message(TelegramModel):
    message_id: Optional[int] = Field(None, description="Unique message identifier inside this chat")
    chat: Optional[Chat] = Field(None, description="Chat the message belongs to")
    from_user: Optional[User] = Field(None, alias="from", description="Sender of the message")
    text: Optional[str] = Field(None, description="Text of the message")
    voice: Optional[Voice] = Field(None, description="Voice attachment")
    entities: Optional[List[MessageEntity]] = Field(
        None, description="Special entities like usernames, URLs, bot commands"
    )

    @property
    def chat_id(self) -> Optional[int]:
        return self.chat.id if self.chat else None


class CallbackQuery(TelegramModel):
    id: Optional[str] = Field(None, description="Unique identifier for this query")
    message: Optional[Message] = Field(
        None, description="Message with the callback button that originated the query"
    )


class TelegramUpdate(TelegramModel):
    """https://core.telegram.org/bots/api#update

    At most one of the update branches is populated. When a malformed
    payload carries several, ``kind`` picks one deterministically.
    """

    update_id: Optional[int] = Field(None, description="The update's unique identifier")
    message: Optional[Message] = Field(None, description="New incoming message")
    edited_message: Optional[Message] = Field(None, description="Edit to a previously sent message")
    channel_post: Optional[Message] = Field(None, description="New incoming channel post")
    callback_query: Optional[CallbackQuery] = Field(None, description="New incoming callback query")

    @property
    def kind(self) -> UpdateKind:
        if self.edited_message is not None:
            return UpdateKind.EDITED_MESSAGE
        if self.channel_post is not None:
            return UpdateKind.CHANNEL_POST
        if self.callback_query is not None:
            return UpdateKind.CALLBACK_QUERY
        if self.message is not None:
            return UpdateKind.MESSAGE
        return UpdateKind.NONE
