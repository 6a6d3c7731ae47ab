"""Domain entities for the voice relay bot."""

__all__ = [
    "CallbackQuery",
    "Chat",
    "Message",
    "MessageEntity",
    "OutboundMessage",
    "TelegramUpdate",
    "UpdateClassification",
    "UpdateKind",
    "UpdateLabel",
    "User",
    "Voice",
]

from voice_relay_bot.entities.classification import UpdateClassification, UpdateLabel
from voice_relay_bot.entities.outbound_message import OutboundMessage
from voice_relay_bot.entities.telegram_update import (
    CallbackQuery,
    Chat,
    Message,
    MessageEntity,
    TelegramUpdate,
    UpdateKind,
    User,
    Voice,
)
