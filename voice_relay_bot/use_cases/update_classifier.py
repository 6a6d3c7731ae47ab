"""Classification of Telegram updates into routing labels."""

from __future__ import annotations

import re
from typing import Optional

from telegram.constants import MessageEntityType

from voice_relay_bot.entities.classification import UpdateClassification, UpdateLabel
from voice_relay_bot.entities.telegram_update import Message, TelegramUpdate, UpdateKind

# Entity annotation is not guaranteed on every send path, so commands are
# also recognised by shape: "/name", "/name@bot" and "/name args".
COMMAND_PATTERN = re.compile(r"/[A-Za-z_]+(?:@\w+)?(?: .*)?", re.ASCII)

_KIND_LABELS = {
    UpdateKind.EDITED_MESSAGE: UpdateLabel.EDITED_MESSAGE,
    UpdateKind.CHANNEL_POST: UpdateLabel.CHANNEL_POST,
    UpdateKind.CALLBACK_QUERY: UpdateLabel.CALLBACK_QUERY,
    UpdateKind.NONE: UpdateLabel.UNKNOWN,
}


def has_command_entity(message: Message) -> bool:
    if not message.entities:
        return False
    return any(entity.type == MessageEntityType.BOT_COMMAND for entity in message.entities)


def looks_like_command(text: Optional[str]) -> bool:
    if text is None:
        return False
    return COMMAND_PATTERN.fullmatch(text) is not None


def label_message(message: Message) -> UpdateLabel:
    if message.voice is not None:
        return UpdateLabel.VOICE_MESSAGE
    if has_command_entity(message):
        return UpdateLabel.COMMAND
    if looks_like_command(message.text):
        return UpdateLabel.COMMAND
    if message.text:
        return UpdateLabel.TEXT_MESSAGE
    return UpdateLabel.OTHER


def determine_update_label(update: TelegramUpdate) -> UpdateLabel:
    """Label an update, checking the non-message branches first.

    Args:
        update: The parsed update

    Returns:
        The first matching label
    """
    kind = update.kind
    if kind is UpdateKind.MESSAGE:
        return label_message(update.message)
    return _KIND_LABELS[kind]


def chat_id_of(update: TelegramUpdate) -> Optional[int]:
    """Chat id of the first present branch, None when that branch has no chat.

    Later branches are never consulted.
    """
    if update.message is not None:
        return update.message.chat_id
    if update.edited_message is not None:
        return update.edited_message.chat_id
    if update.channel_post is not None:
        return update.channel_post.chat_id
    if update.callback_query is not None and update.callback_query.message is not None:
        return update.callback_query.message.chat_id
    return None


def message_id_of(update: TelegramUpdate) -> Optional[int]:
    return update.message.message_id if update.message else None


def sender_is_bot(update: TelegramUpdate) -> bool:
    if update.message is None or update.message.from_user is None:
        return False
    return update.message.from_user.is_bot is True


def classify_update(update: TelegramUpdate) -> UpdateClassification:
    return UpdateClassification(
        label=determine_update_label(update),
        chat_id=chat_id_of(update),
        message_id=message_id_of(update),
        sender_is_bot=sender_is_bot(update),
    )
