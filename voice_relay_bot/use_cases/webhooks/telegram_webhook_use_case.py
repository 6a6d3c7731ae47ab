"""Use case for handling Telegram webhook requests."""

from __future__ import annotations

from typing import Mapping, Optional, Union

from voice_relay_bot import LOGGER
from voice_relay_bot.entities.api_schemas import WebhookResponse
from voice_relay_bot.entities.classification import UpdateClassification
from voice_relay_bot.entities.outbound_message import OutboundMessage
from voice_relay_bot.use_cases.interfaces.notification_scheduler_interface import (
    NotificationSchedulerInterface,
)
from voice_relay_bot.use_cases.interfaces.telegram_webhook_handler_interface import (
    TelegramWebhookHandlerInterface,
)
from voice_relay_bot.use_cases.interfaces.update_parser_interface import (
    UpdateParserInterface,
)
from voice_relay_bot.use_cases.update_classifier import classify_update

EXPECTED_CONTENT_TYPE = "application/json"


def media_type_of(headers: Mapping[str, str]) -> Optional[str]:
    """Return the lower-cased media type of the content-type header, without parameters."""
    content_type = None
    for name, value in headers.items():
        if name.lower() == "content-type":
            content_type = value
            break
    if content_type is None:
        return None
    return content_type.split(";", 1)[0].strip().lower()


class WebhookDispatcher(TelegramWebhookHandlerInterface):
    """Processes one Telegram webhook request from raw body to acknowledgment.

    The caller always receives a success acknowledgment, including when the
    payload cannot be parsed, so Telegram does not redeliver updates this
    service has already logged and dropped. Test acknowledgments are handed
    to the scheduler and delivered after the response is returned.
    """

    def __init__(
        self,
        update_parser: UpdateParserInterface,
        notification_scheduler: NotificationSchedulerInterface,
        enable_test_acks: bool = False,
    ):
        """Initialize the dispatcher.

        Args:
            update_parser: Parser for raw update payloads
            notification_scheduler: Receives acknowledgment messages to send
            enable_test_acks: Whether to reply to every classified update
        """
        self.update_parser = update_parser
        self.notification_scheduler = notification_scheduler
        self.enable_test_acks = enable_test_acks

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
            Always an "ok" acknowledgment
        """
        try:
            media_type = media_type_of(request_headers)
            if media_type != EXPECTED_CONTENT_TYPE:
                LOGGER.warning(f"unexpected content-type: {media_type}")

            if isinstance(request_body, bytes):
                raw_json = request_body.decode("utf-8", errors="replace")
            else:
                raw_json = request_body

            update = self.update_parser.parse(raw_json)
            if update is None:
                return WebhookResponse(status="ok")

            classification = classify_update(update)
            LOGGER.info(
                f"processing update {update.update_id} of type '{classification.label.value}' "
                f"from chat {classification.chat_id}"
            )

            if self.should_acknowledge(classification):
                self.schedule_acknowledgment(classification)
        except Exception as e:
            LOGGER.error(f"error processing webhook: {e}", exc_info=True)

        return WebhookResponse(status="ok")

    def should_acknowledge(self, classification: UpdateClassification) -> bool:
        """Decide whether a test acknowledgment is sent for an update.

        Bot senders never get one, otherwise two bots in test mode would
        acknowledge each other forever.
        """
        return (
            self.enable_test_acks
            and not classification.sender_is_bot
            and classification.chat_id is not None
            and classification.message_id is not None
        )

    def schedule_acknowledgment(self, classification: UpdateClassification) -> None:
        message = OutboundMessage(
            chat_id=classification.chat_id,
            text=f"✅ {classification.label.value} received",
            reply_to_message_id=classification.message_id,
        )
        if not self.notification_scheduler.submit(message):
            LOGGER.warning(
                f"acknowledgment for chat {classification.chat_id} was not scheduled"
            )
