"""Background delivery of outbound messages."""

from __future__ import annotations

import asyncio
from contextlib import suppress
from typing import Optional

from voice_relay_bot import LOGGER
from voice_relay_bot.entities.outbound_message import OutboundMessage
from voice_relay_bot.use_cases.interfaces.notification_gateway_interface import (
    NotificationGatewayInterface,
)
from voice_relay_bot.use_cases.interfaces.notification_scheduler_interface import (
    NotificationSchedulerInterface,
)


class NotificationWorker(NotificationSchedulerInterface):
    """Queue-fed consumer that sends messages off the request path.

    Requests only enqueue. A single consumer task awaits the sends, so a slow
    or failing Telegram API never delays a webhook response, and shutdown
    can drain what is still queued.
    """

    def __init__(
        self,
        gateway: NotificationGatewayInterface,
        send_timeout: float = 10.0,
        max_queue_size: int = 100,
    ):
        """Initialize the worker.

        Args:
            gateway: Gateway that performs the actual send
            send_timeout: Upper bound in seconds for one send
            max_queue_size: Messages held before new ones are dropped
        """
        self.gateway = gateway
        self.send_timeout = send_timeout
        self._queue: asyncio.Queue[OutboundMessage] = asyncio.Queue(maxsize=max_queue_size)
        self._consumer: Optional[asyncio.Task] = None

    @property
    def pending(self) -> int:
        return self._queue.qsize()

    @property
    def running(self) -> bool:
        return self._consumer is not None and not self._consumer.done()

    def submit(self, message: OutboundMessage) -> bool:
        try:
            self._queue.put_nowait(message)
        except asyncio.QueueFull:
            LOGGER.warning(f"notification queue full; dropping message to chat {message.chat_id}")
            return False
        return True

    async def start(self) -> None:
        if self.running:
            return
        self._consumer = asyncio.create_task(self._consume(), name="notification-worker")
        LOGGER.info("notification worker started")

    async def stop(self, drain_timeout: float = 5.0) -> None:
        """Drain the queue, then stop the consumer.

        Args:
            drain_timeout: Seconds to wait for queued messages to be sent
        """
        if not self.running:
            return
        try:
            await asyncio.wait_for(self._queue.join(), timeout=drain_timeout)
        except asyncio.TimeoutError:
            LOGGER.warning(
                f"notification worker stopped with {self.pending} undelivered message(s)"
            )
        self._consumer.cancel()
        with suppress(asyncio.CancelledError):
            await self._consumer
        self._consumer = None
        LOGGER.info("notification worker stopped")

    async def _consume(self) -> None:
        while True:
            message = await self._queue.get()
            try:
                await self._deliver(message)
            finally:
                self._queue.task_done()

    async def _deliver(self, message: OutboundMessage) -> None:
        try:
            delivered = await asyncio.wait_for(
                self.gateway.send_message(
                    message.chat_id,
                    message.text,
                    message.reply_to_message_id,
                ),
                timeout=self.send_timeout,
            )
        except asyncio.TimeoutError:
            LOGGER.error(
                f"sending message to chat {message.chat_id} timed out after {self.send_timeout}s"
            )
            return
        except Exception as e:
            LOGGER.error(f"error sending message to chat {message.chat_id}: {e}", exc_info=True)
            return
        if not delivered:
            LOGGER.warning(f"message to chat {message.chat_id} was not delivered")
