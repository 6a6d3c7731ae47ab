"""Unit tests for NotificationWorker."""

import asyncio
import unittest
from unittest.mock import AsyncMock, MagicMock, patch

from voice_relay_bot.adapters.services.notification_worker import NotificationWorker
from voice_relay_bot.entities.outbound_message import OutboundMessage
from voice_relay_bot.use_cases.interfaces.notification_gateway_interface import (
    NotificationGatewayInterface,
)


class TestNotificationWorker(unittest.IsolatedAsyncioTestCase):
    """Test suite for NotificationWorker."""

    def setUp(self):
        """Set up test fixtures."""
        self.gateway = MagicMock(spec=NotificationGatewayInterface)
        self.gateway.send_message = AsyncMock(return_value=True)
        self.message = OutboundMessage(chat_id=55, text="✅ command received", reply_to_message_id=7)

        self.patch_logger = patch(
            "voice_relay_bot.adapters.services.notification_worker.LOGGER"
        )
        self.mock_logger = self.patch_logger.start()

    def tearDown(self):
        """Tear down test fixtures."""
        self.patch_logger.stop()

    async def test_queued_message_delivered_before_stop(self):
        # Arrange
        worker = NotificationWorker(self.gateway)
        await worker.start()

        # Act
        accepted = worker.submit(self.message)
        await worker.stop()

        # Assert
        self.assertTrue(accepted)
        self.assertFalse(worker.running)
        self.gateway.send_message.assert_awaited_once_with(55, "✅ command received", 7)

    async def test_submit_does_not_wait_for_delivery(self):
        # Arrange
        worker = NotificationWorker(self.gateway)

        # Act
        accepted = worker.submit(self.message)

        # Assert
        self.assertTrue(accepted)
        self.assertEqual(worker.pending, 1)
        self.gateway.send_message.assert_not_called()

    async def test_full_queue_drops_message(self):
        # Arrange
        worker = NotificationWorker(self.gateway, max_queue_size=1)
        worker.submit(self.message)

        # Act
        accepted = worker.submit(self.message)

        # Assert
        self.assertFalse(accepted)
        self.mock_logger.warning.assert_called_once()

    async def test_slow_send_times_out(self):
        # Arrange
        async def never_returns(*args):
            await asyncio.sleep(10)

        self.gateway.send_message = AsyncMock(side_effect=never_returns)
        worker = NotificationWorker(self.gateway, send_timeout=0.01)
        await worker.start()

        # Act
        worker.submit(self.message)
        await worker.stop(drain_timeout=1.0)

        # Assert
        self.mock_logger.error.assert_called_once()
        self.assertIn("timed out", self.mock_logger.error.call_args[0][0])

    async def test_failed_send_does_not_stop_worker(self):
        # Arrange
        self.gateway.send_message = AsyncMock(side_effect=[RuntimeError("boom"), False, True])
        worker = NotificationWorker(self.gateway)
        await worker.start()

        # Act
        for _ in range(3):
            worker.submit(self.message)
        await worker.stop()

        # Assert
        self.assertEqual(self.gateway.send_message.await_count, 3)
        self.mock_logger.error.assert_called_once()
        self.mock_logger.warning.assert_called_once_with("message to chat 55 was not delivered")

    async def test_start_is_idempotent(self):
        # Arrange
        worker = NotificationWorker(self.gateway)

        # Act
        await worker.start()
        consumer = worker._consumer
        await worker.start()

        # Assert
        self.assertIs(worker._consumer, consumer)
        await worker.stop()

    async def test_stop_without_start(self):
        worker = NotificationWorker(self.gateway)

        await worker.stop()

        self.assertFalse(worker.running)


if __name__ == "__main__":
    unittest.main()
