"""Unit tests for TelegramWebhookEndpoint."""

import unittest
from unittest.mock import AsyncMock, patch

from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import SecretStr

from voice_relay_bot.entities.api_schemas import WebhookResponse
from voice_relay_bot.frameworks.api.endpoints.telegram_webhook import (
    SECRET_TOKEN_HEADER,
    TelegramWebhookEndpoint,
)
from voice_relay_bot.frameworks.api.service_stats import ServiceStats
from voice_relay_bot.settings.telegram_settings import TelegramWebhookSettings
from voice_relay_bot.use_cases.interfaces.telegram_webhook_handler_interface import (
    TelegramWebhookHandlerInterface,
)

WEBHOOK_PATH = "hook_" + "a" * 32
WEBHOOK_SECRET = "s" * 64


class TestTelegramWebhookEndpoint(unittest.TestCase):
    """Test suite for TelegramWebhookEndpoint."""

    def setUp(self):
        """Set up test fixtures."""
        self.webhook_handler = AsyncMock(spec=TelegramWebhookHandlerInterface)
        self.webhook_handler.handle.return_value = WebhookResponse(status="ok")
        self.service_stats = ServiceStats()
        self.endpoint = TelegramWebhookEndpoint(
            webhook_handler=self.webhook_handler,
            webhook_settings=TelegramWebhookSettings.model_construct(
                PATH=SecretStr(WEBHOOK_PATH),
                SECRET=SecretStr(WEBHOOK_SECRET),
            ),
            service_stats=self.service_stats,
        )

        self.app = FastAPI()
        self.app.include_router(self.endpoint.create_rest_api_route())
        self.client = TestClient(self.app)
        self.url = f"/webhook/{WEBHOOK_PATH}"

        self.patch_logger = patch(
            "voice_relay_bot.frameworks.api.endpoints.telegram_webhook.LOGGER"
        )
        self.mock_logger = self.patch_logger.start()

    def tearDown(self):
        """Tear down test fixtures."""
        self.patch_logger.stop()

    def test_create_rest_api_route(self):
        # Act
        router = self.endpoint.create_rest_api_route()

        # Assert
        self.assertEqual(router.prefix, "/webhook")
        self.assertEqual(router.tags, ["Webhooks"])
        self.assertEqual([route.path for route in router.routes], [self.url])

    def test_valid_secret_forwards_raw_body(self):
        # Arrange
        body = b'{"update_id": 1, "message": {"text": "hi"}}'

        # Act
        response = self.client.post(
            self.url,
            content=body,
            headers={SECRET_TOKEN_HEADER: WEBHOOK_SECRET, "Content-Type": "application/json"},
        )

        # Assert
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "ok"})
        self.webhook_handler.handle.assert_awaited_once()
        forwarded_body, forwarded_headers = self.webhook_handler.handle.call_args[0]
        self.assertEqual(forwarded_body, body)
        self.assertEqual(forwarded_headers["content-type"], "application/json")
        self.assertEqual(self.service_stats.total_requests, 1)
        self.assertEqual(self.service_stats.rejected_requests, 0)

    def test_invalid_json_still_acknowledged(self):
        response = self.client.post(
            self.url,
            content=b"{not json",
            headers={SECRET_TOKEN_HEADER: WEBHOOK_SECRET, "Content-Type": "application/json"},
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "ok"})

    def test_wrong_secret_rejected(self):
        # Act
        response = self.client.post(
            self.url,
            content=b"{}",
            headers={SECRET_TOKEN_HEADER: "wrong", "X-Forwarded-For": "203.0.113.9, 10.0.0.1"},
        )

        # Assert
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.content, b"")
        self.webhook_handler.handle.assert_not_called()
        self.assertEqual(self.service_stats.rejected_requests, 1)
        self.mock_logger.warning.assert_called_once_with(
            "Invalid webhook secret from 203.0.113.9"
        )

    def test_missing_secret_rejected(self):
        response = self.client.post(self.url, content=b"{}")

        self.assertEqual(response.status_code, 401)
        self.webhook_handler.handle.assert_not_called()

    def test_other_paths_not_served(self):
        response = self.client.post(
            "/webhook/other",
            content=b"{}",
            headers={SECRET_TOKEN_HEADER: WEBHOOK_SECRET},
        )

        self.assertEqual(response.status_code, 404)


if __name__ == "__main__":
    unittest.main()
