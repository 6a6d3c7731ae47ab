"""Unit tests for the API response schemas."""

import unittest

from voice_relay_bot.entities.api_schemas import ErrorResponse, WebhookResponse


class TestWebhookResponse(unittest.TestCase):

    def test_body_is_status_only(self):
        # Act
        body = WebhookResponse(status="ok").to_body()

        # Assert
        self.assertEqual(body, {"status": "ok"})
        self.assertEqual(set(WebhookResponse.model_fields), {"status"})


class TestErrorResponse(unittest.TestCase):

    def test_body(self):
        error = ErrorResponse(error="not_found", message="Endpoint not found")

        self.assertEqual(error.model_dump(), {"error": "not_found", "message": "Endpoint not found"})


if __name__ == "__main__":
    unittest.main()
