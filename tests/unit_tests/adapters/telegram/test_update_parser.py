"""Unit tests for UpdateParser."""

import json
import unittest
from unittest.mock import patch

from voice_relay_bot.adapters.telegram.update_parser import PAYLOAD_SNIPPET_LENGTH, UpdateParser


class TestUpdateParser(unittest.TestCase):
    """Test suite for UpdateParser."""

    def setUp(self):
        """Set up test fixtures."""
        self.parser = UpdateParser()
        self.patch_logger = patch("voice_relay_bot.adapters.telegram.update_parser.LOGGER")
        self.mock_logger = self.patch_logger.start()

    def tearDown(self):
        """Tear down test fixtures."""
        self.patch_logger.stop()

    def test_parse_text_message(self):
        # Arrange
        raw_json = json.dumps({
            "update_id": 1,
            "message": {"message_id": 10, "chat": {"id": 5}, "text": "hello"},
        })

        # Act
        update = self.parser.parse(raw_json)

        # Assert
        self.assertIsNotNone(update)
        self.assertEqual(update.update_id, 1)
        self.assertEqual(update.message.text, "hello")
        self.mock_logger.debug.assert_not_called()

    def test_parse_null_bot_flag(self):
        # Arrange
        raw_json = json.dumps({
            "update_id": 1,
            "message": {"message_id": 2, "chat": {"id": 3}, "from": {"id": 4, "is_bot": None}},
        })

        # Act
        update = self.parser.parse(raw_json)

        # Assert
        self.assertIsNotNone(update)
        self.assertIsNone(update.message.from_user.is_bot)

    def test_parse_malformed_json(self):
        """Syntax errors yield None and a debug line only."""
        # Act
        update = self.parser.parse("{not json")

        # Assert
        self.assertIsNone(update)
        self.mock_logger.debug.assert_called_once()
        log_line = self.mock_logger.debug.call_args[0][0]
        self.assertIn("malformed", log_line)
        self.assertIn("{not json", log_line)
        self.mock_logger.info.assert_not_called()
        self.mock_logger.warning.assert_not_called()
        self.mock_logger.error.assert_not_called()

    def test_parse_incompatible_field_type(self):
        # Arrange
        raw_json = json.dumps({"update_id": 1, "message": {"message_id": 2, "text": 5}})

        # Act
        update = self.parser.parse(raw_json)

        # Assert
        self.assertIsNone(update)
        self.assertIn("incompatible", self.mock_logger.debug.call_args[0][0])

    def test_parse_non_object_payload(self):
        for raw_json in ("[]", "42", "null", '"text"', ""):
            with self.subTest(raw_json=raw_json):
                self.assertIsNone(self.parser.parse(raw_json))

    def test_logged_snippet_is_truncated(self):
        # Arrange
        raw_json = "x" * (PAYLOAD_SNIPPET_LENGTH * 4)

        # Act
        update = self.parser.parse(raw_json)

        # Assert
        self.assertIsNone(update)
        log_line = self.mock_logger.debug.call_args[0][0]
        self.assertIn("x" * PAYLOAD_SNIPPET_LENGTH, log_line)
        self.assertNotIn("x" * (PAYLOAD_SNIPPET_LENGTH + 1), log_line)

    def test_unexpected_error_returns_none(self):
        # Arrange
        with patch(
            "voice_relay_bot.adapters.telegram.update_parser.TelegramUpdate.model_validate_json",
            side_effect=RuntimeError("boom"),
        ):
            # Act
            update = self.parser.parse("{}")

        # Assert
        self.assertIsNone(update)
        self.mock_logger.debug.assert_called_once()


if __name__ == "__main__":
    unittest.main()
