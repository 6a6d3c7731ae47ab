"""Unit tests for the container wiring."""

import unittest
from unittest.mock import patch

from pydantic import SecretStr

from voice_relay_bot.app_container import setup_container
from voice_relay_bot.config_dependency_injection import resolve_test_acks
from voice_relay_bot.frameworks.api.api_endpoint import APIEndpoint
from voice_relay_bot.frameworks.api.registry import SubServiceEndpoints
from voice_relay_bot.settings import ServiceSettings
from voice_relay_bot.settings.app_settings import AppSettings
from voice_relay_bot.settings.telegram_settings import (
    TelegramConnectionSettings,
    TelegramWebhookSettings,
)
from voice_relay_bot.use_cases.interfaces.notification_scheduler_interface import (
    NotificationSchedulerInterface,
)
from voice_relay_bot.use_cases.interfaces.telegram_webhook_handler_interface import (
    TelegramWebhookHandlerInterface,
)


def make_settings(**app_overrides) -> ServiceSettings:
    return ServiceSettings(
        telegram=TelegramConnectionSettings.model_construct(
            BOT_TOKEN=SecretStr("123456:test-token"),
            ADMIN_ID=1001,
        ),
        webhook=TelegramWebhookSettings.model_construct(
            PATH=SecretStr("p" * 32),
            SECRET=SecretStr("s" * 64),
        ),
        app=AppSettings.model_construct(
            ADMIN_HTTP_TOKEN=SecretStr("a" * 32),
            **app_overrides,
        ),
    )


class TestResolveTestAcks(unittest.TestCase):

    def test_flag_respected_outside_production(self):
        self.assertTrue(resolve_test_acks(make_settings(ENABLE_TEST_ACKS=True).app))
        self.assertFalse(resolve_test_acks(make_settings().app))

    def test_production_always_disabled(self):
        # Arrange
        app_settings = make_settings(ENV="prod", ENABLE_TEST_ACKS=True).app

        # Act
        with patch("voice_relay_bot.config_dependency_injection.LOGGER") as mock_logger:
            enabled = resolve_test_acks(app_settings)

        # Assert
        self.assertFalse(enabled)
        mock_logger.warning.assert_called_once()


class TestSetupContainer(unittest.TestCase):

    def test_endpoints_registered(self):
        # Act
        container = setup_container(make_settings())

        # Assert
        registry = container[SubServiceEndpoints]
        self.assertEqual(
            [endpoint.__class__.__name__ for endpoint in registry.endpoints],
            ["TelegramWebhookEndpoint", "HealthCheckEndpoint", "MetricsEndpoint"],
        )
        paths = {route.path for route in container[APIEndpoint].rest_application.routes}
        self.assertIn(f"/webhook/{'p' * 32}", paths)
        self.assertIn("/health", paths)
        self.assertIn("/metrics", paths)

    def test_singletons_shared(self):
        container = setup_container(make_settings(ENABLE_TEST_ACKS=True))

        dispatcher = container[TelegramWebhookHandlerInterface]
        self.assertIs(dispatcher, container[TelegramWebhookHandlerInterface])
        self.assertIs(dispatcher.notification_scheduler, container[NotificationSchedulerInterface])
        self.assertTrue(dispatcher.enable_test_acks)

    def test_docs_disabled_in_production(self):
        staging = setup_container(make_settings())[APIEndpoint].rest_application
        production = setup_container(make_settings(ENV="prod"))[APIEndpoint].rest_application

        self.assertIsNotNone(staging.docs_url)
        self.assertIsNone(production.docs_url)


if __name__ == "__main__":
    unittest.main()
