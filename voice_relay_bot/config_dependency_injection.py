"""Dependency injection configuration for the voice relay bot."""

from __future__ import annotations

from lagom import Container, Singleton

from voice_relay_bot import LOGGER
from voice_relay_bot.adapters.services.notification_worker import NotificationWorker
from voice_relay_bot.adapters.services.telegram.telegram_gateway import (
    TelegramNotificationGateway,
)
from voice_relay_bot.adapters.telegram.update_parser import UpdateParser
from voice_relay_bot.frameworks.api.api_endpoint import APIEndpoint, APIEndpointConfig
from voice_relay_bot.frameworks.api.endpoints import (
    HealthCheckEndpoint,
    MetricsEndpoint,
    TelegramWebhookEndpoint,
)
from voice_relay_bot.frameworks.api.registry import SubServiceEndpoints
from voice_relay_bot.frameworks.api.service_stats import ServiceStats
from voice_relay_bot.frameworks.lifecycle import ServiceLifecycle
from voice_relay_bot.settings import ServiceSettings
from voice_relay_bot.settings.app_settings import AppSettings
from voice_relay_bot.settings.telegram_settings import TelegramConnectionSettings
from voice_relay_bot.settings.telegram_settings import TelegramWebhookSettings
from voice_relay_bot.use_cases.interfaces.notification_gateway_interface import (
    NotificationGatewayInterface,
)
from voice_relay_bot.use_cases.interfaces.notification_scheduler_interface import (
    NotificationSchedulerInterface,
)
from voice_relay_bot.use_cases.interfaces.telegram_webhook_handler_interface import (
    TelegramWebhookHandlerInterface,
)
from voice_relay_bot.use_cases.interfaces.update_parser_interface import (
    UpdateParserInterface,
)
from voice_relay_bot.use_cases.webhooks import WebhookDispatcher


def resolve_test_acks(app_settings: AppSettings) -> bool:
    """Test acknowledgments are never enabled in production, whatever the flag says."""
    if app_settings.ENABLE_TEST_ACKS and app_settings.is_production:
        LOGGER.warning("ENABLE_TEST_ACKS ignored in production environment")
        return False
    return app_settings.ENABLE_TEST_ACKS


def configure_container(settings: ServiceSettings) -> Container:
    """Configure the dependency injection container.
    
    Args:
        settings: Loaded service settings
        
    Returns:
        Configured Lagom container
    """
    container = Container()
    
    # Settings
    container[ServiceSettings] = settings
    container[TelegramConnectionSettings] = settings.telegram
    container[TelegramWebhookSettings] = settings.webhook
    container[AppSettings] = settings.app
    
    # A) Bind INTERFACE -> ADAPTER
    container[TelegramNotificationGateway] = Singleton(
        lambda c: TelegramNotificationGateway(c[TelegramConnectionSettings])
    )
    container[NotificationGatewayInterface] = Singleton(
        lambda c: c[TelegramNotificationGateway]
    )
    
    container[NotificationWorker] = Singleton(
        lambda c: NotificationWorker(
            gateway=c[NotificationGatewayInterface],
            send_timeout=c[AppSettings].ACK_SEND_TIMEOUT,
        )
    )
    container[NotificationSchedulerInterface] = Singleton(
        lambda c: c[NotificationWorker]
    )
    
    container[UpdateParserInterface] = Singleton(lambda: UpdateParser())
    
    # B) Bind USE CASES
    container[TelegramWebhookHandlerInterface] = Singleton(
        lambda c: WebhookDispatcher(
            update_parser=c[UpdateParserInterface],
            notification_scheduler=c[NotificationSchedulerInterface],
            enable_test_acks=resolve_test_acks(c[AppSettings]),
        )
    )
    
    # C) Bind API framework components
    container[ServiceStats] = Singleton(lambda: ServiceStats())
    container[ServiceLifecycle] = Singleton(
        lambda c: ServiceLifecycle(
            notification_worker=c[NotificationWorker],
            gateway=c[TelegramNotificationGateway],
        )
    )
    
    container[TelegramWebhookEndpoint] = Singleton(
        lambda c: TelegramWebhookEndpoint(
            webhook_handler=c[TelegramWebhookHandlerInterface],
            webhook_settings=c[TelegramWebhookSettings],
            service_stats=c[ServiceStats],
        )
    )
    container[HealthCheckEndpoint] = Singleton(
        lambda c: HealthCheckEndpoint(
            app_settings=c[AppSettings],
            service_stats=c[ServiceStats],
        )
    )
    container[MetricsEndpoint] = Singleton(
        lambda c: MetricsEndpoint(
            app_settings=c[AppSettings],
            service_stats=c[ServiceStats],
        )
    )
    container[SubServiceEndpoints] = Singleton(lambda: SubServiceEndpoints())
    
    container[APIEndpointConfig] = Singleton(
        lambda c: APIEndpointConfig(
            port=c[AppSettings].PORT,
            enable_docs=not c[AppSettings].is_production,
        )
    )
    container[APIEndpoint] = Singleton(
        lambda c: APIEndpoint(
            config=c[APIEndpointConfig],
            sub_service_endpoints=c[SubServiceEndpoints],
            lifecycle=c[ServiceLifecycle],
        )
    )
    
    return container
