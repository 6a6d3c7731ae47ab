"""Application container for the voice relay bot."""

from __future__ import annotations

from typing import Optional

from lagom import Container

from voice_relay_bot import LOGGER
from voice_relay_bot.config_dependency_injection import configure_container
from voice_relay_bot.frameworks.api.endpoints import (
    HealthCheckEndpoint,
    MetricsEndpoint,
    TelegramWebhookEndpoint,
)
from voice_relay_bot.frameworks.api.registry import SubServiceEndpoints
from voice_relay_bot.settings import ServiceSettings, load_settings


# Global container instance
_container: Optional[Container] = None


def get_container() -> Container:
    """Get the global container instance.
    
    Returns:
        The configured container
        
    Raises:
        ConfigurationError: If the settings cannot be loaded
    """
    global _container
    if _container is None:
        _container = setup_container(load_settings())
    return _container


def setup_container(settings: ServiceSettings) -> Container:
    """Set up and configure the application container.
    
    Args:
        settings: Loaded service settings
    
    Returns:
        Fully configured container with all endpoints registered
    """
    container = configure_container(settings)
    
    registry = container.resolve(SubServiceEndpoints)
    registry.register(container.resolve(TelegramWebhookEndpoint))
    registry.register(container.resolve(HealthCheckEndpoint))
    registry.register(container.resolve(MetricsEndpoint))
    
    LOGGER.info(f"Container configured for environment '{settings.app.ENV}'")
    return container
