"""Settings loading for the voice relay bot."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple, Type

from pydantic import ValidationError
from pydantic_settings import BaseSettings

from voice_relay_bot.settings.app_settings import AppSettings
from voice_relay_bot.settings.telegram_settings import TelegramConnectionSettings
from voice_relay_bot.settings.telegram_settings import TelegramWebhookSettings
from voice_relay_bot.utils.exceptions import ConfigurationError


MASKED = "***MASKED***"


@dataclass(frozen=True)
class ServiceSettings:
    telegram: TelegramConnectionSettings
    webhook: TelegramWebhookSettings
    app: AppSettings

    def describe(self) -> str:
        """One-line summary for the startup log, with identifiers and secrets masked."""
        return (
            f"env={self.app.ENV}, port={self.app.PORT}, "
            f"enable_test_acks={self.app.ENABLE_TEST_ACKS}, "
            f"ack_send_timeout={self.app.ACK_SEND_TIMEOUT}, "
            f"telegram_bot_token={MASKED}, telegram_admin_id={MASKED}, "
            f"webhook_path={MASKED}, webhook_secret={MASKED}, admin_http_token={MASKED}"
        )


_SETTINGS_CLASSES: Tuple[Tuple[str, Type[BaseSettings]], ...] = (
    ("telegram", TelegramConnectionSettings),
    ("webhook", TelegramWebhookSettings),
    ("app", AppSettings),
)


def _describe_errors(settings_cls: Type[BaseSettings], error: ValidationError) -> List[str]:
    prefix = settings_cls.model_config.get("env_prefix", "")
    messages = []
    for detail in error.errors():
        location = detail.get("loc") or ()
        name = f"{prefix}{location[0]}".upper() if location else settings_cls.__name__
        messages.append(f"{name}: {detail['msg']}")
    return messages


def load_settings(env_file: Optional[str] = ".env") -> ServiceSettings:
    """Load every settings class, reporting all problems at once.

    Args:
        env_file: Dotenv file to read in addition to the environment, or None

    Returns:
        Bundle of the loaded settings

    Raises:
        ConfigurationError: If any variable is missing or invalid
    """
    errors: List[str] = []
    loaded = {}
    for key, settings_cls in _SETTINGS_CLASSES:
        try:
            loaded[key] = settings_cls(_env_file=env_file)
        except ValidationError as e:
            errors.extend(_describe_errors(settings_cls, e))

    if errors:
        raise ConfigurationError(errors)
    return ServiceSettings(**loaded)


__all__ = [
    "AppSettings",
    "ConfigurationError",
    "ServiceSettings",
    "TelegramConnectionSettings",
    "TelegramWebhookSettings",
    "load_settings",
]
