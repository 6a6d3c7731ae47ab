from __future__ import annotations

import re

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict

URL_SAFE_PATTERN = re.compile(r"[A-Za-z0-9_-]+")
MIN_WEBHOOK_PATH_LENGTH = 32
MIN_WEBHOOK_SECRET_LENGTH = 64


class TelegramConnectionSettings(BaseSettings):
    BOT_TOKEN: SecretStr = Field(description="Telegram Bot Token")
    ADMIN_ID: int = Field(description="Telegram user id of the bot administrator", repr=False)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="TELEGRAM_",
        extra="ignore",
    )


class TelegramWebhookSettings(BaseSettings):
    PATH: SecretStr = Field(description="Secret path segment the webhook is served under")
    SECRET: SecretStr = Field(
        description="Value Telegram sends in X-Telegram-Bot-Api-Secret-Token",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="WEBHOOK_",
        extra="ignore",
    )

    @field_validator("PATH")
    @classmethod
    def validate_path(cls, value: SecretStr) -> SecretStr:
        path = value.get_secret_value()
        if len(path) < MIN_WEBHOOK_PATH_LENGTH:
            raise ValueError(
                f"WEBHOOK_PATH should be at least {MIN_WEBHOOK_PATH_LENGTH} characters for security"
            )
        if not URL_SAFE_PATTERN.fullmatch(path):
            raise ValueError(
                "WEBHOOK_PATH must contain only alphanumeric characters, underscores, and hyphens"
            )
        return value

    @field_validator("SECRET")
    @classmethod
    def validate_secret(cls, value: SecretStr) -> SecretStr:
        if len(value.get_secret_value().strip()) < MIN_WEBHOOK_SECRET_LENGTH:
            raise ValueError(
                f"WEBHOOK_SECRET should be at least {MIN_WEBHOOK_SECRET_LENGTH} characters for security"
            )
        return value
