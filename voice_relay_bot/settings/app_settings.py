from __future__ import annotations

from typing import Literal

from pydantic import Field, SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict

from voice_relay_bot import LOGGER

PRODUCTION_ENV = "prod"
PROXY_PORT = 8080
MIN_ADMIN_TOKEN_LENGTH = 32


class AppSettings(BaseSettings):
    """Process-wide service settings.

    ``ENABLE_TEST_ACKS`` is refused outright in production: the service will
    not start with that combination.
    """

    ENV: Literal["staging", "prod"] = Field(
        default="staging", description="Deployment environment"
    )
    PORT: int = Field(default=PROXY_PORT, ge=1, le=65535, description="HTTP port")
    ENABLE_TEST_ACKS: bool = Field(
        default=False,
        description="Reply to every classified update with a short acknowledgment",
    )
    ADMIN_HTTP_TOKEN: SecretStr = Field(
        description="Token expected in X-Admin-Token for /health and /metrics",
    )
    ACK_SEND_TIMEOUT: float = Field(
        default=10.0,
        gt=0,
        description="Upper bound in seconds for one acknowledgment send",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def is_production(self) -> bool:
        return self.ENV == PRODUCTION_ENV

    @field_validator("ADMIN_HTTP_TOKEN")
    @classmethod
    def validate_admin_token(cls, value: SecretStr) -> SecretStr:
        if len(value.get_secret_value()) < MIN_ADMIN_TOKEN_LENGTH:
            raise ValueError(
                f"ADMIN_HTTP_TOKEN should be at least {MIN_ADMIN_TOKEN_LENGTH} characters for security"
            )
        return value

    @model_validator(mode="after")
    def check_production_rails(self) -> "AppSettings":
        if not self.is_production:
            return self
        if self.ENABLE_TEST_ACKS:
            raise ValueError(
                "ENABLE_TEST_ACKS must be disabled (false) in production environment for security"
            )
        if self.PORT != PROXY_PORT:
            LOGGER.warning(
                f"PORT is set to {self.PORT} in production environment, but the reverse proxy "
                f"expects {PROXY_PORT}. This may break internal routing."
            )
        return self
