"""Request helpers shared by the API endpoints."""

from __future__ import annotations

import hmac
from typing import Awaitable, Callable, Optional

from fastapi import Header, Request, status
from pydantic import SecretStr

from voice_relay_bot.entities.api_schemas import ErrorResponse
from voice_relay_bot.utils.exceptions import CustomHTTPException


def tokens_match(provided: Optional[str], expected: SecretStr) -> bool:
    if provided is None:
        return False
    return hmac.compare_digest(
        provided.encode("utf-8"),
        expected.get_secret_value().encode("utf-8"),
    )


def client_ip(request: Request) -> str:
    """Real client address behind the reverse proxy.

    X-Forwarded-For reads "client, proxy1, proxy2"; the first entry is the client.
    """
    forwarded_for = request.headers.get("x-forwarded-for")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()
    if request.client is not None:
        return request.client.host
    return "unknown"


def admin_token_guard(expected_token: SecretStr) -> Callable[..., Awaitable[None]]:
    """Build a dependency that rejects requests without the admin token.
    
    Args:
        expected_token: The configured admin token
        
    Returns:
        FastAPI dependency raising 401 on mismatch
    """
    async def verify_admin_token(x_admin_token: Optional[str] = Header(None)) -> None:
        if not tokens_match(x_admin_token, expected_token):
            raise CustomHTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                message=ErrorResponse(
                    error="unauthorized",
                    message="Invalid admin token",
                ).model_dump(),
            )

    return verify_admin_token
