"""Telegram webhook endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse

from voice_relay_bot import LOGGER
from voice_relay_bot.entities.api_schemas import WebhookResponse
from voice_relay_bot.frameworks.api.base_endpoint import ServiceAPIEndpointBluePrint
from voice_relay_bot.frameworks.api.security import client_ip, tokens_match
from voice_relay_bot.frameworks.api.service_stats import ServiceStats
from voice_relay_bot.settings.telegram_settings import TelegramWebhookSettings
from voice_relay_bot.use_cases.interfaces.telegram_webhook_handler_interface import (
    TelegramWebhookHandlerInterface,
)

SECRET_TOKEN_HEADER = "X-Telegram-Bot-Api-Secret-Token"


class TelegramWebhookEndpoint(ServiceAPIEndpointBluePrint):
    """API endpoint receiving Telegram webhook updates.

    The secret check is the only path that answers with a failure status;
    everything past it is acknowledged with 200 by the webhook handler.
    """
    
    def __init__(
        self,
        webhook_handler: TelegramWebhookHandlerInterface,
        webhook_settings: TelegramWebhookSettings,
        service_stats: ServiceStats,
    ):
        """Initialize the endpoint.
        
        Args:
            webhook_handler: Use case processing the raw update
            webhook_settings: Webhook path and secret
            service_stats: Request counters
        """
        self.webhook_handler = webhook_handler
        self.webhook_settings = webhook_settings
        self.service_stats = service_stats
    
    def create_rest_api_route(self) -> APIRouter:
        """Create and configure the API router for the Telegram webhook.
        
        Returns:
            Configured APIRouter for the webhook endpoint
        """
        api_route = APIRouter(
            prefix="/webhook",
            tags=["Webhooks"]
        )
        
        @api_route.post(
            f"/{self.webhook_settings.PATH.get_secret_value()}",
            summary="Handle Telegram webhook updates",
            description="Receives a Telegram update and acknowledges it",
            response_model=WebhookResponse,
        )
        async def telegram_webhook(request: Request):
            self.service_stats.record_request()
            provided_secret = request.headers.get(SECRET_TOKEN_HEADER)
            if not tokens_match(provided_secret, self.webhook_settings.SECRET):
                self.service_stats.record_rejection()
                LOGGER.warning(f"Invalid webhook secret from {client_ip(request)}")
                return Response(status_code=status.HTTP_401_UNAUTHORIZED)

            request_body = await request.body()
            result = await self.webhook_handler.handle(request_body, request.headers)
            return JSONResponse(content=result.to_body())
        
        return api_route
