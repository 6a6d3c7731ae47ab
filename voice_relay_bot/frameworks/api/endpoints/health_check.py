"""Health check endpoint for API service."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from voice_relay_bot import __version__
from voice_relay_bot.entities.api_schemas import HealthResponse
from voice_relay_bot.frameworks.api.base_endpoint import ServiceAPIEndpointBluePrint
from voice_relay_bot.frameworks.api.security import admin_token_guard
from voice_relay_bot.frameworks.api.service_stats import ServiceStats
from voice_relay_bot.settings.app_settings import AppSettings


class HealthCheckEndpoint(ServiceAPIEndpointBluePrint):
    """Admin-only health check endpoint."""
    
    def __init__(self, app_settings: AppSettings, service_stats: ServiceStats):
        self.app_settings = app_settings
        self.service_stats = service_stats
    
    def create_rest_api_route(self) -> APIRouter:
        """Create and configure the API router for health checks.
        
        Returns:
            Configured APIRouter for health check endpoints
        """
        api_route = APIRouter(
            prefix="/health",
            tags=["Admin"],
            dependencies=[Depends(admin_token_guard(self.app_settings.ADMIN_HTTP_TOKEN))],
        )
        
        @api_route.get(
            "",
            summary="Health check endpoint",
            description="Returns the current status of the service",
            response_model=HealthResponse,
        )
        async def health_check() -> HealthResponse:
            return HealthResponse(
                status="ok",
                uptime_seconds=self.service_stats.uptime_seconds(),
                version=__version__,
            )
        
        return api_route
