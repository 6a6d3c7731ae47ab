"""Metrics endpoint for API service."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from voice_relay_bot.entities.api_schemas import MetricsResponse
from voice_relay_bot.frameworks.api.base_endpoint import ServiceAPIEndpointBluePrint
from voice_relay_bot.frameworks.api.security import admin_token_guard
from voice_relay_bot.frameworks.api.service_stats import ServiceStats
from voice_relay_bot.settings.app_settings import AppSettings


class MetricsEndpoint(ServiceAPIEndpointBluePrint):
    """Admin-only request counters."""
    
    def __init__(self, app_settings: AppSettings, service_stats: ServiceStats):
        self.app_settings = app_settings
        self.service_stats = service_stats
    
    def create_rest_api_route(self) -> APIRouter:
        api_route = APIRouter(
            prefix="/metrics",
            tags=["Admin"],
            dependencies=[Depends(admin_token_guard(self.app_settings.ADMIN_HTTP_TOKEN))],
        )
        
        @api_route.get(
            "",
            summary="Service metrics",
            description="Returns webhook request counters and uptime",
            response_model=MetricsResponse,
        )
        async def metrics() -> MetricsResponse:
            return MetricsResponse(
                total_requests=self.service_stats.total_requests,
                rejected_requests=self.service_stats.rejected_requests,
                uptime_seconds=self.service_stats.uptime_seconds(),
            )
        
        return api_route
