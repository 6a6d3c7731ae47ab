"""API Endpoint class for the FastAPI application."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from pydantic_settings import BaseSettings, SettingsConfigDict
from starlette.exceptions import HTTPException as StarletteHTTPException

from voice_relay_bot import LOGGER
from voice_relay_bot.entities.api_schemas import ErrorResponse
from voice_relay_bot.frameworks.api.configs.fastapi_doc import (
    fastapi_information,
    fastapi_tags_metadata,
)
from voice_relay_bot.frameworks.api.registry import SubServiceEndpoints
from voice_relay_bot.frameworks.api.security import client_ip
from voice_relay_bot.frameworks.lifecycle import ServiceLifecycle
from voice_relay_bot.utils.exceptions import CustomHTTPException


class APIEndpointConfig(BaseSettings):
    """Configuration settings for the API endpoint.
    
    Attributes:
        information: Information about the API
        tags_metadata: Tags metadata for OpenAPI
        enable_docs: Whether to serve the OpenAPI documentation
        host: Interface to bind to
        port: Port to run the server on
    """
    
    information: dict = fastapi_information
    tags_metadata: list = fastapi_tags_metadata
    enable_docs: bool = False
    host: str = "0.0.0.0"
    port: int = 8080

    model_config = SettingsConfigDict(env_prefix="API_", extra="ignore")


class APIEndpoint:
    """Main API endpoint class that configures and runs the FastAPI application."""
    
    def __init__(
        self,
        config: APIEndpointConfig,
        sub_service_endpoints: SubServiceEndpoints,
        lifecycle: ServiceLifecycle,
    ) -> None:
        """Initialize the API endpoint.
        
        Args:
            config: API endpoint configuration
            sub_service_endpoints: Registry of endpoint services
            lifecycle: Startup and shutdown hooks
        """
        self.config = config
        self.logger = LOGGER
        self.sub_service_endpoints = sub_service_endpoints
        self.lifecycle = lifecycle
        
        self.rest_api_app = self._create_rest_api_app()
        self._register_sub_service_endpoints()
        
        self.rest_application = self.rest_api_app

    def _create_rest_api_app(self) -> FastAPI:
        """Create and configure the FastAPI application.
        
        Returns:
            Configured FastAPI application
        """
        @asynccontextmanager
        async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
            self.logger.info("Starting API server...")
            await self.lifecycle.startup()
            yield
            self.logger.info("Shutting down API server...")
            await self.lifecycle.shutdown()
        
        docs = {} if self.config.enable_docs else {
            "docs_url": None,
            "redoc_url": None,
            "openapi_url": None,
        }
        app = FastAPI(
            **self.config.information,
            **docs,
            openapi_tags=self.config.tags_metadata,
            lifespan=lifespan,
        )
        
        @app.exception_handler(CustomHTTPException)
        async def custom_http_exception_handler(request: Request, exc: CustomHTTPException):
            return JSONResponse(
                status_code=exc.status_code,
                content=exc.message,
                headers=exc.to_json() or None,
            )
        
        @app.exception_handler(StarletteHTTPException)
        async def http_exception_handler(request: Request, exc: StarletteHTTPException):
            if exc.status_code == status.HTTP_404_NOT_FOUND:
                return JSONResponse(
                    status_code=status.HTTP_404_NOT_FOUND,
                    content=ErrorResponse(
                        error="not_found",
                        message="Endpoint not found",
                    ).model_dump(),
                )
            return JSONResponse(
                status_code=exc.status_code,
                content={"detail": exc.detail},
                headers=getattr(exc, "headers", None),
            )
        
        @app.exception_handler(Exception)
        async def unhandled_exception_handler(request: Request, exc: Exception):
            self.logger.error(
                f"Unhandled exception in request {request.url.path} from {client_ip(request)}",
                exc_info=exc,
            )
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content=ErrorResponse(
                    error="internal_error",
                    message="Internal server error occurred",
                ).model_dump(),
            )
        
        return app

    def _register_sub_service_endpoints(self) -> None:
        for endpoint in self.sub_service_endpoints.endpoints:
            self.rest_api_app.include_router(endpoint.create_rest_api_route())
    
    def run(self) -> None:
        """Run the FastAPI application with Uvicorn."""
        self.logger.info(f"Starting API Endpoint on {self.config.host}:{self.config.port}")
        uvicorn.run(
            self.rest_application,
            host=self.config.host,
            port=self.config.port,
            log_level="info",
        )
