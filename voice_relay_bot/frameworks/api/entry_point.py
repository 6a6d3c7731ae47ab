"""FastAPI application entry point."""

from __future__ import annotations

from fastapi import FastAPI

from voice_relay_bot.app_container import get_container
from voice_relay_bot.frameworks.api.api_endpoint import APIEndpoint


def create_app() -> FastAPI:
    """Build the FastAPI application from the configured container.
    
    Returns:
        The FastAPI application, for ``uvicorn --factory``
    """
    return get_container()[APIEndpoint].rest_application
