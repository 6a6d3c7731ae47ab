"""Base blueprint for API endpoints."""

from __future__ import annotations

from abc import ABC, abstractmethod

from fastapi import APIRouter


class ServiceAPIEndpointBluePrint(ABC):
    """Contract for the routers collected by ``SubServiceEndpoints``.

    Endpoints receive their collaborators in the constructor and only build
    the router when ``APIEndpoint`` asks for it.
    """
    
    @abstractmethod
    def create_rest_api_route(self) -> APIRouter:
        """Build the router serving this endpoint.
        
        Returns:
            APIRouter with its prefix, tags and handlers set
        """
