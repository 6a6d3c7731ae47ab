"""FastAPI configuration settings."""

from __future__ import annotations

from typing import Dict, List, Any

from voice_relay_bot import __version__

# FastAPI information dictionary
fastapi_information: Dict[str, Any] = {
    "title": "Voice Relay Bot API",
    "description": "Webhook receiver for the voice relay Telegram bot",
    "version": __version__,
}

# FastAPI tags metadata for API documentation
fastapi_tags_metadata: List[Dict[str, str]] = [
    {
        "name": "Webhooks",
        "description": "Endpoint receiving Telegram webhook updates",
    },
    {
        "name": "Admin",
        "description": "Health and metrics endpoints, guarded by the admin token",
    },
]
