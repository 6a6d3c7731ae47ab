"""API schema models for the webhook endpoint."""

from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, Field


class WebhookResponse(BaseModel):
    """Acknowledgment returned to the webhook caller.

    Args:
        status: Response status, always "ok" for processed or dropped updates
    """
    status: str = Field(description="Status of the webhook processing")

    def to_body(self) -> Dict[str, Any]:
        return self.model_dump()
