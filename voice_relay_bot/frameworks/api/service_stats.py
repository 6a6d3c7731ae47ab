"""Process-wide counters reported by the admin endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Optional


class ServiceStats:
    """Request counters and uptime.

    Mutated only from the event loop thread.
    """

    def __init__(self, start_time: Optional[datetime] = None):
        self.start_time = start_time or datetime.now()
        self.total_requests = 0
        self.rejected_requests = 0

    def record_request(self) -> None:
        self.total_requests += 1

    def record_rejection(self) -> None:
        self.rejected_requests += 1

    def uptime_seconds(self) -> int:
        return int((datetime.now() - self.start_time).total_seconds())
