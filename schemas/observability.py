"""Observability schemas for Okta API calls."""

from __future__ import annotations

from datetime import datetime
from uuid import uuid4

from pydantic import BaseModel, Field


class CallRecord(BaseModel):
    """Record of a single HTTP call made against the Okta API."""

    call_id: str = Field(default_factory=lambda: str(uuid4()))
    timestamp: datetime = Field(default_factory=datetime.utcnow)
    method: str = ""
    endpoint: str = ""
    url: str = ""
    status_code: int | None = None  # None when the request never got a response
    latency_ms: float = 0.0
    success: bool = True
    error_message: str = ""
