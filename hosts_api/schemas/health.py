"""Health Schemas — liveness and readiness payloads."""

from datetime import datetime

from pydantic import BaseModel


class HealthResponse(BaseModel):
    ok: bool = True
    service: str
    timestamp: datetime


class ReadinessResponse(BaseModel):
    ok: bool = True
    checks: dict[str, str]
