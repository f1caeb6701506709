"""Health & Readiness Probes — liveness and readiness endpoints.

Invariants:
    - GET /health always returns 200 if the process is up (liveness)
    - GET /health/ready returns 503 if the host store is not initialized

Design Decisions:
    - Separate liveness/readiness: liveness restarts, readiness removes from
      the load balancer
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from hosts_api.config import Settings, get_settings
from hosts_api.infrastructure import host_store as store_module
from hosts_api.schemas.health import HealthResponse, ReadinessResponse

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_settings)):
    """Basic liveness probe. Returns 200 if the process is up."""
    return HealthResponse(
        ok=True,
        service=settings.service_name,
        timestamp=datetime.now(timezone.utc),
    )


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={status.HTTP_503_SERVICE_UNAVAILABLE: {}},
)
async def readiness_check():
    """Readiness probe — the host store must be initialized."""
    if store_module.host_store is None:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"ok": False, "reason": "store_unavailable"},
        )
    return ReadinessResponse(ok=True, checks={"store": "ready"})
