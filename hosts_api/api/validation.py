"""Request Rules — path and query checks that run before host handlers.

Invariants:
    - Every failed rule surfaces as RequestValidationError (one 400 shape for
      path, query and body)
    - Path ids are trimmed before lookup; blank ids never reach the store
    - limit ∈ [1, MAX_PAGE_SIZE], page ≥ 1; offset derived, never client-supplied

Design Decisions:
    - FastAPI dependencies over middleware: rules are declared per route and
      visible in the OpenAPI schema
    - Query bounds via Query(ge, le): FastAPI aggregates query errors with body
      errors into a single RequestValidationError
"""

from dataclasses import dataclass

from fastapi import Path, Query
from fastapi.exceptions import RequestValidationError

from hosts_api.core.domain_types import (
    DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, HostId, RequestLocation,
)


@dataclass(frozen=True)
class Pagination:
    page: int
    limit: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


def require_host_id(host_id: str = Path(description="Host identifier")) -> HostId:
    """Trim the path id and reject it when blank."""
    cleaned = host_id.strip()
    if not cleaned:
        raise RequestValidationError([{
            "type": "string_too_short",
            "loc": (RequestLocation.PATH.value, "id"),
            "msg": "Host id is required",
            "input": host_id,
        }])
    return HostId(cleaned)


def pagination_params(
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    page: int = Query(1, ge=1),
) -> Pagination:
    return Pagination(page=page, limit=limit)
