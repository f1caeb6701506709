"""Host Routes — CRUD handlers over the in-memory host store.

Invariants:
    - Input is validated (schemas + api.validation) before a handler runs
    - Each handler performs one store operation, except update (index + replace)
    - Missing ids → HostNotFoundError (404); unexpected failures in create/list
      → InternalServiceError (500, generic message, traceback logged)
    - list: total is the full store size, not the page size

Design Decisions:
    - Store injected via Depends(get_store): tests swap in a fresh store
    - Update merges only the keys the client sent (HostUpdate.changes)
"""

import logging

from fastapi import APIRouter, Depends, Response, status

from hosts_api.api.validation import Pagination, pagination_params, require_host_id
from hosts_api.core.domain_types import HostId
from hosts_api.core.errors import HostNotFoundError, InternalServiceError
from hosts_api.core.host_records import merge_host, new_host
from hosts_api.infrastructure.host_store import HostStore, get_store
from hosts_api.schemas.host import HostCreate, HostPage, HostResponse, HostUpdate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/hosts", tags=["hosts"])


@router.post(
    "", response_model=HostResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_host(
    body: HostCreate, store: HostStore = Depends(get_store),
):
    """Create a host with a freshly generated id."""
    try:
        host = new_host(
            name=body.name,
            document_id=body.document_id,
            phone_number=body.phone_number,
            email=body.email,
        )
        store.append(host)
    except Exception as e:
        logger.error(f"Failed to create host: {e}", exc_info=True)
        raise InternalServiceError("Failed to create host") from e
    logger.info("Host created", extra={"host_id": host.id})
    return HostResponse.from_host(host)


@router.get("", response_model=HostPage)
async def list_hosts(
    pagination: Pagination = Depends(pagination_params),
    store: HostStore = Depends(get_store),
):
    """List hosts in insertion order, paginated by page/limit."""
    try:
        total = store.count()
        items = store.slice(pagination.offset, pagination.limit)
    except Exception as e:
        logger.error(f"Failed to list hosts: {e}", exc_info=True)
        raise InternalServiceError("Failed to list hosts") from e
    return HostPage(
        page=pagination.page,
        limit=pagination.limit,
        total=total,
        items=[HostResponse.from_host(h) for h in items],
    )


@router.get("/{host_id}", response_model=HostResponse)
async def get_host(
    host_id: HostId = Depends(require_host_id),
    store: HostStore = Depends(get_store),
):
    """Get one host by id."""
    host = store.find_by_id(host_id)
    if host is None:
        raise HostNotFoundError(host_id)
    return HostResponse.from_host(host)


@router.put("/{host_id}", response_model=HostResponse)
async def update_host(
    host_id: HostId = Depends(require_host_id),
    body: HostUpdate | None = None,
    store: HostStore = Depends(get_store),
):
    """Merge the supplied fields over the stored host.

    A request without a body is an empty update and returns the host unchanged.
    """
    index = store.index_by_id(host_id)
    if index is None:
        raise HostNotFoundError(host_id)
    current = store.find_by_id(host_id)
    if current is None:
        raise HostNotFoundError(host_id)

    updated = merge_host(current, body.changes() if body else {})
    # replace_at checks the slot id under the lock (concurrent delete → 404)
    if not store.replace_at(index, updated):
        raise HostNotFoundError(host_id)
    logger.info("Host updated", extra={"host_id": host_id})
    return HostResponse.from_host(updated)


@router.delete("/{host_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_host(
    host_id: HostId = Depends(require_host_id),
    store: HostStore = Depends(get_store),
):
    """Remove a host. 404 when nothing was removed."""
    if not store.remove_by_id(host_id):
        raise HostNotFoundError(host_id)
    logger.info("Host deleted", extra={"host_id": host_id})
    return Response(status_code=status.HTTP_204_NO_CONTENT)
