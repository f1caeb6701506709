"""Host Store — ordered, process-local collection of host records.

Invariants:
    - Iteration order is insertion order; replace_at keeps a record's position
    - Every public method holds the lock for its whole body (atomic per call)
    - No public method calls another while holding the lock (Lock is not re-entrant)
    - Contents are lost on restart — nothing is persisted

Design Decisions:
    - Explicit threading.Lock instead of relying on the event loop: handlers
      may run on worker threads, correctness must not depend on scheduling
    - Singleton host_store initialized on startup: FastAPI lifespan manages
      lifecycle, get_store is the injection seam (overridden in tests)
    - Linear scans: the collection is small, an index would only add state
"""

import logging
import threading

from hosts_api.core.domain_types import HostId
from hosts_api.core.host_records import Host, demo_host

logger = logging.getLogger(__name__)


class HostStore:
    """In-memory list of hosts guarded by a single mutex."""

    def __init__(self, hosts: list[Host] | None = None):
        self._hosts: list[Host] = list(hosts or [])
        self._lock = threading.Lock()

    def append(self, host: Host) -> None:
        with self._lock:
            self._hosts.append(host)

    def find_by_id(self, host_id: HostId) -> Host | None:
        with self._lock:
            return next((h for h in self._hosts if h.id == host_id), None)

    def index_by_id(self, host_id: HostId) -> int | None:
        with self._lock:
            for i, h in enumerate(self._hosts):
                if h.id == host_id:
                    return i
            return None

    def at(self, index: int) -> Host | None:
        with self._lock:
            if 0 <= index < len(self._hosts):
                return self._hosts[index]
            return None

    def slice(self, offset: int, count: int) -> list[Host]:
        """Return up to `count` hosts starting at `offset`; empty past the end."""
        if offset < 0 or count < 0:
            raise ValueError("offset and count must be non-negative")
        with self._lock:
            return self._hosts[offset:offset + count]

    def replace_at(self, index: int, host: Host) -> bool:
        """Write `host` back at `index` if that slot still holds the same id.

        Returns False when the slot no longer holds that record (removed
        between index_by_id and this call).
        """
        with self._lock:
            if index >= len(self._hosts) or self._hosts[index].id != host.id:
                return False
            self._hosts[index] = host
            return True

    def remove_by_id(self, host_id: HostId) -> bool:
        """Drop the matching host. Returns whether anything was removed."""
        with self._lock:
            before = len(self._hosts)
            self._hosts = [h for h in self._hosts if h.id != host_id]
            return len(self._hosts) != before

    def count(self) -> int:
        with self._lock:
            return len(self._hosts)

    def snapshot(self) -> list[Host]:
        with self._lock:
            return list(self._hosts)


# Singleton (initialized on startup)
host_store: HostStore | None = None


def init_store(seed: bool = True) -> HostStore:
    global host_store
    host_store = HostStore([demo_host()] if seed else [])
    logger.info(f"Host store initialized with {host_store.count()} record(s)")
    return host_store


def get_store() -> HostStore:
    """FastAPI dependency for the host store."""
    if host_store is None:
        raise RuntimeError("Host store not initialized")
    return host_store
