"""API test fixtures — fresh host store + FastAPI test client.

Invariants:
    - Every test gets a fresh store seeded with the demo host
    - get_store dependency overridden to use that store
    - The module-level singleton is patched too, so readiness sees a store

Design Decisions:
    - httpx ASGITransport: no network, lifespan not run — the fixture does the
      wiring the lifespan would do
"""

import pytest
from httpx import ASGITransport, AsyncClient

import hosts_api.infrastructure.host_store as store_module
from hosts_api.core.host_records import demo_host
from hosts_api.infrastructure.host_store import HostStore, get_store
from hosts_api.main import app


@pytest.fixture
def store():
    return HostStore([demo_host()])


@pytest.fixture
async def client(store, monkeypatch):
    """FastAPI test client with the store dependency overridden."""
    app.dependency_overrides[get_store] = lambda: store
    monkeypatch.setattr(store_module, "host_store", store)

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def sample_host():
    """A valid host payload."""
    return {
        "name": "Ana Gómez",
        "documentId": "CC-1020",
        "phoneNumber": "3001234567",
        "email": "ana@example.com",
    }
