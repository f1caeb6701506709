"""Create Host — POST /hosts validation and record construction.

Invariants:
    - Valid payload → 201 with a fresh, non-empty, unique id
    - Missing/blank name → 400 VALIDATION_ERROR listing a `name` error
    - Malformed or whitespace-only email → 400; well-formed email stored trimmed
    - Optional fields trimmed; blank optional fields stored as null
"""

import pytest


async def test_create_returns_201_with_record(client, sample_host):
    res = await client.post("/hosts", json=sample_host)
    assert res.status_code == 201
    data = res.json()
    assert data["id"]
    assert data["name"] == "Ana Gómez"
    assert data["documentId"] == "CC-1020"
    assert data["phoneNumber"] == "3001234567"
    assert data["email"] == "ana@example.com"


async def test_create_generates_unique_ids(client):
    ids = set()
    for i in range(5):
        res = await client.post("/hosts", json={"name": f"Guest {i}"})
        ids.add(res.json()["id"])
    assert len(ids) == 5
    assert "demo-1" not in ids


async def test_create_appends_to_store(client, store):
    res = await client.post("/hosts", json={"name": "Luis"})
    assert store.count() == 2
    assert store.snapshot()[-1].id == res.json()["id"]


async def test_create_with_only_name_sets_optionals_null(client):
    res = await client.post("/hosts", json={"name": "Luis"})
    assert res.status_code == 201
    data = res.json()
    assert data["documentId"] is None
    assert data["phoneNumber"] is None
    assert data["email"] is None


async def test_create_trims_fields(client):
    res = await client.post("/hosts", json={
        "name": "  Marta  ",
        "documentId": " 99 ",
        "phoneNumber": "  ",
        "email": "  a@b.com ",
    })
    assert res.status_code == 201
    data = res.json()
    assert data["name"] == "Marta"
    assert data["documentId"] == "99"
    assert data["phoneNumber"] is None
    assert data["email"] == "a@b.com"


@pytest.mark.parametrize("payload", [
    {},
    {"name": ""},
    {"name": "   "},
    {"name": None},
    {"documentId": "123"},
])
async def test_create_without_name_returns_validation_error(client, payload):
    res = await client.post("/hosts", json=payload)
    assert res.status_code == 400
    body = res.json()
    assert body["error"] == "VALIDATION_ERROR"
    fields = [e["field"] for e in body["errors"]]
    assert "name" in fields
    name_error = next(e for e in body["errors"] if e["field"] == "name")
    assert name_error["location"] == "body"
    assert name_error["message"]
    # Missing key reports null, not the whole body
    assert name_error["value"] == payload.get("name")


@pytest.mark.parametrize("email", ["not-an-email", "   "])
async def test_create_rejects_malformed_email(client, email):
    res = await client.post("/hosts", json={"name": "Ana", "email": email})
    assert res.status_code == 400
    errors = res.json()["errors"]
    assert len(errors) == 1
    assert errors[0]["field"] == "email"
    assert errors[0]["value"] == email
    assert errors[0]["location"] == "body"
    assert "email" in errors[0]["message"]


async def test_create_aggregates_all_failures(client):
    res = await client.post("/hosts", json={"name": " ", "email": "nope"})
    assert res.status_code == 400
    fields = sorted(e["field"] for e in res.json()["errors"])
    assert fields == ["email", "name"]


async def test_create_rejects_non_string_name(client):
    res = await client.post("/hosts", json={"name": 42})
    assert res.status_code == 400
    assert res.json()["errors"][0]["field"] == "name"
    assert res.json()["errors"][0]["value"] == 42


async def test_create_rejects_malformed_json(client):
    res = await client.post(
        "/hosts", content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 400
    body = res.json()
    assert body["error"] == "VALIDATION_ERROR"
    assert body["errors"][0]["location"] == "body"


async def test_failed_create_does_not_touch_store(client, store):
    await client.post("/hosts", json={"name": ""})
    assert store.count() == 1
