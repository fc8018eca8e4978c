import pytest


@pytest.mark.asyncio
async def test_root_welcome(client):
    resp = await client.get("/")
    assert resp.status_code == 200
    assert "Historical monuments" in resp.text


@pytest.mark.asyncio
async def test_health_endpoint(client):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"


@pytest.mark.asyncio
async def test_db_health(client):
    resp = await client.get("/ops/db-health")
    assert resp.status_code == 200
    assert resp.json() == {"db_ok": True}


@pytest.mark.asyncio
async def test_openapi_json(client):
    resp = await client.get("/openapi.json")
    assert resp.status_code == 200
    paths = resp.json()["paths"]
    assert "/gallery/{monument_id}" in paths
    assert "/public/latest3/" in paths


@pytest.mark.asyncio
async def test_security_headers_and_request_id(client):
    resp = await client.get("/health", headers={"x-request-id": "abc123"})
    assert resp.headers["x-request-id"] == "abc123"
    assert resp.headers["x-frame-options"] == "DENY"
