"""Health Probes: liveness is unconditional, readiness follows the database.

Tests cover:
    - GET /health_check returns 200 with a zero-length body
    - Liveness holds even with no database configured
    - GET /health_check/ready reports database state
"""

from httpx import ASGITransport, AsyncClient

import newsletter.infrastructure.database as db_module
from newsletter.main import app


async def test_health_check_works(client):
    res = await client.get("/health_check")
    assert res.status_code == 200
    assert res.headers["content-length"] == "0"
    assert res.content == b""


async def test_health_check_without_database(monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        res = await c.get("/health_check")
    assert res.status_code == 200
    assert res.content == b""


async def test_readiness_ok_when_database_reachable(client):
    res = await client.get("/health_check/ready")
    assert res.status_code == 200
    assert res.json() == {"status": "ready", "checks": {"database": "healthy"}}


async def test_readiness_503_without_database(monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        res = await c.get("/health_check/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"


async def test_health_check_rejects_post(client):
    res = await client.post("/health_check")
    assert res.status_code == 405
