"""Health Probes — liveness ignores the database, readiness reflects it.

Invariants:
    - GET /api/health → 200 {"ok": true} whatever the database state
    - GET /api/health/ready → 503 when ping fails
"""

from pymongo.errors import ServerSelectionTimeoutError


async def test_health_returns_ok(client):
    res = await client.get("/api/health")

    assert res.status_code == 200
    assert res.json() == {"ok": True}


async def test_health_with_trailing_slash(client):
    res = await client.get("/api/health/")

    assert res.status_code == 200
    assert res.json() == {"ok": True}


async def test_health_ok_while_database_down(client, fake_db):
    fake_db.command_error = ServerSelectionTimeoutError("no servers")
    fake_db["newsletters"].error = ServerSelectionTimeoutError("no servers")

    res = await client.get("/api/health")

    assert res.status_code == 200
    assert res.json() == {"ok": True}


async def test_health_ok_without_store(bare_client):
    res = await bare_client.get("/api/health")

    assert res.status_code == 200
    assert res.json() == {"ok": True}


async def test_ready_when_database_answers(client):
    res = await client.get("/api/health/ready")

    assert res.status_code == 200
    assert res.json() == {"ok": True, "database": "reachable"}


async def test_not_ready_when_database_down(client, fake_db):
    fake_db.command_error = ServerSelectionTimeoutError("no servers")

    res = await client.get("/api/health/ready")

    assert res.status_code == 503
    assert res.json() == {"ok": False, "reason": "database_unavailable"}


async def test_cors_allows_any_origin_by_default(client):
    res = await client.get(
        "/api/health", headers={"Origin": "http://elsewhere.example"},
    )

    assert res.headers["access-control-allow-origin"] == "*"
