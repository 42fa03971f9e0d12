"""Health Probes — liveness always up, readiness follows the database."""

from webae import SERVICE_NAME, __version__
import webae.infrastructure.database as db_module


async def test_liveness(client):
    res = await client.get("/api/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_with_database(client):
    res = await client.get("/api/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"]["database"] == "healthy"


async def test_readiness_without_database(client, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    res = await client.get("/api/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"


async def test_liveness_reports_service_and_version(client):
    body = (await client.get("/api/health/")).json()
    assert body["service"] == SERVICE_NAME
    assert body["version"] == __version__
