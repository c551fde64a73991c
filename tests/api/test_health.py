"""Health & Readiness — liveness always 200, readiness follows the store ping."""

import user_service.infrastructure.database as db_module


class _Manager:
    def __init__(self, healthy):
        self._healthy = healthy

    async def health_check(self):
        return self._healthy


async def test_liveness_returns_200(client):
    res = await client.get("/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_503_before_startup(client, monkeypatch):
    monkeypatch.setattr(db_module, "mongo_manager", None)
    res = await client.get("/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "store_unavailable"


async def test_readiness_503_when_ping_fails(client, monkeypatch):
    monkeypatch.setattr(db_module, "mongo_manager", _Manager(False))
    res = await client.get("/health/ready")
    assert res.status_code == 503


async def test_readiness_200_when_store_healthy(client, monkeypatch):
    monkeypatch.setattr(db_module, "mongo_manager", _Manager(True))
    res = await client.get("/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"] == {"store": "healthy"}
