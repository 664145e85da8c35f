"""Health Probe — verifies GET /health against reachable and unreachable databases."""


async def test_health_ok(client):
    res = await client.get("/health")
    assert res.status_code == 200
    assert res.text == "OK"


async def test_health_database_down(client, services, monkeypatch):
    async def unreachable():
        return False

    monkeypatch.setattr(services.database, "health_check", unreachable)
    res = await client.get("/health")
    assert res.status_code == 503
    assert res.text == "Database connection error"
