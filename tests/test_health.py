"""Health check endpoint tests."""


async def test_health_check(client):
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["service"] == "atomic-analyzer"
    assert data["version"] == "2.1.0"


async def test_trace_id_echoed(client):
    response = await client.get("/api/v1/health/live", headers={"X-Trace-Id": "trc_abc"})
    assert response.headers["X-Trace-Id"] == "trc_abc"


async def test_trace_id_generated(client):
    response = await client.get("/api/v1/health/live")
    assert response.headers["X-Trace-Id"].startswith("trc_")


async def test_readiness(client):
    response = await client.get("/api/v1/health/ready")
    assert response.status_code == 200
    assert response.json()["checks"] == {"database": "ok", "text_generation": "disabled"}
