"""Health endpoint tests."""


def test_health_returns_ok(client):
    """GET /health needs no auth and returns { status: ok }."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
