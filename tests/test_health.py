def test_health_check_ok(client):
    response = client.get("/health-check")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["info"]["database"]["status"] == "up"
    assert body["info"]["better-auth"]["message"] == "Better Auth is properly configured"


def test_health_check_without_auth_secret(client, monkeypatch):
    from librestock.core.config import settings

    monkeypatch.setattr(settings, "BETTER_AUTH_SECRET", None)

    response = client.get("/health-check")

    assert response.status_code == 503
    body = response.json()
    assert body["status"] == "error"
    assert body["error"]["better-auth"]["message"] == "BETTER_AUTH_SECRET is not configured"
    assert body["info"]["database"]["status"] == "up"


def test_liveness(client):
    response = client.get("/health-check/live")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_readiness_ignores_auth(client, monkeypatch):
    from librestock.core.config import settings

    monkeypatch.setattr(settings, "BETTER_AUTH_SECRET", None)

    response = client.get("/health-check/ready")

    assert response.status_code == 200
    assert response.json()["info"]["database"]["status"] == "up"


def test_health_is_outside_api_prefix(client):
    assert client.get("/api/v1/health-check").status_code == 404
