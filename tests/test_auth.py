from datetime import timedelta

from jose import jwt

from librestock.core.jwt import create_access_token

from conftest import API


def test_missing_token(client):
    response = client.get(f"{API}/categories")

    assert response.status_code == 401
    detail = response.json()["detail"]
    assert detail["error_type"] == "token_missing"
    assert detail["message"] == "No authorization token provided"
    assert detail["retryable"] is False


def test_expired_token(client):
    token = create_access_token({"sub": "user-1"}, expires_delta=timedelta(seconds=-30))

    response = client.get(f"{API}/categories", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
    detail = response.json()["detail"]
    assert detail["error_type"] == "token_expired"
    assert detail["retryable"] is True


def test_token_signed_with_other_secret(client):
    token = jwt.encode({"sub": "user-1"}, "some-other-secret", algorithm="HS256")

    response = client.get(f"{API}/categories", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
    assert response.json()["detail"]["error_type"] == "token_invalid"


def test_token_without_subject(client):
    token = create_access_token({"sid": "session-only"})

    response = client.get(f"{API}/categories", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
    assert response.json()["detail"]["message"] == "Invalid token payload"


def test_missing_secret_is_configuration_error(client, auth_headers, monkeypatch):
    from librestock.core.config import settings

    monkeypatch.setattr(settings, "BETTER_AUTH_SECRET", None)

    response = client.get(f"{API}/categories", headers=auth_headers)

    assert response.status_code == 401
    assert response.json()["detail"]["error_type"] == "configuration_error"


def test_valid_token(client, auth_headers):
    response = client.get(f"{API}/categories", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == []
