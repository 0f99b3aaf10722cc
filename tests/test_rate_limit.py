from fastapi import FastAPI, Request
from fastapi.testclient import TestClient
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from librestock.core.errors import RATE_LIMIT_HINT, RATE_LIMIT_MESSAGE, rate_limit_exceeded_handler


def build_app():
    limiter = Limiter(key_func=get_remote_address)
    app = FastAPI()
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    @app.get("/ping")
    @limiter.limit("2/minute")
    def ping(request: Request):
        return {"pong": True}

    return app


def test_throttled_response_body():
    client = TestClient(build_app())

    assert client.get("/ping").status_code == 200
    assert client.get("/ping").status_code == 200

    response = client.get("/ping")

    assert response.status_code == 429
    body = response.json()
    assert body["statusCode"] == 429
    assert body["error"] == "Too Many Requests"
    assert body["message"] == RATE_LIMIT_MESSAGE
    assert body["hint"] == RATE_LIMIT_HINT
    assert body["path"] == "/ping"
    assert "timestamp" in body
