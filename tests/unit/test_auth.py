import pytest
from starlette.testclient import TestClient
from starlette.applications import Starlette
from starlette.responses import PlainTextResponse


async def protected(request):
    return PlainTextResponse("API Running")


@pytest.fixture
def app_with_middleware(monkeypatch):
    from auth import APIKeyMiddleware
    monkeypatch.setattr(APIKeyMiddleware, "API_KEY", "valid-key")

    app = Starlette()
    app.add_middleware(APIKeyMiddleware)
    app.add_route("/tools", protected)
    app.add_route("/", protected)
    return app


@pytest.fixture
def client(app_with_middleware):
    return TestClient(app_with_middleware)


@pytest.mark.parametrize("header_name", ["X-API-Key", "x-api-key", "X-Api-Key"])
def test_api_key_middleware_accepts_case_insensitive_header(client, header_name):
    """Given a valid API key, when the header is provided with different casings, it should be accepted."""
    response = client.get("/tools", headers={header_name: "valid-key"})
    assert response.status_code == 200
    assert response.text == "API Running"


def test_api_key_middleware_rejects_missing_header(client):
    """Given a missing API key header, a protected route returns 401 Unauthorized."""
    response = client.get("/tools")
    assert response.status_code == 401
    assert response.json()["error"] == "unauthorized"


def test_api_key_middleware_rejects_invalid_key(client):
    """Given an invalid API key, a protected route returns 403 Forbidden."""
    response = client.get("/tools", headers={"X-API-Key": "wrong-key"})
    assert response.status_code == 403
    assert response.json() == {"error": "forbidden", "message": "Invalid API key"}


def test_api_key_middleware_skips_health_check(client):
    """The root health check is reachable without a key."""
    response = client.get("/")
    assert response.status_code == 200


def test_api_key_middleware_open_when_no_key_configured(monkeypatch, app_with_middleware):
    """Given no configured key, requests pass without authentication."""
    from auth import APIKeyMiddleware
    monkeypatch.setattr(APIKeyMiddleware, "API_KEY", "")

    response = TestClient(app_with_middleware).get("/tools")
    assert response.status_code == 200
