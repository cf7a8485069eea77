import httpx

import pytest
from fastapi.testclient import TestClient

from call2fa.application.services.auth_service import AuthService
from call2fa.application.services.call_service import CallService
from call2fa.infra.client.call2fa_client import Call2FAClient
from call2fa.main import app
from call2fa.utils.provider import (
    get_auth_service,
    get_call_service
)


@pytest.fixture
def http(client):
    app.dependency_overrides[get_call_service] = lambda: CallService(client)
    app.dependency_overrides[get_auth_service] = lambda: AuthService(client)

    yield TestClient(app)

    app.dependency_overrides.clear()


def test_call_returns_created(http, api):
    r = http.post("/calls", json={"phone_number": "+380631010121", "callback_url": "https://example.test/post"})

    assert r.status_code == 201
    assert r.json()["call_id"]
    assert api.auth_calls == 1


def test_pool_and_code_calls(http, api):
    pool = http.post("/calls/pool/8", json={"phone_number": "+380631010121"})
    code = http.post("/calls/code", json={"phone_number": "+380631010121", "code": "3333", "lang": "ru"})

    assert pool.status_code == 201
    assert pool.json()["code"] == "4821"
    assert code.status_code == 201
    assert api.auth_calls == 1


def test_call_status_route(http, api):
    api.responses["/v1/call/7/"] = httpx.Response(200, json={"id": 7, "state": "calling"})

    r = http.get("/calls/7")

    assert r.status_code == 200
    assert r.json()["state"] == "calling"


def test_upstream_status_maps_to_bad_gateway(http, api):
    api.responses["/v1/call/"] = httpx.Response(500, text="boom")

    r = http.post("/calls", json={"phone_number": "+380631010121"})

    assert r.status_code == 502
    assert r.json()["detail"]["upstream_status"] == 500


def test_undecodable_upstream_body_maps_to_bad_gateway(http, api):
    api.responses["/v1/call/"] = httpx.Response(201, content=b'{"call_id": "\xff\xfe"}')

    r = http.post("/calls", json={"phone_number": "+380631010121"})

    assert r.status_code == 502


def test_rejected_credentials_map_to_bad_gateway(http, api):
    api.auth_status = 401

    r = http.post("/auth/refresh")

    assert r.status_code == 502
    assert r.json()["detail"]["step"] == "authorization"


def test_auth_status_and_refresh(http, api):
    before = http.get("/auth/status").json()

    assert before == {"logged_in": False, "login": "demo-login", "expires_at": None}

    refreshed = http.post("/auth/refresh")
    after = http.get("/auth/status").json()

    assert refreshed.status_code == 200
    assert after["logged_in"] is True
    assert after["expires_at"] == refreshed.json()["expires_at"]


def test_invalid_body_is_rejected(http, api):
    r = http.post("/calls", json={"callback_url": "https://example.test/post"})

    assert r.status_code == 422
    assert api.auth_calls == 0


def test_network_failure_maps_to_service_unavailable(api):
    def broken(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    client = Call2FAClient("demo-login", "demo-password", transport=httpx.MockTransport(broken))
    app.dependency_overrides[get_call_service] = lambda: CallService(client)

    try:
        r = TestClient(app).get("/calls/1")
    finally:
        app.dependency_overrides.clear()

    assert r.status_code == 503
