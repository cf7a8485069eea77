import httpx
import itertools
import json
import threading
import time

import pytest
from jose import jwt

from call2fa.infra.client.call2fa_client import Call2FAClient

BASE_URL = "https://call2fa.example.test"


def mint_jwt(exp: float, **claims) -> str:
    return jwt.encode({"sub": "tester", "exp": int(exp), **claims}, "test-secret", algorithm="HS256")


class FakeCall2FA:
    """In-process stand-in for the Call2FA API, served through httpx.MockTransport."""

    def __init__(self):
        self.ttl = 3600
        self.auth_status = 200
        self.auth_body = None
        self.auth_delay = 0.0
        self.auth_calls = 0
        self.auth_payloads = []
        self.requests = []
        self.responses = {}
        self.__ids = itertools.count(1)
        self.__lock = threading.Lock()

    @property
    def bearers(self) -> list[str]:
        return [r.headers.get("Authorization") for r in self.requests]

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def handler(self, request: httpx.Request) -> httpx.Response:
        if request.url.path == "/v1/auth/":
            return self.__auth(request)

        with self.__lock:
            self.requests.append(request)

        override = self.responses.get(request.url.path)

        if override is not None:
            return override(request) if callable(override) else override

        if not request.headers.get("Authorization", "").startswith("Bearer "):
            return httpx.Response(401, json={"detail": "missing token"})

        if request.url.path == "/v1/call/" or request.url.path == "/v1/code/call/":
            return httpx.Response(201, json={"call_id": str(next(self.__ids))})

        if request.url.path.startswith("/v1/pool/"):
            return httpx.Response(201, json={"call_id": next(self.__ids), "number": "+380800000000", "code": "4821"})

        return httpx.Response(404, json={"detail": "not found"})

    def __auth(self, request: httpx.Request) -> httpx.Response:
        with self.__lock:
            self.auth_calls += 1
            number = self.auth_calls
            self.auth_payloads.append(json.loads(request.content))

        if self.auth_delay:
            time.sleep(self.auth_delay)

        if self.auth_status != 200:
            return httpx.Response(self.auth_status, json={"detail": "invalid credentials"})

        if self.auth_body is not None:
            return httpx.Response(200, json=self.auth_body)

        return httpx.Response(200, json={"jwt": mint_jwt(time.time() + self.ttl, jti=str(number))})


@pytest.fixture
def api() -> FakeCall2FA:
    return FakeCall2FA()


@pytest.fixture
def client(api: FakeCall2FA) -> Call2FAClient:
    return Call2FAClient("demo-login", "demo-password", base_url=BASE_URL, transport=api.transport)
