"""Shared pytest fixtures."""

from collections.abc import Callable, Iterator
from typing import Any

import httpx
import pytest
from fastapi.testclient import TestClient

from timeline.app import App
from timeline.config import Config
from timeline.core.modules.session.codec import SessionCodec
from timeline.core.modules.session.models import SessionUser
from timeline.core.modules.session.store import SessionStore
from timeline.web.server import create_fastapi_app

TEST_SECRET = "test-session-secret-with-at-least-32-bytes"


class FakeBackend:
    """Stands in for the timeline backend: answers from a route table and records requests."""

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], Callable[[httpx.Request], httpx.Response]] = {}
        self.requests: list[httpx.Request] = []

    def respond(self, method: str, path: str, status_code: int, json: Any = None) -> None:
        def handler(_: httpx.Request) -> httpx.Response:
            if json is None:
                return httpx.Response(status_code)
            return httpx.Response(status_code, json=json)

        self.routes[(method, path)] = handler

    def fail(self, method: str, path: str) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Connection refused", request=request)

        self.routes[(method, path)] = handler

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self.routes.get((request.method, request.url.path))
        if handler is None:
            return httpx.Response(404, json={"error": "not found"})
        return handler(request)


@pytest.fixture
def config():
    """Configuration isolated from the environment and any .env file."""
    return Config(_env_file=None, session_secret=TEST_SECRET, backend_url="http://backend.test")


@pytest.fixture
def secret():
    return TEST_SECRET


@pytest.fixture
def alice():
    return SessionUser(id="u1", username="alice", email="a@example.com")


@pytest.fixture
def codec():
    return SessionCodec(TEST_SECRET)


@pytest.fixture
def store(codec):
    return SessionStore(codec, secure=False)


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def client(config, backend) -> Iterator[TestClient]:
    """Test client for the web app with the backend replaced by FakeBackend."""
    app = App(config, backend_transport=httpx.MockTransport(backend.handle))
    with TestClient(create_fastapi_app(app, config), follow_redirects=False) as test_client:
        yield test_client


@pytest.fixture
def logged_in(client, backend, alice):
    """Log alice in through the login form; the client keeps the session cookie."""
    backend.respond("POST", "/api/login", 200, {"token": "abc", "user": alice.model_dump()})
    response = client.post("/login", json={"email": alice.email, "password": "secret"})
    assert response.status_code == 303
    return client
