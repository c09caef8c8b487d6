"""
Pytest configuration for playerindex-api tests.

No test talks to the real BallDontLie API: the upstream client is built on an
httpx.MockTransport whose responses each test registers on ``upstream``.
"""

from typing import Any, Callable, Union

import httpx
import pytest

from playerindex_api.api.dependencies import get_nba_client
from playerindex_api.api.main import create_app
from playerindex_api.core.config import Settings
from playerindex_api.providers.balldontlie_nba import BallDontLieNBA


Responder = Union[httpx.Response, Callable[[httpx.Request], httpx.Response]]


class MockUpstream:
    """Records outbound requests and replies with canned responses per path."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self._routes: dict[str, Responder] = {}

    def on(self, path: str, responder: Responder) -> None:
        """Register a response for an upstream path (e.g. ``/v1/players``)."""
        self._routes[path] = responder

    def json(self, path: str, payload: Any, status_code: int = 200) -> None:
        self.on(path, httpx.Response(status_code, json=payload))

    def fail(self, path: str, message: str = "Connection refused") -> None:
        def raise_connect_error(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError(message, request=request)

        self.on(path, raise_connect_error)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        responder = self._routes.get(request.url.path)
        if responder is None:
            return httpx.Response(404, json={"error": f"no route for {request.url.path}"})
        if callable(responder):
            return responder(request)
        return responder

    def client(self, api_key: str | None = "test-key") -> BallDontLieNBA:
        return BallDontLieNBA(
            api_key=api_key,
            base_url="https://api.balldontlie.io/v1",
            transport=httpx.MockTransport(self.handler),
        )


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, balldontlie_api_key="test-key")


@pytest.fixture
def upstream() -> MockUpstream:
    return MockUpstream()


@pytest.fixture
def app(settings, upstream):
    app = create_app(settings)
    nba_client = upstream.client(settings.balldontlie_api_key)
    app.dependency_overrides[get_nba_client] = lambda: nba_client
    return app


@pytest.fixture
def client(app):
    """Sync test client; runs the app lifespan."""
    from starlette.testclient import TestClient

    with TestClient(app) as c:
        yield c
