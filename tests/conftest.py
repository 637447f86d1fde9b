from typing import Callable, Dict, List, Tuple, Union

import httpx
import pytest

from domain.settings import Settings
from services.context import build_context

BACKEND_URL = "http://backend.test"

Route = Union[Tuple[int, object], Callable[[httpx.Request], httpx.Response]]


class FakeBackend:
    """In-memory stand-in for the visitor backend, served through httpx.MockTransport."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.routes: Dict[Tuple[str, str], Route] = {}

    def route(self, method: str, path: str, status: int = 200, json=None):
        self.routes[(method, path)] = (status, json)

    def route_handler(self, method: str, path: str, handler: Callable[[httpx.Request], httpx.Response]):
        self.routes[(method, path)] = handler

    def calls(self, method: str, path: str) -> List[httpx.Request]:
        return [r for r in self.requests if r.method == method and r.url.path == path]

    def handle(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"detail": "Not Found"})
        if callable(route):
            return route(request)
        status, body = route
        if body is None:
            return httpx.Response(status)
        return httpx.Response(status, json=body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def settings():
    return Settings(BACKEND_URL=BACKEND_URL, REQUEST_TIMEOUT=2.0)


@pytest.fixture
def ctx(backend, settings):
    return build_context({}, settings=settings, transport=backend.transport)


@pytest.fixture
def authed_ctx(ctx):
    ctx.session.set("tok-1")
    return ctx
