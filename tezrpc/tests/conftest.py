"""Shared fixtures: a Client wired to canned node responses."""

from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest

from tezrpc.client import Client
from tezrpc.rpc import RPCClient

NODE_URL = "http://node.test"


class FakeNode:
    """Serves canned JSON bodies keyed by request path and records requests."""

    def __init__(self) -> None:
        self.routes: dict[str, tuple[int, bytes]] = {}
        self.requests: list[httpx.Request] = []

    def json(self, path: str, body: Any, status_code: int = 200) -> None:
        self.routes[path] = (status_code, json.dumps(body).encode())

    def raw(self, path: str, content: bytes, status_code: int = 200) -> None:
        self.routes[path] = (status_code, content)

    @property
    def paths(self) -> list[str]:
        return [r.url.path for r in self.requests]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, content=b"No service found")
        status_code, content = route
        return httpx.Response(status_code, content=content)


@pytest.fixture
def node() -> FakeNode:
    return FakeNode()


@pytest.fixture
def make_client() -> Callable[[Callable[[httpx.Request], Any]], Client]:
    def _make(handler: Callable[[httpx.Request], Any]) -> Client:
        http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return Client(RPCClient(NODE_URL, http))

    return _make


@pytest.fixture
def client(node: FakeNode, make_client) -> Client:
    return make_client(node.handler)
