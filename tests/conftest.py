from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest

from stockplan.core.config import Settings
from stockplan.service.client import ManufacturingClient

BASE_URL = "http://service.test/api/"


class FakeService:
    """Canned answers keyed by (method, path); records every request it sees."""

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], Callable[[httpx.Request], httpx.Response]] = {}
        self.requests: list[httpx.Request] = []

    def add(self, method: str, path: str, status: int = 200, body: Any = None) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            if body is None:
                return httpx.Response(status)
            if isinstance(body, str):
                return httpx.Response(status, text=body)
            return httpx.Response(status, json=body)

        self.routes[(method, "/api" + path)] = handler

    def unreachable(self, method: str, path: str) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        self.routes[(method, "/api" + path)] = handler

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self.routes.get((request.method, request.url.path))
        if handler is None:
            return httpx.Response(404, text="no route")
        return handler(request)

    def last_json(self, method: str | None = None) -> Any:
        sent = [r for r in self.requests if method is None or r.method == method]
        return json.loads(sent[-1].content)


@pytest.fixture()
def service() -> FakeService:
    return FakeService()


@pytest.fixture()
def make_client(service: FakeService) -> Callable[[], ManufacturingClient]:
    def factory() -> ManufacturingClient:
        return ManufacturingClient(
            Settings(api_base_url=BASE_URL), transport=httpx.MockTransport(service.handle)
        )

    return factory
