from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import httpx
import pytest

from wordcloud_client.api.httpx_adapter import HttpxApiAdapter

BASE_URL = "http://words.test"


@dataclass
class ScriptedService:
    """Processing service double that replays scripted answers per identifier."""

    identifier: str = "job-42"
    statuses: list[str] = field(default_factory=list)
    results: list[dict[str, Any]] = field(default_factory=list)
    requests: list[httpx.Request] = field(default_factory=list)
    fail_paths: set[str] = field(default_factory=set)

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if path in self.fail_paths:
            raise httpx.ConnectError("connection refused", request=request)
        if request.method == "POST" and path == "/upload":
            return httpx.Response(200, text=self.identifier)
        if path == "/upload/status":
            return httpx.Response(200, json=self._next(self.statuses))
        if path == "/upload":
            return httpx.Response(200, json=self._next(self.results))
        return httpx.Response(404)

    def calls(self, method: str, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.method == method and r.url.path == path]

    @staticmethod
    def _next(script: list[Any]) -> Any:
        # the last answer repeats once the script runs out
        return script.pop(0) if len(script) > 1 else script[0]


@pytest.fixture()
def service() -> ScriptedService:
    return ScriptedService()


@pytest.fixture()
def http_api(service: ScriptedService) -> Callable[[], HttpxApiAdapter]:
    def build() -> HttpxApiAdapter:
        client = httpx.AsyncClient(
            transport=httpx.MockTransport(service.handle), base_url=BASE_URL
        )
        return HttpxApiAdapter(base_url=BASE_URL, timeout_seconds=5, http_client=client)

    return build
