from typing import Any, Callable, Dict, List

import httpx
import pytest

from mcp_server_starter.server_core import GaroonConfig, ServerConfig, WeatherConfig

NWS_BASE = "https://nws.test"
GAROON_BASE = "https://garoon.test/g/"


@pytest.fixture
def server_config() -> ServerConfig:
    return ServerConfig(
        nws=WeatherConfig(base_url=NWS_BASE, user_agent="test-agent/1.0"),
        garoon=GaroonConfig(base_url=GAROON_BASE, username="alice", password="s3cret"),
        http_timeout=5.0,
    )


class RecordingTransport:
    """Builds an ``httpx.MockTransport`` and keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: List[httpx.Request] = []
        self._handler = handler
        self.transport = httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)


@pytest.fixture
def json_transport() -> Callable[[Dict[str, Any]], RecordingTransport]:
    """Transport answering by URL path; unknown paths get a 404."""

    def factory(routes: Dict[str, Any]) -> RecordingTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path in routes:
                return httpx.Response(200, json=routes[request.url.path])
            return httpx.Response(404, json={"detail": "not found"})

        return RecordingTransport(handler)

    return factory


@pytest.fixture
def status_transport() -> Callable[[int], RecordingTransport]:
    """Transport answering every request with the given status code."""

    def factory(status: int) -> RecordingTransport:
        return RecordingTransport(lambda request: httpx.Response(status, json={}))

    return factory
