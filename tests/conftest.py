# tests/conftest.py

import asyncio
import json

import httpx
import pytest

from ultimarr.core.config import load_settings
from ultimarr.core.tool_registry import ToolRegistry, build_services
from ultimarr.services.upstream import UpstreamClient


class StubUpstream:
    """
    Plays the three upstream services. Answers are registered per (method, path);
    every request that reaches the stub is recorded in `calls`.
    """

    def __init__(self):
        self.routes = {}
        self.calls = []

    def add(self, method, path, payload=None, status=200, text=None, headers=None):
        if text is None:
            text = json.dumps(payload) if payload is not None else ""
        self.routes[(method, path)] = (status, text, headers or {})

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        status, text, headers = self.routes.get((request.method, request.url.path), (404, "Not Found", {}))
        return httpx.Response(status, headers=headers, content=text.encode("utf-8"))

    @property
    def last(self) -> httpx.Request:
        return self.calls[-1]

    def last_json(self):
        return json.loads(self.last.content)


@pytest.fixture
def settings():
    return load_settings(
        JELLYSEERR_URL="http://jellyseerr.test",
        JELLYSEERR_API_KEY="jelly-key",
        SONARR_URL="http://sonarr.test/",
        SONARR_API_KEY="sonarr-key",
        RADARR_URL="http://radarr.test",
        RADARR_API_KEY="radarr-key",
        _env_file=None,
    )


@pytest.fixture
def stub():
    return StubUpstream()


@pytest.fixture
def upstream(stub):
    client = UpstreamClient(transport=httpx.MockTransport(stub.handler))
    yield client
    asyncio.run(client.aclose())


@pytest.fixture
def services(settings, upstream):
    return build_services(settings, upstream)


@pytest.fixture
def registry(services):
    return ToolRegistry(services)


@pytest.fixture
def call(registry):
    """Dispatches one tool call synchronously and returns the ToolResult."""
    def _call(name, **arguments):
        return asyncio.run(registry.dispatch(name, arguments))
    return _call
