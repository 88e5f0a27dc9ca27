"""Shared pytest fixtures for n8n-tools tests.

Provides settings, a recording fake HTTP transport and registry isolation.
"""

from collections.abc import Callable

import httpx
import pytest

from n8n_tools.env import N8nSettings, clear_env_config_cache
from n8n_tools.tools.registry import set_tool_registry

API_URL = "https://n8n.example.com/api/v1"

Responder = Callable[[httpx.Request], httpx.Response]


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it receives."""

    def __init__(self, responder: Responder) -> None:
        self.requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return responder(request)

        super().__init__(handler)

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep N8N_* variables and stray .env files out of every test."""
    for var in ("N8N_API_URL", "N8N_REQUEST_TIMEOUT"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    clear_env_config_cache()
    yield
    clear_env_config_cache()


@pytest.fixture(autouse=True)
def reset_registry() -> None:
    """Fixture that resets the global tool registry around each test."""
    set_tool_registry(None)
    yield
    set_tool_registry(None)


@pytest.fixture
def settings() -> N8nSettings:
    """Settings pointing at a fake n8n API."""
    return N8nSettings(api_url=API_URL)


@pytest.fixture
def ok_transport() -> RecordingTransport:
    """Transport that answers every request with 200 and a JSON body."""
    return RecordingTransport(lambda request: httpx.Response(200, json={"received": True}))


@pytest.fixture
def make_transport() -> Callable[[Responder], RecordingTransport]:
    """Factory for transports with a custom responder."""
    return RecordingTransport
