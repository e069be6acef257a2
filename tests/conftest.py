"""Shared test fixtures."""

from __future__ import annotations

from typing import Any

import pytest

from coolify_mcp.server import OperationCatalog
from coolify_mcp_server.dispatcher import Dispatcher
from coolify_mcp_server.tools import build_catalog

SERVER_UUID = "123e4567-e89b-12d3-a456-426614174000"


class FakeTransport:
    """Records every call and replays queued responses or errors."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, dict[str, Any] | None]] = []
        self.responses: list[object] = []

    def queue(self, response: object) -> None:
        self.responses.append(response)

    def send(
        self, method: str, path: str, body: dict[str, Any] | None = None
    ) -> Any:
        self.calls.append((method, path, body))
        if not self.responses:
            return {"method": method, "path": path}
        response = self.responses.pop(0)
        if isinstance(response, BaseException):
            raise response
        return response


@pytest.fixture()
def catalog() -> OperationCatalog:
    """Provide the full Coolify catalog."""
    return build_catalog()


@pytest.fixture()
def fake_transport() -> FakeTransport:
    """Provide a recording transport."""
    return FakeTransport()


@pytest.fixture()
def dispatcher(catalog: OperationCatalog, fake_transport: FakeTransport) -> Dispatcher:
    """Provide a dispatcher wired to the recording transport."""
    return Dispatcher(catalog, fake_transport)


@pytest.fixture()
def coolify_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Configure the Coolify environment variables."""
    monkeypatch.setenv("COOLIFY_BASE_URL", "https://coolify.example.com")
    monkeypatch.setenv("COOLIFY_TOKEN", "secret-token")
    monkeypatch.delenv("COOLIFY_TIMEOUT", raising=False)


@pytest.fixture()
def no_coolify_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove the Coolify environment variables and skip .env loading."""
    for name in ("COOLIFY_BASE_URL", "COOLIFY_TOKEN", "COOLIFY_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("coolify_mcp_server.main.load_dotenv", lambda: False)
    monkeypatch.setattr("coolify_mcp_server.cli.load_dotenv", lambda: False)


@pytest.fixture()
def anyio_backend() -> str:
    """Run anyio-marked tests on asyncio, the loop the FastMCP client needs."""
    return "asyncio"
