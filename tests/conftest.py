"""Root pytest fixtures for isohttp tests."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any

import pytest

from isohttp.types import HttpMethod, RequestConfig, Response


@dataclass
class FakeFetchResponse:
    """Minimal stand-in for pyodide's FetchResponse."""

    status: int = 200
    body: str = ""
    headers: Any = field(default_factory=dict)

    async def text(self) -> str:
        return self.body


class FakeFetch:
    """Fetch-style coroutine that records calls and replays one response."""

    def __init__(self, response: FakeFetchResponse | None = None, error: Exception | None = None) -> None:
        self.response = response or FakeFetchResponse(body="{}")
        self.error = error
        self.calls: list[tuple[str, dict[str, Any]]] = []

    async def __call__(self, url: str, **kwargs: Any) -> FakeFetchResponse:
        self.calls.append((url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response


class RecordingTransport:
    """Transport that records dispatched requests and returns canned responses."""

    name = "recording"

    def __init__(self, response: Response | None = None) -> None:
        self.response = response or Response(data={"ok": True}, status=200)
        self.calls: list[tuple[HttpMethod, str, RequestConfig]] = []
        self.closed = False

    async def perform_request(
        self, method: HttpMethod, url: str, config: RequestConfig
    ) -> Response:
        self.calls.append((method, url, config))
        return Response(
            data=self.response.data,
            status=self.response.status,
            headers=dict(self.response.headers),
            url=url,
            is_json=True,
        )

    async def close(self) -> None:
        self.closed = True


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove ISOHTTP_* variables so host settings never leak into tests."""
    for name in list(os.environ):
        if name.startswith("ISOHTTP_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def recording_transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def browser_platform(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make the environment detector report a browser runtime."""
    monkeypatch.setattr("sys.platform", "emscripten")


@pytest.fixture
def make_fetch():
    """Factory for FakeFetch instances."""

    def factory(
        body: str = "{}",
        status: int = 200,
        headers: Any = None,
        error: Exception | None = None,
    ) -> FakeFetch:
        return FakeFetch(FakeFetchResponse(status=status, body=body, headers=headers or {}), error)

    return factory
