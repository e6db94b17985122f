"""Pytest fixtures for Pusher server client tests."""

from __future__ import annotations

from typing import Callable, Mapping

import httpx
import pytest

from pusher_server.config import PusherConfig
from pusher_server.messages import Response
from pusher_server.transport import HttpxTransport


class RecordingTransport:
    """Transport double that records calls and replies with a fixed status."""

    def __init__(self, status: int = 200, body: str = "{}") -> None:
        self.status = status
        self.body = body
        self.calls: list[dict] = []
        self.closed = False

    def send(
        self,
        method: str,
        url: str,
        *,
        params: Mapping[str, str],
        body: str | None = None,
        timeout: float | None = None,
    ) -> Response:
        self.calls.append(
            {"method": method, "url": url, "params": dict(params), "body": body, "timeout": timeout}
        )
        return Response(status=self.status, body=self.body)

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def config() -> PusherConfig:
    """Create a test configuration."""
    return PusherConfig(
        app_key="test-key",
        app_secret="test-secret",
        app_id=123,
        host="localhost",
        port=8080,
        secured=False,
    )


@pytest.fixture
def socket_id() -> str:
    """Sample socket ID for testing."""
    return "123456.7890123"


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Remove PUSHER_* variables and any .env file from the picture."""
    import os

    for name in list(os.environ):
        if name.startswith("PUSHER_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def recording_transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def mock_transport() -> Callable[..., tuple[HttpxTransport, list[httpx.Request]]]:
    """
    Factory for an HttpxTransport backed by httpx.MockTransport.

    Returns the transport and the list that captures sent requests.
    """

    def factory(
        status: int = 200,
        json: object | None = None,
        text: str | None = None,
        raises: Exception | None = None,
    ) -> tuple[HttpxTransport, list[httpx.Request]]:
        sent: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            sent.append(request)
            if raises is not None:
                raise raises
            if json is not None:
                return httpx.Response(status, json=json)
            return httpx.Response(status, text=text if text is not None else "{}")

        client = httpx.Client(transport=httpx.MockTransport(handler))
        return HttpxTransport(client), sent

    return factory
