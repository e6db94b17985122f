"""Integration tests against a real Pusher application.

These tests require credentials for an application you control:

    PUSHER_APP_ID=... PUSHER_APP_KEY=... PUSHER_APP_SECRET=... \
    PUSHER_HOST=api-eu.pusher.com PUSHER_PORT=443 pytest tests/test_integration.py -v
"""

from __future__ import annotations

import os

import pytest


def has_pusher_config() -> bool:
    """Check if Pusher credentials are available."""
    return bool(os.environ.get("PUSHER_APP_ID"))


@pytest.mark.skipif(not has_pusher_config(), reason="PUSHER_APP_ID not set")
class TestPusherIntegration:
    """Integration tests for the REST API round trip."""

    @pytest.fixture
    def client(self):
        from pusher_server import PusherClient

        with PusherClient() as client:
            yield client

    def test_trigger(self, client) -> None:
        """The API accepts a signed trigger."""
        assert client.trigger(["python-pusher-server-test"], "test-event", {"ok": True}) is True

    def test_get_channels(self, client) -> None:
        channels = client.get_channels()

        assert isinstance(channels, dict)

    def test_get_channel_info(self, client) -> None:
        info = client.get_channel_info("python-pusher-server-test")

        assert info is not False
        assert "occupied" in info

    def test_bad_secret_is_soft_failure(self) -> None:
        """A wrong secret is rejected by the API and reported as False."""
        from pusher_server import PusherClient

        with PusherClient(app_secret="not-the-secret") as client:
            assert client.trigger(["python-pusher-server-test"], "test-event", {}) is False
