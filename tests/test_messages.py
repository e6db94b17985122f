"""Tests for event payloads and response envelopes."""

import json

import pytest

from pusher_server.exceptions import ValidationError
from pusher_server.messages import Event, JsonSerializer, Response


class TestEvent:
    """Tests for the Event class."""

    def test_create_wraps_single_channel(self):
        event = Event.create("my-channel", "my-event", {"message": "hello"})

        assert event.channels == ["my-channel"]

    def test_create_keeps_channel_order(self):
        event = Event.create(("b", "a", "c"), "my-event", {})

        assert event.channels == ["b", "a", "c"]

    def test_too_many_channels(self):
        """More than 100 channels is rejected."""
        channels = [f"channel-{i}" for i in range(101)]

        with pytest.raises(ValidationError, match="maximum of 100 channels"):
            Event.create(channels, "my-event", {})

    def test_hundred_channels_allowed(self):
        channels = [f"channel-{i}" for i in range(100)]

        event = Event.create(channels, "my-event", {})

        assert len(event.channels) == 100

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            Event(name="e", data={}, channels=["c"] * 101)

    def test_to_json(self):
        """Event data is itself JSON-encoded inside the body."""
        event = Event.create(["my-channel"], "my-event", {"message": "hello"})

        result = json.loads(event.to_json())

        assert result == {
            "name": "my-event",
            "data": '{"message":"hello"}',
            "channels": ["my-channel"],
        }

    def test_to_json_compact(self):
        body = Event.create(["c"], "e", {"a": 1}).to_json()

        assert body == '{"name":"e","data":"{\\"a\\":1}","channels":["c"]}'

    def test_to_json_with_socket_id(self):
        event = Event.create(["c"], "e", {}, socket_id="123.456")

        assert json.loads(event.to_json())["socket_id"] == "123.456"

    def test_to_json_already_encoded(self):
        """Pre-serialized data is sent verbatim."""
        event = Event.create(["c"], "e", '{"raw": true}', already_encoded=True)

        assert json.loads(event.to_json())["data"] == '{"raw": true}'

    def test_to_json_stable(self):
        event = Event.create(["c"], "e", {"x": [1, 2], "y": None})

        assert event.to_json() == event.to_json()


class TestResponse:
    """Tests for the Response envelope."""

    def test_ok(self):
        assert Response(status=200).ok is True
        assert Response(status=400).ok is False
        assert Response(status=201).ok is False

    def test_decoded(self):
        response = Response(status=200, body='{"occupied": true}')

        decoded = response.decoded()

        assert decoded.result == {"occupied": True}
        assert decoded.status == 200
        assert decoded.body == response.body
        assert response.result is None


class TestJsonSerializer:
    """Tests for JsonSerializer."""

    def test_round_trip(self):
        serializer = JsonSerializer()
        value = {"user_id": "user1", "user_info": {"name": "Bob"}}

        assert serializer.decode(serializer.encode(value)) == value

    def test_no_whitespace(self):
        assert JsonSerializer().encode({"a": [1, 2]}) == '{"a":[1,2]}'
