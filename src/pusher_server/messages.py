"""Event payloads, response envelopes and JSON serialization."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Sequence

from .canonical import MAX_TRIGGER_CHANNELS
from .exceptions import ValidationError
from .types import Serializer


class JsonSerializer:
    """Compact, stable JSON encoding (no whitespace between tokens)."""

    def encode(self, value: Any) -> str:
        return json.dumps(value, separators=(",", ":"))

    def decode(self, text: str) -> Any:
        return json.loads(text)


@dataclass
class Event:
    """Body of a trigger call."""

    name: str
    data: Any
    channels: list[str] = field(default_factory=list)
    socket_id: str | None = None
    already_encoded: bool = False

    def __post_init__(self) -> None:
        if len(self.channels) > MAX_TRIGGER_CHANNELS:
            raise ValidationError(
                f"An event can be triggered on a maximum of {MAX_TRIGGER_CHANNELS} "
                "channels in a single call."
            )

    @classmethod
    def create(
        cls,
        channels: str | Sequence[str],
        name: str,
        data: Any,
        socket_id: str | None = None,
        already_encoded: bool = False,
    ) -> Event:
        """Build an event, wrapping a single channel name in a list."""
        if isinstance(channels, str):
            channels = [channels]
        return cls(
            name=name,
            data=data,
            channels=list(channels),
            socket_id=socket_id,
            already_encoded=already_encoded,
        )

    def to_json(self, serializer: Serializer | None = None) -> str:
        """
        Serialize for sending.

        Event data travels as a JSON-encoded string inside the body, so it is
        encoded first unless the caller already did so.
        """
        serializer = serializer or JsonSerializer()
        data = self.data if self.already_encoded else serializer.encode(self.data)

        body: dict[str, Any] = {
            "name": self.name,
            "data": data,
            "channels": self.channels,
        }
        if self.socket_id is not None:
            body["socket_id"] = self.socket_id

        return serializer.encode(body)


@dataclass
class Response:
    """Response envelope returned by the transport."""

    status: int
    body: str = ""
    result: Any = None

    @property
    def ok(self) -> bool:
        """Whether the API accepted the request."""
        return self.status == 200

    def decoded(self, serializer: Serializer | None = None) -> Response:
        """Copy of this envelope with result set to the decoded body."""
        serializer = serializer or JsonSerializer()
        return Response(
            status=self.status,
            body=self.body,
            result=serializer.decode(self.body),
        )
