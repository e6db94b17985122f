"""Type definitions for the Pusher server client."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Protocol, Sequence, TypeAlias, Union

if TYPE_CHECKING:
    from .messages import Response

# Query parameters accepted by the read operations, e.g. {"info": "user_count"}
QueryParams: TypeAlias = Mapping[str, Any]

# Channels for a trigger call: one name or an ordered sequence of names
Channels: TypeAlias = Union[str, Sequence[str]]


class Transport(Protocol):
    """HTTP capability used by the REST client."""

    def send(
        self,
        method: str,
        url: str,
        *,
        params: Mapping[str, str],
        body: str | None = None,
        timeout: float | None = None,
    ) -> Response:
        """Issue one request and return status and raw body."""
        ...

    def close(self) -> None:
        """Release underlying resources."""
        ...


class Serializer(Protocol):
    """Encodes request bodies and decodes response bodies."""

    def encode(self, value: Any) -> str:
        """Serialize value. Equal values must encode to equal text."""
        ...

    def decode(self, text: str) -> Any:
        """Parse text into structured data."""
        ...
