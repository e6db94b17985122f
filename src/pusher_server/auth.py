"""HMAC-SHA256 authorization tokens for private/presence channels."""

from __future__ import annotations

import logging
from typing import Any

from .messages import JsonSerializer
from .signing import sign
from .types import Serializer


class ChannelAuthorizer:
    """
    Produces the auth payload a server returns to a subscribing client.

    The signature is computed as:
        HMAC-SHA256(app_secret, f"{socket_id}:{channel_name}")

    When custom data is supplied (presence channels), it is appended verbatim:
        HMAC-SHA256(app_secret, f"{socket_id}:{channel_name}:{custom_data}")

    The client library derives the same string, so the concatenation order
    must not change.
    """

    def __init__(
        self,
        app_key: str,
        app_secret: str,
        *,
        serializer: Serializer | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.app_key = app_key
        self._app_secret = app_secret
        self._serializer = serializer or JsonSerializer()
        self.logger = logger or logging.getLogger(__name__)

    def authorize(
        self,
        channel_name: str,
        socket_id: str,
        custom_data: str | None = None,
    ) -> dict[str, str]:
        """
        Generate the authorization payload for a channel subscription.

        Args:
            channel_name: The channel to authorize
            socket_id: The socket ID of the subscribing connection
            custom_data: Serialized channel data, signed and returned verbatim

        Returns:
            Dict with 'auth' key, and 'channel_data' when custom_data is given
        """
        self.logger.debug(
            f"Pusher: socket_auth creating socket authorization hash for channel [{channel_name}]"
        )

        if custom_data:
            string_to_sign = f"{socket_id}:{channel_name}:{custom_data}"
            return {
                "auth": self._sign(string_to_sign),
                "channel_data": custom_data,
            }
        else:
            string_to_sign = f"{socket_id}:{channel_name}"
            return {"auth": self._sign(string_to_sign)}

    def socket_auth(
        self,
        channel_name: str,
        socket_id: str,
        custom_data: str | None = None,
    ) -> str:
        """Authorization payload for a private channel, JSON-encoded."""
        return self._serializer.encode(self.authorize(channel_name, socket_id, custom_data))

    def presence_auth(
        self,
        channel_name: str,
        socket_id: str,
        user_id: Any,
        user_info: Any | None = None,
    ) -> str:
        """
        Authorization payload for a presence channel, JSON-encoded.

        Args:
            channel_name: The presence channel to authorize
            socket_id: The socket ID of the subscribing connection
            user_id: Identifier of the member, shared with other subscribers
            user_info: Optional member details; empty values are omitted
        """
        return self.socket_auth(
            channel_name,
            socket_id,
            self.presence_data(user_id, user_info),
        )

    def presence_data(self, user_id: Any, user_info: Any | None = None) -> str:
        """Serialized channel_data for a presence member."""
        user_data: dict[str, Any] = {"user_id": user_id}
        # Empty dicts, lists and strings count as absent
        if user_info:
            user_data["user_info"] = user_info
        return self._serializer.encode(user_data)

    def _sign(self, message: str) -> str:
        """
        Generate HMAC-SHA256 signature.

        Returns:
            String in format "app_key:hex_digest"
        """
        return f"{self.app_key}:{sign(self._app_secret, message)}"
