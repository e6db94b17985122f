"""Main PusherClient class for publishing events and authorizing channels."""

from __future__ import annotations

import logging
from typing import Any, Literal

from .auth import ChannelAuthorizer
from .config import PusherConfig
from .messages import Response
from .rest import RestClient
from .transport import HttpxTransport
from .types import Channels, QueryParams, Serializer, Transport

PACKAGE_LOGGER = "pusher_server"

VERSION = "0.1.0"

# Keyword options PusherClient forwards to PusherConfig
CONFIG_OPTIONS = frozenset({"debug", "host", "secured", "port", "timeout", "log_level"})


class PusherClient:
    """
    Server-side client for the Pusher REST API.

    Example:
        with PusherClient(app_key="key", app_secret="secret", app_id=1) as pusher:
            pusher.trigger(["my-channel"], "my-event", {"message": "hello"})
    """

    def __init__(
        self,
        app_key: str | None = None,
        app_secret: str | None = None,
        app_id: str | int | None = None,
        *,
        config: PusherConfig | None = None,
        transport: Transport | None = None,
        logger: logging.Logger | None = None,
        serializer: Serializer | None = None,
        **options: Any,
    ) -> None:
        """
        Initialize the Pusher client.

        Args:
            app_key: Application key (or use PUSHER_APP_KEY env var)
            app_secret: Application secret (or use PUSHER_APP_SECRET env var)
            app_id: Application ID (or use PUSHER_APP_ID env var)
            config: Optional PusherConfig instance (overrides individual params)
            transport: HTTP transport (default: HttpxTransport)
            logger: Logger for internal messages (default: package logger)
            serializer: Body serializer (default: compact JSON)
            **options: Config overrides: debug, host, secured, port, timeout, log_level

        Raises:
            TypeError: An option is not a known config key
        """
        unknown = sorted(set(options) - CONFIG_OPTIONS)
        if unknown:
            raise TypeError(f"Unknown PusherClient option(s): {', '.join(unknown)}")

        # Build config from params or use provided config
        if config is not None:
            self._config = config
        else:
            # None never replaces a default
            config_kwargs: dict[str, Any] = {
                key: value for key, value in options.items() if value is not None
            }
            if app_key is not None:
                config_kwargs["app_key"] = app_key
            if app_secret is not None:
                config_kwargs["app_secret"] = app_secret
            if app_id is not None:
                config_kwargs["app_id"] = app_id

            self._config = PusherConfig(**config_kwargs)

        self._logger = logger or logging.getLogger(PACKAGE_LOGGER)
        if logger is None and self._config.log_level is not None:
            self._logger.setLevel(self._config.log_level)

        self._owns_transport = transport is None
        self._transport: Transport = transport if transport is not None else HttpxTransport()

        self._rest = RestClient(
            self._config,
            self._transport,
            serializer=serializer,
            logger=self._logger,
        )
        self._authorizer = ChannelAuthorizer(
            self._config.app_key,
            self._config.app_secret.get_secret_value(),
            serializer=serializer,
            logger=self._logger,
        )

    @property
    def config(self) -> PusherConfig:
        """The immutable client configuration."""
        return self._config

    def set_logger(self, logger: logging.Logger) -> None:
        """Set a logger to be informed of internal log messages."""
        self._logger = logger
        self._rest.logger = logger
        self._authorizer.logger = logger

    def trigger(
        self,
        channels: Channels,
        event: str,
        data: Any,
        socket_id: str | None = None,
        debug: bool = False,
        already_encoded: bool = False,
    ) -> bool | Response:
        """
        Trigger an event by providing event name and payload.

        Optionally provide a socket ID to exclude a client (most likely the
        sender). See RestClient.trigger.
        """
        return self._rest.trigger(
            channels,
            event,
            data,
            socket_id=socket_id,
            debug=debug,
            already_encoded=already_encoded,
        )

    def get_channel_info(
        self, channel: str, params: QueryParams | None = None
    ) -> Any | Literal[False]:
        """Fetch channel information, e.g. params={"info": "user_count"}."""
        return self._rest.get_channel_info(channel, params)

    def get_channels(self, params: QueryParams | None = None) -> dict[str, Any] | Literal[False]:
        """Fetch a mapping of all occupied channels to their info."""
        return self._rest.get_channels(params)

    def get(self, path: str, params: QueryParams | None = None) -> Response | Literal[False]:
        """GET an arbitrary REST API resource below /apps/{app_id}."""
        return self._rest.get(path, params)

    def socket_auth(self, channel: str, socket_id: str, custom_data: str | None = None) -> str:
        """Create a JSON-encoded socket signature for a private channel."""
        return self._authorizer.socket_auth(channel, socket_id, custom_data)

    def presence_auth(
        self,
        channel: str,
        socket_id: str,
        user_id: Any,
        user_info: Any | None = None,
    ) -> str:
        """Create a JSON-encoded presence signature (socket auth plus user data)."""
        return self._authorizer.presence_auth(channel, socket_id, user_id, user_info)

    def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport:
            self._transport.close()

    def __enter__(self) -> "PusherClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
