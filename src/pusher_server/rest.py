"""Signed calls against the Pusher REST API."""

from __future__ import annotations

import logging
from typing import Any, Literal

from .canonical import CanonicalRequest
from .config import PusherConfig
from .messages import Event, JsonSerializer, Response
from .types import Channels, QueryParams, Serializer, Transport


class RestClient:
    """
    Builds, signs and sends REST API requests.

    Every call is independent: build the canonical request, sign it, send it
    through the transport, interpret the status. Nothing is retried.

    Non-200 replies are reported as False rather than raised. Callers must
    check the return value.
    """

    def __init__(
        self,
        config: PusherConfig,
        transport: Transport,
        *,
        serializer: Serializer | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._config = config
        self._transport = transport
        self._serializer = serializer or JsonSerializer()
        self._logger = logger or logging.getLogger(__name__)

    @property
    def config(self) -> PusherConfig:
        return self._config

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    @logger.setter
    def logger(self, value: logging.Logger) -> None:
        self._logger = value

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
        Trigger an event on one or more channels.

        Args:
            channels: Channel names to publish on (at most 100)
            event: Event name
            data: Event payload, or a pre-serialized string if already_encoded
            socket_id: Socket ID to exclude from receiving the event
            debug: Return the response envelope instead of a boolean
            already_encoded: data is already serialized and sent verbatim

        Returns:
            True on HTTP 200, False otherwise. The Response envelope instead
            when debug is set here or in the config.

        Raises:
            ValidationError: More than 100 channels were given
        """
        if isinstance(channels, str):
            self._log(f'->trigger received string channel "{channels}". Converting to list.')

        payload = Event.create(
            channels,
            event,
            data,
            socket_id=socket_id,
            already_encoded=already_encoded,
        )
        body = payload.to_json(self._serializer)

        self._log(f"trigger POST: {body}")
        response = self._request("POST", "/events", body=body)

        if debug or self._config.debug:
            return response
        return response.ok

    def get(self, path: str, params: QueryParams | None = None) -> Response | Literal[False]:
        """
        GET an arbitrary REST API resource. Request signing is handled here.

        Args:
            path: Path below /apps/{app_id}, e.g. "/channels"
            params: Query parameters, e.g. {"info": "user_count"}

        Returns:
            Response with the decoded body in result, or False on non-200.
            A body that cannot be decoded leaves result as None.
        """
        response = self._request("GET", path, params=params)
        if not response.ok:
            self._log(f"GET {path} returned status {response.status}")
            return False
        try:
            return response.decoded(self._serializer)
        except ValueError as e:
            self._logger.warning(f"Pusher: GET {path} returned an undecodable body: {e}")
            return response

    def get_channel_info(
        self, channel: str, params: QueryParams | None = None
    ) -> Any | Literal[False]:
        """Fetch information for a single channel, or False on failure."""
        response = self.get(f"/channels/{channel}", params)
        if response is False:
            return False
        return response.result

    def get_channels(self, params: QueryParams | None = None) -> dict[str, Any] | Literal[False]:
        """
        Fetch all occupied channels.

        Returns:
            Mapping of channel name to channel info, or False on failure
        """
        response = self.get("/channels", params)
        if response is False:
            return False
        result = response.result
        if not isinstance(result, dict):
            return {}
        channels = result.get("channels")
        return dict(channels) if isinstance(channels, dict) else {}

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: QueryParams | None = None,
        body: str | None = None,
    ) -> Response:
        full_path = f"{self._config.base_path}{path}"
        request = CanonicalRequest.build(
            method,
            full_path,
            self._config.app_key,
            params=params,
            body=body,
        )
        query = request.signed_params(self._config.app_secret.get_secret_value())

        self._log(f"{request.method} {full_path}")
        return self._transport.send(
            request.method,
            self._config.build_url(full_path),
            params=query,
            body=body,
            timeout=self._config.timeout,
        )

    def _log(self, message: str) -> None:
        self._logger.debug(f"Pusher: {message}")
