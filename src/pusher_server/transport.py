"""Synchronous HTTP transport built on httpx."""

from __future__ import annotations

import logging
from typing import Mapping

import httpx

from .exceptions import TimeoutError, TransportError
from .messages import Response

logger = logging.getLogger(__name__)


class HttpxTransport:
    """
    Default HTTP capability for the REST client.

    Wraps a single httpx.Client, which is safe to share between threads.
    TLS, connection reuse and proxies are left to httpx.
    """

    def __init__(self, client: httpx.Client | None = None) -> None:
        self._client = client if client is not None else httpx.Client()
        self._owns_client = client is None

    def send(
        self,
        method: str,
        url: str,
        *,
        params: Mapping[str, str],
        body: str | None = None,
        timeout: float | None = None,
    ) -> Response:
        """
        Issue a request and wrap the reply in a Response envelope.

        Raises:
            TimeoutError: The request did not complete within timeout
            TransportError: Connection or protocol failure
        """
        headers = {"Content-Type": "application/json"} if body is not None else None
        content = body.encode("utf-8") if body is not None else None

        try:
            reply = self._client.request(
                method,
                url,
                params=dict(params),
                content=content,
                headers=headers,
                timeout=timeout,
            )
        except httpx.TimeoutException as e:
            logger.error(f"{method} {url} timed out after {timeout}s")
            raise TimeoutError(f"Request to {url} timed out") from e
        except httpx.HTTPError as e:
            logger.error(f"{method} {url} failed: {e}")
            raise TransportError(f"Request to {url} failed: {e}") from e

        logger.debug(f"{method} {url} -> {reply.status_code}")
        return Response(status=reply.status_code, body=reply.text)

    def close(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._owns_client:
            self._client.close()
