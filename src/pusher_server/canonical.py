"""Canonical request construction for signed REST API calls."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Mapping

from .signing import body_md5, sign

AUTH_VERSION = "1.0"

# Hard limit enforced by the REST API for a single trigger call
MAX_TRIGGER_CHANNELS = 100


@dataclass(frozen=True)
class CanonicalRequest:
    """
    A REST call reduced to the exact values covered by its signature.

    The string to sign is:

        METHOD\\npath\\nkey1=value1&key2=value2...

    with parameters sorted by key (byte order) and values left unencoded.
    """

    method: str
    path: str
    params: dict[str, str] = field(default_factory=dict)

    @classmethod
    def build(
        cls,
        method: str,
        path: str,
        auth_key: str,
        params: Mapping[str, Any] | None = None,
        body: str | bytes | None = None,
        timestamp: int | None = None,
    ) -> CanonicalRequest:
        """
        Assemble the canonical parameter set for a request.

        Args:
            method: HTTP method, upper-cased for signing
            path: Request path without query string (e.g. /apps/1/events)
            auth_key: Application key
            params: Additional query parameters
            body: Serialized body exactly as it will be sent
            timestamp: Seconds since epoch (defaults to now)
        """
        query: dict[str, str] = {}
        if params:
            for key, value in params.items():
                query[str(key)] = str(value)

        if timestamp is None:
            timestamp = int(time.time())

        query["auth_key"] = auth_key
        query["auth_timestamp"] = str(timestamp)
        query["auth_version"] = AUTH_VERSION

        if body is not None:
            query["body_md5"] = body_md5(body)
        else:
            query.pop("body_md5", None)
        query.pop("auth_signature", None)

        return cls(
            method=method.upper(),
            path=path,
            params=dict(sorted(query.items())),
        )

    def query_string(self) -> str:
        """Sorted key=value pairs joined with '&'."""
        return "&".join(f"{key}={value}" for key, value in sorted(self.params.items()))

    def string_to_sign(self) -> str:
        return "\n".join((self.method, self.path, self.query_string()))

    def signed_params(self, secret: str | bytes) -> dict[str, str]:
        """Query parameters to send, including auth_signature."""
        signed = dict(self.params)
        signed["auth_signature"] = sign(secret, self.string_to_sign())
        return signed
