"""HMAC-SHA256 signing primitives shared by REST and channel authentication."""

import hashlib
import hmac


def _to_bytes(value: str | bytes) -> bytes:
    if isinstance(value, bytes):
        return value
    return value.encode("utf-8")


def sign(secret: str | bytes, message: str | bytes) -> str:
    """
    Compute HMAC-SHA256 of message keyed with secret.

    Returns:
        Lowercase hex digest
    """
    return hmac.new(
        _to_bytes(secret),
        _to_bytes(message),
        hashlib.sha256,
    ).hexdigest()


def body_md5(body: str | bytes) -> str:
    """Lowercase hex MD5 of the exact body bytes sent."""
    return hashlib.md5(_to_bytes(body)).hexdigest()
