"""Custom exceptions for the Pusher server client."""


class PusherError(Exception):
    """Base exception for all Pusher client errors."""

    pass


class ValidationError(PusherError, ValueError):
    """Request arguments violate a protocol limit. Raised before any I/O."""

    pass


class TransportError(PusherError):
    """Failed to reach the Pusher REST API (connection, TLS, protocol)."""

    pass


class TimeoutError(TransportError):
    """HTTP request timed out."""

    pass
