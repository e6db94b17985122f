"""
Pusher Server - synchronous Python client for the Pusher REST API.

Example:
    from pusher_server import PusherClient

    with PusherClient(app_key="key", app_secret="secret", app_id=1) as pusher:
        pusher.trigger(["my-channel"], "my-event", {"message": "hello"})

        # In your channel auth endpoint
        body = pusher.socket_auth("private-my-channel", socket_id)
"""

import logging

from pusher_server.auth import ChannelAuthorizer
from pusher_server.canonical import AUTH_VERSION, MAX_TRIGGER_CHANNELS, CanonicalRequest
from pusher_server.client import VERSION, PusherClient
from pusher_server.config import PusherConfig
from pusher_server.exceptions import (
    PusherError,
    TimeoutError,
    TransportError,
    ValidationError,
)
from pusher_server.messages import Event, JsonSerializer, Response
from pusher_server.rest import RestClient
from pusher_server.signing import body_md5, sign
from pusher_server.transport import HttpxTransport
from pusher_server.types import Serializer, Transport

# Silent unless the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = VERSION

__all__ = [
    # Main client
    "PusherClient",
    "PusherConfig",
    # Components
    "RestClient",
    "ChannelAuthorizer",
    "CanonicalRequest",
    "HttpxTransport",
    "JsonSerializer",
    # Signing
    "sign",
    "body_md5",
    "AUTH_VERSION",
    "MAX_TRIGGER_CHANNELS",
    # Messages
    "Event",
    "Response",
    # Exceptions
    "PusherError",
    "ValidationError",
    "TransportError",
    "TimeoutError",
    # Types
    "Transport",
    "Serializer",
]
