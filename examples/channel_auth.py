#!/usr/bin/env python3
"""
Channel authorization for private and presence channels.

Your auth endpoint receives channel_name and socket_id from the browser
client and returns the JSON produced here. No request is made to Pusher.

Required environment variables (or a .env file):
    PUSHER_APP_ID
    PUSHER_APP_KEY
    PUSHER_APP_SECRET
"""

import sys

from dotenv import load_dotenv

from pusher_server import PusherClient

load_dotenv()


def authorize(pusher: PusherClient, channel_name: str, socket_id: str) -> str:
    """Return the auth body for a subscription request."""
    if channel_name.startswith("presence-"):
        # Look up the signed-in user in your application
        return pusher.presence_auth(channel_name, socket_id, "user-1", {"name": "Bob"})
    return pusher.socket_auth(channel_name, socket_id)


if __name__ == "__main__":
    channel = sys.argv[1] if len(sys.argv) > 1 else "private-user.1"
    socket_id = sys.argv[2] if len(sys.argv) > 2 else "123.456"
    with PusherClient() as client:
        print(authorize(client, channel, socket_id))
