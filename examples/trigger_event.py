#!/usr/bin/env python3
"""
Trigger an event and inspect channel state.

Required environment variables (or a .env file):
    PUSHER_APP_ID
    PUSHER_APP_KEY
    PUSHER_APP_SECRET
    PUSHER_HOST   e.g. api-eu.pusher.com
    PUSHER_PORT   443 for https
"""

import logging

from dotenv import load_dotenv

from pusher_server import PusherClient, ValidationError

load_dotenv()

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def main() -> None:
    with PusherClient(logger=logging.getLogger("pusher")) as pusher:
        if pusher.trigger(["notifications"], "alert", {"message": "hello"}):
            logger.info("event accepted")
        else:
            logger.warning("event rejected")

        # debug=True returns the full response envelope
        response = pusher.trigger("notifications", "info", {"message": "details"}, debug=True)
        logger.info("status=%s body=%s", response.status, response.body)

        channels = pusher.get_channels({"info": "user_count", "filter_by_prefix": "presence-"})
        if channels is False:
            logger.warning("could not list channels")
        else:
            for name, info in channels.items():
                logger.info("channel=%s info=%s", name, info)

        try:
            pusher.trigger([f"channel-{i}" for i in range(101)], "alert", {})
        except ValidationError as e:
            logger.info("rejected locally: %s", e)


if __name__ == "__main__":
    main()
