"""Run a long-polling receiver that logs every incoming update.

Reads its settings from the environment (see :mod:`config`) and stops on
Ctrl+C.  Useful to check a token and inspect the updates a bot receives.
"""

import threading

from config import BOT_TOKEN, POLL_TIMEOUT, logger
from telegrambot import API, UpdatePoller
from telegrambot.models import Update
from telegrambot.polling import default_params


def log_update(update: Update | None, error: Exception | None) -> None:
    """Log one delivered update, or the fetch error reported instead."""
    if error is not None:
        logger.warning("Polling error", extra={"error": str(error)})
        return
    logger.info("Update received", extra={"update_id": update.update_id, "update_kind": update.kind})


def main() -> None:
    if not BOT_TOKEN:
        raise EnvironmentError("BOT_TOKEN environment variable is not set or is empty.")

    api = API.from_env()
    me = api.get_me()
    logger.info("Polling for updates", extra={"bot_username": me.username, "poll_timeout": POLL_TIMEOUT})

    poller = UpdatePoller(api, default_params(POLL_TIMEOUT)).start(log_update)
    try:
        threading.Event().wait()
    except KeyboardInterrupt:
        logger.info("Interrupted, stopping")
    finally:
        poller.stop()


if __name__ == "__main__":
    main()
