"""Logging configuration."""

import logging

from cricbot.config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for the bot and API processes.

    discord.py and httpx are noisy at INFO; they are held at WARNING
    unless the root level is DEBUG.
    """
    resolved = (level or LOG_LEVEL).upper()
    logging.basicConfig(level=resolved, format=LOG_FORMAT)

    if resolved != "DEBUG":
        for name in ("discord", "httpx", "httpcore"):
            logging.getLogger(name).setLevel(logging.WARNING)
