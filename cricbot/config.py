"""Runtime configuration.

All settings come from environment variables with defaults:
    DISCORD_TOKEN: Bot token (falls back to TOKEN, then BOT_TOKEN)
    CRICBOT_RESET_AFTER_MINUTES: How long a completed match stays viewable (default: 60)
    CRICBOT_LOG_LEVEL: Root log level (default: INFO)
    CRICBOT_API_HOST: Preview API bind address (default: 0.0.0.0)
    CRICBOT_API_PORT: Preview API port (default: 8000)
"""

import os
from datetime import timedelta

# Not read from the environment; every Cricbuzz request gives up after 15 seconds
CRICBUZZ_TIMEOUT = 15.0
RESET_AFTER = timedelta(minutes=float(os.environ.get("CRICBOT_RESET_AFTER_MINUTES", 60)))

LOG_LEVEL = os.environ.get("CRICBOT_LOG_LEVEL", "INFO").upper()

API_HOST = os.environ.get("CRICBOT_API_HOST", "0.0.0.0")
API_PORT = int(os.environ.get("CRICBOT_API_PORT", 8000))


def get_discord_token() -> str | None:
    """Get the Discord bot token.

    Read at call time so a missing token only fails the bot entry point,
    not imports.
    """
    return (
        os.environ.get("DISCORD_TOKEN") or os.environ.get("TOKEN") or os.environ.get("BOT_TOKEN")
    )
