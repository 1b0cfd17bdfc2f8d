"""Discord integration."""

from cricbot.bot.client import CricketBot

__all__ = ["CricketBot"]
