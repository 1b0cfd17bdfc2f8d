"""Discord bot for live Cricbuzz cricket scores."""

from cricbot.version import __version__

__all__ = ["__version__"]
