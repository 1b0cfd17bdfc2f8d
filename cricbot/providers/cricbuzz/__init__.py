"""Cricbuzz match-center provider."""

from cricbot.providers.cricbuzz.client import CricbuzzClient
from cricbot.providers.cricbuzz.provider import CricbuzzProvider

__all__ = ["CricbuzzClient", "CricbuzzProvider"]
