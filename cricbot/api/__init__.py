"""HTTP preview API."""

from cricbot.api.app import create_app

__all__ = ["create_app"]
