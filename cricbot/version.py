"""Version information for cricbot."""

__version__ = "1.0.0"
