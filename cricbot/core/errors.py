"""Exception hierarchy.

Missing fields in an otherwise successful payload are not errors; they are
rendered as placeholders. Only network failures and user misuse raise.
"""


class CricbotError(Exception):
    """Base class for all cricbot errors."""


class FetchError(CricbotError):
    """A Cricbuzz request failed.

    Callers treat both subclasses identically; the split exists for logging.
    """

    def __init__(self, url: str, message: str):
        super().__init__(f"{message} ({url})")
        self.url = url


class FetchTimeoutError(FetchError):
    """No response within the configured timeout."""


class FetchFailureError(FetchError):
    """Transport failure, non-success status, or an unparsable body."""


class NoCurrentMatchError(CricbotError):
    """Show-current was requested before any match was selected."""

    def __init__(self):
        super().__init__("No active match. Use `/live` first.")
