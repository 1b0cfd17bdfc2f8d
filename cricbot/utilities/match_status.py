"""Match status utilities.

Single source of truth for the two judgements the views make about a match
header: whether it has gone stale, and who won.
"""

import logging
from datetime import UTC, datetime, timedelta

from dateutil import parser

from cricbot.config import RESET_AFTER
from cricbot.core import MatchHeader

logger = logging.getLogger(__name__)

# Status lines read like "India won by 5 runs"
WON_MARKER = " won"


def parse_completion_time(value) -> datetime | None:
    """Parse a Cricbuzz completion timestamp into an aware UTC datetime.

    Accepts epoch milliseconds (int, float or numeric string) as found in
    matchCompleteTimestamp, or a date string as found in matchCompleteTimeGMT.
    Naive date strings are taken to be GMT.

    Returns:
        Aware datetime, or None when the value is missing or unparsable
    """
    if value is None or value == "" or isinstance(value, bool):
        return None

    if isinstance(value, str) and value.strip().isdigit():
        value = int(value.strip())

    if isinstance(value, int | float):
        try:
            return datetime.fromtimestamp(value / 1000, tz=UTC)
        except (OverflowError, OSError, ValueError):
            logger.debug("[STATUS] Out-of-range completion timestamp: %r", value)
            return None

    if not isinstance(value, str):
        return None

    try:
        parsed = parser.parse(value)
    except (ValueError, OverflowError):
        logger.debug("[STATUS] Unparsable completion time: %r", value)
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def should_reset(
    header: MatchHeader | None,
    now: datetime | None = None,
    reset_after: timedelta = RESET_AFTER,
) -> bool:
    """Check whether a completed match is too old to keep showing.

    True iff the header carries a completion time and strictly more than
    reset_after has elapsed since. A header without a completion time is
    still live and never resets. Never raises.

    Args:
        header: Match header from the latest fetch
        now: Current time (defaults to now in UTC)
        reset_after: Staleness threshold (default: 1 hour)

    Returns:
        True if views should collapse to "no live match"
    """
    if header is None or header.completed_at is None:
        return False

    current = now or datetime.now(UTC)
    completed_at = header.completed_at
    if completed_at.tzinfo is None:
        completed_at = completed_at.replace(tzinfo=UTC)
    if current.tzinfo is None:
        current = current.replace(tzinfo=UTC)

    return current - completed_at > reset_after


def derive_winning_team(header: MatchHeader | None) -> str | None:
    """Work out which team won a completed match.

    Prefers the structured result field. Otherwise falls back to the text
    before " won" in the status line, which is a best-effort heuristic: a
    status without " won" (ties, no result) yields the whole status line,
    which then matches no innings.

    Returns:
        Team name, or None if neither source is present
    """
    if header is None:
        return None
    if header.winning_team:
        return header.winning_team
    if not header.status:
        return None
    return header.status.split(WON_MARKER)[0]
