"""Current-match session.

Tracks which match the bot is following and the scorecard cached for it.
One instance lives for the whole process and is handed to the router; it is
a single slot, so selecting a new match discards everything about the old one.

No lock: interactions run on one event loop, and concurrent selections of
different matches are last-writer-wins.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from cricbot.core import FullScorecard, NoCurrentMatchError

logger = logging.getLogger(__name__)


class ScorecardState(str, Enum):
    """Where the current match's scorecard fetch stands."""

    NOT_FETCHED = "not_fetched"
    FETCHED = "fetched"
    FAILED = "failed"  # retried on the next interaction


@dataclass
class MatchSession:
    """Single-slot state for the current match."""

    current_match_id: str | None = None
    scorecard: FullScorecard | None = None
    scorecard_state: ScorecardState = ScorecardState.NOT_FETCHED

    @property
    def scorecard_fetched(self) -> bool:
        return self.scorecard_state == ScorecardState.FETCHED

    @property
    def needs_scorecard(self) -> bool:
        return self.scorecard_state != ScorecardState.FETCHED

    def select_match(self, match_id: str) -> None:
        """Make match_id current and drop any cached scorecard."""
        if self.current_match_id and self.current_match_id != match_id:
            logger.info("[SESSION] Switching match %s -> %s", self.current_match_id, match_id)
        self.current_match_id = match_id
        self.scorecard = None
        self.scorecard_state = ScorecardState.NOT_FETCHED

    def get_current(self) -> str:
        """Get the current match ID.

        Raises:
            NoCurrentMatchError: If no match has been selected yet
        """
        if not self.current_match_id:
            raise NoCurrentMatchError()
        return self.current_match_id

    def is_current(self, match_id: str) -> bool:
        return self.current_match_id is not None and self.current_match_id == match_id

    def record_scorecard(self, scorecard: FullScorecard) -> None:
        """Cache the scorecard for the current match.

        Callers only fetch while needs_scorecard is True, so this is
        normally called once per selection.
        """
        self.scorecard = scorecard
        self.scorecard_state = ScorecardState.FETCHED

    def record_scorecard_failure(self) -> None:
        self.scorecard = None
        self.scorecard_state = ScorecardState.FAILED

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {
            "current_match_id": self.current_match_id,
            "scorecard_state": self.scorecard_state.value,
            "scorecard_fetched": self.scorecard_fetched,
            "scorecard_innings": len(self.scorecard.innings) if self.scorecard else 0,
        }
