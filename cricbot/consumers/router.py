"""Interaction router.

Turns the bot's externally triggered operations into display payloads:

- on_match_selected:    /live <matchid> - follow a new match
- on_show_current:      /current - re-show the followed match
- on_view_requested:    view selector - switch between views
- on_refresh_requested: refresh button - re-fetch the main view

Error policy:
- FetchError from the live-data call propagates; the caller shows a generic error
- Scorecard fetch failures are logged and swallowed; dependent views degrade
- NoCurrentMatchError propagates from on_show_current for a user-facing message
"""

import logging
from collections import OrderedDict
from datetime import datetime

from cricbot.consumers.session import MatchSession
from cricbot.consumers.views import build_no_live_view, render_view
from cricbot.core import (
    DisplayPayload,
    FetchError,
    FullScorecard,
    MatchSummary,
    MatchView,
    ViewRequest,
)
from cricbot.providers.cricbuzz import CricbuzzProvider
from cricbot.utilities.match_status import should_reset

logger = logging.getLogger(__name__)

# Scorecards kept for matches other than the current one, oldest evicted first
OTHER_SCORECARDS_MAX = 8


class InteractionRouter:
    """Dispatches user interactions to the provider, session and views.

    Args:
        provider: Cricbuzz provider used for every fetch
        session: Current-match session, owned by the running process
        clock: Optional callable returning "now" (for staleness checks)
    """

    def __init__(
        self,
        provider: CricbuzzProvider,
        session: MatchSession | None = None,
        clock=None,
    ):
        self._provider = provider
        self.session = session or MatchSession()
        self._clock = clock
        self._other_scorecards: OrderedDict[str, FullScorecard] = OrderedDict()

    def _now(self) -> datetime | None:
        return self._clock() if self._clock else None

    async def _fetch_scorecard(self, match_id: str) -> FullScorecard | None:
        try:
            return await self._provider.get_scorecard(match_id)
        except FetchError as e:
            logger.warning("[ROUTER] Scorecard fetch failed for match %s: %s", match_id, e)
            return None

    async def _scorecard_for(self, summary: MatchSummary) -> FullScorecard | None:
        """Get the scorecard for a completed match.

        The session caches one scorecard for the current match and fetches it
        at most once; a failed fetch leaves it retryable. Other matches (an
        older message's controls, say) use a small cache keyed by match ID,
        so they too are fetched at most once while they stay in it.
        """
        if not summary.header.is_complete:
            return None

        match_id = summary.match_id
        if not self.session.is_current(match_id):
            return await self._other_scorecard(match_id)

        if self.session.needs_scorecard:
            scorecard = await self._fetch_scorecard(match_id)
            if scorecard is None:
                self.session.record_scorecard_failure()
            else:
                logger.info(
                    "[ROUTER] Cached scorecard for match %s (%d innings)",
                    match_id,
                    len(scorecard.innings),
                )
                self.session.record_scorecard(scorecard)

        return self.session.scorecard

    async def _other_scorecard(self, match_id: str) -> FullScorecard | None:
        if match_id in self._other_scorecards:
            self._other_scorecards.move_to_end(match_id)
            return self._other_scorecards[match_id]

        scorecard = await self._fetch_scorecard(match_id)
        if scorecard is not None:
            self._other_scorecards[match_id] = scorecard
            while len(self._other_scorecards) > OTHER_SCORECARDS_MAX:
                self._other_scorecards.popitem(last=False)
        return scorecard

    async def render(self, request: ViewRequest, with_scorecard: bool = True) -> DisplayPayload:
        """Fetch live data for a match and render the requested view.

        A completed match that has gone stale renders the no-live-match view
        straight away, without touching the scorecard.

        Raises:
            FetchError: If the live-data fetch fails
        """
        summary = await self._provider.get_match_summary(request.match_id)
        now = self._now()
        if should_reset(summary.header, now=now):
            logger.debug("[ROUTER] Match %s is stale, no live match", request.match_id)
            return build_no_live_view()

        scorecard = await self._scorecard_for(summary) if with_scorecard else None
        payload = render_view(request, summary, scorecard, now=now)
        logger.debug(
            "[ROUTER] Rendered %s view for match %s (%s)",
            request.view.value,
            request.match_id,
            summary.header.raw_state or "unknown state",
        )
        return payload

    async def on_match_selected(self, match_id: str) -> DisplayPayload:
        """Follow a new match and render its main view."""
        logger.info("[ROUTER] Match selected: %s", match_id)
        self.session.select_match(match_id)
        return await self.render(ViewRequest(match_id=match_id, view=MatchView.LIVE))

    async def on_show_current(self) -> DisplayPayload:
        """Re-render the main view of the current match.

        Raises:
            NoCurrentMatchError: If no match has been selected
        """
        match_id = self.session.get_current()
        return await self.render(ViewRequest(match_id=match_id, view=MatchView.LIVE))

    async def on_view_requested(self, match_id: str, view: MatchView) -> DisplayPayload:
        return await self.render(ViewRequest(match_id=match_id, view=view))

    async def on_refresh_requested(self, match_id: str) -> DisplayPayload:
        """Re-fetch and render the main view only."""
        return await self.render(
            ViewRequest(match_id=match_id, view=MatchView.LIVE), with_scorecard=False
        )

    async def close(self) -> None:
        await self._provider.close()
