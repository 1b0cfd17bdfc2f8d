"""Cricbuzz match-center provider.

Normalizes Cricbuzz match-center JSON into our dataclass format.

Layer Separation:
- Does NOT render anything; views only ever see core types
- Missing or malformed fields become None, never exceptions
- Network errors from the client propagate unchanged (FetchError)
"""

import logging

from cricbot.core import (
    BatterFigures,
    BowlerFigures,
    FullScorecard,
    InningsCard,
    InningsScore,
    MatchHeader,
    MatchState,
    MatchSummary,
    MiniScore,
    ScorecardBatter,
    ScorecardBowler,
)
from cricbot.providers.cricbuzz.client import CricbuzzClient
from cricbot.utilities.match_status import parse_completion_time

logger = logging.getLogger(__name__)

# Cricbuzz state strings, compared lowercased with spaces removed
COMPLETE_STATES = {"complete"}
IN_PROGRESS_STATES = {"inprogress", "live", "inningsbreak", "stumps", "lunch", "tea", "drinks"}


def _to_int(value) -> int | None:
    if value is None or value == "" or isinstance(value, bool):
        return None
    try:
        return int(float(value))
    except (TypeError, ValueError):
        return None


def _to_float(value) -> float | None:
    if value is None or value == "" or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _as_dict(value) -> dict:
    return value if isinstance(value, dict) else {}


def _first(data: dict, *keys):
    """Return the first non-empty value among keys.

    Cricbuzz has shipped more than one spelling for the same field
    (name/batName, runs/batRuns), so lookups try each in turn.
    """
    for key in keys:
        value = data.get(key)
        if value is not None and value != "":
            return value
    return None


class CricbuzzProvider:
    """Fetches and normalizes one match at a time."""

    def __init__(self, client: CricbuzzClient | None = None):
        self._client = client or CricbuzzClient()

    @property
    def name(self) -> str:
        return "cricbuzz"

    async def get_match_summary(self, match_id: str) -> MatchSummary:
        """Fetch live data for a match.

        Raises:
            FetchError: If the commentary request fails
        """
        data = await self._client.get_commentary(match_id)
        return self.parse_match_summary(data, match_id)

    async def get_scorecard(self, match_id: str) -> FullScorecard:
        """Fetch the full scorecard for a completed match.

        Raises:
            FetchError: If the scorecard request fails
        """
        data = await self._client.get_scorecard(match_id)
        return self.parse_scorecard(data, match_id)

    async def close(self) -> None:
        await self._client.close()

    # -------------------------------------------------------------------------
    # Parsing
    # -------------------------------------------------------------------------

    def parse_match_summary(self, data: dict, match_id: str) -> MatchSummary:
        """Parse a commentary response into a MatchSummary."""
        header = self._parse_header(_as_dict(data.get("matchHeader")))
        miniscore_data = data.get("miniscore")
        miniscore = None
        if isinstance(miniscore_data, dict):
            miniscore = self._parse_miniscore(miniscore_data)
        return MatchSummary(match_id=str(match_id), header=header, miniscore=miniscore)

    def parse_scorecard(self, data: dict, match_id: str) -> FullScorecard:
        """Parse a scorecard response into a FullScorecard."""
        innings = []
        for inn in data.get("scoreCard") or []:
            if not isinstance(inn, dict):
                continue
            innings.append(self._parse_innings_card(inn))
        return FullScorecard(match_id=str(match_id), innings=tuple(innings))

    def _parse_state(self, raw_state: str) -> MatchState:
        key = raw_state.lower().replace(" ", "")
        if key in COMPLETE_STATES:
            return MatchState.COMPLETE
        if key in IN_PROGRESS_STATES:
            return MatchState.IN_PROGRESS
        return MatchState.OTHER

    def _parse_header(self, data: dict) -> MatchHeader:
        raw_state = str(data.get("state") or "")

        completed_at = parse_completion_time(data.get("matchCompleteTimeGMT"))
        if completed_at is None:
            completed_at = parse_completion_time(data.get("matchCompleteTimestamp"))

        players = data.get("playersOfTheMatch")
        player_of_match = None
        if isinstance(players, list) and players and isinstance(players[0], dict):
            player_of_match = _first(players[0], "name", "fullName")

        return MatchHeader(
            state=self._parse_state(raw_state),
            raw_state=raw_state,
            team1_short=_first(_as_dict(data.get("team1")), "shortName", "name") or "",
            team2_short=_first(_as_dict(data.get("team2")), "shortName", "name") or "",
            status=data.get("status") or None,
            completed_at=completed_at,
            winning_team=_as_dict(data.get("result")).get("winningTeam") or None,
            player_of_match=player_of_match,
        )

    def _parse_batter(self, data) -> BatterFigures | None:
        if not isinstance(data, dict):
            return None
        batter = BatterFigures(
            name=_first(data, "name", "batName"),
            runs=_to_int(_first(data, "runs", "batRuns")),
            balls=_to_int(_first(data, "balls", "batBalls")),
        )
        # Each field is optional on its own; only an entirely empty entry is dropped
        if batter.name is None and batter.runs is None and batter.balls is None:
            return None
        return batter

    def _parse_bowler(self, data) -> BowlerFigures | None:
        if not isinstance(data, dict):
            return None
        return BowlerFigures(
            name=_first(data, "name", "bowlName"),
            overs=_to_float(_first(data, "overs", "bowlOvs")),
            runs=_to_int(_first(data, "runs", "bowlRuns")),
            wickets=_to_int(_first(data, "wickets", "bowlWkts")),
        )

    def _parse_miniscore(self, data: dict) -> MiniScore:
        bat_team = _as_dict(data.get("batTeam"))
        score_details = _as_dict(data.get("matchScoreDetails"))

        innings = []
        for inn in score_details.get("inningsScoreList") or []:
            if not isinstance(inn, dict):
                continue
            innings.append(
                InningsScore(
                    team_name=_first(inn, "batTeamName") or "",
                    score=_to_int(inn.get("score")),
                    wickets=_to_int(inn.get("wickets")),
                    overs=_to_float(inn.get("overs")),
                )
            )

        return MiniScore(
            bat_team_name=_first(bat_team, "teamName", "teamSName"),
            bat_team_score=_to_int(bat_team.get("teamScore")),
            bat_team_wickets=_to_int(bat_team.get("teamWkts")),
            overs=_to_float(data.get("overs")),
            striker=self._parse_batter(data.get("batsmanStriker")),
            non_striker=self._parse_batter(data.get("batsmanNonStriker")),
            bowler=self._parse_bowler(data.get("bowlerStriker")),
            innings=tuple(innings),
        )

    def _parse_innings_card(self, data: dict) -> InningsCard:
        bat_details = _as_dict(data.get("batTeamDetails"))
        bowl_details = _as_dict(data.get("bowlTeamDetails"))

        batters = []
        for entry in _as_dict(bat_details.get("batsmenData")).values():
            if not isinstance(entry, dict):
                continue
            batters.append(
                ScorecardBatter(
                    name=_first(entry, "batName", "name") or "?",
                    runs=_to_int(entry.get("runs")) or 0,
                    balls=_to_int(entry.get("balls")) or 0,
                )
            )

        bowlers = []
        for entry in _as_dict(bowl_details.get("bowlersData")).values():
            if not isinstance(entry, dict):
                continue
            bowlers.append(
                ScorecardBowler(
                    name=_first(entry, "bowlName", "name") or "?",
                    wickets=_to_int(entry.get("wickets")) or 0,
                    runs=_to_int(entry.get("runs")) or 0,
                    overs=_to_float(entry.get("overs")) or 0.0,
                )
            )

        return InningsCard(
            bat_team_name=bat_details.get("batTeamName"),
            batters=tuple(batters),
            bowl_team_name=bowl_details.get("bowlTeamName"),
            bowlers=tuple(bowlers),
        )
