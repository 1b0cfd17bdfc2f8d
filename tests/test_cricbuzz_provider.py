"""Tests for the Cricbuzz client and payload normalization."""

import asyncio

import httpx
import pytest

from cricbot.config import CRICBUZZ_TIMEOUT
from cricbot.core import FetchFailureError, FetchTimeoutError, MatchState
from cricbot.providers.cricbuzz import CricbuzzClient, CricbuzzProvider
from cricbot.providers.cricbuzz.client import commentary_url, scorecard_url


def _client(handler) -> CricbuzzClient:
    return CricbuzzClient(timeout=15, transport=httpx.MockTransport(handler))


# ---------- HTTP client ----------


class TestCricbuzzClient:
    def test_urls(self):
        assert commentary_url("91234") == "https://www.cricbuzz.com/api/mcenter/comm/91234"
        assert scorecard_url("91234") == "https://www.cricbuzz.com/api/mcenter/scorecard/91234"

    def test_returns_json_and_sends_site_headers(self, live_comm):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["referer"] = request.headers.get("Referer")
            seen["user_agent"] = request.headers.get("User-Agent")
            return httpx.Response(200, json=live_comm)

        async def run():
            client = _client(handler)
            try:
                return await client.get_commentary("91234")
            finally:
                await client.close()

        data = asyncio.run(run())

        assert data["matchHeader"]["status"] == "IND need 50 runs"
        assert seen["url"].endswith("/comm/91234")
        assert seen["referer"] == "https://www.cricbuzz.com"
        assert seen["user_agent"] == "Mozilla/5.0"

    def test_timeout_raises_fetch_timeout(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(FetchTimeoutError):
            asyncio.run(_client(handler).get_scorecard("91234"))

    @pytest.mark.parametrize("status_code", [404, 500, 503])
    def test_non_success_raises_fetch_failure(self, status_code):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status_code, json={})

        with pytest.raises(FetchFailureError):
            asyncio.run(_client(handler).get_commentary("91234"))

    def test_connection_error_raises_fetch_failure(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(FetchFailureError):
            asyncio.run(_client(handler).get_commentary("91234"))

    def test_invalid_json_raises_fetch_failure(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>blocked</html>")

        with pytest.raises(FetchFailureError):
            asyncio.run(_client(handler).get_commentary("91234"))

    def test_non_object_json_raises_fetch_failure(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=[1, 2, 3])

        with pytest.raises(FetchFailureError):
            asyncio.run(_client(handler).get_commentary("91234"))

    def test_default_timeout_is_fifteen_seconds(self, monkeypatch):
        monkeypatch.setenv("CRICBOT_CRICBUZZ_TIMEOUT", "60")
        monkeypatch.setenv("CRICBUZZ_TIMEOUT", "60")

        assert CRICBUZZ_TIMEOUT == 15.0
        assert CricbuzzClient()._timeout == 15.0


# ---------- Normalization ----------


class TestParseMatchSummary:
    def test_live_match(self, live_comm):
        summary = CricbuzzProvider(client=object()).parse_match_summary(live_comm, 91234)

        assert summary.match_id == "91234"
        header = summary.header
        assert header.state == MatchState.IN_PROGRESS
        assert header.raw_state == "In Progress"
        assert (header.team1_short, header.team2_short) == ("IND", "AUS")
        assert header.completed_at is None

        mini = summary.miniscore
        assert (mini.bat_team_name, mini.bat_team_score, mini.bat_team_wickets) == ("IND", 120, 3)
        assert mini.overs == 15.2
        assert mini.striker.name == "Kohli"
        assert mini.bowler.wickets == 1

    def test_complete_match(self, complete_comm, now):
        summary = CricbuzzProvider(client=object()).parse_match_summary(complete_comm, "91234")
        header = summary.header

        assert header.is_complete
        assert header.player_of_match == "Virat Kohli"
        assert header.completed_at is not None
        assert (now - header.completed_at).total_seconds() == 600
        assert [i.team_name for i in summary.miniscore.innings] == ["IND", "AUS"]

    def test_structured_winner(self, complete_comm):
        complete_comm["matchHeader"]["result"] = {"winningTeam": "India", "winByRuns": True}
        summary = CricbuzzProvider(client=object()).parse_match_summary(complete_comm, "1")
        assert summary.header.winning_team == "India"

    def test_gmt_string_preferred(self, complete_comm):
        complete_comm["matchHeader"]["matchCompleteTimeGMT"] = "2026-03-01 18:00:00"
        summary = CricbuzzProvider(client=object()).parse_match_summary(complete_comm, "1")
        assert summary.header.completed_at.hour == 18

    def test_alternate_field_names(self):
        data = {
            "matchHeader": {"state": "inprogress"},
            "miniscore": {
                "batsmanStriker": {"batName": "Root", "batRuns": "88", "batBalls": 101},
                "bowlerStriker": {"bowlName": "Cummins", "bowlOvs": 12.4, "bowlWkts": 2},
            },
        }
        mini = CricbuzzProvider(client=object()).parse_match_summary(data, "1").miniscore
        assert (mini.striker.name, mini.striker.runs, mini.striker.balls) == ("Root", 88, 101)
        assert (mini.bowler.name, mini.bowler.overs, mini.bowler.wickets) == ("Cummins", 12.4, 2)
        assert mini.bowler.runs is None

    def test_unnamed_striker_keeps_figures(self):
        data = {
            "matchHeader": {"state": "In Progress"},
            "miniscore": {"batsmanStriker": {"runs": 4, "balls": 3}},
        }
        mini = CricbuzzProvider(client=object()).parse_match_summary(data, "1").miniscore

        assert (mini.striker.name, mini.striker.runs, mini.striker.balls) == (None, 4, 3)
        assert mini.non_striker is None

    def test_empty_batter_entry_dropped(self):
        data = {"matchHeader": {}, "miniscore": {"batsmanStriker": {"name": "", "runs": None}}}
        mini = CricbuzzProvider(client=object()).parse_match_summary(data, "1").miniscore
        assert mini.striker is None

    @pytest.mark.parametrize(
        "players",
        [{"1": {"name": "Virat Kohli"}}, ["Virat Kohli"], [], "Virat Kohli", None],
    )
    def test_unexpected_players_of_match_shape(self, complete_comm, players):
        complete_comm["matchHeader"]["playersOfTheMatch"] = players
        summary = CricbuzzProvider(client=object()).parse_match_summary(complete_comm, "1")

        assert summary.header.is_complete
        assert summary.header.player_of_match is None

    def test_empty_payload_does_not_raise(self):
        summary = CricbuzzProvider(client=object()).parse_match_summary({}, "1")
        assert summary.header.state == MatchState.OTHER
        assert summary.miniscore is None

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("Complete", MatchState.COMPLETE),
            ("In Progress", MatchState.IN_PROGRESS),
            ("InProgress", MatchState.IN_PROGRESS),
            ("Innings Break", MatchState.IN_PROGRESS),
            ("Preview", MatchState.OTHER),
        ],
    )
    def test_state_mapping(self, raw, expected):
        data = {"matchHeader": {"state": raw}}
        summary = CricbuzzProvider(client=object()).parse_match_summary(data, "1")
        assert summary.header.state == expected


class TestParseScorecard:
    def test_innings_and_order(self, scorecard_json):
        card = CricbuzzProvider(client=object()).parse_scorecard(scorecard_json, "91234")

        assert len(card.innings) == 2
        first = card.innings[0]
        assert first.bat_team_name == "IND"
        assert first.bowl_team_name == "AUS"
        assert [b.name for b in first.batters] == ["Rohit", "Kohli", "Pant"]
        assert first.bowlers[0].overs == 4.0

    def test_missing_scorecard_key(self):
        card = CricbuzzProvider(client=object()).parse_scorecard({}, "1")
        assert card.innings == ()


class TestProviderFetch:
    def test_fetch_and_parse(self, live_comm, scorecard_json):
        def handler(request: httpx.Request) -> httpx.Response:
            if "/scorecard/" in request.url.path:
                return httpx.Response(200, json=scorecard_json)
            return httpx.Response(200, json=live_comm)

        async def run():
            provider = CricbuzzProvider(client=_client(handler))
            try:
                return (
                    await provider.get_match_summary("91234"),
                    await provider.get_scorecard("91234"),
                )
            finally:
                await provider.close()

        summary, card = asyncio.run(run())
        assert summary.miniscore.bat_team_score == 120
        assert len(card.innings) == 2
