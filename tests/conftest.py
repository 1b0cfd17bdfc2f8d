"""Shared fixtures: raw Cricbuzz payloads shaped like the match-center API."""

from datetime import UTC, datetime, timedelta

import pytest

NOW = datetime(2026, 3, 1, 20, 0, tzinfo=UTC)


def epoch_ms(dt: datetime) -> int:
    return int(dt.timestamp() * 1000)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def live_comm() -> dict:
    """Commentary response for a match in progress."""
    return {
        "matchHeader": {
            "matchId": 91234,
            "state": "In Progress",
            "status": "IND need 50 runs",
            "team1": {"teamId": 2, "name": "India", "shortName": "IND"},
            "team2": {"teamId": 4, "name": "Australia", "shortName": "AUS"},
        },
        "miniscore": {
            "batTeam": {"teamId": 2, "teamName": "IND", "teamScore": 120, "teamWkts": 3},
            "overs": 15.2,
            "batsmanStriker": {"name": "Kohli", "runs": 45, "balls": 30},
            "batsmanNonStriker": {"name": "Pant", "runs": 12, "balls": 9},
            "bowlerStriker": {"name": "Starc", "overs": 3.2, "runs": 28, "wickets": 1},
            "matchScoreDetails": {
                "inningsScoreList": [
                    {"batTeamName": "IND", "score": 120, "wickets": 3, "overs": 15.2},
                ]
            },
        },
    }


@pytest.fixture
def complete_comm() -> dict:
    """Commentary response for a match that finished ten minutes before NOW."""
    return {
        "matchHeader": {
            "matchId": 91234,
            "state": "Complete",
            "status": "IND won by 5 runs",
            "matchCompleteTimestamp": epoch_ms(NOW - timedelta(minutes=10)),
            "team1": {"shortName": "IND"},
            "team2": {"shortName": "AUS"},
            "playersOfTheMatch": [{"id": 1413, "name": "Virat Kohli"}],
        },
        "miniscore": {
            "batTeam": {"teamName": "AUS", "teamScore": 175, "teamWkts": 8},
            "overs": 20,
            "matchScoreDetails": {
                "inningsScoreList": [
                    {"batTeamName": "IND", "score": 180, "wickets": 6, "overs": 20},
                    {"batTeamName": "AUS", "score": 175, "wickets": 8, "overs": 20},
                ]
            },
        },
    }


@pytest.fixture
def scorecard_json() -> dict:
    """Scorecard response matching complete_comm."""
    return {
        "scoreCard": [
            {
                "inningsId": 1,
                "batTeamDetails": {
                    "batTeamName": "IND",
                    "batsmenData": {
                        "bat_1": {"batName": "Rohit", "runs": 22, "balls": 15},
                        "bat_2": {"batName": "Kohli", "runs": 71, "balls": 48},
                        "bat_3": {"batName": "Pant", "runs": 71, "balls": 40},
                    },
                },
                "bowlTeamDetails": {
                    "bowlTeamName": "AUS",
                    "bowlersData": {
                        "bowl_1": {"bowlName": "Starc", "wickets": 3, "runs": 30, "overs": 4},
                        "bowl_2": {"bowlName": "Zampa", "wickets": 2, "runs": 25, "overs": 4},
                    },
                },
            },
            {
                "inningsId": 2,
                "batTeamDetails": {
                    "batTeamName": "AUS",
                    "batsmenData": {
                        "bat_1": {"batName": "Head", "runs": 60, "balls": 35},
                        "bat_2": {"batName": "Marsh", "runs": 40, "balls": 30},
                    },
                },
                "bowlTeamDetails": {
                    "bowlTeamName": "IND",
                    "bowlersData": {
                        "bowl_1": {"bowlName": "Bumrah", "wickets": 3, "runs": 20, "overs": 4},
                        "bowl_2": {"bowlName": "Arshdeep", "wickets": 3, "runs": 35, "overs": 4},
                        "bowl_3": {"bowlName": "Kuldeep", "wickets": 1, "runs": 28, "overs": 4},
                    },
                },
            },
        ]
    }
