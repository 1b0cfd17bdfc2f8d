"""Best-performer extraction from a full scorecard."""

from cricbot.core import FullScorecard, ScorecardBatter, ScorecardBowler


def best_batter(scorecard: FullScorecard | None, team_name: str | None) -> ScorecardBatter | None:
    """Find the top batter for a team.

    Scans every innings the team batted in. Most runs wins; equal runs go to
    the batter who faced fewer balls.

    Args:
        scorecard: Full scorecard (may be None if not fetched)
        team_name: Batting team name, matched exactly

    Returns:
        Best batter, or None if the team has no batting record
    """
    if scorecard is None or not team_name:
        return None

    best = None
    for innings in scorecard.innings:
        if innings.bat_team_name != team_name:
            continue
        for batter in innings.batters:
            if (
                best is None
                or batter.runs > best.runs
                or (batter.runs == best.runs and batter.balls < best.balls)
            ):
                best = batter
    return best


def best_bowler(scorecard: FullScorecard | None, team_name: str | None) -> ScorecardBowler | None:
    """Find the top bowler for a team.

    Scans every innings the team bowled in and picks the most wickets.
    There is no tie-break: the first bowler to reach the maximum wins.

    Args:
        scorecard: Full scorecard (may be None if not fetched)
        team_name: Bowling team name, matched exactly

    Returns:
        Best bowler, or None if the team has no bowling record
    """
    if scorecard is None or not team_name:
        return None

    best = None
    for innings in scorecard.innings:
        if innings.bowl_team_name != team_name:
            continue
        for bowler in innings.bowlers:
            if best is None or bowler.wickets > best.wickets:
                best = bowler
    return best
