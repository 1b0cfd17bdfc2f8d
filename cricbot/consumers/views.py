"""Match view builders.

Pure functions from normalized match data to DisplayPayload. Nothing here
fetches, caches or talks to Discord; the router supplies the data and the
integration layer renders the payload.

Views:
- main:     live score, or the result summary once the match is complete
- full:     every batter of every innings (completed matches only)
- batting:  batters at the crease, or the winner's best batter
- bowling:  current bowler, or the winner's best bowler
- no live:  terminal view once a completed match has gone stale
"""

from datetime import datetime

from cricbot.consumers.stats import best_batter, best_bowler
from cricbot.core import (
    BatterFigures,
    ColorTag,
    DisplayPayload,
    FullScorecard,
    MatchSummary,
    MatchView,
    SelectOption,
    ViewControls,
    ViewRequest,
)
from cricbot.utilities.match_status import derive_winning_team, should_reset

UNAVAILABLE = "Unavailable"

BASE_OPTIONS = (
    SelectOption(label="Scorecard", value="scorecard", emoji="🏏"),
    SelectOption(label="Batting", value="batting", emoji="🏃"),
    SelectOption(label="Bowling", value="bowling", emoji="🎯"),
)
FULL_SCORECARD_OPTION = SelectOption(label="Full Scorecard", value="full", emoji="📊")


def _fmt(value, default: str = "-") -> str:
    """Format a number for display, dropping a trailing .0 from whole overs."""
    if value is None:
        return default
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def build_controls(match_id: str, completed: bool) -> ViewControls:
    """Build the view selector and refresh button for a match.

    The full scorecard option only appears once the match is complete.
    """
    options = BASE_OPTIONS + (FULL_SCORECARD_OPTION,) if completed else BASE_OPTIONS
    return ViewControls(match_id=match_id, selector_options=options, refresh=True)


def build_no_live_view() -> DisplayPayload:
    return DisplayPayload(
        title="🏏 Live Cricket",
        body="⌛ No live match is streaming right now.",
        color=ColorTag.NO_LIVE,
        controls=ViewControls.none(),
    )


def build_main_view(summary: MatchSummary) -> DisplayPayload:
    """Build the live score or, for a completed match, the result summary."""
    header = summary.header
    miniscore = summary.miniscore
    controls = build_controls(summary.match_id, header.is_complete)

    if header.is_complete:
        lines = [
            f"**{inn.team_name}** {_fmt(inn.score)}/{_fmt(inn.wickets)} ({_fmt(inn.overs)} ov)"
            for inn in (miniscore.innings if miniscore else ())
        ]
        scores = "\n".join(lines) if lines else "Final scores unavailable"
        body = (
            f"{scores}\n\n"
            f"🏆 **Result:** {header.status or 'Result unavailable'}\n"
            f"🎖 **Player of the Match:** {header.player_of_match or 'Not announced'}"
        )
        return DisplayPayload(
            title="🏁 Match Result", body=body, color=ColorTag.RESULT, controls=controls
        )

    title = f"{header.team1_short or '?'} vs {header.team2_short or '?'}"
    status = header.status or ""
    if miniscore is None:
        body = f"Live score unavailable\n\n{status}".rstrip()
    else:
        body = (
            f"**{miniscore.bat_team_name or '?'} "
            f"{_fmt(miniscore.bat_team_score)}/{_fmt(miniscore.bat_team_wickets)}**\n"
            f"Overs: {_fmt(miniscore.overs)}\n\n"
            f"{status}"
        ).rstrip()
    return DisplayPayload(title=title, body=body, color=ColorTag.LIVE, controls=controls)


def build_full_scorecard_view(
    summary: MatchSummary, scorecard: FullScorecard | None
) -> DisplayPayload:
    """List every batter of every innings under its team's name."""
    sections = []
    if scorecard is not None:
        for innings in scorecard.innings:
            lines = [f"🏏 **{innings.bat_team_name or '?'}**"]
            lines.extend(f"{b.name} {b.runs} ({b.balls})" for b in innings.batters)
            sections.append("\n".join(lines))

    return DisplayPayload(
        title="📊 Full Scorecard",
        body="\n\n".join(sections) or UNAVAILABLE,
        color=ColorTag.FULL_SCORECARD,
        controls=build_controls(summary.match_id, summary.header.is_complete),
    )


def _batter_line(batter: BatterFigures) -> str:
    parts = []
    if batter.name:
        parts.append(f"**{batter.name}**")
    if batter.runs is not None:
        parts.append(str(batter.runs))
    if batter.balls is not None:
        parts.append(f"({batter.balls})")
    return " ".join(parts)


def build_batting_view(summary: MatchSummary, scorecard: FullScorecard | None) -> DisplayPayload:
    """Show the batters at the crease, or the winning side's best batter."""
    header = summary.header
    controls = build_controls(summary.match_id, header.is_complete)

    if not header.is_complete:
        miniscore = summary.miniscore
        batters = [miniscore.striker, miniscore.non_striker] if miniscore else []
        lines = [_batter_line(b) for b in batters if b is not None]
        return DisplayPayload(
            title="🏏 Batting",
            body="\n".join(lines) or "Batting data unavailable",
            color=ColorTag.BATTING,
            controls=controls,
        )

    winner = derive_winning_team(header)
    best = best_batter(scorecard, winner)
    body = (
        f"🥇 **Best Batter ({winner})**\n{best.name} – {best.runs} ({best.balls})"
        if best
        else UNAVAILABLE
    )
    return DisplayPayload(
        title="🏏 Batting Highlights", body=body, color=ColorTag.BATTING, controls=controls
    )


def build_bowling_view(summary: MatchSummary, scorecard: FullScorecard | None) -> DisplayPayload:
    """Show the current bowler, or the winning side's best bowler."""
    header = summary.header
    controls = build_controls(summary.match_id, header.is_complete)

    if not header.is_complete:
        bowler = summary.miniscore.bowler if summary.miniscore else None
        name = (bowler.name if bowler else None) or "?"
        overs = (bowler.overs if bowler else None) or 0
        runs = (bowler.runs if bowler else None) or 0
        wickets = (bowler.wickets if bowler else None) or 0
        body = f"**{name}**\nOvers: {_fmt(overs)}\nRuns: {runs}\nWickets: {wickets}"
        return DisplayPayload(
            title="🎯 Bowling", body=body, color=ColorTag.BOWLING, controls=controls
        )

    winner = derive_winning_team(header)
    best = best_bowler(scorecard, winner)
    body = (
        f"🥇 **Best Bowler ({winner})**\n"
        f"{best.name} – {best.wickets}/{best.runs} ({_fmt(best.overs)} ov)"
        if best
        else UNAVAILABLE
    )
    return DisplayPayload(
        title="🎯 Bowling Highlights", body=body, color=ColorTag.BOWLING, controls=controls
    )


def render_view(
    request: ViewRequest,
    summary: MatchSummary,
    scorecard: FullScorecard | None = None,
    now: datetime | None = None,
) -> DisplayPayload:
    """Render the requested view of a match.

    A completed match that has gone stale always renders the no-live-match
    view with no controls, whatever view was requested.

    Args:
        request: Match ID and requested view
        summary: Latest live data for the match
        scorecard: Cached full scorecard, if any
        now: Current time (for staleness; defaults to now in UTC)

    Returns:
        Display payload for the integration layer
    """
    if should_reset(summary.header, now=now):
        return build_no_live_view()

    if request.view == MatchView.FULL:
        return build_full_scorecard_view(summary, scorecard)
    if request.view == MatchView.BATTING:
        return build_batting_view(summary, scorecard)
    if request.view == MatchView.BOWLING:
        return build_bowling_view(summary, scorecard)
    return build_main_view(summary)
