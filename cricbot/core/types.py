"""Core data types.

Dataclasses shared by the provider, the view builders and the integration
layers. Provider data is normalized into these before any view logic runs,
so nothing downstream touches raw Cricbuzz JSON.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, IntEnum


class MatchState(str, Enum):
    """Lifecycle phase of a match as reported by the match header."""

    IN_PROGRESS = "in_progress"
    COMPLETE = "complete"
    OTHER = "other"  # preview, innings break, delays, etc.


class MatchView(str, Enum):
    """Views a user can request for a match."""

    LIVE = "live"
    FULL = "full"
    BATTING = "batting"
    BOWLING = "bowling"

    @classmethod
    def from_option(cls, value: str) -> "MatchView":
        """Map a selector option value to a view.

        The selector labels the main view "scorecard"; everything else
        uses the view's own value.
        """
        if value == "scorecard":
            return cls.LIVE
        return cls(value)


class ColorTag(IntEnum):
    """Embed accent colors, one per payload kind."""

    LIVE = 0x4CAF50
    RESULT = 0xFFC107
    FULL_SCORECARD = 0x009688
    BATTING = 0x2196F3
    BOWLING = 0xFF5722
    NO_LIVE = 0x9E9E9E
    ERROR = 0xF44336


# =============================================================================
# Live match data
# =============================================================================


@dataclass(frozen=True)
class BatterFigures:
    """A batter at the crease."""

    name: str | None = None
    runs: int | None = None
    balls: int | None = None


@dataclass(frozen=True)
class BowlerFigures:
    """The bowler currently bowling to the striker."""

    name: str | None = None
    overs: float | None = None
    runs: int | None = None
    wickets: int | None = None


@dataclass(frozen=True)
class InningsScore:
    """Final score line for one recorded innings."""

    team_name: str
    score: int | None = None
    wickets: int | None = None
    overs: float | None = None


@dataclass(frozen=True)
class MatchHeader:
    """Header block of a match-center response."""

    state: MatchState
    raw_state: str = ""
    team1_short: str = ""
    team2_short: str = ""
    status: str | None = None
    completed_at: datetime | None = None
    winning_team: str | None = None  # structured result field, often absent
    player_of_match: str | None = None

    @property
    def is_complete(self) -> bool:
        return self.state == MatchState.COMPLETE


@dataclass(frozen=True)
class MiniScore:
    """Lightweight live score attached to every commentary fetch."""

    bat_team_name: str | None = None
    bat_team_score: int | None = None
    bat_team_wickets: int | None = None
    overs: float | None = None
    striker: BatterFigures | None = None
    non_striker: BatterFigures | None = None
    bowler: BowlerFigures | None = None
    innings: tuple[InningsScore, ...] = ()


@dataclass(frozen=True)
class MatchSummary:
    """Normalized result of one live-data fetch."""

    match_id: str
    header: MatchHeader
    miniscore: MiniScore | None = None


# =============================================================================
# Full scorecard
# =============================================================================


@dataclass(frozen=True)
class ScorecardBatter:
    name: str
    runs: int = 0
    balls: int = 0


@dataclass(frozen=True)
class ScorecardBowler:
    name: str
    wickets: int = 0
    runs: int = 0
    overs: float = 0.0


@dataclass(frozen=True)
class InningsCard:
    """One innings of the full scorecard.

    Batters and bowlers keep the order the provider lists them in.
    """

    bat_team_name: str | None = None
    batters: tuple[ScorecardBatter, ...] = ()
    bowl_team_name: str | None = None
    bowlers: tuple[ScorecardBowler, ...] = ()


@dataclass(frozen=True)
class FullScorecard:
    match_id: str
    innings: tuple[InningsCard, ...] = ()


# =============================================================================
# Presentation
# =============================================================================


@dataclass(frozen=True)
class ViewRequest:
    """A user's request to see one view of a match. Never stored."""

    match_id: str
    view: MatchView = MatchView.LIVE


@dataclass(frozen=True)
class SelectOption:
    label: str
    value: str
    emoji: str


@dataclass(frozen=True)
class ViewControls:
    """Interactive controls offered alongside a payload."""

    match_id: str | None = None
    selector_options: tuple[SelectOption, ...] = ()
    refresh: bool = False

    @classmethod
    def none(cls) -> "ViewControls":
        return cls()

    @property
    def is_empty(self) -> bool:
        return not self.selector_options and not self.refresh


@dataclass(frozen=True)
class DisplayPayload:
    """Platform-agnostic rendering of a view."""

    title: str
    body: str
    color: ColorTag
    controls: ViewControls = field(default_factory=ViewControls.none)

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {
            "title": self.title,
            "body": self.body,
            "color": int(self.color),
            "controls": {
                "match_id": self.controls.match_id,
                "selector_options": [
                    {"label": o.label, "value": o.value, "emoji": o.emoji}
                    for o in self.controls.selector_options
                ],
                "refresh": self.controls.refresh,
            },
        }
