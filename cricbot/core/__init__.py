"""Core types and errors."""

from cricbot.core.errors import (
    CricbotError,
    FetchError,
    FetchFailureError,
    FetchTimeoutError,
    NoCurrentMatchError,
)
from cricbot.core.types import (
    BatterFigures,
    BowlerFigures,
    ColorTag,
    DisplayPayload,
    FullScorecard,
    InningsCard,
    InningsScore,
    MatchHeader,
    MatchState,
    MatchSummary,
    MatchView,
    MiniScore,
    ScorecardBatter,
    ScorecardBowler,
    SelectOption,
    ViewControls,
    ViewRequest,
)

__all__ = [
    # Types
    "BatterFigures",
    "BowlerFigures",
    "ColorTag",
    "DisplayPayload",
    "FullScorecard",
    "InningsCard",
    "InningsScore",
    "MatchHeader",
    "MatchState",
    "MatchSummary",
    "MatchView",
    "MiniScore",
    "ScorecardBatter",
    "ScorecardBowler",
    "SelectOption",
    "ViewControls",
    "ViewRequest",
    # Errors
    "CricbotError",
    "FetchError",
    "FetchFailureError",
    "FetchTimeoutError",
    "NoCurrentMatchError",
]
