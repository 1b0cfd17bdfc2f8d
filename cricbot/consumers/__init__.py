"""Session, view and interaction logic."""

from cricbot.consumers.router import InteractionRouter
from cricbot.consumers.session import MatchSession, ScorecardState
from cricbot.consumers.stats import best_batter, best_bowler
from cricbot.consumers.views import render_view

__all__ = [
    "InteractionRouter",
    "MatchSession",
    "ScorecardState",
    "best_batter",
    "best_bowler",
    "render_view",
]
