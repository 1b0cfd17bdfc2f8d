"""Session and health endpoints."""

from fastapi import APIRouter, Depends

from cricbot.api.models import HealthResponse, SessionResponse
from cricbot.api.routes.matches import get_router
from cricbot.consumers import InteractionRouter
from cricbot.version import __version__

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


@router.get("/session", response_model=SessionResponse)
def get_session(interactions: InteractionRouter = Depends(get_router)) -> SessionResponse:
    """Get the current-match session state."""
    return SessionResponse(**interactions.session.to_dict())
