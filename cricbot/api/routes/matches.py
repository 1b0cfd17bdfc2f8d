"""Match preview endpoints.

Expose the bot's interactions over HTTP so views can be inspected without
Discord:
- POST /matches/{match_id}/select - Follow a match (same as /live)
- GET /matches/current - Main view of the followed match (same as /current)
- GET /matches/{match_id}/views/{view} - Render a view (scorecard, full, batting, bowling)
- POST /matches/{match_id}/refresh - Re-fetch the main view
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status

from cricbot.api.models import PayloadResponse
from cricbot.consumers import InteractionRouter
from cricbot.core import FetchError, MatchView, NoCurrentMatchError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/matches")


def get_router(request: Request) -> InteractionRouter:
    return request.app.state.router


def _fetch_failed(e: FetchError) -> HTTPException:
    logger.warning("[API] Live fetch failed: %s", e)
    return HTTPException(
        status_code=status.HTTP_502_BAD_GATEWAY,
        detail="Could not fetch match data",
    )


@router.post("/{match_id}/select", response_model=PayloadResponse)
async def select_match(
    match_id: str, interactions: InteractionRouter = Depends(get_router)
) -> PayloadResponse:
    try:
        payload = await interactions.on_match_selected(match_id)
    except FetchError as e:
        raise _fetch_failed(e) from e
    return PayloadResponse.from_payload(payload)


@router.get("/current", response_model=PayloadResponse)
async def show_current(interactions: InteractionRouter = Depends(get_router)) -> PayloadResponse:
    try:
        payload = await interactions.on_show_current()
    except NoCurrentMatchError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except FetchError as e:
        raise _fetch_failed(e) from e
    return PayloadResponse.from_payload(payload)


@router.get("/{match_id}/views/{view}", response_model=PayloadResponse)
async def render_match_view(
    match_id: str, view: str, interactions: InteractionRouter = Depends(get_router)
) -> PayloadResponse:
    """Render one view of a match.

    Accepts the selector values: scorecard (alias live), full, batting, bowling.
    """
    try:
        match_view = MatchView.from_option(view)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=f"Unknown view: {view}"
        ) from e

    try:
        payload = await interactions.on_view_requested(match_id, match_view)
    except FetchError as e:
        raise _fetch_failed(e) from e
    return PayloadResponse.from_payload(payload)


@router.post("/{match_id}/refresh", response_model=PayloadResponse)
async def refresh_match(
    match_id: str, interactions: InteractionRouter = Depends(get_router)
) -> PayloadResponse:
    try:
        payload = await interactions.on_refresh_requested(match_id)
    except FetchError as e:
        raise _fetch_failed(e) from e
    return PayloadResponse.from_payload(payload)
