"""FastAPI application for previewing match views over HTTP."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from cricbot.api.routes import matches, session
from cricbot.consumers import InteractionRouter
from cricbot.providers.cricbuzz import CricbuzzProvider
from cricbot.version import __version__

logger = logging.getLogger(__name__)


def create_app(interactions: InteractionRouter | None = None) -> FastAPI:
    """Create the API app.

    Args:
        interactions: Router to serve; a fresh one with its own session
            is created when omitted

    Returns:
        Configured FastAPI app
    """
    interactions = interactions or InteractionRouter(CricbuzzProvider())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("[API] Starting cricbot preview API v%s", __version__)
        yield
        await interactions.close()

    app = FastAPI(title="cricbot", version=__version__, lifespan=lifespan)
    app.state.router = interactions
    app.include_router(session.router)
    app.include_router(matches.router)
    return app
