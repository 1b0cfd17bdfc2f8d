"""Process entry point.

    python -m cricbot bot   # Discord bot (default)
    python -m cricbot api   # HTTP preview API only
    python -m cricbot all   # both, sharing one match session
"""

import argparse
import asyncio
import logging
import sys

import uvicorn

from cricbot.api import create_app
from cricbot.bot import CricketBot
from cricbot.config import API_HOST, API_PORT, get_discord_token
from cricbot.consumers import InteractionRouter
from cricbot.logging_setup import configure_logging
from cricbot.providers.cricbuzz import CricbuzzProvider

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cricbot", description="Live cricket Discord bot")
    parser.add_argument("mode", nargs="?", choices=("bot", "api", "all"), default="bot")
    parser.add_argument("--host", default=API_HOST, help="API bind address")
    parser.add_argument("--port", type=int, default=API_PORT, help="API port")
    return parser


def _api_server(interactions: InteractionRouter, host: str, port: int) -> uvicorn.Server:
    config = uvicorn.Config(create_app(interactions), host=host, port=port, log_config=None)
    return uvicorn.Server(config)


async def _run(mode: str, host: str, port: int, token: str | None) -> None:
    interactions = InteractionRouter(CricbuzzProvider())

    if mode == "api":
        await _api_server(interactions, host, port).serve()
        return

    bot = CricketBot(interactions)
    async with bot:
        if mode == "all":
            await asyncio.gather(bot.start(token), _api_server(interactions, host, port).serve())
        else:
            await bot.start(token)


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    configure_logging()

    token = get_discord_token()
    if args.mode in ("bot", "all") and not token:
        logger.error("[MAIN] No Discord token set (DISCORD_TOKEN, TOKEN or BOT_TOKEN)")
        return 1

    try:
        asyncio.run(_run(args.mode, args.host, args.port, token))
    except KeyboardInterrupt:
        logger.info("[MAIN] Shutting down")
    return 0


if __name__ == "__main__":
    sys.exit(main())
