"""Discord bot.

Registers the /live and /current slash commands and routes component
interactions (view selector, refresh button) by custom ID. All match logic
lives in InteractionRouter; this module only translates between Discord
interactions and display payloads.
"""

import logging

import discord
from discord import app_commands

from cricbot.bot.render import (
    REFRESH_PREFIX,
    VIEW_PREFIX,
    parse_custom_id,
    payload_to_embed,
    payload_to_view,
)
from cricbot.consumers import InteractionRouter
from cricbot.core import DisplayPayload, FetchError, MatchView, NoCurrentMatchError

logger = logging.getLogger(__name__)

FETCH_ERROR_MESSAGE = "❌ Could not fetch match data. Try again later."


class CricketBot(discord.Client):
    """Discord client wired to an InteractionRouter."""

    def __init__(self, router: InteractionRouter):
        super().__init__(intents=discord.Intents.default())
        self.router = router
        self.tree = app_commands.CommandTree(self)
        self._register_commands()

    def _register_commands(self) -> None:
        @self.tree.command(name="live", description="Show live cricket match")
        @app_commands.describe(matchid="Cricbuzz Match ID")
        async def live(interaction: discord.Interaction, matchid: str) -> None:
            await self.handle_command(interaction, matchid.strip())

        @self.tree.command(name="current", description="Show current match again")
        async def current(interaction: discord.Interaction) -> None:
            await self.handle_command(interaction, None)

    async def setup_hook(self) -> None:
        synced = await self.tree.sync()
        logger.info("[DISCORD] Synced %d application commands", len(synced))

    async def on_ready(self) -> None:
        logger.info("[DISCORD] Cricket bot online as %s", self.user)

    async def close(self) -> None:
        await self.router.close()
        await super().close()

    async def on_interaction(self, interaction: discord.Interaction) -> None:
        """Route component interactions from any of our messages."""
        if interaction.type != discord.InteractionType.component:
            return

        data = interaction.data or {}
        parsed = parse_custom_id(data.get("custom_id"))
        if parsed is None:
            return

        kind, match_id = parsed
        if kind == VIEW_PREFIX:
            values = data.get("values") or []
            if not values:
                return
            await self.handle_view_select(interaction, match_id, values[0])
        elif kind == REFRESH_PREFIX:
            await self.handle_refresh(interaction, match_id)

    async def _edit(self, interaction: discord.Interaction, payload: DisplayPayload) -> None:
        await interaction.edit_original_response(
            content=None,
            embed=payload_to_embed(payload),
            view=payload_to_view(payload),
        )

    async def handle_command(self, interaction: discord.Interaction, match_id: str | None) -> None:
        """Handle /live (match_id given) and /current (match_id None)."""
        try:
            await interaction.response.defer()
            try:
                if match_id is None:
                    payload = await self.router.on_show_current()
                else:
                    payload = await self.router.on_match_selected(match_id)
            except NoCurrentMatchError as e:
                await interaction.edit_original_response(content=f"❌ {e}")
                return
            except FetchError as e:
                logger.warning("[DISCORD] Live fetch failed: %s", e)
                await interaction.edit_original_response(content=FETCH_ERROR_MESSAGE)
                return
            await self._edit(interaction, payload)
        except Exception:
            logger.exception("[DISCORD] Command interaction failed")

    async def handle_view_select(
        self, interaction: discord.Interaction, match_id: str, value: str
    ) -> None:
        try:
            await interaction.response.defer()
            try:
                view = MatchView.from_option(value)
            except ValueError:
                logger.warning("[DISCORD] Unknown view option %r for match %s", value, match_id)
                return
            try:
                payload = await self.router.on_view_requested(match_id, view)
            except FetchError as e:
                logger.warning("[DISCORD] Live fetch failed: %s", e)
                await interaction.followup.send(FETCH_ERROR_MESSAGE, ephemeral=True)
                return
            await self._edit(interaction, payload)
        except Exception:
            logger.exception("[DISCORD] View selection failed for match %s", match_id)

    async def handle_refresh(self, interaction: discord.Interaction, match_id: str) -> None:
        try:
            await interaction.response.defer()
            try:
                payload = await self.router.on_refresh_requested(match_id)
            except FetchError as e:
                logger.warning("[DISCORD] Live fetch failed: %s", e)
                await interaction.followup.send(FETCH_ERROR_MESSAGE, ephemeral=True)
                return
            await self._edit(interaction, payload)
        except Exception:
            logger.exception("[DISCORD] Refresh failed for match %s", match_id)
