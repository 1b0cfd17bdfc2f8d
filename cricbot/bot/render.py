"""DisplayPayload -> Discord message components.

Component custom IDs carry the match ID so that any message's controls keep
working after a restart or after another match has been selected:
    view_<matchId>     view selector
    refresh_<matchId>  refresh button
"""

import discord

from cricbot.core import DisplayPayload

VIEW_PREFIX = "view"
REFRESH_PREFIX = "refresh"

# Interactions are routed by custom ID, so expiry only drops discord.py's own tracking
VIEW_TIMEOUT = 15 * 60


def view_custom_id(match_id: str) -> str:
    return f"{VIEW_PREFIX}_{match_id}"


def refresh_custom_id(match_id: str) -> str:
    return f"{REFRESH_PREFIX}_{match_id}"


def parse_custom_id(custom_id: str | None) -> tuple[str, str] | None:
    """Split a component custom ID into (kind, match_id).

    Returns:
        (kind, match_id) tuple, or None if the ID isn't one of ours
    """
    if not custom_id or "_" not in custom_id:
        return None
    kind, match_id = custom_id.split("_", 1)
    if kind not in (VIEW_PREFIX, REFRESH_PREFIX) or not match_id:
        return None
    return kind, match_id


def payload_to_embed(payload: DisplayPayload) -> discord.Embed:
    return discord.Embed(
        title=payload.title,
        description=payload.body,
        color=int(payload.color),
    )


def payload_to_view(payload: DisplayPayload) -> discord.ui.View | None:
    """Build the selector and refresh button rows.

    Items have no callbacks; the bot routes their interactions by custom ID.
    Must be called from within a running event loop.

    Returns:
        View with the payload's controls, or None when it offers none
        (editing a message with view=None strips its components)
    """
    controls = payload.controls
    if controls.is_empty or not controls.match_id:
        return None

    view = discord.ui.View(timeout=VIEW_TIMEOUT)
    if controls.selector_options:
        view.add_item(
            discord.ui.Select(
                custom_id=view_custom_id(controls.match_id),
                placeholder="Choose view",
                options=[
                    discord.SelectOption(label=o.label, value=o.value, emoji=o.emoji)
                    for o in controls.selector_options
                ],
                row=0,
            )
        )
    if controls.refresh:
        view.add_item(
            discord.ui.Button(
                custom_id=refresh_custom_id(controls.match_id),
                label="Refresh",
                emoji="🔄",
                style=discord.ButtonStyle.primary,
                row=1,
            )
        )
    return view
