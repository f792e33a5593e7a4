"""Embed and button builders for bookmark messages."""

from typing import Any, Dict, Union

import discord

from bookmarker.config import DISCORD_CDN_BASE
from bookmarker.domain.models import ResolvedMessage, User

DELETE_CUSTOM_ID = "delete"


def jump_url(guild_id: Union[int, str], channel_id: int, message_id: int) -> str:
    """Link to a message. Use guild_id="@me" for DM channels."""
    return f"https://discord.com/channels/{guild_id}/{channel_id}/{message_id}"


def avatar_url(user: User) -> str:
    if user.avatar:
        return f"{DISCORD_CDN_BASE}/avatars/{user.id}/{user.avatar}.png"
    # Legacy default-avatar index; users migrated off discriminators report "0"
    try:
        index = int(user.discriminator) % 5
    except ValueError:
        index = 0
    return f"{DISCORD_CDN_BASE}/embed/avatars/{index}.png"


def link_button(label: str, url: str) -> Dict[str, Any]:
    return {
        "type": discord.ComponentType.button.value,
        "style": discord.ButtonStyle.link.value,
        "label": label,
        "url": url,
    }


def action_button(label: str, custom_id: str) -> Dict[str, Any]:
    return {
        "type": discord.ComponentType.button.value,
        "style": discord.ButtonStyle.danger.value,
        "label": label,
        "custom_id": custom_id,
    }


def action_row(*buttons: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "type": discord.ComponentType.action_row.value,
        "components": list(buttons),
    }


def bookmark_embed(message: ResolvedMessage, guild_id: int) -> Dict[str, Any]:
    url = jump_url(guild_id, message.channel_id, message.id)
    embed = discord.Embed(
        description=message.content,
        url=url,
        timestamp=discord.utils.snowflake_time(message.id),
    )
    embed.set_author(name=message.author.name, url=url, icon_url=avatar_url(message.author))
    return embed.to_dict()


def bookmark_buttons(message: ResolvedMessage, guild_id: int) -> Dict[str, Any]:
    return action_row(
        link_button("Original message", jump_url(guild_id, message.channel_id, message.id)),
        action_button("Delete bookmark", DELETE_CUSTOM_ID),
    )
