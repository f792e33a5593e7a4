"""Bookmark command: copies the target message into the invoking user's DMs."""

import sys

from bookmarker.adapters.discord.embeds import (
    action_row,
    bookmark_buttons,
    bookmark_embed,
    jump_url,
    link_button,
)
from bookmarker.adapters.discord.messages import CreateMessage, InteractionResponse, ResponseData
from bookmarker.config import COMMAND_NAME
from bookmarker.domain.models import (
    CommandInvocation,
    CommandType,
    ResolvedMessage,
    User,
)
from bookmarker.errors import RequestShapeError
from bookmarker.ports.outbound import Blocked, DiscordPort

BOOKMARKED_TEXT = "Message bookmarked!"
BLOCKED_TEXT = (
    "Could not bookmark this message: I can't send you direct messages. "
    "Allow direct messages from server members and try again."
)


def _log(msg: str):
    print(msg, file=sys.stderr)


def resolve_target(command: CommandInvocation, command_name: str = COMMAND_NAME) -> ResolvedMessage:
    """Validate the command and return the message it was invoked on."""
    if command.name != command_name:
        raise RequestShapeError(f"Unknown command {command.name}")
    if command.kind is not CommandType.MESSAGE:
        raise RequestShapeError("Unexpected command type")
    if command.target_id is None:
        raise RequestShapeError("No target ID")
    if command.resolved_messages is None:
        raise RequestShapeError("No resolved data")
    message = command.resolved_messages.get(command.target_id)
    if message is None:
        raise RequestShapeError("No resolved message")
    return message


def command_definition(command_name: str = COMMAND_NAME) -> dict:
    """Registration body for the guild-only message-context command."""
    return {
        "name": command_name,
        "type": CommandType.MESSAGE.value,
        "dm_permission": False,
    }


def build_bookmark(message: ResolvedMessage, guild_id: int) -> CreateMessage:
    return (
        CreateMessage()
        .with_embeds(bookmark_embed(message, guild_id))
        .with_components(bookmark_buttons(message, guild_id))
    )


class BookmarkHandler:
    def __init__(self, client: DiscordPort, command_name: str = COMMAND_NAME):
        self.client = client
        self.command_name = command_name

    async def handle(self, command: CommandInvocation, user: User, guild_id: int) -> InteractionResponse:
        target = resolve_target(command, self.command_name)

        # ApiError propagates; only a refused DM is an expected outcome
        outcome = await self.client.send_direct_message(user.id, build_bookmark(target, guild_id))

        if isinstance(outcome, Blocked):
            _log(f"Bookmark for user {user.id} not delivered: DMs disabled")
            return InteractionResponse.message(ResponseData(content=BLOCKED_TEXT))

        _log(f"Bookmarked message {target.id} for user {user.id}")
        bookmark_url = jump_url("@me", outcome.channel_id, outcome.message_id)
        return InteractionResponse.message(
            ResponseData(
                content=BOOKMARKED_TEXT,
                components=[action_row(link_button("Go to bookmark", bookmark_url))],
            )
        )
