"""Interaction dispatch by kind and sub-kind."""

from bookmarker.adapters.discord.embeds import DELETE_CUSTOM_ID
from bookmarker.adapters.discord.messages import InteractionResponse
from bookmarker.config import COMMAND_NAME
from bookmarker.domain.models import (
    CommandInvocation,
    ComponentInvocation,
    Interaction,
    InteractionType,
)
from bookmarker.errors import RequestShapeError
from bookmarker.handlers.bookmark import BookmarkHandler
from bookmarker.handlers.delete import DeleteHandler
from bookmarker.ports.outbound import DiscordPort


class InteractionRouter:
    """Routes a verified interaction to the handler for its kind.

    - PING: answered with PONG, no outbound calls
    - APPLICATION_COMMAND: the bookmark command, guild-only
    - MESSAGE_COMPONENT: the delete button on a bookmark DM
    """

    def __init__(self, client: DiscordPort, command_name: str = COMMAND_NAME):
        self.bookmark = BookmarkHandler(client, command_name)
        self.delete = DeleteHandler(client)

    async def dispatch(self, interaction: Interaction) -> InteractionResponse:
        if interaction.kind is InteractionType.PING:
            return InteractionResponse.pong()

        if interaction.kind is InteractionType.APPLICATION_COMMAND:
            if not isinstance(interaction.data, CommandInvocation):
                raise RequestShapeError("Unexpected interaction data type")
            user = interaction.invoker
            if user is None:
                raise RequestShapeError("No user provided")
            if interaction.guild_id is None:
                raise RequestShapeError("No guild ID provided")
            return await self.bookmark.handle(interaction.data, user, interaction.guild_id)

        if interaction.kind is InteractionType.MESSAGE_COMPONENT:
            if not isinstance(interaction.data, ComponentInvocation):
                raise RequestShapeError("Unexpected interaction data type")
            if interaction.data.custom_id != DELETE_CUSTOM_ID:
                raise RequestShapeError(f"Unexpected action {interaction.data.custom_id!r}")
            return await self.delete.handle(interaction)

        raise RequestShapeError("Unexpected interaction type")
