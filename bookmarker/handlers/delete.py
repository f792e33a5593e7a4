"""Delete button: removes a bookmark DM the button is attached to."""

from bookmarker.adapters.discord.messages import InteractionResponse
from bookmarker.domain.models import Interaction
from bookmarker.errors import RequestShapeError
from bookmarker.ports.outbound import DiscordPort


class DeleteHandler:
    def __init__(self, client: DiscordPort):
        self.client = client

    async def handle(self, interaction: Interaction) -> InteractionResponse:
        # Discord echoes the message the button lives on; that is all the state we need
        if interaction.message is None:
            raise RequestShapeError("No message attached to component interaction")
        await self.client.delete_message(interaction.message.channel_id, interaction.message.id)
        return InteractionResponse.acknowledge()
