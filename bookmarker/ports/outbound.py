"""Outbound ports — interface for the Discord REST adapter."""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Protocol, Union, runtime_checkable

from bookmarker.adapters.discord.messages import CreateMessage


@dataclass(frozen=True)
class Delivered:
    """The DM was sent. Holds the raw channel and message objects Discord returned."""

    channel: Dict[str, Any]
    message: Dict[str, Any]

    @property
    def channel_id(self) -> int:
        return int(self.channel["id"])

    @property
    def message_id(self) -> int:
        return int(self.message["id"])


@dataclass(frozen=True)
class Blocked:
    """The recipient does not accept direct messages from us."""

    code: int
    message: str = ""


DeliveryOutcome = Union[Delivered, Blocked]


@runtime_checkable
class DiscordPort(Protocol):
    """Interface for the three Discord REST operations the app needs."""

    async def register_commands(
        self, commands: List[Dict[str, Any]], guild_id: Optional[int] = None
    ) -> None: ...

    async def send_direct_message(
        self, recipient_id: int, message: CreateMessage
    ) -> DeliveryOutcome: ...

    async def delete_message(self, channel_id: int, message_id: int) -> None: ...
