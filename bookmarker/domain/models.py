"""Domain data models: pure Python dataclasses."""

from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import Dict, Optional, Union


class InteractionType(IntEnum):
    PING = 1
    APPLICATION_COMMAND = 2
    MESSAGE_COMPONENT = 3
    APPLICATION_COMMAND_AUTOCOMPLETE = 4
    MODAL_SUBMIT = 5


class CommandType(IntEnum):
    CHAT_INPUT = 1
    USER = 2
    MESSAGE = 3


class InteractionResponseType(IntEnum):
    PONG = 1
    CHANNEL_MESSAGE_WITH_SOURCE = 4
    DEFERRED_UPDATE_MESSAGE = 6


class MessageFlags(IntFlag):
    EPHEMERAL = 1 << 6


@dataclass(frozen=True)
class User:
    id: int
    name: str
    discriminator: str = "0"
    avatar: Optional[str] = None  # avatar hash, not a URL


@dataclass(frozen=True)
class ResolvedMessage:
    """A message the platform resolved for us inside the interaction payload."""

    id: int
    channel_id: int
    content: str
    author: User


@dataclass(frozen=True)
class CommandInvocation:
    name: str
    kind: Optional[CommandType]
    target_id: Optional[int] = None
    # None when the payload carried no "resolved" object at all
    resolved_messages: Optional[Dict[int, ResolvedMessage]] = None


@dataclass(frozen=True)
class ComponentInvocation:
    custom_id: str


@dataclass(frozen=True)
class MessageRef:
    """The message a component was attached to, echoed back by the platform."""

    id: int
    channel_id: int


@dataclass(frozen=True)
class Interaction:
    kind: InteractionType
    data: Union[CommandInvocation, ComponentInvocation, None] = None
    user: Optional[User] = None
    member_user: Optional[User] = None
    guild_id: Optional[int] = None
    channel_id: Optional[int] = None
    message: Optional[MessageRef] = None

    @property
    def invoker(self) -> Optional[User]:
        """The user who triggered the interaction, in a guild or a DM."""
        return self.member_user or self.user

