"""Inbound interaction payload models.

Only the fields the handlers inspect are declared; everything else in the
payload is ignored. Payloads are mapped into the domain dataclasses.
"""

import re
from typing import Annotated, Dict, Optional, Union

from pydantic import BaseModel, StrictInt, StringConstraints, ValidationError

from bookmarker.domain.models import (
    CommandInvocation,
    CommandType,
    ComponentInvocation,
    Interaction,
    InteractionType,
    MessageRef,
    ResolvedMessage,
    User,
)
from bookmarker.errors import RequestShapeError

# Discord IDs arrive as decimal strings
Snowflake = Annotated[str, StringConstraints(pattern=r"^[0-9]+$")]

_SNOWFLAKE_RE = re.compile(r"[0-9]+")


def is_snowflake(value: str) -> bool:
    return bool(_SNOWFLAKE_RE.fullmatch(value))


class UserPayload(BaseModel):
    id: Snowflake
    username: str = ""
    discriminator: Optional[str] = None
    avatar: Optional[str] = None

    def to_domain(self) -> User:
        return User(
            id=int(self.id),
            name=self.username,
            discriminator=self.discriminator or "0",
            avatar=self.avatar,
        )


class MemberPayload(BaseModel):
    user: Optional[UserPayload] = None


class ResolvedMessagePayload(BaseModel):
    id: Snowflake
    channel_id: Snowflake
    content: str = ""
    author: UserPayload

    def to_domain(self) -> ResolvedMessage:
        return ResolvedMessage(
            id=int(self.id),
            channel_id=int(self.channel_id),
            content=self.content,
            author=self.author.to_domain(),
        )


class ResolvedPayload(BaseModel):
    messages: Dict[Snowflake, ResolvedMessagePayload] = {}


class InteractionDataPayload(BaseModel):
    """Command and component data share one object on the wire."""

    name: Optional[str] = None
    type: Optional[StrictInt] = None
    target_id: Optional[Snowflake] = None
    resolved: Optional[ResolvedPayload] = None
    custom_id: Optional[str] = None

    def to_command(self) -> CommandInvocation:
        if self.name is None:
            raise RequestShapeError("Command has no name")
        try:
            kind: Optional[CommandType] = CommandType(self.type)
        except ValueError:
            kind = None
        resolved_messages = None
        if self.resolved is not None:
            resolved_messages = {
                int(key): message.to_domain() for key, message in self.resolved.messages.items()
            }
        return CommandInvocation(
            name=self.name,
            kind=kind,
            target_id=int(self.target_id) if self.target_id is not None else None,
            resolved_messages=resolved_messages,
        )

    def to_component(self) -> Optional[ComponentInvocation]:
        if self.custom_id is None:
            return None
        return ComponentInvocation(custom_id=self.custom_id)


class MessageRefPayload(BaseModel):
    id: Snowflake
    channel_id: Snowflake


class InteractionPayload(BaseModel):
    type: StrictInt
    data: Optional[InteractionDataPayload] = None
    user: Optional[UserPayload] = None
    member: Optional[MemberPayload] = None
    guild_id: Optional[Snowflake] = None
    channel_id: Optional[Snowflake] = None
    message: Optional[MessageRefPayload] = None

    def to_domain(self) -> Interaction:
        try:
            kind = InteractionType(self.type)
        except ValueError:
            raise RequestShapeError(f"Unexpected interaction type: {self.type!r}") from None

        data = None
        if self.data is not None:
            if kind is InteractionType.APPLICATION_COMMAND:
                data = self.data.to_command()
            elif kind is InteractionType.MESSAGE_COMPONENT:
                data = self.data.to_component()

        member_user = None
        if self.member is not None and self.member.user is not None:
            member_user = self.member.user.to_domain()

        return Interaction(
            kind=kind,
            data=data,
            user=self.user.to_domain() if self.user is not None else None,
            member_user=member_user,
            guild_id=int(self.guild_id) if self.guild_id is not None else None,
            channel_id=int(self.channel_id) if self.channel_id is not None else None,
            message=(
                MessageRef(id=int(self.message.id), channel_id=int(self.message.channel_id))
                if self.message is not None
                else None
            ),
        )


def parse_interaction(raw_body: Union[bytes, str]) -> Interaction:
    """Validate a raw JSON body and map it to an Interaction.

    Raises RequestShapeError for invalid JSON, wrongly typed fields or an
    unknown interaction kind.
    """
    try:
        payload = InteractionPayload.model_validate_json(raw_body)
    except ValidationError as e:
        raise RequestShapeError(f"Invalid interaction payload: {e.error_count()} error(s)") from e
    return payload.to_domain()
