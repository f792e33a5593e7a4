"""Wire-level message types for the Discord REST API and interaction responses."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict

from bookmarker.domain.models import InteractionResponseType, MessageFlags

# "Cannot send messages to this user": the recipient has DMs disabled
CANNOT_MESSAGE_USER = 50007


class PlatformErrorResponse(BaseModel):
    """Error body Discord returns with 4xx responses."""

    code: int
    message: str

    @property
    def is_cannot_message_user(self) -> bool:
        return self.code == CANNOT_MESSAGE_USER


class CreateMessage(BaseModel):
    """Body of a create-message request. Builder methods return a new instance."""

    model_config = ConfigDict(frozen=True)

    embeds: Optional[List[Dict[str, Any]]] = None
    components: Optional[List[Dict[str, Any]]] = None
    flags: Optional[int] = None

    def with_embeds(self, *embeds: Dict[str, Any]) -> "CreateMessage":
        return self.model_copy(update={"embeds": list(embeds)})

    def with_components(self, *components: Dict[str, Any]) -> "CreateMessage":
        return self.model_copy(update={"components": list(components)})

    def with_flags(self, flags: MessageFlags) -> "CreateMessage":
        return self.model_copy(update={"flags": int(flags)})

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


# ── Interaction responses ───────────────────────────────────


class ResponseData(BaseModel):
    model_config = ConfigDict(frozen=True)

    content: str
    flags: int = MessageFlags.EPHEMERAL.value
    components: Optional[List[Dict[str, Any]]] = None


class InteractionResponse(BaseModel):
    """Terminal output of a request, serialized once as the HTTP body."""

    model_config = ConfigDict(frozen=True)

    type: InteractionResponseType
    data: Optional[ResponseData] = None

    @classmethod
    def pong(cls) -> "InteractionResponse":
        return cls(type=InteractionResponseType.PONG)

    @classmethod
    def message(cls, data: ResponseData) -> "InteractionResponse":
        return cls(type=InteractionResponseType.CHANNEL_MESSAGE_WITH_SOURCE, data=data)

    @classmethod
    def acknowledge(cls) -> "InteractionResponse":
        return cls(type=InteractionResponseType.DEFERRED_UPDATE_MESSAGE)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)
