"""Domain layer: pure Python, no framework dependencies."""

from bookmarker.domain.models import (
    CommandInvocation,
    CommandType,
    ComponentInvocation,
    Interaction,
    InteractionResponseType,
    InteractionType,
    MessageFlags,
    MessageRef,
    ResolvedMessage,
    User,
)

__all__ = [
    "CommandInvocation",
    "CommandType",
    "ComponentInvocation",
    "Interaction",
    "InteractionResponseType",
    "InteractionType",
    "MessageFlags",
    "MessageRef",
    "ResolvedMessage",
    "User",
]
