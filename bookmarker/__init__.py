"""Bookmarker — Discord interactions webhook that bookmarks messages into DMs."""

from bookmarker.config import CONFIG, COMMAND_NAME, AppConfig, DiscordConfig
from bookmarker.errors import ApiError, ApiErrorKind, AuthError, AuthFailure, RequestShapeError
from bookmarker.adapters.discord.client import DiscordClient
from bookmarker.adapters.discord.messages import CreateMessage, InteractionResponse, PlatformErrorResponse
from bookmarker.adapters.discord.schemas import parse_interaction
from bookmarker.adapters.discord.signature import verify, verify_request
from bookmarker.ports.outbound import Blocked, Delivered, DeliveryOutcome
from bookmarker.handlers.router import InteractionRouter

__all__ = [
    "CONFIG",
    "COMMAND_NAME",
    "AppConfig",
    "DiscordConfig",
    "ApiError",
    "ApiErrorKind",
    "AuthError",
    "AuthFailure",
    "RequestShapeError",
    "DiscordClient",
    "CreateMessage",
    "InteractionResponse",
    "PlatformErrorResponse",
    "parse_interaction",
    "verify",
    "verify_request",
    "Blocked",
    "Delivered",
    "DeliveryOutcome",
    "InteractionRouter",
]
