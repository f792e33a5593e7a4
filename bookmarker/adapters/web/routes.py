"""Interactions endpoint and command registration routes."""

import sys
from typing import Optional

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from bookmarker.adapters.discord.client import DiscordClient
from bookmarker.adapters.discord.schemas import is_snowflake, parse_interaction
from bookmarker.adapters.discord.signature import verify_request
from bookmarker.config import AppConfig
from bookmarker.errors import ApiError, AuthError, RequestShapeError
from bookmarker.handlers.bookmark import command_definition
from bookmarker.handlers.router import InteractionRouter

interactions_router = APIRouter(tags=["Interactions"])

REGISTER_FAILED = "Failed to create command"


def _log(msg: str):
    print(msg, file=sys.stderr)


@interactions_router.post("/")
async def interactions(request: Request):
    config = AppConfig.from_env()

    # Signature covers the exact bytes received, so read them before any parsing
    raw_body = await request.body()
    try:
        verify_request(request.headers, raw_body, config.discord.public_key)
    except AuthError as e:
        _log(f"Signature verification failed: {e}")
        return PlainTextResponse("Signature verification failed", status_code=401)

    try:
        interaction = parse_interaction(raw_body)
        router = InteractionRouter(DiscordClient.from_config(config.discord))
        response = await router.dispatch(interaction)
    except RequestShapeError as e:
        _log(f"Rejected interaction: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except ApiError as e:
        _log(f"Interaction failed: {e}")
        raise HTTPException(status_code=500, detail="Discord API request failed")

    return JSONResponse(response.to_dict())


@interactions_router.post("/register")
@interactions_router.post("/register/{scope_id}")
async def register(scope_id: Optional[str] = None):
    guild_id = None
    if scope_id:
        if not is_snowflake(scope_id):
            _log(f"{REGISTER_FAILED}: invalid guild ID {scope_id!r}")
            return PlainTextResponse(REGISTER_FAILED, status_code=500)
        guild_id = int(scope_id)

    client = DiscordClient.from_config(AppConfig.from_env().discord)
    if not client.is_configured:
        _log(f"{REGISTER_FAILED}: Discord API not configured")
        return PlainTextResponse(REGISTER_FAILED, status_code=500)

    try:
        await client.register_commands([command_definition()], guild_id)
    except ApiError as e:
        _log(f"{REGISTER_FAILED}: {e}")
        return PlainTextResponse(REGISTER_FAILED, status_code=500)
    return Response(status_code=200)
