"""Discord REST client using aiohttp."""

import asyncio
import json
import sys
from typing import Any, Dict, List, Optional, Tuple, Union

import aiohttp
from pydantic import ValidationError

from bookmarker.adapters.discord.messages import CreateMessage, PlatformErrorResponse
from bookmarker.config import DISCORD_API_BASE, AppConfig, DiscordConfig
from bookmarker.errors import ApiError
from bookmarker.ports.outbound import Blocked, Delivered, DeliveryOutcome


def _log(msg: str):
    print(msg, file=sys.stderr)


def parse_platform_error(text: str) -> Optional[PlatformErrorResponse]:
    """Parse a Discord error body, or None if it isn't one."""
    try:
        return PlatformErrorResponse.model_validate_json(text)
    except ValidationError:
        return None


class DiscordClient:
    """Async Discord API client for command registration, DMs and message deletion.

    Every operation opens its own session; nothing is shared between calls
    and nothing is retried.
    """

    def __init__(self, application_id: Optional[int], token: str, api_base: str = DISCORD_API_BASE):
        self.application_id = application_id
        self._token = token
        self.api_base = api_base.rstrip("/")

    @classmethod
    def from_config(cls, config: Optional[DiscordConfig] = None) -> "DiscordClient":
        if config is None:
            config = AppConfig.from_env().discord
        return cls(config.application_id, config.token)

    @property
    def is_configured(self) -> bool:
        return bool(self.application_id and self._token)

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bot {self._token}",
            "Content-Type": "application/json",
        }

    def _session(self) -> aiohttp.ClientSession:
        return aiohttp.ClientSession(headers=self.headers)

    async def _send(
        self,
        session: aiohttp.ClientSession,
        method: str,
        path: str,
        body: Any = None,
    ) -> Tuple[int, str]:
        url = f"{self.api_base}{path}"
        try:
            async with session.request(method, url, json=body) as resp:
                return resp.status, await resp.text()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            _log(f"Discord {method} {path} failed: {e!r}")
            raise ApiError.transport(str(e) or type(e).__name__) from e

    @staticmethod
    def _decode(status: int, text: str) -> Dict[str, Any]:
        try:
            data = json.loads(text)
        except json.JSONDecodeError:
            raise ApiError.server_fault(status) from None
        if not isinstance(data, dict) or "id" not in data:
            raise ApiError.server_fault(status)
        return data

    @staticmethod
    def _classify_delivery(status: int, text: str) -> Union[Dict[str, Any], Blocked]:
        if status >= 500:
            raise ApiError.server_fault(status)
        if 200 <= status < 300:
            return DiscordClient._decode(status, text)
        error = parse_platform_error(text)
        if error is None:
            raise ApiError.rejected(status, text)
        if error.is_cannot_message_user:
            return Blocked(code=error.code, message=error.message)
        raise ApiError.rejected(status, error.message, error)

    @staticmethod
    def _raise_for_status(status: int, text: str, *, server_faults: bool = True) -> None:
        if 200 <= status < 300:
            return
        if server_faults and status >= 500:
            raise ApiError.server_fault(status)
        error = parse_platform_error(text)
        raise ApiError.rejected(status, error.message if error else text, error)

    async def register_commands(
        self, commands: List[Dict[str, Any]], guild_id: Optional[int] = None
    ) -> None:
        """Replace the full set of commands, globally or for a single guild."""
        if guild_id is None:
            path = f"/applications/{self.application_id}/commands"
        else:
            path = f"/applications/{self.application_id}/guilds/{guild_id}/commands"

        async with self._session() as session:
            status, text = await self._send(session, "PUT", path, commands)
        self._raise_for_status(status, text)
        _log(f"Registered {len(commands)} command(s) at {path}")

    async def send_direct_message(self, recipient_id: int, message: CreateMessage) -> DeliveryOutcome:
        """Open (or fetch) the DM channel with recipient_id and post message into it."""
        async with self._session() as session:
            status, text = await self._send(
                session, "POST", "/users/@me/channels", {"recipient_id": str(recipient_id)}
            )
            channel = self._classify_delivery(status, text)
            if isinstance(channel, Blocked):
                _log(f"DM channel with {recipient_id} refused: {channel.message}")
                return channel

            status, text = await self._send(
                session, "POST", f"/channels/{channel['id']}/messages", message.to_payload()
            )
            sent = self._classify_delivery(status, text)
            if isinstance(sent, Blocked):
                _log(f"DM to {recipient_id} refused: {sent.message}")
                return sent

        return Delivered(channel=channel, message=sent)

    async def delete_message(self, channel_id: int, message_id: int) -> None:
        async with self._session() as session:
            status, text = await self._send(
                session, "DELETE", f"/channels/{channel_id}/messages/{message_id}"
            )
        self._raise_for_status(status, text, server_faults=False)
