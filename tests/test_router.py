"""Tests for InteractionRouter and the bookmark / delete handlers."""

import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from conftest import (
    CHANNEL_ID,
    GUILD_ID,
    INVOKER_ID,
    MESSAGE_ID,
    make_command_payload,
    make_component_payload,
)
from bookmarker.adapters.discord.messages import CreateMessage
from bookmarker.adapters.discord.schemas import parse_interaction
from bookmarker.domain.models import InteractionResponseType, MessageFlags
from bookmarker.errors import ApiError, RequestShapeError
from bookmarker.handlers.bookmark import (
    BLOCKED_TEXT,
    BOOKMARKED_TEXT,
    build_bookmark,
    command_definition,
)
from bookmarker.handlers.router import InteractionRouter
from bookmarker.ports.outbound import Blocked, Delivered, DiscordPort


def _make_client(outcome=None) -> MagicMock:
    client = MagicMock()
    client.send_direct_message = AsyncMock(
        return_value=outcome or Delivered(channel={"id": "900"}, message={"id": "901"})
    )
    client.delete_message = AsyncMock(return_value=None)
    client.register_commands = AsyncMock(return_value=None)
    return client


def _no_outbound_calls(client):
    client.send_direct_message.assert_not_called()
    client.delete_message.assert_not_called()
    client.register_commands.assert_not_called()


async def _dispatch(client, payload):
    return await InteractionRouter(client).dispatch(parse_interaction(json.dumps(payload)))


class TestPing:
    @pytest.mark.asyncio
    async def test_pong(self):
        client = _make_client()
        response = await _dispatch(client, {"type": 1})
        assert response.to_dict() == {"type": 1}
        _no_outbound_calls(client)


class TestBookmarkCommand:
    @pytest.mark.asyncio
    async def test_delivered(self):
        client = _make_client()
        response = await _dispatch(client, make_command_payload())

        client.send_direct_message.assert_awaited_once()
        recipient, message = client.send_direct_message.await_args.args
        assert recipient == int(INVOKER_ID)
        assert isinstance(message, CreateMessage)

        body = response.to_dict()
        assert body["type"] == InteractionResponseType.CHANNEL_MESSAGE_WITH_SOURCE
        assert body["data"]["flags"] == MessageFlags.EPHEMERAL
        assert body["data"]["content"] == BOOKMARKED_TEXT
        button = body["data"]["components"][0]["components"][0]
        assert button["url"] == "https://discord.com/channels/@me/900/901"

    @pytest.mark.asyncio
    async def test_blocked_is_normal_reply(self):
        client = _make_client(Blocked(code=50007, message="Cannot send messages to this user"))
        response = await _dispatch(client, make_command_payload())

        body = response.to_dict()
        assert body["type"] == InteractionResponseType.CHANNEL_MESSAGE_WITH_SOURCE
        assert body["data"]["content"] == BLOCKED_TEXT
        assert body["data"]["flags"] == MessageFlags.EPHEMERAL
        assert "components" not in body["data"]

    @pytest.mark.asyncio
    async def test_api_error_propagates(self):
        client = _make_client()
        client.send_direct_message.side_effect = ApiError.server_fault(502)
        with pytest.raises(ApiError):
            await _dispatch(client, make_command_payload())

    @pytest.mark.asyncio
    async def test_wrong_name(self):
        client = _make_client()
        with pytest.raises(RequestShapeError, match="Unknown command"):
            await _dispatch(client, make_command_payload(name="Other command"))
        _no_outbound_calls(client)

    @pytest.mark.asyncio
    async def test_wrong_command_type(self):
        client = _make_client()
        with pytest.raises(RequestShapeError, match="Unexpected command type"):
            await _dispatch(client, make_command_payload(command_type=1))
        _no_outbound_calls(client)

    @pytest.mark.asyncio
    async def test_missing_target_id(self):
        client = _make_client()
        with pytest.raises(RequestShapeError, match="No target ID"):
            await _dispatch(client, make_command_payload(target_id=None))
        _no_outbound_calls(client)

    @pytest.mark.asyncio
    async def test_missing_resolved_data(self):
        client = _make_client()
        payload = make_command_payload()
        del payload["data"]["resolved"]
        with pytest.raises(RequestShapeError, match="No resolved data"):
            await _dispatch(client, payload)
        _no_outbound_calls(client)

    @pytest.mark.asyncio
    async def test_target_not_in_resolved(self):
        client = _make_client()
        with pytest.raises(RequestShapeError, match="No resolved message"):
            await _dispatch(client, make_command_payload(target_id="1"))
        _no_outbound_calls(client)

    @pytest.mark.asyncio
    async def test_missing_guild(self):
        client = _make_client()
        with pytest.raises(RequestShapeError):
            await _dispatch(client, make_command_payload(guild_id=None))
        _no_outbound_calls(client)

    @pytest.mark.asyncio
    async def test_missing_user(self):
        client = _make_client()
        with pytest.raises(RequestShapeError):
            await _dispatch(client, make_command_payload(member=False))
        _no_outbound_calls(client)

    @pytest.mark.asyncio
    async def test_missing_data(self):
        client = _make_client()
        payload = make_command_payload()
        del payload["data"]
        with pytest.raises(RequestShapeError):
            await _dispatch(client, payload)
        _no_outbound_calls(client)


class TestDeleteComponent:
    @pytest.mark.asyncio
    async def test_delete(self):
        client = _make_client()
        response = await _dispatch(client, make_component_payload())
        client.delete_message.assert_awaited_once_with(111, 222)
        client.send_direct_message.assert_not_called()
        assert response.to_dict() == {"type": InteractionResponseType.DEFERRED_UPDATE_MESSAGE}

    @pytest.mark.asyncio
    async def test_unknown_custom_id(self):
        client = _make_client()
        with pytest.raises(RequestShapeError, match="Unexpected action"):
            await _dispatch(client, make_component_payload(custom_id="pin"))
        _no_outbound_calls(client)

    @pytest.mark.asyncio
    async def test_missing_message(self):
        client = _make_client()
        with pytest.raises(RequestShapeError):
            await _dispatch(client, make_component_payload(message=False))
        _no_outbound_calls(client)

    @pytest.mark.asyncio
    async def test_delete_failure_propagates(self):
        client = _make_client()
        client.delete_message.side_effect = ApiError.rejected(404, "Unknown Message")
        with pytest.raises(ApiError):
            await _dispatch(client, make_component_payload())


class TestUnsupportedKinds:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("kind", [4, 5])
    async def test_rejected(self, kind):
        client = _make_client()
        with pytest.raises(RequestShapeError, match="Unexpected interaction type"):
            await _dispatch(client, {"type": kind, "data": {"name": "x"}})
        _no_outbound_calls(client)


class TestBuildBookmark:
    def test_payload(self):
        interaction = parse_interaction(json.dumps(make_command_payload()))
        message = interaction.data.resolved_messages[int(MESSAGE_ID)]
        payload = build_bookmark(message, int(GUILD_ID)).to_payload()

        assert set(payload) == {"embeds", "components"}
        embed = payload["embeds"][0]
        assert embed["description"] == "remember this"
        assert embed["url"] == f"https://discord.com/channels/{GUILD_ID}/{CHANNEL_ID}/{MESSAGE_ID}"

        buttons = payload["components"][0]["components"]
        assert [b.get("custom_id") for b in buttons] == [None, "delete"]


class TestCommandDefinition:
    def test_guild_only_message_command(self):
        assert command_definition() == {
            "name": "Bookmark message",
            "type": 3,
            "dm_permission": False,
        }


class TestPortConformance:
    def test_discord_client_is_port(self):
        from bookmarker.adapters.discord.client import DiscordClient
        assert isinstance(DiscordClient(1, "tok"), DiscordPort)
