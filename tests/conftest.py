"""Shared interaction payloads and signing keys."""

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey

GUILD_ID = "613425648685547541"
CHANNEL_ID = "645027906669510667"
MESSAGE_ID = "175928847299117063"
INVOKER_ID = "53908232506183680"
AUTHOR_ID = "80351110224678912"


def make_user(user_id=AUTHOR_ID, username="nelly", discriminator="1337", avatar=None):
    return {
        "id": user_id,
        "username": username,
        "discriminator": discriminator,
        "avatar": avatar,
    }


def make_command_payload(
    name="Bookmark message",
    command_type=3,
    target_id=MESSAGE_ID,
    messages=None,
    guild_id=GUILD_ID,
    member=True,
):
    if messages is None:
        messages = {
            MESSAGE_ID: {
                "id": MESSAGE_ID,
                "channel_id": CHANNEL_ID,
                "content": "remember this",
                "author": make_user(),
            }
        }
    data = {"id": "1", "name": name, "type": command_type, "resolved": {"messages": messages}}
    if target_id is not None:
        data["target_id"] = target_id
    payload = {"id": "2", "type": 2, "token": "tok", "version": 1, "data": data, "channel_id": CHANNEL_ID}
    if guild_id is not None:
        payload["guild_id"] = guild_id
    if member:
        payload["member"] = {"user": make_user(INVOKER_ID, "invoker", "0"), "roles": []}
    return payload


def make_component_payload(custom_id="delete", message=True):
    payload = {
        "id": "3",
        "type": 3,
        "token": "tok",
        "version": 1,
        "data": {"custom_id": custom_id, "component_type": 2},
        "user": make_user(INVOKER_ID, "invoker", "0"),
        "channel_id": "111",
    }
    if message:
        payload["message"] = {"id": "222", "channel_id": "111", "content": ""}
    return payload


class Signer:
    """Signs request bodies the way Discord does."""

    def __init__(self):
        self._key = Ed25519PrivateKey.generate()
        self.public_key_hex = self._key.public_key().public_bytes(
            serialization.Encoding.Raw, serialization.PublicFormat.Raw
        ).hex()

    def sign(self, timestamp: str, body: bytes) -> str:
        return self._key.sign(timestamp.encode() + body).hex()

    def headers(self, body: bytes, timestamp: str = "1700000000") -> dict:
        return {
            "X-Signature-Ed25519": self.sign(timestamp, body),
            "X-Signature-Timestamp": timestamp,
            "Content-Type": "application/json",
        }


@pytest.fixture
def signer():
    return Signer()
