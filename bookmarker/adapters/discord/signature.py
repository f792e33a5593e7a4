"""Ed25519 request signature verification for the interactions endpoint.

Discord signs ``timestamp + body`` with the application's private key and
sends the detached signature in ``X-Signature-Ed25519``. The body must be the
exact bytes received; re-serializing parsed JSON changes the signed input.
"""

import re
from typing import Mapping

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PublicKey

from bookmarker.errors import AuthError, AuthFailure

SIGNATURE_HEADER = "X-Signature-Ed25519"
TIMESTAMP_HEADER = "X-Signature-Timestamp"
SIGNATURE_LENGTH = 64

_HEX_RE = re.compile(r"[0-9a-fA-F]*")


def _decode_hex(value: str) -> bytes:
    # bytes.fromhex tolerates inner whitespace; only bare hex digits are accepted here
    value = value.strip()
    if not _HEX_RE.fullmatch(value):
        raise ValueError("non-hexadecimal characters")
    return bytes.fromhex(value)


def _load_public_key(public_key_hex: str) -> Ed25519PublicKey:
    try:
        return Ed25519PublicKey.from_public_bytes(_decode_hex(public_key_hex))
    except ValueError as e:
        raise AuthError(AuthFailure.MALFORMED_KEY, str(e)) from e


def verify(timestamp: str, raw_body: bytes, signature_hex: str, public_key_hex: str) -> None:
    """Raise AuthError unless signature_hex signs timestamp + raw_body under the key."""
    key = _load_public_key(public_key_hex)

    try:
        signature = _decode_hex(signature_hex)
    except ValueError as e:
        raise AuthError(AuthFailure.MALFORMED_SIGNATURE, str(e)) from e
    if len(signature) != SIGNATURE_LENGTH:
        raise AuthError(AuthFailure.MALFORMED_SIGNATURE, f"expected {SIGNATURE_LENGTH} bytes")

    try:
        signed = timestamp.encode("ascii") + raw_body
    except UnicodeEncodeError as e:
        raise AuthError(AuthFailure.MISMATCH, "non-ASCII timestamp") from e

    try:
        key.verify(signature, signed)
    except InvalidSignature:
        raise AuthError(AuthFailure.MISMATCH, "signature does not match") from None


def verify_request(headers: Mapping[str, str], raw_body: bytes, public_key_hex: str) -> None:
    """Verify a request given its headers. Header lookup is case-insensitive."""
    lowered = {k.lower(): v for k, v in headers.items()}
    signature_hex = lowered.get(SIGNATURE_HEADER.lower())
    timestamp = lowered.get(TIMESTAMP_HEADER.lower())
    if not signature_hex:
        raise AuthError(AuthFailure.MISSING_HEADER, SIGNATURE_HEADER)
    if not timestamp:
        raise AuthError(AuthFailure.MISSING_HEADER, TIMESTAMP_HEADER)
    verify(timestamp, raw_body, signature_hex, public_key_hex)
