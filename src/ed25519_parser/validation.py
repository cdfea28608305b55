"""Semantic checks applied to decoded key blocks."""
from __future__ import annotations

from .exceptions import InvalidKeyData, UnknownAlgorithm
from .models import ED25519_OID, KEY_LENGTH, EncodedKeyBlock

TAG_OCTETSTRING = 0x04
PRIVATE_PAYLOAD_LENGTH = 2 + KEY_LENGTH


def _ensure_ed25519(block: EncodedKeyBlock) -> None:
    if block.algorithm_oid != ED25519_OID:
        raise UnknownAlgorithm(f"Unsupported algorithm identifier: {block.algorithm_oid or '<empty>'}")


def validate_private_block(block: EncodedKeyBlock, *, strict_version: bool = False) -> bytes:
    """Return the 32-byte seed carried by an Ed25519 private key block.

    OpenSSL wraps the seed in a second OCTET STRING inside the outer one, so
    the payload must read ``04 20`` followed by exactly 32 bytes. The inner
    header is matched byte for byte rather than decoded.

    The version INTEGER is ignored unless ``strict_version`` is set, in which
    case anything other than 0 is refused.
    """

    _ensure_ed25519(block)
    if strict_version and block.version != 0:
        raise InvalidKeyData(f"Unsupported private key version: {block.version}")
    payload = block.payload
    if (
        len(payload) != PRIVATE_PAYLOAD_LENGTH
        or payload[0] != TAG_OCTETSTRING
        or payload[1] != KEY_LENGTH
    ):
        raise InvalidKeyData("Private key payload is not a 32-byte seed octet string")
    return payload[2:PRIVATE_PAYLOAD_LENGTH]


def validate_public_block(block: EncodedKeyBlock) -> bytes:
    """Return the compressed Edwards point carried by a public key block."""

    _ensure_ed25519(block)
    if len(block.payload) != KEY_LENGTH:
        raise InvalidKeyData(
            f"Public key payload must be {KEY_LENGTH} bytes, got {len(block.payload)}"
        )
    return block.payload


__all__ = ["TAG_OCTETSTRING", "validate_private_block", "validate_public_block"]
