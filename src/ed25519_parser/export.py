"""Strict DER/PEM export for Ed25519 key pairs.

The layout is fixed for a single algorithm and key size, so the DER is built
by concatenating constant prefixes with the raw key bytes. No general ASN.1
encoder is involved.
"""
from __future__ import annotations

from dataclasses import dataclass

from asn1crypto import pem

from .models import KEY_LENGTH, KeyKind

# SEQUENCE { INTEGER 0, SEQUENCE { OID 1.3.101.112 }, OCTET STRING { OCTET STRING (32) } }
PRIVATE_KEY_PREFIX = bytes.fromhex("302e020100300506032b657004220420")
# SEQUENCE { SEQUENCE { OID 1.3.101.112 }, BIT STRING (0 unused bits, 32 bytes) }
PUBLIC_KEY_PREFIX = bytes.fromhex("302a300506032b6570032100")

PRIVATE_DER_LENGTH = len(PRIVATE_KEY_PREFIX) + KEY_LENGTH
PUBLIC_DER_LENGTH = len(PUBLIC_KEY_PREFIX) + KEY_LENGTH


def _to_pem(kind: KeyKind, der_bytes: bytes) -> str:
    return pem.armor(kind.pem_tag, der_bytes).decode("ascii")


@dataclass(frozen=True, slots=True)
class KeyPair:
    public_der: bytes
    private_der: bytes

    @classmethod
    def from_raw(cls, seed: bytes, public_point: bytes) -> "KeyPair":
        if len(seed) != KEY_LENGTH:
            raise ValueError(f"Seed must be {KEY_LENGTH} bytes, got {len(seed)}")
        if len(public_point) != KEY_LENGTH:
            raise ValueError(f"Public point must be {KEY_LENGTH} bytes, got {len(public_point)}")
        return cls(
            public_der=PUBLIC_KEY_PREFIX + bytes(public_point),
            private_der=PRIVATE_KEY_PREFIX + bytes(seed),
        )

    def public_as_pem(self) -> str:
        return _to_pem(KeyKind.PUBLIC, self.public_der)

    def private_as_pem(self) -> str:
        return _to_pem(KeyKind.PRIVATE, self.private_der)

    def __repr__(self) -> str:
        return f"KeyPair(public_der={self.public_der.hex()}, private_der=<redacted>)"


__all__ = [
    "KeyPair",
    "PRIVATE_DER_LENGTH",
    "PRIVATE_KEY_PREFIX",
    "PUBLIC_DER_LENGTH",
    "PUBLIC_KEY_PREFIX",
]
