"""Turn validated Ed25519 key bytes into X25519 key objects."""
from __future__ import annotations

import hashlib
from typing import Optional

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import x25519

from .backend import DEFAULT_BACKEND, CurveBackend
from .exceptions import InvalidKeyData
from .models import KEY_LENGTH


def derive_scalar_bytes(seed: bytes) -> bytes:
    """RFC 8032 key expansion: the first half of SHA-512 over the seed."""
    return hashlib.sha512(seed).digest()[:KEY_LENGTH]


def static_secret_from_seed(seed: bytes) -> x25519.X25519PrivateKey:
    # clamping happens inside the X25519 primitive
    return x25519.X25519PrivateKey.from_private_bytes(derive_scalar_bytes(seed))


def public_key_from_point(
    point: bytes, *, backend: Optional[CurveBackend] = None
) -> x25519.X25519PublicKey:
    u = (backend or DEFAULT_BACKEND).edwards_to_montgomery(point)
    if u is None:
        raise InvalidKeyData("Public key is not a valid Ed25519 curve point")
    return x25519.X25519PublicKey.from_public_bytes(u)


def raw_private_bytes(key: x25519.X25519PrivateKey) -> bytes:
    return key.private_bytes(
        encoding=serialization.Encoding.Raw,
        format=serialization.PrivateFormat.Raw,
        encryption_algorithm=serialization.NoEncryption(),
    )


def raw_public_bytes(key: x25519.X25519PublicKey | x25519.X25519PrivateKey) -> bytes:
    if isinstance(key, x25519.X25519PrivateKey):
        key = key.public_key()
    return key.public_bytes(
        encoding=serialization.Encoding.Raw,
        format=serialization.PublicFormat.Raw,
    )


__all__ = [
    "derive_scalar_bytes",
    "public_key_from_point",
    "raw_private_bytes",
    "raw_public_bytes",
    "static_secret_from_seed",
]
