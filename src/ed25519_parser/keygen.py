"""Ed25519 key pair generation in OpenSSL's DER layout."""
from __future__ import annotations

import os
from typing import Callable, Optional

import structlog

from .backend import DEFAULT_BACKEND, CurveBackend
from .convert import raw_public_bytes, static_secret_from_seed
from .export import KeyPair
from .models import KEY_LENGTH

logger = structlog.get_logger(__name__)

RandBytes = Callable[[int], bytes]


def generate_keypair(
    randbytes: RandBytes = os.urandom, *, backend: Optional[CurveBackend] = None
) -> Optional[KeyPair]:
    """Generate a fresh key pair and export it as strict DER.

    The public half is recovered from the X25519 public key by lifting its
    Montgomery u-coordinate back to Edwards form with the sign bit fixed to
    zero, following the compact point representation
    (draft-jivsov-ecc-compact). The result is canonical and parses back to the
    same X25519 key, but its sign may differ from the Ed25519 public key other
    tools would compute for the same seed.

    Returns ``None`` if the lift fails, which cannot happen for a key produced
    by the X25519 primitive.
    """

    seed = randbytes(KEY_LENGTH)
    if len(seed) != KEY_LENGTH:
        raise ValueError(f"Random source returned {len(seed)} bytes, expected {KEY_LENGTH}")

    secret = static_secret_from_seed(seed)
    montgomery = raw_public_bytes(secret)

    public_point = (backend or DEFAULT_BACKEND).montgomery_to_edwards(montgomery, sign=0)
    if public_point is None:
        logger.warning("keygen.lift_failed")
        return None

    return KeyPair.from_raw(seed, public_point)


__all__ = ["RandBytes", "generate_keypair"]
