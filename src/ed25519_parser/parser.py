"""Parse OpenSSL Ed25519 keys (PEM or DER) into X25519 key objects."""
from __future__ import annotations

from typing import List, Optional

import structlog
from asn1crypto import pem
from cryptography.hazmat.primitives.asymmetric import x25519

from .backend import CurveBackend
from .convert import public_key_from_point, static_secret_from_seed
from .der import decode_private_block, decode_public_block
from .exceptions import InvalidPemTag, StructuralParseError
from .models import KeyKind
from .validation import validate_private_block, validate_public_block

logger = structlog.get_logger(__name__)


def parse_private_der(data: bytes, *, strict_version: bool = False) -> x25519.X25519PrivateKey:
    """Parse a DER Ed25519 private key into the matching X25519 secret."""

    block = decode_private_block(data)
    seed = validate_private_block(block, strict_version=strict_version)
    return static_secret_from_seed(seed)


def parse_public_der(
    data: bytes, *, backend: Optional[CurveBackend] = None
) -> x25519.X25519PublicKey:
    """Parse a DER Ed25519 public key into the matching X25519 public key."""

    block = decode_public_block(data)
    point = validate_public_block(block)
    return public_key_from_point(point, backend=backend)


def _check_tag(found: str, expected: KeyKind) -> None:
    if found != expected.pem_tag:
        logger.debug("parse.pem_tag_mismatch", expected=expected.pem_tag, found=found)
        raise InvalidPemTag(f"Expected PEM tag {expected.pem_tag!r}, found {found!r}")


def _unwrap(data: bytes, kind: KeyKind) -> bytes:
    """Return DER contents, peeling one PEM envelope when there is one."""

    data = bytes(data)
    if pem.detect(data):
        try:
            tag, _headers, der_bytes = pem.unarmor(data)
        except ValueError:
            pass
        else:
            _check_tag(tag, kind)
            return der_bytes
    logger.debug("parse.der_fallback", kind=kind.name.lower(), size=len(data))
    return data


def parse_private(data: bytes, *, strict_version: bool = False) -> x25519.X25519PrivateKey:
    """Parse an OpenSSL Ed25519 private key, either in PEM or DER format."""

    return parse_private_der(_unwrap(data, KeyKind.PRIVATE), strict_version=strict_version)


def parse_public(
    data: bytes, *, backend: Optional[CurveBackend] = None
) -> x25519.X25519PublicKey:
    """Parse an OpenSSL Ed25519 public key, either in PEM or DER format."""

    return parse_public_der(_unwrap(data, KeyKind.PUBLIC), backend=backend)


def parse_public_many_pem(
    data: bytes, *, backend: Optional[CurveBackend] = None
) -> List[x25519.X25519PublicKey]:
    """Parse several concatenated PEM public keys, keeping file order.

    The whole call fails on the first block that is not a ``PUBLIC KEY`` or
    does not hold a valid Ed25519 key; no partial result is returned.
    Truncated or garbled armor is not skipped either: it raises
    :class:`StructuralParseError`. Input without any BEGIN line yields ``[]``.
    """

    data = bytes(data)
    if not pem.detect(data):
        return []
    keys: List[x25519.X25519PublicKey] = []
    try:
        for tag, _headers, der_bytes in pem.unarmor(data, multiple=True):
            _check_tag(tag, KeyKind.PUBLIC)
            keys.append(parse_public_der(der_bytes, backend=backend))
    except ValueError as exc:
        raise StructuralParseError(f"Malformed PEM envelope: {exc}") from exc
    return keys


__all__ = [
    "parse_private",
    "parse_private_der",
    "parse_public",
    "parse_public_der",
    "parse_public_many_pem",
]
