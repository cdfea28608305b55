"""DER structure decoding for OpenSSL Ed25519 keys.

Two layouts are recognised. ``openssl asn1parse`` shows them as::

    private key (48 bytes)
     0:d=0  hl=2 l=  46 cons: SEQUENCE
     2:d=1  hl=2 l=   1 prim:  INTEGER           :00
     5:d=1  hl=2 l=   5 cons:  SEQUENCE
     7:d=2  hl=2 l=   3 prim:   OBJECT            :ED25519
    12:d=1  hl=2 l=  34 prim:  OCTET STRING

    public key (44 bytes)
     0:d=0  hl=2 l=  42 cons: SEQUENCE
     2:d=1  hl=2 l=   5 cons:  SEQUENCE
     4:d=2  hl=2 l=   3 prim:   OBJECT            :ED25519
     9:d=1  hl=2 l=  33 prim:  BIT STRING

Only the shape is checked here: tags, nesting, child counts, DER length
encoding (definite and minimal) and the absence of trailing bytes. Whether the contents describe a usable Ed25519 key is
decided in :mod:`ed25519_parser.validation`.
"""
from __future__ import annotations

from asn1crypto import core, parser

from .exceptions import StructuralParseError
from .models import EncodedKeyBlock, KeyKind


class AlgorithmIdentifier(core.Sequence):
    _fields = [
        ("algorithm", core.ObjectIdentifier),
    ]


class PrivateKeyInfo(core.Sequence):
    _fields = [
        ("version", core.Integer),
        ("private_key_algorithm", AlgorithmIdentifier),
        ("private_key", core.OctetString),
    ]


class PublicKeyInfo(core.Sequence):
    _fields = [
        ("algorithm", AlgorithmIdentifier),
        ("public_key", core.OctetBitString),
    ]


_MAX_DEPTH = 4
# universal SEQUENCE and SET; DER encodes every other universal type primitively
_CONSTRUCTED_TAGS = (16, 17)


def _require_der(encoded: bytes, depth: int = 0) -> None:
    """Reject BER-only forms: indefinite or non-minimal lengths, constructed strings."""

    if depth > _MAX_DEPTH:
        raise ValueError("Nesting is deeper than any key layout")
    class_, method, tag, header, contents, trailer = parser.parse(encoded, strict=True)
    if header + contents + trailer != parser.emit(class_, method, tag, contents):
        raise ValueError(f"Element with tag {tag} does not use a minimal definite length")
    if method != 1:
        return
    if class_ == 0 and tag not in _CONSTRUCTED_TAGS:
        raise ValueError(f"Universal tag {tag} must be primitive in DER")
    offset = 0
    while offset < len(contents):
        size = parser.peek(contents[offset:])
        _require_der(contents[offset:offset + size], depth + 1)
        offset += size


def _require_children(value: core.Sequence, expected: int) -> None:
    # asn1crypto keeps surplus children instead of rejecting them
    if len(value) != expected:
        raise ValueError(
            f"{type(value).__name__} holds {len(value)} elements, expected {expected}"
        )


def _algorithm_oid(identifier: AlgorithmIdentifier) -> str:
    _require_children(identifier, 1)
    return identifier["algorithm"].dotted


def decode_private_block(data: bytes) -> EncodedKeyBlock:
    """Split a DER private key into version, algorithm OID and octet string."""

    try:
        data = bytes(data)
        _require_der(data)
        info = PrivateKeyInfo.load(data, strict=True)
        _require_children(info, 3)
        version = info["version"].native
        oid = _algorithm_oid(info["private_key_algorithm"])
        payload = info["private_key"].native
    except (ValueError, TypeError) as exc:
        raise StructuralParseError(f"Malformed DER private key: {exc}") from exc
    return EncodedKeyBlock(
        kind=KeyKind.PRIVATE,
        algorithm_oid=oid,
        payload=payload,
        version=version,
    )


def decode_public_block(data: bytes) -> EncodedKeyBlock:
    """Split a DER public key into algorithm OID and bit string contents."""

    try:
        data = bytes(data)
        _require_der(data)
        info = PublicKeyInfo.load(data, strict=True)
        _require_children(info, 2)
        oid = _algorithm_oid(info["algorithm"])
        contents = info["public_key"].contents
    except (ValueError, TypeError) as exc:
        raise StructuralParseError(f"Malformed DER public key: {exc}") from exc
    if not contents:
        raise StructuralParseError("Malformed DER public key: empty BIT STRING")
    # first content octet is the unused-bits count
    return EncodedKeyBlock(
        kind=KeyKind.PUBLIC,
        algorithm_oid=oid,
        payload=bytes(contents[1:]),
    )


__all__ = [
    "AlgorithmIdentifier",
    "PrivateKeyInfo",
    "PublicKeyInfo",
    "decode_private_block",
    "decode_public_block",
]
