import pytest

from ed25519_parser.exceptions import InvalidKeyData, UnknownAlgorithm
from ed25519_parser.models import ED25519_OID, EncodedKeyBlock, KeyKind
from ed25519_parser.validation import validate_private_block, validate_public_block


def _private(payload: bytes, *, oid: str = ED25519_OID, version: int = 0) -> EncodedKeyBlock:
    return EncodedKeyBlock(kind=KeyKind.PRIVATE, algorithm_oid=oid, payload=payload, version=version)


def _public(payload: bytes, *, oid: str = ED25519_OID) -> EncodedKeyBlock:
    return EncodedKeyBlock(kind=KeyKind.PUBLIC, algorithm_oid=oid, payload=payload)


def test_private_seed_extracted() -> None:
    seed = bytes(range(32))
    assert validate_private_block(_private(b"\x04\x20" + seed)) == seed


def test_public_point_extracted() -> None:
    point = bytes(range(32))
    assert validate_public_block(_public(point)) == point


@pytest.mark.parametrize("oid", ["1.3.101.110", "1.3.101.113", "1.2.840.10045.2.1", ""])
def test_foreign_oid_rejected(oid: str) -> None:
    with pytest.raises(UnknownAlgorithm):
        validate_private_block(_private(b"\x04\x20" + bytes(32), oid=oid))
    with pytest.raises(UnknownAlgorithm):
        validate_public_block(_public(bytes(32), oid=oid))


def test_oid_checked_before_payload() -> None:
    with pytest.raises(UnknownAlgorithm):
        validate_public_block(_public(b"", oid="1.3.101.110"))


@pytest.mark.parametrize(
    "payload",
    [
        b"",
        b"\x04",
        b"\x04\x20",
        b"\x04\x20" + bytes(31),
        b"\x04\x20" + bytes(33),
        bytes(32),
        b"\x03\x20" + bytes(32),
        b"\x04\x21" + bytes(32),
        b"\x04\x1f" + bytes(32),
    ],
)
def test_private_payload_rejected(payload: bytes) -> None:
    with pytest.raises(InvalidKeyData):
        validate_private_block(_private(payload))


@pytest.mark.parametrize("length", [0, 1, 31, 33, 34])
def test_public_payload_length_rejected(length: int) -> None:
    with pytest.raises(InvalidKeyData):
        validate_public_block(_public(bytes(length)))


def test_version_ignored_by_default() -> None:
    seed = bytes(32)
    assert validate_private_block(_private(b"\x04\x20" + seed, version=1)) == seed


def test_strict_version_rejects_non_zero() -> None:
    with pytest.raises(InvalidKeyData):
        validate_private_block(_private(b"\x04\x20" + bytes(32), version=1), strict_version=True)
    assert validate_private_block(_private(b"\x04\x20" + bytes(32)), strict_version=True) == bytes(32)
