"""Parse and emit OpenSSL Ed25519 keys as X25519 key material."""
from .backend import CurveBackend, DEFAULT_BACKEND, FieldCurveBackend, SodiumCurveBackend
from .exceptions import (
    Ed25519ParserError,
    InvalidKeyData,
    InvalidPemTag,
    StructuralParseError,
    UnknownAlgorithm,
)
from .export import KeyPair, PRIVATE_KEY_PREFIX, PUBLIC_KEY_PREFIX
from .keygen import generate_keypair
from .models import ED25519_OID, KeyKind
from .parser import (
    parse_private,
    parse_private_der,
    parse_public,
    parse_public_der,
    parse_public_many_pem,
)
from .version import __version__

__all__ = [
    "CurveBackend",
    "DEFAULT_BACKEND",
    "ED25519_OID",
    "FieldCurveBackend",
    "Ed25519ParserError",
    "InvalidKeyData",
    "InvalidPemTag",
    "KeyKind",
    "KeyPair",
    "PRIVATE_KEY_PREFIX",
    "PUBLIC_KEY_PREFIX",
    "SodiumCurveBackend",
    "StructuralParseError",
    "UnknownAlgorithm",
    "__version__",
    "generate_keypair",
    "parse_private",
    "parse_private_der",
    "parse_public",
    "parse_public_der",
    "parse_public_many_pem",
]
