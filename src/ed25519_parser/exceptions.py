from __future__ import annotations

"""Central exception hierarchy"""


class Ed25519ParserError(Exception):
    """Base exception for all key parsing failures"""


class StructuralParseError(Ed25519ParserError):
    """Raised when input is not the expected DER (or PEM) structure"""


class UnknownAlgorithm(Ed25519ParserError):
    """Raised when the algorithm identifier is not Ed25519"""


class InvalidKeyData(Ed25519ParserError):
    """Raised when a well-formed structure carries unusable key material"""


class InvalidPemTag(Ed25519ParserError):
    """Raised when a PEM block is labelled for the other key kind"""


__all__ = [
    "Ed25519ParserError",
    "InvalidKeyData",
    "InvalidPemTag",
    "StructuralParseError",
    "UnknownAlgorithm",
]
