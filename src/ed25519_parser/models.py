"""Shared domain models used across the parser."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

ED25519_OID = "1.3.101.112"
KEY_LENGTH = 32


class KeyKind(str, Enum):
    PRIVATE = "PRIVATE KEY"
    PUBLIC = "PUBLIC KEY"

    @property
    def pem_tag(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class EncodedKeyBlock:
    """Raw fields lifted out of a DER key structure, before any validation."""

    kind: KeyKind
    algorithm_oid: str
    payload: bytes
    version: Optional[int] = None
