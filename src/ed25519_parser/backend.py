"""Curve primitives the converter and generator rely on.

The parser never does point arithmetic itself; it asks a :class:`CurveBackend`
to move points between the Edwards form used by Ed25519 key files and the
Montgomery form used by X25519.

:class:`FieldCurveBackend` (the default) works directly in GF(2^255 - 19) and
accepts every point that lies on the curve, including small-order points and
points with a torsion component. :class:`SodiumCurveBackend` delegates the
Edwards side to libsodium, which additionally requires the point to be in the
prime-order subgroup.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from nacl import exceptions as nacl_exceptions
from nacl.bindings import crypto_sign_ed25519_pk_to_curve25519

from .models import KEY_LENGTH

FIELD_PRIME = 2**255 - 19
# Edwards curve constant d = -121665 / 121666
EDWARDS_D = -121665 * pow(121666, FIELD_PRIME - 2, FIELD_PRIME) % FIELD_PRIME
_SIGN_BIT = 0x80
_COORDINATE_MASK = (1 << 255) - 1


def _inverse(value: int) -> int:
    # Fermat inversion; maps 0 to 0
    return pow(value, FIELD_PRIME - 2, FIELD_PRIME)


def _is_square(value: int) -> bool:
    value %= FIELD_PRIME
    return value == 0 or pow(value, (FIELD_PRIME - 1) // 2, FIELD_PRIME) == 1


class CurveBackend(ABC):
    """Capability interface over Edwards/Montgomery point conversion."""

    @abstractmethod
    def edwards_to_montgomery(self, compressed: bytes) -> Optional[bytes]:
        """Decompress an Edwards point and return its Montgomery u-coordinate.

        Returns ``None`` when ``compressed`` is not a usable curve point.
        """

    @abstractmethod
    def montgomery_to_edwards(self, u: bytes, sign: int = 0) -> Optional[bytes]:
        """Lift a Montgomery u-coordinate to a compressed Edwards point.

        ``sign`` selects the x-coordinate parity written into the top bit.
        Returns ``None`` when no such Edwards point exists.
        """


class FieldCurveBackend(CurveBackend):
    """Pure field arithmetic over the birational map between the two curves."""

    def edwards_to_montgomery(self, compressed: bytes) -> Optional[bytes]:
        if len(compressed) != KEY_LENGTH:
            return None
        # the sign bit only picks x, and u depends on y alone
        y = (int.from_bytes(compressed, "little") & _COORDINATE_MASK) % FIELD_PRIME
        y2 = y * y % FIELD_PRIME
        # x^2 = (y^2 - 1) / (d y^2 + 1) must have a root
        if not _is_square((y2 - 1) * _inverse(EDWARDS_D * y2 + 1)):
            return None
        u = (1 + y) * _inverse(1 - y) % FIELD_PRIME
        return u.to_bytes(KEY_LENGTH, "little")

    def montgomery_to_edwards(self, u: bytes, sign: int = 0) -> Optional[bytes]:
        if len(u) != KEY_LENGTH:
            return None
        # the top bit of a Montgomery encoding is ignored, as in RFC 7748
        u_int = int.from_bytes(u, "little") & _COORDINATE_MASK
        if (u_int + 1) % FIELD_PRIME == 0:
            return None
        y = (u_int - 1) * _inverse(u_int + 1) % FIELD_PRIME
        compressed = bytearray(y.to_bytes(KEY_LENGTH, "little"))
        if sign & 1:
            compressed[-1] |= _SIGN_BIT
        compressed = bytes(compressed)
        if self.edwards_to_montgomery(compressed) is None:
            return None
        return compressed


class SodiumCurveBackend(FieldCurveBackend):
    """libsodium-backed decompression with a prime-order subgroup check.

    Small-order points and points carrying a torsion component are refused.
    Keys produced by OpenSSL or by this package always pass.
    """

    def edwards_to_montgomery(self, compressed: bytes) -> Optional[bytes]:
        if len(compressed) != KEY_LENGTH:
            return None
        try:
            return crypto_sign_ed25519_pk_to_curve25519(bytes(compressed))
        except nacl_exceptions.CryptoError:
            return None


DEFAULT_BACKEND: CurveBackend = FieldCurveBackend()


__all__ = [
    "CurveBackend",
    "DEFAULT_BACKEND",
    "EDWARDS_D",
    "FIELD_PRIME",
    "FieldCurveBackend",
    "SodiumCurveBackend",
]
