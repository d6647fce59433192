"""Utility primitives for elliptic-curve cryptography used in the project.

This module centralises the low level curve operations that power ring
construction, signing and verification.  The point encoding is written out
explicitly so challenges never depend on the serialisation behaviour of
third-party libraries.
"""

from __future__ import annotations

import hashlib
import secrets
from typing import Callable, Optional, Tuple, Union

from ecdsa.curves import Curve, UnknownCurveError, curve_by_name
from ecdsa.ellipticcurve import INFINITY, CurveFp, Point, PointJacobi

from . import config
from .errors import RandomGenerationFailure


RandomSource = Callable[[int], int]
AnyPoint = Union[Point, PointJacobi]


def get_curve(name: Optional[str] = None) -> Curve:
    """Return the ``ecdsa`` curve called *name* (the configured default if omitted)."""

    if name is None:
        name = config.DEFAULT_CURVE
    if not isinstance(name, str) or not name:
        raise ValueError(f"Invalid curve name: {name!r}")
    try:
        curve = curve_by_name(name)
    except UnknownCurveError as exc:
        raise ValueError(f"Unknown curve: {name!r}") from exc
    if not isinstance(curve.curve, CurveFp):
        raise ValueError(f"Curve {name!r} is not a short Weierstrass curve")
    return curve


def field_size(curve: Curve) -> int:
    """Number of bytes needed to encode one coordinate of *curve*."""

    return (curve.curve.p().bit_length() + 7) // 8


def random_below(bound: int, rng: Optional[RandomSource] = None) -> int:
    """Draw a uniform integer in ``[0, bound)`` from a secure source.

    *rng* defaults to :func:`secrets.randbelow`.  A failing source, or one that
    hands back something outside the range, raises
    :class:`RandomGenerationFailure` instead of degrading silently.
    """

    source = rng or secrets.randbelow
    try:
        value = source(bound)
    except Exception as exc:
        raise RandomGenerationFailure("secure random source failed") from exc
    if not isinstance(value, int) or not 0 <= value < bound:
        raise RandomGenerationFailure("secure random source returned an out-of-range value")
    return value


def random_scalar(curve: Curve, rng: Optional[RandomSource] = None) -> int:
    """Return a uniform scalar in ``[0, N)`` for *curve*."""

    return random_below(curve.order, rng)


def random_private_scalar(curve: Curve, rng: Optional[RandomSource] = None) -> int:
    """Return a uniform non-zero scalar in ``[1, N)`` for *curve*."""

    return random_below(curve.order - 1, rng) + 1


def is_valid_scalar(value: int, curve: Curve) -> bool:
    """Return ``True`` if *value* is a non-zero scalar within the curve order."""

    return isinstance(value, int) and not isinstance(value, bool) and 1 <= value < curve.order


def _ensure_bytes(data: object) -> bytes:
    """Normalise *data* to a ``bytes`` instance."""

    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise TypeError("message must be bytes-like")


def scalar_mult(scalar: int, point: AnyPoint) -> AnyPoint:
    """Multiply *point* by *scalar* on the curve."""

    return scalar * point


def point_add(p1: AnyPoint, p2: AnyPoint) -> AnyPoint:
    """Add two curve points."""

    if p1 == INFINITY:
        return p2
    return p1 + p2


def generate_keypair(curve: Curve, rng: Optional[RandomSource] = None) -> Tuple[int, AnyPoint]:
    """Generate a fresh private/public key pair on *curve*."""

    private_key = random_private_scalar(curve, rng)
    public_key = scalar_mult(private_key, curve.generator)
    return private_key, public_key


def int_to_bytes(value: int, length: int = 32) -> bytes:
    """Encode a non-negative integer as a fixed-width big-endian sequence."""

    return value.to_bytes(length, "big")


def bytes_to_int(data: bytes) -> int:
    """Decode a big-endian byte sequence into an integer."""

    return int.from_bytes(data, "big")


def point_to_bytes(point: AnyPoint, curve: Curve) -> bytes:
    """Return the fixed-width ``x || y`` encoding of *point*.

    Both coordinates are padded to the field size of *curve*.  The point at
    infinity has no affine coordinates and encodes as zero bytes of the same
    width.
    """

    width = field_size(curve)
    if point == INFINITY:
        return bytes(2 * width)
    return int_to_bytes(point.x(), width) + int_to_bytes(point.y(), width)


def hash_bytes(*chunks: bytes) -> bytes:
    """Hash the concatenation of *chunks* with the configured 256-bit hash."""

    digest = hashlib.new(config.HASH_ALGORITHM)
    for chunk in chunks:
        digest.update(bytes(chunk))
    return digest.digest()


def hash_to_int(*chunks: bytes) -> int:
    """Interpret the digest of *chunks* as a big-endian challenge integer."""

    return bytes_to_int(hash_bytes(*chunks))
