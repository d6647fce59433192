"""Implementation of a Schnorr-style ring signature scheme.

The signer commits to a random nonce, walks the ring once starting at the
member after itself, and closes the challenge chain with its private key.
The verifier walks the same chain from the published initial challenge and
accepts only if it arrives back at that exact value.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ecdsa.curves import Curve

from . import crypto_utils
from .crypto_utils import AnyPoint, RandomSource
from .errors import (
    IndexOutOfRange,
    InvalidRingMember,
    InvalidRingSize,
    RingClosureFailure,
    SignerMismatch,
)
from .keyring import Ring
from .keys import PrivateKey, PublicKey

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RingSignature:
    """Signature over ``message`` by one unidentified member of ``ring``."""

    message: bytes
    ring_size: int
    initial_challenge: int
    responses: Tuple[int, ...]
    ring: Ring
    curve_name: str


def _chain_step(
    message: bytes,
    response: int,
    challenge: int,
    public_point: AnyPoint,
    curve: Curve,
) -> Tuple[AnyPoint, int]:
    """Return ``R = s*G + c*P`` and the challenge ``H(m || R)`` that follows it."""

    commitment = crypto_utils.point_add(
        crypto_utils.scalar_mult(response, curve.generator),
        crypto_utils.scalar_mult(challenge, public_point),
    )
    return commitment, crypto_utils.hash_to_int(message, crypto_utils.point_to_bytes(commitment, curve))


def _member_points(ring: Sequence[PublicKey], curve: Curve) -> List[AnyPoint]:
    """Return the curve points of *ring*, raising ``ValueError`` on a bad member."""

    points = []
    for member in ring:
        if member.curve_name != curve.name:
            raise ValueError("ring member belongs to a different curve")
        points.append(member.to_point())
    return points


def sign(
    message: bytes,
    ring: Sequence[PublicKey],
    private_key: PrivateKey,
    signer_index: int,
    rng: Optional[RandomSource] = None,
) -> RingSignature:
    """Create a ring signature over *message* using the provided ring."""

    ring_size = len(ring)
    if ring_size < 2:
        raise InvalidRingSize("Ring signatures require at least two members")
    if not 0 <= signer_index < ring_size:
        raise IndexOutOfRange("Signer index is out of bounds for the ring size")
    if ring[signer_index] != private_key.public_key:
        raise SignerMismatch("Public key at the signer index does not match the private key")

    message_bytes = crypto_utils._ensure_bytes(message)
    curve = crypto_utils.get_curve(private_key.curve_name)
    try:
        points = _member_points(ring, curve)
    except ValueError as exc:
        raise InvalidRingMember(str(exc)) from exc

    c_values: List[int] = [0] * ring_size
    s_values: List[int] = [0] * ring_size

    # Commit to a random nonce and derive the challenge for the next member.
    alpha = crypto_utils.random_scalar(curve, rng)
    commitment = crypto_utils.scalar_mult(alpha, curve.generator)
    next_index = (signer_index + 1) % ring_size
    c_values[next_index] = crypto_utils.hash_to_int(
        message_bytes, crypto_utils.point_to_bytes(commitment, curve)
    )

    # Iterate through the ring, sampling random responses for non-signers.
    for offset in range(1, ring_size):
        j = (signer_index + offset) % ring_size
        s_values[j] = crypto_utils.random_scalar(curve, rng)
        _, challenge = _chain_step(message_bytes, s_values[j], c_values[j], points[j], curve)
        c_values[(j + 1) % ring_size] = challenge

    # Close the ring by solving for the signer's response: s = alpha - c * x.
    s_values[signer_index] = (alpha - c_values[signer_index] * private_key.scalar) % curve.order

    closing_point, closing_challenge = _chain_step(
        message_bytes,
        s_values[signer_index],
        c_values[signer_index],
        points[signer_index],
        curve,
    )
    if closing_point != commitment or closing_challenge != c_values[next_index]:
        logger.error("Ring closure self-check failed for a ring of %d members on %s", ring_size, curve.name)
        raise RingClosureFailure("error closing ring")

    logger.debug("Signed message with a ring of %d members on %s", ring_size, curve.name)
    return RingSignature(
        message=message_bytes,
        ring_size=ring_size,
        initial_challenge=c_values[0],
        responses=tuple(s_values),
        ring=tuple(ring),
        curve_name=curve.name,
    )


def _is_scalar(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def verify(signature: RingSignature) -> bool:
    """Verify a ring signature; any inconsistency yields ``False``."""

    try:
        message = crypto_utils._ensure_bytes(signature.message)
        curve = crypto_utils.get_curve(signature.curve_name)
        ring = tuple(signature.ring)
        responses = tuple(signature.responses)
        points = _member_points(ring, curve)
    except (AttributeError, TypeError, ValueError):
        return False

    ring_size = signature.ring_size
    if not isinstance(ring_size, int) or ring_size < 2:
        return False
    if len(ring) != ring_size or len(responses) != ring_size:
        return False
    c0 = signature.initial_challenge
    if not _is_scalar(c0) or not all(_is_scalar(s) and s < curve.order for s in responses):
        return False

    c = c0
    for i in range(ring_size):
        _, c = _chain_step(message, responses[i], c, points[i], curve)

    valid = c == c0
    logger.debug("Ring signature over %d members verified: %s", ring_size, valid)
    return valid
