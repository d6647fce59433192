"""Assembly of the public-key ring that forms a signature's anonymity set."""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from ecdsa.curves import Curve

from . import crypto_utils
from .errors import IndexOutOfRange, InvalidRingSize
from .keys import PrivateKey, PublicKey

logger = logging.getLogger(__name__)

Ring = Tuple[PublicKey, ...]


def _decoy_public_key(curve: Curve, rng: Optional[crypto_utils.RandomSource]) -> PublicKey:
    # the decoy scalar never leaves this frame
    _, public_point = crypto_utils.generate_keypair(curve, rng)
    return PublicKey.from_point(public_point, curve.name)


def build_ring(
    size: int,
    private_key: PrivateKey,
    signer_index: int,
    rng: Optional[crypto_utils.RandomSource] = None,
) -> Ring:
    """
    Build a ring of *size* public keys with the signer's key at *signer_index*.

    Every other position is filled with the public half of a freshly generated
    key pair on the signer's curve. Build a new ring for each signing session
    so decoys are not reused across signatures.
    """

    if size < 2:
        raise InvalidRingSize("Ring signatures require at least two members")
    if not 0 <= signer_index < size:
        raise IndexOutOfRange("Signer index is out of bounds for the ring size")

    curve = crypto_utils.get_curve(private_key.curve_name)
    members: List[PublicKey] = []
    for index in range(size):
        if index == signer_index:
            members.append(private_key.public_key)
        else:
            members.append(_decoy_public_key(curve, rng))

    logger.debug("Built ring of %d members on %s", size, curve.name)
    return tuple(members)
