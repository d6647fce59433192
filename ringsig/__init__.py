"""Non-linkable ring signatures over elliptic-curve groups.

Typical use::

    ring = build_ring(11, private_key, signer_index)
    signature = sign(message, ring, private_key, signer_index)
    assert verify(signature)
"""

from .errors import (
    IndexOutOfRange,
    InvalidRingMember,
    InvalidRingSize,
    RandomGenerationFailure,
    RingClosureFailure,
    RingSignatureError,
    SignerMismatch,
)
from .keyring import Ring, build_ring
from .keys import PrivateKey, PublicKey
from .ring_signature import RingSignature, sign, verify

__all__ = [
    "PrivateKey",
    "PublicKey",
    "Ring",
    "RingSignature",
    "build_ring",
    "sign",
    "verify",
    "RingSignatureError",
    "InvalidRingSize",
    "IndexOutOfRange",
    "SignerMismatch",
    "InvalidRingMember",
    "RandomGenerationFailure",
    "RingClosureFailure",
]
