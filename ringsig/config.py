"""Runtime defaults for the ring signature library, read from the environment."""

from __future__ import annotations

import hashlib
import os

# ------------------------------------------------------------------------------
# Configuration
# ------------------------------------------------------------------------------
DEFAULT_CURVE = os.getenv("RINGSIG_CURVE", "SECP256k1")
HASH_ALGORITHM = os.getenv("RINGSIG_HASH", "sha3_256")
DIGEST_SIZE = 32


def check_hash_algorithm(name: str) -> str:
    """Return *name* if it is a ``hashlib`` algorithm with a 256-bit digest."""

    try:
        digest = hashlib.new(name)
    except (ValueError, TypeError) as exc:
        raise ValueError(f"Unsupported hash algorithm: {name!r}") from exc
    if digest.digest_size != DIGEST_SIZE:
        raise ValueError(f"Hash algorithm {name!r} must produce a 256-bit digest")
    return name


check_hash_algorithm(HASH_ALGORITHM)
