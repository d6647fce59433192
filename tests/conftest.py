import pytest

from ringsig import PrivateKey, build_ring


@pytest.fixture
def private_key():
    return PrivateKey.generate("SECP256k1")


@pytest.fixture
def signed_ring(private_key):
    """Return ``(ring, private_key, signer_index)`` for a ring of five."""

    signer_index = 2
    ring = build_ring(5, private_key, signer_index)
    return ring, private_key, signer_index


def make_ring(size: int, signer_index: int, curve_name: str = "SECP256k1"):
    """Helper to build a ring together with the signer's key."""

    key = PrivateKey.generate(curve_name)
    return build_ring(size, key, signer_index), key
