import pytest

from ringsig import PrivateKey, PublicKey, crypto_utils


def test_public_keys_compare_by_value(private_key):
    derived = private_key.public_key
    rebuilt = PublicKey(derived.x, derived.y, derived.curve_name)
    assert rebuilt == derived
    assert rebuilt is not derived
    assert hash(rebuilt) == hash(derived)


def test_private_key_repr_hides_scalar():
    key = PrivateKey(0xC0FFEE, "SECP256k1")
    assert str(0xC0FFEE) not in repr(key)
    assert hex(0xC0FFEE) not in repr(key)


@pytest.mark.parametrize("scalar", [0, -5, crypto_utils.get_curve("SECP256k1").order])
def test_private_key_rejects_out_of_range_scalar(scalar):
    with pytest.raises(ValueError):
        PrivateKey(scalar, "SECP256k1")


def test_private_key_normalises_curve_alias():
    assert PrivateKey(3, "secp256k1").curve_name == "SECP256k1"


def test_public_key_matches_scalar_multiple_of_generator():
    curve = crypto_utils.get_curve("NIST256p")
    key = PrivateKey(12345, "NIST256p")
    point = 12345 * curve.generator
    assert key.public_key == PublicKey(point.x(), point.y(), "NIST256p")


def test_off_curve_public_key_is_rejected_for_arithmetic(private_key):
    public = private_key.public_key
    tampered = PublicKey(public.x + 1, public.y, public.curve_name)
    assert not tampered.is_on_curve()
    with pytest.raises(ValueError):
        tampered.to_point()


def test_generate_uses_injected_random_source():
    key = PrivateKey.generate("SECP256k1", rng=lambda bound: 41)
    assert key.scalar == 42


def test_public_key_normalises_curve_alias():
    key = PrivateKey(12345, "SECP256k1")
    public = key.public_key
    aliased = PublicKey(public.x, public.y, "secp256k1")
    assert aliased.curve_name == "SECP256k1"
    assert aliased == public


@pytest.mark.parametrize("curve_name", ["unknown", "", None])
def test_public_key_with_unresolvable_curve_is_off_curve(private_key, curve_name):
    public = private_key.public_key
    key = PublicKey(public.x, public.y, curve_name)
    assert key.curve_name == curve_name
    assert not key.is_on_curve()
