"""Key value types shared by the ring builder, signer and verifier."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ecdsa.ellipticcurve import PointJacobi

from . import config, crypto_utils


@dataclass(frozen=True)
class PublicKey:
    """Affine public point, compared by coordinates rather than identity."""

    x: int
    y: int
    curve_name: str = config.DEFAULT_CURVE

    def __post_init__(self) -> None:
        # unknown or empty names are kept so arithmetic rejects the key later
        if isinstance(self.curve_name, str) and self.curve_name:
            try:
                curve = crypto_utils.get_curve(self.curve_name)
            except ValueError:
                return
            object.__setattr__(self, "curve_name", curve.name)

    @classmethod
    def from_point(cls, point: crypto_utils.AnyPoint, curve_name: Optional[str] = None) -> "PublicKey":
        curve = crypto_utils.get_curve(curve_name)
        return cls(point.x(), point.y(), curve.name)

    def is_on_curve(self) -> bool:
        try:
            curve = crypto_utils.get_curve(self.curve_name)
        except ValueError:
            return False
        p = curve.curve.p()
        return (
            isinstance(self.x, int)
            and isinstance(self.y, int)
            and 0 <= self.x < p
            and 0 <= self.y < p
            and curve.curve.contains_point(self.x, self.y)
        )

    def to_point(self) -> PointJacobi:
        """Return the point for curve arithmetic; raises ``ValueError`` when off-curve."""

        if not self.is_on_curve():
            raise ValueError("public key is not a point on its curve")
        curve = crypto_utils.get_curve(self.curve_name)
        return PointJacobi(curve.curve, self.x, self.y, 1, curve.order)


@dataclass(frozen=True)
class PrivateKey:
    """Secret scalar in ``[1, N)``; the scalar is kept out of ``repr``."""

    scalar: int = field(repr=False)
    curve_name: str = config.DEFAULT_CURVE

    def __post_init__(self) -> None:
        curve = crypto_utils.get_curve(self.curve_name)
        if not crypto_utils.is_valid_scalar(self.scalar, curve):
            raise ValueError("private key must be a scalar in the curve order")
        # aliases such as "secp256k1" collapse to the canonical curve name
        object.__setattr__(self, "curve_name", curve.name)

    @classmethod
    def generate(
        cls,
        curve_name: Optional[str] = None,
        rng: Optional[crypto_utils.RandomSource] = None,
    ) -> "PrivateKey":
        curve = crypto_utils.get_curve(curve_name)
        return cls(crypto_utils.random_private_scalar(curve, rng), curve.name)

    @property
    def public_key(self) -> PublicKey:
        curve = crypto_utils.get_curve(self.curve_name)
        point = crypto_utils.scalar_mult(self.scalar, curve.generator)
        return PublicKey.from_point(point, curve.name)
