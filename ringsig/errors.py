"""Exceptions raised by ring construction and signing."""

from __future__ import annotations


class RingSignatureError(Exception):
    """Base class for every error raised by :mod:`ringsig`."""


class InvalidRingSize(RingSignatureError, ValueError):
    """The ring holds fewer than two members."""


class IndexOutOfRange(RingSignatureError, ValueError):
    """The signer index does not address a ring position."""


class SignerMismatch(RingSignatureError, ValueError):
    """The key at the signer index is not the signer's public key."""


class InvalidRingMember(RingSignatureError, ValueError):
    """A ring member is off the curve or belongs to a different curve."""


class RandomGenerationFailure(RingSignatureError, RuntimeError):
    """The secure random source failed or returned an unusable value."""


class RingClosureFailure(RingSignatureError, RuntimeError):
    """The signer's closing response did not reproduce the commitment.

    This is never caused by caller input that passed validation; it marks an
    arithmetic defect and should be alerted on rather than retried.
    """


__all__ = [
    "RingSignatureError",
    "InvalidRingSize",
    "IndexOutOfRange",
    "SignerMismatch",
    "InvalidRingMember",
    "RandomGenerationFailure",
    "RingClosureFailure",
]
