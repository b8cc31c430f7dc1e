"""
Error Types
===========

Three failure kinds surface from the scheme:

- DimensionMismatch: a message vector and a key disagree on length. Raised
  before any group arithmetic happens.
- ProofRejected: a proof or a ciphertext failed verification. The message is
  the same whichever check failed.
- InternalEncodingFault: a freshly created proof failed its own self-check.
  Proof witnesses are always produced by the library itself, so this points at
  a bug in the equation encoding rather than at bad input. It derives from
  AssertionError, not RCCAError, so `except RCCAError` never swallows it.
"""


class RCCAError(Exception):
    """Base class for all scheme errors."""


class DimensionMismatch(RCCAError, ValueError):
    """Message length does not match the dimension fixed at setup."""

    def __init__(self, expected: int, got: int):
        self.expected = expected
        self.got = got
        super().__init__(f"Message vector length {got} != n={expected}")


class ProofRejected(RCCAError):
    """Ciphertext or proof rejected."""

    MESSAGE = "ciphertext rejected"

    def __init__(self):
        super().__init__(self.MESSAGE)


class InternalEncodingFault(AssertionError):
    """A just-created proof or CRS fails its own self-check."""
