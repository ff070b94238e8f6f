"""
Exceptions raised by the BLS12-381 VRF.

A rejected proof is not an error: verifiers return
VerificationResult.rejected() for it.
"""


class VRFError(Exception):
    """Base class for all VRF errors."""


class InvalidEncodingLength(VRFError, ValueError):
    """A point, scalar or field-element buffer has the wrong width."""

    def __init__(self, what: str, expected: int, actual: int):
        super().__init__(f"{what} must be {expected} bytes, got {actual}")
        self.what = what
        self.expected = expected
        self.actual = actual


class PrimitiveFailure(VRFError, ValueError):
    """Group arithmetic rejected an input (off-curve, wrong subgroup, malformed)."""


class EntropyUnavailable(VRFError, RuntimeError):
    """The secure random source could not produce bytes."""
