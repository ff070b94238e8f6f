"""
Hash function protocol.

A fixed-digest-width cryptographic hash shared by the challenge
transcript, hash-to-curve and output derivation. Prover and verifier must
use the same instance, or transcripts will not match.
"""

from typing import Protocol


class HashFunction(Protocol):
    """
    Generic fixed-width hash interface.
    """

    @property
    def digest_size(self) -> int:
        """Digest width in bytes."""
        ...

    def __call__(self, data: bytes) -> bytes:
        """
        Hash data.

        Args:
            data: Input bytes

        Returns:
            digest_size bytes
        """
        ...
