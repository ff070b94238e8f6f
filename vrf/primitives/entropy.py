"""
Entropy source protocol.

Draws uniformly random bytes for secret keys and proof nonces. Must be
safe to call from several threads at once, and must raise rather than
return short or predictable output when the platform source is unavailable.

Failure contract: an unavailable source raises OSError (as os.urandom and
secrets.token_bytes do) or NotImplementedError. Callers translate exactly
these, plus short output, into EntropyUnavailable; any other exception is
a bug in the source and propagates unchanged.
"""

from typing import Protocol


class EntropySource(Protocol):
    """Callable returning n uniformly random bytes."""

    def __call__(self, n: int) -> bytes:
        """
        Draw n random bytes.

        Raises:
            OSError: If the underlying source is unavailable
            NotImplementedError: If no secure source exists on this platform
        """
        ...
