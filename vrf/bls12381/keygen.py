"""
Key generation and scalar sampling for the BLS12-381 VRF.
"""

import logging
import secrets
from typing import Optional

from ..primitives import EntropySource
from .curve import BASE
from .errors import EntropyUnavailable
from .messages import KeyPair
from .params import PARAMS

logger = logging.getLogger(__name__)

# Draw 64 bytes per scalar so the reduction mod r is statistically uniform.
SAMPLE_SIZE = 64


def random_scalar(entropy: Optional[EntropySource] = None) -> int:
    """
    Sample a scalar uniformly from [0, r).

    Args:
        entropy: Random byte source, defaults to secrets.token_bytes

    Raises:
        EntropyUnavailable: If the source raises OSError or
            NotImplementedError, or returns short output
    """
    entropy = entropy or secrets.token_bytes
    try:
        data = entropy(SAMPLE_SIZE)
    except (OSError, NotImplementedError) as e:
        raise EntropyUnavailable(f"Secure random source failed: {e}") from e
    if len(data) != SAMPLE_SIZE:
        raise EntropyUnavailable(
            f"Secure random source returned {len(data)} bytes, expected {SAMPLE_SIZE}"
        )
    return int.from_bytes(data, "big") % PARAMS.curve_order


def keypair_from_secret(secret_key: int) -> KeyPair:
    """
    Derive the key pair for a fixed secret scalar.

    Raises:
        ValueError: If secret_key is outside [1, r)
    """
    if not 1 <= secret_key < PARAMS.curve_order:
        raise ValueError("secret_key must be in [1, curve_order)")
    return KeyPair(secret_key=secret_key, public_key=secret_key * BASE)


def generate_keypair(entropy: Optional[EntropySource] = None) -> KeyPair:
    """
    Generate a fresh key pair.

    Zero is a degenerate key; a zero draw (probability ~2^-255) is
    resampled.

    Raises:
        EntropyUnavailable: If the random source fails
    """
    secret_key = 0
    while secret_key == 0:
        secret_key = random_scalar(entropy)
    keypair = keypair_from_secret(secret_key)
    logger.debug("Generated key pair with public key %r", keypair.public_key)
    return keypair
