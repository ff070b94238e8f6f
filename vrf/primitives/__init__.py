"""
Cryptographic primitives consumed by the VRF.

This module defines interfaces for the hash and entropy collaborators.
Concrete implementations are in curve-specific modules.
"""

from .entropy import EntropySource
from .hash import HashFunction

__all__ = ["EntropySource", "HashFunction"]
