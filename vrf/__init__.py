"""
Verifiable random function (VRF) library.

A VRF maps an input to a pseudorandom output under a secret key and
attaches a proof that anyone holding the public key can check.

Modules:
- primitives: Collaborator interfaces (hash function, entropy source)
- protocols: Prover and verifier interfaces
- bls12381: VRF over BLS12-381 G1 with keccak256
"""

from . import primitives
from . import protocols
from . import bls12381

__all__ = [
    "primitives",
    "protocols",
    "bls12381",
]
