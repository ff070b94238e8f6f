"""
VRF over BLS12-381 G1 with keccak256.

Proofs are (c, s1, preout) Schnorr-style proofs of equal discrete logs.
Two verifiers are provided: Verifier uses full group arithmetic,
BoundaryVerifier uses only EIP-2537-style add/MSM/map primitives. Both
must reach identical decisions and outputs.
"""

from .params import Params, PARAMS
from .errors import VRFError, InvalidEncodingLength, PrimitiveFailure, EntropyUnavailable
from .curve import G1Point, BASE
from .hashing import hash_to_scalar, hash_to_curve, keccak256
from .messages import KeyPair, Proof, VerificationResult
from .keygen import generate_keypair, keypair_from_secret
from .prover import Prover
from .verifier import Verifier
from .boundary import BoundaryVerifier

__all__ = [
    "Params",
    "PARAMS",
    "VRFError",
    "InvalidEncodingLength",
    "PrimitiveFailure",
    "EntropyUnavailable",
    "G1Point",
    "BASE",
    "hash_to_scalar",
    "hash_to_curve",
    "keccak256",
    "KeyPair",
    "Proof",
    "VerificationResult",
    "generate_keypair",
    "keypair_from_secret",
    "Prover",
    "Verifier",
    "BoundaryVerifier",
]
