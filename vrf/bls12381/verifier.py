"""
Reference verifier for the BLS12-381 VRF.

Reconstructs the prover's commitments without sk or r1:

    R  = s1 * BASE     + (-c mod r) * pk
    Rm = s1 * H_G(in)  + (-c mod r) * preout

and accepts iff H_p(in, pk, preout, R, Rm) == c. Subtraction is done by
negating the scalar, never the point, so the same algebra carries over
unchanged to BoundaryVerifier.
"""

import logging
from typing import Union

from .curve import BASE, G1Point
from .hashing import as_bytes, hash_to_curve, hash_to_scalar, output_hash
from .messages import Proof, VerificationResult
from .params import PARAMS

logger = logging.getLogger(__name__)


def coerce_public_key(public_key: Union[G1Point, bytes]) -> G1Point:
    """
    Accept a public key as a G1Point or its compressed encoding.

    Raises:
        InvalidEncodingLength: If the bytes are not a compressed point
        PrimitiveFailure: If they do not decode to a G1 point
    """
    if isinstance(public_key, G1Point):
        return public_key
    if isinstance(public_key, (bytes, bytearray, memoryview)):
        return G1Point.from_compressed(bytes(public_key))
    raise TypeError(f"public_key must be G1Point or bytes, not {type(public_key).__name__}")


def scalars_in_range(proof: Proof) -> bool:
    """Check c and s1 are canonical scalars in [0, r)."""
    order = PARAMS.curve_order
    return 0 <= proof.c < order and 0 <= proof.s1 < order


class Verifier:
    """
    Stateless VRF verifier.
    """

    def verify(
        self, public_key: Union[G1Point, bytes], input: Union[bytes, str], proof: Proof
    ) -> VerificationResult:
        """
        Verify a proof and recover the output.

        Args:
            public_key: Prover's public point, as G1Point or compressed bytes
            input: Input the proof claims to cover
            proof: Proof to check

        Returns:
            VerificationResult carrying the output, or a rejection

        Raises:
            InvalidEncodingLength: If a compressed public key has the wrong width
            PrimitiveFailure: If pk or preout does not decode to a G1 point
        """
        input = as_bytes(input)
        if not scalars_in_range(proof):
            logger.debug("Rejected proof: scalar out of range")
            return VerificationResult.rejected()

        public_key = coerce_public_key(public_key)
        preout = proof.preout_point()
        neg_c = (-proof.c) % PARAMS.curve_order

        R = proof.s1 * BASE + neg_c * public_key

        h = hash_to_curve(input)
        Rm = proof.s1 * h + neg_c * preout

        c = hash_to_scalar(input, public_key, preout, R, Rm)
        if c != proof.c:
            logger.debug("Rejected proof: challenge mismatch")
            return VerificationResult.rejected()

        return VerificationResult.accept(output_hash(preout, input))
