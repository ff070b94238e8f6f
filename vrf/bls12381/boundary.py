"""
Boundary-constrained verifier for the BLS12-381 VRF.

Runs the same algebra as Verifier using only the byte-level primitives in
precompile.py, the way an on-chain verifier sees the group:

    H  = map_fp_to_g1(hash_to_field(input))
    R  = g1_msm2(BASE, s1, pk,     (r - c) mod r)
    Rm = g1_msm2(H,    s1, preout, (r - c) mod r)
    accept iff H_p(input, pk, preout, R, Rm) == c

Points arrive in their compact form and are re-encoded to the wide form
before crossing into the primitives. The transcript hashes the wide
buffers returned by the primitives, which are byte-identical to what
Verifier hashes, so the two verifiers cannot disagree.
"""

import logging
from typing import Union

from .curve import BASE, G1Point
from .hashing import as_bytes, encode_scalar, hash_to_field, hash_to_scalar, keccak256
from .messages import Proof, VerificationResult
from .params import PARAMS
from .precompile import g1_msm2, map_fp_to_g1
from .verifier import coerce_public_key, scalars_in_range

logger = logging.getLogger(__name__)

BASE_WIDE = BASE.to_wide()


def to_wide(compressed: bytes) -> bytes:
    """
    Re-encode a compact point into the boundary's wide form.

    Raises:
        InvalidEncodingLength: If compressed has the wrong width
        PrimitiveFailure: If it is not a G1 point
    """
    return G1Point.from_compressed(compressed).to_wide()


class BoundaryVerifier:
    """
    Stateless VRF verifier restricted to add/MSM/map primitives.
    """

    def verify(
        self, public_key: Union[G1Point, bytes], input: Union[bytes, str], proof: Proof
    ) -> VerificationResult:
        """
        Verify a proof using only boundary primitives.

        Args:
            public_key: Prover's public point, as G1Point or compressed bytes
            input: Input the proof claims to cover
            proof: Proof to check

        Returns:
            VerificationResult carrying the output, or a rejection

        Raises:
            InvalidEncodingLength: If a compact point has the wrong width
            PrimitiveFailure: If pk or preout does not decode to a G1 point
        """
        input = as_bytes(input)
        if not scalars_in_range(proof):
            logger.debug("Rejected proof: scalar out of range")
            return VerificationResult.rejected()

        pk_wide = to_wide(coerce_public_key(public_key).to_compressed())
        preout_wide = to_wide(proof.preout)

        s1 = encode_scalar(proof.s1)
        neg_c = encode_scalar((PARAMS.curve_order - proof.c) % PARAMS.curve_order)

        h_wide = map_fp_to_g1(hash_to_field(input))
        R = g1_msm2(BASE_WIDE, s1, pk_wide, neg_c)
        Rm = g1_msm2(h_wide, s1, preout_wide, neg_c)

        c = hash_to_scalar(input, pk_wide, preout_wide, R, Rm)
        if c != proof.c:
            logger.debug("Rejected proof: challenge mismatch")
            return VerificationResult.rejected()

        return VerificationResult.accept(keccak256(proof.preout + input))
