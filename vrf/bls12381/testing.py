"""
Test-only entry points.

prove_with_nonce fixes the proof nonce r1 so proofs are reproducible in
test vectors. Never call it outside tests: reusing a nonce across two
different (sk, input) pairs, or using a predictable one, reveals sk.
"""

from typing import Union

from .curve import G1Point
from .hashing import as_bytes
from .messages import Proof
from .params import PARAMS
from .prover import Prover


def prove_with_nonce(
    secret_key: int, public_key: G1Point, input: Union[bytes, str], nonce: int
) -> Proof:
    """Prove with a caller-chosen nonce in [0, r)."""
    if not 0 <= nonce < PARAMS.curve_order:
        raise ValueError("nonce must be in [0, curve_order)")
    return Prover()._prove(secret_key, public_key, as_bytes(input), nonce)
