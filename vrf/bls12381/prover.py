"""
Prover for the BLS12-381 VRF.

Given sk, pk = sk * BASE and an input, the prover publishes
preout = sk * H_G(input) and proves log_BASE(pk) == log_H(preout) with a
Fiat-Shamir Schnorr proof:

    r1 <- random scalar
    R = r1 * BASE, Rm = r1 * H_G(input)
    c = H_p(input, pk, preout, R, Rm)
    s1 = r1 + c * sk mod r

Security: r1 must be fresh and unpredictable for every call. Two proofs
sharing r1 for different transcripts reveal sk.
"""

import logging
from typing import Optional, Union

from ..primitives import EntropySource
from .curve import BASE, G1Point
from .hashing import as_bytes, hash_to_curve, hash_to_scalar
from .keygen import random_scalar
from .messages import Proof
from .params import PARAMS

logger = logging.getLogger(__name__)


class Prover:
    """
    VRF prover.

    Stateless apart from the entropy source; one instance may serve
    concurrent prove() calls if the source is thread-safe.
    """

    def __init__(self, entropy: Optional[EntropySource] = None):
        self.entropy = entropy

    def prove(self, secret_key: int, public_key: G1Point, input: Union[bytes, str]) -> Proof:
        """
        Produce a proof for input.

        Args:
            secret_key: Secret scalar in [1, r)
            public_key: secret_key * BASE
            input: Input bytes (str is UTF-8 encoded)

        Returns:
            Proof(c, s1, preout)

        Raises:
            EntropyUnavailable: If no nonce can be drawn
        """
        nonce = random_scalar(self.entropy)
        return self._prove(secret_key, public_key, as_bytes(input), nonce)

    def _prove(self, secret_key: int, public_key: G1Point, input: bytes, nonce: int) -> Proof:
        order = PARAMS.curve_order
        if not 1 <= secret_key < order:
            raise ValueError("secret_key must be in [1, curve_order)")

        h = hash_to_curve(input)
        preout = secret_key * h

        R = nonce * BASE
        Rm = nonce * h

        c = hash_to_scalar(input, public_key, preout, R, Rm)
        s1 = (nonce + c * secret_key) % order

        logger.debug("Proved input of %d bytes, preout %r", len(input), preout)
        return Proof(c=c, s1=s1, preout=preout.to_compressed())
