"""
Test helper functions.
"""

import secrets

from py_ecc.bls.hash_to_curve import map_to_curve_G1
from py_ecc.optimized_bls12_381 import FQ, normalize

from vrf.bls12381 import PARAMS, keypair_from_secret
from vrf.bls12381.testing import prove_with_nonce


def random_secret() -> int:
    """Random secret key in [1, r)."""
    return 1 + secrets.randbelow(PARAMS.curve_order - 1)


def sequence_entropy(*chunks: bytes):
    """Entropy source that returns the given chunks in order."""
    it = iter(chunks)

    def draw(n: int) -> bytes:
        return next(it)[:n]

    return draw


def failing_entropy(n: int) -> bytes:
    raise OSError("no entropy")


def make_vector(secret_key: int, input: bytes, nonce: int):
    """Deterministic (keypair, input, proof) vector."""
    keypair = keypair_from_secret(secret_key)
    proof = prove_with_nonce(keypair.secret_key, keypair.public_key, input, nonce)
    return keypair, input, proof


def wide_from_affine(x: int, y: int) -> bytes:
    return x.to_bytes(64, "big") + y.to_bytes(64, "big")


def off_subgroup_wide() -> bytes:
    """Wide encoding of a point on E(Fp) outside the r-torsion subgroup."""
    x, y = normalize(map_to_curve_G1(FQ(5)))
    return wide_from_affine(x.n, y.n)
