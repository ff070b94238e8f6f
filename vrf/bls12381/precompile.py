"""
Byte-level G1 primitives modelled on the EIP-2537 precompiles.

This is the whole group interface available to BoundaryVerifier:
- g1_add:       128 ‖ 128 -> 128, P + Q
- g1_msm2:      (128, 32, 128, 32) -> 128, s1 * P1 + s2 * P2
- map_fp_to_g1: 64 -> 128, field element to subgroup point

There is no negation and no single-point scalar multiplication. Each call
checks exact buffer lengths before anything else; a mismatch is a caller
error (InvalidEncodingLength). Malformed or off-curve points raise
PrimitiveFailure. g1_add only requires points on the curve; g1_msm2 also
requires subgroup membership. The all-zero encoding is the identity.
"""

from .curve import G1Point
from .errors import InvalidEncodingLength, PrimitiveFailure
from .params import PARAMS


def _check_length(what: str, data: bytes, expected: int) -> None:
    if len(data) != expected:
        raise InvalidEncodingLength(what, expected, len(data))


def g1_add(a: bytes, b: bytes) -> bytes:
    """Add two wide-encoded points."""
    _check_length("G1 point", a, PARAMS.wide_point_size)
    _check_length("G1 point", b, PARAMS.wide_point_size)
    p = G1Point.from_wide_unchecked(a)
    q = G1Point.from_wide_unchecked(b)
    return (p + q).to_wide()


def g1_msm2(p1: bytes, s1: bytes, p2: bytes, s2: bytes) -> bytes:
    """
    Two-term multi-scalar multiplication.

    Scalars are scalar_size big-endian and are not required to be below r.
    """
    _check_length("G1 point", p1, PARAMS.wide_point_size)
    _check_length("Scalar", s1, PARAMS.scalar_size)
    _check_length("G1 point", p2, PARAMS.wide_point_size)
    _check_length("Scalar", s2, PARAMS.scalar_size)
    a = G1Point.from_wide(p1)
    b = G1Point.from_wide(p2)
    k1 = int.from_bytes(s1, "big")
    k2 = int.from_bytes(s2, "big")
    return (k1 * a + k2 * b).to_wide()


def map_fp_to_g1(fp: bytes) -> bytes:
    """Map a padded field element onto the G1 subgroup."""
    _check_length("Field element", fp, PARAMS.wide_coord_size)
    if any(fp[:PARAMS.coord_padding]):
        raise PrimitiveFailure("Non-zero padding in field element")
    u = int.from_bytes(fp, "big")
    return G1Point.from_field_element(u).to_wide()
