"""
G1 point abstraction over py_ecc's optimized BLS12-381 arithmetic.

G1Point is the only point type that crosses this package's API. It has
exactly two external encodings:
- compact: 48-byte ZCash-style compressed form, used for proof transport
- wide: 128-byte X ‖ Y, each coordinate left-padded from 48 to 64 bytes,
  used at the boundary primitives (EIP-2537 G1 layout)

Decoding checks length first (InvalidEncodingLength), then canonical
coordinates, curve membership and subgroup membership (PrimitiveFailure).
"""

from py_ecc.bls.hash_to_curve import clear_cofactor_G1, map_to_curve_G1
from py_ecc.bls.point_compression import compress_G1, decompress_G1
from py_ecc.optimized_bls12_381 import (
    FQ,
    G1,
    Z1,
    add,
    b,
    eq,
    is_inf,
    is_on_curve,
    multiply,
    normalize,
)

from .errors import InvalidEncodingLength, PrimitiveFailure
from .params import PARAMS


class G1Point:
    """
    Immutable point in the prime-order subgroup of BLS12-381 G1.

    Supports P + Q, k * P (k reduced mod r), equality and hashing.
    """

    __slots__ = ("_pt",)

    def __init__(self, pt):
        # pt is a py_ecc projective triple; callers outside this module use
        # the named constructors instead.
        self._pt = pt

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def base(cls) -> "G1Point":
        """Canonical generator."""
        return BASE

    @classmethod
    def infinity(cls) -> "G1Point":
        """Identity element."""
        return INFINITY

    @classmethod
    def from_affine(cls, x: int, y: int) -> "G1Point":
        """
        Build a point from affine coordinates.

        Raises:
            PrimitiveFailure: If the point is off the curve or outside G1
        """
        p = PARAMS.field_modulus
        if not (0 <= x < p and 0 <= y < p):
            raise PrimitiveFailure("Coordinate is not a canonical field element")
        pt = (FQ(x), FQ(y), FQ.one())
        if not is_on_curve(pt, b):
            raise PrimitiveFailure("Point is not on curve")
        point = cls(pt)
        point.check_subgroup()
        return point

    @classmethod
    def from_field_element(cls, u: int) -> "G1Point":
        """
        Map a field element onto G1.

        SSWU onto the 11-isogenous curve, isogeny back to E, then cofactor
        clearing. Total: every u < p yields a subgroup point.
        """
        if not 0 <= u < PARAMS.field_modulus:
            raise PrimitiveFailure("Field element is not below the field modulus")
        return cls(clear_cofactor_G1(map_to_curve_G1(FQ(u))))

    @classmethod
    def from_compressed(cls, data: bytes) -> "G1Point":
        """
        Decode the compact encoding.

        Raises:
            InvalidEncodingLength: If data is not compressed_size bytes
            PrimitiveFailure: If the encoding is malformed or outside G1
        """
        if len(data) != PARAMS.compressed_size:
            raise InvalidEncodingLength("Compressed G1 point", PARAMS.compressed_size, len(data))
        try:
            pt = decompress_G1(int.from_bytes(data, "big"))
        except ValueError as e:
            raise PrimitiveFailure(f"Invalid compressed G1 point: {e}") from e
        point = cls(pt)
        point.check_subgroup()
        return point

    @classmethod
    def from_wide(cls, data: bytes) -> "G1Point":
        """
        Decode the wide two-coordinate encoding.

        All-zero input is the point at infinity.

        Raises:
            InvalidEncodingLength: If data is not wide_point_size bytes
            PrimitiveFailure: If padding is non-zero, a coordinate is not
                canonical, or the point is off the curve or outside G1
        """
        point = cls.from_wide_unchecked(data)
        point.check_subgroup()
        return point

    @classmethod
    def from_wide_unchecked(cls, data: bytes) -> "G1Point":
        """Decode the wide encoding with a curve check but no subgroup check."""
        if len(data) != PARAMS.wide_point_size:
            raise InvalidEncodingLength("G1 point", PARAMS.wide_point_size, len(data))
        if not any(data):
            return INFINITY

        w = PARAMS.wide_coord_size
        pad = PARAMS.coord_padding
        x_bytes, y_bytes = data[:w], data[w:]
        if any(x_bytes[:pad]) or any(y_bytes[:pad]):
            raise PrimitiveFailure("Non-zero padding in wide G1 encoding")

        x = int.from_bytes(x_bytes, "big")
        y = int.from_bytes(y_bytes, "big")
        p = PARAMS.field_modulus
        if x >= p or y >= p:
            raise PrimitiveFailure("Coordinate is not a canonical field element")
        pt = (FQ(x), FQ(y), FQ.one())
        if not is_on_curve(pt, b):
            raise PrimitiveFailure("Point is not on curve")
        return cls(pt)

    # -------------------------------------------------------------------------
    # Encodings
    # -------------------------------------------------------------------------

    def to_compressed(self) -> bytes:
        """Compact encoding (compressed_size bytes)."""
        return compress_G1(self._pt).to_bytes(PARAMS.compressed_size, "big")

    def to_wide(self) -> bytes:
        """Wide X ‖ Y encoding (wide_point_size bytes)."""
        if self.is_infinity():
            return bytes(PARAMS.wide_point_size)
        x, y = self.affine()
        w = PARAMS.wide_coord_size
        return x.to_bytes(w, "big") + y.to_bytes(w, "big")

    def affine(self) -> tuple[int, int]:
        """Affine coordinates as integers. Undefined at infinity."""
        if self.is_infinity():
            raise ValueError("Point at infinity has no affine coordinates")
        x, y = normalize(self._pt)
        return x.n, y.n

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def is_infinity(self) -> bool:
        return is_inf(self._pt)

    def check_subgroup(self) -> None:
        """Raise PrimitiveFailure unless r * P is the identity."""
        if not is_inf(multiply(self._pt, PARAMS.curve_order)):
            raise PrimitiveFailure("Point is not in the G1 subgroup")

    def __add__(self, other: "G1Point") -> "G1Point":
        if not isinstance(other, G1Point):
            return NotImplemented
        return G1Point(add(self._pt, other._pt))

    def __mul__(self, scalar: int) -> "G1Point":
        if not isinstance(scalar, int):
            return NotImplemented
        return G1Point(multiply(self._pt, scalar % PARAMS.curve_order))

    __rmul__ = __mul__

    def __eq__(self, other) -> bool:
        if not isinstance(other, G1Point):
            return NotImplemented
        return eq(self._pt, other._pt)

    def __hash__(self) -> int:
        return hash(self.to_compressed())

    def __repr__(self) -> str:
        return f"G1Point(0x{self.to_compressed().hex()})"


BASE = G1Point(G1)
INFINITY = G1Point(Z1)
