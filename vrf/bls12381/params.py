"""
Parameters for the BLS12-381 VRF.

All widths are in bytes.

Key parameters:
- curve_order: Order r of the G1 subgroup; bounds keys, nonces, challenges
- field_modulus: Base field prime p
- scalar_size: Encoded width of a scalar (big-endian)
- field_size: Canonical width of a base field element
- wide_coord_size: Padded width of one coordinate at the primitive boundary
- digest_size: Output width of the transcript/output hash

Wire layouts derived from these:
- compressed point: field_size bytes (flag bits in the top byte)
- wide point: X ‖ Y, each left-padded to wide_coord_size (EIP-2537 G1 layout)
- mapping input: one field element left-padded to wide_coord_size
"""

from dataclasses import dataclass

from py_ecc.optimized_bls12_381 import curve_order, field_modulus


@dataclass(frozen=True)
class Params:
    """Immutable curve and encoding constants."""

    curve_order: int
    field_modulus: int
    scalar_size: int = 32
    field_size: int = 48
    wide_coord_size: int = 64
    digest_size: int = 32

    def __post_init__(self):
        if self.curve_order < 2 or self.field_modulus < 2:
            raise ValueError("curve_order and field_modulus must be at least 2")
        if self.curve_order.bit_length() > 8 * self.scalar_size:
            raise ValueError("scalar_size too small for curve_order")
        if self.field_modulus.bit_length() > 8 * self.field_size:
            raise ValueError("field_size too small for field_modulus")
        if self.wide_coord_size < self.field_size:
            raise ValueError("wide_coord_size must be at least field_size")

        # Hash-to-field embeds the raw digest without reduction, so every
        # digest must already be a canonical field element.
        if 8 * self.digest_size >= self.field_modulus.bit_length():
            raise ValueError(
                f"{8 * self.digest_size}-bit digest does not fit below a "
                f"{self.field_modulus.bit_length()}-bit field modulus"
            )

    @property
    def compressed_size(self) -> int:
        """Width of the compact point encoding."""
        return self.field_size

    @property
    def wide_point_size(self) -> int:
        """Width of the two-coordinate boundary encoding."""
        return 2 * self.wide_coord_size

    @property
    def coord_padding(self) -> int:
        """Leading zero bytes in front of each wide coordinate."""
        return self.wide_coord_size - self.field_size

    @property
    def proof_size(self) -> int:
        """Width of a serialized proof: c ‖ s1 ‖ preout."""
        return 2 * self.scalar_size + self.compressed_size

    def __repr__(self) -> str:
        return (
            f"Params(curve_order=0x{self.curve_order:x}, "
            f"field_modulus=0x{self.field_modulus:x}, "
            f"scalar_size={self.scalar_size}, field_size={self.field_size}, "
            f"wide_coord_size={self.wide_coord_size}, "
            f"digest_size={self.digest_size})"
        )


# Process-wide configuration, built once at import.
PARAMS = Params(curve_order=curve_order, field_modulus=field_modulus)
