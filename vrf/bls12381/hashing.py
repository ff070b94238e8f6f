"""
Hash primitives for the BLS12-381 VRF.

- keccak256: the fixed 256-bit hash shared by every other primitive
- hash_to_scalar (H_p): ordered transcript of bytes/str/int/points -> Z_r
- hash_to_field: input bytes -> 64-byte padded field element
- hash_to_curve (H_G): input bytes -> G1 subgroup point
- output_hash: preout and input -> VRF output
"""

from typing import Union

from Crypto.Hash import keccak

from ..primitives import HashFunction
from .curve import G1Point
from .errors import InvalidEncodingLength
from .params import PARAMS

TranscriptPart = Union[bytes, str, int, G1Point]


class Keccak256:
    """keccak256 as used by Ethereum (not NIST SHA3-256)."""

    digest_size = 32

    def __call__(self, data: bytes) -> bytes:
        return keccak.new(digest_bits=256, data=data).digest()


keccak256: HashFunction = Keccak256()

if keccak256.digest_size != PARAMS.digest_size:
    raise ValueError("keccak256 digest size does not match PARAMS.digest_size")


def encode_scalar(value: int) -> bytes:
    """
    Encode a scalar as scalar_size big-endian bytes.

    Raises:
        InvalidEncodingLength: If value is negative or too wide
    """
    if value < 0 or value.bit_length() > 8 * PARAMS.scalar_size:
        raise InvalidEncodingLength(
            "Scalar", PARAMS.scalar_size, (max(value.bit_length(), 1) + 7) // 8
        )
    return value.to_bytes(PARAMS.scalar_size, "big")


def decode_scalar(data: bytes) -> int:
    """Decode a scalar_size big-endian scalar (not reduced)."""
    if len(data) != PARAMS.scalar_size:
        raise InvalidEncodingLength("Scalar", PARAMS.scalar_size, len(data))
    return int.from_bytes(data, "big")


def serialize_part(part: TranscriptPart) -> bytes:
    """
    Serialize one transcript value.

    bytes as-is, str as UTF-8, int as a fixed-width scalar, points in the
    wide encoding.
    """
    # bool is an int subclass and would silently encode as 0/1
    if isinstance(part, bool):
        raise TypeError("Cannot serialize bool into a transcript")
    if isinstance(part, (bytes, bytearray, memoryview)):
        return bytes(part)
    if isinstance(part, str):
        return part.encode("utf-8")
    if isinstance(part, int):
        return encode_scalar(part)
    if isinstance(part, G1Point):
        return part.to_wide()
    raise TypeError(f"Cannot serialize {type(part).__name__} into a transcript")


def hash_to_scalar(*parts: TranscriptPart) -> int:
    """
    H_p: hash an ordered transcript to a scalar mod r.

    The digest is read big-endian and reduced mod r. The slight bias from
    2^256 mod r is part of the protocol; prover and verifier must compute
    the identical value.
    """
    data = b"".join(serialize_part(part) for part in parts)
    return int.from_bytes(keccak256(data), "big") % PARAMS.curve_order


def hash_to_field(input: bytes) -> bytes:
    """
    Embed keccak256(input) as a padded field element.

    Layout: zero bytes ‖ digest, wide_coord_size bytes total. The integer
    value is < 2^256 < p, so no reduction is needed (checked in Params).
    """
    digest = keccak256(input)
    return digest.rjust(PARAMS.wide_coord_size, b"\x00")


def hash_to_curve(input: bytes) -> G1Point:
    """H_G: deterministic map from input bytes to a G1 subgroup point."""
    return G1Point.from_field_element(int.from_bytes(hash_to_field(input), "big"))


def output_hash(preout: G1Point, input: bytes) -> bytes:
    """VRF output: keccak256(compressed(preout) ‖ input)."""
    return keccak256(preout.to_compressed() + input)


def as_bytes(input: Union[bytes, str]) -> bytes:
    """Normalize an input to bytes (str is UTF-8 encoded)."""
    if isinstance(input, str):
        return input.encode("utf-8")
    if isinstance(input, (bytes, bytearray, memoryview)):
        return bytes(input)
    raise TypeError(f"Input must be bytes or str, not {type(input).__name__}")
