"""
Message types for the BLS12-381 VRF.
"""

from dataclasses import dataclass, field
from typing import Optional

from .curve import G1Point
from .errors import InvalidEncodingLength
from .hashing import decode_scalar, encode_scalar
from .params import PARAMS


@dataclass(frozen=True)
class KeyPair:
    """
    Secret scalar and its public point, pk = sk * BASE.

    The secret key is kept out of repr so it does not end up in logs.
    """

    secret_key: int = field(repr=False)
    public_key: G1Point


@dataclass(frozen=True)
class Proof:
    """
    VRF proof.

    Wire format: c (32) ‖ s1 (32) ‖ preout (48, compressed), all fields
    mandatory and in this order.
    """

    c: int  # Challenge in [0, r)
    s1: int  # Response (r1 + c * sk) mod r
    preout: bytes  # sk * H_G(input), compressed

    def __post_init__(self):
        if len(self.preout) != PARAMS.compressed_size:
            raise InvalidEncodingLength("preout", PARAMS.compressed_size, len(self.preout))

    def preout_point(self) -> G1Point:
        """Decode preout; raises PrimitiveFailure if it is not a G1 point."""
        return G1Point.from_compressed(self.preout)

    def to_bytes(self) -> bytes:
        return encode_scalar(self.c) + encode_scalar(self.s1) + self.preout

    @classmethod
    def from_bytes(cls, data: bytes) -> "Proof":
        """
        Parse the wire format.

        Scalars are not range-checked here; verifiers reject c or s1 >= r.
        """
        if len(data) != PARAMS.proof_size:
            raise InvalidEncodingLength("Proof", PARAMS.proof_size, len(data))
        n = PARAMS.scalar_size
        return cls(
            c=decode_scalar(data[:n]),
            s1=decode_scalar(data[n:2 * n]),
            preout=bytes(data[2 * n:]),
        )

    def to_hex(self) -> str:
        """0x-prefixed hex of the wire format."""
        return "0x" + self.to_bytes().hex()

    @classmethod
    def from_hex(cls, text: str) -> "Proof":
        if text.startswith(("0x", "0X")):
            text = text[2:]
        return cls.from_bytes(bytes.fromhex(text))


@dataclass(frozen=True)
class VerificationResult:
    """
    Outcome of verify().

    output is set iff accepted; a rejection never carries a partial or
    default output.
    """

    accepted: bool
    output: Optional[bytes] = None

    def __post_init__(self):
        if self.accepted != (self.output is not None):
            raise ValueError("output must be set iff the proof was accepted")

    @classmethod
    def accept(cls, output: bytes) -> "VerificationResult":
        return cls(accepted=True, output=output)

    @classmethod
    def rejected(cls) -> "VerificationResult":
        return cls(accepted=False)

    def __bool__(self) -> bool:
        return self.accepted
