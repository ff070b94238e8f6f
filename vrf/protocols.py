"""
Protocols and messages for verifiable random functions.

This module defines:
1. Message protocols: Proof, VerificationResult
2. Protocol interfaces: VRFProver, VRFVerifier

A VRF lets the holder of a secret key derive a pseudorandom output for an
input together with a proof that anyone holding the public key can check.
Several verifiers (a reference one and a boundary-constrained one) share
the VRFVerifier interface and must agree on every proof.

Flow:
- Key generation: secret scalar sk, public point pk = sk * BASE
- Prove: prover computes preout = sk * H_G(input) and a Schnorr-style
  proof of equal discrete logs for (BASE, pk) and (H_G(input), preout)
- Verify: verifier reconstructs the commitments from (c, s1), recomputes
  the challenge and, only if it matches, derives the output from preout
"""

from typing import Optional, Protocol, runtime_checkable


# =============================================================================
# Message Protocols
# =============================================================================


class Proof(Protocol):
    """
    Proof produced by a prover.

    Concrete implementations define the proof structure and wire format.
    """

    def to_bytes(self) -> bytes:
        """Serialize to the fixed wire format."""
        ...


class VerificationResult(Protocol):
    """
    Outcome of a verification.

    A rejection is a normal value, never an exception.
    """

    @property
    def accepted(self) -> bool:
        ...

    @property
    def output(self) -> Optional[bytes]:
        """VRF output; None iff rejected."""
        ...


# =============================================================================
# Protocol Interfaces
# =============================================================================


@runtime_checkable
class VRFProver(Protocol):
    """
    Protocol for VRF provers.

    The secret key and the per-call nonce never leave the prover.
    """

    def prove(self, secret_key: int, public_key, input: bytes) -> Proof:
        """
        Produce a proof for input under secret_key.

        Args:
            secret_key: Secret scalar
            public_key: Matching public point
            input: Arbitrary input bytes

        Returns:
            Proof binding the output to (secret_key, input)
        """
        ...


@runtime_checkable
class VRFVerifier(Protocol):
    """
    Protocol for VRF verifiers.

    Verifiers are stateless: each call is an independent
    Pending -> Accepted | Rejected transition.
    """

    def verify(self, public_key, input: bytes, proof: Proof) -> VerificationResult:
        """
        Check a proof and recover the output on success.

        Args:
            public_key: Prover's public point
            input: Input the proof claims to cover
            proof: Proof to check

        Returns:
            Accepted result carrying the output, or a rejection
        """
        ...
