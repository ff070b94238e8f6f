"""
Tests for key generation and scalar sampling.
"""

import pytest
import sys
sys.path.insert(0, "..")

from py_ecc.optimized_bls12_381 import G1, multiply, normalize

from vrf.bls12381 import BASE, PARAMS, EntropyUnavailable, generate_keypair, keypair_from_secret
from vrf.bls12381.keygen import SAMPLE_SIZE, random_scalar

from helpers import failing_entropy, random_secret, sequence_entropy


class TestKeypairFromSecret:

    def test_matches_independent_multiply(self):
        for _ in range(3):
            sk = random_secret()
            keypair = keypair_from_secret(sk)
            x, y = normalize(multiply(G1, sk))
            assert keypair.public_key.affine() == (x.n, y.n)

    def test_sk_one_is_base(self):
        assert keypair_from_secret(1).public_key == BASE

    def test_largest_secret(self):
        keypair = keypair_from_secret(PARAMS.curve_order - 1)
        assert (keypair.public_key + BASE).is_infinity()

    @pytest.mark.parametrize("sk", [0, -1, PARAMS.curve_order])
    def test_out_of_range(self, sk):
        with pytest.raises(ValueError):
            keypair_from_secret(sk)

    def test_secret_not_in_repr(self):
        keypair = keypair_from_secret(123456789)
        assert "123456789" not in repr(keypair)


class TestGenerateKeypair:

    def test_generates_valid_pair(self):
        keypair = generate_keypair()
        assert 1 <= keypair.secret_key < PARAMS.curve_order
        assert keypair.public_key == keypair.secret_key * BASE

    def test_distinct(self):
        assert generate_keypair().secret_key != generate_keypair().secret_key

    def test_zero_is_resampled(self):
        # r itself reduces to 0; the second draw reduces to 1
        zero = PARAMS.curve_order.to_bytes(SAMPLE_SIZE, "big")
        one = (1).to_bytes(SAMPLE_SIZE, "big")
        keypair = generate_keypair(sequence_entropy(zero, one))
        assert keypair.secret_key == 1
        assert keypair.public_key == BASE

    def test_entropy_failure(self):
        with pytest.raises(EntropyUnavailable):
            generate_keypair(failing_entropy)

    def test_short_entropy(self):
        with pytest.raises(EntropyUnavailable):
            generate_keypair(sequence_entropy(b"\x01" * 8))


class TestRandomScalar:

    def test_range(self):
        for _ in range(20):
            assert 0 <= random_scalar() < PARAMS.curve_order

    def test_reduction(self):
        data = (PARAMS.curve_order + 7).to_bytes(SAMPLE_SIZE, "big")
        assert random_scalar(sequence_entropy(data)) == 7

    def test_failure_is_wrapped(self):
        with pytest.raises(EntropyUnavailable) as exc_info:
            random_scalar(failing_entropy)
        assert isinstance(exc_info.value.__cause__, OSError)


class TestEntropyContract:
    """Sources signal unavailability with OSError or NotImplementedError."""

    def test_not_implemented_is_wrapped(self):
        def no_source(n: int) -> bytes:
            raise NotImplementedError("no secure source")

        with pytest.raises(EntropyUnavailable):
            random_scalar(no_source)

    def test_other_errors_propagate(self):
        def broken(n: int) -> bytes:
            raise ZeroDivisionError

        with pytest.raises(ZeroDivisionError):
            random_scalar(broken)
