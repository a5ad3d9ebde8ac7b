"""Tests for the FE1 pseudorandom permutation."""

import pytest
from pseudo_shuffle.errors import (
    InvalidRoundCountError,
    NonFactorableModulusError,
    OutOfDomainError,
)
from pseudo_shuffle.fe1.factor import FactorCache
from pseudo_shuffle.fe1.prp import FE1, decrypt, encrypt
from pseudo_shuffle.primitives import PRP


class TestFE1:
    """Tests for FE1."""

    def test_basic_permutation(self):
        """Test that forward is a permutation."""
        prp = FE1(10, "k", "t")

        outputs = set()
        for x in range(10):
            y = prp.forward(x)
            assert 0 <= y < 10, f"Output {y} out of range"
            outputs.add(y)

        # Should be a bijection
        assert outputs == set(range(10))

    def test_inverse_correctness(self):
        """Test that inverse correctly inverts forward."""
        prp = FE1(20, "k", "t")

        for x in range(20):
            y = prp.forward(x)
            x_recovered = prp.inverse(y)
            assert x_recovered == x, f"Inverse failed: {x} -> {y} -> {x_recovered}"

    def test_smallest_domain(self):
        """N = 4 is the smallest splittable domain."""
        prp = FE1(4, "k", "t")
        assert prp.factors == (2, 2)
        assert {prp.forward(x) for x in range(4)} == {0, 1, 2, 3}
        for x in range(4):
            assert prp.inverse(prp.forward(x)) == x

    def test_unbalanced_factors(self):
        """Domains with very unequal factors still permute."""
        for n in [6, 12, 22, 202, 2 * 97]:
            prp = FE1(n, "k", "t")
            a, b = prp.factors
            assert a * b == n

            outputs = [prp.forward(x) for x in range(n)]
            assert sorted(outputs) == list(range(n))
            for x, y in enumerate(outputs):
                assert prp.inverse(y) == x

    def test_larger_domain(self):
        """Test with larger domain size."""
        prp = FE1(10_000, "k", "t")

        # Spot check some values
        for x in [0, 100, 5000, 9999]:
            y = prp.forward(x)
            assert 0 <= y < 10_000
            assert prp.inverse(y) == x

    def test_huge_domain(self):
        """Moduli beyond 64 bits work with arbitrary-precision ints."""
        n = 2**70
        prp = FE1(n, "k", "t")
        for x in [0, 1, 12345, 2**69 + 7, n - 1]:
            y = prp.forward(x)
            assert 0 <= y < n
            assert prp.inverse(y) == x

    def test_pseudorandom_distribution(self):
        """Output should look pseudorandom."""
        n = 100
        prp = FE1(n, "k", "t")

        # Expected ~1 fixed point on average for random permutation
        fixed_points = sum(1 for x in range(n) if prp.forward(x) == x)
        assert fixed_points < 15, f"Too many fixed points: {fixed_points}"

    def test_rounds(self):
        """Any positive round count gives a permutation."""
        for rounds in [1, 2, 3, 5, 8]:
            prp = FE1(36, "k", "t", rounds=rounds)
            assert prp.rounds == rounds
            outputs = [prp.forward(x) for x in range(36)]
            assert sorted(outputs) == list(range(36))
            assert [prp.inverse(y) for y in outputs] == list(range(36))

    def test_key_and_tweak_sensitivity(self):
        n = 1000
        base = FE1(n, "k", "t")
        other_key = FE1(n, "k2", "t")
        other_tweak = FE1(n, "k", "t2")

        diff_key = sum(1 for x in range(n) if base.forward(x) != other_key.forward(x))
        diff_tweak = sum(1 for x in range(n) if base.forward(x) != other_tweak.forward(x))
        assert diff_key > n * 0.9
        assert diff_tweak > n * 0.9

    def test_bytes_and_str_keys(self):
        """A str key is its UTF-16LE bytes."""
        assert FE1(100, "k", "t").forward(42) == FE1(100, b"k\x00", b"t\x00").forward(42)

    def test_deterministic(self):
        assert FE1(500, "k", "t").forward(123) == FE1(500, "k", "t").forward(123)

    def test_satisfies_protocol(self):
        prp: PRP = FE1(100, "k", "t")
        assert prp.domain_size == 100

    def test_injected_cache(self):
        cache = FactorCache()
        FE1(360, "k", "t", factor_cache=cache)
        assert 360 in cache


class TestKnownAnswers:
    """Values produced by the reference implementation."""

    def test_small_modulus(self):
        assert encrypt(100, 42, "k", "t") == 18
        assert decrypt(100, 18, "k", "t") == 42

    def test_five_rounds(self):
        assert encrypt(100, 42, "k", "t", rounds=5) == 32
        assert decrypt(100, 32, "k", "t", rounds=5) == 42

    def test_byte_keys(self):
        key = bytes([1, 2, 3, 255])
        tweak = bytes([9, 9])
        assert encrypt(1000, 999, key, tweak) == 217
        assert decrypt(1000, 217, key, tweak) == 999

    def test_wide_modulus(self):
        """Fixed 8-byte fields keep the low 64 bits of wide values."""
        n = 2**70
        assert encrypt(n, 12345, "k", "t") == 416219438765437123482
        assert encrypt(n, 2**69 + 7, "k", "t") == 1129800531676620322369
        assert decrypt(n, 416219438765437123482, "k", "t") == 12345


class TestFE1Errors:
    """Test error handling."""

    @pytest.mark.parametrize("n", [2, 3, 7, 13, 101, 7919])
    def test_prime_modulus(self, n):
        with pytest.raises(NonFactorableModulusError):
            FE1(n, "k", "t")

    @pytest.mark.parametrize("n", [0, 1, -10])
    def test_tiny_modulus(self, n):
        with pytest.raises(NonFactorableModulusError):
            FE1(n, "k", "t")

    @pytest.mark.parametrize("rounds", [0, -1, 1.5, 3.0, "3", None, True])
    def test_invalid_rounds(self, rounds):
        with pytest.raises(InvalidRoundCountError):
            FE1(100, "k", "t", rounds=rounds)

    def test_rounds_checked_before_factoring(self):
        with pytest.raises(InvalidRoundCountError):
            FE1(13, "k", "t", rounds=0)

    @pytest.mark.parametrize("x", [-1, 100, 1000, 2.0, "5", None])
    def test_out_of_domain(self, x):
        prp = FE1(100, "k", "t")
        with pytest.raises(OutOfDomainError):
            prp.forward(x)
        with pytest.raises(OutOfDomainError):
            prp.inverse(x)

    def test_module_functions_raise(self):
        with pytest.raises(OutOfDomainError):
            encrypt(100, 100, "k", "t")
        with pytest.raises(NonFactorableModulusError):
            decrypt(97, 5, "k", "t")

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            FE1(100, "k", "t").forward(-1)

    def test_invalid_key_type(self):
        with pytest.raises(TypeError):
            FE1(100, 12, "t")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
