"""Tests for the HMAC-SHA-256 round function."""

import hashlib
import hmac

import pytest
from pseudo_shuffle.fe1.prf import KeyedRoundFunction
from pseudo_shuffle.fe1.utils import as_key_bytes
from pseudo_shuffle.primitives import RoundFunction

KEY = as_key_bytes("k")
TWEAK = as_key_bytes("t")

# Reference values for key "k", tweak "t", modulus 100
CONTEXT_100 = bytes.fromhex("50673842605f03c305a1a80cd071a95952cbf391b32a2e6404eac3a946134582")
ROUND_0_R7 = 63590228040703960568426506804357409516789604084356053538424071968968221215463


class TestDeriveContext:
    """Tests for KeyedRoundFunction.derive_context."""

    def test_known_value(self):
        prf = KeyedRoundFunction(KEY)
        assert prf.derive_context(100, TWEAK) == CONTEXT_100

    def test_input_layout(self):
        """Context is HMAC over len(N) || N || len(tweak) || tweak, 8-byte fields."""
        prf = KeyedRoundFunction(KEY)
        data = (
            (8).to_bytes(8, "big")
            + (100).to_bytes(8, "big")
            + len(TWEAK).to_bytes(8, "big")
            + TWEAK
        )
        expected = hmac.new(KEY, data, hashlib.sha256).digest()
        assert prf.derive_context(100, TWEAK) == expected

    def test_digest_size(self):
        prf = KeyedRoundFunction(KEY)
        assert len(prf.derive_context(1000, b"")) == KeyedRoundFunction.DIGEST_SIZE == 32

    def test_depends_on_all_inputs(self):
        prf = KeyedRoundFunction(KEY)
        base = prf.derive_context(100, TWEAK)
        assert prf.derive_context(101, TWEAK) != base
        assert prf.derive_context(100, as_key_bytes("u")) != base
        assert KeyedRoundFunction(as_key_bytes("j")).derive_context(100, TWEAK) != base

    def test_deterministic(self):
        assert KeyedRoundFunction(KEY).derive_context(100, TWEAK) == KeyedRoundFunction(
            KEY
        ).derive_context(100, TWEAK)

    def test_empty_key(self):
        prf = KeyedRoundFunction(b"")
        assert len(prf.derive_context(100, TWEAK)) == 32

    def test_satisfies_protocol(self):
        prf: RoundFunction = KeyedRoundFunction(KEY)
        context = prf.derive_context(100, TWEAK)
        assert prf.round(context, 0, 7) == ROUND_0_R7


class TestRound:
    """Tests for KeyedRoundFunction.round."""

    def test_known_value(self):
        prf = KeyedRoundFunction(KEY)
        assert prf.round(CONTEXT_100, 0, 7) == ROUND_0_R7

    def test_input_layout(self):
        """Round is HMAC over context || i || len(r) || r, read big-endian."""
        prf = KeyedRoundFunction(KEY)
        data = CONTEXT_100 + (2).to_bytes(8, "big") + (8).to_bytes(8, "big") + (41).to_bytes(8, "big")
        expected = int.from_bytes(hmac.new(KEY, data, hashlib.sha256).digest(), "big")
        assert prf.round(CONTEXT_100, 2, 41) == expected

    def test_output_range(self):
        prf = KeyedRoundFunction(KEY)
        for r in range(50):
            value = prf.round(CONTEXT_100, 0, r)
            assert 0 <= value < 2**256

    def test_round_index_separates(self):
        prf = KeyedRoundFunction(KEY)
        outputs = {prf.round(CONTEXT_100, i, 7) for i in range(10)}
        assert len(outputs) == 10

    def test_wide_r_uses_low_64_bits(self):
        prf = KeyedRoundFunction(KEY)
        assert prf.round(CONTEXT_100, 0, 2**64 + 7) == ROUND_0_R7


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
