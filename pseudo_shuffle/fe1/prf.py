"""
Keyed round function for FE1, built on HMAC-SHA-256.

Two HMAC calls are used:
- Context: HMAC(key, len(N) || N || len(tweak) || tweak), once per cipher
- Round:   HMAC(key, context || i || len(r) || r), once per Feistel round

Every length and integer field is an 8-byte big-endian value (see encode64),
so inputs are unambiguous and a given (key, tweak, N) always produces the
same permutation.
"""

from Crypto.Hash import HMAC, SHA256

from .utils import concat_bytes, encode64, from_bytes_be


class KeyedRoundFunction:
    """
    HMAC-SHA-256 pseudorandom function for Feistel rounds.

    SEC: Only the key is secret. The tweak is mixed into the context so the
    same key yields unrelated permutations for different tweaks and moduli.
    """

    DIGEST_SIZE = SHA256.digest_size

    def __init__(self, key: bytes):
        """
        Initialize the round function.

        Args:
            key: HMAC key (already coerced to bytes)
        """
        self._key = key

    def _mac(self, data: bytes) -> bytes:
        return HMAC.new(self._key, msg=data, digestmod=SHA256).digest()

    def derive_context(self, modulus: int, tweak: bytes) -> bytes:
        """
        Derive the round context (macNT) for one modulus and tweak.

        Args:
            modulus: Cipher modulus N
            tweak: Public tweak bytes

        Returns:
            32-byte context, reused by every round of a cipher instance
        """
        n_bin = encode64(modulus)
        data = concat_bytes(
            encode64(len(n_bin)),
            n_bin,
            encode64(len(tweak)),
            tweak,
        )
        return self._mac(data)

    def round(self, context: bytes, round_index: int, r: int) -> int:
        """
        Evaluate round round_index on half-value r.

        Args:
            context: Output of derive_context
            round_index: Feistel round number, starting at 0
            r: Current right half

        Returns:
            Digest as a big-endian integer in [0, 2^256)
        """
        r_bin = encode64(r)
        data = concat_bytes(
            context,
            encode64(round_index),
            encode64(len(r_bin)),
            r_bin,
        )
        return from_bytes_be(self._mac(data))
