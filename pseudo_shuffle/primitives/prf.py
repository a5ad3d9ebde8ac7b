"""
Round function protocol for Feistel-style PRPs.

A round function is a keyed PRF evaluated once per Feistel round. It first
derives a per-domain context from the modulus and a public tweak, then maps
(context, round index, half-value) to a large pseudorandom integer that the
cipher reduces modulo one of its factors.
"""

from typing import Protocol


class RoundFunction(Protocol):
    """
    Keyed pseudorandom round function.

    Properties:
    - Deterministic: same key, context and inputs give the same output
    - Pseudorandom: without the key, outputs look uniformly random
    - Domain-separated: different (modulus, tweak) pairs give unrelated contexts
    """

    def derive_context(self, modulus: int, tweak: bytes) -> bytes:
        """
        Derive the context shared by all rounds of one cipher instance.

        Args:
            modulus: Size of the permuted domain
            tweak: Public tweak bytes

        Returns:
            Opaque context bytes
        """
        ...

    def round(self, context: bytes, round_index: int, r: int) -> int:
        """
        Evaluate one round.

        Args:
            context: Output of derive_context
            round_index: Round number, starting at 0
            r: Half-value being mixed

        Returns:
            Non-negative pseudorandom integer
        """
        ...
