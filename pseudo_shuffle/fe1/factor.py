"""
Factor splitting for the FE1 modulus.

FE1 treats Z_N as a two-dimensional grid Z_a x Z_b, so N must split into
a * b with a >= b > 1. The split is built from whole prime powers, pulling
the smallest prime factor out of N first and always folding it into the
smaller accumulator.

Splits are memoized per N in a FactorCache. A cold cache only costs a
recomputation, never correctness.
"""

import logging
import threading
from collections.abc import Iterator

from ..errors import NonFactorableModulusError
from .utils import is_int

logger = logging.getLogger(__name__)


def primes() -> Iterator[int]:
    """
    Yield the primes 2, 3, 5, 7, ... lazily.

    Incremental sieve: each known prime is filed under its next multiple that
    has not been reached yet. A candidate with no entry is prime.
    """
    composites: dict[int, list[int]] = {}
    candidate = 2
    while True:
        witnesses = composites.pop(candidate, None)
        if witnesses is None:
            composites[candidate * candidate] = [candidate]
            yield candidate
        else:
            for p in witnesses:
                composites.setdefault(candidate + p, []).append(p)
        candidate += 1


def factor(n: int) -> tuple[int, int]:
    """
    Split n into two factors a >= b > 1 with a * b == n.

    Each prime factor (with multiplicity, smallest first) is multiplied into b,
    and a and b are swapped whenever b overtakes a.

    Args:
        n: Modulus to split

    Returns:
        (a, b), a being the larger factor

    Raises:
        NonFactorableModulusError: n is not an integer, is < 2, or is prime
    """
    if not is_int(n):
        raise NonFactorableModulusError(f"Modulus must be an integer, got {n!r}")

    a, b = 1, 1
    remaining = n
    for p in primes():
        if p * p > remaining:
            break
        while remaining % p == 0:
            b *= p
            if a < b:
                a, b = b, a
            remaining //= p

    # Whatever is left has no factor up to its square root, so it is prime
    if remaining > 1:
        b *= remaining
        if a < b:
            a, b = b, a

    if a <= 1 or b <= 1:
        raise NonFactorableModulusError(
            f"Could not factor {n} for use in FPE, prime numbers cannot be used as modulus"
        )
    return a, b


class FactorCache:
    """
    Append-only memo of factor splits, keyed by modulus.

    Safe to share between threads. Lookups that miss compute outside the lock;
    two threads racing on the same modulus both compute the same pair and the
    first insert wins.
    """

    def __init__(self):
        self._pairs: dict[int, tuple[int, int]] = {}
        self._lock = threading.Lock()

    def get(self, n: int) -> tuple[int, int]:
        """Return the split of n, computing and storing it on first use."""
        if not is_int(n):
            # 100.0 would otherwise hit the entry for 100
            raise NonFactorableModulusError(f"Modulus must be an integer, got {n!r}")
        pair = self._pairs.get(n)
        if pair is not None:
            return pair

        pair = factor(n)
        logger.debug("Factored modulus %d into %d x %d", n, pair[0], pair[1])
        with self._lock:
            return self._pairs.setdefault(n, pair)

    def clear(self) -> None:
        """Drop all memoized splits."""
        with self._lock:
            self._pairs.clear()

    def __contains__(self, n: int) -> bool:
        return n in self._pairs

    def __len__(self) -> int:
        return len(self._pairs)


# Process-wide cache used when callers do not inject their own
DEFAULT_FACTOR_CACHE = FactorCache()


def cached_factor(n: int, cache: FactorCache | None = None) -> tuple[int, int]:
    """Split n through the given cache, or the process-wide one."""
    if cache is None:
        cache = DEFAULT_FACTOR_CACHE
    return cache.get(n)
