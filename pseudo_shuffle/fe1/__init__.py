"""
FE1 format-preserving encryption over an arbitrary composite modulus.

The key components:
- factor: balanced split N = a * b with a >= b > 1, memoized per N
- KeyedRoundFunction: HMAC-SHA-256 round function
- FE1: the Feistel permutation of [0, N), with encrypt/decrypt shortcuts
"""

from .factor import FactorCache, cached_factor, factor, primes
from .params import DEFAULT_KEY, DEFAULT_ROUNDS, KeyMaterial
from .prf import KeyedRoundFunction
from .prp import FE1, decrypt, encrypt

__all__ = [
    "FE1",
    "FactorCache",
    "KeyMaterial",
    "KeyedRoundFunction",
    "DEFAULT_KEY",
    "DEFAULT_ROUNDS",
    "cached_factor",
    "decrypt",
    "encrypt",
    "factor",
    "primes",
]
