"""
Cryptographic primitive interfaces for pseudo-shuffle.

This module defines protocol interfaces for:
- PRP: Pseudorandom Permutation
- RoundFunction: Keyed PRF driving each Feistel round

Concrete implementations are in pseudo_shuffle/fe1/.
"""

from .prp import PRP
from .prf import RoundFunction

__all__ = [
    "PRP",
    "RoundFunction",
]
