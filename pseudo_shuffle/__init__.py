"""
pseudo-shuffle: keyed, reversible shuffling of integer ranges.

Maps every index of [min_index, max_index] to another index of the same
range, using FE1 format-preserving encryption. Intended for hiding
sequential identifiers (page numbers, row IDs, auto-increment keys)
without changing their representation.

Modules:
- primitives: Protocol interfaces (PRP, RoundFunction)
- fe1: FE1 cipher over Z_N (factor splitting, HMAC round function)
- shuffle: RangeShuffler, range_encode, range_decode
- config: ShuffleConfig for deployment settings
- errors: Error taxonomy
"""

from . import primitives
from . import fe1
from .config import ShuffleConfig
from .errors import (
    InvalidIndexError,
    InvalidRangeError,
    InvalidRoundCountError,
    NonFactorableModulusError,
    OutOfDomainError,
    PseudoShuffleError,
)
from .fe1 import DEFAULT_KEY, DEFAULT_ROUNDS, FE1, FactorCache
from .shuffle import IndexRange, RangeShuffler, range_decode, range_encode

__version__ = "0.1.0"
__all__ = [
    "primitives",
    "fe1",
    "range_encode",
    "range_decode",
    "RangeShuffler",
    "IndexRange",
    "ShuffleConfig",
    "FE1",
    "FactorCache",
    "DEFAULT_KEY",
    "DEFAULT_ROUNDS",
    "PseudoShuffleError",
    "InvalidRangeError",
    "InvalidIndexError",
    "InvalidRoundCountError",
    "NonFactorableModulusError",
    "OutOfDomainError",
]
