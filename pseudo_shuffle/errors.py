"""
Errors raised by pseudo-shuffle.

Every error derives from PseudoShuffleError, which is a ValueError, so
callers that only catch ValueError keep working. All of them signal a
caller mistake: inputs are deterministic, so nothing is ever retried.
"""


class PseudoShuffleError(ValueError):
    """Base class for all pseudo-shuffle errors."""


class InvalidRangeError(PseudoShuffleError):
    """Range bounds are not integers, or min_index >= max_index."""


class InvalidIndexError(PseudoShuffleError):
    """Index to encode or decode is not an integer."""


class InvalidRoundCountError(PseudoShuffleError):
    """Number of Feistel rounds is not a positive integer."""


class NonFactorableModulusError(PseudoShuffleError):
    """Modulus has no split into two factors a >= b > 1 (e.g. it is prime)."""


class OutOfDomainError(PseudoShuffleError):
    """Cipher input lies outside [0, N)."""
