"""
Range shuffling: a keyed, reversible permutation of [min_index, max_index].

The range is shifted to [0, N) and permuted with FE1. Two cases need care:

1. Tiny ranges (max - min < 3) cannot be split into a * b with a, b > 1,
   so every index passes through unchanged.

2. When max - min is even the range holds an odd number of indices, which
   may be prime. The cipher then runs on [min, max - 1] instead (an even
   size, always splittable) and the last index is spliced in by hand:

       encode(middle) = max
       encode(max)    = FE1(middle)

   so the result is still a bijection on the full range.

Indices outside the range are returned unchanged by both encode and decode.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from .errors import InvalidIndexError, InvalidRangeError
from .fe1.factor import FactorCache
from .fe1.params import DEFAULT_KEY, DEFAULT_ROUNDS, KeyMaterial, check_rounds
from .fe1.prp import FE1
from .fe1.utils import is_int

logger = logging.getLogger(__name__)

# Smallest max - min that gets shuffled (four indices, 2 x 2)
MIN_SPAN = 3


@dataclass(frozen=True)
class IndexRange:
    """Inclusive integer range [min_index, max_index]."""

    min_index: int
    max_index: int

    def __post_init__(self):
        if not is_int(self.min_index):
            raise InvalidRangeError(f"Invalid min_index: {self.min_index!r}. Must be an integer.")
        if not is_int(self.max_index):
            raise InvalidRangeError(f"Invalid max_index: {self.max_index!r}. Must be an integer.")
        if self.min_index >= self.max_index:
            raise InvalidRangeError(
                f"Invalid range: min_index ({self.min_index}) must be less than "
                f"max_index ({self.max_index})."
            )

    @property
    def span(self) -> int:
        """max_index - min_index."""
        return self.max_index - self.min_index

    @property
    def size(self) -> int:
        """Number of indices in the range."""
        return self.span + 1

    def __contains__(self, index) -> bool:
        return self.min_index <= index <= self.max_index

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.min_index, self.max_index + 1))

    def __len__(self) -> int:
        return self.size


class RangeShuffler:
    """
    Keyed permutation of one integer range.

    Binds a range, a key pair and a round count. The FE1 instance behind it
    is created on first use and reused by every later call.

    Example:
        >>> shuffler = RangeShuffler(1, 100, private_key="secret")
        >>> page = shuffler.encode(7)
        >>> shuffler.decode(page)
        7
    """

    def __init__(
        self,
        min_index: int,
        max_index: int,
        private_key=DEFAULT_KEY,
        public_key=DEFAULT_KEY,
        rounds: int = DEFAULT_ROUNDS,
        factor_cache: FactorCache | None = None,
    ):
        """
        Initialize the shuffler.

        Args:
            min_index: First index of the range
            max_index: Last index of the range (inclusive)
            private_key: Secret key (str or bytes-like)
            public_key: Public tweak (str or bytes-like)
            rounds: Number of FE1 rounds (default: 3)
            factor_cache: Memo of factor splits (default: process-wide cache)

        Raises:
            InvalidRangeError: bounds are not integers or min_index >= max_index
            InvalidRoundCountError: rounds is not a positive integer
        """
        self._domain = IndexRange(min_index, max_index)
        self._keys = KeyMaterial(private_key, public_key)
        self._rounds = check_rounds(rounds)
        self._factor_cache = factor_cache
        self._cipher: FE1 | None = None

        span = self._domain.span
        self._passthrough = span < MIN_SPAN
        self._adjusted = not self._passthrough and span % 2 == 0
        # Exact: span is even whenever middle is used
        self._middle = min_index + span // 2
        self._cipher_max = max_index - 1 if self._adjusted else max_index

        logger.debug(
            "RangeShuffler [%d, %d]: passthrough=%s adjusted=%s rounds=%d",
            min_index, max_index, self._passthrough, self._adjusted, rounds,
        )

    @property
    def domain(self) -> IndexRange:
        """The shuffled range."""
        return self._domain

    @property
    def rounds(self) -> int:
        """Number of FE1 rounds."""
        return self._rounds

    @property
    def is_passthrough(self) -> bool:
        """True when the range is too small to shuffle."""
        return self._passthrough

    @property
    def is_adjusted(self) -> bool:
        """True when max_index is spliced in by hand around a shrunk cipher domain."""
        return self._adjusted

    @property
    def cipher(self) -> FE1:
        """FE1 over [0, cipher_max - min_index], built on first access."""
        if self._cipher is None:
            self._cipher = FE1(
                self._cipher_max - self._domain.min_index + 1,
                self._keys.private_key,
                self._keys.public_key,
                self._rounds,
                self._factor_cache,
            )
        return self._cipher

    def _in_cipher_domain(self, index: int) -> bool:
        return self._domain.min_index <= index <= self._cipher_max

    def encode(self, index: int) -> int:
        """
        Shuffle an index.

        Args:
            index: Index to encode; values outside the range pass through

        Returns:
            Encoded index, in the range whenever index is
        """
        _check_index(index)
        if self._passthrough:
            return index

        if self._adjusted:
            if index == self._middle:
                return self._domain.max_index
            if index == self._domain.max_index:
                index = self._middle

        if not self._in_cipher_domain(index):
            return index

        low = self._domain.min_index
        return low + self.cipher.forward(index - low)

    def decode(self, index: int) -> int:
        """
        Reverse encode.

        Args:
            index: Encoded index; values outside the range pass through

        Returns:
            Original index
        """
        _check_index(index)
        if self._passthrough:
            return index

        if self._adjusted and index == self._domain.max_index:
            return self._middle

        if not self._in_cipher_domain(index):
            return index

        low = self._domain.min_index
        if self._adjusted and index == low + self.cipher.forward(self._middle - low):
            return self._domain.max_index

        return low + self.cipher.inverse(index - low)

    def permutation(self) -> Iterator[int]:
        """Yield encode(i) for every index of the range, in order."""
        for index in self._domain:
            yield self.encode(index)

    def __repr__(self) -> str:
        return (
            f"RangeShuffler(min_index={self._domain.min_index}, "
            f"max_index={self._domain.max_index}, rounds={self._rounds})"
        )


def _check_index(index) -> None:
    if not is_int(index):
        raise InvalidIndexError(f"Invalid index: {index!r}. Must be an integer.")


def range_encode(
    min_index: int,
    max_index: int,
    index: int,
    private_key=DEFAULT_KEY,
    public_key=DEFAULT_KEY,
    rounds: int = DEFAULT_ROUNDS,
) -> int:
    """
    Shuffle index within [min_index, max_index].

    Args:
        min_index: First index of the range
        max_index: Last index of the range (inclusive)
        index: Index to encode; values outside the range pass through
        private_key: Secret key (str or bytes-like)
        public_key: Public tweak (str or bytes-like)
        rounds: Number of FE1 rounds (default: 3)

    Returns:
        Encoded index
    """
    return RangeShuffler(min_index, max_index, private_key, public_key, rounds).encode(index)


def range_decode(
    min_index: int,
    max_index: int,
    index: int,
    private_key=DEFAULT_KEY,
    public_key=DEFAULT_KEY,
    rounds: int = DEFAULT_ROUNDS,
) -> int:
    """
    Reverse range_encode for the same range, keys and rounds.

    Args:
        min_index: First index of the range
        max_index: Last index of the range (inclusive)
        index: Encoded index; values outside the range pass through
        private_key: Secret key (str or bytes-like)
        public_key: Public tweak (str or bytes-like)
        rounds: Number of FE1 rounds (default: 3)

    Returns:
        Original index
    """
    return RangeShuffler(min_index, max_index, private_key, public_key, rounds).decode(index)
