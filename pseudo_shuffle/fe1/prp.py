"""
FE1 format-preserving encryption over Z_N.

Based on the FE1 scheme of Bellare, Ristenpart, Rogaway and Stegers
("Format-Preserving Encryption", SAC 2009), a generalization of the Black-Rogaway
Feistel construction to an arbitrary composite modulus.

A balanced Feistel network needs a domain that splits into two equal halves.
FE1 instead writes N = a * b and treats x in Z_N as the pair
(x // b, x % b). Each round moves the right half into the high position and
mixes a keyed PRF of it into the low position:

    right = x mod b
    x     = a * right + ((F(i, right) + x // b) mod a)

Since a * right + (something mod a) < a * b, every intermediate value stays
in [0, N) and every round is invertible, so the whole network is a
permutation of Z_N regardless of the round function.
"""

import logging

from ..errors import OutOfDomainError
from ..primitives.prf import RoundFunction
from .factor import FactorCache, cached_factor
from .params import DEFAULT_ROUNDS, KeyMaterial, check_rounds
from .prf import KeyedRoundFunction
from .utils import is_int

logger = logging.getLogger(__name__)


class FE1:
    """
    Keyed pseudorandom permutation of [0, N) using the FE1 construction.

    procedure Encrypt(x):            // x in [0, N)
        (a, b) = factor(N)           // a >= b > 1
        T = HMAC(K, N || tweak)      // round context
        for i = 0 to r-1:
            R = x mod b
            W = F(T, i, R) mod a
            x = a * R + ((W + x div b) mod a)
        return x

    procedure Decrypt(y):
        for i = r-1 down to 0:
            R = y div a
            W = F(T, i, R) mod a
            L = (y mod a - W) mod a
            y = b * L + R
        return y

    Factoring and the context HMAC happen once, in the constructor. An
    instance is immutable afterwards and may be shared between threads.
    """

    def __init__(
        self,
        modulus: int,
        private_key,
        public_key,
        rounds: int = DEFAULT_ROUNDS,
        factor_cache: FactorCache | None = None,
    ):
        """
        Initialize FE1.

        Args:
            modulus: Domain size N; must split into a * b with a >= b > 1
            private_key: Secret key (str or bytes-like)
            public_key: Tweak (str or bytes-like)
            rounds: Number of Feistel rounds (default: 3)
            factor_cache: Memo of factor splits (default: process-wide cache)

        Raises:
            InvalidRoundCountError: rounds is not a positive integer
            NonFactorableModulusError: modulus cannot be split
        """
        self._rounds = check_rounds(rounds)
        self._modulus = modulus
        self._a, self._b = cached_factor(modulus, factor_cache)

        keys = KeyMaterial(private_key, public_key)
        self._prf: RoundFunction = KeyedRoundFunction(keys.private_key)
        # Shared by every round of every call on this instance
        self._context = self._prf.derive_context(modulus, keys.public_key)

        logger.debug(
            "FE1 ready: modulus=%d factors=(%d, %d) rounds=%d",
            modulus, self._a, self._b, rounds,
        )

    @property
    def domain_size(self) -> int:
        """Size of the domain [0, N)."""
        return self._modulus

    @property
    def factors(self) -> tuple[int, int]:
        """The split (a, b) of the modulus, a >= b."""
        return self._a, self._b

    @property
    def rounds(self) -> int:
        """Number of Feistel rounds."""
        return self._rounds

    def _check_domain(self, x) -> None:
        if not is_int(x) or x < 0 or x >= self._modulus:
            raise OutOfDomainError(f"Input {x!r} out of range [0, {self._modulus})")

    def forward(self, x: int) -> int:
        """
        Encrypt x.

        Args:
            x: Input in [0, N)

        Returns:
            Output in [0, N)
        """
        self._check_domain(x)
        a, b = self._a, self._b

        for i in range(self._rounds):
            right = x % b
            f = self._prf.round(self._context, i, right) % a
            x = a * right + (f + x // b) % a

        return x

    def inverse(self, y: int) -> int:
        """
        Decrypt y. Undoes forward round by round, last round first.

        Args:
            y: Input in [0, N)

        Returns:
            Output in [0, N) such that forward(output) = y
        """
        self._check_domain(y)
        a, b = self._a, self._b
        x = y

        for i in range(self._rounds - 1, -1, -1):
            right = x // a
            f = self._prf.round(self._context, i, right) % a
            diff = (f - x % a) % a
            left = a - diff if diff > 0 else 0
            x = b * left + right

        return x

    def __repr__(self) -> str:
        return f"FE1(modulus={self._modulus}, factors=({self._a}, {self._b}), rounds={self._rounds})"


def encrypt(
    modulus: int,
    x: int,
    key,
    tweak,
    rounds: int = DEFAULT_ROUNDS,
    factor_cache: FactorCache | None = None,
) -> int:
    """Generic Z_N FPE encryption, FE1 scheme."""
    return FE1(modulus, key, tweak, rounds, factor_cache).forward(x)


def decrypt(
    modulus: int,
    y: int,
    key,
    tweak,
    rounds: int = DEFAULT_ROUNDS,
    factor_cache: FactorCache | None = None,
) -> int:
    """Generic Z_N FPE decryption, FE1 scheme."""
    return FE1(modulus, key, tweak, rounds, factor_cache).inverse(y)
