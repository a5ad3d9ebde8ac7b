"""
Deployment configuration for a range shuffler.

Encode and decode call sites must agree on the range, both keys and the
round count. ShuffleConfig keeps them together and can be loaded from the
environment:

    PSEUDO_SHUFFLE_MIN_INDEX    first index (required)
    PSEUDO_SHUFFLE_MAX_INDEX    last index, inclusive (required)
    PSEUDO_SHUFFLE_PRIVATE_KEY  secret key (default: DEFAULT_KEY)
    PSEUDO_SHUFFLE_PUBLIC_KEY   public tweak (default: DEFAULT_KEY)
    PSEUDO_SHUFFLE_ROUNDS       FE1 rounds (default: 3)
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from .errors import InvalidRangeError, InvalidRoundCountError
from .fe1.factor import FactorCache
from .fe1.params import DEFAULT_KEY, DEFAULT_ROUNDS, check_rounds
from .shuffle import IndexRange, RangeShuffler

ENV_PREFIX = "PSEUDO_SHUFFLE_"


@dataclass
class ShuffleConfig:
    """Range, keys and rounds shared by encode and decode sites."""

    min_index: int
    max_index: int
    private_key: str | bytes = DEFAULT_KEY
    public_key: str | bytes = DEFAULT_KEY
    rounds: int = DEFAULT_ROUNDS

    def __post_init__(self):
        # Same checks the shuffler applies, surfaced at load time
        IndexRange(self.min_index, self.max_index)
        check_rounds(self.rounds)

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX, environ: Mapping[str, str] | None = None) -> "ShuffleConfig":
        """
        Load configuration from environment variables.

        Args:
            prefix: Variable name prefix (default: PSEUDO_SHUFFLE_)
            environ: Mapping to read instead of os.environ

        Returns:
            Validated ShuffleConfig

        Raises:
            InvalidRangeError: a bound is missing or not an integer
            InvalidRoundCountError: rounds is not a positive integer
        """
        if environ is None:
            environ = os.environ

        bounds = []
        for name in ("MIN_INDEX", "MAX_INDEX"):
            raw = environ.get(prefix + name)
            if raw is None:
                raise InvalidRangeError(f"{prefix}{name} must be set")
            bounds.append(_parse_int(raw, prefix + name, InvalidRangeError))

        raw_rounds = environ.get(prefix + "ROUNDS")
        rounds = DEFAULT_ROUNDS
        if raw_rounds is not None:
            rounds = _parse_int(raw_rounds, prefix + "ROUNDS", InvalidRoundCountError)

        return cls(
            min_index=bounds[0],
            max_index=bounds[1],
            private_key=environ.get(prefix + "PRIVATE_KEY", DEFAULT_KEY),
            public_key=environ.get(prefix + "PUBLIC_KEY", DEFAULT_KEY),
            rounds=rounds,
        )

    def shuffler(self, factor_cache: FactorCache | None = None) -> RangeShuffler:
        """Build the RangeShuffler described by this configuration."""
        return RangeShuffler(
            self.min_index,
            self.max_index,
            self.private_key,
            self.public_key,
            self.rounds,
            factor_cache,
        )

    def __repr__(self) -> str:
        # Keys stay out of logs and tracebacks
        return (
            f"ShuffleConfig(min_index={self.min_index}, max_index={self.max_index}, "
            f"rounds={self.rounds})"
        )


def _parse_int(raw: str, name: str, error: type[ValueError]) -> int:
    try:
        return int(raw.strip())
    except ValueError:
        raise error(f"{name} must be an integer, got {raw!r}") from None
