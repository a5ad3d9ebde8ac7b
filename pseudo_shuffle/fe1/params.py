"""
Parameters shared by the FE1 cipher and the range shuffler.

- DEFAULT_KEY: private and public key used when the caller supplies none
- DEFAULT_ROUNDS: Feistel rounds per encryption (3 is enough for obfuscation)
- KeyMaterial: secret key plus non-secret tweak, both as bytes
"""

from dataclasses import dataclass

from ..errors import InvalidRoundCountError
from .utils import as_key_bytes, is_int

# Spelling kept as-is: values encoded with the default keys must stay decodable.
DEFAULT_KEY = "psuedo-shuffle"
DEFAULT_ROUNDS = 3


@dataclass(frozen=True)
class KeyMaterial:
    """Secret key and tweak for one cipher instance."""

    private_key: bytes  # HMAC key, secret
    public_key: bytes  # Tweak, mixed into the round context

    def __post_init__(self):
        # Normalize so callers may pass str or any bytes-like value
        object.__setattr__(self, "private_key", as_key_bytes(self.private_key))
        object.__setattr__(self, "public_key", as_key_bytes(self.public_key))

    def __repr__(self) -> str:
        return f"KeyMaterial(private_key=<{len(self.private_key)} bytes>, public_key={self.public_key!r})"


def check_rounds(rounds) -> int:
    """
    Validate a Feistel round count.

    Args:
        rounds: Number of rounds requested

    Returns:
        rounds, unchanged

    Raises:
        InvalidRoundCountError: rounds is not an int or is less than 1
    """
    if not is_int(rounds) or rounds < 1:
        raise InvalidRoundCountError(f"rounds must be a positive integer, got {rounds!r}")
    return rounds
