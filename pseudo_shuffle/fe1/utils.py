"""
Byte and integer helpers for the FE1 cipher.

Includes:
- to_bytes_be / from_bytes_be: fixed-width big-endian integer codec
- encode64: the 8-byte field used in every round-function input
- concat_bytes: byte concatenation
- as_key_bytes: coerce caller key material (str or bytes-like) to bytes
- is_int: integer check that rejects bool
"""

# Fixed-length integer fields in round-function inputs are 8 bytes wide.
FIELD_SIZE = 8
FIELD_MASK = (1 << (8 * FIELD_SIZE)) - 1


def is_int(value) -> bool:
    """True for int values, False for bool, float and everything else."""
    return isinstance(value, int) and not isinstance(value, bool)


def to_bytes_be(value: int, length: int) -> bytes:
    """
    Encode an unsigned integer as big-endian bytes, zero-padded to length.

    Args:
        value: Non-negative integer
        length: Output size in bytes

    Returns:
        length bytes, most significant first

    Raises:
        ValueError: value is negative
        OverflowError: value does not fit in length bytes
    """
    if value < 0:
        raise ValueError(f"Cannot encode negative value {value}")
    return value.to_bytes(length, "big")


def from_bytes_be(data: bytes) -> int:
    """Decode big-endian bytes to an unsigned integer. Empty input is 0."""
    return int.from_bytes(data, "big")


def encode64(value: int) -> bytes:
    """
    Encode the low 64 bits of value as an 8-byte big-endian field.

    Moduli and half-values of 2^64 or more keep only their low-order bytes,
    so round-function inputs have the same layout for every modulus.
    """
    return to_bytes_be(value & FIELD_MASK, FIELD_SIZE)


def concat_bytes(*parts: bytes) -> bytes:
    """Concatenate byte strings."""
    return b"".join(parts)


def as_key_bytes(value) -> bytes:
    """
    Coerce key material to bytes.

    Strings are encoded as UTF-16LE, two bytes per code unit; lone surrogates
    are passed through. Bytes-like values are copied as-is.

    Args:
        value: str, bytes, bytearray or memoryview

    Returns:
        Key bytes
    """
    if isinstance(value, str):
        return value.encode("utf-16-le", "surrogatepass")
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"Key must be str or bytes-like, not {type(value).__name__}")
