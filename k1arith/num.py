"""Arbitrary-precision helpers for signed integers held as Python ints.

Sizes are limited to what the curve code needs: binary encodings hold at
most 64 bytes, which is enough for the product of two 256-bit values.
"""

from __future__ import annotations

_MAX_BIN_BYTES = 64


def from_bin(data: bytes) -> int:
    """Read a non-negative number from a big-endian byte string of 1 to 64 bytes."""
    data = bytes(data)
    if not 1 <= len(data) <= _MAX_BIN_BYTES:
        raise ValueError(f"expected 1 to {_MAX_BIN_BYTES} bytes, got {len(data)}")
    return int.from_bytes(data, "big")


def to_bin(value: int, length: int) -> bytes:
    """Return the absolute value of ``value`` as ``length`` big-endian bytes."""
    if length < 0:
        raise ValueError("length must not be negative")
    magnitude = abs(value)
    if magnitude.bit_length() > 8 * length:
        raise ValueError(f"{magnitude:#x} does not fit in {length} bytes")
    return magnitude.to_bytes(length, "big")


def compare(a: int, b: int) -> int:
    """Compare the absolute values of two numbers, returning -1, 0 or 1."""
    x, y = abs(a), abs(b)
    return (x > y) - (x < y)


def mod(value: int, modulus: int) -> int:
    """Remainder of ``value`` modulo ``modulus`` in ``[0, |modulus| - 1]``.

    The sign of ``modulus`` is ignored; a negative ``value`` still yields a
    non-negative remainder.
    """
    if modulus == 0:
        raise ValueError("modulus must not be zero")
    return value % abs(modulus)


def mod_inverse(value: int, modulus: int) -> int:
    """Return the inverse of ``value`` modulo ``modulus``.

    ``|value|`` must be below ``|modulus|`` and coprime to it.  The result has
    magnitude in ``[1, |modulus| - 1]`` and carries the sign
    ``sign(value) * sign(modulus)``.
    """
    m = abs(modulus)
    a = abs(value)
    if m <= 1:
        raise ValueError("modulus must have absolute value above one")
    if a >= m:
        raise ValueError("value must be smaller than the modulus")
    try:
        inverse = pow(a, -1, m)
    except ValueError as exc:
        raise ValueError(f"{value} has no inverse modulo {modulus}") from exc
    negative = (value < 0) != (modulus < 0)
    return -inverse if negative else inverse


def shift(value: int, bits: int) -> int:
    """Shift the magnitude of ``value`` right by ``bits``, keeping its sign."""
    if bits < 0:
        raise ValueError("shift amount must not be negative")
    magnitude = abs(value) >> bits
    return -magnitude if value < 0 else magnitude