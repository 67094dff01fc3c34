"""A non-cryptographic random source for test infrastructure.

Bytes come from an injected generator (for example a deterministic
HMAC-based stream); this class turns them into 32-bit words, integers of a
given bit width, uniform integers in a range, and byte strings with long runs
of equal bits that are useful for exercising edge cases.
"""

from __future__ import annotations

import struct
from typing import Callable

_WORDS_PER_BLOCK = 8
_BLOCK_BYTES = 4 * _WORDS_PER_BLOCK
_U32 = 0xFFFFFFFF

# Indexed by the bit width B of range - 1: extra bits to draw so that the
# rejection threshold sits close to a power of two.
_ADD_BITS = (
    0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 2, 2, 2, 2, 2, 2, 2,
    2, 2, 3, 3, 3, 3, 3, 3, 3, 3, 3, 3, 3, 2, 1, 0,
)


def _mask(bits: int) -> int:
    return _U32 >> (32 - bits)


class TestRandom:
    """Pseudorandom helpers drawing raw bytes from ``generate(length)``."""

    __test__ = False  # not a pytest test class

    def __init__(self, generate: Callable[[int], bytes]) -> None:
        self._generate = generate
        self._words: list[int] = []
        self._integer = 0
        self._bits_left = 0

    def _draw(self, length: int) -> bytes:
        data = bytes(self._generate(length))
        if len(data) != length:
            raise ValueError(
                f"generator returned {len(data)} bytes, expected {length}"
            )
        return data

    def rand32(self) -> int:
        """Return a pseudorandom integer in ``[0, 2**32 - 1]``."""
        if not self._words:
            block = self._draw(_BLOCK_BYTES)
            self._words = list(struct.unpack(f"<{_WORDS_PER_BLOCK}I", block))
            self._words.reverse()
        return self._words.pop()

    def rand_bits(self, bits: int) -> int:
        """Return a pseudorandom integer in ``[0, 2**bits - 1]``, 1 <= bits <= 32."""
        if not 1 <= bits <= 32:
            raise ValueError("bits must be between 1 and 32")
        if self._bits_left < bits:
            self._integer |= self.rand32() << self._bits_left
            self._bits_left += 32
        result = self._integer & _mask(bits)
        self._integer >>= bits
        self._bits_left -= bits
        return result

    def rand_int(self, upper: int) -> int:
        """Return a uniform integer in ``[0, upper - 1]`` (0 when upper <= 1)."""
        if not 0 <= upper <= _U32:
            raise ValueError("upper must be an unsigned 32-bit integer")
        if upper <= 1:
            return 0
        bits = (upper - 1).bit_length()
        extra = _ADD_BITS[bits]
        if extra:
            bits += extra
            mult = _mask(bits) // upper
            threshold = upper * mult
        else:
            mult = 1
            threshold = upper
        while True:
            x = self.rand_bits(bits)
            if x < threshold:
                return x if mult == 1 else x % upper

    def rand256(self) -> bytes:
        """Return 32 pseudorandom bytes straight from the generator."""
        return self._draw(32)

    def rand_bytes_test(self, length: int) -> bytes:
        """Return ``length`` bytes made of long runs of zero and one bits."""
        if length < 0:
            raise ValueError("length must not be negative")
        out = bytearray(length)
        total = length * 8
        position = 0
        while position < total:
            high = self.rand_bits(6)
            low = self.rand_bits(5)
            run = 1 + (high * low + 16) // 31
            bit = self.rand_bits(1)
            end = min(position + run, total)
            if bit:
                for index in range(position, end):
                    out[index // 8] |= 1 << (index % 8)
            position = end
        return bytes(out)

    def rand256_test(self) -> bytes:
        """Return 32 bytes made of long runs of zero and one bits."""
        return self.rand_bytes_test(32)