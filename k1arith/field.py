"""Elements of the secp256k1 base field, held as ten 26-bit limbs.

A value is ``sum(limbs[i] << (26 * i))`` taken modulo the field prime
``p = 2**256 - 2**32 - 977``.  Limbs may grow beyond 26 bits after additions
("magnitude" above one); :meth:`FieldElement.normalize` brings an element back
to its unique representation below ``p``.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from functools import reduce
from typing import Iterable

_LIMB_COUNT = 10
_STORAGE_WORDS = 8
_M26 = 0x3FFFFFF
_M22 = 0x03FFFFF
_U32 = 0xFFFFFFFF

# Limbs of the prime p, used when negating.
_PRIME_LIMBS = (0x3FFFC2F, 0x3FFFFBF) + (_M26,) * 7 + (_M22,)


class FieldOverflowError(ValueError):
    """Raised when a 32-byte value is not below the field prime."""


def _propagate(limbs: list[int]) -> list[int]:
    """Carry each of the lower nine limbs into the next one."""
    out = []
    carry = 0
    for limb in limbs[:-1]:
        limb += carry
        out.append(limb & _M26)
        carry = limb >> 26
    out.append(limbs[-1] + carry)
    return out


def _first_pass(limbs: Iterable[int]) -> list[int]:
    """Fold bits above 2**256 back in and carry once; magnitude becomes one."""
    t = list(limbs)
    x = t[9] >> 22
    t[9] &= _M22
    t[0] += x * 0x3D1
    t[1] += x << 6
    return _propagate(t)


def _at_least_prime(t: list[int]) -> bool:
    """True when 26-bit-carried limbs (top limb 22 bits) encode a value >= p."""
    middle = reduce(operator.and_, t[2:9])
    return (
        t[9] == _M22
        and middle == _M26
        and (t[1] + 0x40 + ((t[0] + 0x3D1) >> 26)) > _M26
    )


@dataclass(frozen=True)
class FieldElement:
    """An immutable field element in 10x26-bit limb form."""

    limbs: tuple[int, ...]

    def __post_init__(self) -> None:
        limbs = tuple(self.limbs)
        if len(limbs) != _LIMB_COUNT:
            raise ValueError(f"expected {_LIMB_COUNT} limbs, got {len(limbs)}")
        if any(not 0 <= limb <= _U32 for limb in limbs):
            raise ValueError("limbs must be unsigned 32-bit integers")
        object.__setattr__(self, "limbs", limbs)

    @classmethod
    def from_bytes(cls, data: bytes) -> FieldElement:
        """Parse a 32-byte big-endian value; raise if it is not below p."""
        if len(data) != 32:
            raise ValueError("a field element is encoded in exactly 32 bytes")
        value = int.from_bytes(data, "big")
        limbs = [(value >> (26 * i)) & _M26 for i in range(9)]
        limbs.append(value >> 234)
        if _at_least_prime(limbs):
            raise FieldOverflowError("value is not below the field prime")
        return cls(tuple(limbs))

    @classmethod
    def from_int(cls, value: int) -> FieldElement:
        """Build an element from a small non-negative integer (one limb)."""
        if not 0 <= value <= _M26:
            raise ValueError("small integer must fit in a single 26-bit limb")
        return cls((value,) + (0,) * (_LIMB_COUNT - 1))

    @classmethod
    def from_limbs(cls, limbs: Iterable[int]) -> FieldElement:
        """Build an element directly from ten raw limbs."""
        return cls(tuple(limbs))

    @classmethod
    def from_storage(cls, words: Iterable[int]) -> FieldElement:
        """Unpack eight little-endian 32-bit words into limb form."""
        words = tuple(words)
        if len(words) != _STORAGE_WORDS:
            raise ValueError(f"expected {_STORAGE_WORDS} storage words")
        if any(not 0 <= word <= _U32 for word in words):
            raise ValueError("storage words must be unsigned 32-bit integers")
        value = reduce(
            operator.or_, (word << (32 * i) for i, word in enumerate(words)), 0
        )
        limbs = [(value >> (26 * i)) & _M26 for i in range(9)]
        limbs.append(value >> 234)
        return cls(tuple(limbs))

    def _packed(self) -> int:
        return reduce(
            operator.or_,
            (limb << (26 * i) for i, limb in enumerate(self.limbs)),
            0,
        )

    def to_bytes(self) -> bytes:
        """Return the 32-byte big-endian encoding; expects a normalized element."""
        value = reduce(
            operator.or_,
            (
                (limb & (_M22 if i == 9 else _M26)) << (26 * i)
                for i, limb in enumerate(self.limbs)
            ),
            0,
        )
        return value.to_bytes(32, "big")

    def to_storage(self) -> tuple[int, ...]:
        """Pack into eight little-endian 32-bit words; expects a normalized element."""
        value = self._packed() & ((1 << 256) - 1)
        return tuple((value >> (32 * i)) & _U32 for i in range(_STORAGE_WORDS))

    def normalize(self) -> FieldElement:
        """Return the unique representation with value below p."""
        t = _first_pass(self.limbs)
        if (t[9] >> 22) or _at_least_prime(t):
            t[0] += 0x3D1
            t[1] += 1 << 6
            t = _propagate(t)
            t[9] &= _M22
        return FieldElement(tuple(t))

    def normalize_weak(self) -> FieldElement:
        """Reduce to magnitude one without necessarily going below p."""
        return FieldElement(tuple(_first_pass(self.limbs)))

    def normalizes_to_zero(self) -> bool:
        """True when the element is congruent to zero modulo p."""
        t = _first_pass(self.limbs)
        z0 = reduce(operator.or_, t)
        z1 = (
            (t[0] ^ 0x3D0)
            & (t[1] ^ 0x40)
            & reduce(operator.and_, t[2:9])
            & (t[9] ^ 0x3C00000)
        )
        return z0 == 0 or z1 == _M26

    def is_zero(self) -> bool:
        """True when every limb is zero; expects a normalized element."""
        return not any(self.limbs)

    def is_odd(self) -> bool:
        """Parity of a normalized element."""
        return bool(self.limbs[0] & 1)

    def compare(self, other: FieldElement) -> int:
        """Compare two normalized elements, returning -1, 0 or 1."""
        mine = self.limbs[::-1]
        theirs = other.limbs[::-1]
        return (mine > theirs) - (mine < theirs)

    def negate(self, magnitude: int) -> FieldElement:
        """Return the negation of an element whose magnitude is at most ``magnitude``."""
        factor = 2 * (magnitude + 1)
        return FieldElement(
            tuple(
                (base * factor - limb) & _U32
                for base, limb in zip(_PRIME_LIMBS, self.limbs)
            )
        )

    def mul_int(self, factor: int) -> FieldElement:
        """Multiply every limb by a small integer."""
        return FieldElement(tuple((limb * factor) & _U32 for limb in self.limbs))

    def add(self, other: FieldElement) -> FieldElement:
        """Add limb by limb without reduction."""
        return FieldElement(
            tuple((a + b) & _U32 for a, b in zip(self.limbs, other.limbs))
        )