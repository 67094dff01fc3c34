"""Squaring of secp256k1 field elements in 10x26-bit limb form.

Squaring exploits the symmetry of the schoolbook product: every cross term
``a[i] * a[j]`` with ``i != j`` appears twice and is computed once, doubled.
The reduction matches multiplication, so the result has magnitude one but is
not necessarily normalized.
"""

from __future__ import annotations

from typing import Sequence

from k1arith.field import FieldElement

_M = 0x3FFFFFF
_R0 = 0x3D10
_R1 = 0x400
_LIMBS = 10


def _check_operand(limbs: Sequence[int]) -> tuple[int, ...]:
    limbs = tuple(limbs)
    if len(limbs) != _LIMBS:
        raise ValueError(f"operand must have {_LIMBS} limbs, got {len(limbs)}")
    for i, limb in enumerate(limbs):
        bound = 26 if i == _LIMBS - 1 else 30
        if not 0 <= limb < (1 << bound):
            raise ValueError(
                f"limb {i} does not fit in {bound} bits (magnitude above 8)"
            )
    return limbs


def _square_column(a: Sequence[int], k: int) -> int:
    """Sum of a[i] * a[k - i] over all valid i, using doubled cross terms."""
    low = max(0, k - (_LIMBS - 1))
    high = min(k, _LIMBS - 1)
    total = 0
    i, j = low, high
    while i < j:
        total += (a[i] * 2) * a[j]
        i += 1
        j -= 1
    if i == j:
        total += a[i] * a[i]
    return total


def sqr_limbs(a: Sequence[int]) -> tuple[int, ...]:
    """Square a ten-limb operand and return the reduced ten-limb result.

    Each of the lower nine limbs must fit in 30 bits and the top limb in
    26 bits, which holds for elements of magnitude at most 8.
    """
    a = _check_operand(a)

    d = _square_column(a, 9)
    t9 = d & _M
    d >>= 26

    c = 0
    t = []
    for k in range(9):
        c += _square_column(a, k)
        d += _square_column(a, k + 10)
        u = d & _M
        d >>= 26
        c += u * _R0
        t.append(c & _M)
        c >>= 26
        c += u * _R1

    c += d * _R0 + t9
    r9 = c & (_M >> 4)
    c >>= 22
    c += d * (_R1 << 4)

    d = c * (_R0 >> 4) + t[0]
    r0 = d & _M
    d >>= 26
    d += c * (_R1 >> 4) + t[1]
    r1 = d & _M
    d >>= 26
    r2 = d + t[2]

    return (r0, r1, r2, *t[3:9], r9)


def field_sqr(a: FieldElement) -> FieldElement:
    """Return ``a * a`` as a field element of magnitude one."""
    return FieldElement(sqr_limbs(a.limbs))