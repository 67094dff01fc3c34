"""Multiplication of secp256k1 field elements in 10x26-bit limb form.

The product is reduced on the fly using ``2**260 = 0x1000003D10 (mod p)``,
so the result has magnitude one but is not necessarily normalized.
"""

from __future__ import annotations

from typing import Sequence

from k1arith.field import FieldElement

_M = 0x3FFFFFF
_R0 = 0x3D10
_R1 = 0x400
_LIMBS = 10


def _check_operand(limbs: Sequence[int], label: str) -> tuple[int, ...]:
    limbs = tuple(limbs)
    if len(limbs) != _LIMBS:
        raise ValueError(f"{label} must have {_LIMBS} limbs, got {len(limbs)}")
    for i, limb in enumerate(limbs):
        bound = 26 if i == _LIMBS - 1 else 30
        if not 0 <= limb < (1 << bound):
            raise ValueError(
                f"limb {i} of {label} does not fit in {bound} bits "
                "(magnitude above 8)"
            )
    return limbs


def _column(a: Sequence[int], b: Sequence[int], k: int) -> int:
    """Sum of a[i] * b[k - i] over all valid i."""
    low = max(0, k - (_LIMBS - 1))
    high = min(k, _LIMBS - 1)
    return sum(a[i] * b[k - i] for i in range(low, high + 1))


def mul_limbs(a: Sequence[int], b: Sequence[int]) -> tuple[int, ...]:
    """Multiply two ten-limb operands and return the reduced ten-limb product.

    Each of the lower nine operand limbs must fit in 30 bits and the top limb
    in 26 bits, which holds for elements of magnitude at most 8.
    """
    a = _check_operand(a, "a")
    b = _check_operand(b, "b")

    d = _column(a, b, 9)
    t9 = d & _M
    d >>= 26

    c = 0
    t = []
    for k in range(9):
        c += _column(a, b, k)
        d += _column(a, b, k + 10)
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


def field_mul(a: FieldElement, b: FieldElement) -> FieldElement:
    """Return ``a * b`` as a field element of magnitude one."""
    return FieldElement(mul_limbs(a.limbs, b.limbs))