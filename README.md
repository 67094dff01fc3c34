# k1arith

Pure-Python arithmetic for the base field of the secp256k1 elliptic curve,
kept in the ten 26-bit limb form that fast implementations use. It is meant
for studying, testing and cross-checking that representation, not for
protecting real secrets: nothing here is constant time.

## What is inside

- `k1arith.field`: `FieldElement`, an immutable element of the field
  `p = 2**256 - 2**32 - 977` held as ten limbs. It offers `from_bytes`,
  `from_int`, `from_limbs`, `from_storage`, `to_bytes`, `to_storage`,
  `normalize`, `normalize_weak`, `normalizes_to_zero`, `is_zero`, `is_odd`,
  `compare`, `negate`, `mul_int` and `add`. Every operation returns a new
  element. `from_bytes` raises `FieldOverflowError` (a `ValueError`) for a
  32-byte value that is not below `p`.
- `k1arith.fieldmul`: `mul_limbs` and `field_mul`, multiplication with the
  reduction folded into the column sums. The result has magnitude one but is
  not necessarily normalized. Operands whose limbs are too wide (magnitude
  above 8) raise `ValueError`.
- `k1arith.fieldsqr`: `sqr_limbs` and `field_sqr`, the same for squaring.
- `k1arith.num`: helpers on plain Python integers: `from_bin`, `to_bin`,
  `compare` (of absolute values), `mod`, `mod_inverse` and `shift`.
- `k1arith.testrand`: `TestRandom`, which turns a byte generator into 32-bit
  words (`rand32`), fixed-width integers (`rand_bits`), uniform integers in a
  range (`rand_int`), 32-byte strings (`rand256`) and byte strings made of
  long runs of zero and one bits (`rand_bytes_test`, `rand256_test`).
- `k1arith.bench`: `run_benchmark`, which times a callable several times,
  prints a summary line and returns a `BenchResult` with minimum, average and
  maximum microseconds per iteration; `format_number` formats those values.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
import os

from k1arith.field import FieldElement
from k1arith.fieldmul import field_mul
from k1arith.fieldsqr import field_sqr
from k1arith.num import mod_inverse
from k1arith.testrand import TestRandom
from k1arith.bench import run_benchmark

x = FieldElement.from_int(7)
y = FieldElement.from_int(6)
assert field_mul(x, y).normalize().to_bytes()[-1] == 42
assert field_sqr(x).normalize().to_bytes()[-1] == 49

# -x + x is congruent to zero
assert x.negate(1).add(x).normalizes_to_zero()

assert mod_inverse(3, 7) == 5

rng = TestRandom(os.urandom)
value = rng.rand_int(1000)
assert 0 <= value < 1000

result = run_benchmark("field_mul", lambda _: field_mul(x, y), None, None, None, 5, 1)
print(result.avg_us)
```

## What it does not do

The package covers the base field, integer helpers, test randomness and
timing only. It has no arithmetic modulo the group order, no curve point
operations, no key generation, signing or verification, no signature
encoding, and no command-line tool.