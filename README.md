# decimal96

A decimal number held as a 96-bit unsigned mantissa, a sign bit and a scale
(a power-of-ten divisor). The value is `(-1)**sign * mantissa / 10**scale`.
Well-formed values have a scale from 0 to 28, so the magnitude runs up to
79228162514264337593543950335 and the smallest step is 1e-28.

The package is a library only and uses nothing outside the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Values

`decimal96.core.Decimal96` is a frozen dataclass of four unsigned 32-bit
words: `lo`, `mid` and `hi` hold the mantissa, and `flags` holds the scale in
bits 16–23 and the sign in bit 31. A word outside 0..0xFFFFFFFF raises
`ValueError`.

```python
from decimal96.core import Decimal96
from decimal96.converters import from_int, from_float, to_int, to_float

a = Decimal96.from_bits(1234, 0, 0, 0x00030000)   # 1.234
b = from_int(-42)
c = from_float(123.4567)

a.sign, a.scale, a.mantissa                        # (0, 3, 1234)
a.with_sign(1)                                     # -1.234, as a new value
a.with_scale(2)                                    # 12.34
a.abs()
a.is_zero(), a.is_valid()                          # (False, True)
a.bit(0), a.with_bit(0, 1)

to_int(from_float(123.999))                        # 124
to_float(c)
```

`is_valid()` checks the flags word: the low 16 bits and bits 24–30 must be
clear and the scale must not exceed 28.

The `==` operator compares the four raw words, so `1.23` held as
`(123, scale 2)` and `(1230, scale 3)` are not `==`; use
`decimal96.comparison.is_equal` to compare numeric values.

## Conversions

In `decimal96.converters`:

- `from_int(src)` takes a signed 32-bit integer; anything else raises
  `ValueError`.
- `from_float(src)` rounds the input to single precision and keeps seven
  significant digits, with at most 28 fractional digits. NaN and infinity
  raise `ValueError`; a non-zero magnitude below 1e-28 raises
  `TooSmallError`; a magnitude beyond the decimal range raises
  `TooLargeError` (positive) or `TooSmallError` (negative).
- `to_int(src)` takes the integral part. When the value has a non-zero scale
  and its remainder modulo ten has a low word of five or more, the integral
  part is increased by one in magnitude. Results outside the signed 32-bit
  range raise `TooLargeError` or `TooSmallError`.
- `to_float(src)` returns the nearest single-precision value (as a Python
  `float`).

## Arithmetic

```python
from decimal96.arithmetic import add, sub, mul, div, mod

add(Decimal96.from_bits(1234, 0, 0, 0x00030000),
    Decimal96.from_bits(56, 0, 0, 0x00020000))     # 1.794
div(from_int(1), from_int(2))                      # 0.5
mod(from_int(10), from_int(3))                     # 1
```

Every operation returns a new `Decimal96`. Sums and products that overflow
96 bits are divided by ten (rounding half to even) while the scale allows;
`div` produces up to 28 fractional digits and drops trailing zeros; `mod`
returns a remainder signed like the dividend.

Failures are raised as exceptions, all derived from
`decimal96.core.DecimalArithmeticError`:

- `TooLargeError` — the result is too large and positive;
- `TooSmallError` — the result is too large and negative, or too small;
- `DivisionByZeroError` — `div` or `mod` by zero (also a `ZeroDivisionError`);
- `InvalidDecimalError` — `mul` or `div` got an operand whose flags word is
  malformed (also a `ValueError`).

## Comparison

```python
from decimal96.comparison import (
    is_equal, is_not_equal, is_less, is_less_or_equal,
    is_greater, is_greater_or_equal,
)

is_equal(Decimal96.from_bits(123, 0, 0, 0x00020000),
         Decimal96.from_bits(1230, 0, 0, 0x00030000))   # True
```

Scales are aligned before mantissas are compared. Positive and negative zero
are equal under `is_equal`, but `is_less` compares signs first, so a negative
zero is reported as less than a positive zero.

## Rounding

```python
from decimal96.rounding import floor, round_decimal, negate
from decimal96.core import truncate

v = Decimal96.from_bits(12345, 0, 0, 0x80020000)   # -123.45
truncate(v)                                        # -123
floor(v)                                           # -124
round_decimal(v)                                   # -123
negate(v)                                          # 123.45
```

`round_decimal` rounds halves away from zero and returns a value with scale
zero unchanged. `negate` flips the sign of zero too.

## Lower-level helpers

`decimal96.core` also exposes the mantissa-level building blocks used by the
operations: `compare_abs`, `multiply_by_int`, `divide_by_int`,
`is_divisible_by_10`, `mul_by_10`, `shift_left`, `integer_division`,
`normalize`, `align_scales` and `truncate`.

## What it does not do

There is no command-line tool, and `Decimal96` does not overload Python's
arithmetic or ordering operators: use the functions above.