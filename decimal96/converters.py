"""Conversions between 96-bit decimals and 32-bit integers or single floats."""

from __future__ import annotations

import math
import struct
from fractions import Fraction

from .arithmetic import mod
from .core import (
    MAX_MANTISSA,
    MAX_SCALE,
    WORD_MASK,
    Decimal96,
    DecimalArithmeticError,
    TooLargeError,
    TooSmallError,
    truncate,
)

INT32_MIN = -(1 << 31)
INT32_MAX = (1 << 31) - 1
_SIGNIFICANT_DIGITS = 7


def _to_float32(value: float) -> float:
    """Round a float to single precision; out-of-range values become infinite."""
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


_MIN_MAGNITUDE = _to_float32(1e-28)
_MAX_MAGNITUDE = _to_float32(79228162514264337593543950335.0)


def _overflow(sign: int, message: str) -> DecimalArithmeticError:
    return TooSmallError(message) if sign else TooLargeError(message)


def from_int(src: int) -> Decimal96:
    """Convert a signed 32-bit integer."""
    if not INT32_MIN <= src <= INT32_MAX:
        raise ValueError(f"{src} is not a signed 32-bit integer")
    return Decimal96(abs(src)).with_sign(src < 0)


def to_int(src: Decimal96) -> int:
    """Convert to a signed 32-bit integer.

    The integral part is bumped by one when the low word of the value's
    remainder modulo ten is five or more.
    """
    truncated = truncate(src)
    sign = truncated.sign
    if truncated.mantissa > WORD_MASK:
        raise _overflow(sign, "value does not fit in a 32-bit integer")

    number = truncated.mantissa
    if src.scale > 0:
        remainder = mod(src, Decimal96(10))
        if remainder.lo >= 5:
            number = (number + 1) & WORD_MASK

    if sign:
        if number > -INT32_MIN:
            raise TooSmallError("value is below the 32-bit integer range")
        return -number
    if number > INT32_MAX:
        raise TooLargeError("value is above the 32-bit integer range")
    return number


def _decimal_digits(magnitude: float) -> tuple[str, int]:
    """Spell a positive float with seven significant digits as (digits, scale)."""
    text = format(magnitude, f".{_SIGNIFICANT_DIGITS}g")
    mantissa_text, _, exponent_text = text.partition("e")
    exp10 = int(exponent_text) if exponent_text else 0
    whole, _, fraction = mantissa_text.partition(".")
    mantissa_digits = whole + fraction

    frac_len = len(fraction) - exp10
    if frac_len < 0:
        return mantissa_digits + "0" * -frac_len, 0
    if exp10 < 0:
        return "0" * -exp10 + mantissa_digits, frac_len
    return mantissa_digits, frac_len


def _strip_zeros(digits: str, frac_len: int) -> tuple[str, int]:
    while len(digits) > 1 and digits[0] == "0" and len(digits) > frac_len + 1:
        digits = digits[1:]
    while frac_len > 0 and digits.endswith("0"):
        digits = digits[:-1]
        frac_len -= 1
    return digits, frac_len


def _limit_precision(digits: str, frac_len: int) -> tuple[str, int]:
    """Cut the fraction to 28 digits, rounding half up on the first dropped digit."""
    if frac_len <= MAX_SCALE:
        return digits, frac_len
    cut = len(digits) - (frac_len - MAX_SCALE)
    kept = digits[:cut]
    if digits[cut] >= "5":
        rounded = str(int(kept) + 1).zfill(len(kept))
        if len(rounded) > len(kept):
            rounded = rounded[:-1]
        kept = rounded
    return kept, MAX_SCALE


def from_float(src: float) -> Decimal96:
    """Convert a single-precision float, keeping seven significant digits."""
    value = _to_float32(float(src))
    if math.isnan(value) or math.isinf(value):
        raise ValueError(f"cannot convert {value} to a decimal")
    if value == 0.0:
        return Decimal96()

    sign = int(value < 0)
    magnitude = abs(value)
    if magnitude < _MIN_MAGNITUDE:
        raise TooSmallError("magnitude is below 1e-28")
    if magnitude > _MAX_MAGNITUDE:
        raise _overflow(sign, "magnitude exceeds the decimal range")

    digits, frac_len = _decimal_digits(magnitude)
    digits, frac_len = _strip_zeros(digits, frac_len)
    digits, frac_len = _limit_precision(digits, frac_len)

    mantissa = int(digits)
    if mantissa > MAX_MANTISSA:
        raise _overflow(sign, "digits do not fit in 96 bits")
    return Decimal96().with_mantissa(mantissa).with_scale(frac_len).with_sign(sign)


def to_float(src: Decimal96) -> float:
    """Convert to the nearest single-precision float."""
    result = float(Fraction(src.mantissa, 10**src.scale))
    if src.sign:
        result = -result
    return _to_float32(result)