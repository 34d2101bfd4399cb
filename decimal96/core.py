"""A 96-bit scaled decimal value and the low-level helpers built on it.

A value is four 32-bit words: ``lo``, ``mid`` and ``hi`` hold the 96-bit
unsigned mantissa, ``flags`` holds the scale (bits 16-23) and the sign
(bit 31).  The number represented is ``(-1) ** sign * mantissa / 10 ** scale``.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

WORD_MASK = 0xFFFFFFFF
MANTISSA_BITS = 96
MAX_MANTISSA = (1 << MANTISSA_BITS) - 1
MAX_SCALE = 28
SIGN_BIT = 0x80000000
SCALE_SHIFT = 16
_SCALE_CLEAR_MASK = 0xFF00FFFF
_WORD_NAMES = ("lo", "mid", "hi", "flags")


class DecimalArithmeticError(ArithmeticError):
    """Base class for every arithmetic failure on 96-bit decimals."""


class TooLargeError(DecimalArithmeticError):
    """The result is too large to fit, or is positive infinity."""


class TooSmallError(DecimalArithmeticError):
    """The result is too small to fit, or is negative infinity."""


class DivisionByZeroError(DecimalArithmeticError, ZeroDivisionError):
    """A division or remainder by zero was attempted."""


class InvalidDecimalError(DecimalArithmeticError, ValueError):
    """An operand has a malformed flags word."""


@dataclass(frozen=True)
class Decimal96:
    """Immutable 96-bit mantissa with a decimal scale and a sign bit."""

    lo: int = 0
    mid: int = 0
    hi: int = 0
    flags: int = 0

    def __post_init__(self) -> None:
        for name in _WORD_NAMES:
            word = getattr(self, name)
            if not 0 <= word <= WORD_MASK:
                raise ValueError(f"{name} must be an unsigned 32-bit word, got {word!r}")

    @classmethod
    def from_bits(cls, lo: int, mid: int, hi: int, flags: int) -> Decimal96:
        """Build a value from its four raw 32-bit words."""
        return cls(lo, mid, hi, flags)

    @classmethod
    def _from_mantissa(cls, mantissa: int, flags: int = 0) -> Decimal96:
        return cls(
            mantissa & WORD_MASK,
            (mantissa >> 32) & WORD_MASK,
            (mantissa >> 64) & WORD_MASK,
            flags,
        )

    @property
    def sign(self) -> int:
        """1 for negative values, 0 otherwise."""
        return (self.flags >> 31) & 1

    @property
    def scale(self) -> int:
        """The power of ten the mantissa is divided by."""
        return (self.flags >> SCALE_SHIFT) & 0xFF

    @property
    def mantissa(self) -> int:
        """The 96-bit unsigned integer part."""
        return self.lo | (self.mid << 32) | (self.hi << 64)

    def with_sign(self, sign: int) -> Decimal96:
        """Return a copy with the sign bit set (truthy) or cleared."""
        flags = (self.flags & ~SIGN_BIT & WORD_MASK) | (SIGN_BIT if sign else 0)
        return replace(self, flags=flags)

    def with_scale(self, scale: int) -> Decimal96:
        """Return a copy with the scale byte replaced; other flag bits are kept."""
        if not 0 <= scale <= 0xFF:
            raise ValueError(f"scale must fit in one byte, got {scale}")
        flags = (self.flags & _SCALE_CLEAR_MASK) | (scale << SCALE_SHIFT)
        return replace(self, flags=flags)

    def with_mantissa(self, mantissa: int) -> Decimal96:
        """Return a copy with a new 96-bit mantissa and the same flags."""
        if not 0 <= mantissa <= MAX_MANTISSA:
            raise ValueError("mantissa must fit in 96 unsigned bits")
        return Decimal96._from_mantissa(mantissa, self.flags)

    def bit(self, index: int) -> int:
        """Return mantissa bit ``index`` (0 is the least significant)."""
        if not 0 <= index < MANTISSA_BITS:
            raise IndexError(f"mantissa bit index out of range: {index}")
        return (self.mantissa >> index) & 1

    def with_bit(self, index: int, value: int) -> Decimal96:
        """Return a copy with mantissa bit ``index`` set to ``value``."""
        if not 0 <= index < MANTISSA_BITS:
            raise IndexError(f"mantissa bit index out of range: {index}")
        mask = 1 << index
        mantissa = (self.mantissa & ~mask) | (mask if value else 0)
        return self.with_mantissa(mantissa)

    def is_zero(self) -> bool:
        """True when the mantissa is zero, whatever the sign and scale."""
        return self.mantissa == 0

    def is_valid(self) -> bool:
        """True when the flags word is well formed.

        The low 16 bits and bits 24-30 must be clear, and the scale read
        from bits 16-22 must not exceed 28.
        """
        if (self.flags >> SCALE_SHIFT) & 0x7F > MAX_SCALE:
            return False
        if self.flags & 0x0000FFFF:
            return False
        return not self.flags & 0x7F000000

    def abs(self) -> Decimal96:
        """Return the value with its sign cleared."""
        return self.with_sign(0)


def compare_abs(value_1: Decimal96, value_2: Decimal96) -> int:
    """Compare mantissas only: -1, 0 or 1."""
    a, b = value_1.mantissa, value_2.mantissa
    return (a > b) - (a < b)


def multiply_by_int(value: Decimal96, multiplier: int) -> Decimal96:
    """Multiply the mantissa by a non-negative integer, keeping the flags."""
    if multiplier < 0:
        raise ValueError("multiplier must be non-negative")
    product = value.mantissa * multiplier
    if product > MAX_MANTISSA:
        raise TooLargeError("product does not fit in 96 bits")
    return Decimal96._from_mantissa(product, value.flags)


def divide_by_int(value: Decimal96, divisor: int) -> tuple[Decimal96, int]:
    """Divide the mantissa by a positive integer; return (quotient, remainder)."""
    if divisor == 0:
        raise DivisionByZeroError("division of a mantissa by zero")
    if divisor < 0:
        raise ValueError("divisor must be positive")
    quotient, remainder = divmod(value.mantissa, divisor)
    return Decimal96._from_mantissa(quotient, value.flags), remainder


def is_divisible_by_10(value: Decimal96) -> bool:
    """True when the mantissa is a multiple of ten."""
    return value.mantissa % 10 == 0


def mul_by_10(value: Decimal96) -> Decimal96:
    """Multiply by ten as ``8 * x + 2 * x`` within the value's own scale.

    Fails when any mantissa word has one of its top three bits set.  When
    the product does not fit but the scale is positive, the sum is rounded
    back down by one decimal place, which leaves the mantissa unchanged and
    lowers the scale by one.  Stray flag bits are dropped from the result.
    """
    if any(word >> 29 for word in (value.lo, value.mid, value.hi)):
        raise TooLargeError("mantissa words too large to multiply by ten")
    sign_flag = value.flags & SIGN_BIT
    product = value.mantissa * 10
    if product <= MAX_MANTISSA:
        return Decimal96._from_mantissa(product, sign_flag | (value.scale << SCALE_SHIFT))
    if value.scale == 0:
        raise TooLargeError("value times ten does not fit in 96 bits")
    return Decimal96._from_mantissa(
        value.mantissa, sign_flag | ((value.scale - 1) << SCALE_SHIFT)
    )


def shift_left(value: Decimal96, shift: int) -> Decimal96:
    """Shift the mantissa left by ``shift`` bits, keeping the flags."""
    if shift < 0:
        raise ValueError("shift must be non-negative")
    shifted = value.mantissa << shift
    if shifted > MAX_MANTISSA:
        raise TooLargeError("bits shifted out of the 96-bit mantissa")
    return Decimal96._from_mantissa(shifted, value.flags)


def integer_division(dividend: Decimal96, divisor: Decimal96) -> tuple[Decimal96, Decimal96]:
    """Binary long division of mantissas; return (quotient, remainder).

    Both results carry clear flags.  The running remainder lives in 96
    bits, so a bit shifted past the top is lost.
    """
    if divisor.is_zero():
        raise DivisionByZeroError("integer division by zero")
    dividend_bits = dividend.mantissa
    divisor_bits = divisor.mantissa
    quotient = 0
    remainder = 0
    for index in reversed(range(MANTISSA_BITS)):
        remainder = ((remainder << 1) & MAX_MANTISSA) | ((dividend_bits >> index) & 1)
        if remainder >= divisor_bits:
            remainder -= divisor_bits
            quotient |= 1 << index
    return Decimal96._from_mantissa(quotient), Decimal96._from_mantissa(remainder)


def _rescale_with_mul_by_10(value: Decimal96, steps: int) -> Decimal96:
    for _ in range(steps):
        try:
            value = mul_by_10(value)
        except TooLargeError:
            break
    return value


def normalize(value_1: Decimal96, value_2: Decimal96) -> tuple[Decimal96, Decimal96]:
    """Bring both values to the larger scale, as far as the mantissa allows.

    Each mantissa is multiplied by ten once per missing scale step while it
    still can be; the resulting flags hold only the sign and the common scale.
    """
    target = max(value_1.scale, value_2.scale)
    results = []
    for value in (value_1, value_2):
        scaled = _rescale_with_mul_by_10(value, target - value.scale)
        flags = (scaled.flags & SIGN_BIT) | (target << SCALE_SHIFT)
        results.append(Decimal96._from_mantissa(scaled.mantissa, flags))
    return results[0], results[1]


def _rescale_with_multiply(value: Decimal96, steps: int) -> Decimal96:
    for _ in range(steps):
        try:
            value = multiply_by_int(value, 10)
        except TooLargeError:
            break
    return value


def align_scales(value_1: Decimal96, value_2: Decimal96) -> tuple[Decimal96, Decimal96]:
    """Raise the smaller scale to the larger one, multiplying its mantissa.

    Multiplication stops silently on overflow; the scale is set regardless
    and every other flag bit is kept.
    """
    scale_1, scale_2 = value_1.scale, value_2.scale
    if scale_1 < scale_2:
        value_1 = _rescale_with_multiply(value_1, scale_2 - scale_1).with_scale(scale_2)
    elif scale_2 < scale_1:
        value_2 = _rescale_with_multiply(value_2, scale_1 - scale_2).with_scale(scale_1)
    return value_1, value_2


def truncate(value: Decimal96) -> Decimal96:
    """Drop the fractional digits; the result keeps only the sign flag."""
    integral = value.mantissa // 10**value.scale
    return Decimal96._from_mantissa(integral, value.flags & SIGN_BIT)