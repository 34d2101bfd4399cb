"""Addition, subtraction, multiplication, division and remainder of 96-bit decimals.

Every operation returns a new :class:`~decimal96.core.Decimal96`.  A result
too large in magnitude raises :class:`TooLargeError` when it is positive and
:class:`TooSmallError` when it is negative.
"""

from __future__ import annotations

from .core import (
    MAX_MANTISSA,
    MAX_SCALE,
    WORD_MASK,
    Decimal96,
    DecimalArithmeticError,
    DivisionByZeroError,
    InvalidDecimalError,
    TooLargeError,
    TooSmallError,
    align_scales,
    compare_abs,
    integer_division,
    truncate,
)


def _make(mantissa: int, scale: int, sign: int) -> Decimal96:
    return Decimal96().with_mantissa(mantissa).with_scale(scale).with_sign(sign)


def _overflow(sign: int, message: str) -> DecimalArithmeticError:
    return TooSmallError(message) if sign else TooLargeError(message)


def _round_div10(value: int) -> int:
    """Divide by ten, rounding half to even."""
    quotient, remainder = divmod(value, 10)
    if remainder > 5 or (remainder == 5 and quotient & 1):
        quotient += 1
    return quotient


def _long_divide(dividend: int, divisor: int) -> tuple[int, int]:
    quotient, remainder = integer_division(
        Decimal96().with_mantissa(dividend), Decimal96().with_mantissa(divisor)
    )
    return quotient.mantissa, remainder.mantissa


def add(value_1: Decimal96, value_2: Decimal96) -> Decimal96:
    """Return ``value_1 + value_2``.

    A sum that overflows 96 bits is divided by ten (half to even) while the
    scale allows it.
    """
    value_1, value_2 = align_scales(value_1, value_2)
    if value_1.sign != value_2.sign:
        return sub(value_1, value_2.with_sign(not value_2.sign))

    scale = value_1.scale
    total = value_1.mantissa + value_2.mantissa
    while total > MAX_MANTISSA:
        if scale == 0:
            raise _overflow(value_1.sign, "sum does not fit in 96 bits")
        total = _round_div10(total)
        scale -= 1
    return _make(total, scale, value_1.sign)


def sub(value_1: Decimal96, value_2: Decimal96) -> Decimal96:
    """Return ``value_1 - value_2``."""
    value_1, value_2 = align_scales(value_1, value_2)
    if value_1.sign != value_2.sign:
        try:
            return add(value_1, value_2.with_sign(not value_2.sign))
        except DecimalArithmeticError as error:
            raise _overflow(value_1.sign, "difference does not fit in 96 bits") from error

    order = compare_abs(value_1, value_2)
    if order == 0:
        return Decimal96()
    difference = abs(value_1.mantissa - value_2.mantissa)
    sign = value_1.sign if order > 0 else int(not value_1.sign)
    return _make(difference, value_1.scale, sign)


def mul(value_1: Decimal96, value_2: Decimal96) -> Decimal96:
    """Return ``value_1 * value_2``, reducing the scale to make the product fit."""
    if not value_1.is_valid() or not value_2.is_valid():
        raise InvalidDecimalError("operand has a malformed flags word")

    product = value_1.mantissa * value_2.mantissa
    scale = value_1.scale + value_2.scale
    sign = value_1.sign ^ value_2.sign

    while product > MAX_MANTISSA and scale > 0:
        product = _round_div10(product)
        scale -= 1
    while scale > MAX_SCALE and product <= MAX_MANTISSA:
        product = _round_div10(product)
        scale -= 1

    if product > MAX_MANTISSA:
        raise _overflow(sign, "product does not fit in 96 bits")
    return _make(product, scale, sign)


def div(value_1: Decimal96, value_2: Decimal96) -> Decimal96:
    """Return ``value_1 / value_2`` with up to 28 fractional digits."""
    if value_2.is_zero():
        raise DivisionByZeroError("division by zero")
    if not value_1.is_valid() or not value_2.is_valid():
        raise InvalidDecimalError("operand has a malformed flags word")

    sign = value_1.sign ^ value_2.sign
    dividend = value_1.mantissa
    divisor = value_2.mantissa
    result_scale = value_1.scale - value_2.scale

    added = 0
    while added < MAX_SCALE and dividend * 10 <= MAX_MANTISSA:
        dividend *= 10
        added += 1
    result_scale += added

    quotient, remainder = _long_divide(dividend, divisor)

    while remainder and result_scale < MAX_SCALE:
        shifted_quotient = quotient * 10
        shifted_remainder = remainder * 10
        if shifted_quotient > MAX_MANTISSA or shifted_remainder > MAX_MANTISSA:
            break
        digit, new_remainder = _long_divide(shifted_remainder, divisor)
        if shifted_quotient + digit > MAX_MANTISSA:
            break
        quotient = shifted_quotient + digit
        remainder = new_remainder
        result_scale += 1

    if remainder and result_scale > 0 and remainder * 10 <= MAX_MANTISSA:
        next_digit, final_remainder = _long_divide(remainder * 10, divisor)
        low_word = next_digit & WORD_MASK
        round_up = low_word > 5 or (
            low_word == 5 and (final_remainder != 0 or quotient & 1)
        )
        if round_up and quotient + 1 <= MAX_MANTISSA:
            quotient += 1

    while result_scale > 0 and quotient % 10 == 0:
        quotient //= 10
        result_scale -= 1

    while result_scale > MAX_SCALE:
        rounded = _round_div10(quotient)
        quotient = rounded if rounded <= MAX_MANTISSA else quotient // 10
        result_scale -= 1

    while result_scale < 0:
        quotient *= 10
        if quotient > MAX_MANTISSA:
            raise _overflow(sign, "quotient does not fit in 96 bits")
        result_scale += 1

    return _make(quotient, result_scale, sign)


def mod(value_1: Decimal96, value_2: Decimal96) -> Decimal96:
    """Return the remainder of ``value_1 / value_2``, signed like ``value_1``."""
    if value_2.is_zero():
        raise DivisionByZeroError("remainder by zero")

    sign = value_1.sign
    dividend = value_1.with_sign(0)
    divisor = value_2.with_sign(0)

    try:
        quotient = div(dividend, divisor)
    except DecimalArithmeticError:
        quotient = Decimal96()
    quotient = truncate(quotient)

    try:
        product = mul(quotient, divisor)
    except DecimalArithmeticError:
        product = Decimal96()

    result = sub(dividend, product).with_sign(sign)
    if result.is_zero():
        result = result.with_sign(0)
    return result