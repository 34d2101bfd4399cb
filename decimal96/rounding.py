"""Integral rounding and negation of 96-bit decimals."""

from __future__ import annotations

from .arithmetic import add, sub
from .comparison import is_equal, is_greater_or_equal
from .core import Decimal96, multiply_by_int, truncate

_ONE = Decimal96(1)


def negate(value: Decimal96) -> Decimal96:
    """Return the value with its sign flipped, zero included."""
    return value.with_sign(not value.sign)


def floor(value: Decimal96) -> Decimal96:
    """Round toward negative infinity."""
    truncated = truncate(value)
    if value.sign and not is_equal(value, truncated):
        return sub(truncated, _ONE).with_sign(1)
    return truncated


def round_decimal(value: Decimal96) -> Decimal96:
    """Round to the nearest integer, halves away from zero.

    A value with scale zero is returned unchanged.
    """
    scale = value.scale
    if scale == 0:
        return value

    integral = truncate(value)
    fraction = sub(value, integral).abs()
    threshold = multiply_by_int(Decimal96(5), 10 ** (scale - 1)).with_scale(scale)

    if is_greater_or_equal(fraction, threshold):
        integral = sub(integral, _ONE) if value.sign else add(integral, _ONE)
    return integral.with_scale(0)