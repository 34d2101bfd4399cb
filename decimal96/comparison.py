"""Ordering and equality of 96-bit decimals.

Operands are brought to a common scale before their mantissas are compared.
A negative zero compares equal to a positive zero but is still ordered
before it by :func:`is_less`, because signs are compared first.
"""

from __future__ import annotations

from .core import Decimal96, normalize


def is_equal(value_1: Decimal96, value_2: Decimal96) -> bool:
    """True when both values denote the same number."""
    value_1, value_2 = normalize(value_1, value_2)
    if value_1.sign != value_2.sign:
        return value_1.is_zero() and value_2.is_zero()
    return value_1.mantissa == value_2.mantissa


def is_not_equal(value_1: Decimal96, value_2: Decimal96) -> bool:
    """True when the values denote different numbers."""
    return not is_equal(value_1, value_2)


def is_less(value_1: Decimal96, value_2: Decimal96) -> bool:
    """True when ``value_1 < value_2``."""
    if value_1.sign != value_2.sign:
        return value_1.sign > value_2.sign
    value_1, value_2 = normalize(value_1, value_2)
    if value_1.sign:
        return value_1.mantissa > value_2.mantissa
    return value_1.mantissa < value_2.mantissa


def is_less_or_equal(value_1: Decimal96, value_2: Decimal96) -> bool:
    """True when ``value_1 <= value_2``."""
    return is_less(value_1, value_2) or is_equal(value_1, value_2)


def is_greater(value_1: Decimal96, value_2: Decimal96) -> bool:
    """True when ``value_1 > value_2``."""
    return not is_less_or_equal(value_1, value_2)


def is_greater_or_equal(value_1: Decimal96, value_2: Decimal96) -> bool:
    """True when ``value_1 >= value_2``."""
    return not is_less(value_1, value_2)