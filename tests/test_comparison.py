import pytest

from decimal96.comparison import (
    is_equal,
    is_greater,
    is_greater_or_equal,
    is_less,
    is_less_or_equal,
    is_not_equal,
)
from decimal96.core import Decimal96

SIGN = 0x80000000


def test_is_equal_true():
    a = Decimal96(123, 456, 789, 0)
    b = Decimal96(123, 456, 789, 0)
    assert is_equal(a, b) is True


def test_is_equal_false():
    assert is_equal(Decimal96(123), Decimal96(456)) is False


def test_is_equal_normalized():
    a = Decimal96(123, 0, 0, 0x00020000)
    b = Decimal96(1230, 0, 0, 0x00030000)
    assert is_equal(a, b) is True


def test_is_equal_zeros_of_different_sign():
    assert is_equal(Decimal96(0, 0, 0, SIGN), Decimal96()) is True


def test_is_equal_different_signs_nonzero():
    assert is_equal(Decimal96(5, 0, 0, SIGN), Decimal96(5)) is False


def test_is_less_positive():
    a, b = Decimal96(5), Decimal96(10)
    assert is_less(a, b) is True
    assert is_less(b, a) is False


def test_is_less_negative():
    a = Decimal96(5, 0, 0, SIGN)
    b = Decimal96(10, 0, 0, SIGN)
    assert is_less(a, b) is False
    assert is_less(b, a) is True


def test_is_less_diff_sign():
    a = Decimal96(5, 0, 0, SIGN)
    b = Decimal96(10)
    assert is_less(a, b) is True
    assert is_less(b, a) is False


def test_is_less_with_scales():
    half = Decimal96(5, 0, 0, 0x00010000)
    assert is_less(half, Decimal96(1)) is True
    assert is_less(Decimal96(1), half) is False


def test_is_less_equal_values():
    assert is_less(Decimal96(7), Decimal96(70, 0, 0, 0x00010000)) is False


def test_negative_zero_orders_before_positive_zero():
    assert is_less(Decimal96(0, 0, 0, SIGN), Decimal96()) is True


def test_is_greater_true():
    assert is_greater(Decimal96(10), Decimal96(5)) is True


def test_is_greater_false():
    assert is_greater(Decimal96(5), Decimal96(10)) is False


@pytest.mark.parametrize(
    ("a", "b", "expected"),
    [
        (5, 5, True),
        (10, 5, True),
        (5, 10, False),
    ],
)
def test_is_greater_or_equal(a, b, expected):
    assert is_greater_or_equal(Decimal96(a), Decimal96(b)) is expected


@pytest.mark.parametrize(
    ("a", "b", "expected"),
    [
        (5, 10, True),
        (5, 5, True),
        (10, 5, False),
    ],
)
def test_is_less_or_equal(a, b, expected):
    assert is_less_or_equal(Decimal96(a), Decimal96(b)) is expected


def test_is_not_equal_true():
    assert is_not_equal(Decimal96(1), Decimal96(2)) is True


def test_is_not_equal_false():
    assert is_not_equal(Decimal96(2), Decimal96(2)) is False