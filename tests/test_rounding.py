import pytest

from decimal96.core import Decimal96
from decimal96.rounding import floor, negate, round_decimal

SIGN = 0x80000000
MAX_WORD = 0xFFFFFFFF


def _parts(value):
    return value.sign, value.mantissa, value.scale


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (Decimal96(123456, 0, 0, 0x00030000), (0, 123, 0)),
        (Decimal96(123999, 0, 0, 0x00030000), (0, 123, 0)),
        (Decimal96(123, 0, 0, SIGN), (1, 123, 0)),
        (Decimal96(12345, 0, 0, 0x80020000), (1, 124, 0)),
        (Decimal96(12345, 0, 0, 0x00020000), (0, 123, 0)),
        (Decimal96(0, 0, 0, 0), (0, 0, 0)),
        (Decimal96(456, 0, 0, 0), (0, 456, 0)),
        (Decimal96(12300, 0, 0, 0x80020000), (1, 123, 0)),
        (Decimal96(1, 0, 0, 0x001C0000), (0, 0, 0)),
    ],
)
def test_floor(value, expected):
    assert _parts(floor(value)) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (Decimal96(123654, 0, 0, 0x00030000), (0, 124)),
        (Decimal96(5, 0, 0, 0x00010000), (0, 1)),
        (Decimal96(123654, 0, 0, 0x80030000), (1, 124)),
        (Decimal96(123, 0, 0, 0x00030000), (0, 0)),
        (Decimal96(123456789, 0, 0, 0x00060000), (0, 123)),
        (Decimal96(123456, 0, 0, 0x00050000), (0, 1)),
        (Decimal96(123400, 0, 0, 0x00050000), (0, 1)),
        (Decimal96(123456, 0, 0, 0x80050000), (1, 1)),
        (Decimal96(123400, 0, 0, 0x80050000), (1, 1)),
        (Decimal96(0, 0, 0, 0x00030000), (0, 0)),
        (Decimal96(499999, 0, 0, 0x00060000), (0, 0)),
        (Decimal96(500001, 0, 0, 0x00060000), (0, 1)),
    ],
)
def test_round_decimal(value, expected):
    result = round_decimal(value)
    assert (result.sign, result.mantissa) == expected
    assert result.scale == 0


def test_round_decimal_integer_unchanged():
    value = Decimal96(7, 0, 0, SIGN)
    assert round_decimal(value) == value


def test_round_decimal_negative_half_away_from_zero():
    result = round_decimal(Decimal96(25, 0, 0, 0x80010000))
    assert _parts(result) == (1, 3, 0)


def test_negate_positive():
    assert negate(Decimal96(12345)) == Decimal96(12345, 0, 0, SIGN)


def test_negate_negative():
    assert negate(Decimal96(12345, 0, 0, SIGN)) == Decimal96(12345)


def test_negate_zero():
    result = negate(Decimal96())
    assert result.sign == 1
    assert result.mantissa == 0


def test_negate_max():
    value = Decimal96(MAX_WORD, MAX_WORD, MAX_WORD, 0)
    assert negate(value) == Decimal96(MAX_WORD, MAX_WORD, MAX_WORD, SIGN)


def test_negate_max_scale():
    assert negate(Decimal96(123, 0, 0, 0x001C0000)).flags == 0x801C0000


def test_negate_twice_is_identity():
    value = Decimal96(98765, 3, 0, 0x00040000)
    assert negate(negate(value)) == value