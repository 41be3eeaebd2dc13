import math
import unittest
from decimal import Decimal

import pytest

from scaled_decimal.constants import DEFAULT_PRECISION
from scaled_decimal.precision import Precision, decimal_to_integer, integer_to_decimal

INVALID_VALUES = [None, "", "   ", True, False]


class TestPrecision(unittest.TestCase):
    def setUp(self):
        self.precision = Precision(4)

    def test_multiplier(self):
        self.assertEqual(self.precision.multiplier, 10000)
        self.assertEqual(Precision(0).multiplier, 1)

    def test_default_precision(self):
        self.assertEqual(DEFAULT_PRECISION, 2)
        self.assertEqual(Precision().decimals, 2)

    def test_to_int(self):
        self.assertEqual(self.precision.to_int(1.2345), 12345)
        self.assertEqual(self.precision.to_int("1.2345"), 12345)
        self.assertEqual(self.precision.to_int(Decimal("1.2345")), 12345)
        self.assertEqual(self.precision.to_int(5), 50000)

    def test_to_int_rounds_half_away_from_zero(self):
        # 1.00005 * 10^4 is 10000.5 and must not round to even
        self.assertEqual(self.precision.to_int(1.00005), 10001)
        self.assertEqual(self.precision.to_int(-1.00005), -10001)
        self.assertEqual(Precision(0).to_int(2.5), 3)
        self.assertEqual(Precision(0).to_int(-2.5), -3)

    def test_from_int(self):
        price = self.precision.from_int(12345)
        self.assertEqual(price, 1.2345)
        self.assertIsInstance(price, float)

        self.assertEqual(self.precision.from_int("12345"), 1.2345)
        self.assertEqual(self.precision.from_int(-10001), -1.0001)

    def test_from_int_truncates_decimal_input(self):
        self.assertEqual(Precision(1).from_int(12.7), 1.2)
        self.assertEqual(Precision(1).from_int("12.7"), 1.2)
        self.assertEqual(Precision(1).from_int(Decimal("-12.7")), -1.2)

    def test_round(self):
        self.assertEqual(self.precision.round(1.23456), 1.2346)
        self.assertEqual(self.precision.round(1 / 3.0), 0.3333)
        self.assertIsNone(self.precision.round(None))

    def test_invalid_precision(self):
        with self.assertRaises(ValueError):
            Precision(-1)
        with self.assertRaises(ValueError):
            Precision(2.0)
        with self.assertRaises(ValueError):
            Precision(True)

    def test_equality(self):
        self.assertEqual(Precision(3), Precision(3))
        self.assertNotEqual(Precision(3), Precision(4))
        self.assertEqual(len({Precision(3), Precision(3)}), 1)
        self.assertEqual(repr(Precision(3)), "Precision(3)")


def test_integer_to_decimal():
    assert integer_to_decimal(12345, 4) == 1.2345
    assert integer_to_decimal(123) == 1.23
    assert integer_to_decimal(7, 0) == 7.0
    assert integer_to_decimal(1, 4) == 0.0001
    assert integer_to_decimal(3333, 4) == 0.3333


def test_decimal_to_integer():
    assert decimal_to_integer(1.2345, 4) == 12345
    assert decimal_to_integer(1.23) == 123
    assert decimal_to_integer(7, 0) == 7
    assert decimal_to_integer(0.0001, 4) == 1
    assert decimal_to_integer(1 / 3.0, 4) == 3333
    assert decimal_to_integer(1.12, 4) == 11200


def test_large_integers_do_not_overflow():
    assert integer_to_decimal(10 ** 30, 10) == 1e20
    assert decimal_to_integer("12345678901234567890.5", 0) == 12345678901234567891


def test_integers_too_large_for_a_float_read_as_infinity():
    assert integer_to_decimal(10 ** 400, 0) == math.inf
    assert integer_to_decimal(-(10 ** 400), 2) == -math.inf
    assert integer_to_decimal("1e400", 2) == math.inf


def test_scientific_notation_strings_are_numbers():
    assert integer_to_decimal("1e3", 0) == 1000.0
    assert decimal_to_integer("1.5e-2", 4) == 150


def test_wide_values_keep_every_digit():
    assert decimal_to_integer(10 ** 30 + 1, 0) == 10 ** 30 + 1
    assert decimal_to_integer(-(10 ** 30 + 1), 2) == -(10 ** 32 + 100)
    assert decimal_to_integer("123456789012345678901234567890.125", 2) == 12345678901234567890123456789013


@pytest.mark.parametrize("value", INVALID_VALUES)
@pytest.mark.parametrize("precision", [0, 2, 4, 10])
def test_invalid_values_have_no_value(value, precision):
    assert integer_to_decimal(value, precision) is None
    assert decimal_to_integer(value, precision) is None


@pytest.mark.parametrize("value", ["abc", "1.2.3", float("nan"), float("inf"), Decimal("NaN"), object()])
def test_non_numeric_values_have_no_value(value):
    assert integer_to_decimal(value, 2) is None
    assert decimal_to_integer(value, 2) is None


@pytest.mark.parametrize("precision", range(0, 11))
def test_integer_round_trip_is_exact(precision):
    for integer in [0, 1, -1, 42, 3333, -987654, 10001, 123456789012]:
        assert decimal_to_integer(integer_to_decimal(integer, precision), precision) == integer


def test_decimal_round_trip_matches_after_rounding():
    cases = {
        1.2345: 1.2345,
        0.0001: 0.0001,
        1.00005: 1.0001,
        -2.71828: -2.7183,
        1 / 3.0: 0.3333,
    }
    for value, expected in cases.items():
        assert integer_to_decimal(decimal_to_integer(value, 4), 4) == expected


def test_negative_precision_is_rejected():
    with pytest.raises(ValueError):
        integer_to_decimal(1, -1)
    with pytest.raises(ValueError):
        decimal_to_integer(1.0, -1)


if __name__ == '__main__':
    unittest.main()
