import math

import pytest

from plugins.unit_converter.core.formatting import (
    clean_decimal,
    number_to_string,
    to_exponential,
    to_fixed,
    to_precision,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0.0, "0"),
        (-0.0, "0"),
        (2.0, "2"),
        (-2.5, "-2.5"),
        (123.456, "123.456"),
        (0.1 + 0.2, "0.30000000000000004"),
        (0.000001, "0.000001"),
        (1e-7, "1e-7"),
        (1.5e-7, "1.5e-7"),
        (1e20, "100000000000000000000"),
        (1e21, "1e+21"),
        (1.7976931348623157e308, "1.7976931348623157e+308"),
        (math.inf, "Infinity"),
        (-math.inf, "-Infinity"),
        (math.nan, "NaN"),
    ],
)
def test_number_to_string(value, expected):
    assert number_to_string(value) == expected


def test_to_precision_positional_and_exponential():
    assert to_precision(37.77777777777778, 6) == "37.7778"
    assert to_precision(123456789, 6) == "1.23457e+8"
    assert to_precision(0.30000000000000004, 6) == "0.300000"
    assert to_precision(1.5, 6) == "1.50000"
    assert to_precision(0.0000123456789, 6) == "0.0000123457"
    assert to_precision(0.0, 6) == "0.00000"


def test_to_precision_rounds_ties_away_from_zero():
    assert to_precision(2.5, 1) == "3"
    assert to_precision(-2.5, 1) == "-3"
    assert to_precision(999999.5, 6) == "1.00000e+6"


def test_to_exponential():
    assert to_exponential(1.2345e-7, 4) == "1.2345e-7"
    assert to_exponential(-0.00000098765, 4) == "-9.8765e-7"
    assert to_exponential(12.5, 1) == "1.3e+1"
    assert to_exponential(0.0, 4) == "0.0000e+0"
    assert to_exponential(3.0, 0) == "3e+0"


def test_to_fixed_uses_exact_binary_value():
    assert to_fixed(0.125, 2) == "0.13"
    assert to_fixed(1.005, 2) == "1.00"
    assert to_fixed(33.8, 2) == "33.80"
    assert to_fixed(-0.0, 2) == "0.00"
    assert to_fixed(-1e-7, 2) == "-0.00"
    assert to_fixed(2.0, 0) == "2"
    assert to_fixed(1e21, 2) == "1e+21"


def test_clean_decimal_strips_noise_and_trailing_zeroes():
    assert clean_decimal(0.1 + 0.2, 6) == "0.3"
    assert clean_decimal(1.5, 6) == "1.5"
    assert clean_decimal(2.0000000001, 6) == "2"
    assert clean_decimal(1 / 0.3048, 6) == "3.28084"
    assert clean_decimal(-1e-7, 6) == "0"


def test_negative_digit_counts_are_rejected():
    with pytest.raises(ValueError):
        to_fixed(1.0, -1)
    with pytest.raises(ValueError):
        to_precision(1.0, 0)
    with pytest.raises(ValueError):
        to_exponential(1.0, -2)
