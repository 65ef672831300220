"""
Numeric parsing under the "thousands dot, decimal comma" convention.
"""

import math

import pytest

from fields.numbers import DOT_DECIMAL, parse_number


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("1.234,56", 1234.56),
        ("10,50", 10.5),
        ("  7 ", 7.0),
        (10, 10),
        (2.5, 2.5),
    ],
)
def test_parses_brazilian_format(raw, expected):
    assert parse_number(raw, 0) == expected


@pytest.mark.parametrize("raw", ["abc", "", "   ", None, True, float("nan"), "inf", "nan", "R$ 10,00"])
def test_invalid_input_returns_default(raw):
    assert parse_number(raw, 0) == 0
    assert parse_number(raw) is None


def test_dot_decimal_values_are_read_as_thousands():
    # documented format assumption
    assert parse_number("10.5", 0) == 105


def test_alternate_format():
    assert math.isclose(parse_number("1,234.56", 0, DOT_DECIMAL), 1234.56)
