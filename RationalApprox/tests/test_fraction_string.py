import pytest

from RationalApprox.helpers.fraction_string import string_to_fraction, fraction_to_string, rounder


@pytest.mark.parametrize("text, expected", [
    ("2/3", (True, 2, 3)),
    ("2", (True, 2, 1)),
    (" -4/6 ", (True, -4, 6)),
    ("patate", (False, 0, 1)),
    ("3/0", (False, 3, 1)),
    ("3/x", (False, 3, 1)),
    ("", (False, 0, 1)),
    ("1_000", (False, 0, 1)),
    ("1_000/3", (False, 0, 3)),
    ("5000000000/1", (False, 0, 1)),
    ("1/5000000000", (False, 1, 1)),
    ("-2147483648/2147483647", (True, -2147483648, 2147483647)),
    ("2147483648", (False, 0, 1)),
    ("+7", (True, 7, 1)),
    ("1.5", (False, 0, 1)),
])
def test_string_to_fraction(text, expected):
    assert string_to_fraction(text) == expected


def test_string_to_fraction_bad_numerator():
    ok, _, _ = string_to_fraction("a/3")
    assert not ok


def test_fraction_to_string():
    assert fraction_to_string(2, 3) == "2/3"
    assert fraction_to_string(2, 1) == "2"
    assert fraction_to_string(5) == "5"
    assert fraction_to_string(-1, 2) == "-1/2"


def test_rounder():
    assert rounder(0.000123, 2) == "1.23e-04"
