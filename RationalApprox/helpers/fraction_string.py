import re
from typing import Tuple

from RationalApprox.helpers.int_range import INT_MAX, INT_MIN

_INT_RE = re.compile(r"\s*[+-]?\d+\s*")


def _parse_int(text: str) -> Tuple[bool, int]:
    """Decimal digits with an optional sign, inside the 32-bit range."""
    if not _INT_RE.fullmatch(text):
        return False, 0
    value = int(text)
    if value > INT_MAX or value < INT_MIN:
        return False, 0
    return True, value


def string_to_fraction(text: str) -> Tuple[bool, int, int]:
    """
    Parse "n/d" or "n" into a fraction. On failure the fraction is left at 0/1 (or at the parsed
    numerator over 1 when only the denominator is bad).

    example: "2/3" -> (True, 2, 3); "2" -> (True, 2, 1); "patate" -> (False, 0, 1)
    :param text: string supposed to hold a fraction
    :return: (ok, numerator, denominator)
    """
    head, sep, tail = text.strip().partition("/")
    if not sep:
        ok, numerator = _parse_int(head)
        return ok, numerator, 1
    ok_num, numerator = _parse_int(head)
    ok_den, denominator = _parse_int(tail)
    if not ok_den or denominator == 0:
        return False, numerator, 1
    return ok_num, numerator, denominator


def fraction_to_string(numerator: int, denominator: int = 1) -> str:
    """(2, 3) -> "2/3", (2, 1) -> "2" """
    if denominator == 1:
        return str(numerator)
    return f"{numerator}/{denominator}"


def rounder(value, digit=5):
    return f"{value:.{digit}e}"
