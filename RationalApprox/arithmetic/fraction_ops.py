from typing import Tuple

from RationalApprox.helpers.int_range import check_int_range


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of a and b with Euclid's algorithm, always >= 0.
    gcd(a, 0) is |a|, so gcd(0, 0) is 0."""
    while b != 0:
        a, b = b, a % b
    return abs(a)


def reduce_fraction(numerator: int, denominator: int) -> Tuple[int, int]:
    """
    Reduce numerator/denominator to lowest terms. The sign is carried by the numerator, so the
    returned denominator is always positive, and zero comes back as (0, 1).

    example: (12, 24) -> (1, 2); (75, 100) -> (3, 4); (3, -6) -> (-1, 2)
    :param numerator:
    :param denominator: must be non-zero
    :return: (numerator, denominator)
    """
    if denominator == 0:
        raise ZeroDivisionError(f"fraction {numerator}/0 has a zero denominator")
    g = gcd(numerator, denominator)
    numerator //= g
    denominator //= g
    if denominator < 0:
        numerator = -numerator
        denominator = -denominator
    return numerator, denominator


def add_fractions(n1: int, d1: int, n2: int, d2: int) -> Tuple[int, int]:
    """n1/d1 + n2/d2, reduced. Raises OverflowError if the unreduced terms leave the 32-bit range."""
    if d1 == 0 or d2 == 0:
        raise ZeroDivisionError("cannot add fractions with a zero denominator")
    n = check_int_range(n1 * d2 + n2 * d1, "numerator")
    d = check_int_range(d1 * d2, "denominator")
    return reduce_fraction(n, d)


def multiply_fractions(n1: int, d1: int, n2: int, d2: int) -> Tuple[int, int]:
    """n1/d1 * n2/d2, reduced. Raises OverflowError if the unreduced terms leave the 32-bit range."""
    if d1 == 0 or d2 == 0:
        raise ZeroDivisionError("cannot multiply fractions with a zero denominator")
    n = check_int_range(n1 * n2, "numerator")
    d = check_int_range(d1 * d2, "denominator")
    return reduce_fraction(n, d)
