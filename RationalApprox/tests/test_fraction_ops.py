import pytest

from RationalApprox.arithmetic.fraction_ops import gcd, reduce_fraction, add_fractions, \
    multiply_fractions
from RationalApprox.helpers.int_range import INT_MAX


@pytest.mark.parametrize("a, b, expected", [
    (12, 66, 6),
    (5, 7, 1),
    (45, 90, 45),
    (0, 5, 5),
    (7, 0, 7),
    (-7, 0, 7),
    (-4, 6, 2),
    (4, -6, 2),
    (0, 0, 0),
])
def test_gcd(a, b, expected):
    assert gcd(a, b) == expected


def test_gcd_divides_both():
    for a in range(-20, 21):
        for b in range(-20, 21):
            if a == 0 and b == 0:
                continue
            g = gcd(a, b)
            assert g > 0
            assert a % g == 0 and b % g == 0


@pytest.mark.parametrize("n, d, expected", [
    (12, 24, (1, 2)),
    (75, 100, (3, 4)),
    (3, -6, (-1, 2)),
    (-3, -6, (1, 2)),
    (0, 5, (0, 1)),
    (0, -5, (0, 1)),
    (7, 1, (7, 1)),
])
def test_reduce_fraction(n, d, expected):
    assert reduce_fraction(n, d) == expected


def test_reduce_fraction_is_canonical_and_idempotent():
    for n in range(-15, 16):
        for d in range(-15, 16):
            if d == 0:
                continue
            rn, rd = reduce_fraction(n, d)
            assert rd > 0
            assert rn * d == n * rd
            if rn == 0:
                assert rd == 1
            else:
                assert gcd(abs(rn), rd) == 1
            assert reduce_fraction(rn, rd) == (rn, rd)


@pytest.mark.parametrize("n", [0, 3, -3])
def test_reduce_fraction_zero_denominator(n):
    with pytest.raises(ZeroDivisionError):
        reduce_fraction(n, 0)


def test_add_fractions():
    assert add_fractions(1, 2, 1, 3) == (5, 6)
    assert add_fractions(1, 2, -1, 2) == (0, 1)
    assert add_fractions(1, -2, 1, 3) == (-1, 6)
    assert add_fractions(3, 4, 5, 4) == (2, 1)


def test_multiply_fractions():
    assert multiply_fractions(2, 3, 3, 4) == (1, 2)
    assert multiply_fractions(-2, 3, 3, -4) == (1, 2)
    assert multiply_fractions(0, 3, 3, 4) == (0, 1)


def test_arithmetic_zero_denominator():
    with pytest.raises(ZeroDivisionError):
        add_fractions(1, 0, 1, 2)
    with pytest.raises(ZeroDivisionError):
        multiply_fractions(1, 2, 1, 0)


def test_arithmetic_overflow():
    with pytest.raises(OverflowError):
        multiply_fractions(2 ** 16, 1, 2 ** 16, 1)
    with pytest.raises(OverflowError):
        add_fractions(INT_MAX, 1, 1, 1)
    with pytest.raises(OverflowError):
        add_fractions(1, 2 ** 16, 1, 2 ** 16)
