PRECISION = 1e-7


def approx_equal(a: float, b: float, precision: float = PRECISION) -> bool:
    """
    True when a lies in the open interval (b - precision/2, b + precision/2).
    The argument order matters near the interval edges: pass the value under test as a and the
    candidate as b.
    :param a: value under test
    :param b: candidate value
    :param precision: full width of the tolerance window
    :return:
    """
    return b - precision / 2 < a < b + precision / 2
