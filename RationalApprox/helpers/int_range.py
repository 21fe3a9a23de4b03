# results are kept inside the range of a signed 32-bit integer
INT_MAX = 2 ** 31 - 1
INT_MIN = -2 ** 31

DENOMINATOR_MAX = INT_MAX


def check_int_range(value: int, name="value") -> int:
    """Return value if it fits in a signed 32-bit integer, raise OverflowError otherwise."""
    if value > INT_MAX or value < INT_MIN:
        raise OverflowError(f"{name} {value} does not fit in a 32-bit signed integer")
    return value
