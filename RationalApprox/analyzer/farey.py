from typing import Tuple, Any, Optional, Union, Dict, List
import warnings

import numpy as np

from RationalApprox.base import Analysis, AnalysisResult
from RationalApprox.helpers.approx_compare import approx_equal, PRECISION
from RationalApprox.helpers.int_range import DENOMINATOR_MAX, check_int_range
from RationalApprox.helpers.fraction_string import fraction_to_string, rounder
from RationalApprox.plotting.twin_x_plot import twin_x_plot


def best_rational_approximation(x: float, denominator_max: int = DENOMINATOR_MAX,
                                precision: float = PRECISION) -> Tuple[int, int]:
    """
    Find a fraction approximately equal to x, within precision, whose denominator does not exceed
    denominator_max. Walks the Stern-Brocot tree with mediants (Farey method, see
    https://www.johndcook.com/blog/2010/10/20/best-rational-approximation/) and stops at the first
    mediant inside the tolerance. When the denominator bound is reached first, the closest boundary
    fraction of the search is returned instead, without raising.

    example: 0.5 -> (1, 2); 0.3333333333 -> (1, 3); 1.010101010101 -> (100, 99)
    :param x: real number to approximate
    :param denominator_max: largest denominator allowed in the result
    :param precision: tolerance window, see approx_equal
    :return: (numerator, denominator), denominator > 0
    """
    x = float(x)
    if not np.isfinite(x):
        raise ValueError(f"cannot approximate non-finite value {x}")
    if denominator_max < 1:
        raise ValueError(f"denominator_max must be >= 1, got {denominator_max}")
    if denominator_max > DENOMINATOR_MAX:
        raise ValueError(f"denominator_max must be <= {DENOMINATOR_MAX}, got {denominator_max}")
    if precision <= 0:
        raise ValueError(f"precision must be > 0, got {precision}")

    # truncation toward zero, so the remainder of a negative x is negative
    int_part = check_int_range(int(x), "integer part")
    if approx_equal(x, int_part, precision):
        return int_part, 1

    frac = x - int_part
    sign = 1
    if frac < 0:
        sign = -1
        frac = -frac

    a, b = 0, 1  # lower bound a/b
    c, d = 1, 1  # upper bound c/d
    while b <= denominator_max and d <= denominator_max:
        mediant = (a + c) / (b + d)
        if approx_equal(frac, mediant, precision):
            if b + d <= denominator_max:
                n, den = a + c, b + d
            elif d > b:
                n, den = c, d
            else:
                n, den = a, b
            break
        elif frac > mediant:
            a += c
            b += d
        else:
            c += a
            d += b
    else:
        if b > denominator_max:
            n, den = c, d
        else:
            n, den = a, b

    numerator = check_int_range(int_part * den + sign * n, "numerator")
    return numerator, den


class FareyResult(AnalysisResult):
    def __init__(self, coordinates, data, parameters: Dict[str, Union[Dict[str, Any], Any]]):
        super().__init__(parameters)
        self.coordinates = coordinates
        self.data = data

    def eval(self, *args: Any, **kwargs: Any) -> np.ndarray:
        return self.get_value("values")

    def fractions(self) -> List[Tuple[int, int]]:
        return [(int(n), int(d)) for n, d in zip(self.get_value("numerators"),
                                                 self.get_value("denominators"))]

    def print(self):
        residuals = self.get_value("residuals")
        for x, v, (n, d), r in zip(self.coordinates, self.data, self.fractions(), residuals):
            print(f"{x}: {v} = {fraction_to_string(n, d)} (residual {rounder(r, 2)})")
        n_miss = int(np.sum(~self.get_value("converged")))
        if n_miss:
            print(f"{n_miss} of {len(self.data)} points outside precision "
                  f"{self.get_value('precision')}")

    def plot(self, plot_ax=None, x_label=None, y_label=None):
        fig, ax1, ax2 = twin_x_plot(self.coordinates, self.data, self.eval(),
                                    self.get_value("residuals"), x_label=x_label,
                                    y_label=y_label, plot_ax=plot_ax)
        ax1.legend()
        return fig, ax1, ax2


class FareyApprox(Analysis):
    """Rationalize every point of a 1d trace with best_rational_approximation.

    Parameters
    ----------
    coordinates
        1d sweep axis of the trace
    data
        1d array of real values, same length as coordinates
    """

    def pre_process(self):
        self.coordinates = np.asarray(self.coordinates, dtype=float)
        self.data = np.asarray(self.data, dtype=float)
        if self.coordinates.shape != self.data.shape:
            raise ValueError(f"coordinates shape {self.coordinates.shape} does not match data "
                             f"shape {self.data.shape}")

    def analyze(self, coordinates, data, denominator_max: int = DENOMINATOR_MAX,
                precision: float = PRECISION) -> FareyResult:
        numerators = np.zeros(len(data), dtype=np.int64)
        denominators = np.ones(len(data), dtype=np.int64)
        for i, x in enumerate(data):
            numerators[i], denominators[i] = best_rational_approximation(x, denominator_max,
                                                                         precision)
        values = numerators / denominators
        residuals = data - values
        converged = np.abs(residuals) <= precision

        n_miss = int(np.sum(~converged))
        if n_miss:
            warnings.warn(f"{n_miss} of {len(data)} points did not reach precision {precision} "
                          f"with denominators <= {denominator_max}")

        return FareyResult(coordinates, data,
                           dict(numerators=numerators, denominators=denominators, values=values,
                                residuals=residuals, converged=converged, precision=precision,
                                denominator_max=denominator_max))
