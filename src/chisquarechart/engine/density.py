from __future__ import annotations

from math import isfinite, log
from typing import TYPE_CHECKING

import numpy as np

from chisquarechart.engine.gamma import gamma_half_integer

if TYPE_CHECKING:
    import numpy.typing as npt


def chi_square_pdf(x: float | npt.NDArray[np.float64], k: int) -> float | npt.NDArray[np.float64]:
    """
    Chi-square probability density with ``k`` degrees of freedom.

    The product coefficient * x^(alpha-1) * exp(-x/2) is evaluated as the exponential
    of a sum of logarithms, so large powers of x do not overflow on their own.

    Args:
        x: Point(s) at which to evaluate the density.
        k: Degrees of freedom (positive integer).

    Returns:
        The density at ``x``; zero wherever ``x <= 0``, and zero everywhere when
        Gamma(k/2) is out of double precision range.
    """
    alpha = k / 2
    gamma = gamma_half_integer(alpha)

    x_array = np.atleast_1d(np.asarray(x, dtype=np.float64))
    density = np.zeros_like(x_array)

    if isfinite(gamma):
        # log of 1 / (2^alpha * Gamma(alpha))
        log_coefficient = -(alpha * log(2.0) + log(gamma))
        positive = x_array > 0
        x_pos = x_array[positive]
        density[positive] = np.exp(log_coefficient + (alpha - 1) * np.log(x_pos) - x_pos / 2)

    if np.isscalar(x):
        return float(density[0])
    return density
