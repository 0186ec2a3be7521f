from __future__ import annotations

import logging
from math import isfinite, pi, sqrt

logger = logging.getLogger(__name__)


def factorial_int(n: int) -> float:
    """
    Iterative factorial in floating point.

    Args:
        n: Non-negative integer. Values below 2 return 1.

    Returns:
        n! as a float (overflows to ``inf`` for n > 170).
    """
    result = 1.0
    for i in range(2, n + 1):
        result *= i
    return result


def gamma_half_integer(alpha: float) -> float:
    """
    Evaluate the gamma function for non-negative integers and half-integers.

    Only the arguments needed by the chi-square density are supported: ``alpha`` must be
    a non-negative multiple of 0.5 (within floating point rounding).

    Args:
        alpha: Argument of the gamma function.

    Returns:
        Gamma(alpha). Integer arguments n <= 1 return 1. The factorials overflow for
        alpha >= 86.5 (odd k >= 173) and alpha >= 172 (even k >= 344); the result is then
        ``inf`` or NaN.
    """
    two_alpha = int(round(alpha * 2))

    if two_alpha % 2 == 0:
        n = two_alpha // 2
        result = 1.0 if n <= 1 else factorial_int(n - 1)
    else:
        # Gamma(n + 1/2) = (2n)! / (4^n n!) * sqrt(pi)
        n = (two_alpha - 1) // 2
        numerator = factorial_int(2 * n)
        denominator = factorial_int(n)
        for _ in range(n):
            denominator *= 4.0
        result = numerator / denominator * sqrt(pi)

    if not isfinite(result):
        logger.debug(f"Gamma({two_alpha / 2}) exceeds double precision range.")
    return result
