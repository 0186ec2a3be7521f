"""
Critical Value Search
=====================
Inverts the discretized cumulative distribution to find the left edge of the
upper-tail rejection region.

The search picks the first grid index whose cumulative value reaches
1 - alpha and interpolates linearly inside the preceding interval. The
leftmost crossing and the clamped interpolation together make the critical
value reproducible to grid precision.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import TYPE_CHECKING

import numpy as np

from chisquarechart.config import EngineConfig

if TYPE_CHECKING:
    from chisquarechart.engine.cumulative import CumulativeTable
    from chisquarechart.engine.sampler import Grid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CriticalPoint:
    """
    Attributes:
        x_crit: Left edge of the rejection region.
        crit_index: First grid index with cdf >= 1 - alpha.
        alpha: Tail probability actually used (after the fallback).
    """
    x_crit: float
    crit_index: int
    alpha: float


def sanitize_alpha(alpha_percent: float, default: float = EngineConfig.default_alpha) -> float:
    """
    Convert a significance level in percent to a tail probability.

    Anything outside the open interval (0, 1) after conversion is replaced by ``default``;
    NaN fails the comparison and is replaced as well.
    """
    alpha = alpha_percent / 100
    if not 0 < alpha < 1:
        logger.warning(f"Significance level {alpha_percent}% is out of range, using {default * 100:.1f}%.")
        return default
    return alpha


def find_crossing_index(cdf: CumulativeTable, target: float) -> int:
    """Leftmost index with ``cdf[i] >= target``; the last index when there is none."""
    reached = cdf.values >= target
    if not reached.any():
        return len(cdf) - 1
    return int(np.argmax(reached))


def solve(grid: Grid, cdf: CumulativeTable, alpha_percent: float,
          default_alpha: float = EngineConfig.default_alpha) -> CriticalPoint:
    """
    Find x such that the upper-tail probability beyond it equals alpha.

    Args:
        grid: Sampled density.
        cdf: Normalized cumulative table of ``grid``.
        alpha_percent: Significance level in percent.
        default_alpha: Tail probability used when ``alpha_percent`` is out of range.

    Returns:
        The critical point.
    """
    alpha = sanitize_alpha(alpha_percent, default_alpha)
    target_lower = 1 - alpha

    crit_index = find_crossing_index(cdf, target_lower)

    if crit_index == 0:
        x_crit = float(grid.x[0])
    else:
        cdf_prev = cdf[crit_index - 1]
        cdf_curr = cdf[crit_index]
        width = cdf_curr - cdf_prev
        # Zero-width interval collapses to its lower edge
        t = (target_lower - cdf_prev) / width if width > 0 else 0.0
        t = min(max(t, 0.0), 1.0)
        x_prev = float(grid.x[crit_index - 1])
        x_curr = float(grid.x[crit_index])
        x_crit = x_prev + (x_curr - x_prev) * t

    logger.debug(f"Critical value for k={grid.k}, alpha={alpha}: x={x_crit:.4f} (index {crit_index})")
    return CriticalPoint(x_crit=x_crit, crit_index=crit_index, alpha=alpha)
