from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from chisquarechart.engine.sampler import Grid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Centroid:
    """
    Label anchor of the rejection region, in data coordinates.

    Attributes:
        x_center: Area-weighted mean x of the tail region.
        y_center: Half of the density at the first sample at or right of ``x_center``.
    """
    x_center: float
    y_center: float


def tail_centroid(grid: Grid, crit_index: int, x_crit: float) -> float:
    """
    Area-weighted mean x of the tail region beyond the critical value.

    Each interval [i-1, i] for i in crit_index+1..N contributes its trapezoid area
    at its midpoint. When the tail carries no mass the midpoint of [x_crit, x_max]
    is returned instead.

    Args:
        grid: Sampled density.
        crit_index: Grid index of the critical value.
        x_crit: Critical value.

    Returns:
        The x coordinate of the centroid.
    """
    x = grid.x[crit_index:]
    density = grid.density[crit_index:]

    weights = 0.5 * (density[:-1] + density[1:]) * grid.dx
    midpoints = 0.5 * (x[:-1] + x[1:])

    weight_sum = float(weights.sum())
    if weight_sum > 0:
        return float((midpoints * weights).sum()) / weight_sum

    logger.debug(f"Tail beyond x={x_crit:.4f} has no mass, using the geometric midpoint.")
    return 0.5 * (x_crit + grid.x_max)


def label_anchor_height(grid: Grid, crit_index: int, x_center: float) -> float:
    """Half of the density at the first sample at or beyond ``x_center``, searching from ``crit_index``."""
    beyond = grid.x[crit_index:] >= x_center
    index = crit_index + int(np.argmax(beyond)) if beyond.any() else crit_index
    return 0.5 * float(grid.density[index])


def compute_centroid(grid: Grid, crit_index: int, x_crit: float) -> Centroid:
    x_center = tail_centroid(grid, crit_index, x_crit)
    return Centroid(x_center=x_center, y_center=label_anchor_height(grid, crit_index, x_center))
