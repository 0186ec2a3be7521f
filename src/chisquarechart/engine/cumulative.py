from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt
    from chisquarechart.engine.sampler import Grid

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class CumulativeTable:
    """
    Normalized cumulative distribution aligned index-for-index with a Grid.

    Attributes:
        values: Non-decreasing values, last one equal to 1 (all zeros if the grid has no mass).
        total_area: Trapezoidal integral of the density over the whole grid.
    """
    values: npt.NDArray[np.float64]
    total_area: float

    def __post_init__(self) -> None:
        self.values.setflags(write=False)

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, index: int) -> float:
        return float(self.values[index])


def integrate(grid: Grid) -> CumulativeTable:
    """
    Integrate the sampled density with the trapezoidal rule.

    area_0 = 0, area_i = area_{i-1} + (d_{i-1} + d_i) * dx / 2, normalized by area_N.

    Args:
        grid: Sampled density.

    Returns:
        The normalized cumulative table.
    """
    density = grid.density
    areas = np.zeros(len(density), dtype=np.float64)
    np.cumsum(0.5 * (density[:-1] + density[1:]) * grid.dx, out=areas[1:])

    total_area = float(areas[-1])
    if total_area > 0:
        values = areas / total_area
    else:
        logger.warning(f"Chi-square(k={grid.k}) grid has no probability mass; cumulative table set to zero.")
        values = np.zeros_like(areas)

    return CumulativeTable(values=values, total_area=total_area)
