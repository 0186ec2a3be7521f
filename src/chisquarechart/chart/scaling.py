from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from chisquarechart.config import ChartLayout

if TYPE_CHECKING:
    import numpy.typing as npt
    from chisquarechart.engine.sampler import Grid


@dataclass(frozen=True)
class AxisScaler:
    """
    Maps data coordinates to chart pixels (origin top-left, y grows downwards).

    The x domain [x_min, x_max] spans the inner plot width and the density range
    [0, max_density] spans the inner plot height.
    """
    layout: ChartLayout
    x_min: float
    x_max: float
    max_density: float

    @classmethod
    def for_grid(cls, grid: Grid, layout: ChartLayout) -> AxisScaler:
        return cls(layout=layout, x_min=grid.x_min, x_max=grid.x_max, max_density=grid.max_density)

    @property
    def baseline(self) -> float:
        return float(self.layout.baseline)

    def x(self, x: float | npt.NDArray[np.float64]) -> float | npt.NDArray[np.float64]:
        return self.layout.margin_left + (x - self.x_min) / (self.x_max - self.x_min) * self.layout.inner_width

    def y(self, y: float | npt.NDArray[np.float64]) -> float | npt.NDArray[np.float64]:
        if self.max_density == 0:
            # Flat curve sits on the x-axis
            return np.zeros_like(y) + self.baseline if isinstance(y, np.ndarray) else self.baseline
        return self.baseline - (y / self.max_density) * self.layout.inner_height
