"""
Curve Sampling
==============
Discretizes the chi-square density on a uniform grid.

The domain always starts at zero and extends far enough to the right to hold
practically all of the probability mass, whatever the degrees of freedom.

Classes:
    Sample: One (x, density) point of the curve.
    Grid: The sampled curve with its domain bounds and step.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from math import sqrt
from typing import TYPE_CHECKING, Iterator, NamedTuple, Optional

import numpy as np

from chisquarechart.config import EngineConfig
from chisquarechart.engine.density import chi_square_pdf

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


class Sample(NamedTuple):
    x: float
    density: float


@dataclass(frozen=True, eq=False)
class Grid:
    """
    Uniformly sampled chi-square density.

    Attributes:
        k: Degrees of freedom the grid was built for.
        x: Sample abscissae, strictly increasing, ``x[0] == x_min``.
        density: Density values aligned with ``x``.
        dx: Grid step.
        x_min: Left end of the domain (always 0).
        x_max: Right end of the domain.
        max_density: Largest sampled density, used for vertical scaling.
    """
    k: int
    x: npt.NDArray[np.float64]
    density: npt.NDArray[np.float64]
    dx: float
    x_min: float
    x_max: float
    max_density: float

    def __post_init__(self) -> None:
        self.x.setflags(write=False)
        self.density.setflags(write=False)

    @property
    def n_intervals(self) -> int:
        """Number of grid intervals N (there are N+1 samples)."""
        return len(self.x) - 1

    def __len__(self) -> int:
        return len(self.x)

    def __getitem__(self, index: int) -> Sample:
        return Sample(float(self.x[index]), float(self.density[index]))

    @property
    def samples(self) -> Iterator[Sample]:
        for x, y in zip(self.x, self.density):
            yield Sample(float(x), float(y))


def domain_upper_bound(k: int, config: EngineConfig) -> float:
    """Right end of the sampled domain: mean plus padding, but never below the minimum width."""
    sigma = sqrt(2 * k)
    return max(config.min_domain_width, k + config.padding_sigmas * sigma)


def build_grid(k: int, config: Optional[EngineConfig] = None) -> Grid:
    """
    Sample the chi-square density on ``config.sample_count + 1`` uniformly spaced points.

    Args:
        k: Degrees of freedom (positive integer, not validated).
        config: Engine settings; defaults are used when omitted.

    Returns:
        The sampled grid.
    """
    config = config or EngineConfig()
    n = config.sample_count

    x_min = 0.0
    x_max = domain_upper_bound(k, config)
    dx = (x_max - x_min) / n

    x = x_min + dx * np.arange(n + 1, dtype=np.float64)
    # Keep the last point inside the domain despite rounding of dx * n
    np.minimum(x, x_max, out=x)
    density = np.asarray(chi_square_pdf(x, k), dtype=np.float64)

    max_density = float(density.max())
    logger.debug(f"Sampled chi-square(k={k}) on [0, {x_max:.3f}] with {n + 1} points, max density {max_density:.4f}")

    return Grid(
        k=k,
        x=x,
        density=density,
        dx=dx,
        x_min=x_min,
        x_max=x_max,
        max_density=max_density,
    )
