"""
Engine Pipeline
===============
Runs the full numerical pass for one (k, alpha) request.

CurveSampler -> CumulativeIntegrator -> CriticalValueSolver -> TailCentroidCalculator

Every call builds a fresh result; nothing is cached or shared between calls,
so the engine can be used from several threads at once.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Optional

from chisquarechart.config import EngineConfig
from chisquarechart.engine.centroid import Centroid, compute_centroid
from chisquarechart.engine.critical import CriticalPoint, solve
from chisquarechart.engine.cumulative import CumulativeTable, integrate
from chisquarechart.engine.sampler import Grid, build_grid

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class ChartResult:
    """Everything the renderer needs to draw one chart."""
    k: int
    alpha_percent: float
    grid: Grid
    cdf: CumulativeTable
    critical: CriticalPoint
    centroid: Centroid

    @property
    def effective_alpha_percent(self) -> float:
        """Significance level actually used, after the out-of-range fallback."""
        return self.critical.alpha * 100


@dataclass(frozen=True)
class ChiSquareEngine:
    config: EngineConfig = field(default_factory=EngineConfig)

    def compute(self, k: int, alpha_percent: float) -> ChartResult:
        """
        Recompute the chart data for ``k`` degrees of freedom and significance ``alpha_percent``.

        Args:
            k: Degrees of freedom. Must be a positive integer; callers validate it.
            alpha_percent: Significance level in percent. Values outside (0, 100)
                fall back to the configured default.

        Returns:
            Grid, cumulative table, critical point and centroid of the tail region.
        """
        logger.debug(f"Computing chi-square chart for k={k}, alpha={alpha_percent}%")

        grid = build_grid(k, self.config)
        cdf = integrate(grid)
        critical = solve(grid, cdf, alpha_percent, default_alpha=self.config.default_alpha)
        centroid = compute_centroid(grid, critical.crit_index, critical.x_crit)

        return ChartResult(
            k=k,
            alpha_percent=alpha_percent,
            grid=grid,
            cdf=cdf,
            critical=critical,
            centroid=centroid,
        )


def compute_chart(k: int, alpha_percent: float, config: Optional[EngineConfig] = None) -> ChartResult:
    """Shortcut for ``ChiSquareEngine(config).compute(k, alpha_percent)``."""
    return ChiSquareEngine(config or EngineConfig()).compute(k, alpha_percent)
