"""
Configuration & Defaults
========================
This module serves as the central registry for numerical settings and chart
dimensions.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (sample counts, margins) scattered
   throughout the engine and the renderer.
2. Explicitness: Both the engine and the renderer receive their settings as
   objects, so nothing depends on module-level globals.

Exports:
    EngineConfig: Sampling resolution and domain selection.
    ChartLayout: Chart size and plot margins in pixels.
"""
from __future__ import annotations

from dataclasses import dataclass


DEFAULT_DOF: int = 3
DEFAULT_ALPHA_PERCENT: float = 5.0
DEFAULT_EXPORT_FILENAME: str = "chi_square_plot.svg"


@dataclass(frozen=True)
class EngineConfig:
    """
    Numerical settings of the chi-square engine.

    Attributes:
        sample_count: Number of grid intervals N (the grid has N+1 samples).
        padding_sigmas: Number of standard deviations added to the mean for the domain end.
        min_domain_width: Lower bound for the upper end of the domain.
        default_alpha: Tail probability used when the requested one is out of (0, 1).
    """
    sample_count: int = 10000
    padding_sigmas: float = 10.0
    min_domain_width: float = 30.0
    default_alpha: float = 0.05


@dataclass(frozen=True)
class ChartLayout:
    """Chart dimensions in pixels (SVG orientation, y grows downwards)."""
    width: int = 600
    height: int = 400
    margin_top: int = 60
    margin_right: int = 20
    margin_bottom: int = 40
    margin_left: int = 50

    @property
    def inner_width(self) -> int:
        return self.width - self.margin_left - self.margin_right

    @property
    def inner_height(self) -> int:
        return self.height - self.margin_top - self.margin_bottom

    @property
    def baseline(self) -> int:
        """Pixel row of the x-axis."""
        return self.margin_top + self.inner_height
