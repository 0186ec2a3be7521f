"""
Chart Rendering
===============
Draws a computed chi-square chart onto a matplotlib Figure.

The whole figure is one axes spanning the canvas in pixel coordinates
(y grows downwards), so the chart looks the same in the Qt window and in the
exported SVG file.

Functions:
    render_chart: Draw a ChartResult onto a (new or existing) Figure.
    export_svg: Render and save a standalone SVG file.
"""
from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING, Optional, Union

import matplotlib
import numpy as np
from matplotlib.figure import Figure

from chisquarechart.chart.scaling import AxisScaler
from chisquarechart.config import ChartLayout

if TYPE_CHECKING:
    from matplotlib.axes import Axes
    from chisquarechart.engine.pipeline import ChartResult

logger = logging.getLogger(__name__)

DPI = 100
CURVE_COLOR = "black"
REGION_COLOR = "lightblue"
REGION_OPACITY = 0.5
FONT_SIZE = 11

CRITICAL_LABEL = "χ² critical value ≈ {x_crit:.3f}"
REGION_LABEL = "rejection region"
TITLE = "degrees of freedom = {k}, significance level α = {alpha:.1f}%"


def _prepare_axes(figure: Figure, layout: ChartLayout) -> Axes:
    figure.clear()
    figure.set_size_inches(layout.width / DPI, layout.height / DPI)
    figure.set_dpi(DPI)
    figure.patch.set_facecolor("white")

    ax = figure.add_axes((0.0, 0.0, 1.0, 1.0))
    ax.set_xlim(0, layout.width)
    ax.set_ylim(layout.height, 0)
    ax.axis("off")
    return ax


def _draw_axes(ax: Axes, layout: ChartLayout) -> None:
    left = layout.margin_left
    right = layout.margin_left + layout.inner_width
    ax.plot([left, right], [layout.baseline, layout.baseline], color="black", lw=1)
    ax.plot([left, left], [layout.margin_top, layout.baseline], color="black", lw=1)
    ax.text(left + layout.inner_width / 2, layout.height - 5, "x",
            ha="center", va="baseline", fontsize=FONT_SIZE)


def _draw_curve(ax: Axes, result: ChartResult, scaler: AxisScaler) -> None:
    grid = result.grid
    ax.plot(scaler.x(grid.x), scaler.y(grid.density), color=CURVE_COLOR, lw=2, gid="density-curve")


def _draw_rejection_region(ax: Axes, result: ChartResult, scaler: AxisScaler) -> None:
    grid = result.grid
    crit = result.critical

    # From (x_crit, 0) along the curve and back down at x_max
    xs = np.concatenate(([crit.x_crit], grid.x[crit.crit_index:], [grid.x_max]))
    ys = np.concatenate(([scaler.baseline], scaler.y(grid.density[crit.crit_index:]), [scaler.baseline]))
    ax.fill(scaler.x(xs), ys, color=REGION_COLOR, alpha=REGION_OPACITY, lw=0, gid="rejection-region")


def _draw_critical_markers(ax: Axes, result: ChartResult, scaler: AxisScaler, layout: ChartLayout) -> None:
    x_crit = result.critical.x_crit
    sx = scaler.x(x_crit)

    ax.plot([sx, sx], [layout.margin_top, scaler.baseline], color="black", lw=1,
            linestyle=(0, (4, 4)), gid="critical-line")
    ax.plot([sx], [scaler.baseline], marker="o", markersize=8, color="black", gid="critical-dot")
    ax.text(sx, scaler.baseline + 18, CRITICAL_LABEL.format(x_crit=x_crit),
            ha="center", va="baseline", fontsize=FONT_SIZE)


def _draw_region_label(ax: Axes, result: ChartResult, scaler: AxisScaler) -> None:
    center_x = scaler.x(result.centroid.x_center)
    # Vertical midpoint between the baseline and the curve
    center_y = scaler.y(result.centroid.y_center)

    label_x = center_x + 30
    label_y = center_y - 24
    ax.text(label_x, label_y, REGION_LABEL, ha="center", va="baseline", fontsize=FONT_SIZE)
    ax.plot([label_x - 10, center_x], [label_y + 4, center_y], color="black", lw=1, gid="region-pointer")


def _draw_title(ax: Axes, result: ChartResult, layout: ChartLayout) -> None:
    ax.text(layout.width / 2, 25, TITLE.format(k=result.k, alpha=result.alpha_percent),
            ha="center", va="baseline", fontsize=FONT_SIZE + 1)


def render_chart(result: ChartResult, layout: Optional[ChartLayout] = None,
                 figure: Optional[Figure] = None) -> Figure:
    """
    Draw the density curve, the shaded rejection region and its labels.

    Args:
        result: Engine output for one (k, alpha) request.
        layout: Chart size and margins; defaults are used when omitted.
        figure: Figure to draw into (it is cleared first). A new one is created when omitted.

    Returns:
        The figure holding the chart.
    """
    layout = layout or ChartLayout()
    figure = figure if figure is not None else Figure()

    ax = _prepare_axes(figure, layout)
    scaler = AxisScaler.for_grid(result.grid, layout)

    _draw_axes(ax, layout)
    _draw_curve(ax, result, scaler)
    _draw_rejection_region(ax, result, scaler)
    _draw_critical_markers(ax, result, scaler, layout)
    _draw_region_label(ax, result, scaler)
    _draw_title(ax, result, layout)

    return figure


def export_svg(result: ChartResult, path: Union[str, os.PathLike],
               layout: Optional[ChartLayout] = None, figure: Optional[Figure] = None) -> str:
    """
    Render the chart and save it as a standalone SVG file.

    Text is kept as SVG text elements instead of glyph outlines.

    Args:
        result: Engine output to draw.
        path: Target file path.
        layout: Chart size and margins.
        figure: Already rendered figure to save. It is rendered from ``result`` when omitted.

    Returns:
        The path the file was written to.
    """
    if figure is None:
        figure = render_chart(result, layout)

    path = os.fspath(path)
    with matplotlib.rc_context({"svg.fonttype": "none"}):
        figure.savefig(path, format="svg", dpi=DPI, facecolor="white")

    logger.info(f"Chart exported to {path}")
    return path
