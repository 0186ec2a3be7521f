"""
The ENGINE layer holds the numerical core of the chart.
It has NO knowledge of the GUI (Qt) or of the drawing backend (matplotlib).
"""
from chisquarechart.engine.centroid import Centroid, compute_centroid, tail_centroid
from chisquarechart.engine.critical import CriticalPoint, sanitize_alpha, solve
from chisquarechart.engine.cumulative import CumulativeTable, integrate
from chisquarechart.engine.density import chi_square_pdf
from chisquarechart.engine.gamma import factorial_int, gamma_half_integer
from chisquarechart.engine.pipeline import ChartResult, ChiSquareEngine, compute_chart
from chisquarechart.engine.sampler import Grid, Sample, build_grid

__all__ = [
    "Centroid",
    "ChartResult",
    "ChiSquareEngine",
    "CriticalPoint",
    "CumulativeTable",
    "Grid",
    "Sample",
    "build_grid",
    "chi_square_pdf",
    "compute_centroid",
    "compute_chart",
    "factorial_int",
    "gamma_half_integer",
    "integrate",
    "sanitize_alpha",
    "solve",
    "tail_centroid",
]
