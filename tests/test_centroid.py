import numpy as np
import pytest
from scipy import stats

from chisquarechart.engine.centroid import compute_centroid, label_anchor_height, tail_centroid
from chisquarechart.engine.critical import solve
from chisquarechart.engine.cumulative import integrate
from chisquarechart.engine.sampler import build_grid


def tail_mean(x_crit, k):
    """E[X | X > x_crit] for a chi-square(k) variable."""
    return k * stats.chi2.sf(x_crit, k + 2) / stats.chi2.sf(x_crit, k)


@pytest.mark.parametrize("k, alpha_percent", [(2, 5.0), (3, 5.0), (10, 1.0), (10, 20.0), (40, 5.0)])
def test_centroid_is_conditional_tail_mean(k, alpha_percent):
    grid = build_grid(k)
    point = solve(grid, integrate(grid), alpha_percent)
    x_center = tail_centroid(grid, point.crit_index, point.x_crit)
    assert x_center == pytest.approx(tail_mean(point.x_crit, k), abs=0.05)


@pytest.mark.parametrize("k", [1, 3, 7, 25, 90])
@pytest.mark.parametrize("alpha_percent", [0.5, 5.0, 50.0, 95.0])
def test_centroid_lies_inside_rejection_region(k, alpha_percent):
    grid = build_grid(k)
    point = solve(grid, integrate(grid), alpha_percent)
    x_center = tail_centroid(grid, point.crit_index, point.x_crit)
    assert point.x_crit <= x_center <= grid.x_max


def test_empty_tail_uses_geometric_midpoint():
    grid = build_grid(3)
    x_crit = float(grid.x[-1])
    assert tail_centroid(grid, grid.n_intervals, x_crit) == pytest.approx(0.5 * (x_crit + grid.x_max))


def test_zero_mass_tail_uses_geometric_midpoint(flat_grid):
    assert tail_centroid(flat_grid, 4, 12.0) == pytest.approx(21.0)


def test_label_anchor_is_half_the_curve_height():
    grid = build_grid(3)
    point = solve(grid, integrate(grid), 5.0)
    centroid = compute_centroid(grid, point.crit_index, point.x_crit)

    index = int(np.argmax(grid.x >= centroid.x_center))
    assert centroid.y_center == pytest.approx(0.5 * grid.density[index])
    assert 0 < centroid.y_center < 0.5 * grid.max_density


def test_label_anchor_past_domain_uses_critical_sample():
    grid = build_grid(3)
    assert label_anchor_height(grid, 100, grid.x_max + 1.0) == pytest.approx(0.5 * grid.density[100])
