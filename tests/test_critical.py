import logging

import numpy as np
import pytest
from scipy import stats

from chisquarechart.engine.critical import find_crossing_index, sanitize_alpha, solve
from chisquarechart.engine.cumulative import CumulativeTable, integrate
from chisquarechart.engine.sampler import build_grid


def critical_value(k, alpha_percent):
    grid = build_grid(k)
    return solve(grid, integrate(grid), alpha_percent)


@pytest.mark.parametrize("k, alpha_percent, expected, tol", [
    (3, 5.0, 7.815, 0.05),
    (10, 5.0, 18.307, 0.05),
    (1, 5.0, 3.841, 0.1),
    (50, 50.0, 49.335, 0.05),
])
def test_tabulated_critical_values(k, alpha_percent, expected, tol):
    assert critical_value(k, alpha_percent).x_crit == pytest.approx(expected, abs=tol)


@pytest.mark.parametrize("k", [2, 3, 4, 5, 8, 15, 30])
@pytest.mark.parametrize("alpha_percent", [1.0, 5.0, 10.0, 25.0])
def test_critical_value_matches_scipy(k, alpha_percent):
    expected = stats.chi2.isf(alpha_percent / 100, k)
    assert critical_value(k, alpha_percent).x_crit == pytest.approx(expected, abs=0.02)


@pytest.mark.parametrize("k", [1, 3, 10])
def test_larger_alpha_never_moves_critical_value_right(k):
    grid = build_grid(k)
    cdf = integrate(grid)
    x_crits = [solve(grid, cdf, a).x_crit for a in np.linspace(0.5, 99.5, 60)]
    assert all(later <= earlier for earlier, later in zip(x_crits, x_crits[1:]))


def test_crossing_is_leftmost_and_interpolated():
    grid = build_grid(3)
    cdf = integrate(grid)
    point = solve(grid, cdf, 5.0)

    i = point.crit_index
    assert cdf[i] >= 0.95 > cdf[i - 1]
    assert grid.x[i - 1] <= point.x_crit <= grid.x[i]
    assert point.alpha == 0.05


@pytest.mark.parametrize("alpha_percent", [150.0, 100.0, 0.0, -3.0, float("nan"), float("inf")])
def test_out_of_range_alpha_falls_back_to_five_percent(alpha_percent):
    reference = critical_value(3, 5.0)
    point = critical_value(3, alpha_percent)
    assert point == reference


def test_fallback_is_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="chisquarechart"):
        assert sanitize_alpha(150.0) == 0.05
    assert "out of range" in caplog.text


def test_sanitize_alpha_custom_default():
    assert sanitize_alpha(-1.0, default=0.1) == 0.1
    assert sanitize_alpha(2.5) == pytest.approx(0.025)


def test_cdf_already_at_target_gives_left_edge(flat_grid):
    cdf = CumulativeTable(values=np.ones(len(flat_grid)), total_area=1.0)
    point = solve(flat_grid, cdf, 5.0)
    assert point.crit_index == 0
    assert point.x_crit == 0.0


def test_zero_mass_grid_collapses_to_lower_edge(flat_grid):
    cdf = integrate(flat_grid)
    point = solve(flat_grid, cdf, 5.0)
    assert point.crit_index == flat_grid.n_intervals
    assert point.x_crit == flat_grid.x[-2]


def test_find_crossing_index_defaults_to_last():
    cdf = CumulativeTable(values=np.array([0.0, 0.2, 0.4]), total_area=1.0)
    assert find_crossing_index(cdf, 0.9) == 2
    assert find_crossing_index(cdf, 0.2) == 1


def test_sanitize_alpha_replaces_nan():
    assert sanitize_alpha(float("nan")) == 0.05
