import numpy as np
import pytest
from scipy import stats

from chisquarechart.engine.cumulative import integrate
from chisquarechart.engine.sampler import build_grid


@pytest.mark.parametrize("k", [1, 2, 3, 5, 10, 40, 120])
def test_cdf_is_monotone_and_normalized(k):
    cdf = integrate(build_grid(k))
    assert len(cdf) == 10001
    assert cdf[0] == 0.0
    assert np.all(np.diff(cdf.values) >= 0)
    assert cdf[-1] == pytest.approx(1.0, abs=1e-9)


def test_total_area_is_close_to_one():
    cdf = integrate(build_grid(4))
    assert cdf.total_area == pytest.approx(1.0, abs=1e-4)


def test_cdf_follows_scipy_for_smooth_density():
    grid = build_grid(5)
    cdf = integrate(grid)
    np.testing.assert_allclose(cdf.values, stats.chi2.cdf(grid.x, 5), atol=1e-4)


def test_trapezoid_steps():
    grid = build_grid(3)
    cdf = integrate(grid)
    first_area = 0.5 * (grid.density[0] + grid.density[1]) * grid.dx
    assert cdf[1] == pytest.approx(first_area / cdf.total_area)


def test_no_mass_gives_zero_table(flat_grid):
    cdf = integrate(flat_grid)
    assert cdf.total_area == 0.0
    assert np.all(cdf.values == 0.0)
    assert len(cdf) == len(flat_grid)


def test_values_are_read_only():
    cdf = integrate(build_grid(3))
    with pytest.raises(ValueError):
        cdf.values[0] = 0.5
