from __future__ import annotations

import numpy as np
import pytest

from chisquarechart.engine.pipeline import ChiSquareEngine
from chisquarechart.engine.sampler import Grid


@pytest.fixture(scope="session")
def engine() -> ChiSquareEngine:
    return ChiSquareEngine()


@pytest.fixture(scope="session")
def default_result(engine):
    """The chart the application opens with: k=3, alpha=5%."""
    return engine.compute(3, 5.0)


@pytest.fixture
def flat_grid() -> Grid:
    """A grid without any probability mass."""
    x = np.linspace(0.0, 30.0, 11)
    return Grid(k=1, x=x, density=np.zeros_like(x), dx=3.0, x_min=0.0, x_max=30.0, max_density=0.0)
