"""
conftest.py
-----------
Shared pytest fixtures for curveplot tests.
"""

import pytest
import numpy as np
import matplotlib
matplotlib.use("Agg")  # headless backend for CI
import matplotlib.pyplot as plt

from curveplot.geometry import Rect, Vec2
from curveplot.plotting import CanvasConfig, MplCanvas


# -----------------------------------------------------------------------------
# Drawing surfaces
# -----------------------------------------------------------------------------
@pytest.fixture(scope="function")
def canvas():
    """A 200x200 canvas at density 1; the figure is closed after the test."""
    c = MplCanvas(CanvasConfig(size_px=(200, 200), pixel_density=1.0))
    yield c
    c.close()


@pytest.fixture(autouse=True)
def _close_figures():
    yield
    plt.close("all")


# -----------------------------------------------------------------------------
# Geometry
# -----------------------------------------------------------------------------
@pytest.fixture
def square_viewport() -> Rect:
    return Rect.create_ranges((-2, 2), (-2, 2))


@pytest.fixture
def cubic_points():
    return [Vec2(0, 0), Vec2(1, 2), Vec2(2, -1), Vec2(3, 1)]


@pytest.fixture
def random_points():
    """Four seeded random control points in [-2, 2]^2."""
    rng = np.random.default_rng(1234)
    return [Vec2(float(x), float(y)) for x, y in rng.uniform(-2, 2, size=(4, 2))]
