"""
test_arc_length.py
------------------
Unit tests for curves/arc_length.py
"""

import math

import numpy as np
import pytest

from curveplot.curves import (
    DEFAULT_ARC_LENGTH_STEPS, ArcLengthParameterization, build_arc_length_table,
    cubic_interpolator, line_segment_interpolator, parameter_for_arc_length,
    quadratic_interpolator,
)
from curveplot.geometry import Vec2


@pytest.fixture
def straight():
    """Line from (0, 0) to (3, 4): length 5, uniform speed."""
    return line_segment_interpolator([Vec2(0, 0), Vec2(3, 4)])


@pytest.fixture
def quadratic():
    return quadratic_interpolator([Vec2(0, 0), Vec2(1, 2), Vec2(2, 0)])


# ---------------------------------------------------------------------------
# 1. Table construction
# ---------------------------------------------------------------------------

def test_table_shape_and_start(straight):
    """steps + 1 entries starting at 0."""
    table = build_arc_length_table(straight, 10)
    assert table.shape == (11,)
    assert table[0] == 0
    assert table[-1] == pytest.approx(5.0)
    assert np.allclose(table, np.linspace(0, 5, 11))


def test_table_is_monotone(quadratic, random_points):
    """Cumulative lengths never decrease."""
    for curve in (quadratic, cubic_interpolator(random_points)):
        table = build_arc_length_table(curve, 200)
        assert np.all(np.diff(table) >= 0)


def test_table_is_read_only(straight):
    """The returned table is frozen."""
    table = build_arc_length_table(straight, 4)
    with pytest.raises(ValueError):
        table[1] = 0.0


def test_table_converges_to_circle_length():
    """A fine table of a unit circle measures 2*pi."""
    circle = lambda t: Vec2.polar(2 * math.pi * t)
    assert build_arc_length_table(circle, 2000)[-1] == pytest.approx(2 * math.pi, rel=1e-5)


@pytest.mark.parametrize("steps, exc", [(0, ValueError), (-3, ValueError),
                                        (2.5, TypeError), (True, TypeError)])
def test_invalid_steps(straight, steps, exc):
    """Non-integer steps raise TypeError, steps < 1 ValueError."""
    with pytest.raises(exc):
        build_arc_length_table(straight, steps)


def test_default_steps(straight):
    assert len(build_arc_length_table(straight)) == DEFAULT_ARC_LENGTH_STEPS + 1


# ---------------------------------------------------------------------------
# 2. Inversion
# ---------------------------------------------------------------------------

def test_parameter_bounds(quadratic):
    """Lengths outside [0, total] clamp to 0 and 1."""
    table = build_arc_length_table(quadratic, 100)
    total = table[-1]
    assert parameter_for_arc_length(table, 0) == 0
    assert parameter_for_arc_length(table, total) == 1
    assert parameter_for_arc_length(table, -1) == 0
    assert parameter_for_arc_length(table, total * 2) == 1


def test_parameter_rejects_nan(quadratic):
    """NaN lengths fail loudly instead of indexing past the table."""
    table = build_arc_length_table(quadratic, 4)
    with pytest.raises(ValueError):
        parameter_for_arc_length(table, float("nan"))


def test_parameter_linear_interpolation(straight):
    """On a straight line the parameter is proportional to length."""
    table = build_arc_length_table(straight, 4)
    # entries 0, 1.25, 2.5, 3.75, 5
    assert parameter_for_arc_length(table, 2.5) == pytest.approx(0.5)
    assert parameter_for_arc_length(table, 3.125) == pytest.approx(0.625)
    assert parameter_for_arc_length(table, 0.1) == pytest.approx(0.02)


def test_parameter_with_flat_segment():
    """Repeated table entries resolve to the first parameter reaching them."""
    table = np.array([0.0, 1.0, 1.0, 2.0])
    assert parameter_for_arc_length(table, 1.0) == pytest.approx(1 / 3)
    assert parameter_for_arc_length(table, 1.5) == pytest.approx(5 / 6)


def test_parameter_is_monotone(quadratic):
    """Longer lengths never map to smaller parameters."""
    table = build_arc_length_table(quadratic, 300)
    ts = [parameter_for_arc_length(table, s) for s in np.linspace(0, table[-1], 50)]
    assert all(b >= a for a, b in zip(ts, ts[1:]))


# ---------------------------------------------------------------------------
# 3. ArcLengthParameterization
# ---------------------------------------------------------------------------

def test_parameterization_basics(straight):
    """Table, length and point lookups on a straight line."""
    arc = ArcLengthParameterization(straight, steps=50)
    assert arc.steps == 50
    assert arc.total_length == pytest.approx(5)
    assert arc.curve is straight
    assert arc.point_at_length(2.5).is_close(Vec2(1.5, 2))
    assert arc.point_at_fraction(0.2).is_close(Vec2(0.6, 0.8))
    assert arc.point_at_fraction(-1) == Vec2(0, 0)
    assert arc.point_at_fraction(3).is_close(Vec2(3, 4))
    assert "steps=50" in repr(arc)


def test_uniform_samples_are_equidistant(quadratic):
    """Samples spaced by arc length have near-equal chords."""
    arc = ArcLengthParameterization(quadratic, steps=2000)
    samples = arc.uniform_samples(101)
    assert samples[0].is_close(quadratic(0))
    assert samples[-1].is_close(quadratic(1))
    chord = [a.distance(b) for a, b in zip(samples, samples[1:])]
    assert max(chord) - min(chord) < 1e-2 * max(chord)


def test_uniform_samples_count(quadratic):
    arc = ArcLengthParameterization(quadratic, steps=10)
    with pytest.raises(ValueError):
        arc.uniform_samples(1)


def test_rebuild_uses_new_curve(straight, quadratic):
    """rebuild returns a fresh instance for the new curve."""
    arc = ArcLengthParameterization(straight, steps=20)
    rebuilt = arc.rebuild(quadratic)
    assert rebuilt is not arc
    assert rebuilt.steps == 20
    assert rebuilt.curve is quadratic
    assert arc.total_length == pytest.approx(5)
