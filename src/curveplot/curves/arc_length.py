"""
arc_length.py
-------------

Arc-length reparameterization of parametric curves.

Curve evaluators are uniform in their polynomial parameter t, not in distance
travelled. For even-density sampling or constant-speed animation the curve is
sampled at ``steps + 1`` uniform parameters and the chord lengths between
consecutive samples are accumulated into a monotone lookup table:

    table[i] = length from f(0) to f(i / steps)

Inverting the table maps an arc length ``s`` back to a parameter: binary
search for the bracketing entries ``table[i-1] < s <= table[i]``, then linear
interpolation between ``t = (i-1)/steps`` and ``t = i/steps``. Accuracy grows
with ``steps``; the cost is ``steps + 1`` curve evaluations per table.

Tables are never patched: a new control-point set means a new table.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_ARC_LENGTH_STEPS",
    "build_arc_length_table", "parameter_for_arc_length",
    "ArcLengthParameterization",
]

import math
import logging
from numbers import Integral
from typing import List

import numpy as np
from numpy.typing import NDArray

from curveplot.curves.interpolators import ParametricEquation
from curveplot.geometry.vec2 import Vec2

DEFAULT_ARC_LENGTH_STEPS = 1000

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Table construction and inversion
# ---------------------------------------------------------------------------
def build_arc_length_table(curve: ParametricEquation,
                           steps: int = DEFAULT_ARC_LENGTH_STEPS) -> NDArray[np.float64]:
    """Cumulative chord lengths of ``curve`` at ``steps + 1`` uniform parameters.

    Args:
        curve: Function ``t -> Vec2`` defined on [0, 1].
        steps: Number of chords (>= 1).

    Returns:
        Read-only float64 array of length ``steps + 1`` starting at 0.

    Raises:
        TypeError: If ``steps`` is not an integer.
        ValueError: If ``steps < 1``.
    """
    if isinstance(steps, bool) or not isinstance(steps, Integral):
        raise TypeError(f"steps must be an integer, got {type(steps).__name__}")
    if steps < 1:
        raise ValueError(f"steps must be >= 1, got {steps}")

    samples = np.array(
        [curve(i / steps).components for i in range(steps + 1)],
        dtype=np.float64,
    )
    chords = np.hypot(*np.diff(samples, axis=0).T)
    table = np.concatenate(([0.0], np.cumsum(chords)))
    table.setflags(write=False)

    logger.debug(f"Built arc-length table: steps={steps}, total length={table[-1]:.6g}")
    return table


def parameter_for_arc_length(table: NDArray[np.float64], s: float) -> float:
    """Parameter t in [0, 1] at which the curve has travelled ``s``.

    Lengths outside ``[0, table[-1]]`` clamp to 0 and 1.

    Raises:
        ValueError: If ``s`` is NaN.
    """
    if math.isnan(s):
        raise ValueError("Arc length must be a number, got NaN.")
    last_index = len(table) - 1
    if s <= 0 or last_index < 1:
        return 0.0
    if s >= table[last_index]:
        return 1.0

    # First index with table[index] >= s; table[0] == 0 < s so index >= 1.
    index = int(np.searchsorted(table, s, side="left"))
    length0, length1 = float(table[index - 1]), float(table[index])
    t0, t1 = (index - 1) / last_index, index / last_index
    return t0 + (s - length0) / (length1 - length0) * (t1 - t0)


# ---------------------------------------------------------------------------
# Curve bound to its table
# ---------------------------------------------------------------------------
class ArcLengthParameterization:
    """A curve together with its arc-length table.

    Built eagerly in a single call; immutable afterwards. Use ``rebuild`` when
    the control points (hence the curve) change.

    Example:
        >>> curve = quadratic_interpolator([Vec2(0, 0), Vec2(1, 2), Vec2(2, 0)])
        >>> arc = ArcLengthParameterization(curve, steps=500)
        >>> midpoint = arc.point_at_fraction(0.5)
    """

    __slots__ = ("_curve", "_table")

    def __init__(self, curve: ParametricEquation,
                 steps: int = DEFAULT_ARC_LENGTH_STEPS) -> None:
        self._curve = curve
        self._table = build_arc_length_table(curve, steps)

    @property
    def curve(self) -> ParametricEquation:
        return self._curve

    @property
    def table(self) -> NDArray[np.float64]:
        return self._table

    @property
    def steps(self) -> int:
        return len(self._table) - 1

    @property
    def total_length(self) -> float:
        return float(self._table[-1])

    def parameter_at(self, s: float) -> float:
        return parameter_for_arc_length(self._table, s)

    def point_at_length(self, s: float) -> Vec2:
        return self._curve(self.parameter_at(s))

    def point_at_fraction(self, u: float) -> Vec2:
        """Point after travelling fraction ``u`` (clamped to [0, 1]) of the length."""
        u = max(0.0, min(1.0, u))
        return self.point_at_length(u * self.total_length)

    def uniform_samples(self, count: int) -> List[Vec2]:
        """``count`` points spaced evenly by arc length, both ends included."""
        if count < 2:
            raise ValueError(f"count must be >= 2, got {count}")
        return [self.point_at_fraction(i / (count - 1)) for i in range(count)]

    def rebuild(self, curve: ParametricEquation) -> ArcLengthParameterization:
        return ArcLengthParameterization(curve, self.steps)

    def __repr__(self) -> str:
        return (f"<{self.__class__.__name__} steps={self.steps} "
                f"total_length={self.total_length:.6g}>")
