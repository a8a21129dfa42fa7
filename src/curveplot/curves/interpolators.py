"""
interpolators.py
----------------

Parametric curves driven by control points.

Every interpolator takes an ordered, fixed-arity sequence of ``Vec2`` control
points and returns a pure function ``t -> Vec2``. The single-segment curves
map ``t in [0, 1]`` onto the whole curve:

  - quadratic  (a, b, c):    f(0) = a, f(1/2) = b, f(1) = c
  - cubic      (a, b, c, d): f(0) = a, f(1/3) = b, f(2/3) = c, f(1) = d
  - Hermite    (a, b, c, d): f(0) = a, f'(0) = b - a, f'(1) = d - c, f(1) = d

Each is a polynomial ``f(t) = sum_k t^k * C_k`` whose vector coefficients
``C_k`` are linear combinations of the control points. The combination
weights are the rows of a basis matrix (ascending powers of t), obtained in
closed form by solving the four (or three) interpolation constraints. For the
quadratic case:

    f(t) = (2a - 4b + 2c) t^2 + (-3a + 4b - c) t + a

The segment chain maps ``t`` onto ``[0, N-1]`` and clamps outside [0, 1], so
it never extrapolates beyond the control polygon.
"""

from __future__ import annotations

__all__ = [
    "ParametricEquation", "SubRange", "InterpolatorKind",
    "QUADRATIC_BASIS", "CUBIC_BASIS", "HERMITE_BASIS",
    "remap_parameter_to_sub_range",
    "line_segment_interpolator", "line_segments_interpolator",
    "quadratic_interpolator", "cubic_interpolator", "hermite_interpolator",
    "make_interpolator",
]

import math
from enum import Enum
from typing import Callable, NamedTuple, Optional, Sequence, Tuple

from curveplot.geometry.errors import InvalidControlPointsError
from curveplot.geometry.vec2 import Vec2

ParametricEquation = Callable[[float], Vec2]
Basis = Tuple[Tuple[float, ...], ...]


# =============================================================================
# Basis matrices: row k holds the control-point weights of the t^k coefficient
# =============================================================================
QUADRATIC_BASIS: Basis = (
    ( 1.0,  0.0,  0.0),
    (-3.0,  4.0, -1.0),
    ( 2.0, -4.0,  2.0),
)

# Lagrange polynomials on the nodes 0, 1/3, 2/3, 1 expanded in powers of t.
CUBIC_BASIS: Basis = (
    ( 1.0,   0.0,   0.0,  0.0),
    (-5.5,   9.0,  -4.5,  1.0),
    ( 9.0, -22.5,  18.0, -4.5),
    (-4.5,  13.5, -13.5,  4.5),
)

# Standard Hermite basis with tangents m0 = b - a and m1 = d - c substituted.
HERMITE_BASIS: Basis = (
    ( 1.0,  0.0,  0.0,  0.0),
    (-1.0,  1.0,  0.0,  0.0),
    (-1.0, -2.0,  1.0,  2.0),
    ( 1.0,  1.0, -1.0, -1.0),
)


class SubRange(NamedTuple):
    index: int
    parameter: float


def remap_parameter_to_sub_range(parameter: float, count: int) -> SubRange:
    """Split ``parameter`` in [0, 1] into ``(segment index, local parameter)``.

    ``parameter <= 0`` clamps to the start of the first segment and
    ``parameter >= 1`` to the end of the last one.
    """
    if parameter <= 0:
        return SubRange(0, 0.0)
    if parameter >= 1:
        return SubRange(count - 1, 1.0)
    scaled = parameter * count
    index = min(int(math.floor(scaled)), count - 1)
    return SubRange(index, scaled - index)


def _require_points(points: Sequence[Vec2], count: int, name: str) -> Tuple[Vec2, ...]:
    points = tuple(points)
    if len(points) != count:
        raise InvalidControlPointsError(
            f"{name} needs exactly {count} control points, got {len(points)}."
        )
    return points


def _polynomial_interpolator(basis: Basis, points: Tuple[Vec2, ...]) -> ParametricEquation:
    coefficients = tuple(
        Vec2.linear_combination(*zip(weights, points)) for weights in basis
    )

    def curve(t: float) -> Vec2:
        # Horner evaluation of sum_k t^k * C_k
        x = y = 0.0
        for coeff in reversed(coefficients):
            x = x * t + coeff.x
            y = y * t + coeff.y
        return Vec2(x, y)

    return curve


# =============================================================================
# Interpolators
# =============================================================================
def line_segment_interpolator(points: Sequence[Vec2]) -> ParametricEquation:
    a, b = _require_points(points, 2, "Line segment")
    return lambda t: a.lerp(b, t)


def line_segments_interpolator(points: Sequence[Vec2]) -> ParametricEquation:
    """Polyline through all points, ``t`` spread evenly over the segments."""
    points = tuple(points)
    num_segments = len(points) - 1
    if num_segments < 1:
        constant = points[0] if points else Vec2.ZERO
        return lambda t: constant

    segments = tuple(
        line_segment_interpolator(points[i:i + 2]) for i in range(num_segments)
    )

    def curve(t: float) -> Vec2:
        index, parameter = remap_parameter_to_sub_range(t, num_segments)
        return segments[index](parameter)

    return curve


def quadratic_interpolator(points: Sequence[Vec2]) -> ParametricEquation:
    return _polynomial_interpolator(QUADRATIC_BASIS, _require_points(points, 3, "Quadratic"))


def cubic_interpolator(points: Sequence[Vec2]) -> ParametricEquation:
    return _polynomial_interpolator(CUBIC_BASIS, _require_points(points, 4, "Cubic"))


def hermite_interpolator(points: Sequence[Vec2]) -> ParametricEquation:
    return _polynomial_interpolator(HERMITE_BASIS, _require_points(points, 4, "Hermite"))


# =============================================================================
# Kind dispatch
# =============================================================================
class InterpolatorKind(Enum):
    LINE_SEGMENTS = "l"
    QUADRATIC = "q"
    CUBIC = "c"
    HERMITE = "h"

    @property
    def key(self) -> str:
        return self.value

    @property
    def point_count(self) -> Optional[int]:
        """Fixed control-point arity, ``None`` for the variable-length chain."""
        return _POINT_COUNTS[self]

    @classmethod
    def from_key(cls, key: str) -> Optional[InterpolatorKind]:
        try:
            return cls(key.lower())
        except ValueError:
            return None


_POINT_COUNTS = {
    InterpolatorKind.LINE_SEGMENTS: None,
    InterpolatorKind.QUADRATIC: 3,
    InterpolatorKind.CUBIC: 4,
    InterpolatorKind.HERMITE: 4,
}

_FACTORIES = {
    InterpolatorKind.LINE_SEGMENTS: line_segments_interpolator,
    InterpolatorKind.QUADRATIC: quadratic_interpolator,
    InterpolatorKind.CUBIC: cubic_interpolator,
    InterpolatorKind.HERMITE: hermite_interpolator,
}


def make_interpolator(kind: InterpolatorKind, points: Sequence[Vec2]) -> ParametricEquation:
    return _FACTORIES[InterpolatorKind(kind)](points)
