"""
derivative.py
-------------

Finite-difference derivatives of explicit, implicit and parametric curves.
"""

from __future__ import annotations

__all__ = [
    "ExplicitFunction", "ImplicitFunction",
    "explicit_numeric_derivative", "implicit_numeric_derivative",
    "derivative", "parametric_derivative",
]

import math
from typing import Callable

from curveplot.curves.interpolators import ParametricEquation
from curveplot.geometry.vec2 import Vec2

ExplicitFunction = Callable[[float], float]
ImplicitFunction = Callable[[float, float], float]


def explicit_numeric_derivative(x: float, fn: ExplicitFunction, dx: float) -> float:
    """Central difference of ``fn`` at ``x`` over a window of width ``dx``."""
    y0 = fn(x - dx / 2)
    y1 = fn(x + dx / 2)
    return (y1 - y0) / dx


def implicit_numeric_derivative(p: Vec2, fn: ImplicitFunction, dx: float, dy: float) -> float:
    """Slope dy/dx of the level curve ``fn(x, y) = const`` through ``p``.

    Uses implicit differentiation, ``-f_x / f_y``. The result is infinite
    (or NaN) where the curve is vertical, as the slope itself is.
    """
    x, y = p
    df_dx = explicit_numeric_derivative(x, lambda n: fn(n, y), dx)
    df_dy = explicit_numeric_derivative(y, lambda n: fn(x, n), dy)
    if df_dy == 0:
        return math.nan if df_dx == 0 else math.copysign(math.inf, -df_dx)
    return -df_dx / df_dy


def derivative(fn: ExplicitFunction, h: float = 1e-7) -> ExplicitFunction:
    """Forward-difference derivative of ``fn`` as a new function."""
    def d_fn(x: float) -> float:
        return (fn(x + h) - fn(x)) / h
    return d_fn


def parametric_derivative(curve: ParametricEquation, t: float, h: float = 1e-6) -> Vec2:
    """Velocity ``f'(t)`` of a curve defined on [0, 1].

    One-sided at the ends of the domain so the curve is never evaluated
    outside [0, 1]; central difference elsewhere.
    """
    if t - h < 0:
        return curve(t + h).sub(curve(t)).div_scale(h)
    if t + h > 1:
        return curve(t).sub(curve(t - h)).div_scale(h)
    return curve(t + h).sub(curve(t - h)).div_scale(2 * h)
