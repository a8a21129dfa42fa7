"""
sampling.py
-----------

Turning functions and curves into world-space point sequences.

These are the numerical halves of the plot renderers: each returns plain
``Vec2`` lists so it can be checked without a drawing surface.

  - ``sample_explicit``:        y = f(x) across the viewport width
  - ``sample_parametric``:      f(t) at evenly spaced parameters
  - ``implicit_sign_changes``:  grid cells where f(x, y) crosses zero
  - ``viewport_line``:          an infinite line clipped to the viewport span
"""

from __future__ import annotations

__all__ = [
    "sample_explicit", "sample_parametric", "implicit_sign_changes",
    "y_on_line", "viewport_line",
]

from typing import List, Optional, Tuple

import numpy as np

from curveplot.curves.derivative import ExplicitFunction, ImplicitFunction
from curveplot.curves.interpolators import ParametricEquation
from curveplot.geometry.rect import Rect
from curveplot.geometry.vec2 import Vec2


def sample_explicit(fn: ExplicitFunction, viewport: Rect, count: int) -> List[Vec2]:
    """``count`` points ``(x, fn(x))`` with x spanning the viewport, ends included."""
    if count < 2:
        raise ValueError(f"count must be >= 2, got {count}")
    xs = np.linspace(viewport.origin.x, viewport.far_corner.x, count)
    return [Vec2(float(x), fn(float(x))) for x in xs]


def sample_parametric(curve: ParametricEquation, step_count: int,
                      t_min: float = 0.0, t_max: float = 1.0) -> List[Vec2]:
    """``step_count + 1`` samples of ``curve`` over ``[t_min, t_max]``, ends included."""
    if step_count < 1:
        raise ValueError(f"step_count must be >= 1, got {step_count}")
    step = (t_max - t_min) / step_count
    # The last parameter is set exactly so accumulated rounding cannot drop it.
    return [curve(t_min + i * step) for i in range(step_count)] + [curve(t_max)]


def implicit_sign_changes(fn: ImplicitFunction, viewport: Rect, count: int) -> List[Vec2]:
    """Grid points (``count`` x ``count`` over the viewport) lying on ``fn = 0``.

    A point qualifies when ``fn`` at any half-step neighbour (left, right, up,
    down) has the opposite sign of ``fn`` at the point itself.
    """
    if count < 2:
        raise ValueError(f"count must be >= 2, got {count}")
    min_x, min_y = viewport.origin
    dx = viewport.width / (count - 1)
    dy = viewport.height / (count - 1)

    hits: List[Vec2] = []
    for i in range(count):
        x = min_x + i * dx
        for j in range(count):
            y = min_y + j * dy
            fc = fn(x, y)
            neighbours = (
                fn(x - dx / 2, y), fn(x + dx / 2, y),
                fn(x, y + dy / 2), fn(x, y - dy / 2),
            )
            if any(f * fc < 0 for f in neighbours):
                hits.append(Vec2(x, y))
    return hits


def y_on_line(point: Vec2, direction: Vec2, x: float) -> float:
    """y of the line ``point + s * direction`` at abscissa ``x`` (non-vertical lines)."""
    s = (x - point.x) / direction.x
    return point.y + s * direction.y


def viewport_line(point: Vec2, direction: Vec2,
                  viewport: Rect) -> Optional[Tuple[Vec2, Vec2]]:
    """End points of the line through ``point`` along ``direction`` across the viewport.

    Non-vertical lines span the viewport's x range, vertical lines its y range.
    Returns ``None`` for a zero direction.
    """
    min_x, min_y = viewport.origin
    max_x, max_y = viewport.far_corner

    if direction.x == 0:
        if direction.y == 0:
            return None
        return Vec2(point.x, min_y), Vec2(point.x, max_y)

    return (
        Vec2(min_x, y_on_line(point, direction, min_x)),
        Vec2(max_x, y_on_line(point, direction, max_x)),
    )
