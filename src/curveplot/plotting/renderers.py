"""
renderers.py
------------

Renderer factories.

A renderer is any callable ``(canvas, viewport) -> None`` drawing in world
coordinates; ``GraphingCanvas.render`` calls its renderers in list order
inside the viewport transform. Factories here close over the data to plot and
delegate the numerics to ``curveplot.curves.sampling``.

Thickness and radius arguments are logical pixels.
"""

from __future__ import annotations

__all__ = [
    "CanvasRenderer", "color_for_index",
    "step_plotter", "function_renderer", "implicit_function_renderer",
    "parametric_renderer", "arc_length_marker_renderer",
    "control_points_renderer", "tangent_handles_renderer",
    "viewport_line_renderer",
]

from typing import Callable, Sequence, Tuple

from matplotlib.colors import hsv_to_rgb

from curveplot.curves.arc_length import ArcLengthParameterization
from curveplot.curves.derivative import ExplicitFunction, ImplicitFunction
from curveplot.curves.interpolators import ParametricEquation
from curveplot.curves.sampling import (
    implicit_sign_changes, sample_explicit, sample_parametric, viewport_line,
)
from curveplot.geometry.rect import Rect
from curveplot.geometry.vec2 import Vec2
from curveplot.plotting.config import ColorSpec, PlotStyle
from curveplot.plotting.mpl_canvas import MplCanvas

CanvasRenderer = Callable[[MplCanvas, Rect], None]

HANDLE_COLOR = (0.9, 0.9, 0.6)
IMPLICIT_DOT_RADIUS = 0.01  # world units


def color_for_index(index: int, count: int) -> Tuple[float, float, float]:
    """Fully saturated RGB color at hue ``index / count`` of the color wheel."""
    hue = (index / count) % 1.0 if count > 0 else 0.0
    r, g, b = hsv_to_rgb((hue, 1.0, 1.0))
    return float(r), float(g), float(b)


# ---------------------------------------------------------------------------
# Function plots
# ---------------------------------------------------------------------------
def step_plotter(fn: ExplicitFunction, count: int, style: PlotStyle) -> CanvasRenderer:
    """One polyline through ``count`` samples of ``y = fn(x)`` across the viewport."""
    def render(canvas: MplCanvas, viewport: Rect) -> None:
        canvas.draw_path(sample_explicit(fn, viewport, count), style)
    return render


def function_renderer(fn: ExplicitFunction, color: ColorSpec, num_steps: int,
                      thickness: float = 3.0) -> CanvasRenderer:
    """Like ``step_plotter`` but drawn as independent line segments."""
    def render(canvas: MplCanvas, viewport: Rect) -> None:
        points = sample_explicit(fn, viewport, num_steps)
        for start, end in zip(points, points[1:]):
            canvas.draw_line(start, end, color, thickness)
    return render


def implicit_function_renderer(count: int, fn: ImplicitFunction,
                               color: ColorSpec) -> CanvasRenderer:
    """Dots on the grid points where ``fn(x, y)`` changes sign."""
    def render(canvas: MplCanvas, viewport: Rect) -> None:
        for p in implicit_sign_changes(fn, viewport, count):
            canvas.draw_circle(p, IMPLICIT_DOT_RADIUS, color)
    return render


# ---------------------------------------------------------------------------
# Curve plots
# ---------------------------------------------------------------------------
def parametric_renderer(curve: ParametricEquation, step_count: int, style: PlotStyle,
                        t_min: float = 0.0, t_max: float = 1.0) -> CanvasRenderer:
    samples = sample_parametric(curve, step_count, t_min, t_max)

    def render(canvas: MplCanvas, viewport: Rect) -> None:
        canvas.draw_path(samples, style)
    return render


def arc_length_marker_renderer(parameterization: ArcLengthParameterization, count: int,
                               color: ColorSpec = "white",
                               radius: float = 4.0) -> CanvasRenderer:
    """``count`` dots equally spaced by arc length along a curve."""
    samples = parameterization.uniform_samples(count)

    def render(canvas: MplCanvas, viewport: Rect) -> None:
        r = canvas.pixel_thickness * radius
        for p in samples:
            canvas.draw_circle(p, r, color)
    return render


def control_points_renderer(points: Sequence[Vec2], radius: float = 10.0) -> CanvasRenderer:
    """Control points as dots colored around the hue wheel."""
    points = tuple(points)

    def render(canvas: MplCanvas, viewport: Rect) -> None:
        r = canvas.pixel_thickness * radius
        for index, p in enumerate(points):
            canvas.draw_circle(p, r, color_for_index(index, len(points)))
    return render


def tangent_handles_renderer(points: Sequence[Vec2], color: ColorSpec = HANDLE_COLOR,
                             thickness: float = 3.0) -> CanvasRenderer:
    """Hermite tangent handles: ``p0 -> p1`` and ``p2 -> p3``."""
    points = tuple(points)
    if len(points) != 4:
        raise ValueError(f"Tangent handles need 4 points, got {len(points)}")

    def render(canvas: MplCanvas, viewport: Rect) -> None:
        canvas.draw_line(points[0], points[1], color, thickness)
        canvas.draw_line(points[2], points[3], color, thickness)
    return render


def viewport_line_renderer(point: Vec2, direction: Vec2, color: ColorSpec,
                           thickness: float = 3.0) -> CanvasRenderer:
    """The infinite line through ``point`` along ``direction``; nothing for a zero direction."""
    def render(canvas: MplCanvas, viewport: Rect) -> None:
        segment = viewport_line(point, direction, viewport)
        if segment is None:
            return
        canvas.draw_line(*segment, color, thickness)
    return render
