"""
graphing_canvas.py
------------------

A plot region with a background, coordinate axes, tick marks and a border,
composed from an ordered list of renderers.

Render order per frame:
  1. clear the canvas;
  2. inside the viewport transform (clipped to the canvas region):
     background, x axis, y axis, each renderer, the optional extra callback;
  3. the border around the canvas region, in canvas units.
"""

from __future__ import annotations

__all__ = ["GraphingCanvas", "major_tick_positions"]

import math
import logging
from dataclasses import replace
from typing import Any, Iterable, List, Literal, Optional

import numpy as np

from curveplot.geometry.rect import Rect
from curveplot.geometry.transforms import CoordinateMapper
from curveplot.geometry.vec2 import Vec2
from curveplot.plotting.config import AxisSettings, CanvasConfig
from curveplot.plotting.mpl_canvas import MplCanvas
from curveplot.plotting.renderers import CanvasRenderer

Axis = Literal["x", "y"]

TICK_FRACTION = 1.0 / 40.0  # major tick half-length as a fraction of the viewport


def major_tick_positions(minimum: float, interval: float, major_step: float) -> List[float]:
    """Multiples of ``major_step`` within ``[minimum, minimum + interval]``.

    Returns an empty list when ``major_step <= 0``.
    """
    if major_step <= 0:
        return []
    maximum = minimum + interval
    first = math.ceil(minimum / major_step - 1e-9)
    last = math.floor(maximum / major_step + 1e-9)
    if last < first:
        return []
    return [float(k * major_step) for k in np.arange(first, last + 1)]


class GraphingCanvas:
    """Axes, ticks and renderers drawn into an inset region of an ``MplCanvas``.

    Attributes:
        canvas:      The drawing surface.
        canvas_rect: Plot region in canvas units (canvas inset by ``config.inset``).
        viewport:    World-space rect shown in the plot region.
        renderers:   Called in order on every ``render``.
    """

    def __init__(self, canvas: MplCanvas, viewport: Optional[Rect] = None,
                 renderers: Optional[Iterable[CanvasRenderer]] = None) -> None:
        self.canvas = canvas
        self.logger = logging.getLogger(__name__)
        config = canvas.config
        self.canvas_rect = canvas.view_rect.inset(config.inset)
        self.viewport = viewport if viewport is not None else config.viewport
        self.background_color = config.background_color
        self.border_color = config.border_color
        self.border_thickness = config.border_thickness
        self.renderers: List[CanvasRenderer] = list(renderers or [])
        self._axis_x = AxisSettings()
        self._axis_y = AxisSettings()

    @classmethod
    def root(cls, config: Optional[CanvasConfig] = None,
             renderers: Optional[Iterable[CanvasRenderer]] = None) -> GraphingCanvas:
        """A graphing canvas on a fresh ``MplCanvas`` built from ``config``."""
        canvas = MplCanvas(config)
        return cls(canvas, canvas.config.viewport, renderers)

    # -------------------------------------------------------------------------
    # Axis settings
    # -------------------------------------------------------------------------
    @property
    def axis_settings_x(self) -> AxisSettings:
        return self._axis_x

    @property
    def axis_settings_y(self) -> AxisSettings:
        return self._axis_y

    def set_axis_settings_x(self, **changes: Any) -> None:
        """Update some x-axis fields, keeping the others."""
        self._axis_x = replace(self._axis_x, **changes)

    def set_axis_settings_y(self, **changes: Any) -> None:
        self._axis_y = replace(self._axis_y, **changes)

    # -------------------------------------------------------------------------
    # Coordinates
    # -------------------------------------------------------------------------
    @property
    def mapper(self) -> CoordinateMapper:
        return self.canvas.mapper.with_viewport(self.viewport).with_canvas_rect(self.canvas_rect)

    def pointer_to_world(self, normalized: Vec2) -> Vec2:
        """World position under a pointer given in normalized canvas coordinates (y up)."""
        return self.mapper.normalized_to_world(normalized)

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------
    def render(self, fn: Optional[CanvasRenderer] = None) -> None:
        canvas = self.canvas
        canvas.clear()
        with canvas.render_in_viewport(self.canvas_rect, self.viewport):
            canvas.draw_rect(self.viewport, fill_color=self.background_color)
            self._draw_axis("x")
            self._draw_axis("y")
            for renderer in self.renderers:
                renderer(canvas, self.viewport)
            if fn is not None:
                fn(canvas, self.viewport)

        if self.border_thickness > 0:
            canvas.draw_rect(self.canvas_rect, stroke=(self.border_color, self.border_thickness))

    def _draw_axis(self, axis: Axis) -> None:
        settings = self._axis_x if axis == "x" else self._axis_y
        if not settings.visible:
            return

        viewport = self.viewport
        lo, hi = viewport.origin, viewport.far_corner
        if axis == "x":
            start, end = Vec2(lo.x, 0.0), Vec2(hi.x, 0.0)
            n = Vec2.RIGHT
            d = Vec2(0.0, viewport.height * TICK_FRACTION)
        else:
            start, end = Vec2(0.0, lo.y), Vec2(0.0, hi.y)
            n = Vec2.UP
            d = Vec2(viewport.width * TICK_FRACTION, 0.0)
        d2 = d.scale(0.5)

        color, thickness = settings.color, settings.thickness
        self.canvas.draw_line(start, end, color, thickness)

        step = settings.major_step
        for i in major_tick_positions(viewport.origin.get(axis), viewport.size.get(axis), step):
            p = n.scale(i)
            # The axis line itself marks the origin.
            if not math.isclose(i, 0.0, abs_tol=1e-12):
                self.canvas.draw_line(p + d, p - d, color, thickness)
            for j in range(1, settings.minor_divisions):
                h = n.scale(j * step / settings.minor_divisions)
                self.canvas.draw_line(p + h + d2, p + h - d2, color, thickness / 2)

    def save(self, path) -> None:
        self.render()
        self.canvas.save(path)

    def close(self) -> None:
        self.canvas.close()

    def __repr__(self) -> str:
        return (f"<{self.__class__.__name__} viewport={self.viewport} "
                f"canvas_rect={self.canvas_rect} renderers={len(self.renderers)}>")
