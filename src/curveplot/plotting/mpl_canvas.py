"""
mpl_canvas.py
-------------

Matplotlib-backed drawing surface.

The canvas owns one figure whose single axes covers the whole figure and uses
device-pixel data coordinates (origin top-left, y down). Nothing is
transformed by hand: every artist receives the *current* 3x3 matrix as
``Affine2D(matrix) + ax.transData``, so a batch of world-space vertices is
mapped by Matplotlib in one affine step.

Current matrix:
  - top level:               canvas units (y up) -> device pixels
                             (``CoordinateMapper.device_transform``);
  - inside ``render_in_viewport``: world -> canvas region -> device pixels,
                             clipped to the canvas region.

Thickness arguments are logical pixels; they are converted to points using
the pixel density and the figure DPI so lines keep their on-screen width
whatever the current matrix is.

Artists are stacked with increasing z-order so later draws paint over earlier
ones regardless of artist type.
"""

from __future__ import annotations

__all__ = ["MplCanvas", "FIGURE_DPI"]

import os
import logging
from contextlib import contextmanager
from typing import Iterator, List, Literal, Optional, Sequence, Tuple, Union

import numpy as np
from numpy.typing import NDArray
import matplotlib.pyplot as plt
from matplotlib.artist import Artist
from matplotlib.lines import Line2D
from matplotlib.patches import Circle, Polygon, Rectangle
from matplotlib.transforms import Affine2D, Bbox, Transform, TransformedBbox

from curveplot.geometry.matrix import Matrix
from curveplot.geometry.rect import Rect
from curveplot.geometry.transforms import CoordinateMapper, pixel_size, pixel_thickness
from curveplot.geometry.vec2 import Vec2
from curveplot.plotting.config import CanvasConfig, ColorSpec, PlotStyle

FIGURE_DPI = 100
PathLike = Union[str, os.PathLike]
ImageRGBA = NDArray[np.uint8]  # (H, W, 4) RGBA order


class MplCanvas:
    """Drawing surface with an explicit transform stack.

    Example:
        >>> canvas = MplCanvas(CanvasConfig(size_px=(200, 200)))
        >>> with canvas.render_in_viewport(canvas.view_rect.inset(5), viewport):
        ...     canvas.draw_line(Vec2(-1, 0), Vec2(1, 0), "red", 2)
        >>> img = canvas.to_rgba()
    """

    def __init__(self, config: Optional[CanvasConfig] = None) -> None:
        self.config = config or CanvasConfig()
        self.logger = logging.getLogger(__name__)
        self.fig = plt.figure(frameon=False, dpi=FIGURE_DPI)
        self.ax = self.fig.add_axes((0.0, 0.0, 1.0, 1.0))
        self._z = 0
        self.resize(self.config.size)

    # -------------------------------------------------------------------------
    # Geometry
    # -------------------------------------------------------------------------
    def resize(self, canvas_size_px: Vec2) -> None:
        """Install the device transform for a new canvas size."""
        density = self.config.pixel_density
        self.mapper = CoordinateMapper(
            canvas_size_px=canvas_size_px,
            viewport=Rect.create(0.0, 0.0, canvas_size_px.x, canvas_size_px.y),
            pixel_density=density,
        )
        device_w, device_h = canvas_size_px.x * density, canvas_size_px.y * density
        self.fig.set_size_inches(device_w / FIGURE_DPI, device_h / FIGURE_DPI)
        self.ax.set_xlim(0.0, device_w)
        self.ax.set_ylim(device_h, 0.0)
        self.ax.set_autoscale_on(False)
        self.ax.axis("off")

        self._transforms: List[Matrix] = [self.mapper.device_transform]
        self._clips: List[Optional[TransformedBbox]] = [None]
        self.logger.debug(f"Canvas resized to {canvas_size_px} (device {device_w:g}x{device_h:g})")

    @property
    def canvas_size(self) -> Vec2:
        return self.mapper.canvas_size_px

    @property
    def view_rect(self) -> Rect:
        """The whole canvas in canvas units."""
        return self.mapper.view_rect

    @property
    def current_transform(self) -> Matrix:
        return self._transforms[-1]

    @property
    def pixel_size(self) -> Vec2:
        """Logical pixels per current unit along x and y."""
        return pixel_size(self.current_transform, self.config.pixel_density)

    @property
    def pixel_thickness(self) -> float:
        """Current units spanning about one logical pixel."""
        return pixel_thickness(self.current_transform, self.config.pixel_density)

    def _mpl_transform(self) -> Transform:
        return Affine2D(self.current_transform.to_numpy()) + self.ax.transData

    def _points(self, px: float) -> float:
        """Logical pixels -> Matplotlib points."""
        return px * self.config.pixel_density * 72.0 / FIGURE_DPI

    def _add(self, artist: Artist) -> Artist:
        self._z += 1
        artist.set_zorder(self._z)
        artist.set_transform(self._mpl_transform())
        if isinstance(artist, Line2D):
            self.ax.add_line(artist)
        else:
            self.ax.add_patch(artist)
        # add_line/add_patch install the axes clip; replace it afterwards.
        clip = self._clips[-1]
        if clip is not None:
            artist.set_clip_path(None)
            artist.set_clip_box(clip)
        else:
            artist.set_clip_on(False)
        return artist

    # -------------------------------------------------------------------------
    # Viewport rendering
    # -------------------------------------------------------------------------
    @contextmanager
    def render_in_viewport(self, canvas_rect: Rect, viewport: Rect) -> Iterator[CoordinateMapper]:
        """Draw in world coordinates of ``viewport`` mapped onto ``canvas_rect``.

        Drawing is clipped to ``canvas_rect``; the previous transform is
        restored on exit.

        Raises:
            InvalidGeometryError: If ``viewport`` is degenerate.
        """
        mapper = self.mapper.with_viewport(viewport).with_canvas_rect(canvas_rect)
        clip = TransformedBbox(
            Bbox.from_bounds(*canvas_rect.components),
            Affine2D(self.mapper.device_transform.to_numpy()) + self.ax.transData)
        self._transforms.append(mapper.world_to_device)
        self._clips.append(clip)
        try:
            yield mapper
        finally:
            self._transforms.pop()
            self._clips.pop()

    # -------------------------------------------------------------------------
    # Drawing operations (current coordinates)
    # -------------------------------------------------------------------------
    def clear(self, color: ColorSpec = "white") -> None:
        """Remove all artists and fill the canvas with ``color``."""
        for artist in [*self.ax.patches, *self.ax.lines, *self.ax.collections]:
            artist.remove()
        self._z = 0
        with self._top_level():
            self.draw_rect(self.view_rect, fill_color=color)

    @contextmanager
    def _top_level(self) -> Iterator[None]:
        self._transforms.append(self.mapper.device_transform)
        self._clips.append(None)
        try:
            yield
        finally:
            self._transforms.pop()
            self._clips.pop()

    def draw_circle(self, origin: Vec2, radius: float, color: ColorSpec,
                    mode: Literal["fill", "stroke"] = "fill",
                    thickness: float = 1.0) -> Circle:
        if mode == "fill":
            circle = Circle(origin.components, radius, facecolor=color, edgecolor="none")
        else:
            circle = Circle(origin.components, radius, fill=False, edgecolor=color,
                            linewidth=self._points(thickness))
        return self._add(circle)

    def draw_point(self, pt: Vec2, color: ColorSpec) -> Rectangle:
        """A one-logical-pixel square at ``pt``."""
        size = Vec2.ONE.component_div(self.pixel_size)
        return self._add(Rectangle(pt.components, size.x, size.y,
                                   facecolor=color, edgecolor="none"))

    def draw_line(self, start: Vec2, end: Vec2, color: ColorSpec,
                  thickness: float = 6.0) -> Line2D:
        line = Line2D([start.x, end.x], [start.y, end.y], color=color,
                      linewidth=self._points(thickness), solid_capstyle="butt")
        return self._add(line)

    def draw_polygon(self, pts: Sequence[Vec2], color: ColorSpec) -> Polygon:
        xy = np.array([p.components for p in pts], dtype=float).reshape(-1, 2)
        return self._add(Polygon(xy, closed=True, facecolor=color, edgecolor="none"))

    def draw_rect(self, rect: Rect,
                  fill_color: Optional[ColorSpec] = None,
                  stroke: Optional[Tuple[ColorSpec, float]] = None,
                  position: Literal["origin", "centered"] = "origin") -> Rectangle:
        """Fill and/or stroke ``rect``; ``stroke`` is ``(color, thickness_px)``.

        With ``position="centered"`` the rect's origin is its center.
        """
        x, y = rect.origin
        w, h = rect.size
        if position == "centered":
            x, y = x - w / 2, y - h / 2
        stroke_color, stroke_px = stroke if stroke is not None else ("none", 0.0)
        patch = Rectangle(
            (x, y), w, h,
            fill=fill_color is not None,
            facecolor=fill_color if fill_color is not None else "none",
            edgecolor=stroke_color,
            linewidth=self._points(stroke_px),
        )
        return self._add(patch)

    def draw_path(self, points: Sequence[Vec2], style: PlotStyle) -> Optional[Line2D]:
        """Stroke an open polyline through ``points``."""
        if len(points) < 2:
            return None
        xs, ys = zip(*(p.components for p in points))
        line = Line2D(xs, ys, color=style.color, linewidth=self._points(style.thickness),
                      solid_joinstyle="round", solid_capstyle="round")
        if style.dash_pattern:
            # Matplotlib dash lengths are in multiples of the line width.
            line.set_dashes([v / style.thickness for v in style.dash_pattern])
        return self._add(line)

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------
    def to_rgba(self) -> ImageRGBA:
        """Render and return the canvas as an (H, W, 4) uint8 array."""
        self.fig.canvas.draw()
        return np.asarray(self.fig.canvas.buffer_rgba()).copy()

    def save(self, path: PathLike) -> None:
        self.fig.savefig(path, dpi=FIGURE_DPI)
        self.logger.info(f"Saved canvas to {path}")

    def close(self) -> None:
        plt.close(self.fig)

    def __repr__(self) -> str:
        return (f"<{self.__class__.__name__} size={self.canvas_size} "
                f"density={self.config.pixel_density} artists={self._z}>")
