"""
transforms.py
-------------

Coordinate-space pipeline: world viewport -> canvas region -> device pixels.

Three spaces are involved:

  - world:   mathematical coordinates, y up, bounded by the *viewport*;
  - canvas:  logical canvas units (CSS-pixel-like), y up, ``[0, W] x [0, H]``;
             the plot occupies the *canvas region* (``canvas_rect``);
  - device:  physical pixels, y down, ``[0, W*d] x [0, H*d]`` for pixel
             density ``d``.

``build_viewport_transform`` maps any rect onto any other rect and is used for
world -> canvas region. ``build_device_transform`` maps canvas units to device
pixels and carries the mandatory y flip. ``CoordinateMapper`` keeps the four
inputs explicit (nothing is read from global state) and composes the two.
"""

from __future__ import annotations

__all__ = [
    "build_viewport_transform", "build_device_transform",
    "pixel_size", "pixel_thickness",
    "CoordinateMapper",
]

import math
import logging
from dataclasses import dataclass, field, replace
from typing import Optional

from curveplot.geometry.errors import InvalidGeometryError
from curveplot.geometry.matrix import Matrix
from curveplot.geometry.rect import Rect
from curveplot.geometry.vec2 import Vec2

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Transform builders
# ---------------------------------------------------------------------------
def build_viewport_transform(source: Rect, dest: Rect) -> Matrix:
    """3x3 affine matrix taking ``source`` origin/far corner to ``dest``'s.

    Raises:
        InvalidGeometryError: If ``source`` has zero width or height.
    """
    return Matrix.viewport_transformation(source, dest)


def build_device_transform(canvas_size_px: Vec2, viewport: Rect,
                           pixel_density: float) -> Matrix:
    """3x3 matrix from canvas units (y up) to device pixels (y down).

        sx = (viewport.width / canvas.x) * density
        sy = -(viewport.height / canvas.y) * density
        tx = 0
        ty = canvas.y * density

    ``viewport`` is the rect the canvas displays in its own units; for a
    canvas showing its full extent it is ``Rect.create(0, 0, *canvas_size_px)``
    and the scale reduces to the pixel density.

    Raises:
        InvalidGeometryError: For a zero or non-finite canvas size, or a
            non-positive pixel density, or when the scale overflows.
    """
    for name, extent in (("width", canvas_size_px.x), ("height", canvas_size_px.y)):
        if extent == 0 or not math.isfinite(extent):
            raise InvalidGeometryError(f"Canvas has degenerate {name} ({extent}).")
    if not (pixel_density > 0 and math.isfinite(pixel_density)):
        raise InvalidGeometryError(f"Pixel density must be positive, got {pixel_density}.")

    sx = (viewport.size.x / canvas_size_px.x) * pixel_density
    sy = (-viewport.size.y / canvas_size_px.y) * pixel_density
    tx = 0.0
    ty = canvas_size_px.y * pixel_density
    if not all(math.isfinite(v) for v in (sx, sy, ty)):
        raise InvalidGeometryError(
            f"Device transform is not finite for canvas {canvas_size_px}, viewport {viewport}.")

    return Matrix([
        [sx, 0.0, 0.0],
        [0.0, sy, 0.0],
        [tx, ty, 1.0],
    ])


def pixel_size(transform: Matrix, pixel_density: float) -> Vec2:
    """Logical pixels per unit along x and y under ``transform``."""
    return Vec2(abs(transform.at(0, 0)), abs(transform.at(1, 1))).div_scale(pixel_density)


def pixel_thickness(transform: Matrix, pixel_density: float) -> float:
    """Length in source units that renders about one logical pixel thick."""
    size = pixel_size(transform, pixel_density).magnitude()
    return 0.0 if size == 0 else 1.0 / size


# ---------------------------------------------------------------------------
# Mapper
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class CoordinateMapper:
    """Explicit world <-> device mapping for one canvas.

    Attributes:
        canvas_size_px: Canvas size in logical pixels.
        viewport:       World-space rect shown in the canvas region.
        canvas_rect:    Canvas region (logical pixels, y up). Defaults to the
                        whole canvas.
        pixel_density:  Device pixels per logical pixel.
    """
    canvas_size_px: Vec2
    viewport: Rect
    canvas_rect: Optional[Rect] = None
    pixel_density: float = 1.0
    _cache: dict = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.canvas_rect is None:
            object.__setattr__(self, "canvas_rect", self.view_rect)

    @property
    def view_rect(self) -> Rect:
        """The full canvas in logical units."""
        return Rect.create(0.0, 0.0, self.canvas_size_px.x, self.canvas_size_px.y)

    # -------------------------------------------------------------------------
    # Matrices (computed once per mapper)
    # -------------------------------------------------------------------------
    @property
    def device_transform(self) -> Matrix:
        if "device" not in self._cache:
            logger.debug(f"Building device transform for canvas {self.canvas_size_px} "
                         f"at density {self.pixel_density}")
            self._cache["device"] = build_device_transform(
                self.canvas_size_px, self.view_rect, self.pixel_density)
        return self._cache["device"]

    @property
    def viewport_transform(self) -> Matrix:
        """World viewport -> canvas region."""
        if "viewport" not in self._cache:
            self._cache["viewport"] = build_viewport_transform(self.viewport, self.canvas_rect)
        return self._cache["viewport"]

    @property
    def world_to_device(self) -> Matrix:
        if "world_to_device" not in self._cache:
            self._cache["world_to_device"] = self.device_transform.multiply(self.viewport_transform)
        return self._cache["world_to_device"]

    @property
    def device_to_world(self) -> Matrix:
        if "device_to_world" not in self._cache:
            self._cache["device_to_world"] = self.world_to_device.inverse()
        return self._cache["device_to_world"]

    # -------------------------------------------------------------------------
    # Point mapping
    # -------------------------------------------------------------------------
    def to_device(self, p: Vec2) -> Vec2:
        return self.world_to_device.apply_to_vec2(p)

    def to_world(self, p: Vec2) -> Vec2:
        return self.device_to_world.apply_to_vec2(p)

    def normalized_to_world(self, n: Vec2) -> Vec2:
        """Map a pointer position normalized over the canvas (y up) to world space."""
        canvas_point = self.view_rect.convert_normalized_coordinate(n)
        return self.viewport_transform.inverse().apply_to_vec2(canvas_point)

    def pixel_size(self) -> Vec2:
        return pixel_size(self.world_to_device, self.pixel_density)

    def pixel_thickness(self) -> float:
        return pixel_thickness(self.world_to_device, self.pixel_density)

    # -------------------------------------------------------------------------
    # Rebuilds
    # -------------------------------------------------------------------------
    def with_viewport(self, viewport: Rect) -> CoordinateMapper:
        return replace(self, viewport=viewport)

    def with_canvas_rect(self, canvas_rect: Rect) -> CoordinateMapper:
        return replace(self, canvas_rect=canvas_rect)

    def with_canvas_size(self, canvas_size_px: Vec2,
                         canvas_rect: Optional[Rect] = None) -> CoordinateMapper:
        return replace(self, canvas_size_px=canvas_size_px, canvas_rect=canvas_rect)
