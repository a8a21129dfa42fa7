"""
rect.py
-------

Axis-aligned rectangle ``{origin, size}``.

The same type serves as a world-space viewport and as a device-space canvas
region. Normalized coordinate ``(0, 0)`` maps to ``origin`` and ``(1, 1)`` to
the far corner ``origin + size``; every other operation is expressed through
``convert_normalized_coordinate``.
"""

from __future__ import annotations

__all__ = ["Rect"]

import math
from dataclasses import dataclass
from typing import ClassVar, Tuple

from curveplot.geometry.vec2 import Vec2


@dataclass(frozen=True, slots=True)
class Rect:
    origin: Vec2
    size: Vec2

    ZERO: ClassVar[Rect]

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------
    @classmethod
    def create(cls, x: float, y: float, width: float, height: float) -> Rect:
        return cls(Vec2(x, y), Vec2(width, height))

    @classmethod
    def create_ranges(cls, x: Tuple[float, float], y: Tuple[float, float]) -> Rect:
        """Build from ``(x0, x1)`` and ``(y0, y1)`` ranges in any order."""
        return cls.with_corners(Vec2(x[0], y[0]), Vec2(x[1], y[1]))

    @classmethod
    def with_corners(cls, a: Vec2, b: Vec2) -> Rect:
        """Canonical rect spanned by two arbitrary corners (non-negative size)."""
        min_x, max_x = min(a.x, b.x), max(a.x, b.x)
        min_y, max_y = min(a.y, b.y), max(a.y, b.y)
        return cls.create(min_x, min_y, max_x - min_x, max_y - min_y)

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------
    @property
    def components(self) -> Tuple[float, float, float, float]:
        return (*self.origin.components, *self.size.components)

    @property
    def width(self) -> float:
        return self.size.x

    @property
    def height(self) -> float:
        return self.size.y

    @property
    def far_corner(self) -> Vec2:
        return self.convert_normalized_coordinate(Vec2.ONE)

    @property
    def midpoint(self) -> Vec2:
        return self.convert_normalized_coordinate(Vec2(0.5, 0.5))

    @property
    def inscribed_radius(self) -> float:
        return min(self.width, self.height) / 2

    @property
    def circumscribed_radius(self) -> float:
        return math.hypot(self.width / 2, self.height / 2)

    # -------------------------------------------------------------------------
    # Coordinate conversion
    # -------------------------------------------------------------------------
    def convert_normalized_coordinate(self, p: Vec2) -> Vec2:
        return self.origin.add(self.size.component_mul(p))

    def normalize_coordinate(self, p: Vec2) -> Vec2:
        """Inverse of ``convert_normalized_coordinate``; zero-size axes map to 0."""
        return p.sub(self.origin).component_div(self.size)

    # -------------------------------------------------------------------------
    # Insets
    # -------------------------------------------------------------------------
    def inset(self, amount: float) -> Rect:
        return self.inset_each(left=amount, right=amount, top=amount, bottom=amount)

    def inset_each(self, left: float = 0.0, right: float = 0.0,
                   top: float = 0.0, bottom: float = 0.0) -> Rect:
        """Shrink each edge by its amount.

        ``top`` shrinks from the origin side of the y axis and ``bottom`` from
        the far side. An axis whose insets cross collapses to its midpoint.
        """
        lo = self.convert_normalized_coordinate(Vec2(0.0, 0.0))
        hi = self.convert_normalized_coordinate(Vec2(1.0, 1.0))

        min_x, max_x = lo.x + left, hi.x - right
        min_y, max_y = lo.y + top, hi.y - bottom

        if min_x > max_x:
            min_x = max_x = (min_x + max_x) / 2
        if min_y > max_y:
            min_y = max_y = (min_y + max_y) / 2

        return Rect.with_corners(Vec2(min_x, min_y), Vec2(max_x, max_y))

    def __str__(self) -> str:
        return f"Rect(origin={self.origin}, size={self.size})"


Rect.ZERO = Rect(Vec2.ZERO, Vec2.ZERO)
