"""
vec2.py
-------

Immutable 2D vector value type.

Every operation returns a new ``Vec2``. Degenerate divisions are defined
rather than raised:

  - ``component_div`` yields 0 on any axis whose divisor component is 0;
  - ``div_scale(0)`` yields ``Vec2.ZERO``;
  - ``normalized()`` of the zero vector is the zero vector (not NaN).
"""

from __future__ import annotations

__all__ = ["Vec2"]

import math
from dataclasses import dataclass
from typing import Callable, ClassVar, Iterator, Literal, Tuple


@dataclass(frozen=True, slots=True)
class Vec2:
    """2D vector ``(x, y)`` of floats."""

    x: float
    y: float

    ZERO: ClassVar[Vec2]
    ONE: ClassVar[Vec2]
    RIGHT: ClassVar[Vec2]
    UP: ClassVar[Vec2]

    # -------------------------------------------------------------------------
    # Component access
    # -------------------------------------------------------------------------
    @property
    def components(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def get(self, component: Literal["x", "y"]) -> float:
        return self.x if component == "x" else self.y

    def map_x(self, fn: Callable[[float], float]) -> Vec2:
        return Vec2(fn(self.x), self.y)

    def map_y(self, fn: Callable[[float], float]) -> Vec2:
        return Vec2(self.x, fn(self.y))

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------
    def add(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def sub(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def component_mul(self, other: Vec2) -> Vec2:
        return Vec2(self.x * other.x, self.y * other.y)

    def component_div(self, other: Vec2) -> Vec2:
        """Per-axis division; an axis with a zero divisor yields 0."""
        return Vec2(
            0.0 if other.x == 0 else self.x / other.x,
            0.0 if other.y == 0 else self.y / other.y,
        )

    def scale(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    def div_scale(self, scalar: float) -> Vec2:
        """Divide by ``scalar``; returns ``Vec2.ZERO`` when ``scalar == 0``."""
        return Vec2.ZERO if scalar == 0 else self.scale(1.0 / scalar)

    def negate(self) -> Vec2:
        return self.scale(-1.0)

    # -------------------------------------------------------------------------
    # Products and norms
    # -------------------------------------------------------------------------
    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y

    def magnitude_squared(self) -> float:
        return self.dot(self)

    def magnitude(self) -> float:
        return math.sqrt(self.magnitude_squared())

    def normalized(self) -> Vec2:
        return self.div_scale(self.magnitude())

    def cross_magnitude(self, other: Vec2) -> float:
        """Signed area of the parallelogram spanned by ``self`` and ``other``."""
        return self.x * other.y - self.y * other.x

    def cross_axis_z(self) -> Vec2:
        """Perpendicular ``(y, -x)``: the vector crossed with the out-of-plane axis."""
        return Vec2(self.y, -self.x)

    def distance_squared(self, other: Vec2) -> float:
        return self.sub(other).magnitude_squared()

    def distance(self, other: Vec2) -> float:
        return math.sqrt(self.distance_squared(other))

    # -------------------------------------------------------------------------
    # Polar form
    # -------------------------------------------------------------------------
    def polar_angle(self) -> float:
        """Angle in radians in ``(-pi, pi]``."""
        angle = math.atan2(self.y, self.x)
        # atan2 returns -pi for y == -0.0 on the negative x axis.
        return math.pi if angle == -math.pi else angle

    @classmethod
    def polar(cls, angle: float, radius: float = 1.0) -> Vec2:
        return cls(radius * math.cos(angle), radius * math.sin(angle))

    def rotate(self, angle: float) -> Vec2:
        return Vec2.polar(self.polar_angle() + angle, self.magnitude())

    # -------------------------------------------------------------------------
    # Interpolation
    # -------------------------------------------------------------------------
    def lerp(self, to: Vec2, amount: float) -> Vec2:
        """Linear interpolation; ``amount`` outside [0, 1] extrapolates."""
        return self.add(to.sub(self).scale(amount))

    @staticmethod
    def linear_combination(*terms: Tuple[float, Vec2]) -> Vec2:
        """Weighted sum of ``(coefficient, vector)`` pairs."""
        x = y = 0.0
        for coeff, value in terms:
            x += coeff * value.x
            y += coeff * value.y
        return Vec2(x, y)

    def is_close(self, other: Vec2, abs_tol: float = 1e-9) -> bool:
        return (math.isclose(self.x, other.x, abs_tol=abs_tol)
                and math.isclose(self.y, other.y, abs_tol=abs_tol))

    # -------------------------------------------------------------------------
    # Operators
    # -------------------------------------------------------------------------
    def __add__(self, other: Vec2) -> Vec2:
        return self.add(other)

    def __sub__(self, other: Vec2) -> Vec2:
        return self.sub(other)

    def __neg__(self) -> Vec2:
        return self.negate()

    def __mul__(self, scalar: float) -> Vec2:
        return self.scale(scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec2:
        return self.div_scale(scalar)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"(x : {self.x}, y : {self.y})"


Vec2.ZERO = Vec2(0.0, 0.0)
Vec2.ONE = Vec2(1.0, 1.0)
Vec2.RIGHT = Vec2(1.0, 0.0)
Vec2.UP = Vec2(0.0, 1.0)
