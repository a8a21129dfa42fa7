"""
Geometry core: vectors, matrices, rectangles and coordinate transforms.
"""

from .errors import (
    GeometryError, InvalidGeometryError, DimensionMismatchError, InvalidControlPointsError,
)
from .vec2 import Vec2
from .rect import Rect
from .matrix import Matrix, MatrixSize
from .transforms import (
    build_viewport_transform, build_device_transform,
    pixel_size, pixel_thickness, CoordinateMapper,
)

__all__ = [
    "GeometryError", "InvalidGeometryError", "DimensionMismatchError",
    "InvalidControlPointsError",
    "Vec2", "Rect", "Matrix", "MatrixSize",
    "build_viewport_transform", "build_device_transform",
    "pixel_size", "pixel_thickness", "CoordinateMapper",
]
