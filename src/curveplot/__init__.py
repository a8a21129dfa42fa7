"""
curveplot
---------

Interactive 2D plotting core: vectors, matrices and rects, the
world -> canvas -> device transform pipeline, parametric curve interpolators
and arc-length reparameterization, drawn through Matplotlib.
"""

from .geometry import (
    GeometryError, InvalidGeometryError, DimensionMismatchError, InvalidControlPointsError,
    Vec2, Rect, Matrix, MatrixSize,
    build_viewport_transform, build_device_transform, CoordinateMapper,
)
from .curves import (
    ParametricEquation, InterpolatorKind, make_interpolator,
    line_segment_interpolator, line_segments_interpolator,
    quadratic_interpolator, cubic_interpolator, hermite_interpolator,
    build_arc_length_table, parameter_for_arc_length, ArcLengthParameterization,
)

__version__ = "0.1.0"

__all__ = [
    "GeometryError", "InvalidGeometryError", "DimensionMismatchError",
    "InvalidControlPointsError",
    "Vec2", "Rect", "Matrix", "MatrixSize",
    "build_viewport_transform", "build_device_transform", "CoordinateMapper",
    "ParametricEquation", "InterpolatorKind", "make_interpolator",
    "line_segment_interpolator", "line_segments_interpolator",
    "quadratic_interpolator", "cubic_interpolator", "hermite_interpolator",
    "build_arc_length_table", "parameter_for_arc_length", "ArcLengthParameterization",
]
