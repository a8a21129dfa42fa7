"""
errors.py
---------

Exception hierarchy of the geometry and curve core.

All errors derive from ``ValueError`` so that callers treating bad input
generically keep working, while typed handlers can single out a condition.
"""

from __future__ import annotations

__all__ = [
    "GeometryError",
    "InvalidGeometryError",
    "DimensionMismatchError",
    "InvalidControlPointsError",
]


class GeometryError(ValueError):
    """Base class for failures raised by the geometry core."""


class InvalidGeometryError(GeometryError):
    """Degenerate rectangle, canvas or singular matrix where a mapping is required."""


class DimensionMismatchError(GeometryError):
    """Matrix operands (or construction data) with incompatible shapes."""


class InvalidControlPointsError(GeometryError):
    """Control-point sequence of the wrong arity for an interpolator."""
