"""
matrix.py
---------

Dimension-checked R x C matrix value type.

A ``Matrix`` is built from column data (column-major, like the homogeneous
transforms it mostly carries) and stored as a read-only float64 NumPy array
indexed ``[row, column]``. Rows and columns are fixed at construction; every
binary operation verifies the shapes before computing and raises
``DimensionMismatchError`` otherwise.

3x3 matrices act on homogeneous 2D points ``(x, y, 1)``:

    | sx  0  tx |
    |  0 sy  ty |
    |  0  0   1 |

which is the layout ``viewport_transformation`` produces and the layout
Matplotlib's ``Affine2D`` uses, so the two convert without reshuffling.
"""

from __future__ import annotations

__all__ = ["Matrix", "MatrixSize"]

import math
from typing import Callable, NamedTuple, Sequence, Tuple

import numpy as np
from numpy.typing import NDArray
from matplotlib.transforms import Affine2D

from curveplot.geometry.errors import DimensionMismatchError, InvalidGeometryError
from curveplot.geometry.rect import Rect
from curveplot.geometry.vec2 import Vec2


class MatrixSize(NamedTuple):
    rows: int
    columns: int


class Matrix:
    """Immutable R x C matrix of float64."""

    __slots__ = ("_data",)

    def __init__(self, columns: Sequence[Sequence[float]]) -> None:
        """
        Args:
            columns: C columns, each an R-length sequence of numbers.

        Raises:
            DimensionMismatchError: If there are no columns, a column is empty,
                or the columns differ in length (jagged data).
        """
        columns = [tuple(col) for col in columns]
        if not columns or not columns[0]:
            raise DimensionMismatchError("A matrix needs at least one row and one column.")
        rows = len(columns[0])
        for index, col in enumerate(columns):
            if len(col) != rows:
                raise DimensionMismatchError(
                    f"Jagged column data: column {index} has {len(col)} rows, expected {rows}."
                )
        data = np.array(columns, dtype=np.float64).T
        data.setflags(write=False)
        self._data: NDArray[np.float64] = data

    @classmethod
    def _from_array(cls, array: NDArray) -> Matrix:
        array = np.asarray(array, dtype=np.float64)
        if array.ndim != 2:
            raise DimensionMismatchError(f"Expected a 2D array, got {array.ndim}D.")
        return cls(array.T.tolist())

    # -------------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------------
    @classmethod
    def with_column_provider(cls, rows: int, columns: int,
                             fn: Callable[[int], Sequence[float]]) -> Matrix:
        matrix = cls([fn(column) for column in range(columns)])
        if matrix.size.rows != rows:
            raise DimensionMismatchError(
                f"Column provider returned {matrix.size.rows} rows, expected {rows}."
            )
        return matrix

    @classmethod
    def with_provider(cls, rows: int, columns: int,
                      fn: Callable[[int, int], float]) -> Matrix:
        """Build element-wise from ``fn(row, column)``."""
        return cls.with_column_provider(
            rows, columns,
            lambda column: [fn(row, column) for row in range(rows)],
        )

    @classmethod
    def zero(cls, rows: int, columns: int) -> Matrix:
        return cls.with_provider(rows, columns, lambda row, column: 0.0)

    @classmethod
    def identity(cls, n: int) -> Matrix:
        return cls.with_provider(n, n, lambda row, column: 1.0 if row == column else 0.0)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> Matrix:
        return cls._from_array(np.array(rows, dtype=np.float64))

    @classmethod
    def row_vec(cls, values: Sequence[float]) -> Matrix:
        return cls.with_provider(1, len(values), lambda row, column: values[column])

    @classmethod
    def column_vec(cls, values: Sequence[float]) -> Matrix:
        return cls([values])

    @classmethod
    def with_vec2(cls, v: Vec2) -> Matrix:
        return cls([v.components])

    @classmethod
    def with_vec2_as_row(cls, v: Vec2) -> Matrix:
        return cls.with_vec2(v).transpose()

    @classmethod
    def with_vec2_columns(cls, first: Vec2, second: Vec2) -> Matrix:
        return cls([first.components, second.components])

    @classmethod
    def viewport_transformation(cls, source: Rect, dest: Rect) -> Matrix:
        """Affine 3x3 map taking ``source`` onto ``dest`` corner to corner.

        Raises:
            InvalidGeometryError: If ``source`` has a zero or non-finite
                width or height, or the resulting scale overflows.
        """
        source_size = source.far_corner.sub(source.origin)
        for name, extent in (("width", source_size.x), ("height", source_size.y)):
            if extent == 0 or not math.isfinite(extent):
                raise InvalidGeometryError(
                    f"Source rectangle has degenerate {name} ({extent}): {source}"
                )

        scale = dest.far_corner.sub(dest.origin).component_div(source_size)
        if not (math.isfinite(scale.x) and math.isfinite(scale.y)):
            raise InvalidGeometryError(f"Viewport scale is not finite ({scale}): {source} -> {dest}")
        translate = dest.origin.sub(scale.component_mul(source.origin))

        return cls([
            [scale.x, 0.0, 0.0],
            [0.0, scale.y, 0.0],
            [translate.x, translate.y, 1.0],
        ])

    # -------------------------------------------------------------------------
    # Matplotlib bridge
    # -------------------------------------------------------------------------
    @classmethod
    def from_affine2d(cls, transform: Affine2D) -> Matrix:
        return cls._from_array(transform.get_matrix())

    def to_affine2d(self) -> Affine2D:
        self._require_shape(3, 3, "to_affine2d")
        return Affine2D(self.to_numpy())

    def to_numpy(self) -> NDArray[np.float64]:
        """Writable ``[row, column]`` copy of the data."""
        return self._data.copy()

    # -------------------------------------------------------------------------
    # Access
    # -------------------------------------------------------------------------
    @property
    def size(self) -> MatrixSize:
        rows, columns = self._data.shape
        return MatrixSize(rows, columns)

    @property
    def column_major_components(self) -> Tuple[float, ...]:
        return tuple(self._data.T.ravel().tolist())

    def at(self, row: int, column: int) -> float:
        return float(self._data[row, column])

    def column(self, index: int) -> Tuple[float, ...]:
        return tuple(self._data[:, index].tolist())

    def row(self, index: int) -> Tuple[float, ...]:
        return tuple(self._data[index, :].tolist())

    # -------------------------------------------------------------------------
    # Algebra
    # -------------------------------------------------------------------------
    def add(self, other: Matrix) -> Matrix:
        self._require_same_size(other, "add")
        return Matrix._from_array(self._data + other._data)

    def sub(self, other: Matrix) -> Matrix:
        self._require_same_size(other, "sub")
        return Matrix._from_array(self._data - other._data)

    def scale(self, scalar: float) -> Matrix:
        return Matrix._from_array(self._data * scalar)

    def transpose(self) -> Matrix:
        return Matrix._from_array(self._data.T)

    def mul_vec_n(self, vec: Sequence[float]) -> Tuple[float, ...]:
        if len(vec) != self.size.columns:
            raise DimensionMismatchError(
                f"Cannot multiply {self._shape_str()} matrix by a vector of length {len(vec)}."
            )
        return tuple((self._data @ np.asarray(vec, dtype=np.float64)).tolist())

    def multiply(self, other: Matrix) -> Matrix:
        """Matrix product ``self (R x K) @ other (K x C) -> R x C``."""
        if self.size.columns != other.size.rows:
            raise DimensionMismatchError(
                f"Cannot multiply {self._shape_str()} by {other._shape_str()}: "
                "inner dimensions differ."
            )
        return Matrix._from_array(self._data @ other._data)

    def apply_to_vec2(self, v: Vec2) -> Vec2:
        """Apply a 2x2 linear map, or a 3x3 affine map to ``(x, y, 1)``."""
        rows, columns = self.size
        if (rows, columns) == (2, 2):
            x, y = self.mul_vec_n(v.components)
        elif (rows, columns) == (3, 3):
            x, y, _ = self.mul_vec_n((v.x, v.y, 1.0))
        else:
            raise DimensionMismatchError(
                f"apply_to_vec2 needs a 2x2 or 3x3 matrix, got {self._shape_str()}."
            )
        return Vec2(x, y)

    def inverse(self) -> Matrix:
        rows, columns = self.size
        if rows != columns:
            raise DimensionMismatchError(f"Cannot invert a non-square {self._shape_str()} matrix.")
        try:
            inv = np.linalg.inv(self._data)
        except np.linalg.LinAlgError as exc:
            raise InvalidGeometryError(f"Matrix is singular: {self!r}") from exc
        return Matrix._from_array(inv)

    def is_close(self, other: Matrix, abs_tol: float = 1e-9) -> bool:
        return self.size == other.size and bool(np.allclose(self._data, other._data, rtol=0.0, atol=abs_tol))

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------
    def _shape_str(self) -> str:
        return f"{self.size.rows}x{self.size.columns}"

    def _require_same_size(self, other: Matrix, op: str) -> None:
        if self.size != other.size:
            raise DimensionMismatchError(
                f"{op}: operand sizes differ ({self._shape_str()} vs {other._shape_str()})."
            )

    def _require_shape(self, rows: int, columns: int, op: str) -> None:
        if self.size != (rows, columns):
            raise DimensionMismatchError(
                f"{op} needs a {rows}x{columns} matrix, got {self._shape_str()}."
            )

    # -------------------------------------------------------------------------
    # Operators and representation
    # -------------------------------------------------------------------------
    def __add__(self, other: Matrix) -> Matrix:
        return self.add(other)

    def __sub__(self, other: Matrix) -> Matrix:
        return self.sub(other)

    def __matmul__(self, other: Matrix) -> Matrix:
        return self.multiply(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.size == other.size and bool(np.array_equal(self._data, other._data))

    def __hash__(self) -> int:
        return hash((self.size, self.column_major_components))

    def __repr__(self) -> str:
        rows = "; ".join(" ".join(f"{value:g}" for value in row) for row in self._data.tolist())
        return f"<Matrix {self._shape_str()} [{rows}]>"
