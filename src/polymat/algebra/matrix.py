"""Dense two-dimensional matrix over an arbitrary scalar-like element type.

Elements are stored row-major in a numpy ``object`` array so that the same
code serves floats, ints, ``Complex`` and ``PolarComplex`` entries. The
element type must support ``+ - * /`` with itself and with real numbers, and
comparison against ``0``.

Determinant, minors, cofactors, adjoint and inverse use recursive cofactor
expansion. The expansion row is the one holding the most zeros and zero
terms are skipped entirely, which is what keeps the otherwise factorial
algorithm usable for small and sparse-ish matrices.

References:
    - Strang: "Introduction to Linear Algebra" (5th ed.), Chapter 5
    - Trefethen & Bau: "Numerical Linear Algebra" (1997), Lecture 8 (Gram-Schmidt)
"""

from __future__ import annotations

import math
import numbers
import operator
from collections.abc import Callable, Iterable, Sequence
from functools import reduce
from typing import Any

import numpy as np

from polymat.algebra.vector import Vector
from polymat.errors import (
    CoordinateError,
    DimensionMismatchError,
    InvalidDimensionsError,
    RankDeficientError,
    SingularMatrixError,
)
from polymat.scalars.scalar_ops import conjugate_of, is_scalar, modulus, square_root

QR_RANK_TOLERANCE: float = 1e-12
"""Relative column norm below which QR treats a column as dependent."""


class Matrix:
    """Row-major ``rows × cols`` grid of scalars.

    Construction:
        Matrix(2, 3)                 -> 2×3 matrix, every element set to ``fill``
        Matrix([[1, 2], [3, 4]])     -> from a rectangular nested iterable
        Matrix(other)                -> independent deep copy

    Operators:
        ``+`` / ``-``   element-wise, identical dimensions required
        ``*``           element-wise with a Matrix, scaling with a scalar
        ``/``           division of every element by a scalar
        ``@`` (``%``)   true matrix product (m×p) @ (p×n) -> (m×n)

    Example:
        >>> Matrix([[5, 6, 9], [2, 1, 6], [1, 2, 3]]).determinant()
        -18
    """

    __slots__ = ("_data",)

    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        rows: int | Iterable[Iterable[Any]] | Matrix,
        cols: int | None = None,
        *,
        fill: Any = 0,
    ) -> None:
        if cols is not None and not isinstance(rows, numbers.Integral):
            raise InvalidDimensionsError("Column count is only accepted with a row count")

        if isinstance(rows, Matrix):
            # Elements are immutable scalars, so copying the grid is a deep copy
            self._data = rows._data.copy()
            return

        if isinstance(rows, numbers.Integral):
            if cols is None:
                raise InvalidDimensionsError("Column count is required with a row count")
            if rows < 1 or cols < 1:
                msg = f"Cols/Rows of a matrix must be above 0, got ({rows}, {cols})"
                raise InvalidDimensionsError(msg)
            self._data = np.empty((int(rows), int(cols)), dtype=object)
            for index in np.ndindex(self._data.shape):
                self._data[index] = fill
            return

        grid = [list(row) for row in rows]
        if not grid or any(len(row) == 0 for row in grid):
            raise InvalidDimensionsError("Cols/Rows of a matrix must be above 0")

        col_len = len(grid[0])
        if any(len(row) != col_len for row in grid):
            raise InvalidDimensionsError("Columns must all be of the same length")

        self._data = np.empty((len(grid), col_len), dtype=object)
        for i, row in enumerate(grid):
            for j, value in enumerate(row):
                self._data[i, j] = value

    @classmethod
    def _wrap(cls, data: np.ndarray) -> Matrix:
        mat = cls.__new__(cls)
        mat._data = data
        return mat

    def _map(self, func: Callable[[Any], Any]) -> Matrix:
        out = np.empty(self._data.shape, dtype=object)
        for index, value in np.ndenumerate(self._data):
            out[index] = func(value)
        return Matrix._wrap(out)

    @staticmethod
    def identity(length: int, element_type: Callable[[int], Any] = float) -> Matrix:
        """Create a ``length × length`` identity matrix.

        Args:
            length: Side length.
            element_type: Callable building the element type from the integer
                literals 0 and 1 (``float``, ``int``, ``Complex``, ...).

        Returns:
            Identity matrix of the requested size.
        """
        ident = Matrix(length, length, fill=element_type(0))
        one = element_type(1)
        for i in range(length):
            ident._data[i, i] = one
        return ident

    # ---------- shape ----------

    @property
    def row_count(self) -> int:
        """Number of rows."""
        return int(self._data.shape[0])

    @property
    def col_count(self) -> int:
        """Number of columns."""
        return int(self._data.shape[1])

    @property
    def shape(self) -> tuple[int, int]:
        """``(rows, cols)``."""
        return self.row_count, self.col_count

    @property
    def is_square(self) -> bool:
        return self.row_count == self.col_count

    # ---------- element access ----------

    def _check_bounds(self, row: int, col: int) -> tuple[int, int]:
        in_bounds = (
            isinstance(row, numbers.Integral)
            and isinstance(col, numbers.Integral)
            and 0 <= row < self.row_count
            and 0 <= col < self.col_count
        )
        if not in_bounds:
            msg = (
                f"Bad coordinate, ({row},{col}) is not within the bounds of "
                f"({self.row_count - 1},{self.col_count - 1})"
            )
            raise CoordinateError(msg)
        return int(row), int(col)

    def get(self, row: int, col: int) -> Any:
        """Return the value at ``(row, col)``."""
        return self._data[self._check_bounds(row, col)]

    def set(self, row: int, col: int, value: Any) -> None:
        """Overwrite the value at ``(row, col)``."""
        self._data[self._check_bounds(row, col)] = value

    def __getitem__(self, key: tuple[int, int]) -> Any:
        row, col = key
        return self.get(row, col)

    def __setitem__(self, key: tuple[int, int], value: Any) -> None:
        row, col = key
        self.set(row, col, value)

    def get_row(self, row: int) -> list[Any]:
        """Copy of row ``row``, left to right."""
        self._check_bounds(row, 0)
        return self._data[row, :].tolist()

    def get_col(self, col: int) -> list[Any]:
        """Copy of column ``col``, top to bottom."""
        self._check_bounds(0, col)
        return self._data[:, col].tolist()

    def row_vector(self, row: int) -> Vector:
        """Row ``row`` as a Vector."""
        return Vector(self.get_row(row))

    def col_vector(self, col: int) -> Vector:
        """Column ``col`` as a Vector."""
        return Vector(self.get_col(col))

    def get_row_matrix(self, row: int) -> Matrix:
        """Row ``row`` as a 1×cols matrix."""
        return Matrix([self.get_row(row)])

    def get_col_matrix(self, col: int) -> Matrix:
        """Column ``col`` as a rows×1 matrix."""
        return Matrix([[value] for value in self.get_col(col)])

    def set_row(self, row: int, values: Sequence[Any] | Vector) -> None:
        """Overwrite a row; ``values`` must be as long as the matrix is wide."""
        items = list(values)
        if len(items) != self.col_count:
            msg = (
                f"Row set length must be same as matrix width "
                f"({len(items)} != {self.col_count})"
            )
            raise DimensionMismatchError(msg)
        self._check_bounds(row, 0)
        for j, value in enumerate(items):
            self._data[row, j] = value

    def set_col(self, col: int, values: Sequence[Any] | Vector) -> None:
        """Overwrite a column; ``values`` must be as long as the matrix is high."""
        items = list(values)
        if len(items) != self.row_count:
            msg = (
                f"Column set length must be same as matrix height "
                f"({len(items)} != {self.row_count})"
            )
            raise DimensionMismatchError(msg)
        self._check_bounds(0, col)
        for i, value in enumerate(items):
            self._data[i, col] = value

    def to_list(self) -> list[list[Any]]:
        """Copy of the matrix as nested row lists."""
        return self._data.tolist()

    # ---------- arithmetic ----------

    def _require_same_shape(self, other: Matrix, operation: str) -> None:
        if other.shape != self.shape:
            msg = (
                f"Matrix {operation} requires matrices of same dimensions, "
                f"got {self.shape} and {other.shape}"
            )
            raise DimensionMismatchError(msg)

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._require_same_shape(other, "addition")
        return Matrix._wrap(self._data + other._data)

    def __sub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._require_same_shape(other, "subtraction")
        return Matrix._wrap(self._data - other._data)

    def __mul__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            self._require_same_shape(other, "element product")
            return Matrix._wrap(self._data * other._data)
        if not is_scalar(other):
            return NotImplemented
        return self._map(lambda value: value * other)

    def __rmul__(self, other: Any) -> Matrix:
        if not is_scalar(other):
            return NotImplemented
        return self._map(lambda value: other * value)

    def __truediv__(self, other: Any) -> Matrix:
        if not is_scalar(other):
            return NotImplemented
        return self._map(lambda value: value / other)

    def __neg__(self) -> Matrix:
        return self._map(operator.neg)

    def __matmul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.col_count != other.row_count:
            msg = (
                "Matrix product requires matrices of the dimensions (m,p) @ (p,n), "
                f"got {self.shape} and {other.shape}"
            )
            raise DimensionMismatchError(msg)

        out = np.empty((self.row_count, other.col_count), dtype=object)
        for i in range(self.row_count):
            for j in range(other.col_count):
                out[i, j] = reduce(
                    operator.add,
                    (self._data[i, k] * other._data[k, j] for k in range(self.col_count)),
                )
        return Matrix._wrap(out)

    # Modulo-style spelling of the matrix product
    __mod__ = __matmul__

    def reciprocal(self) -> Matrix:
        """Matrix with every element replaced by ``1 / element``."""
        return self._map(lambda value: 1 / value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if other.shape != self.shape:
            return False
        return all(a == b for a, b in zip(self._data.flat, other._data.flat))

    # ---------- structure ----------

    def transpose(self) -> Matrix:
        """Return the (cols × rows) transpose."""
        return Matrix._wrap(self._data.T.copy())

    def create_sub_matrix(self, row: int, col: int) -> Matrix:
        """Matrix of size (rows-1, cols-1) with ``row`` and ``col`` removed."""
        self._check_bounds(row, col)
        if self.row_count < 2 or self.col_count < 2:
            msg = f"Cannot remove a row and column from a {self.shape} matrix"
            raise InvalidDimensionsError(msg)

        keep_rows = [i for i in range(self.row_count) if i != row]
        keep_cols = [j for j in range(self.col_count) if j != col]
        return Matrix._wrap(self._data[np.ix_(keep_rows, keep_cols)].copy())

    def _require_square(self, operation: str) -> None:
        if not self.is_square:
            msg = f"Matrix must be square to compute the {operation}, got {self.shape}"
            raise DimensionMismatchError(msg)

    def _find_zeros_row(self) -> int:
        """Index of the row with the most zeros (first such row; 0 if none)."""
        highest_zeros = 0
        zeros_row = 0
        for i in range(self.row_count):
            zero_count = sum(1 for value in self._data[i, :] if value == 0)
            if zero_count > highest_zeros:
                highest_zeros = zero_count
                zeros_row = i
        return zeros_row

    def minor(self, row: int, col: int) -> Any:
        """Determinant of the sub-matrix without ``row`` and ``col``."""
        return self.create_sub_matrix(row, col).determinant()

    def cofactor(self, row: int, col: int) -> Any:
        """Signed minor ``minor(row, col) · (-1)^(row+col)``."""
        return self.minor(row, col) * (-1) ** (row + col)

    def determinant(self) -> Any:
        """Determinant by cofactor expansion along the row with most zeros.

        Raises:
            DimensionMismatchError: If the matrix is not square.
        """
        self._require_square("determinant")
        data = self._data

        if self.row_count == 1:
            return data[0, 0]
        if self.row_count == 2:
            return data[0, 0] * data[1, 1] - data[1, 0] * data[0, 1]

        pivot = self._find_zeros_row()
        terms = [
            data[pivot, j] * self.cofactor(pivot, j)
            for j in range(self.col_count)
            if data[pivot, j] != 0
        ]
        if not terms:
            return data[pivot, 0] * 0
        return reduce(operator.add, terms)

    def adjoint(self) -> Matrix:
        """Adjugate: transpose of the cofactor matrix."""
        self._require_square("adjoint")
        if self.row_count == 1:
            return self._map(lambda value: value * 0 + 1)

        cofactors = np.empty(self._data.shape, dtype=object)
        for i in range(self.row_count):
            for j in range(self.col_count):
                cofactors[i, j] = self.cofactor(i, j)
        return Matrix._wrap(cofactors).transpose()

    def inverse(self) -> Matrix:
        """Inverse as ``adjoint() / determinant()``.

        Raises:
            DimensionMismatchError: If the matrix is not square.
            SingularMatrixError: If the determinant is zero.
        """
        det = self.determinant()
        if det == 0:
            raise SingularMatrixError("Matrix determinant is zero, no inverse exists")
        return self.adjoint() / det

    def normalize(self) -> Matrix:
        """Divide every element by the root of the sum of squared elements."""
        # Keep value*value rather than pow so custom scalar types work
        total = reduce(operator.add, (value * value for value in self._data.flat))
        return self / square_root(total)

    def qr_decompose(self) -> tuple[Matrix, Matrix]:
        """Reduced QR decomposition by modified Gram-Schmidt.

        Produces ``Q`` (rows × cols) with orthonormal columns under the
        conjugate inner product and upper-triangular ``R`` (cols × cols) with
        a real, non-negative diagonal, such that ``Q @ R`` reproduces the
        matrix.

        Returns:
            Tuple ``(Q, R)``.

        Raises:
            DimensionMismatchError: If there are fewer rows than columns.
            RankDeficientError: If the columns are linearly dependent.
        """
        rows, cols = self.shape
        if rows < cols:
            msg = f"QR decomposition requires rows >= cols, got {self.shape}"
            raise DimensionMismatchError(msg)

        zero = self._data[0, 0] * 0
        columns = [self.get_col(j) for j in range(cols)]
        scale = max(_column_norm(column) for column in columns)

        q_mat = Matrix(rows, cols, fill=zero)
        r_mat = Matrix(cols, cols, fill=zero)

        for k in range(cols):
            norm = _column_norm(columns[k])
            if norm <= QR_RANK_TOLERANCE * scale or norm == 0:
                msg = f"Column {k} is linearly dependent on the preceding columns"
                raise RankDeficientError(msg)

            q_k = [value / norm for value in columns[k]]
            q_mat.set_col(k, q_k)
            r_mat._data[k, k] = zero + norm

            for j in range(k + 1, cols):
                projection = reduce(
                    operator.add,
                    (conjugate_of(q) * value for q, value in zip(q_k, columns[j])),
                )
                r_mat._data[k, j] = projection
                columns[j] = [
                    value - projection * q for q, value in zip(q_k, columns[j])
                ]

        return q_mat, r_mat

    # ---------- display ----------

    def __str__(self) -> str:
        return "\n".join(
            ", ".join(str(value) for value in row) for row in self._data
        )

    def __repr__(self) -> str:
        return f"Matrix({self.to_list()!r})"


def _column_norm(column: Iterable[Any]) -> float:
    return math.sqrt(sum(modulus(value) ** 2 for value in column))


__all__ = [
    "QR_RANK_TOLERANCE",
    "Matrix",
]
