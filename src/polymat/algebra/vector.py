"""Fixed-length vector over an arbitrary scalar-like element type.

Elements live in a one-dimensional numpy ``object`` array, so element-wise
arithmetic is delegated to the element's own operators. Any type supporting
``+ - * /`` with itself (floats, ints, ``Complex``, ``PolarComplex``,
built-in ``complex``) can be stored.
"""

from __future__ import annotations

import numbers
import operator
from collections.abc import Iterable, Iterator
from functools import reduce
from typing import Any

import numpy as np

from polymat.errors import CoordinateError, DimensionMismatchError, InvalidDimensionsError
from polymat.scalars.scalar_ops import is_scalar, square_root


def _object_array(items: Iterable[Any]) -> np.ndarray:
    values = list(items)
    data = np.empty(len(values), dtype=object)
    for i, value in enumerate(values):
        data[i] = value
    return data


class Vector:
    """Ordered, fixed-length sequence of scalars.

    Construction:
        Vector(3)               -> length 3, every element set to ``fill``
        Vector([1.0, 2.0, 3.0]) -> from any iterable
        Vector(other)           -> independent copy

    ``*`` between two vectors is the dot product; ``*`` with a scalar scales
    every element. Equality is exact element-wise comparison.

    Example:
        >>> Vector([2, 3, 4]) * Vector([5, 6, 7])
        56
    """

    __slots__ = ("_data",)

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, values: int | Iterable[Any] | Vector, *, fill: Any = 0) -> None:
        if isinstance(values, Vector):
            self._data = values._data.copy()
            return

        if isinstance(values, numbers.Integral):
            if values < 1:
                msg = f"Vector length must be above 0, got {values}"
                raise InvalidDimensionsError(msg)
            self._data = np.empty(int(values), dtype=object)
            self._data[:] = [fill] * int(values)
            return

        items = list(values)
        if not items:
            raise InvalidDimensionsError("Vector initializer is empty")

        self._data = _object_array(items)

    @classmethod
    def _wrap(cls, data: np.ndarray) -> Vector:
        vec = cls.__new__(cls)
        vec._data = data
        return vec

    # ---------- element access ----------

    def size(self) -> int:
        """Number of elements."""
        return int(self._data.shape[0])

    def __len__(self) -> int:
        return self.size()

    def _check_index(self, index: int) -> int:
        if not isinstance(index, numbers.Integral) or not 0 <= index < self.size():
            msg = f"Index {index} is not in bounds [0, {self.size() - 1}]"
            raise CoordinateError(msg)
        return int(index)

    def get(self, index: int) -> Any:
        """Return the element at ``index``."""
        return self._data[self._check_index(index)]

    def set(self, index: int, value: Any) -> None:
        """Overwrite the element at ``index``."""
        self._data[self._check_index(index)] = value

    def __getitem__(self, index: int) -> Any:
        return self.get(index)

    def __setitem__(self, index: int, value: Any) -> None:
        self.set(index, value)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data.tolist())

    def to_list(self) -> list[Any]:
        """Copy of the elements as a list."""
        return self._data.tolist()

    # ---------- arithmetic ----------

    def _require_same_length(self, other: Vector, operation: str) -> None:
        if other.size() != self.size():
            msg = (
                f"Vector {operation} requires vectors of the same length, "
                f"got {self.size()} and {other.size()}"
            )
            raise DimensionMismatchError(msg)

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self._require_same_length(other, "addition")
        return Vector._wrap(self._data + other._data)

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self._require_same_length(other, "subtraction")
        return Vector._wrap(self._data - other._data)

    def dot(self, other: Vector) -> Any:
        """Dot product (sum of element products)."""
        self._require_same_length(other, "dot product")
        return reduce(operator.add, (a * b for a, b in zip(self._data, other._data)))

    def __mul__(self, other: Any) -> Any:
        if isinstance(other, Vector):
            return self.dot(other)
        if not is_scalar(other):
            return NotImplemented
        return Vector._wrap(_object_array(value * other for value in self._data))

    def __rmul__(self, other: Any) -> Vector:
        if not is_scalar(other):
            return NotImplemented
        return Vector._wrap(_object_array(other * value for value in self._data))

    def __truediv__(self, other: Any) -> Vector:
        if not is_scalar(other):
            return NotImplemented
        return Vector._wrap(_object_array(value / other for value in self._data))

    def __neg__(self) -> Vector:
        return Vector._wrap(_object_array(-value for value in self._data))

    def cross_r3(self, other: Vector) -> Vector:
        """Cross product of two 3-element vectors."""
        if self.size() != 3 or other.size() != 3:
            raise DimensionMismatchError("R3 cross product vectors must both be 3 elements")

        a0, a1, a2 = self._data
        b0, b1, b2 = other._data
        return Vector([a1 * b2 - a2 * b1, a2 * b0 - a0 * b2, a0 * b1 - a1 * b0])

    # ---------- geometry ----------

    def magnitude(self) -> Any:
        """Square root of the sum of squared elements, in the element type."""
        # Keep value*value rather than pow so custom scalar types work
        total = reduce(operator.add, (value * value for value in self._data))
        return square_root(total)

    def cosine_angle(self, other: Vector) -> Any:
        """Cosine of the angle between this vector and ``other``."""
        return (self * other) / (self.magnitude() * other.magnitude())

    def scalar_in_direction(self, other: Vector) -> Any:
        """Length of this vector's projection onto ``other``."""
        return (self * other) / other.magnitude()

    def normalize(self) -> Vector:
        """Unit vector in the same direction (undefined for the zero vector)."""
        return self / self.magnitude()

    # ---------- comparison / display ----------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        if self.size() != other.size():
            return False
        return all(a == b for a, b in zip(self._data, other._data))

    def __str__(self) -> str:
        return ", ".join(str(value) for value in self._data)

    def __repr__(self) -> str:
        return f"Vector({self.to_list()!r})"


__all__ = ["Vector"]
