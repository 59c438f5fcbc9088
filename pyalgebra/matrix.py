"""
Matrix: ordered collection of equal-length column Vectors.

Every inner sequence handed to the constructor becomes one column; input
is never transposed. ``Matrix([[1, 2], [3, 4]])`` therefore has columns
``[1, 2]`` and ``[3, 4]``, and ``m[1][0] == 3``.

Arithmetic delegates column by column to Vector, after the shape check.
"""

from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator
from typing import Any, Generic

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pyalgebra.core.exceptions import DimensionError
from pyalgebra.core.protocols import K
from pyalgebra.core.validation import (
    check_rectangular,
    check_same_shape,
    check_same_size,
    check_sequence,
)
from pyalgebra.vector import Vector


class Matrix(Generic[K]):
    """
    Column-major matrix of scalars.

    Attributes are private; use shape(), indexing and iteration. Columns
    are copied on the way in, so two matrices never share a Vector.

    Examples:
        >>> m = Matrix([[1.0, 2.0], [3.0, 4.0]])
        >>> m.shape()
        (2, 2)
        >>> m.add(Matrix([[7.0, 4.0], [-2.0, 2.0]]))
        >>> print(m)
        [8.0, 6.0]
        [1.0, 6.0]
    """

    __array_ufunc__ = None

    def __init__(self, columns: Iterable[Iterable[K]] = ()):
        cols = [Vector(col) for col in check_sequence(columns, "columns")]
        check_rectangular(cols, "columns")
        self._columns = cols

    @classmethod
    def from_vectors(cls, vectors: Iterable[Vector]) -> Matrix:
        """Build a Matrix whose columns are copies of ``vectors``."""
        return cls(vectors)

    @classmethod
    def from_array(cls, array: ArrayLike) -> Matrix:
        """
        Build a Matrix from a 2-D array-like, one column per ``array[j]``.

        Raises:
            DimensionError: If the array is not 2-D
        """
        data = np.asarray(array)
        if data.ndim != 2:
            raise DimensionError(
                f"array: expected 2D array, got {data.ndim}D with shape {data.shape}",
                operation="from_array",
                expected=2,
                actual=data.ndim,
            )
        return cls(list(row) for row in data)

    def shape(self) -> tuple[int, int]:
        """``(number_of_columns, column_length)``; ``(0, 0)`` when empty."""
        if not self._columns:
            return (0, 0)
        return (len(self._columns), self._columns[0].size())

    @property
    def columns(self) -> list[Vector]:
        """Copies of the columns, in order."""
        return [col.copy() for col in self._columns]

    def copy(self) -> Matrix:
        return Matrix(self._columns)

    def to_numpy(self, dtype: DTypeLike = None) -> NDArray:
        """New array of shape ``shape()``; row ``j`` holds column ``j``."""
        if not self._columns:
            return np.empty((0, 0), dtype=dtype if dtype is not None else np.float64)
        return np.array([col.elements for col in self._columns], dtype=dtype)

    def __len__(self) -> int:
        return len(self._columns)

    def __iter__(self) -> Iterator[Vector]:
        return iter(self._columns)

    def __getitem__(self, index: int) -> Vector:
        return self._columns[index]

    def __setitem__(self, index: int, column: Iterable[K]) -> None:
        # integer positions only: slice assignment would splice raw scalars
        index = operator.index(index)
        new = Vector(column)
        check_same_size(self._columns[index], new, "__setitem__")
        self._columns[index] = new

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._columns == other._columns

    __hash__ = None

    def __repr__(self) -> str:
        return f"Matrix({[col.elements for col in self._columns]!r})"

    def __str__(self) -> str:
        return "\n".join(
            "[" + ", ".join(format(e, ".1f") for e in col) + "]"
            for col in self._columns
        )

    # ------------------------------------------------------------------
    # In-place arithmetic
    # ------------------------------------------------------------------

    def add(self, other: Matrix) -> None:
        """
        Column-wise sum, in place.

        Raises:
            DimensionError: If shapes differ (self is left untouched)
        """
        check_same_shape(self.shape(), other.shape(), "add")
        for a, b in zip(self._columns, other._columns):
            a.add(b)

    def sub(self, other: Matrix) -> None:
        """
        Column-wise difference, in place.

        Raises:
            DimensionError: If shapes differ (self is left untouched)
        """
        check_same_shape(self.shape(), other.shape(), "sub")
        for a, b in zip(self._columns, other._columns):
            a.sub(b)

    def scale(self, factor: K) -> None:
        for col in self._columns:
            col.scale(factor)

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        result = self.copy()
        result.add(other)
        return result

    def __sub__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        result = self.copy()
        result.sub(other)
        return result

    def __mul__(self, factor: Any) -> Matrix:
        if isinstance(factor, Iterable):
            return NotImplemented
        result = self.copy()
        result.scale(factor)
        return result

    # factor * m is computed as m * factor, assuming commutative scalars
    __rmul__ = __mul__

    def __iadd__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self.add(other)
        return self

    def __isub__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self.sub(other)
        return self

    def __imul__(self, factor: Any) -> Matrix:
        if isinstance(factor, Iterable):
            return NotImplemented
        self.scale(factor)
        return self
