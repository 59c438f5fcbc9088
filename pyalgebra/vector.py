"""
Vector: fixed-length sequence of scalars with element-wise arithmetic.

The element type is duck-typed (see core.protocols.Scalar): int, float,
complex, fractions.Fraction and numpy scalars all work, and arithmetic
follows the element type's own rules (no overflow checks, no promotion
beyond what Python or numpy does). Scalar multiplication is assumed
commutative: ``factor * v`` evaluates ``v[i] * factor``.

Design decisions:
    - Mutating methods (add, sub, scale) are the single implementation;
      operators copy the left operand and call them
    - Sizes are validated before any element is written
    - Reductions accumulate strictly left to right. sum() is avoided on
      purpose since it uses compensated summation for floats.
"""

from __future__ import annotations

import math
import operator
from collections.abc import Iterable, Iterator
from typing import Any, Generic

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pyalgebra.core.exceptions import DimensionError
from pyalgebra.core.protocols import K
from pyalgebra.core.tolerances import FP64, ToleranceTier, select_tolerance
from pyalgebra.core.validation import (
    check_not_empty,
    check_same_size,
    check_sequence,
)


def zero_like(elements: list[Any]) -> Any:
    """Neutral element of the scalar type held in ``elements`` (0 if empty)."""
    if not elements:
        return 0
    return type(elements[0])()


class Vector(Generic[K]):
    """
    Ordered, fixed-length sequence of scalars.

    Construction copies its input, so a Vector never aliases the storage
    of a list or of another Vector.

    Examples:
        >>> u = Vector([1.0, 2.0])
        >>> u.add(Vector([3.0, 4.0]))
        >>> u
        Vector([4.0, 6.0])
        >>> Vector([3, 4]).norm()
        5.0
    """

    # Make numpy defer to our reflected operators (np.float64(2) * v)
    __array_ufunc__ = None

    def __init__(self, elements: Iterable[K] = ()):
        if isinstance(elements, Vector):
            self._elements = list(elements._elements)
        else:
            self._elements = check_sequence(elements, "elements")

    @classmethod
    def from_array(cls, array: ArrayLike) -> Vector:
        """
        Build a Vector from a 1-D array-like.

        Elements keep their numpy scalar type, so a float32 array yields
        a vector whose arithmetic is carried out in float32.

        Raises:
            DimensionError: If the array is not 1-D
        """
        data = np.asarray(array)
        if data.ndim != 1:
            raise DimensionError(
                f"array: expected 1D array, got {data.ndim}D with shape {data.shape}",
                operation="from_array",
                expected=1,
                actual=data.ndim,
            )
        return cls(list(data))

    @classmethod
    def zeros(cls, size: int, zero: K = 0) -> Vector:
        """Vector of ``size`` copies of ``zero``."""
        return cls([zero] * size)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def elements(self) -> list[K]:
        """Copy of the elements, in coordinate order."""
        return list(self._elements)

    def set_elements(self, values: Iterable[K]) -> None:
        """
        Replace every element at once.

        Raises:
            DimensionError: If the number of values differs from size()
        """
        new = check_sequence(values, "values")
        check_same_size(self._elements, new, "set_elements")
        self._elements = new

    def size(self) -> int:
        """Number of elements."""
        return len(self._elements)

    def copy(self) -> Vector:
        return Vector(self)

    def to_numpy(self, dtype: DTypeLike = None) -> NDArray:
        """Elements as a new 1-D numpy array."""
        return np.array(self._elements, dtype=dtype)

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[K]:
        return iter(self._elements)

    def __getitem__(self, index):
        return self._elements[index]

    def __setitem__(self, index: int, value: K) -> None:
        # integer positions only: slice assignment could change the length
        self._elements[operator.index(index)] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._elements == other._elements

    __hash__ = None

    def __repr__(self) -> str:
        return f"Vector({self._elements!r})"

    def __str__(self) -> str:
        return "[" + ", ".join(str(e) for e in self._elements) + "]"

    # ------------------------------------------------------------------
    # In-place arithmetic
    # ------------------------------------------------------------------

    def add(self, other: Vector) -> None:
        """
        Element-wise ``self[i] = self[i] + other[i]``, in place.

        Raises:
            DimensionError: If sizes differ (self is left untouched)
        """
        check_same_size(self._elements, other._elements, "add")
        elems = self._elements
        for i, b in enumerate(other._elements):
            elems[i] = elems[i] + b

    def sub(self, other: Vector) -> None:
        """
        Element-wise ``self[i] = self[i] - other[i]``, in place.

        Raises:
            DimensionError: If sizes differ (self is left untouched)
        """
        check_same_size(self._elements, other._elements, "sub")
        elems = self._elements
        for i, b in enumerate(other._elements):
            elems[i] = elems[i] - b

    def scale(self, factor: K) -> None:
        """Multiply every element by ``factor``, in place."""
        elems = self._elements
        for i, a in enumerate(elems):
            elems[i] = a * factor

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def __add__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        result = self.copy()
        result.add(other)
        return result

    def __sub__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        result = self.copy()
        result.sub(other)
        return result

    def __mul__(self, factor: Any) -> Vector:
        if isinstance(factor, Iterable):
            return NotImplemented
        result = self.copy()
        result.scale(factor)
        return result

    # factor * v is computed as v * factor, assuming commutative scalars
    __rmul__ = __mul__

    def __iadd__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self.add(other)
        return self

    def __isub__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self.sub(other)
        return self

    def __imul__(self, factor: Any) -> Vector:
        if isinstance(factor, Iterable):
            return NotImplemented
        self.scale(factor)
        return self

    # ------------------------------------------------------------------
    # Reductions
    # ------------------------------------------------------------------

    def dot(self, other: Vector) -> K:
        """
        Inner product ``sum(self[i] * other[i])``.

        Accumulates left to right from the zero of the element type, so
        integer vectors give an exact integer result.

        Raises:
            DimensionError: If sizes differ
        """
        check_same_size(self._elements, other._elements, "dot")
        acc = zero_like(self._elements)
        for a, b in zip(self._elements, other._elements):
            acc = acc + a * b
        return acc

    def norm_1(self) -> float:
        """Taxicab norm: sum of absolute values."""
        acc = 0.0
        for x in self._elements:
            acc += float(abs(x))
        return acc

    def norm(self) -> float:
        """Euclidean norm: square root of the sum of squares."""
        acc = 0.0
        for x in self._elements:
            m = float(abs(x))
            acc += m * m
        return math.sqrt(acc)

    def norm_inf(self) -> float:
        """
        Supremum norm: largest absolute value.

        Raises:
            ValidationError: If the vector is empty
        """
        check_not_empty(self._elements, "norm_inf")
        best = -math.inf
        for x in self._elements:
            m = float(abs(x))
            if m > best:
                best = m
        return best

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def allclose(self, other: Vector, tier: str | ToleranceTier = FP64) -> bool:
        """
        Element-wise approximate equality under a tolerance tier.

        Args:
            other: Vector of the same size
            tier: ToleranceTier instance or its name ('exact', 'fp64', 'fp32')

        Raises:
            DimensionError: If sizes differ
            ValidationError: If the tier name is unknown
        """
        tol = select_tolerance(tier)
        check_same_size(self._elements, other._elements, "allclose")
        return all(tol.is_close(a, b) for a, b in zip(self._elements, other._elements))
