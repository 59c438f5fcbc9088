"""
Core protocols for PyAlgebra.

These define the arithmetic capabilities that element types and
interpolated values must provide. We use Protocol (structural typing)
rather than ABC (nominal typing) so that int, float, complex, Fraction
and numpy scalars all qualify without registration.

Design Principles:
    - Minimal contracts: each operation needs only the operators it uses
    - No hard-coded numeric type
"""

from typing import Protocol, TypeVar, runtime_checkable

K = TypeVar('K', bound='Scalar')  # Scalar element type
V = TypeVar('V', bound='Interpolable')


@runtime_checkable
class Scalar(Protocol):
    """
    Element type stored in a Vector or Matrix.

    A scalar supports addition, subtraction and multiplication with values
    of its own kind, and an absolute value convertible to float (used by
    the norms). Multiplication is assumed commutative, since ``a * v`` is
    evaluated as ``v[i] * a``. Its zero is obtained as ``type(x)()``,
    which holds for all built-in numeric types, ``fractions.Fraction`` and
    numpy scalars.
    """

    def __add__(self, other, /): ...

    def __sub__(self, other, /): ...

    def __mul__(self, other, /): ...

    def __abs__(self): ...


@runtime_checkable
class Interpolable(Protocol):
    """
    Value usable with lerp().

    Anything closed under addition and subtraction that can also be
    multiplied by a float: Python numbers, Vector, Matrix.
    """

    def __add__(self, other, /): ...

    def __sub__(self, other, /): ...

    def __mul__(self, factor: float, /): ...
