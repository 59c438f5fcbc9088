"""
PyAlgebra: generic linear-algebra primitives for Python.

Small algebraic containers with exact, reproducible arithmetic over any
scalar type (int, float, complex, Fraction, numpy scalars).

Public API:
    Vector:             fixed-length sequence of scalars
    Matrix:             sequence of equal-length column vectors
    linear_combination: weighted sum of vectors
    lerp:               linear interpolation
    angle_cos:          cosine of the angle between two vectors
"""

__version__ = "0.1.0"

from pyalgebra.vector import Vector
from pyalgebra.matrix import Matrix
from pyalgebra.algorithms import linear_combination, lerp, angle_cos
from pyalgebra.core.exceptions import (
    PyAlgebraError,
    ValidationError,
    DimensionError,
    DegenerateResultWarning,
)

__all__ = [
    "__version__",
    "Vector",
    "Matrix",
    "linear_combination",
    "lerp",
    "angle_cos",
    "PyAlgebraError",
    "ValidationError",
    "DimensionError",
    "DegenerateResultWarning",
]
