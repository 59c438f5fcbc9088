"""
Algorithms built on Vector and Matrix.

Public API:
    linear_combination(vectors, coefficients) - weighted sum of vectors
    lerp(start, end, t)                       - linear interpolation
    angle_cos(u, v)                           - cosine of the angle between vectors
"""

from __future__ import annotations

import math
import warnings
from collections.abc import Iterable, Sequence

import numpy as np

from pyalgebra.core.exceptions import DegenerateResultWarning
from pyalgebra.core.protocols import K, V
from pyalgebra.core.validation import check_not_empty, check_same_size
from pyalgebra.vector import Vector, zero_like


def _ensure_vector(data: Vector | Iterable) -> Vector:
    """Wrap a raw sequence in a Vector if needed."""
    if isinstance(data, Vector):
        return data
    return Vector(data)


def linear_combination(
    vectors: Sequence[Vector | Iterable[K]],
    coefficients: Sequence[K],
) -> Vector:
    """
    Compute ``sum(coefficients[i] * vectors[i])``.

    Each input vector is copied, scaled by its coefficient and added into
    a zero-initialised result, in input order. The inputs are not modified.

    Parameters
    ----------
    vectors : sequence of Vector
        Non-empty, all of the same size.
    coefficients : sequence of scalars
        One coefficient per vector.

    Returns
    -------
    Vector
        New vector of the common size.

    Raises
    ------
    ValidationError
        If ``vectors`` is empty.
    DimensionError
        If the number of coefficients differs from the number of vectors,
        or if the vectors differ in size.
    """
    vecs = [_ensure_vector(v) for v in vectors]
    coefs = list(coefficients)
    check_same_size(vecs, coefs, "linear_combination")
    check_not_empty(vecs, "vectors")
    for v in vecs[1:]:
        check_same_size(vecs[0], v, "linear_combination")

    result = Vector.zeros(vecs[0].size(), zero_like(vecs[0].elements))
    for v, coef in zip(vecs, coefs):
        work = v.copy()
        work.scale(coef)
        result.add(work)
    return result


def lerp(start: V, end: V, t: float) -> V:
    """
    Linear interpolation ``start * (1 - t) + end * t``.

    Works for any value closed under ``+`` and ``-`` that can be multiplied
    by a float: numbers, Vector, Matrix. ``t`` is not clamped, so values
    outside [0, 1] extrapolate along the line through start and end.
    """
    return start * (1.0 - t) + end * t


def angle_cos(u: Vector | Iterable, v: Vector | Iterable) -> float:
    """
    Cosine of the angle between two vectors.

    Computed as ``u.dot(v) / (u.norm() * v.norm())``. When either vector
    has zero norm, or the norms overflow, the division yields NaN, which is
    returned as is after a DegenerateResultWarning is issued.

    Raises:
        DimensionError: If the vectors differ in size
    """
    u = _ensure_vector(u)
    v = _ensure_vector(v)
    dot = u.dot(v)
    norm_u, norm_v = u.norm(), v.norm()
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        result = float(np.float64(dot) / (np.float64(norm_u) * np.float64(norm_v)))
    if not math.isfinite(result):
        warnings.warn(
            f"angle_cos: degenerate operands (|u|={norm_u}, |v|={norm_v}), result is {result}",
            DegenerateResultWarning,
            stacklevel=2,
        )
    return result
