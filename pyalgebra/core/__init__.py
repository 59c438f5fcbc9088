"""
Core infrastructure for PyAlgebra.

Shared abstractions used by the vector, matrix and algorithm modules.

Key components:
    protocols: Scalar, Interpolable structural protocols
    exceptions: Exception and warning hierarchy
    validation: Input validators
    tolerances: Tolerance tiers for numerical comparison
"""

from pyalgebra.core.protocols import Scalar, Interpolable
from pyalgebra.core.exceptions import (
    PyAlgebraError,
    ValidationError,
    DimensionError,
    DegenerateResultWarning,
)
from pyalgebra.core.tolerances import (
    ToleranceTier,
    EXACT,
    FP64,
    FP32,
    select_tolerance,
)

__all__ = [
    # Protocols
    "Scalar",
    "Interpolable",
    # Exceptions
    "PyAlgebraError",
    "ValidationError",
    "DimensionError",
    "DegenerateResultWarning",
    # Tolerances
    "ToleranceTier",
    "EXACT",
    "FP64",
    "FP32",
    "select_tolerance",
]
