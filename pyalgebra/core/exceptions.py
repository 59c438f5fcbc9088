"""
Exception hierarchy for PyAlgebra.

All exceptions inherit from PyAlgebraError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Floating-point degeneracy is a warning, never an exception
"""


class PyAlgebraError(Exception):
    """Base exception for all PyAlgebra errors."""
    pass


class ValidationError(PyAlgebraError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks, e.g. an
    empty sequence where at least one element is required.
    """
    pass


class DimensionError(ValidationError):
    """
    Operand sizes or shapes disagree.

    Raised before any mutation takes place, so the receiver of a failed
    operation is left unmodified.

    Attributes:
        operation: Name of the operation that rejected its operands
        expected: Size or shape required by the receiver
        actual: Size or shape that was supplied
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        expected: int | tuple[int, ...] | None = None,
        actual: int | tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.expected = expected
        self.actual = actual


class DegenerateResultWarning(RuntimeWarning):
    """
    A computation produced a non-finite value from degenerate input.

    Issued, for instance, when the cosine of the angle between two vectors
    is requested and one of them has zero norm. The NaN is still returned.
    """
    pass
