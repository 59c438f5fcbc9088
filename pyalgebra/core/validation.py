"""
Input validation utilities for PyAlgebra.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent truncation: mismatched operands are always rejected
    - Each function validates ONE thing
    - Operation names included in all error messages
"""

from collections.abc import Iterable, Set, Sized
from typing import Any

from pyalgebra.core.exceptions import ValidationError, DimensionError


def check_sequence(values: Any, name: str) -> list[Any]:
    """
    Validate and copy an ordered, finite collection of scalars.

    Strings, mappings and sets are rejected even though they are
    iterable, since their iteration order or element type is never what
    the caller meant.

    Args:
        values: Input to validate
        name: Parameter name for error messages

    Returns:
        A fresh list holding the elements in order

    Raises:
        ValidationError: If input is not an ordered iterable of values
    """
    if isinstance(values, (str, bytes, dict, Set)) or not isinstance(values, Iterable):
        raise ValidationError(
            f"{name}: expected an ordered sequence of scalars, got {type(values).__name__}"
        )
    return list(values)


def check_same_size(left: Sized, right: Sized, operation: str) -> None:
    """
    Verify two operands have the same length.

    Args:
        left: Receiver of the operation
        right: Other operand
        operation: Operation name for error messages

    Raises:
        DimensionError: If lengths differ
    """
    n, m = len(left), len(right)
    if n != m:
        raise DimensionError(
            f"{operation}: size mismatch, expected {n}, got {m}",
            operation=operation,
            expected=n,
            actual=m,
        )


def check_same_shape(
    expected: tuple[int, int],
    actual: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two matrix shapes are identical.

    Args:
        expected: Shape of the receiver
        actual: Shape of the other operand
        operation: Operation name for error messages

    Raises:
        DimensionError: If shapes differ
    """
    if expected != actual:
        raise DimensionError(
            f"{operation}: shape mismatch, expected {expected}, got {actual}",
            operation=operation,
            expected=expected,
            actual=actual,
        )


def check_not_empty(values: Sized, name: str) -> None:
    """
    Verify a collection holds at least one element.

    Raises:
        ValidationError: If the collection is empty
    """
    if len(values) == 0:
        raise ValidationError(f"{name}: requires at least 1 element, got 0")


def check_rectangular(columns: list[Sized], name: str) -> int:
    """
    Verify every column has the same length.

    Args:
        columns: Column collections to check
        name: Parameter name for error messages

    Returns:
        The common column length (0 when there are no columns)

    Raises:
        DimensionError: If any column length differs from the first
    """
    if not columns:
        return 0
    length = len(columns[0])
    for j, col in enumerate(columns):
        if len(col) != length:
            raise DimensionError(
                f"{name}: column {j} has length {len(col)}, expected {length}",
                operation=name,
                expected=length,
                actual=len(col),
            )
    return length
