"""
Input validation utilities for vecspace.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except conversion of array-likes to float64)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from collections.abc import Sequence
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from vecspace.core.compute.tolerances import is_zero
from vecspace.core.exceptions import DimensionError, ValidationError


def check_rectangular(vectors: Any, name: str) -> None:
    """
    Verify a nested sequence of vectors has rows of equal length.

    NumPy refuses ragged nested lists with a generic ValueError; this check
    runs first so the caller gets a DimensionError naming the bad row.
    Arrays are rectangular by construction and pass through.

    Args:
        vectors: Sequence of vectors (or an ndarray)
        name: Parameter name for error messages

    Raises:
        DimensionError: If rows have different lengths
    """
    if isinstance(vectors, np.ndarray) or not isinstance(vectors, Sequence):
        return
    lengths = [
        len(row) if isinstance(row, (Sequence, np.ndarray)) and not isinstance(row, str)
        else None
        for row in vectors
    ]
    if not lengths or any(n is None for n in lengths):
        return
    expected = lengths[0]
    for i, n in enumerate(lengths):
        if n != expected:
            raise DimensionError(
                f"{name}: ragged matrix, vector {i} has {n} components "
                f"but vector 0 has {expected}"
            )


def check_array(array: ArrayLike, name: str) -> NDArray[np.float64]:
    """
    Validate and convert input to a private float64 numpy array.

    The result is always a fresh copy, so later in-place elimination can
    never be observed through the caller's object.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray of dtype float64

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    check_rectangular(array, name)

    try:
        result = np.array(array, copy=True)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex values are not supported")

    return result.astype(np.float64, copy=False)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 2-dimensional (vectors as rows).

    Raises:
        DimensionError: If array is not 2D
    """
    if array.ndim != 2:
        raise DimensionError(
            f"{name}: expected 2D array of vectors, got {array.ndim}D with shape {array.shape}"
        )


def check_nonempty(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify the array holds at least one vector with at least one component.

    Raises:
        DimensionError: If the array has no elements
    """
    if array.size == 0:
        raise DimensionError(
            f"{name}: empty matrix (shape {array.shape}), need at least one "
            f"vector with at least one component"
        )


def check_not_all_zero(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify at least one component is farther than EPSILON from zero.

    The engine itself tolerates all-zero input; this is a host rule.

    Raises:
        ValidationError: If every component is within EPSILON of zero
    """
    if np.all(is_zero(array)):
        raise ValidationError(
            f"{name}: all components are zero, enter at least one non-zero vector"
        )


def check_in_range(value: int, low: int, high: int, name: str) -> None:
    """
    Verify an integer count lies in the closed range [low, high].

    Raises:
        ValidationError: If value is outside the range
    """
    if not low <= value <= high:
        raise ValidationError(
            f"{name} must be between {low} and {high}, got {value}"
        )

