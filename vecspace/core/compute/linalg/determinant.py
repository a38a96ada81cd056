"""
Determinant by partially pivoted Gaussian elimination.

This pass never scales a pivot row to unit length: the determinant is the
signed product of the raw pivots, so it must not share code with the
normalizing kernels in elimination.py.
"""

import numpy as np
from numpy.typing import ArrayLike

from vecspace.core.compute.tolerances import EPSILON
from vecspace.core.exceptions import PreconditionError


def determinant_of(A: ArrayLike) -> float:
    """
    Determinant of a square stack of row vectors.

    For each row i the row at or below i with the largest |entry| in column
    i is chosen as pivot. If even that entry is within EPSILON of zero the
    matrix is singular and exactly 0.0 is returned at once. Every row swap
    flips the sign of the running product.

    Args:
        A: Square matrix (n x n). Not modified.

    Returns:
        The determinant as a Python float

    Raises:
        PreconditionError: If A is not square
    """
    M = np.array(A, dtype=np.float64, copy=True)
    if M.ndim != 2 or M.shape[0] != M.shape[1]:
        raise PreconditionError(
            f"determinant requires a square matrix (vector count == dimension), "
            f"got shape {M.shape}",
            operation='determinant',
            shape=tuple(M.shape),
        )

    n = M.shape[0]
    det = 1.0

    for i in range(n):
        pivot_row = i + int(np.argmax(np.abs(M[i:, i])))
        if abs(M[pivot_row, i]) <= EPSILON:
            return 0.0

        if pivot_row != i:
            M[[i, pivot_row]] = M[[pivot_row, i]]
            det = -det

        pivot = M[i, i]
        det *= pivot

        factors = M[i + 1:, i] / pivot
        M[i + 1:, i:] -= np.outer(factors, M[i, i:])

    return float(det)
