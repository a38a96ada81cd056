"""
Gauss-Jordan elimination kernels: rank and reduced row echelon form.

Both kernels treat the input as a stack of row vectors (one row per input
vector) and work on a private float64 copy. Pivot rows are divided to unit
scale, so neither kernel may be reused for the determinant (see
determinant.py, which keeps its own pass).
"""

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from vecspace.core.compute.tolerances import EPSILON


def _working_copy(A: ArrayLike) -> NDArray[np.float64]:
    M = np.array(A, dtype=np.float64, copy=True)
    if M.ndim != 2:
        raise ValueError(f"expected a 2D array of row vectors, got shape {M.shape}")
    return M


def _swap_rows(M: NDArray[Any], a: int, b: int) -> None:
    if a != b:
        M[[a, b]] = M[[b, a]]


def rank_of(A: ArrayLike) -> int:
    """
    Rank of a stack of row vectors by forward Gauss-Jordan elimination.

    Columns are scanned left to right. In each column the first row at or
    below the current rank with |entry| > EPSILON becomes the pivot; it is
    swapped into place, scaled to a leading 1 and eliminated from every
    other row, above as well as below. Columns with no such entry
    contribute nothing.

    Args:
        A: Matrix (n_vectors x dimension). Not modified.

    Returns:
        Number of pivots found, in [0, min(n_vectors, dimension)]
    """
    M = _working_copy(A)
    m, n = M.shape
    rank = 0

    for col in range(n):
        if rank >= m:
            break

        candidates = np.flatnonzero(np.abs(M[rank:, col]) > EPSILON)
        if candidates.size == 0:
            continue

        _swap_rows(M, rank, rank + int(candidates[0]))
        M[rank, col:] /= M[rank, col]

        factors = M[:, col].copy()
        factors[rank] = 0.0
        M[:, col:] -= np.outer(factors, M[rank, col:])

        rank += 1

    return rank


def rref_with_order(
    A: ArrayLike,
) -> tuple[NDArray[np.float64], NDArray[np.intp]]:
    """
    Reduced row echelon form plus the input row behind each output row.

    A lead-column cursor starts at 0. For each row r, the first row at or
    below r with |entry| > EPSILON in the lead column is swapped into r;
    when there is none the cursor moves right and the same row is retried.
    The pivot row is divided by its pivot and the lead column is cleared
    from every other row. Once the cursor runs off the last column the
    remaining rows are returned as they stand.

    Args:
        A: Matrix (n_vectors x dimension). Not modified.

    Returns:
        (R, order) where R is a new array of the same shape in reduced row
        echelon form and order[i] is the index of the input row that was
        swapped into row i
    """
    M = _working_copy(A)
    m, n = M.shape
    order = np.arange(m)
    lead = 0

    for r in range(m):
        if lead >= n:
            break

        i = r
        while abs(M[i, lead]) <= EPSILON:
            i += 1
            if i == m:
                i = r
                lead += 1
                if lead == n:
                    return M, order

        _swap_rows(M, r, i)
        _swap_rows(order, r, i)
        M[r] /= M[r, lead]

        factors = M[:, lead].copy()
        factors[r] = 0.0
        M -= np.outer(factors, M[r])

        lead += 1

    return M, order


def rref_of(A: ArrayLike) -> NDArray[np.float64]:
    """
    Reduced row echelon form by Gauss-Jordan elimination.

    Args:
        A: Matrix (n_vectors x dimension). Not modified.

    Returns:
        New array of the same shape in reduced row echelon form
    """
    return rref_with_order(A)[0]


def pivot_columns(R: NDArray[np.floating[Any]]) -> tuple[int, ...]:
    """
    Column indices holding a leading 1 in an RREF matrix.

    Args:
        R: Matrix already in reduced row echelon form

    Returns:
        Pivot column indices in increasing order
    """
    cols = []
    for row in R:
        nonzero = np.flatnonzero(np.abs(row) > EPSILON)
        if nonzero.size:
            cols.append(int(nonzero[0]))
    return tuple(cols)
