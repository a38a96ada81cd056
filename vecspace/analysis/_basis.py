"""
Basis extraction from RREF pivot columns.

The basis is reported as original input vectors, never RREF rows, so the
caller can recognise which of their vectors span the set.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from vecspace.core.compute.linalg import rank_of, rref_with_order
from vecspace.core.compute.tolerances import EPSILON, is_one


def _leading_column(row: NDArray[np.floating[Any]]) -> int | None:
    nonzero = np.flatnonzero(np.abs(row) > EPSILON)
    return int(nonzero[0]) if nonzero.size else None


def _is_pivot(R: NDArray[np.floating[Any]], row: int, col: int) -> bool:
    # A 1 alone in its column is only a pivot if it also leads its row;
    # otherwise it is a free column that happens to look like a unit vector.
    if _leading_column(R[row]) != col or not is_one(R[row, col]):
        return False
    others = np.delete(R[:, col], row)
    return bool(np.all(np.abs(others) <= EPSILON))


def basis_indices(
    R: NDArray[np.floating[Any]],
    rank: int,
    row_order: ArrayLike | None = None,
) -> tuple[int, ...]:
    """
    Indices of the input vectors that form a basis.

    Columns of the RREF are scanned left to right. Within a column, rows
    are scanned top to bottom for a true pivot: the row's leading entry,
    within EPSILON of 1, with the rest of the column zero. The first hit in
    a column is taken and each row is taken at most once. Scanning stops
    once `rank` rows are collected.

    Args:
        R: RREF of the input matrix
        rank: Rank of the input matrix
        row_order: row_order[i] is the input row that elimination moved to
            RREF row i. Defaults to no reordering.

    Returns:
        Indices into the original input rows, strictly increasing
    """
    if rank == 0:
        return ()

    n_rows, n_cols = R.shape
    order = np.arange(n_rows) if row_order is None else np.asarray(row_order)
    found: list[int] = []
    for col in range(n_cols):
        if len(found) >= rank:
            break
        for row in range(n_rows):
            if row not in found and _is_pivot(R, row, col):
                found.append(row)
                break
    return tuple(sorted(int(order[row]) for row in found))


def extract_basis(
    A: ArrayLike,
) -> tuple[NDArray[np.float64], tuple[int, ...]]:
    """
    Basis vectors of A, taken from A's own rows.

    Rank and RREF are both computed from A independently.

    Returns:
        (basis, indices) where basis has shape (rank, dimension)
    """
    A = np.asarray(A, dtype=np.float64)
    rank = rank_of(A)
    R, order = rref_with_order(A)
    indices = basis_indices(R, rank, order)
    return A[list(indices)], indices
