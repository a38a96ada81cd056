"""Textual summary of linear dependence among the input vectors."""

from __future__ import annotations


def describe_dependency(n_vectors: int, rank: int) -> str | None:
    """
    Sentence describing how many vectors are redundant.

    Returns None when the vectors are independent (rank == n_vectors).
    Only the count is reported; no combination coefficients are computed.
    """
    if rank == n_vectors:
        return None

    dependent = n_vectors - rank
    if dependent == 1:
        return (
            f"There is 1 linearly dependent vector that can be expressed as "
            f"a linear combination of the other {rank} vectors."
        )
    return (
        f"There are {dependent} linearly dependent vectors that can be "
        f"expressed as linear combinations of the other {rank} vectors."
    )
