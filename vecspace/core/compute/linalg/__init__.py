"""
Linear algebra kernels for vecspace.

All functions follow these conventions:
    - Inputs are stacks of row vectors (n_vectors x dimension)
    - Every kernel works on its own float64 copy; inputs are never mutated
    - Zero decisions use the shared EPSILON from tolerances.py
    - Contract violations are raised immediately with clear messages

Submodules:
    elimination: rank and RREF (normalizing Gauss-Jordan)
    determinant: partially pivoted determinant (non-normalizing)
"""

from vecspace.core.compute.linalg.elimination import (
    rank_of,
    rref_of,
    rref_with_order,
    pivot_columns,
)
from vecspace.core.compute.linalg.determinant import determinant_of

__all__ = [
    "rank_of",
    "rref_of",
    "rref_with_order",
    "pivot_columns",
    "determinant_of",
]
