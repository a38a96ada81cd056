"""
Solver dispatch for vector-set analysis.

Provides analyze() as the comprehensive entry point, plus individual
functions: rank(), determinant(), rref(), basis_vectors(),
dependency_relation().
"""

from __future__ import annotations

import warnings
from typing import Literal
import numpy as np
from numpy.typing import ArrayLike, NDArray

from vecspace.core.compute.linalg import determinant_of, rank_of, rref_of
from vecspace.core.exceptions import PreconditionError, ValidationError
from vecspace.analysis.design import VectorSetDesign
from vecspace.analysis.solution import AnalysisSolution
from vecspace.analysis.backends.cpu import CPUAnalysisBackend
from vecspace.analysis._basis import extract_basis
from vecspace.analysis._dependency import describe_dependency


ValidateMode = Literal['engine', 'host']
BackendChoice = Literal['auto', 'cpu']


def _ensure_design(
    data: ArrayLike | VectorSetDesign,
    validate: ValidateMode = 'engine',
) -> VectorSetDesign:
    """Convert raw vectors to VectorSetDesign if needed."""
    if validate not in ('engine', 'host'):
        raise ValidationError(
            f"validate must be 'engine' or 'host', got {validate!r}"
        )
    if isinstance(data, VectorSetDesign):
        design = data
    else:
        design = VectorSetDesign.from_vectors(data)
    if validate == 'host':
        design.check_host_rules()
    return design


def _get_backend(backend: BackendChoice):
    """Select backend based on preference."""
    if backend in ('auto', 'cpu'):
        return CPUAnalysisBackend()
    raise ValidationError(f"Unknown backend: {backend!r}")


def analyze(
    vectors: ArrayLike | VectorSetDesign,
    *,
    validate: ValidateMode = 'engine',
    backend: BackendChoice = 'auto',
) -> AnalysisSolution:
    """
    Analyze the linear relationships among a set of vectors.

    Computes, each from the original vectors: rank, linear independence,
    determinant (only when vector count equals dimension), reduced row
    echelon form, basis vectors (a subset of the inputs) and a dependency
    sentence (only when dependent).

    Parameters
    ----------
    vectors : array-like or VectorSetDesign
        Equal-length vectors, one per row.
    validate : str
        'engine' accepts any non-empty finite matrix, including all-zero
        input. 'host' also enforces the interactive-input rules:
        dimension and vector count in [2, 10], not all zero.
    backend : str
        'auto' or 'cpu'.

    Returns
    -------
    AnalysisSolution with every field populated as applicable.

    Examples
    --------
    >>> sol = analyze([[1, 2], [2, 4], [3, 6]])
    >>> sol.rank, sol.is_linearly_independent
    (1, False)
    """
    design = _ensure_design(vectors, validate)
    be = _get_backend(backend)

    result = be.solve(design)

    for message in result.warnings:
        warnings.warn(message, RuntimeWarning, stacklevel=2)

    return AnalysisSolution(_result=result, _design=design)


def rank(vectors: ArrayLike | VectorSetDesign) -> int:
    """
    Number of linearly independent vectors among the inputs.

    Returns
    -------
    int in [0, min(n_vectors, dimension)].
    """
    design = _ensure_design(vectors)
    return rank_of(design.vectors)


def determinant(vectors: ArrayLike | VectorSetDesign) -> float:
    """
    Determinant of the matrix whose rows are the input vectors.

    Returns exactly 0.0 when a pivot falls within EPSILON of zero.

    Raises
    ------
    PreconditionError
        If the number of vectors differs from the dimension. Check
        ``VectorSetDesign.is_square`` before calling.
    """
    design = _ensure_design(vectors)
    if not design.is_square:
        raise PreconditionError(
            f"determinant is only defined when the number of vectors equals "
            f"the dimension, got {design.n_vectors} vectors of dimension "
            f"{design.dimension}",
            operation='determinant',
            shape=design.shape,
        )
    return determinant_of(design.vectors)


def rref(vectors: ArrayLike | VectorSetDesign) -> NDArray[np.float64]:
    """Reduced row echelon form; a new array with the input's shape."""
    design = _ensure_design(vectors)
    return rref_of(design.vectors)


def basis_vectors(vectors: ArrayLike | VectorSetDesign) -> NDArray[np.float64]:
    """
    Input vectors that form a basis for the span, in pivot-column order.

    The rows returned are the caller's own vectors, not RREF rows.

    Returns
    -------
    ndarray of shape (rank, dimension).
    """
    design = _ensure_design(vectors)
    basis, _ = extract_basis(design.vectors)
    return basis


def dependency_relation(vectors: ArrayLike | VectorSetDesign) -> str | None:
    """
    Sentence stating how many vectors depend on the others.

    Returns None when the vectors are linearly independent.
    """
    design = _ensure_design(vectors)
    return describe_dependency(design.n_vectors, rank_of(design.vectors))
