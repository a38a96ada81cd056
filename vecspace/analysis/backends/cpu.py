"""
CPU reference backend for vector-set analysis.

Runs every step from the same original matrix, in a fixed order:
rank, independence, determinant (square only), RREF, basis, dependency.
"""

from __future__ import annotations

from vecspace.core.result import Result
from vecspace.core.compute.timing import Timer
from vecspace.core.compute.tolerances import EPSILON
from vecspace.core.compute.linalg import (
    determinant_of,
    pivot_columns,
    rank_of,
    rref_with_order,
)
from vecspace.analysis.design import VectorSetDesign
from vecspace.analysis.solution import AnalysisParams
from vecspace.analysis._basis import basis_indices
from vecspace.analysis._dependency import describe_dependency


class CPUAnalysisBackend:
    """CPU reference backend for vector-set analysis."""

    @property
    def name(self) -> str:
        return 'cpu_gauss_jordan'

    def solve(self, design: VectorSetDesign) -> Result[AnalysisParams]:
        """
        Analyze the vectors held by `design`.

        Each kernel receives the design's read-only matrix and makes its
        own working copy, so no step sees another step's intermediate state.
        """
        timer = Timer()
        timer.start()

        A = design.vectors
        warnings_list: list[str] = []

        if design.is_all_zero:
            warnings_list.append(
                "all input vectors are zero; rank is 0 and the basis is empty"
            )

        with timer.section('rank'):
            rank = rank_of(A)

        independent = rank == design.n_vectors

        determinant = None
        if design.is_square:
            with timer.section('determinant'):
                determinant = determinant_of(A)

        with timer.section('rref'):
            rref, order = rref_with_order(A)

        with timer.section('basis'):
            indices = basis_indices(rref, rank, order)
            basis = A[list(indices)]

        dependency = None
        if not independent:
            with timer.section('dependency'):
                dependency = describe_dependency(design.n_vectors, rank)

        timer.stop()

        params = AnalysisParams(
            dimension=design.dimension,
            vector_count=design.n_vectors,
            rank=rank,
            is_linearly_independent=independent,
            rref=rref,
            basis_vectors=basis,
            basis_indices=indices,
            determinant=determinant,
            dependency_relation=dependency,
        )

        return Result(
            params=params,
            info={
                'method': 'gauss_jordan',
                'n_vectors': design.n_vectors,
                'dimension': design.dimension,
                'is_square': design.is_square,
                'pivot_columns': pivot_columns(rref),
                'epsilon': EPSILON,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
