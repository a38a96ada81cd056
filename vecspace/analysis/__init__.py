"""
Vector-set analysis module.

Public API:
    analyze(vectors)              - All results at once
    rank(vectors)                 - Rank of the vector set
    determinant(vectors)          - Determinant (square sets only)
    rref(vectors)                 - Reduced row echelon form
    basis_vectors(vectors)        - Input vectors spanning the set
    dependency_relation(vectors)  - Dependency sentence, or None
"""

from vecspace.analysis.design import VectorSetDesign
from vecspace.analysis.solution import AnalysisParams, AnalysisSolution
from vecspace.analysis.solvers import (
    analyze,
    rank,
    determinant,
    rref,
    basis_vectors,
    dependency_relation,
)
from vecspace.analysis import datasets

__all__ = [
    "analyze",
    "rank",
    "determinant",
    "rref",
    "basis_vectors",
    "dependency_relation",
    "VectorSetDesign",
    "AnalysisParams",
    "AnalysisSolution",
    "datasets",
]
