"""
vecspace: linear-algebraic analysis of small vector sets.

Given a handful of equal-length real vectors, reports rank, linear
independence, determinant, reduced row echelon form, a basis drawn from
the inputs and a dependency summary.

Submodules:
    analysis: Vector-set analysis (analyze, rank, determinant, rref, ...)
    core: Exceptions, Result envelope, validation, elimination kernels
"""

__version__ = "0.1.0"

from vecspace import analysis
from vecspace.analysis import analyze, VectorSetDesign, AnalysisSolution

__all__ = [
    "__version__",
    "analysis",
    "analyze",
    "VectorSetDesign",
    "AnalysisSolution",
]
