"""
Shared compute infrastructure for vecspace.

IMPORTANT: This is NOT where the analysis orchestration lives. That goes in
analysis/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    tolerances: EPSILON and comparison tiers
    timing: Execution timing utilities
    linalg: Elimination kernels (rank, RREF, determinant)
"""

from vecspace.core.compute.timing import Timer
from vecspace.core.compute.tolerances import EPSILON

__all__ = [
    "EPSILON",
    "Timer",
]
