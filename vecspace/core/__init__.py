"""
Core infrastructure for vecspace.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Tolerances, timing, elimination kernels
"""

from vecspace.core.result import Result
from vecspace.core.exceptions import (
    VecspaceError,
    ValidationError,
    DimensionError,
    PreconditionError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "VecspaceError",
    "ValidationError",
    "DimensionError",
    "PreconditionError",
]
