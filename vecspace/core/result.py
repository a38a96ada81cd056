"""
Generic result container for all vecspace computations.

The Result class provides a standardized envelope that domain-specific
results use. This enables shared tooling for timing, reproducibility,
and serialization while allowing domains to define their own parameter
structures.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, pivot columns, diagnostics)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

import platform
from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, str]:
    """Library and interpreter versions that produced a result."""
    import numpy as np
    from vecspace import __version__

    return {
        'vecspace_version': __version__,
        'numpy_version': np.__version__,
        'python_version': platform.python_version(),
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for vector-set computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific payload (rank, RREF, basis, ...)
        info: Structured metadata (method, pivot columns, square flag)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Versions of the software that produced the result

    Examples:
        >>> Result(
        ...     params=AnalysisParams(...),
        ...     info={'method': 'gauss_jordan', 'pivot_columns': (0, 1)},
        ...     timing={'total_seconds': 0.0004},
        ...     backend_name='cpu_gauss_jordan'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, str] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
