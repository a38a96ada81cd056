"""
VectorSetDesign: data wrapper for vector-set analysis.

Wraps the stack of input vectors (one vector per row) and provides
validation and metadata for the analysis pipeline. The wrapped array is a
private, read-only copy, so no caller edit can reach an analysis in
progress and no analysis can reach back into caller data.
"""

from __future__ import annotations

from dataclasses import dataclass
import numpy as np
from numpy.typing import ArrayLike, NDArray

from vecspace.core.compute.tolerances import is_zero
from vecspace.core.exceptions import ValidationError
from vecspace.core.validation import (
    check_2d,
    check_array,
    check_finite,
    check_in_range,
    check_nonempty,
    check_not_all_zero,
)

# Bounds enforced for interactive input. The engine accepts any shape.
MIN_DIMENSION = 2
MAX_DIMENSION = 10
MIN_VECTORS = 2
MAX_VECTORS = 10


@dataclass(frozen=True)
class VectorSetDesign:
    """
    Design for vector-set analysis.

    Wraps a matrix (n_vectors x dimension). Row i is input vector v{i+1};
    row order is preserved everywhere a result refers back to an input
    vector. Immutable after construction.

    Construction:
        VectorSetDesign.from_vectors([[1, 2], [2, 4], [3, 6]])
        VectorSetDesign.from_vectors(vectors, host_rules=True)
    """
    _vectors: NDArray[np.float64]
    _n_vectors: int
    _dimension: int

    @classmethod
    def from_vectors(
        cls,
        vectors: ArrayLike,
        *,
        host_rules: bool = False,
    ) -> VectorSetDesign:
        """
        Build VectorSetDesign from a sequence of vectors.

        Parameters
        ----------
        vectors : array-like
            Sequence of equal-length numeric vectors, or a 2D array with
            one vector per row. A 1D input is taken as a single vector.
        host_rules : bool
            Also enforce the interactive-input rules: dimension and vector
            count in [2, 10] and at least one non-zero component.
        """
        data = check_array(vectors, "vectors")

        if data.ndim == 1:
            data = data.reshape(1, -1)

        design = cls._build(data)
        if host_rules:
            design.check_host_rules()
        return design

    @classmethod
    def _build(cls, data: NDArray[np.float64]) -> VectorSetDesign:
        """Internal builder with validation."""
        check_2d(data, "vectors")
        check_nonempty(data, "vectors")
        check_finite(data, "vectors")

        data = np.array(data, dtype=np.float64, copy=True)
        data.setflags(write=False)
        n_vectors, dimension = data.shape
        return cls(_vectors=data, _n_vectors=n_vectors, _dimension=dimension)

    def check_host_rules(self) -> None:
        """
        Enforce the interactive-input rules.

        Raises
        ------
        ValidationError
            If the dimension or vector count is outside [2, 10], or every
            component is zero.
        """
        check_in_range(self._dimension, MIN_DIMENSION, MAX_DIMENSION, "dimension")
        check_in_range(self._n_vectors, MIN_VECTORS, MAX_VECTORS, "number of vectors")
        check_not_all_zero(self._vectors, "vectors")

    def resized(self, dimension: int) -> VectorSetDesign:
        """
        Return a new design with every vector moved to `dimension`.

        Extra components are dropped; missing components are filled with
        zeros. The original design is unchanged.
        """
        if dimension < 1:
            raise ValidationError(f"dimension must be at least 1, got {dimension}")

        out = np.zeros((self._n_vectors, dimension), dtype=np.float64)
        keep = min(dimension, self._dimension)
        out[:, :keep] = self._vectors[:, :keep]
        return self._build(out)

    @property
    def vectors(self) -> NDArray[np.float64]:
        """Input vectors as rows (n_vectors x dimension), read-only."""
        return self._vectors

    @property
    def n_vectors(self) -> int:
        """Number of input vectors."""
        return self._n_vectors

    @property
    def dimension(self) -> int:
        """Number of components per vector."""
        return self._dimension

    @property
    def shape(self) -> tuple[int, int]:
        return (self._n_vectors, self._dimension)

    @property
    def is_square(self) -> bool:
        """Whether vector count equals dimension (determinant defined)."""
        return self._n_vectors == self._dimension

    @property
    def is_all_zero(self) -> bool:
        """Whether every component is within EPSILON of zero."""
        return bool(np.all(is_zero(self._vectors)))

    def to_list(self) -> list[list[float]]:
        """Vectors as nested Python lists."""
        return self._vectors.tolist()

    def __repr__(self) -> str:
        zero = ", all_zero" if self.is_all_zero else ""
        return f"VectorSetDesign(n_vectors={self._n_vectors}, dimension={self._dimension}{zero})"
