"""
Vector-set analysis solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from vecspace.core.result import Result
from vecspace.analysis._report import format_report, format_summary

if TYPE_CHECKING:
    from vecspace.analysis.design import VectorSetDesign


@dataclass(frozen=True)
class AnalysisParams:
    """
    Parameter payload for vector-set analysis.

    determinant is None unless the matrix is square; dependency_relation
    is None unless the vectors are dependent.
    """
    dimension: int
    vector_count: int
    rank: int
    is_linearly_independent: bool
    rref: NDArray[np.float64]
    basis_vectors: NDArray[np.float64]
    basis_indices: tuple[int, ...]
    determinant: float | None = None
    dependency_relation: str | None = None


@dataclass
class AnalysisSolution:
    """
    User-facing analysis results.

    Wraps Result[AnalysisParams] and provides convenient accessors plus
    text and dict renderings for the host application.
    """
    _result: Result[AnalysisParams]
    _design: 'VectorSetDesign'

    # --- Core results ---

    @property
    def rank(self) -> int:
        """Dimension of the span of the input vectors."""
        return self._result.params.rank

    @property
    def is_linearly_independent(self) -> bool:
        """True when rank equals the number of vectors."""
        return self._result.params.is_linearly_independent

    @property
    def determinant(self) -> float | None:
        """Determinant, or None if vector count != dimension."""
        return self._result.params.determinant

    @property
    def rref(self) -> NDArray[np.float64]:
        """Reduced row echelon form, same shape as the input."""
        return self._result.params.rref

    @property
    def basis_vectors(self) -> NDArray[np.float64]:
        """Original input vectors forming a basis, shape (rank, dimension)."""
        return self._result.params.basis_vectors

    @property
    def basis_indices(self) -> tuple[int, ...]:
        """Row indices of the basis vectors in the input."""
        return self._result.params.basis_indices

    @property
    def dependency_relation(self) -> str | None:
        """Dependency sentence, or None if independent."""
        return self._result.params.dependency_relation

    # --- Input ---

    @property
    def vectors(self) -> NDArray[np.float64]:
        return self._design.vectors

    @property
    def dimension(self) -> int:
        return self._result.params.dimension

    @property
    def vector_count(self) -> int:
        return self._result.params.vector_count

    @property
    def pivot_columns(self) -> tuple[int, ...]:
        return self._result.info.get('pivot_columns', ())

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    # --- Rendering ---

    def summary(self) -> str:
        """Short plain-text summary (vectors to 2 places, determinant to 4)."""
        return format_summary(self)

    def report(self, generated: datetime | None = None) -> str:
        """
        Full plain-text report.

        Parameters
        ----------
        generated : datetime, optional
            Timestamp printed in the header. Defaults to now.
        """
        return format_report(self, generated or datetime.now())

    def write_report(self, path: str | Path, generated: datetime | None = None) -> Path:
        """Write report() to `path` as UTF-8 text and return the path."""
        path = Path(path)
        path.write_text(self.report(generated) + "\n", encoding="utf-8")
        return path

    def default_report_name(self, generated: datetime | None = None) -> str:
        """File name of the form vector-analysis-3D-<epoch ms>.txt."""
        stamp = generated or datetime.now()
        return f"vector-analysis-{self.dimension}D-{int(stamp.timestamp() * 1000)}.txt"

    def to_dict(self) -> dict[str, Any]:
        """
        Plain-Python rendering for interchange (JSON-safe, unrounded).

        Matrices become lists of lists; absent fields are None.
        """
        params = self._result.params
        return {
            'dimension': params.dimension,
            'vector_count': params.vector_count,
            'vectors': self._design.to_list(),
            'rank': params.rank,
            'is_linearly_independent': params.is_linearly_independent,
            'determinant': params.determinant,
            'rref': params.rref.tolist(),
            'basis_vectors': params.basis_vectors.tolist(),
            'basis_indices': list(params.basis_indices),
            'dependency_relation': params.dependency_relation,
        }

    def __repr__(self) -> str:
        status = "independent" if self.is_linearly_independent else "dependent"
        det = f", det={self.determinant:.6g}" if self.determinant is not None else ""
        return (
            f"AnalysisSolution(n_vectors={self.vector_count}, dimension={self.dimension}, "
            f"rank={self.rank}, {status}{det})"
        )
