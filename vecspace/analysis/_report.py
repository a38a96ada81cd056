"""
Plain-text renderings of an analysis.

Numbers are rounded here and nowhere else; the solution payload keeps full
precision.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from vecspace.analysis.solution import AnalysisSolution

TITLE = "Linear Algebra Vector Analysis"


def _fmt(value: float, places: int) -> str:
    text = f"{value:.{places}f}"
    # -0.0000 reads as a sign error to users
    if text.startswith('-') and float(text) == 0.0:
        text = text[1:]
    return text


def _join(values: Iterable[float], places: int, sep: str = ", ") -> str:
    return sep.join(_fmt(v, places) for v in values)


def _status(solution: AnalysisSolution) -> str:
    return "Independent" if solution.is_linearly_independent else "Dependent"


def format_report(solution: AnalysisSolution, generated: datetime) -> str:
    lines = [
        TITLE,
        f"Generated: {generated:%Y-%m-%d %H:%M:%S}",
        "",
        f"Dimension: {solution.dimension}D",
        f"Number of vectors: {solution.vector_count}",
        "",
        "Vectors:",
    ]
    for i, v in enumerate(solution.vectors):
        lines.append(f"  v{i + 1} = ({_join(v, 4)})")

    lines += [
        "",
        "Analysis Results:",
        f"  Rank: {solution.rank} of {solution.vector_count}",
        f"  Linear Dependency: {_status(solution)}",
    ]
    if solution.determinant is not None:
        lines.append(f"  Determinant: {_fmt(solution.determinant, 6)}")

    lines += ["", "Reduced Row Echelon Form:"]
    for row in solution.rref:
        lines.append(f"  [{_join(row, 4)}]")

    lines += ["", "Basis Vectors:"]
    if solution.basis_indices:
        for i, v in zip(solution.basis_indices, solution.basis_vectors):
            lines.append(f"  v{i + 1} = ({_join(v, 4)})")
    else:
        lines.append("  (none)")

    if solution.dependency_relation:
        lines += ["", "Dependency Relation:", f"  {solution.dependency_relation}"]

    return "\n".join(lines)


def format_summary(solution: AnalysisSolution) -> str:
    vectors = ", ".join(
        f"v{i + 1}=({_join(v, 2, sep=',')})" for i, v in enumerate(solution.vectors)
    )
    lines = [
        TITLE,
        f"Dimension: {solution.dimension}D",
        f"Vectors: {vectors}",
        f"Rank: {solution.rank}/{solution.vector_count}",
        f"Status: {_status(solution)}",
    ]
    if solution.determinant is not None:
        lines.append(f"Determinant: {_fmt(solution.determinant, 4)}")
    return "\n".join(lines)
