"""Compute backends for vector-set analysis."""

from vecspace.analysis.backends.cpu import CPUAnalysisBackend

__all__ = ["CPUAnalysisBackend"]
