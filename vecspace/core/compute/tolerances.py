"""
Tolerances for exact-zero decisions during elimination.

Every kernel (rank, determinant, RREF) and the basis pivot scan compare
against the same EPSILON. Sharing one value keeps their answers mutually
consistent: a square matrix has rank < n exactly when its determinant
comes back as 0.

ToleranceTier is used by the test suite when comparing engine output
against NumPy/SciPy references.
"""

from dataclasses import dataclass

import numpy as np


# Absolute threshold below which a value is treated as exact zero.
EPSILON = 1e-10


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Well-conditioned inputs: kernels should agree with LAPACK closely
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision, well-conditioned input',
)

# Random inputs rounded to 2 decimals can be mildly ill-conditioned
CPU_FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-6,
    atol=1e-8,
    name='cpu_fp64_ill_conditioned',
    description='CPU double precision, ill-conditioned (cond > 1e4)',
)


def is_zero(value):
    """True where |value| does not exceed EPSILON. Works elementwise on arrays."""
    return np.abs(value) <= EPSILON


def is_one(value: float) -> bool:
    """True when value is within EPSILON of exactly 1."""
    return abs(value - 1.0) < EPSILON


def select_tolerance(is_ill_conditioned: bool = False) -> ToleranceTier:
    """Select the comparison tier for a reference cross-check."""
    if is_ill_conditioned:
        return CPU_FP64_ILL_CONDITIONED
    return CPU_FP64
