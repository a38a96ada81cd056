"""
Example vector sets and random input generation.

The examples cover a dependent and an independent set in 2, 3 and 4
dimensions.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from vecspace.core.exceptions import ValidationError

# All multiples of (1, 2)
dependent_2d = np.array([
    [1.0, 2.0],
    [2.0, 4.0],
    [3.0, 6.0],
])

# Standard basis plus their sum
independent_2d = np.array([
    [1.0, 0.0],
    [0.0, 1.0],
    [1.0, 1.0],
])

dependent_3d = np.array([
    [1.0, 2.0, 3.0],
    [2.0, 4.0, 6.0],
    [3.0, 6.0, 9.0],
])

independent_3d = np.eye(3)

dependent_4d = np.array([
    [1.0, 2.0, 3.0, 4.0],
    [2.0, 4.0, 6.0, 8.0],
    [3.0, 6.0, 9.0, 12.0],
])

independent_4d = np.eye(4)

EXAMPLES: dict[str, NDArray[np.float64]] = {
    '2D-dependent': dependent_2d,
    '2D-independent': independent_2d,
    '3D-dependent': dependent_3d,
    '3D-independent': independent_3d,
    '4D-dependent': dependent_4d,
    '4D-independent': independent_4d,
}

for _arr in EXAMPLES.values():
    _arr.setflags(write=False)


def load_example(name: str) -> NDArray[np.float64]:
    """
    Return a writable copy of a named example set.

    Raises
    ------
    ValidationError
        If `name` is not one of EXAMPLES.
    """
    if name not in EXAMPLES:
        raise ValidationError(
            f"Unknown example {name!r}. Available: {sorted(EXAMPLES)}"
        )
    return EXAMPLES[name].copy()


def random_vectors(
    n_vectors: int,
    dimension: int,
    rng: np.random.Generator | int | None = None,
) -> NDArray[np.float64]:
    """
    Random vectors with components uniform in [-3, 3], rounded to 2 places.

    Parameters
    ----------
    n_vectors, dimension : int
        Output shape.
    rng : Generator, int or None
        Generator or seed passed to np.random.default_rng.
    """
    if n_vectors < 1 or dimension < 1:
        raise ValidationError(
            f"n_vectors and dimension must be positive, got {n_vectors} and {dimension}"
        )
    gen = np.random.default_rng(rng)
    return np.round(gen.uniform(-3.0, 3.0, size=(n_vectors, dimension)), 2)
