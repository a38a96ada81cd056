"""
Tests for the elimination kernels in core/compute/linalg.

rank_of and rref_of normalize pivot rows; determinant_of must not. These
tests pin down the pivot rules, the EPSILON policy and non-mutation.
"""

import numpy as np
import pytest

from vecspace.core.compute.linalg import (
    determinant_of,
    pivot_columns,
    rank_of,
    rref_of,
    rref_with_order,
)
from vecspace.core.exceptions import PreconditionError


class TestRankOf:

    def test_identity(self):
        assert rank_of(np.eye(4)) == 4

    def test_zero_matrix(self):
        assert rank_of(np.zeros((3, 3))) == 0

    def test_skips_zero_column(self):
        A = np.array([[0.0, 1.0, 2.0], [0.0, 2.0, 5.0]])
        assert rank_of(A) == 2

    def test_wide_matrix(self):
        A = np.array([[1.0, 2.0, 3.0, 4.0]])
        assert rank_of(A) == 1

    def test_tall_matrix_capped_by_dimension(self):
        A = np.array([[1.0, 0.0], [0.0, 1.0], [1.0, 1.0], [2.0, 3.0]])
        assert rank_of(A) == 2

    def test_below_epsilon_is_zero(self):
        A = np.array([[1.0, 1.0], [1.0, 1.0 + 1e-12]])
        assert rank_of(A) == 1

    def test_input_not_modified(self):
        A = np.array([[0.0, 2.0], [3.0, 4.0]])
        before = A.copy()
        rank_of(A)
        np.testing.assert_array_equal(A, before)

    def test_accepts_nested_lists(self):
        assert rank_of([[1, 2], [2, 4]]) == 1


class TestRrefOf:

    def test_known_3x3(self):
        A = np.array([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0], [7.0, 8.0, 9.0]])
        expected = np.array([[1.0, 0.0, -1.0], [0.0, 1.0, 2.0], [0.0, 0.0, 0.0]])
        np.testing.assert_allclose(rref_of(A), expected, atol=1e-12)

    def test_requires_swap(self):
        A = np.array([[0.0, 1.0], [1.0, 0.0]])
        np.testing.assert_allclose(rref_of(A), np.eye(2))

    def test_trailing_zero_rows_left_alone(self):
        A = np.array([[1.0, 2.0], [2.0, 4.0], [3.0, 6.0]])
        expected = np.array([[1.0, 2.0], [0.0, 0.0], [0.0, 0.0]])
        np.testing.assert_allclose(rref_of(A), expected, atol=1e-12)

    def test_zero_leading_column(self):
        A = np.array([[0.0, 2.0, 4.0], [0.0, 1.0, 3.0]])
        expected = np.array([[0.0, 1.0, 0.0], [0.0, 0.0, 1.0]])
        np.testing.assert_allclose(rref_of(A), expected, atol=1e-12)

    def test_shape_preserved(self):
        A = np.arange(12.0).reshape(3, 4)
        assert rref_of(A).shape == (3, 4)

    def test_returns_new_array(self):
        A = np.eye(2)
        R = rref_of(A)
        R[0, 0] = 5.0
        assert A[0, 0] == 1.0

    def test_row_order_tracks_swaps(self):
        A = np.array([[0.0, 1.0], [0.0, 2.0], [1.0, 0.0]])
        R, order = rref_with_order(A)
        np.testing.assert_array_equal(order, [2, 1, 0])
        np.testing.assert_allclose(R, [[1.0, 0.0], [0.0, 1.0], [0.0, 0.0]], atol=1e-12)

    def test_row_order_identity_without_swaps(self):
        _, order = rref_with_order(np.eye(3))
        np.testing.assert_array_equal(order, [0, 1, 2])

    def test_pivot_columns(self):
        A = np.array([[0.0, 2.0, 4.0], [0.0, 1.0, 3.0]])
        assert pivot_columns(rref_of(A)) == (1, 2)


class TestDeterminantOf:

    def test_identity(self):
        assert determinant_of(np.eye(3)) == 1.0

    def test_one_swap_flips_sign(self):
        A = np.array([[2.0, 1.0], [1.0, 3.0]])
        B = A[[1, 0]]
        assert determinant_of(A) == pytest.approx(5.0)
        assert determinant_of(B) == pytest.approx(-5.0)

    def test_permutation_matrix(self):
        assert determinant_of(np.array([[0.0, 1.0], [1.0, 0.0]])) == pytest.approx(-1.0)

    def test_singular_is_exact_zero(self):
        assert determinant_of(np.array([[1.0, 2.0], [2.0, 4.0]])) == 0.0

    def test_near_singular_short_circuits(self):
        A = np.array([[1.0, 1.0], [1.0, 1.0 + 1e-12]])
        assert determinant_of(A) == 0.0

    def test_not_normalized(self):
        A = np.array([[2.0, 0.0], [0.0, 3.0]])
        assert determinant_of(A) == pytest.approx(6.0)

    def test_matches_numpy(self):
        A = np.array([[2.0, 0.0, 1.0], [1.0, 3.0, 2.0], [1.0, 1.0, 2.0]])
        assert determinant_of(A) == pytest.approx(np.linalg.det(A), rel=1e-12)

    def test_non_square_raises(self):
        with pytest.raises(PreconditionError, match="square") as exc_info:
            determinant_of(np.ones((3, 2)))
        assert exc_info.value.shape == (3, 2)

    def test_input_not_modified(self):
        A = np.array([[1.0, 2.0], [3.0, 4.0]])
        before = A.copy()
        determinant_of(A)
        np.testing.assert_array_equal(A, before)

    def test_returns_python_float(self):
        assert type(determinant_of(np.eye(2))) is float
