"""
Tests for VectorSetDesign construction, host rules and resizing.
"""

import numpy as np
import pytest

from vecspace.analysis import VectorSetDesign
from vecspace.core.exceptions import DimensionError, ValidationError


class TestConstruction:

    def test_from_nested_list(self):
        design = VectorSetDesign.from_vectors([[1, 2], [2, 4], [3, 6]])
        assert design.n_vectors == 3
        assert design.dimension == 2
        assert design.shape == (3, 2)
        assert design.vectors.dtype == np.float64

    def test_single_vector_from_1d(self):
        design = VectorSetDesign.from_vectors([1.0, 2.0, 3.0])
        assert design.shape == (1, 3)

    def test_vectors_read_only(self):
        design = VectorSetDesign.from_vectors([[1, 2], [3, 4]])
        with pytest.raises(ValueError):
            design.vectors[0, 0] = 9.0

    def test_private_copy(self):
        A = np.array([[1.0, 2.0], [3.0, 4.0]])
        design = VectorSetDesign.from_vectors(A)
        A[1, 1] = -1.0
        assert design.vectors[1, 1] == 4.0

    def test_is_square(self):
        assert VectorSetDesign.from_vectors(np.eye(3)).is_square
        assert not VectorSetDesign.from_vectors(np.ones((3, 2))).is_square

    def test_is_all_zero(self):
        assert VectorSetDesign.from_vectors(np.zeros((2, 2))).is_all_zero
        assert not VectorSetDesign.from_vectors(np.eye(2)).is_all_zero
        assert VectorSetDesign.from_vectors([[1e-10, 0.0], [0.0, 0.0]]).is_all_zero

    def test_repr(self):
        design = VectorSetDesign.from_vectors(np.zeros((2, 3)))
        assert repr(design) == "VectorSetDesign(n_vectors=2, dimension=3, all_zero)"

    def test_to_list(self):
        assert VectorSetDesign.from_vectors([[1, 2]]).to_list() == [[1.0, 2.0]]


class TestRejection:

    def test_ragged(self):
        with pytest.raises(DimensionError, match="ragged"):
            VectorSetDesign.from_vectors([[1, 2, 3], [4, 5]])

    def test_empty_list(self):
        with pytest.raises(DimensionError, match="empty"):
            VectorSetDesign.from_vectors([])

    def test_empty_vectors(self):
        with pytest.raises(DimensionError, match="empty"):
            VectorSetDesign.from_vectors([[], []])

    def test_three_dimensional_array(self):
        with pytest.raises(DimensionError):
            VectorSetDesign.from_vectors(np.zeros((2, 2, 2)))

    def test_nan(self):
        with pytest.raises(ValidationError, match="NaN"):
            VectorSetDesign.from_vectors([[1.0, np.nan], [0.0, 1.0]])

    def test_inf(self):
        with pytest.raises(ValidationError, match="Inf"):
            VectorSetDesign.from_vectors([[1.0, np.inf], [0.0, 1.0]])

    def test_strings(self):
        with pytest.raises(ValidationError):
            VectorSetDesign.from_vectors([["1", "2"]])


class TestHostRules:

    def test_valid_set_passes(self):
        VectorSetDesign.from_vectors([[1, 2], [2, 4]], host_rules=True)

    def test_all_zero(self):
        with pytest.raises(ValidationError, match="non-zero vector"):
            VectorSetDesign.from_vectors(np.zeros((3, 3)), host_rules=True)

    @pytest.mark.parametrize("dimension", [1, 11])
    def test_dimension_bounds(self, dimension):
        with pytest.raises(ValidationError, match="dimension must be between 2 and 10"):
            VectorSetDesign.from_vectors(np.ones((3, dimension)), host_rules=True)

    @pytest.mark.parametrize("count", [1, 11])
    def test_count_bounds(self, count):
        with pytest.raises(ValidationError, match="number of vectors must be between 2 and 10"):
            VectorSetDesign.from_vectors(np.ones((count, 3)), host_rules=True)

    def test_engine_mode_is_permissive(self):
        design = VectorSetDesign.from_vectors(np.ones((1, 12)))
        assert design.shape == (1, 12)


class TestResized:

    def test_pad_with_zeros(self):
        design = VectorSetDesign.from_vectors([[1, 2], [3, 4]]).resized(4)
        np.testing.assert_array_equal(design.vectors, [[1, 2, 0, 0], [3, 4, 0, 0]])

    def test_truncate(self):
        design = VectorSetDesign.from_vectors([[1, 2, 3], [4, 5, 6]]).resized(2)
        np.testing.assert_array_equal(design.vectors, [[1, 2], [4, 5]])

    def test_same_dimension(self):
        original = VectorSetDesign.from_vectors([[1, 2], [3, 4]])
        np.testing.assert_array_equal(original.resized(2).vectors, original.vectors)

    def test_original_untouched(self):
        original = VectorSetDesign.from_vectors([[1, 2], [3, 4]])
        original.resized(3)
        assert original.dimension == 2

    def test_invalid_dimension(self):
        with pytest.raises(ValidationError, match="at least 1"):
            VectorSetDesign.from_vectors([[1, 2]]).resized(0)
