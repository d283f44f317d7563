"""
Tests for decorator stores.

Each decorator is checked against the equivalent numpy expression on the
wrapped array.
"""

import pytest
import numpy as np

from matstore import (
    PRIMITIVE,
    COMPLEX,
    ViewKind,
    DimensionMismatchError,
    IndexOutOfBoundsError,
)
from matstore.store import (
    AboveBelowStore,
    LeftRightStore,
    TransposedStore,
    ConjugatedStore,
    OffsetStore,
    LimitStore,
    RowsStore,
    ColumnsStore,
    SuperimposedStore,
    UpperTriangularStore,
    LowerTriangularStore,
    UpperHessenbergStore,
    LowerHessenbergStore,
    UpperHermitianStore,
    LowerHermitianStore,
)

from conftest import assert_store_equal


# =============================================================================
# Concatenation
# =============================================================================

class TestConcatenation:
    """Test AboveBelowStore and LeftRightStore."""

    def test_above_below(self, small_store, dense_small):
        store = AboveBelowStore(small_store, small_store)
        assert store.kind is ViewKind.ABOVE_BELOW
        assert_store_equal(store, np.vstack([dense_small, dense_small]))

    def test_left_right(self, small_store, dense_small):
        store = LeftRightStore(small_store, small_store)
        assert store.kind is ViewKind.LEFT_RIGHT
        assert_store_equal(store, np.hstack([dense_small, dense_small]))

    def test_column_mismatch(self, small_store):
        with pytest.raises(DimensionMismatchError, match="Column mismatch"):
            AboveBelowStore(small_store, PRIMITIVE.make_zero(1, 3).get())

    def test_row_mismatch(self, small_store):
        with pytest.raises(DimensionMismatchError, match="Row mismatch"):
            LeftRightStore(small_store, PRIMITIVE.make_zero(2, 1).get())

    def test_children_shared(self, small_store):
        """Test one child may appear in several parents."""
        a = AboveBelowStore(small_store, small_store)
        b = LeftRightStore(small_store, small_store)
        assert a.upper is small_store and b.right is small_store


# =============================================================================
# Self-Inverse Views
# =============================================================================

class TestTransposeConjugate:
    """Test TransposedStore and ConjugatedStore."""

    def test_transpose_values(self, small_store, dense_small):
        store = TransposedStore(small_store)
        assert store.shape == (4, 3)
        assert_store_equal(store, dense_small.T)

    def test_transpose_cancels(self, small_store):
        assert small_store.transpose().transpose() is small_store

    def test_conjugate_values(self, complex_store, complex_array):
        store = ConjugatedStore(complex_store)
        assert_store_equal(store, complex_array.conj())

    def test_conjugate_cancels(self, complex_store):
        assert complex_store.conjugate().conjugate() is complex_store

    def test_conjugate_real_is_identity(self, small_store, dense_small):
        assert_store_equal(small_store.conjugate(), dense_small)

    def test_bounds_surface_from_leaf(self, small_store):
        """Test an out-of-range read through a view raises from the leaf."""
        with pytest.raises(IndexOutOfBoundsError):
            TransposedStore(small_store).get(0, 3)


# =============================================================================
# Windowing and Selection
# =============================================================================

class TestWindowing:
    """Test OffsetStore and LimitStore."""

    def test_offset(self, small_store, dense_small):
        store = OffsetStore(small_store, 1, 2)
        assert store.shape == (2, 2)
        assert_store_equal(store, dense_small[1:, 2:])

    def test_negative_offset_clamped(self, small_store, dense_small):
        store = OffsetStore(small_store, -2, 1)
        assert store.row_offset == 0
        assert_store_equal(store, dense_small[:, 1:])

    def test_offset_past_end(self, small_store):
        assert OffsetStore(small_store, 5, 0).shape == (0, 4)

    def test_limit(self, small_store, dense_small):
        store = LimitStore(2, 3, small_store)
        assert_store_equal(store, dense_small[:2, :3])

    def test_limit_clamped_to_base(self, small_store):
        assert LimitStore(10, 2, small_store).shape == (3, 2)


class TestSelection:
    """Test RowsStore and ColumnsStore."""

    def test_rows_any_order_with_repeats(self, small_store, dense_small):
        store = RowsStore(small_store, [2, 0, 0])
        assert store.shape == (3, 4)
        assert_store_equal(store, dense_small[[2, 0, 0], :])

    def test_columns(self, small_store, dense_small):
        store = ColumnsStore(small_store, [3, 1])
        assert_store_equal(store, dense_small[:, [3, 1]])

    def test_empty_selection(self, small_store):
        assert RowsStore(small_store, []).shape == (0, 4)

    def test_rows_out_of_range(self):
        """Test selected-row coordinates are bounds-checked, negatives included."""
        store = PRIMITIVE.make_identity(3).row(0, 1).get()
        with pytest.raises(IndexOutOfBoundsError):
            store.get(-1, 1)
        with pytest.raises(IndexOutOfBoundsError):
            store.get(2, 0)
        assert store.get(1, 1) == 1.0

    def test_columns_out_of_range(self, small_store):
        store = ColumnsStore(small_store, [3, 1])
        with pytest.raises(IndexOutOfBoundsError):
            store.get(0, -1)
        with pytest.raises(IndexOutOfBoundsError):
            store.get(0, 2)


class TestSuperimposed:
    """Test SuperimposedStore."""

    def test_overlay(self, square_store, square_array):
        overlay = PRIMITIVE.make_identity(2).get()
        store = SuperimposedStore(square_store, 1, 2, overlay)
        expected = square_array.copy()
        expected[1:3, 2:4] = np.eye(2)
        assert_store_equal(store, expected)

    def test_overlay_must_fit(self, square_store):
        overlay = PRIMITIVE.make_identity(2).get()
        with pytest.raises(DimensionMismatchError):
            SuperimposedStore(square_store, 3, 0, overlay)
        with pytest.raises(DimensionMismatchError):
            SuperimposedStore(square_store, -1, 0, overlay)


# =============================================================================
# Masks
# =============================================================================

class TestTriangular:
    """Test triangular masks."""

    def test_upper(self, square_store, square_array):
        assert_store_equal(UpperTriangularStore(square_store), np.triu(square_array))

    def test_lower(self, square_store, square_array):
        assert_store_equal(LowerTriangularStore(square_store), np.tril(square_array))

    def test_upper_unit_diagonal(self, square_store, square_array):
        expected = np.triu(square_array, 1) + np.eye(4)
        assert_store_equal(UpperTriangularStore(square_store, True), expected)

    def test_lower_unit_diagonal(self, square_store, square_array):
        expected = np.tril(square_array, -1) + np.eye(4)
        assert_store_equal(LowerTriangularStore(square_store, True), expected)

    def test_rectangular(self, small_store, dense_small):
        assert_store_equal(UpperTriangularStore(small_store), np.triu(dense_small))
        assert_store_equal(LowerTriangularStore(small_store), np.tril(dense_small))


class TestHessenberg:
    """Test Hessenberg masks."""

    def test_upper(self, square_store, square_array):
        assert_store_equal(UpperHessenbergStore(square_store), np.triu(square_array, -1))

    def test_lower(self, square_store, square_array):
        assert_store_equal(LowerHessenbergStore(square_store), np.tril(square_array, 1))


class TestHermitian:
    """Test Hermitian completion."""

    def test_upper(self, complex_store, complex_array):
        store = UpperHermitianStore(complex_store)
        expected = np.triu(complex_array) + np.triu(complex_array, 1).conj().T
        assert_store_equal(store, expected)

    def test_lower(self, complex_store, complex_array):
        store = LowerHermitianStore(complex_store)
        expected = np.tril(complex_array) + np.tril(complex_array, -1).conj().T
        assert_store_equal(store, expected)

    def test_off_diagonal_mirrored(self, complex_store):
        store = UpperHermitianStore(complex_store)
        assert store.get(2, 0) == store.get(0, 2).conjugate()
        assert store.get(1, 0) == 2 + 1j

    def test_real_symmetric(self, square_store, square_array):
        store = LowerHermitianStore(square_store)
        expected = np.tril(square_array) + np.tril(square_array, -1).T
        assert_store_equal(store, expected)

    def test_requires_square(self, small_store):
        with pytest.raises(DimensionMismatchError):
            UpperHermitianStore(small_store)
