"""
Tests for the error hierarchy.
"""

import pytest

from matstore import (
    MatStoreError,
    ProgrammingError,
    InvalidArgumentError,
    DimensionMismatchError,
    IndexOutOfBoundsError,
    ScalarTypeMismatchError,
    BIG,
    PRIMITIVE,
)
from matstore._error import check_index, check_same_shape, check_same_kind


class TestErrorCodes:
    """Test codes and messages."""

    def test_class_codes(self):
        assert MatStoreError.code == MatStoreError.ERROR_UNKNOWN
        assert ProgrammingError.code == MatStoreError.ERROR_PROGRAMMING
        assert InvalidArgumentError.code == MatStoreError.ERROR_INVALID_ARGUMENT
        assert DimensionMismatchError.code == MatStoreError.ERROR_DIMENSION_MISMATCH
        assert IndexOutOfBoundsError.code == MatStoreError.ERROR_INDEX_OUT_OF_BOUNDS
        assert ScalarTypeMismatchError.code == MatStoreError.ERROR_TYPE_MISMATCH

    def test_message_format(self):
        err = DimensionMismatchError("3 vs 4")
        assert str(err) == "MatStore Error 11: 3 vs 4"
        assert err.message == "3 vs 4"

    def test_default_message(self):
        assert "Index out of bounds" in str(IndexOutOfBoundsError())

    def test_from_code(self):
        err = MatStoreError.from_code(MatStoreError.ERROR_DIMENSION_MISMATCH, "stacking")
        assert err.code == 11
        assert "stacking: Dimension mismatch" in str(err)


class TestBuiltinCompatibility:
    """Test subclasses also derive from the matching builtin exception."""

    def test_builtin_bases(self):
        assert issubclass(InvalidArgumentError, ValueError)
        assert issubclass(DimensionMismatchError, ValueError)
        assert issubclass(IndexOutOfBoundsError, IndexError)
        assert issubclass(ScalarTypeMismatchError, TypeError)
        assert not issubclass(ProgrammingError, ValueError)

    def test_all_are_matstore_errors(self):
        for cls in (ProgrammingError, InvalidArgumentError, DimensionMismatchError,
                    IndexOutOfBoundsError, ScalarTypeMismatchError):
            assert issubclass(cls, MatStoreError)


class TestCheckHelpers:
    """Test validation helpers."""

    def test_check_index(self):
        check_index(0, 0, 1, 1)
        with pytest.raises(IndexOutOfBoundsError):
            check_index(1, 0, 1, 1)
        with pytest.raises(IndexOutOfBoundsError):
            check_index(0, -1, 1, 1)

    def test_check_same_shape(self):
        a = PRIMITIVE.make_zero(2, 3).get()
        b = PRIMITIVE.make_zero(3, 2).get()
        with pytest.raises(DimensionMismatchError, match="add"):
            check_same_shape(a, b, "add")

    def test_check_same_kind(self):
        a = PRIMITIVE.make_zero(2, 2).get()
        b = BIG.make_zero(2, 2).get()
        with pytest.raises(ScalarTypeMismatchError, match="PRIMITIVE vs BIG"):
            check_same_kind(a, b)

    def test_mixed_kinds_rejected_by_views(self):
        a = PRIMITIVE.make_zero(2, 2).get()
        b = BIG.make_zero(2, 2).get()
        with pytest.raises(ScalarTypeMismatchError):
            a.logical().below(b)
