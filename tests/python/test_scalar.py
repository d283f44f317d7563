"""
Tests for the scalar backend enumeration.
"""

import pytest
import numpy as np
from decimal import Decimal

from matstore import ScalarKind, set_default_scalar
from matstore._config import get_config


class TestScalarConstants:
    """Test per-backend constants."""

    def test_zero_and_one(self):
        """Test zero/one use the backend's element type."""
        assert ScalarKind.PRIMITIVE.zero == 0.0
        assert isinstance(ScalarKind.PRIMITIVE.one, float)
        assert ScalarKind.COMPLEX.one == complex(1.0, 0.0)
        assert isinstance(ScalarKind.BIG.zero, Decimal)
        assert ScalarKind.BIG.one == Decimal(1)

    def test_numpy_dtype(self):
        assert ScalarKind.PRIMITIVE.numpy_dtype == np.float64
        assert ScalarKind.COMPLEX.numpy_dtype == np.complex128
        assert ScalarKind.BIG.numpy_dtype == np.dtype(object)

    def test_is_real(self):
        assert ScalarKind.PRIMITIVE.is_real
        assert ScalarKind.BIG.is_real
        assert not ScalarKind.COMPLEX.is_real


class TestScalarCast:
    """Test conversion into backend element types."""

    def test_primitive_cast(self):
        value = ScalarKind.PRIMITIVE.cast(3)
        assert value == 3.0
        assert isinstance(value, float)

    def test_big_cast_float_uses_shortest_repr(self):
        """Test floats become the Decimal of their repr, not the binary expansion."""
        assert ScalarKind.BIG.cast(0.1) == Decimal("0.1")
        assert ScalarKind.BIG.cast(7) == Decimal(7)
        assert ScalarKind.BIG.cast(np.float64(2.5)) == Decimal("2.5")

    def test_big_cast_rejects_complex(self):
        with pytest.raises(TypeError):
            ScalarKind.BIG.cast(1 + 2j)

    def test_complex_cast(self):
        assert ScalarKind.COMPLEX.cast(2) == complex(2, 0)
        assert ScalarKind.COMPLEX.cast(Decimal("1.5")) == complex(1.5, 0)


class TestScalarArithmetic:
    """Test arithmetic and conjugation."""

    def test_conjugate(self):
        assert ScalarKind.COMPLEX.conjugate(1 + 2j) == 1 - 2j
        assert ScalarKind.PRIMITIVE.conjugate(3.0) == 3.0
        assert ScalarKind.BIG.conjugate(Decimal("1.5")) == Decimal("1.5")

    def test_conjugate_array(self):
        arr = np.array([1 + 1j, 2 - 3j])
        np.testing.assert_array_equal(ScalarKind.COMPLEX.conjugate(arr), [1 - 1j, 2 + 3j])

    def test_add_multiply(self):
        kind = ScalarKind.BIG
        assert kind.add(Decimal("0.1"), Decimal("0.2")) == Decimal("0.3")
        assert kind.multiply(Decimal(3), Decimal(4)) == Decimal(12)
        assert kind.subtract(Decimal(3), Decimal(4)) == Decimal(-1)
        assert kind.negate(Decimal(2)) == Decimal(-2)

    def test_norm2(self):
        assert ScalarKind.PRIMITIVE.norm2([3.0, 4.0]) == pytest.approx(5.0)
        assert ScalarKind.BIG.norm2([Decimal(3), Decimal(4)]) == pytest.approx(5.0)
        assert ScalarKind.COMPLEX.norm2([3j, 4 + 0j]) == pytest.approx(5.0)

    def test_norm2_empty(self):
        assert ScalarKind.PRIMITIVE.norm2([]) == 0.0
        assert ScalarKind.BIG.norm2([]) == 0.0

    def test_is_small_uses_configured_epsilon(self):
        """Test is_small is relative to the configured tolerance."""
        assert ScalarKind.PRIMITIVE.is_small(1.0, 1e-13)
        assert not ScalarKind.PRIMITIVE.is_small(1.0, 1e-6)
        get_config().small_epsilon = 1e-3
        assert ScalarKind.PRIMITIVE.is_small(1.0, 1e-6)

    def test_allclose_big(self):
        left = np.array([[Decimal("1.0"), Decimal("2.0")]], dtype=object)
        right = np.array([[Decimal("1.0"), Decimal("2.0000000000001")]], dtype=object)
        assert ScalarKind.BIG.allclose(left, right)
        assert not ScalarKind.BIG.allclose(left, right, rtol=0.0)

    def test_allclose_shape_mismatch(self):
        assert not ScalarKind.PRIMITIVE.allclose(np.zeros((2, 2)), np.zeros((2, 3)))


class TestScalarFromName:
    """Test name/alias lookup."""

    @pytest.mark.parametrize("name,expected", [
        ("primitive", ScalarKind.PRIMITIVE),
        ("PRIMITIVE", ScalarKind.PRIMITIVE),
        ("double", ScalarKind.PRIMITIVE),
        ("float64", ScalarKind.PRIMITIVE),
        ("complex", ScalarKind.COMPLEX),
        ("complex128", ScalarKind.COMPLEX),
        ("big", ScalarKind.BIG),
        ("BigDecimal", ScalarKind.BIG),
        ("decimal", ScalarKind.BIG),
    ])
    def test_from_name(self, name, expected):
        assert ScalarKind.from_name(name) is expected

    def test_from_name_unknown(self):
        with pytest.raises(ValueError, match="Unknown scalar kind"):
            ScalarKind.from_name("quaternion")

    def test_default_scalar_roundtrip(self):
        set_default_scalar(ScalarKind.BIG)
        assert get_config().default_scalar is ScalarKind.BIG
