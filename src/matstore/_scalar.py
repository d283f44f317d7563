"""
Scalar Backends

The closed set of element types a store can hold. A backend is chosen once,
at the factory boundary, and every store built from that factory (and every
view over those stores) reads and combines elements through it.

    BIG        decimal.Decimal   arbitrary-precision real
    COMPLEX    complex           double-precision complex
    PRIMITIVE  float             double-precision real
"""

from __future__ import annotations

import numbers
import operator
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Iterable

import numpy as np

__all__ = ['ScalarKind']


# =============================================================================
# Cast Functions
# =============================================================================

def _to_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, numbers.Integral):
        return Decimal(int(value))
    if isinstance(value, numbers.Real):
        return Decimal(str(float(value)))
    if isinstance(value, numbers.Complex):
        raise TypeError(f"Cannot represent complex value {value!r} as Decimal")
    return Decimal(value)


def _to_complex(value: Any) -> complex:
    if isinstance(value, Decimal):
        return complex(float(value))
    return complex(value)


def _to_float(value: Any) -> float:
    return float(value)


def _conjugate(value: Any) -> Any:
    # Python complex scalars and ndarrays both expose conjugate()
    return value.conjugate()


def _identity(value: Any) -> Any:
    return value


# =============================================================================
# Norm Aggregators
# =============================================================================

def _norm2_decimal(values: Iterable[Any]) -> float:
    total = Decimal(0)
    for value in values:
        total += value * value
    return float(total.sqrt())


def _norm2_numeric(values: Iterable[Any]) -> float:
    arr = np.asarray(list(values))
    if arr.size == 0:
        return 0.0
    return float(np.linalg.norm(arr.ravel()))


# =============================================================================
# Scalar Kind Enumeration
# =============================================================================

class ScalarKind(Enum):
    """
    Supported element backends.

    Each member exposes its constants and arithmetic through the
    ``_SCALAR_INFO`` table so stores never branch on element type.
    """
    BIG = 'big'
    COMPLEX = 'complex'
    PRIMITIVE = 'primitive'

    @property
    def zero(self) -> Any:
        return _SCALAR_INFO[self]["zero"]

    @property
    def one(self) -> Any:
        return _SCALAR_INFO[self]["one"]

    @property
    def numpy_dtype(self) -> np.dtype:
        """numpy dtype used for materialized storage."""
        return _SCALAR_INFO[self]["dtype"]

    @property
    def is_real(self) -> bool:
        return self is not ScalarKind.COMPLEX

    def cast(self, value: Any) -> Any:
        """Convert a number into this backend's element type."""
        return _SCALAR_INFO[self]["cast"](value)

    def add(self, left: Any, right: Any) -> Any:
        return operator.add(left, right)

    def subtract(self, left: Any, right: Any) -> Any:
        return operator.sub(left, right)

    def multiply(self, left: Any, right: Any) -> Any:
        return operator.mul(left, right)

    def negate(self, value: Any) -> Any:
        return operator.neg(value)

    def conjugate(self, value: Any) -> Any:
        """Complex conjugate; identity for real backends."""
        return _SCALAR_INFO[self]["conjugate"](value)

    def norm2(self, values: Iterable[Any]) -> float:
        """Square root of the sum of squared magnitudes."""
        return _SCALAR_INFO[self]["norm2"](values)

    def is_small(self, compared_to: float, value: float) -> bool:
        """Whether ``value`` is negligible relative to ``compared_to``."""
        from ._config import get_config
        return abs(value) <= get_config().small_epsilon * abs(compared_to)

    def allclose(self, left: Any, right: Any, rtol: float = 1e-9, atol: float = 0.0) -> bool:
        """Elementwise closeness of two equally shaped arrays of this kind."""
        a = np.asarray(left, dtype=self.numpy_dtype)
        b = np.asarray(right, dtype=self.numpy_dtype)
        if a.shape != b.shape:
            return False
        if self is not ScalarKind.BIG:
            return bool(np.allclose(a, b, rtol=rtol, atol=atol))
        d_rtol = _to_decimal(rtol)
        d_atol = _to_decimal(atol)
        return all(
            abs(x - y) <= d_atol + d_rtol * abs(y)
            for x, y in zip(a.ravel(), b.ravel())
        )

    @classmethod
    def from_name(cls, name: str) -> "ScalarKind":
        """Get ScalarKind from a member name, value or alias."""
        name_lower = name.lower()
        for kind in cls:
            if name_lower in (kind.value, kind.name.lower()):
                return kind
        aliases = {
            "double": cls.PRIMITIVE,
            "float": cls.PRIMITIVE,
            "float64": cls.PRIMITIVE,
            "real": cls.PRIMITIVE,
            "decimal": cls.BIG,
            "bigdecimal": cls.BIG,
            "complex128": cls.COMPLEX,
        }
        if name_lower in aliases:
            return aliases[name_lower]
        raise ValueError(f"Unknown scalar kind: {name}")


# Backend information table
_SCALAR_INFO: Dict[ScalarKind, Dict[str, Any]] = {
    ScalarKind.BIG: {
        "zero": Decimal(0),
        "one": Decimal(1),
        "dtype": np.dtype(object),
        "cast": _to_decimal,
        "conjugate": _identity,
        "norm2": _norm2_decimal,
    },
    ScalarKind.COMPLEX: {
        "zero": complex(0.0, 0.0),
        "one": complex(1.0, 0.0),
        "dtype": np.dtype(np.complex128),
        "cast": _to_complex,
        "conjugate": _conjugate,
        "norm2": _norm2_numeric,
    },
    ScalarKind.PRIMITIVE: {
        "zero": 0.0,
        "one": 1.0,
        "dtype": np.dtype(np.float64),
        "cast": _to_float,
        "conjugate": _identity,
        "norm2": _norm2_numeric,
    },
}
