"""
Store Factories

One stateless factory per scalar backend. Factories create leaf stores
(wrapped in a LogicalBuilder, ready for chaining) and allocate dense
physical storage for materialization.

Example:
    >>> from matstore import PRIMITIVE, COMPLEX, get_factory
    >>> PRIMITIVE.make_zero(2, 3).get().shape
    (2, 3)
    >>> get_factory('complex') is COMPLEX
    True
"""

from typing import Any, Dict, Optional, Union

import numpy as np

from .._config import get_config
from .._scalar import ScalarKind
from ._builder import LogicalBuilder, _INTERNAL_KEY
from ._leaf import IdentityStore, SingleStore, WrapperStore, ZeroStore
from ._physical import DenseStore

__all__ = ['StoreFactory', 'BIG', 'COMPLEX', 'PRIMITIVE', 'get_factory']


class StoreFactory:
    """
    Leaf and physical store factory for one scalar backend.

    Attributes:
        kind: The ScalarKind every store from this factory uses
    """

    __slots__ = ('kind',)

    def __init__(self, kind: ScalarKind):
        self.kind = kind

    # =========================================================================
    # Leaf Builders
    # =========================================================================

    def make_identity(self, dim: int) -> LogicalBuilder:
        return self._builder(IdentityStore(self, dim))

    def make_single(self, value: Any) -> LogicalBuilder:
        return self._builder(SingleStore(self, value))

    def make_wrapper(self, source: Any) -> LogicalBuilder:
        """Read-through builder over an external 2D source (no copy)."""
        return self._builder(WrapperStore(self, source))

    def make_zero(self, rows: int, cols: int) -> LogicalBuilder:
        return self._builder(ZeroStore(self, rows, cols))

    @staticmethod
    def _builder(store) -> LogicalBuilder:
        return LogicalBuilder(store, _internal_key=_INTERNAL_KEY)

    # =========================================================================
    # Physical Allocation
    # =========================================================================

    def make_dense(self, rows: int, cols: int) -> DenseStore:
        """Zero-filled mutable store."""
        data = np.full((rows, cols), self.kind.zero, dtype=self.kind.numpy_dtype)
        return DenseStore(self, data)

    def columns(self, *values: Any) -> DenseStore:
        """``len(values) x 1`` column vector."""
        data = np.empty((len(values), 1), dtype=self.kind.numpy_dtype)
        for i, value in enumerate(values):
            data[i, 0] = self.kind.cast(value)
        return DenseStore(self, data)

    def __repr__(self) -> str:
        return f"StoreFactory({self.kind.name})"


# =============================================================================
# Singletons
# =============================================================================

BIG = StoreFactory(ScalarKind.BIG)
COMPLEX = StoreFactory(ScalarKind.COMPLEX)
PRIMITIVE = StoreFactory(ScalarKind.PRIMITIVE)

_FACTORIES: Dict[ScalarKind, StoreFactory] = {
    ScalarKind.BIG: BIG,
    ScalarKind.COMPLEX: COMPLEX,
    ScalarKind.PRIMITIVE: PRIMITIVE,
}


def get_factory(kind: Optional[Union[ScalarKind, str]] = None) -> StoreFactory:
    """
    Factory for ``kind``, or for the configured default backend.

    Args:
        kind: ScalarKind, its name/alias, or None for the default
    """
    if kind is None:
        kind = get_config().default_scalar
    elif isinstance(kind, str):
        kind = ScalarKind.from_name(kind)
    return _FACTORIES[kind]
