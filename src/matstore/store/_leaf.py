"""
Leaf Stores

Stores with no children. They synthesize values (zero, identity, single
element) or read through to an external 2D source without copying it.

Leaves are where coordinates are finally resolved, so they do the bounds
checking: an out-of-range access through a chain of decorators raises
``IndexOutOfBoundsError`` from here. Row and column selections also check
the selected index, since it never reaches a leaf.
"""

from typing import Any, Callable, Tuple, TYPE_CHECKING

import numpy as np

from .._error import InvalidArgumentError, check_index
from ._access import Access1D
from ._base import MatrixStore, ViewKind

if TYPE_CHECKING:
    from ._factory import StoreFactory

__all__ = ['ZeroStore', 'IdentityStore', 'SingleStore', 'WrapperStore']


def _check_dimension(name: str, value: int) -> int:
    if value < 0:
        raise InvalidArgumentError(f"{name} must be non-negative, got {value}")
    return value


class _ColumnMajorSource:
    """``Access1D`` read as a ``rows x cols`` matrix, column by column."""

    __slots__ = ('access', 'shape')

    def __init__(self, access: Access1D, rows: int, cols: int):
        self.access = access
        self.shape = (rows, cols)

    def get(self, row: int, col: int) -> Any:
        return self.access.get(row + col * self.shape[0])


class ZeroStore(MatrixStore):
    """All-zero store of any shape."""

    view_kind = ViewKind.ZERO

    def __init__(self, factory: "StoreFactory", rows: int, cols: int):
        super().__init__(factory, _check_dimension("rows", rows), _check_dimension("cols", cols))

    def get_element(self, row: int, col: int) -> Any:
        check_index(row, col, self._rows, self._cols)
        return self.scalar_kind.zero

    def first_in_column(self, col: int) -> int:
        return self._rows

    def first_in_row(self, row: int) -> int:
        return self._cols

    def limit_of_column(self, col: int) -> int:
        return 0

    def limit_of_row(self, row: int) -> int:
        return 0


class IdentityStore(MatrixStore):
    """Square identity store."""

    view_kind = ViewKind.IDENTITY

    def __init__(self, factory: "StoreFactory", dim: int):
        dim = _check_dimension("dim", dim)
        super().__init__(factory, dim, dim)

    def get_element(self, row: int, col: int) -> Any:
        check_index(row, col, self._rows, self._cols)
        kind = self.scalar_kind
        return kind.one if row == col else kind.zero

    def first_in_column(self, col: int) -> int:
        return col

    def first_in_row(self, row: int) -> int:
        return row

    def limit_of_column(self, col: int) -> int:
        return col + 1

    def limit_of_row(self, row: int) -> int:
        return row + 1


class SingleStore(MatrixStore):
    """1x1 store holding one value."""

    view_kind = ViewKind.SINGLE

    def __init__(self, factory: "StoreFactory", value: Any):
        super().__init__(factory, 1, 1)
        self._value = factory.kind.cast(value)

    def get_element(self, row: int, col: int) -> Any:
        check_index(row, col, 1, 1)
        return self._value


class WrapperStore(MatrixStore):
    """
    Read-through view over an external 2D source.

    Accepted sources:
        - MatrixStore instances
        - numpy arrays (2D, or 1D read as a single column)
        - scipy sparse matrices (read through their CSR form)
        - Access1D sequences (read as a single column)
        - objects exposing ``shape`` and ``get(row, col)``
        - nested Python sequences (rows of equal length)

    Values are cast to the factory's scalar kind on every read.
    """

    view_kind = ViewKind.WRAPPER

    __slots__ = ('_source', '_reader')

    def __init__(self, factory: "StoreFactory", source: Any):
        (rows, cols), reader = self._resolve(source)
        super().__init__(factory, rows, cols)
        self._source = source
        self._reader = reader

    @classmethod
    def of_linear(cls, factory: "StoreFactory", access: Access1D, rows: int, cols: int) -> "WrapperStore":
        """Read ``access`` as a ``rows x cols`` matrix in column-major order."""
        return cls(factory, _ColumnMajorSource(access, rows, cols))

    @property
    def source(self) -> Any:
        return self._source

    def get_element(self, row: int, col: int) -> Any:
        check_index(row, col, self._rows, self._cols)
        return self.scalar_kind.cast(self._reader(row, col))

    @staticmethod
    def _resolve(source: Any) -> Tuple[Tuple[int, int], Callable[[int, int], Any]]:
        if isinstance(source, MatrixStore):
            return source.shape, source.get_element

        if hasattr(source, 'format') and hasattr(source, 'tocsr'):
            # scipy sparse: CSR gives O(log nnz) element lookup
            csr = source.tocsr()
            return csr.shape, lambda row, col: csr[row, col]

        if isinstance(source, np.ndarray):
            if source.ndim == 1:
                return (source.shape[0], 1), lambda row, col: source[row]
            if source.ndim == 2:
                return source.shape, lambda row, col: source[row, col]
            raise InvalidArgumentError(f"Cannot wrap a {source.ndim}D array")

        if isinstance(source, Access1D):
            return (source.count(), 1), lambda row, col: source.get(row)

        if hasattr(source, 'shape') and callable(getattr(source, 'get', None)):
            rows, cols = source.shape
            return (int(rows), int(cols)), source.get

        if isinstance(source, (list, tuple)):
            rows = len(source)
            cols = len(source[0]) if rows else 0
            for i, row in enumerate(source):
                if len(row) != cols:
                    raise InvalidArgumentError(
                        f"Ragged rows: row 0 has {cols} elements, row {i} has {len(row)}"
                    )
            return (rows, cols), lambda row, col: source[row][col]

        raise TypeError(f"Cannot wrap {type(source).__name__} as a 2D source")
