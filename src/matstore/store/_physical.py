"""
Dense Physical Store

The numpy-backed result of materialization. This is the only mutable store:
``copy()`` on any view produces one, and products are filled into one.
"""

from typing import Any, TYPE_CHECKING

import numpy as np

from .._error import DimensionMismatchError, InvalidArgumentError, check_index
from .._scalar import ScalarKind
from ._base import MatrixStore, ViewKind
from ._supplier import ElementsConsumer, ElementsSupplier

if TYPE_CHECKING:
    from ._factory import StoreFactory

__all__ = ['DenseStore']


def _convert(data: np.ndarray, kind: ScalarKind) -> np.ndarray:
    if kind is not ScalarKind.BIG:
        return data.astype(kind.numpy_dtype)
    # object arrays must hold Decimal, not the source floats
    converted = np.empty(data.shape, dtype=object)
    for index, value in np.ndenumerate(data):
        converted[index] = kind.cast(value)
    return converted


class DenseStore(MatrixStore, ElementsConsumer):
    """
    Mutable dense matrix over a 2D ndarray.

    The array dtype follows the factory's scalar kind (``float64``,
    ``complex128`` or ``object`` holding ``Decimal``).
    """

    view_kind = ViewKind.DENSE

    __slots__ = ('_data',)

    def __init__(self, factory: "StoreFactory", data: np.ndarray):
        if data.ndim != 2:
            raise InvalidArgumentError(f"DenseStore needs a 2D array, got {data.ndim}D")
        super().__init__(factory, data.shape[0], data.shape[1])
        kind = factory.kind
        if data.dtype != kind.numpy_dtype:
            data = _convert(data, kind)
        self._data = data

    def get_element(self, row: int, col: int) -> Any:
        check_index(row, col, self._rows, self._cols)
        return self.scalar_kind.cast(self._data[row, col])

    def set(self, row: int, col: int, value: Any) -> None:
        check_index(row, col, self._rows, self._cols)
        self._data[row, col] = self.scalar_kind.cast(value)

    # =========================================================================
    # ElementsConsumer
    # =========================================================================

    def is_acceptable(self, supplier: ElementsSupplier) -> bool:
        return self._rows >= supplier.rows and self._cols >= supplier.cols

    def accept(self, store: MatrixStore) -> None:
        """Copy ``store`` into the top-left corner."""
        if not self.is_acceptable(store):
            raise DimensionMismatchError(
                f"Cannot place {store.shape} into {self.shape}"
            )
        self._data[:store.rows, :store.cols] = store.to_numpy()

    def fill_by_multiplying(self, left: MatrixStore, right: MatrixStore) -> None:
        if left.cols != right.rows:
            raise DimensionMismatchError(
                f"Cannot multiply {left.shape} by {right.shape}"
            )
        if self._rows < left.rows or self._cols < right.cols:
            raise DimensionMismatchError(
                f"Product {(left.rows, right.cols)} does not fit into {self.shape}"
            )
        kind = self.scalar_kind
        if left.cols == 0:
            product = np.full((left.rows, right.cols), kind.zero, dtype=kind.numpy_dtype)
        else:
            product = np.matmul(left.to_numpy(), right.to_numpy())
        self._data[:left.rows, :right.cols] = product

    # =========================================================================
    # Materialization
    # =========================================================================

    def to_numpy(self) -> np.ndarray:
        return self._data.copy()

    def copy(self) -> "DenseStore":
        return DenseStore(self._factory, self._data.copy())
