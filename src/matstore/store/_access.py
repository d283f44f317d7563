"""
One-Dimensional Access

Lightweight 1D views used for slices of a store and for vector arguments
(``premultiply``, ``multiply_both``). Slices hold no cursor: every access
recomputes the backing index, so they can be read repeatedly, out of order,
or iterated more than once.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, List, Sequence, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from ._base import MatrixStore

__all__ = ['Access1D', 'SliceAccess', 'SequenceAccess', 'as_access1d']


class Access1D(ABC):
    """
    Read-only indexed sequence of elements.

    Required Methods:
        count() -> int
        get(index) -> element
    """

    __slots__ = ()

    @abstractmethod
    def count(self) -> int:
        """Number of elements."""
        ...

    @abstractmethod
    def get(self, index: int) -> Any:
        """Element at ``index``."""
        ...

    def double_value(self, index: int) -> float:
        value = self.get(index)
        if isinstance(value, complex):
            return value.real
        return float(value)

    def to_list(self) -> List[Any]:
        return [self.get(i) for i in range(self.count())]

    def to_numpy(self, dtype=None) -> np.ndarray:
        return np.asarray(self.to_list(), dtype=dtype)

    def __len__(self) -> int:
        return self.count()

    def __getitem__(self, index: int) -> Any:
        return self.get(index)

    def __iter__(self):
        return (self.get(i) for i in range(self.count()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(count={self.count()})"


class SliceAccess(Access1D):
    """
    Slice of a store, translating a 1D index into backing coordinates.

    Attributes:
        store: Backing store (strong reference)
        length: Element count, fixed when the slice is created
        locate: ``index -> (row, col)`` translation
    """

    __slots__ = ('store', 'length', 'locate')

    def __init__(self, store: "MatrixStore", length: int, locate: Callable[[int], tuple]):
        self.store = store
        self.length = max(0, length)
        self.locate = locate

    def count(self) -> int:
        return self.length

    def get(self, index: int) -> Any:
        row, col = self.locate(index)
        return self.store.get(row, col)

    def double_value(self, index: int) -> float:
        row, col = self.locate(index)
        return self.store.double_value(row, col)


class SequenceAccess(Access1D):
    """Adapter for Python sequences and 1D numpy arrays."""

    __slots__ = ('values',)

    def __init__(self, values: Sequence[Any]):
        self.values = values

    def count(self) -> int:
        return len(self.values)

    def get(self, index: int) -> Any:
        return self.values[index]


def as_access1d(values: Any) -> Access1D:
    """
    Adapt a vector-like argument to ``Access1D``.

    Accepts Access1D instances (returned as is), 1D numpy arrays and any
    Python sequence. Multi-dimensional arrays are flattened column-major.
    """
    if isinstance(values, Access1D):
        return values
    if isinstance(values, np.ndarray):
        if values.ndim != 1:
            values = values.ravel(order='F')
        return SequenceAccess(values)
    if isinstance(values, (list, tuple)):
        return SequenceAccess(values)
    raise TypeError(f"Cannot use {type(values).__name__} as a 1D sequence")
