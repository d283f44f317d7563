"""
Element Suppliers and Consumers

The push/pull boundary for bulk population of physical stores:

- ElementsSupplier: something that can produce a store of known shape
  (every MatrixStore, the LogicalBuilder, a deferred product).
- ElementsConsumer: a mutable target that accepts suppliers
  (DenseStore).
"""

import logging
from abc import ABC, abstractmethod
from typing import Tuple, TYPE_CHECKING

from .._error import DimensionMismatchError, ProgrammingError

if TYPE_CHECKING:
    from ._base import MatrixStore
    from ._physical import DenseStore

__all__ = ['ElementsSupplier', 'ElementsConsumer', 'MatrixProductSupplier']

logger = logging.getLogger("matstore.store")


class ElementsSupplier(ABC):
    """
    Producer of a two-dimensional block of elements.

    Required:
        rows, cols: Dimensions of the supplied block
        get(): The supplied elements as a MatrixStore
    """

    __slots__ = ()

    @property
    @abstractmethod
    def rows(self) -> int:
        ...

    @property
    @abstractmethod
    def cols(self) -> int:
        ...

    @abstractmethod
    def get(self) -> "MatrixStore":
        ...

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.rows, self.cols)

    def count(self) -> int:
        return self.rows * self.cols

    def supply_to(self, consumer: "ElementsConsumer") -> None:
        """Push the supplied elements into ``consumer``.

        Raises:
            ProgrammingError: If the consumer cannot accept this shape
        """
        if not consumer.is_acceptable(self):
            raise ProgrammingError(
                f"Not acceptable: {type(consumer).__name__} cannot take a {self.shape} block"
            )
        consumer.accept(self.get())

    def copy(self) -> "DenseStore":
        return self.get().copy()


class ElementsConsumer(ABC):
    """Mutable target for bulk population."""

    __slots__ = ()

    @abstractmethod
    def is_acceptable(self, supplier: ElementsSupplier) -> bool:
        """Whether ``supplier``'s shape fits this target."""
        ...

    @abstractmethod
    def accept(self, store: "MatrixStore") -> None:
        """Copy ``store``'s elements into this target."""
        ...

    @abstractmethod
    def fill_by_multiplying(self, left: "MatrixStore", right: "MatrixStore") -> None:
        """Overwrite this target with ``left @ right``."""
        ...


class MatrixProductSupplier(ElementsSupplier):
    """
    Deferred matrix product ``left @ right``.

    Nothing is computed until ``get()`` or ``supply_to()``.
    """

    __slots__ = ('left', 'right')

    def __init__(self, left: "MatrixStore", right: "MatrixStore"):
        if left.cols != right.rows:
            raise DimensionMismatchError(
                f"Cannot multiply {left.shape} by {right.shape}"
            )
        self.left = left
        self.right = right

    @property
    def rows(self) -> int:
        return self.left.rows

    @property
    def cols(self) -> int:
        return self.right.cols

    def get(self) -> "DenseStore":
        target = self.left.factory.make_dense(self.rows, self.cols)
        self.supply_to(target)
        return target

    def supply_to(self, consumer: ElementsConsumer) -> None:
        if not consumer.is_acceptable(self):
            raise ProgrammingError(
                f"Not acceptable: {type(consumer).__name__} cannot take a {self.shape} block"
            )
        logger.debug(f"Filling {type(consumer).__name__} with product {self.left.shape} x {self.right.shape}")
        consumer.fill_by_multiplying(self.left, self.right)

    def copy(self) -> "DenseStore":
        return self.get()

    def __repr__(self) -> str:
        return f"MatrixProductSupplier(shape={self.shape})"
