"""
LogicalBuilder

Composes structural transformations into a single lazy store. The builder
holds exactly one "current" store; every transform validates its operands,
wraps the current store in a new decorator, replaces the current store and
returns the builder for chaining.

A transform either fully succeeds or raises before the current store is
replaced, so a failed call leaves the builder exactly as it was.

Example:
    >>> from matstore import PRIMITIVE
    >>> window = (PRIMITIVE.make_identity(10)
    ...           .offsets(2, 3)
    ...           .limits(4, 4)
    ...           .get())
    >>> window.shape, window.get(1, 0)
    ((4, 4), 1.0)

Canonicalization:
    ``transpose()`` on a builder whose current store is already a transposed
    view unwraps it instead of wrapping again (likewise ``conjugate()``), so
    repeated toggling never deepens the decorator graph.

Thread Safety:
    A builder is single-owner during the build phase. Stores extracted with
    ``get()`` are immutable and safe to share between threads.
"""

import logging
import numbers
import warnings
from typing import Any, Sequence, TYPE_CHECKING

import numpy as np

from .._error import InvalidArgumentError, ProgrammingError
from ._base import MatrixStore
from ._concat import AboveBelowStore, LeftRightStore
from ._leaf import SingleStore, ZeroStore
from ._mask import (
    LowerHermitianStore,
    LowerHessenbergStore,
    LowerTriangularStore,
    UpperHermitianStore,
    UpperHessenbergStore,
    UpperTriangularStore,
)
from ._supplier import ElementsConsumer, ElementsSupplier
from ._transform import (
    ColumnsStore,
    ConjugatedStore,
    LimitStore,
    OffsetStore,
    RowsStore,
    SuperimposedStore,
    TransposedStore,
)

if TYPE_CHECKING:
    from ._factory import StoreFactory
    from ._physical import DenseStore

__all__ = ['LogicalBuilder', 'build_row', 'build_column']

logger = logging.getLogger("matstore.builder")


class _LogicalBuilderInternal:
    """Internal marker to prevent external construction."""
    pass


_INTERNAL_KEY = _LogicalBuilderInternal()


# =============================================================================
# Block Assembly
# =============================================================================

def build_row(min_col_dim: int, *stores: MatrixStore) -> MatrixStore:
    """Place ``stores`` side by side, zero-padding on the right up to
    ``min_col_dim`` columns."""
    if not stores:
        raise InvalidArgumentError("build_row needs at least one store")
    block = stores[0]
    for store in stores[1:]:
        block = LeftRightStore(block, store)
    if block.cols < min_col_dim:
        padding = ZeroStore(block.factory, block.rows, min_col_dim - block.cols)
        block = LeftRightStore(block, padding)
    return block


def build_column(min_row_dim: int, *stores: MatrixStore) -> MatrixStore:
    """Stack ``stores`` top to bottom, zero-padding below up to
    ``min_row_dim`` rows."""
    if not stores:
        raise InvalidArgumentError("build_column needs at least one store")
    block = stores[0]
    for store in stores[1:]:
        block = AboveBelowStore(block, store)
    if block.rows < min_row_dim:
        padding = ZeroStore(block.factory, min_row_dim - block.rows, block.cols)
        block = AboveBelowStore(block, padding)
    return block


def _is_count(operands: Sequence[Any]) -> bool:
    return (
        len(operands) == 1
        and isinstance(operands[0], numbers.Integral)
        and not isinstance(operands[0], bool)
    )


def _flatten_indices(indices: Sequence[Any]) -> Sequence[int]:
    if len(indices) == 1 and isinstance(indices[0], (list, tuple, range, np.ndarray)):
        return [int(i) for i in indices[0]]
    return [int(i) for i in indices]


# =============================================================================
# LogicalBuilder
# =============================================================================

class LogicalBuilder(ElementsSupplier):
    """
    Chainable composer of lazy store views.

    Obtain one from ``MatrixStore.logical()`` or a factory
    (``PRIMITIVE.make_identity(3)``); direct construction is a
    programming error.
    """

    __slots__ = ('_store',)

    def __init__(self, store: MatrixStore, _internal_key: Any = None):
        if _internal_key is not _INTERNAL_KEY:
            raise ProgrammingError(
                "LogicalBuilder cannot be constructed directly. "
                "Use store.logical() or a factory such as PRIMITIVE.make_zero()"
            )
        self._store = store

    # =========================================================================
    # Introspection
    # =========================================================================

    @property
    def rows(self) -> int:
        return self._store.rows

    @property
    def cols(self) -> int:
        return self._store.cols

    @property
    def factory(self) -> "StoreFactory":
        return self._store.factory

    def get(self) -> MatrixStore:
        """The composed store."""
        return self._store

    def build(self) -> MatrixStore:
        """Deprecated alias of ``get()``."""
        warnings.warn(
            "LogicalBuilder.build() is deprecated, use get() instead",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.get()

    def copy(self) -> "DenseStore":
        """Materialize the composed store."""
        logger.debug(f"Materializing {type(self._store).__name__} {self._store.shape}")
        return self._store.copy()

    def supply_to(self, consumer: ElementsConsumer) -> None:
        """Hand the composed store to ``consumer``.

        Raises:
            ProgrammingError: If the consumer rejects this shape
        """
        if not consumer.is_acceptable(self):
            raise ProgrammingError(
                f"Not acceptable: {type(consumer).__name__} cannot take a {self.shape} store"
            )
        consumer.accept(self.get())

    def __repr__(self) -> str:
        return f"LogicalBuilder({self._store!r})"

    # =========================================================================
    # Concatenation
    # =========================================================================

    def _row_block(self, operands: Sequence[Any]) -> MatrixStore:
        store = self._store
        if _is_count(operands):
            return ZeroStore(store.factory, operands[0], store.cols)
        if operands and all(isinstance(op, MatrixStore) for op in operands):
            return build_row(store.cols, *operands)
        if not operands:
            raise InvalidArgumentError("Expected a row count, stores or elements")
        row = TransposedStore(store.factory.columns(*operands))
        return build_row(store.cols, row)

    def _column_block(self, operands: Sequence[Any]) -> MatrixStore:
        store = self._store
        if _is_count(operands):
            return ZeroStore(store.factory, store.rows, operands[0])
        if operands and all(isinstance(op, MatrixStore) for op in operands):
            return build_column(store.rows, *operands)
        if not operands:
            raise InvalidArgumentError("Expected a column count, stores or elements")
        return build_column(store.rows, store.factory.columns(*operands))

    def above(self, *operands: Any) -> "LogicalBuilder":
        """Stack a block on top.

        ``above(n)`` adds ``n`` zero rows; ``above(*stores)`` places the
        stores side by side (zero-padded to the current column count);
        ``above(*elements)`` adds a single row of elements.
        """
        self._store = AboveBelowStore(self._row_block(operands), self._store)
        return self

    def below(self, *operands: Any) -> "LogicalBuilder":
        """Stack a block underneath; operands as for ``above``."""
        self._store = AboveBelowStore(self._store, self._row_block(operands))
        return self

    def left(self, *operands: Any) -> "LogicalBuilder":
        """Place a block on the left.

        ``left(n)`` adds ``n`` zero columns; ``left(*stores)`` stacks the
        stores (zero-padded to the current row count); ``left(*elements)``
        adds a single column of elements.
        """
        self._store = LeftRightStore(self._column_block(operands), self._store)
        return self

    def right(self, *operands: Any) -> "LogicalBuilder":
        """Place a block on the right; operands as for ``left``."""
        self._store = LeftRightStore(self._store, self._column_block(operands))
        return self

    def diagonally(self, *stores: MatrixStore) -> "LogicalBuilder":
        """Embed each store along the main diagonal, zero-filling the corners."""
        result = self._store
        factory = result.factory
        for block in stores:
            upper = LeftRightStore(result, ZeroStore(factory, result.rows, block.cols))
            lower = LeftRightStore(ZeroStore(factory, block.rows, result.cols), block)
            result = AboveBelowStore(upper, lower)
        self._store = result
        return self

    # =========================================================================
    # Structure Masks
    # =========================================================================

    def triangular(self, upper: bool, assume_one: bool) -> "LogicalBuilder":
        if upper:
            self._store = UpperTriangularStore(self._store, assume_one)
        else:
            self._store = LowerTriangularStore(self._store, assume_one)
        return self

    def diagonal(self, assume_one: bool) -> "LogicalBuilder":
        """Keep only the main diagonal."""
        self._store = UpperTriangularStore(LowerTriangularStore(self._store, assume_one), assume_one)
        return self

    def hessenberg(self, upper: bool) -> "LogicalBuilder":
        if upper:
            self._store = UpperHessenbergStore(self._store)
        else:
            self._store = LowerHessenbergStore(self._store)
        return self

    def bidiagonal(self, upper: bool, assume_one: bool) -> "LogicalBuilder":
        """Main diagonal plus the first super- (upper) or sub- (lower) diagonal."""
        if upper:
            self._store = UpperTriangularStore(LowerHessenbergStore(self._store), assume_one)
        else:
            self._store = LowerTriangularStore(UpperHessenbergStore(self._store), assume_one)
        return self

    def tridiagonal(self) -> "LogicalBuilder":
        self._store = UpperHessenbergStore(LowerHessenbergStore(self._store))
        return self

    def hermitian(self, upper: bool) -> "LogicalBuilder":
        """Mirror the stored half onto the other as its conjugate transpose."""
        if upper:
            self._store = UpperHermitianStore(self._store)
        else:
            self._store = LowerHermitianStore(self._store)
        return self

    # =========================================================================
    # Selection and Windowing
    # =========================================================================

    def row(self, *indices: int) -> "LogicalBuilder":
        """Select rows by index; repeats and any order allowed."""
        self._store = RowsStore(self._store, _flatten_indices(indices))
        return self

    def column(self, *indices: int) -> "LogicalBuilder":
        """Select columns by index; repeats and any order allowed."""
        self._store = ColumnsStore(self._store, _flatten_indices(indices))
        return self

    def offsets(self, row_offset: int, col_offset: int) -> "LogicalBuilder":
        """Window starting at the offsets; negative offsets count as 0."""
        self._store = OffsetStore(self._store, max(row_offset, 0), max(col_offset, 0))
        return self

    def limits(self, row_limit: int, col_limit: int) -> "LogicalBuilder":
        """Cap the visible dimensions; a negative limit means no limit."""
        store = self._store
        self._store = LimitStore(
            store.rows if row_limit < 0 else row_limit,
            store.cols if col_limit < 0 else col_limit,
            store,
        )
        return self

    def superimpose(self, *args: Any) -> "LogicalBuilder":
        """Overlay a store (or a single element).

        ``superimpose(store)`` overlays at ``(0, 0)``;
        ``superimpose(row, col, store_or_element)`` at ``(row, col)``.
        """
        if len(args) == 1:
            row, col, overlay = 0, 0, args[0]
        elif len(args) == 3:
            row, col, overlay = args
        else:
            raise InvalidArgumentError(
                f"superimpose takes (store) or (row, col, store), got {len(args)} arguments"
            )
        if not isinstance(overlay, MatrixStore):
            overlay = SingleStore(self._store.factory, overlay)
        self._store = SuperimposedStore(self._store, row, col, overlay)
        return self

    # =========================================================================
    # Self-Inverse Transforms
    # =========================================================================

    def transpose(self) -> "LogicalBuilder":
        if isinstance(self._store, TransposedStore):
            logger.debug("Cancelling double transpose")
            self._store = self._store.original
        else:
            self._store = TransposedStore(self._store)
        return self

    def conjugate(self) -> "LogicalBuilder":
        if isinstance(self._store, ConjugatedStore):
            logger.debug("Cancelling double conjugate")
            self._store = self._store.original
        else:
            self._store = ConjugatedStore(self._store)
        return self
