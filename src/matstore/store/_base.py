"""
MatrixStore Base Class

This module defines the read-only two-dimensional store contract shared by
every leaf and decorator. Implementations supply dimensions and a single
element accessor; everything else (elementwise algebra, products, norms,
slicing, structural hints, materialization) is derived from those
primitives here.

Type Hierarchy:

    ElementsSupplier (ABC)
    └── MatrixStore (ABC)
        ├── Leaf stores         ZeroStore, IdentityStore, SingleStore, WrapperStore
        ├── DenseStore          materialized, mutable (the only writable store)
        └── Decorator stores    concatenation, transpose/conjugate, windowing,
                                selection, overlay, triangular/band/hermitian masks

Design Philosophy:

1. Immutable Views: A store never changes after construction. Any number of
   readers may share one store, and decorators may share children.

2. Index Translation Only: Decorators remap coordinates or mask elements.
   They never copy data and never re-check bounds; an out-of-range
   coordinate surfaces from whichever leaf finally resolves it. Row and
   column selections are the exception: they check the selected index,
   which no leaf ever sees.

3. Single Eager Path: ``copy()`` is the one operation that allocates
   storage for the full matrix.

Example:

    >>> from matstore import PRIMITIVE
    >>> eye = PRIMITIVE.make_identity(3).get()
    >>> eye.norm()
    1.7320508075688772
    >>> view = eye.logical().offsets(1, 0).get()
    >>> view.shape
    (2, 3)
"""

from abc import abstractmethod
from enum import Enum
from typing import Any, Callable, Iterator, Optional, Tuple, Union, TYPE_CHECKING

import numpy as np

from .._error import (
    DimensionMismatchError,
    IndexOutOfBoundsError,
    check_same_kind,
    check_same_shape,
)
from .._scalar import ScalarKind
from ._access import Access1D, SequenceAccess, SliceAccess, as_access1d
from ._supplier import ElementsConsumer, ElementsSupplier, MatrixProductSupplier

if TYPE_CHECKING:
    from scipy.sparse import spmatrix
    from ._builder import LogicalBuilder
    from ._factory import StoreFactory
    from ._physical import DenseStore

__all__ = ['MatrixStore', 'ViewKind']


class ViewKind(Enum):
    """Closed set of store kinds, leaves first."""
    ZERO = 'zero'
    IDENTITY = 'identity'
    SINGLE = 'single'
    WRAPPER = 'wrapper'
    DENSE = 'dense'
    ABOVE_BELOW = 'above_below'
    LEFT_RIGHT = 'left_right'
    TRANSPOSED = 'transposed'
    CONJUGATED = 'conjugated'
    OFFSET = 'offset'
    LIMIT = 'limit'
    ROWS = 'rows'
    COLUMNS = 'columns'
    SUPERIMPOSED = 'superimposed'
    UPPER_TRIANGULAR = 'upper_triangular'
    LOWER_TRIANGULAR = 'lower_triangular'
    UPPER_HESSENBERG = 'upper_hessenberg'
    LOWER_HESSENBERG = 'lower_hessenberg'
    UPPER_HERMITIAN = 'upper_hermitian'
    LOWER_HERMITIAN = 'lower_hermitian'

    @property
    def is_leaf(self) -> bool:
        return self in _LEAF_KINDS


_LEAF_KINDS = frozenset({
    ViewKind.ZERO, ViewKind.IDENTITY, ViewKind.SINGLE, ViewKind.WRAPPER, ViewKind.DENSE,
})


class MatrixStore(ElementsSupplier):
    """
    Read-only logical view of two-dimensional numeric data.

    Subclasses call ``super().__init__(factory, rows, cols)`` and implement
    ``get_element(row, col)``. Dimensions are fixed at construction.

    Optional Overrides:
        first_in_column/first_in_row/limit_of_column/limit_of_row:
            Narrow the structural hints. Never report a bound tighter
            than the true nonzero extent.
        transpose/conjugate: Cancel self-inverse wrapping.
        copy/to_numpy: Faster materialization for physical stores.
    """

    view_kind: ViewKind

    __slots__ = ('_factory', '_rows', '_cols')

    def __init__(self, factory: "StoreFactory", rows: int, cols: int):
        self._factory = factory
        self._rows = int(rows)
        self._cols = int(cols)

    # =========================================================================
    # Element Access
    # =========================================================================

    @abstractmethod
    def get_element(self, row: int, col: int) -> Any:
        """Element at ``(row, col)`` in this store's scalar type."""
        ...

    def get(self, row: Optional[int] = None, col: Optional[int] = None) -> Any:
        """Element at ``(row, col)``; with no arguments, the store itself."""
        if row is None and col is None:
            return self
        return self.get_element(row, col)

    def double_value(self, row: int, col: int) -> float:
        """Element as a float (the real part for complex stores)."""
        value = self.get_element(row, col)
        if isinstance(value, complex):
            return value.real
        return float(value)

    def get_linear(self, index: int) -> Any:
        """Element at a column-major linear index."""
        row, col = self._locate_linear(index)
        return self.get_element(row, col)

    def double_value_linear(self, index: int) -> float:
        row, col = self._locate_linear(index)
        return self.double_value(row, col)

    def to_scalar(self, row: int, col: int) -> Any:
        """Element as a plain Python number (``float``, ``complex`` or ``Decimal``)."""
        return self.scalar_kind.cast(self.get_element(row, col))

    def visit_one(self, row: int, col: int, visitor: Callable[[Any], Any]) -> None:
        visitor(self.get_element(row, col))

    def _locate_linear(self, index: int) -> Tuple[int, int]:
        if self._rows == 0:
            raise IndexOutOfBoundsError(f"Linear index {index} into a store with no rows")
        return index % self._rows, index // self._rows

    def _iter_elements(self) -> Iterator[Any]:
        for col in range(self._cols):
            for row in range(self._rows):
                yield self.get_element(row, col)

    def __getitem__(self, key) -> Any:
        if isinstance(key, tuple) and len(key) == 2:
            return self.get_element(key[0], key[1])
        raise TypeError(f"Invalid index: {key!r} (expected (row, col))")

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def factory(self) -> "StoreFactory":
        return self._factory

    @property
    def scalar_kind(self) -> ScalarKind:
        return self._factory.kind

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def size(self) -> int:
        return self._rows * self._cols

    @property
    def kind(self) -> ViewKind:
        return self.view_kind

    # =========================================================================
    # Structural Hints
    # =========================================================================

    def first_in_column(self, col: int) -> int:
        """Row index of the first possibly-nonzero element in ``col``.

        ``rows`` when the column is known to be all zeros.
        """
        return 0

    def first_in_row(self, row: int) -> int:
        """Column index of the first possibly-nonzero element in ``row``.

        ``cols`` when the row is known to be all zeros.
        """
        return 0

    def limit_of_column(self, col: int) -> int:
        """One past the row index of the last possibly-nonzero element in ``col``.

        ``0`` when the column is known to be all zeros.
        """
        return self._rows

    def limit_of_row(self, row: int) -> int:
        """One past the column index of the last possibly-nonzero element in ``row``.

        ``0`` when the row is known to be all zeros.
        """
        return self._cols

    # =========================================================================
    # Structural Views
    # =========================================================================

    def logical(self) -> "LogicalBuilder":
        """Start a LogicalBuilder chain from this store."""
        from ._builder import LogicalBuilder, _INTERNAL_KEY
        return LogicalBuilder(self, _internal_key=_INTERNAL_KEY)

    def transpose(self) -> "MatrixStore":
        """O(1) transposed view."""
        from ._transform import TransposedStore
        return TransposedStore(self)

    def conjugate(self) -> "MatrixStore":
        """O(1) conjugated view."""
        from ._transform import ConjugatedStore
        return ConjugatedStore(self)

    # =========================================================================
    # Slicing
    # =========================================================================

    def slice_row(self, row: int, col: int) -> Access1D:
        """Row ``row`` from column ``col`` to the end."""
        return SliceAccess(self, self._cols - col, lambda i: (row, col + i))

    def slice_column(self, row: int, col: int) -> Access1D:
        """Column ``col`` from row ``row`` to the end."""
        return SliceAccess(self, self._rows - row, lambda i: (row + i, col))

    def slice_diagonal(self, row: int, col: int) -> Access1D:
        """Diagonal starting at ``(row, col)``."""
        length = min(self._rows - row, self._cols - col)
        return SliceAccess(self, length, lambda i: (row + i, col + i))

    def slice_range(self, first: int, limit: int) -> Access1D:
        """Column-major linear range ``[first, limit)``."""
        return SliceAccess(self, limit - first, lambda i: self._locate_linear(first + i))

    # =========================================================================
    # Algebra
    # =========================================================================

    def add(self, addend: "MatrixStore") -> "DenseStore":
        check_same_kind(self, addend)
        check_same_shape(self, addend, "add")
        kind = self.scalar_kind
        return self._dense(kind.add(self.to_numpy(), addend.to_numpy()))

    def subtract(self, subtrahend: "MatrixStore") -> "DenseStore":
        check_same_kind(self, subtrahend)
        check_same_shape(self, subtrahend, "subtract")
        kind = self.scalar_kind
        return self._dense(kind.subtract(self.to_numpy(), subtrahend.to_numpy()))

    def negate(self) -> "DenseStore":
        return self._dense(self.scalar_kind.negate(self.to_numpy()))

    def multiply(self, other: Union["MatrixStore", Any]) -> "DenseStore":
        """Matrix product with a store, or elementwise product with a scalar.

        Raises:
            DimensionMismatchError: If ``other.rows != self.cols``
        """
        if isinstance(other, MatrixStore):
            check_same_kind(self, other)
            if other.rows != self._cols:
                raise DimensionMismatchError(
                    f"Cannot multiply {self.shape} by {other.shape}: "
                    f"{self._cols} columns vs {other.rows} rows"
                )
            return MatrixProductSupplier(self, other).get()
        kind = self.scalar_kind
        return self._dense(kind.multiply(self.to_numpy(), kind.cast(other)))

    def multiply_into(self, right: "MatrixStore", target: ElementsConsumer) -> None:
        """Write ``self @ right`` into ``target``."""
        target.fill_by_multiplying(self, right)

    def premultiply(self, left: Union["MatrixStore", Access1D, Any]) -> MatrixProductSupplier:
        """Deferred product ``left @ self``.

        A 1D ``left`` is read column-major with ``len(left) // self.rows`` rows.
        """
        if not isinstance(left, MatrixStore):
            from ._leaf import WrapperStore
            access = as_access1d(left)
            count = access.count()
            if self._rows == 0 or count % self._rows != 0:
                raise DimensionMismatchError(
                    f"Cannot premultiply {self.shape} by a sequence of {count} elements"
                )
            left = WrapperStore.of_linear(self._factory, access, count // self._rows, self._rows)
        else:
            check_same_kind(left, self)
        return MatrixProductSupplier(left, self)

    def multiply_both(self, left_and_right: Union[Access1D, Any]) -> Any:
        """Quadratic form ``v^H A v`` for the vector ``v``.

        Raises:
            DimensionMismatchError: If ``len(v)`` differs from rows or cols
        """
        from ._leaf import WrapperStore
        vector = as_access1d(left_and_right)
        count = vector.count()
        if count != self._rows or count != self._cols:
            raise DimensionMismatchError(
                f"Quadratic form needs a vector of {self._rows} elements "
                f"for a {self.shape} store, got {count}"
            )
        kind = self.scalar_kind
        if count == 0:
            return kind.zero
        conjugated = SequenceAccess([kind.conjugate(kind.cast(value)) for value in vector])
        step = self.premultiply(conjugated)
        column = WrapperStore.of_linear(self._factory, vector, count, 1)
        return step.get().multiply(column).get_element(0, 0)

    def norm(self) -> float:
        """Frobenius (L2) norm over all elements."""
        return self.scalar_kind.norm2(self._iter_elements())

    def signum(self) -> "DenseStore":
        return self.multiply(1.0 / self.norm())

    def is_small(self, compared_to: float) -> bool:
        return self.scalar_kind.is_small(compared_to, self.norm())

    def equals(self, other: "MatrixStore", rtol: float = 1e-9, atol: float = 0.0) -> bool:
        """Same shape and elementwise close.

        Stores of different scalar kinds are compared as complex numbers.
        """
        if not isinstance(other, MatrixStore) or other.shape != self.shape:
            return False
        kind = self.scalar_kind
        if other.scalar_kind is kind:
            return kind.allclose(self.to_numpy(), other.to_numpy(), rtol=rtol, atol=atol)
        common = ScalarKind.COMPLEX
        left = np.fromiter((common.cast(v) for v in self._iter_elements()),
                           dtype=common.numpy_dtype, count=self.size)
        right = np.fromiter((common.cast(v) for v in other._iter_elements()),
                            dtype=common.numpy_dtype, count=other.size)
        return common.allclose(left, right, rtol=rtol, atol=atol)

    # =========================================================================
    # Materialization
    # =========================================================================

    def to_numpy(self) -> np.ndarray:
        """Fresh ndarray holding every element."""
        out = np.empty((self._rows, self._cols), dtype=self.scalar_kind.numpy_dtype)
        for col in range(self._cols):
            for row in range(self._rows):
                out[row, col] = self.get_element(row, col)
        return out

    def copy(self) -> "DenseStore":
        """Materialize into new, independent mutable storage."""
        return self._dense(self.to_numpy())

    def to_scipy(self) -> "spmatrix":
        """Materialize as a scipy CSR matrix."""
        try:
            import scipy.sparse as sp
        except ImportError as e:
            raise ImportError("scipy required for to_scipy()") from e
        data = self.to_numpy()
        if self.scalar_kind is ScalarKind.BIG:
            data = data.astype(np.float64)
        return sp.csr_matrix(data)

    def _dense(self, data: np.ndarray) -> "DenseStore":
        from ._physical import DenseStore
        return DenseStore(self._factory, data)

    # =========================================================================
    # Operators
    # =========================================================================

    def __add__(self, other):
        if not isinstance(other, MatrixStore):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, MatrixStore):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self):
        return self.negate()

    def __mul__(self, other):
        if isinstance(other, MatrixStore):
            return NotImplemented
        return self.multiply(other)

    __rmul__ = __mul__

    def __matmul__(self, other):
        if not isinstance(other, MatrixStore):
            return NotImplemented
        return self.multiply(other)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(shape={self.shape}, "
            f"scalar={self.scalar_kind.name})"
        )
