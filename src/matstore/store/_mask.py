"""
Masking Stores

Decorators that impose element structure: positions outside a declared
region read as exactly zero (or one on an assumed-unit diagonal),
regardless of what the base holds. Hermitian stores instead synthesize
the unstored half from the stored one.

Structural hints are narrowed to the masked band, but only ever loosened
relative to the true nonzero extent.
"""

from typing import Any

from .._error import DimensionMismatchError
from ._base import MatrixStore, ViewKind

__all__ = [
    'UpperTriangularStore',
    'LowerTriangularStore',
    'UpperHessenbergStore',
    'LowerHessenbergStore',
    'UpperHermitianStore',
    'LowerHermitianStore',
]


class _MaskedStore(MatrixStore):
    """Same-shape single-child decorator."""

    def __init__(self, base: MatrixStore):
        super().__init__(base.factory, base.rows, base.cols)
        self.base = base


# =============================================================================
# Triangular
# =============================================================================

class UpperTriangularStore(_MaskedStore):
    """Zero below the main diagonal; optionally ones on it."""

    view_kind = ViewKind.UPPER_TRIANGULAR

    def __init__(self, base: MatrixStore, assume_one: bool = False):
        super().__init__(base)
        self.assume_one = assume_one

    def get_element(self, row: int, col: int) -> Any:
        if row > col:
            return self.scalar_kind.zero
        if self.assume_one and row == col:
            return self.scalar_kind.one
        return self.base.get_element(row, col)

    def first_in_column(self, col: int) -> int:
        first = self.base.first_in_column(col)
        if self.assume_one:
            return min(first, col)
        return first

    def limit_of_column(self, col: int) -> int:
        if self.assume_one:
            return min(col + 1, self._rows)
        return min(self.base.limit_of_column(col), col + 1)

    def first_in_row(self, row: int) -> int:
        if self.assume_one:
            return min(row, self._cols)
        return min(max(self.base.first_in_row(row), row), self._cols)

    def limit_of_row(self, row: int) -> int:
        limit = self.base.limit_of_row(row)
        if self.assume_one and row < self._cols:
            return max(limit, row + 1)
        return limit


class LowerTriangularStore(_MaskedStore):
    """Zero above the main diagonal; optionally ones on it."""

    view_kind = ViewKind.LOWER_TRIANGULAR

    def __init__(self, base: MatrixStore, assume_one: bool = False):
        super().__init__(base)
        self.assume_one = assume_one

    def get_element(self, row: int, col: int) -> Any:
        if row < col:
            return self.scalar_kind.zero
        if self.assume_one and row == col:
            return self.scalar_kind.one
        return self.base.get_element(row, col)

    def first_in_column(self, col: int) -> int:
        if self.assume_one:
            return min(col, self._rows)
        return min(max(self.base.first_in_column(col), col), self._rows)

    def limit_of_column(self, col: int) -> int:
        limit = self.base.limit_of_column(col)
        if self.assume_one and col < self._rows:
            return max(limit, col + 1)
        return limit

    def first_in_row(self, row: int) -> int:
        first = self.base.first_in_row(row)
        if self.assume_one:
            return min(first, row)
        return first

    def limit_of_row(self, row: int) -> int:
        if self.assume_one:
            return min(row + 1, self._cols)
        return min(self.base.limit_of_row(row), row + 1)


# =============================================================================
# Hessenberg
# =============================================================================

class UpperHessenbergStore(_MaskedStore):
    """Zero below the first subdiagonal."""

    view_kind = ViewKind.UPPER_HESSENBERG

    def get_element(self, row: int, col: int) -> Any:
        if row > col + 1:
            return self.scalar_kind.zero
        return self.base.get_element(row, col)

    def first_in_column(self, col: int) -> int:
        return self.base.first_in_column(col)

    def limit_of_column(self, col: int) -> int:
        return min(self.base.limit_of_column(col), col + 2)

    def first_in_row(self, row: int) -> int:
        return min(max(self.base.first_in_row(row), row - 1), self._cols)

    def limit_of_row(self, row: int) -> int:
        return self.base.limit_of_row(row)


class LowerHessenbergStore(_MaskedStore):
    """Zero above the first superdiagonal."""

    view_kind = ViewKind.LOWER_HESSENBERG

    def get_element(self, row: int, col: int) -> Any:
        if col > row + 1:
            return self.scalar_kind.zero
        return self.base.get_element(row, col)

    def first_in_column(self, col: int) -> int:
        return min(max(self.base.first_in_column(col), col - 1), self._rows)

    def limit_of_column(self, col: int) -> int:
        return self.base.limit_of_column(col)

    def first_in_row(self, row: int) -> int:
        return self.base.first_in_row(row)

    def limit_of_row(self, row: int) -> int:
        return min(self.base.limit_of_row(row), row + 2)


# =============================================================================
# Hermitian
# =============================================================================

class _HermitianStore(_MaskedStore):

    def __init__(self, base: MatrixStore):
        if base.rows != base.cols:
            raise DimensionMismatchError(
                f"Hermitian view needs a square store, got {base.shape}"
            )
        super().__init__(base)

    def _mirror(self, row: int, col: int) -> Any:
        return self.scalar_kind.conjugate(self.base.get_element(col, row))


class UpperHermitianStore(_HermitianStore):
    """Reads the upper half (diagonal included); mirrors it below."""

    view_kind = ViewKind.UPPER_HERMITIAN

    def get_element(self, row: int, col: int) -> Any:
        if row <= col:
            return self.base.get_element(row, col)
        return self._mirror(row, col)


class LowerHermitianStore(_HermitianStore):
    """Reads the lower half (diagonal included); mirrors it above."""

    view_kind = ViewKind.LOWER_HERMITIAN

    def get_element(self, row: int, col: int) -> Any:
        if row >= col:
            return self.base.get_element(row, col)
        return self._mirror(row, col)
