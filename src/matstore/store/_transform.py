"""
Coordinate-Remapping Stores

Decorators that translate coordinates (transpose, window, select, overlay)
or map values one-to-one (conjugate). None of them copies data; each read
is answered by at most one read on a child.
"""

from typing import Any, Sequence

from .._error import DimensionMismatchError, IndexOutOfBoundsError, check_same_kind
from ._base import MatrixStore, ViewKind

__all__ = [
    'TransposedStore',
    'ConjugatedStore',
    'OffsetStore',
    'LimitStore',
    'RowsStore',
    'ColumnsStore',
    'SuperimposedStore',
]


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


# =============================================================================
# Self-Inverse Views
# =============================================================================

class TransposedStore(MatrixStore):
    """Transposed view; transposing it again returns the original."""

    view_kind = ViewKind.TRANSPOSED

    def __init__(self, base: MatrixStore):
        super().__init__(base.factory, base.cols, base.rows)
        self.base = base

    @property
    def original(self) -> MatrixStore:
        return self.base

    def get_element(self, row: int, col: int) -> Any:
        return self.base.get_element(col, row)

    def transpose(self) -> MatrixStore:
        return self.base

    def first_in_column(self, col: int) -> int:
        return self.base.first_in_row(col)

    def first_in_row(self, row: int) -> int:
        return self.base.first_in_column(row)

    def limit_of_column(self, col: int) -> int:
        return self.base.limit_of_row(col)

    def limit_of_row(self, row: int) -> int:
        return self.base.limit_of_column(row)


class ConjugatedStore(MatrixStore):
    """Elementwise complex conjugate; conjugating it again returns the original."""

    view_kind = ViewKind.CONJUGATED

    def __init__(self, base: MatrixStore):
        super().__init__(base.factory, base.rows, base.cols)
        self.base = base

    @property
    def original(self) -> MatrixStore:
        return self.base

    def get_element(self, row: int, col: int) -> Any:
        return self.scalar_kind.conjugate(self.base.get_element(row, col))

    def conjugate(self) -> MatrixStore:
        return self.base

    def first_in_column(self, col: int) -> int:
        return self.base.first_in_column(col)

    def first_in_row(self, row: int) -> int:
        return self.base.first_in_row(row)

    def limit_of_column(self, col: int) -> int:
        return self.base.limit_of_column(col)

    def limit_of_row(self, row: int) -> int:
        return self.base.limit_of_row(row)


# =============================================================================
# Windowing
# =============================================================================

class OffsetStore(MatrixStore):
    """
    Window starting at ``(row_offset, col_offset)`` and running to the end
    of the base. Negative offsets are treated as 0.
    """

    view_kind = ViewKind.OFFSET

    def __init__(self, base: MatrixStore, row_offset: int, col_offset: int):
        row_offset = max(0, row_offset)
        col_offset = max(0, col_offset)
        super().__init__(
            base.factory,
            max(0, base.rows - row_offset),
            max(0, base.cols - col_offset),
        )
        self.base = base
        self.row_offset = row_offset
        self.col_offset = col_offset

    def get_element(self, row: int, col: int) -> Any:
        return self.base.get_element(row + self.row_offset, col + self.col_offset)

    def first_in_column(self, col: int) -> int:
        first = self.base.first_in_column(col + self.col_offset) - self.row_offset
        return _clamp(first, 0, self._rows)

    def limit_of_column(self, col: int) -> int:
        limit = self.base.limit_of_column(col + self.col_offset) - self.row_offset
        return _clamp(limit, 0, self._rows)

    def first_in_row(self, row: int) -> int:
        first = self.base.first_in_row(row + self.row_offset) - self.col_offset
        return _clamp(first, 0, self._cols)

    def limit_of_row(self, row: int) -> int:
        limit = self.base.limit_of_row(row + self.row_offset) - self.col_offset
        return _clamp(limit, 0, self._cols)


class LimitStore(MatrixStore):
    """Top-left ``row_limit x col_limit`` corner of the base.

    Limits larger than the base are clamped to the base dimensions.
    """

    view_kind = ViewKind.LIMIT

    def __init__(self, row_limit: int, col_limit: int, base: MatrixStore):
        super().__init__(
            base.factory,
            _clamp(row_limit, 0, base.rows),
            _clamp(col_limit, 0, base.cols),
        )
        self.base = base

    def get_element(self, row: int, col: int) -> Any:
        return self.base.get_element(row, col)

    def first_in_column(self, col: int) -> int:
        return min(self.base.first_in_column(col), self._rows)

    def limit_of_column(self, col: int) -> int:
        return min(self.base.limit_of_column(col), self._rows)

    def first_in_row(self, row: int) -> int:
        return min(self.base.first_in_row(row), self._cols)

    def limit_of_row(self, row: int) -> int:
        return min(self.base.limit_of_row(row), self._cols)


# =============================================================================
# Selection
# =============================================================================

class RowsStore(MatrixStore):
    """
    Arbitrary row selection. Indices may repeat or appear in any order;
    row ``i`` of the view is row ``indices[i]`` of the base.
    """

    view_kind = ViewKind.ROWS

    def __init__(self, base: MatrixStore, indices: Sequence[int]):
        indices = tuple(int(i) for i in indices)
        super().__init__(base.factory, len(indices), base.cols)
        self.base = base
        self.indices = indices

    def get_element(self, row: int, col: int) -> Any:
        # the base only sees the translated row
        if not 0 <= row < self._rows:
            raise IndexOutOfBoundsError(f"Row {row} out of bounds for {self._rows} selected rows")
        return self.base.get_element(self.indices[row], col)

    def first_in_row(self, row: int) -> int:
        return self.base.first_in_row(self.indices[row])

    def limit_of_row(self, row: int) -> int:
        return self.base.limit_of_row(self.indices[row])


class ColumnsStore(MatrixStore):
    """Arbitrary column selection; see ``RowsStore``."""

    view_kind = ViewKind.COLUMNS

    def __init__(self, base: MatrixStore, indices: Sequence[int]):
        indices = tuple(int(i) for i in indices)
        super().__init__(base.factory, base.rows, len(indices))
        self.base = base
        self.indices = indices

    def get_element(self, row: int, col: int) -> Any:
        if not 0 <= col < self._cols:
            raise IndexOutOfBoundsError(f"Column {col} out of bounds for {self._cols} selected columns")
        return self.base.get_element(row, self.indices[col])

    def first_in_column(self, col: int) -> int:
        return self.base.first_in_column(self.indices[col])

    def limit_of_column(self, col: int) -> int:
        return self.base.limit_of_column(self.indices[col])


# =============================================================================
# Overlay
# =============================================================================

class SuperimposedStore(MatrixStore):
    """
    ``overlay`` placed over ``base`` with its top-left corner at
    ``(row, col)``. Reads inside the overlay footprint come from the
    overlay, all others from the base.

    Raises:
        DimensionMismatchError: If the footprint leaves the base bounds
    """

    view_kind = ViewKind.SUPERIMPOSED

    def __init__(self, base: MatrixStore, row: int, col: int, overlay: MatrixStore):
        check_same_kind(base, overlay)
        if row < 0 or col < 0 or row + overlay.rows > base.rows or col + overlay.cols > base.cols:
            raise DimensionMismatchError(
                f"Overlay {overlay.shape} at ({row}, {col}) does not fit into {base.shape}"
            )
        super().__init__(base.factory, base.rows, base.cols)
        self.base = base
        self.overlay = overlay
        self.row = row
        self.col = col
        self._row_limit = row + overlay.rows
        self._col_limit = col + overlay.cols

    def _covers_row(self, row: int) -> bool:
        return self.row <= row < self._row_limit

    def _covers_col(self, col: int) -> bool:
        return self.col <= col < self._col_limit

    def get_element(self, row: int, col: int) -> Any:
        if self._covers_row(row) and self._covers_col(col):
            return self.overlay.get_element(row - self.row, col - self.col)
        return self.base.get_element(row, col)

    def first_in_column(self, col: int) -> int:
        first = self.base.first_in_column(col)
        if self._covers_col(col):
            first = min(first, self.row + self.overlay.first_in_column(col - self.col))
        return first

    def limit_of_column(self, col: int) -> int:
        limit = self.base.limit_of_column(col)
        if self._covers_col(col):
            overlay_limit = self.overlay.limit_of_column(col - self.col)
            if overlay_limit > 0:
                limit = max(limit, self.row + overlay_limit)
        return limit

    def first_in_row(self, row: int) -> int:
        first = self.base.first_in_row(row)
        if self._covers_row(row):
            first = min(first, self.col + self.overlay.first_in_row(row - self.row))
        return first

    def limit_of_row(self, row: int) -> int:
        limit = self.base.limit_of_row(row)
        if self._covers_row(row):
            overlay_limit = self.overlay.limit_of_row(row - self.row)
            if overlay_limit > 0:
                limit = max(limit, self.col + overlay_limit)
        return limit
