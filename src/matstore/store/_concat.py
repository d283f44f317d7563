"""
Concatenation Stores

Two-child stores that place one store above or beside another. Operand
dimensions are validated when the node is created; a mismatch never reaches
the read path.
"""

from typing import Any

from .._error import DimensionMismatchError, check_same_kind
from ._base import MatrixStore, ViewKind

__all__ = ['AboveBelowStore', 'LeftRightStore']


class AboveBelowStore(MatrixStore):
    """``upper`` stacked on top of ``lower`` (equal column counts)."""

    view_kind = ViewKind.ABOVE_BELOW

    def __init__(self, upper: MatrixStore, lower: MatrixStore):
        check_same_kind(upper, lower)
        if upper.cols != lower.cols:
            raise DimensionMismatchError(
                f"Column mismatch: {upper.cols} vs {lower.cols}"
            )
        super().__init__(upper.factory, upper.rows + lower.rows, upper.cols)
        self.upper = upper
        self.lower = lower
        self._split = upper.rows

    def get_element(self, row: int, col: int) -> Any:
        if row < self._split:
            return self.upper.get_element(row, col)
        return self.lower.get_element(row - self._split, col)

    def first_in_column(self, col: int) -> int:
        first = self.upper.first_in_column(col)
        if first < self._split:
            return first
        return self._split + self.lower.first_in_column(col)

    def limit_of_column(self, col: int) -> int:
        limit = self.lower.limit_of_column(col)
        if limit > 0:
            return self._split + limit
        return self.upper.limit_of_column(col)

    def first_in_row(self, row: int) -> int:
        if row < self._split:
            return self.upper.first_in_row(row)
        return self.lower.first_in_row(row - self._split)

    def limit_of_row(self, row: int) -> int:
        if row < self._split:
            return self.upper.limit_of_row(row)
        return self.lower.limit_of_row(row - self._split)


class LeftRightStore(MatrixStore):
    """``left`` placed beside ``right`` (equal row counts)."""

    view_kind = ViewKind.LEFT_RIGHT

    def __init__(self, left: MatrixStore, right: MatrixStore):
        check_same_kind(left, right)
        if left.rows != right.rows:
            raise DimensionMismatchError(
                f"Row mismatch: {left.rows} vs {right.rows}"
            )
        super().__init__(left.factory, left.rows, left.cols + right.cols)
        self.left = left
        self.right = right
        self._split = left.cols

    def get_element(self, row: int, col: int) -> Any:
        if col < self._split:
            return self.left.get_element(row, col)
        return self.right.get_element(row, col - self._split)

    def first_in_row(self, row: int) -> int:
        first = self.left.first_in_row(row)
        if first < self._split:
            return first
        return self._split + self.right.first_in_row(row)

    def limit_of_row(self, row: int) -> int:
        limit = self.right.limit_of_row(row)
        if limit > 0:
            return self._split + limit
        return self.left.limit_of_row(row)

    def first_in_column(self, col: int) -> int:
        if col < self._split:
            return self.left.first_in_column(col)
        return self.right.first_in_column(col - self._split)

    def limit_of_column(self, col: int) -> int:
        if col < self._split:
            return self.left.limit_of_column(col)
        return self.right.limit_of_column(col - self._split)
