"""
Error handling for matstore.

Every failure raised by the view algebra is a ``MatStoreError`` carrying a
numeric code. Subclasses also derive from the matching builtin exception so
callers can catch ``ValueError``/``IndexError``/``TypeError`` as usual.
"""

from __future__ import annotations

from typing import Optional


# =============================================================================
# Error Codes
# =============================================================================

MATSTORE_OK = 0

# General errors (1-9)
MATSTORE_ERROR_UNKNOWN = 1
MATSTORE_ERROR_PROGRAMMING = 2

# Argument errors (10-19)
MATSTORE_ERROR_INVALID_ARGUMENT = 10
MATSTORE_ERROR_DIMENSION_MISMATCH = 11
MATSTORE_ERROR_INDEX_OUT_OF_BOUNDS = 14

# Type errors (20-29)
MATSTORE_ERROR_TYPE_MISMATCH = 21


_ERROR_MESSAGES = {
    MATSTORE_OK: "Success",
    MATSTORE_ERROR_UNKNOWN: "Unknown error",
    MATSTORE_ERROR_PROGRAMMING: "Programming error",
    MATSTORE_ERROR_INVALID_ARGUMENT: "Invalid argument",
    MATSTORE_ERROR_DIMENSION_MISMATCH: "Dimension mismatch",
    MATSTORE_ERROR_INDEX_OUT_OF_BOUNDS: "Index out of bounds",
    MATSTORE_ERROR_TYPE_MISMATCH: "Type mismatch",
}


# =============================================================================
# Exception Classes
# =============================================================================

class MatStoreError(Exception):
    """
    Base exception for all matstore errors.
    """

    code = MATSTORE_ERROR_UNKNOWN

    OK = MATSTORE_OK
    ERROR_UNKNOWN = MATSTORE_ERROR_UNKNOWN
    ERROR_PROGRAMMING = MATSTORE_ERROR_PROGRAMMING
    ERROR_INVALID_ARGUMENT = MATSTORE_ERROR_INVALID_ARGUMENT
    ERROR_DIMENSION_MISMATCH = MATSTORE_ERROR_DIMENSION_MISMATCH
    ERROR_INDEX_OUT_OF_BOUNDS = MATSTORE_ERROR_INDEX_OUT_OF_BOUNDS
    ERROR_TYPE_MISMATCH = MATSTORE_ERROR_TYPE_MISMATCH

    def __init__(self, message: Optional[str] = None, code: Optional[int] = None):
        """
        Create matstore exception.

        Args:
            message: Detailed message (defaults to the code's generic text)
            code: Error code (defaults to the class code)
        """
        if code is not None:
            self.code = code
        if message is None:
            message = _ERROR_MESSAGES.get(self.code, f"Unknown error (code={self.code})")
        self.message = message
        super().__init__(f"MatStore Error {self.code}: {message}")

    @classmethod
    def from_code(cls, code: int, context: str = "") -> "MatStoreError":
        """Create exception from error code with optional context."""
        base_msg = _ERROR_MESSAGES.get(code, "Unknown error")
        msg = f"{context}: {base_msg}" if context else base_msg
        return cls(msg, code)


class ProgrammingError(MatStoreError):
    """Caller broke an API contract (illegal construction, unacceptable consumer)."""

    code = MATSTORE_ERROR_PROGRAMMING


class InvalidArgumentError(MatStoreError, ValueError):
    """Argument outside its legal domain (negative size, empty operand list)."""

    code = MATSTORE_ERROR_INVALID_ARGUMENT


class DimensionMismatchError(MatStoreError, ValueError):
    """Operand shapes disagree."""

    code = MATSTORE_ERROR_DIMENSION_MISMATCH


class IndexOutOfBoundsError(MatStoreError, IndexError):
    """Element coordinates outside a store's declared dimensions."""

    code = MATSTORE_ERROR_INDEX_OUT_OF_BOUNDS


class ScalarTypeMismatchError(MatStoreError, TypeError):
    """Operands belong to different scalar backends."""

    code = MATSTORE_ERROR_TYPE_MISMATCH


# =============================================================================
# Checking Helpers
# =============================================================================

def check_index(row: int, col: int, rows: int, cols: int) -> None:
    """
    Raise ``IndexOutOfBoundsError`` unless ``(row, col)`` lies inside
    ``[0, rows) x [0, cols)``.
    """
    if not (0 <= row < rows and 0 <= col < cols):
        raise IndexOutOfBoundsError(
            f"Element ({row}, {col}) out of bounds for shape ({rows}, {cols})"
        )


def check_same_shape(left, right, context: str = "") -> None:
    """Raise ``DimensionMismatchError`` unless both stores have equal shape."""
    if left.rows != right.rows or left.cols != right.cols:
        prefix = f"{context}: " if context else ""
        raise DimensionMismatchError(
            f"{prefix}shape mismatch {left.shape} vs {right.shape}"
        )


def check_same_kind(left, right) -> None:
    """Raise ``ScalarTypeMismatchError`` when two stores use different backends."""
    if left.scalar_kind is not right.scalar_kind:
        raise ScalarTypeMismatchError(
            f"Mixed scalar kinds: {left.scalar_kind.name} vs {right.scalar_kind.name}"
        )
