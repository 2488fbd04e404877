"""Validation helpers shared across buffer services."""

from __future__ import annotations

from .document import Document
from .state import Cursor


class BufferValidationError(RuntimeError):
    """Raised when a host provides out-of-bounds cursor info."""

    def __init__(self, message: str, *, cursor: Cursor | None = None) -> None:
        super().__init__(message)
        self.cursor = cursor


def ensure_cursor(document: Document, cursor: Cursor, *, normal: bool = False) -> Cursor:
    row, col = cursor
    if row < 1 or row > document.line_count:
        raise BufferValidationError("Row out of range", cursor=cursor)
    if col < 0 or col > document.max_col(row, normal=normal):
        raise BufferValidationError("Column out of range", cursor=cursor)
    return cursor


__all__ = ["BufferValidationError", "ensure_cursor"]
