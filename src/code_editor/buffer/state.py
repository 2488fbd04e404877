"""Cursor state for edit buffers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Cursor = Tuple[int, int]  # (row, column); row is 1-based, column is a 0-based gap


@dataclass(slots=True)
class BufferState:
    """Mutable cursor position tied to one document."""

    row: int = 1
    col: int = 0

    @property
    def cursor(self) -> Cursor:
        return (self.row, self.col)

    def set_cursor(self, row: int, col: int) -> None:
        self.row = row
        self.col = col

    def move_to(self, cursor: Cursor) -> None:
        self.row, self.col = cursor


__all__ = ["BufferState", "Cursor"]
