"""Snapshot-based undo/redo history with char-insert coalescing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from code_editor.runtime import telemetry

from .document import LinesSnapshot
from .state import Cursor

DEFAULT_HISTORY_LIMIT = 100


@dataclass(frozen=True, slots=True)
class Snapshot:
    """Full copy of the document lines plus the cursor."""

    lines: LinesSnapshot
    row: int
    col: int

    @property
    def cursor(self) -> Cursor:
        return (self.row, self.col)


class UndoHistory:
    """Two bounded snapshot stacks.

    A run of plain character inserts shares the snapshot taken before its
    first character: :meth:`push` skips non-forced pushes while
    ``last_edit_was_char`` is set.
    """

    def __init__(self, *, limit: int = DEFAULT_HISTORY_LIMIT) -> None:
        if limit <= 0:
            raise ValueError("history limit must be positive")
        self.limit = limit
        self._undo: List[Snapshot] = []
        self._redo: List[Snapshot] = []
        self.last_edit_was_char = False
        self.logger = telemetry.get_logger("code_editor.buffer.undo")

    @property
    def undo_depth(self) -> int:
        return len(self._undo)

    @property
    def redo_depth(self) -> int:
        return len(self._redo)

    def can_undo(self) -> bool:
        return bool(self._undo)

    def can_redo(self) -> bool:
        return bool(self._redo)

    def push(self, snapshot: Snapshot, *, force: bool = False) -> bool:
        if not force and self.last_edit_was_char:
            return False
        self._append(self._undo, snapshot)
        self._redo.clear()
        return True

    def undo(self, current: Snapshot) -> Optional[Snapshot]:
        if not self._undo:
            return None
        self._append(self._redo, current)
        self.last_edit_was_char = False
        self.logger.debug(f"undo -> depth {len(self._undo) - 1}")
        return self._undo.pop()

    def redo(self, current: Snapshot) -> Optional[Snapshot]:
        if not self._redo:
            return None
        self._append(self._undo, current)
        self.last_edit_was_char = False
        self.logger.debug(f"redo -> depth {len(self._redo) - 1}")
        return self._redo.pop()

    def reset_coalescing(self) -> None:
        self.last_edit_was_char = False

    def clear(self) -> None:
        self._undo.clear()
        self._redo.clear()
        self.last_edit_was_char = False

    def _append(self, stack: List[Snapshot], snapshot: Snapshot) -> None:
        stack.append(snapshot)
        if len(stack) > self.limit:
            del stack[0]


__all__ = ["Snapshot", "UndoHistory", "DEFAULT_HISTORY_LIMIT"]
