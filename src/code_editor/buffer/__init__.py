"""Document, cursor, history, yank and search state behind the editor."""

from .buffer import EditBuffer, Transaction
from .document import Document, split_text
from .registers import YankBuffer
from .search import SearchState
from .state import BufferState, Cursor
from .undo import Snapshot, UndoHistory
from .validation import BufferValidationError, ensure_cursor

__all__ = [
    "BufferState",
    "BufferValidationError",
    "Cursor",
    "Document",
    "EditBuffer",
    "SearchState",
    "Snapshot",
    "Transaction",
    "UndoHistory",
    "YankBuffer",
    "ensure_cursor",
    "split_text",
]
