"""Edit buffer façade combining document, cursor, history, yank, search and tokens."""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import ContextManager, Optional

from code_editor.runtime import telemetry
from code_editor.syntax import TokenCache, get_lexer, leading_spaces, rule_for

from .document import Document
from .registers import YankBuffer
from .search import Match, SearchState
from .state import BufferState, Cursor
from .undo import DEFAULT_HISTORY_LIMIT, Snapshot, UndoHistory


class EditBuffer:
    """Owns every piece of editor state that key handling mutates.

    Editing methods apply one undoable change each. Boundary cases degrade to
    no-ops and report ``False`` rather than raising.
    """

    def __init__(
        self,
        text: str = "",
        *,
        name: str = "default",
        language: Optional[str] = None,
        tab_width: int = 4,
        page_size: int = 20,
        history_limit: int = DEFAULT_HISTORY_LIMIT,
    ) -> None:
        self.name = name
        self.tab_width = tab_width
        self.page_size = page_size
        self.document = Document.from_text(text)
        self.state = BufferState()
        self.history = UndoHistory(limit=history_limit)
        self.yank = YankBuffer()
        self.search = SearchState()
        self.language = language
        self.indent_rule = rule_for(language)
        self.tokens = TokenCache(get_lexer(language))
        self._place_cursor_at_end()
        self.tokens.rebuild(self.document.lines)

    # -- state ------------------------------------------------------------

    @property
    def cursor(self) -> Cursor:
        return self.state.cursor

    def set_cursor(self, row: int, col: int) -> None:
        self.state.set_cursor(row, col)

    def snapshot(self) -> Snapshot:
        return Snapshot(self.document.snapshot(), self.state.row, self.state.col)

    def restore(self, snapshot: Snapshot) -> None:
        self.document.restore(snapshot.lines)
        self.state.set_cursor(snapshot.row, snapshot.col)
        self.tokens.rebuild(self.document.lines)

    def set_text(self, text: str) -> None:
        self.document.set_text(text)
        self._place_cursor_at_end()
        self._reset()

    def clear(self) -> None:
        self.document.clear()
        self.state.set_cursor(1, 0)
        self._reset()

    def set_language(self, language: Optional[str]) -> None:
        self.language = language
        self.indent_rule = rule_for(language)
        self.tokens.set_lexer(get_lexer(language), self.document.lines)

    def edit(self, label: str, *, force: bool = True) -> "Transaction":
        return Transaction(self, label, force=force)

    def mark_dirty(self, row: int) -> None:
        self.tokens.mark_dirty(row)

    def mark_dirty_from(self, row: int) -> None:
        """Rows shift after a structural edit, so everything below is stale."""

        for target in range(row, self.document.line_count + 1):
            self.tokens.mark_dirty(target)

    def refresh_tokens(self) -> None:
        self.tokens.ensure_fresh(self.document.lines)

    def clamp_cursor(self, *, normal: bool) -> None:
        row = self.state.row
        self.state.col = self.document.clamp_col(row, self.state.col, normal=normal)

    def move_cursor(self, target: Cursor) -> None:
        self.state.move_to(target)
        self.history.reset_coalescing()

    # -- insert-mode edits ---------------------------------------------------

    def insert_char(self, ch: str) -> None:
        with self.edit("insert_char", force=False) as tx:
            row, col = self.cursor
            self.document.insert_text(row, col, ch)
            self.state.col = col + 1
            self.mark_dirty(row)
            self._auto_dedent(row)
            tx.coalesce = True

    def insert_newline(self) -> None:
        with self.edit("newline"):
            row, col = self.cursor
            left = self.document.line(row)[:col]
            indent = leading_spaces(left)
            if self.indent_rule.opens_block(left):
                indent += self.tab_width
            self.document.split_line(row, col, indent)
            self.state.set_cursor(row + 1, indent)
            self.mark_dirty_from(row)

    def backspace(self) -> bool:
        with self.edit("backspace"):
            row, col = self.cursor
            if col > 0:
                self.document.delete_range(row, col - 1, col)
                self.state.col = col - 1
                self.mark_dirty(row)
                return True
            if row > 1:
                join_col = self.document.merge_into_previous(row)
                self.state.set_cursor(row - 1, join_col)
                self.mark_dirty_from(row - 1)
                return True
            return False

    def delete_forward(self) -> bool:
        with self.edit("delete"):
            row, col = self.cursor
            if col < self.document.line_length(row):
                self.document.delete_range(row, col, col + 1)
                self.mark_dirty(row)
                return True
            if self.document.join_next(row):
                self.mark_dirty_from(row)
                return True
            return False

    def indent(self) -> None:
        with self.edit("indent"):
            row, col = self.cursor
            self.document.insert_text(row, col, " " * self.tab_width)
            self.state.col = col + self.tab_width
            self.mark_dirty(row)

    def dedent(self) -> bool:
        with self.edit("dedent"):
            row, col = self.cursor
            removed = self.document.strip_leading(row, self.tab_width)
            if not removed:
                return False
            self.state.col = max(0, col - removed)
            self.mark_dirty(row)
            return True

    def _auto_dedent(self, row: int) -> None:
        line = self.document.line(row)
        if not self.indent_rule.closes_block(line):
            return
        if self.document.leading_spaces(row) < self.tab_width:
            return
        removed = self.document.strip_leading(row, self.tab_width)
        self.state.col = max(0, self.state.col - removed)

    # -- normal-mode edits ---------------------------------------------------

    def open_line(self, *, below: bool) -> None:
        with self.edit("open_below" if below else "open_above"):
            row = self.state.row
            indent = self.document.leading_spaces(row)
            target = row + 1 if below else row
            self.document.insert_lines(target, [" " * indent])
            self.state.set_cursor(target, indent)
            self.mark_dirty_from(target)

    def delete_line(self) -> None:
        with self.edit("delete_line"):
            row, col = self.cursor
            self.yank.yank_lines([self.document.line(row)])
            if self.document.line_count == 1:
                self.document.remove_line(row)
                self.state.set_cursor(1, 0)
                self.mark_dirty(1)
                return
            self.document.remove_line(row)
            row = min(row, self.document.line_count)
            self.state.set_cursor(row, self.document.clamp_col(row, col, normal=True))
            self.mark_dirty_from(row)

    def yank_line(self) -> None:
        self.yank.yank_lines([self.document.line(self.state.row)])

    def change_line(self) -> None:
        with self.edit("change_line"):
            row = self.state.row
            indent = self.document.leading_spaces(row)
            self.document.replace_line(row, " " * indent)
            self.state.col = indent
            self.mark_dirty(row)

    def replace_char(self, ch: str) -> bool:
        row, col = self.cursor
        if col >= self.document.line_length(row):
            return False
        with self.edit("replace_char"):
            self.document.replace_char(row, col, ch)
            self.mark_dirty(row)
        return True

    def delete_char(self) -> bool:
        row, col = self.cursor
        if col >= self.document.line_length(row):
            return False
        with self.edit("delete_char"):
            self.yank.yank_chars(self.document.delete_range(row, col, col + 1))
            self.state.col = self.document.clamp_col(row, col, normal=True)
            self.mark_dirty(row)
        return True

    def delete_to_end(self) -> bool:
        row, col = self.cursor
        length = self.document.line_length(row)
        if col >= length:
            return False
        with self.edit("delete_to_end"):
            self.yank.yank_chars(self.document.delete_range(row, col, length))
            self.state.col = self.document.max_col(row, normal=True)
            self.mark_dirty(row)
        return True

    def change_to_end(self) -> None:
        with self.edit("change_to_end"):
            row, col = self.cursor
            length = self.document.line_length(row)
            if col < length:
                self.document.delete_range(row, col, length)
                self.mark_dirty(row)

    def join_lines(self) -> bool:
        row = self.state.row
        if row >= self.document.line_count:
            return False
        with self.edit("join_lines"):
            self.document.join_next(row, strip=True, separator=" ")
            self.mark_dirty_from(row)
        return True

    def toggle_case(self) -> bool:
        row, col = self.cursor
        length = self.document.line_length(row)
        if col >= length:
            return False
        with self.edit("toggle_case"):
            ch = self.document.line(row)[col]
            toggled = ch.lower() if ch.isupper() else ch.upper()
            if len(toggled) != 1:
                toggled = ch
            self.document.replace_char(row, col, toggled)
            self.state.col = min(col + 1, max(length - 1, 0))
            self.mark_dirty(row)
        return True

    def paste(self, *, after: bool) -> bool:
        if self.yank.is_empty():
            return False
        with self.edit("paste_after" if after else "paste_before"):
            row, col = self.cursor
            if self.yank.linewise:
                target = row + 1 if after else row
                self.document.insert_lines(target, self.yank.lines)
                first = min(
                    self.document.leading_spaces(target),
                    self.document.max_col(target, normal=True),
                )
                self.state.set_cursor(target, first)
                self.mark_dirty_from(target)
                return True
            chars = self.yank.lines[0]
            position = min(col + 1, self.document.line_length(row)) if after else col
            count = self.document.insert_text(row, position, chars)
            self.state.col = max(position + count - 1, 0)
            self.mark_dirty(row)
            return True

    # -- history -------------------------------------------------------------

    def undo(self) -> bool:
        snapshot = self.history.undo(self.snapshot())
        if snapshot is None:
            return False
        self.restore(snapshot)
        return True

    def redo(self) -> bool:
        snapshot = self.history.redo(self.snapshot())
        if snapshot is None:
            return False
        self.restore(snapshot)
        return True

    # -- search --------------------------------------------------------------

    def search_append(self, ch: str) -> None:
        self.search.append(ch)
        self._recompute_search()

    def search_backspace(self) -> bool:
        if not self.search.pop():
            return False
        self._recompute_search()
        return True

    def jump_to_match(self, match: Optional[Match]) -> bool:
        if match is None:
            return False
        match_row, match_col = match
        self.state.set_cursor(match_row, match_col - 1)
        return True

    def _recompute_search(self) -> None:
        row, col = self.cursor
        self.search.recompute(self.document.lines, row, col)

    # -- helpers -------------------------------------------------------------

    def _place_cursor_at_end(self) -> None:
        row = self.document.line_count
        self.state.set_cursor(row, self.document.line_length(row))

    def _reset(self) -> None:
        self.tokens.rebuild(self.document.lines)
        self.history.clear()
        self.search.reset()


class Transaction(AbstractContextManager["Transaction"]):
    """One undoable edit.

    Entering takes a snapshot (unless a char-insert run is being coalesced)
    and opens a ``buffer::<label>`` span. A clean exit records whether this
    edit was a plain character insert.
    """

    def __init__(self, buffer: EditBuffer, label: str, *, force: bool = True) -> None:
        self.buffer = buffer
        self.label = label
        self.force = force
        self.coalesce = False
        self.pushed = False
        self._span_cm: Optional[ContextManager[object]] = None

    def __enter__(self) -> "Transaction":
        history = self.buffer.history
        if self.force or not history.last_edit_was_char:
            self.pushed = history.push(self.buffer.snapshot(), force=True)
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component=True,
            metadata={"buffer": self.buffer.name, "pushed": self.pushed},
        )
        self._span_cm.__enter__()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc_type is None:
            self.buffer.history.last_edit_was_char = self.coalesce
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False


__all__ = ["EditBuffer", "Transaction"]
