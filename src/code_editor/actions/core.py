"""Mode switches, history and pending-key actions shared across modes."""

from __future__ import annotations

from typing import Optional

from code_editor.buffer import motions
from code_editor.keymaps.resolver import ResolutionMatch
from code_editor.modes.base_mode import EditorMode, ModeContext, ModeResult, PendingKey


def enter_insert_mode(context: ModeContext, match: Optional[ResolutionMatch]) -> ModeResult:
    del context, match
    return ModeResult(consumed=True, switch_to=EditorMode.INSERT.value, message="enter_insert")


def append_after_cursor(context: ModeContext, match: Optional[ResolutionMatch]) -> ModeResult:
    del match
    buffer = context.buffer
    row, col = buffer.cursor
    buffer.set_cursor(row, min(col + 1, buffer.document.line_length(row)))
    return ModeResult(consumed=True, switch_to=EditorMode.INSERT.value, message="append")


def append_at_line_end(context: ModeContext, match: Optional[ResolutionMatch]) -> ModeResult:
    del match
    buffer = context.buffer
    buffer.set_cursor(*motions.line_end(buffer.document, buffer.cursor))
    return ModeResult(consumed=True, switch_to=EditorMode.INSERT.value, message="append_end")


def insert_at_first_non_blank(
    context: ModeContext, match: Optional[ResolutionMatch]
) -> ModeResult:
    del match
    buffer = context.buffer
    buffer.set_cursor(*motions.first_non_blank(buffer.document, buffer.cursor))
    return ModeResult(consumed=True, switch_to=EditorMode.INSERT.value, message="insert_start")


def exit_to_normal_mode(context: ModeContext, match: Optional[ResolutionMatch]) -> ModeResult:
    del match
    context.buffer.history.reset_coalescing()
    return ModeResult(consumed=True, switch_to=EditorMode.NORMAL.value, message="exit_insert")


def enter_search_mode(context: ModeContext, match: Optional[ResolutionMatch]) -> ModeResult:
    del context, match
    return ModeResult(consumed=True, switch_to=EditorMode.SEARCH.value, message="enter_search")


def undo(context: ModeContext, match: Optional[ResolutionMatch]) -> ModeResult:
    del match
    if not context.buffer.undo():
        return ModeResult(consumed=True, status="noop", message="history_empty")
    if context.normal:
        context.buffer.clamp_cursor(normal=True)
    return ModeResult(consumed=True, message="undo")


def redo(context: ModeContext, match: Optional[ResolutionMatch]) -> ModeResult:
    del match
    if not context.buffer.redo():
        return ModeResult(consumed=True, status="noop", message="history_empty")
    if context.normal:
        context.buffer.clamp_cursor(normal=True)
    return ModeResult(consumed=True, message="redo")


def begin_pending(context: ModeContext, match: Optional[ResolutionMatch]) -> ModeResult:
    """Arm the pending key named by the action's ``pending`` metadata."""

    if match is None:
        return ModeResult(consumed=True, status="noop")
    pending = PendingKey(str(match.action.metadata["pending"]))
    context.pending = pending
    return ModeResult(consumed=True, status="pending", message=pending.value)


__all__ = [
    "append_after_cursor",
    "append_at_line_end",
    "begin_pending",
    "enter_insert_mode",
    "enter_search_mode",
    "exit_to_normal_mode",
    "insert_at_first_non_blank",
    "redo",
    "undo",
]
