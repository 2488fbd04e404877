"""Text-changing actions for Insert and Normal mode."""

from __future__ import annotations

from typing import Optional

from code_editor.keymaps.resolver import ResolutionMatch
from code_editor.modes.base_mode import EditorMode, ModeContext, ModeResult


def _done(message: str, changed: bool = True) -> ModeResult:
    return ModeResult(consumed=True, status="edit" if changed else "noop", message=message)


def insert_character(context: ModeContext, ch: str) -> ModeResult:
    """Fallback for printable keys in Insert mode; not bound to a token."""

    context.buffer.insert_char(ch)
    return _done("insert_char")


def insert_newline(context: ModeContext, match: Optional[ResolutionMatch]) -> ModeResult:
    del match
    context.buffer.insert_newline()
    return _done("newline")


def backspace(context: ModeContext, match: Optional[ResolutionMatch]) -> ModeResult:
    del match
    return _done("backspace", context.buffer.backspace())


def delete_forward(context: ModeContext, match: Optional[ResolutionMatch]) -> ModeResult:
    del match
    return _done("delete", context.buffer.delete_forward())


def indent(context: ModeContext, match: Optional[ResolutionMatch]) -> ModeResult:
    del match
    context.buffer.indent()
    return _done("indent")


def dedent(context: ModeContext, match: Optional[ResolutionMatch]) -> ModeResult:
    del match
    return _done("dedent", context.buffer.dedent())


def open_line_below(context: ModeContext, match: Optional[ResolutionMatch]) -> ModeResult:
    del match
    context.buffer.open_line(below=True)
    return ModeResult(consumed=True, switch_to=EditorMode.INSERT.value, message="open_below")


def open_line_above(context: ModeContext, match: Optional[ResolutionMatch]) -> ModeResult:
    del match
    context.buffer.open_line(below=False)
    return ModeResult(consumed=True, switch_to=EditorMode.INSERT.value, message="open_above")


def delete_char(context: ModeContext, match: Optional[ResolutionMatch]) -> ModeResult:
    del match
    return _done("delete_char", context.buffer.delete_char())


def delete_to_end(context: ModeContext, match: Optional[ResolutionMatch]) -> ModeResult:
    del match
    return _done("delete_to_end", context.buffer.delete_to_end())


def change_to_end(context: ModeContext, match: Optional[ResolutionMatch]) -> ModeResult:
    del match
    context.buffer.change_to_end()
    return ModeResult(consumed=True, switch_to=EditorMode.INSERT.value, message="change_to_end")


def join_lines(context: ModeContext, match: Optional[ResolutionMatch]) -> ModeResult:
    del match
    return _done("join_lines", context.buffer.join_lines())


def toggle_case(context: ModeContext, match: Optional[ResolutionMatch]) -> ModeResult:
    del match
    return _done("toggle_case", context.buffer.toggle_case())


def paste_after(context: ModeContext, match: Optional[ResolutionMatch]) -> ModeResult:
    del match
    return _done("paste_after", context.buffer.paste(after=True))


def paste_before(context: ModeContext, match: Optional[ResolutionMatch]) -> ModeResult:
    del match
    return _done("paste_before", context.buffer.paste(after=False))


def delete_line(context: ModeContext, match: Optional[ResolutionMatch]) -> ModeResult:
    del match
    context.buffer.delete_line()
    return _done("delete_line")


def yank_line(context: ModeContext, match: Optional[ResolutionMatch]) -> ModeResult:
    del match
    context.buffer.yank_line()
    context.bus.emit("yank", context.buffer.yank.lines)
    return ModeResult(consumed=True, status="yank", message="yank_line")


def change_line(context: ModeContext, match: Optional[ResolutionMatch]) -> ModeResult:
    del match
    context.buffer.change_line()
    return ModeResult(consumed=True, switch_to=EditorMode.INSERT.value, message="change_line")


def replace_char(context: ModeContext, match: Optional[ResolutionMatch]) -> ModeResult:
    """Replace the char under the cursor with the key that completed ``r``."""

    del match
    key = context.current_key
    if key is None or not key.is_char or key.text is None:
        return _done("replace_char", False)
    return _done("replace_char", context.buffer.replace_char(key.text))


__all__ = [
    "backspace",
    "change_line",
    "change_to_end",
    "dedent",
    "delete_char",
    "delete_forward",
    "delete_line",
    "delete_to_end",
    "indent",
    "insert_character",
    "insert_newline",
    "join_lines",
    "open_line_above",
    "open_line_below",
    "paste_after",
    "paste_before",
    "replace_char",
    "toggle_case",
    "yank_line",
]
