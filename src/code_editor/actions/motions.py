"""Cursor motion actions.

The same verb serves Insert and Normal bindings; the active mode picks the
column clamp, and only Insert-mode Left/Right wrap across rows.
"""

from __future__ import annotations

from typing import Callable, Optional

from code_editor.buffer import motions
from code_editor.buffer.document import Document
from code_editor.buffer.state import Cursor
from code_editor.keymaps.resolver import ResolutionMatch
from code_editor.modes.base_mode import ModeContext, ModeResult

Motion = Callable[[Document, Cursor], Cursor]


def _apply(context: ModeContext, motion: Motion, label: str) -> ModeResult:
    buffer = context.buffer
    buffer.move_cursor(motion(buffer.document, buffer.cursor))
    return ModeResult(consumed=True, status="motion", message=label)


def cursor_left(context: ModeContext, match: Optional[ResolutionMatch]) -> ModeResult:
    del match
    normal = context.normal
    return _apply(context, lambda doc, cur: motions.move_left(doc, cur, normal=normal), "left")


def cursor_right(context: ModeContext, match: Optional[ResolutionMatch]) -> ModeResult:
    del match
    normal = context.normal
    return _apply(context, lambda doc, cur: motions.move_right(doc, cur, normal=normal), "right")


def cursor_up(context: ModeContext, match: Optional[ResolutionMatch]) -> ModeResult:
    del match
    normal = context.normal
    return _apply(context, lambda doc, cur: motions.move_up(doc, cur, normal=normal), "up")


def cursor_down(context: ModeContext, match: Optional[ResolutionMatch]) -> ModeResult:
    del match
    normal = context.normal
    return _apply(context, lambda doc, cur: motions.move_down(doc, cur, normal=normal), "down")


def page_up(context: ModeContext, match: Optional[ResolutionMatch]) -> ModeResult:
    del match
    rows = context.buffer.page_size
    return _apply(
        context,
        lambda doc, cur: motions.move_vertical(doc, cur, -rows, normal=context.normal),
        "page_up",
    )


def page_down(context: ModeContext, match: Optional[ResolutionMatch]) -> ModeResult:
    del match
    rows = context.buffer.page_size
    return _apply(
        context,
        lambda doc, cur: motions.move_vertical(doc, cur, rows, normal=context.normal),
        "page_down",
    )


def line_start(context: ModeContext, match: Optional[ResolutionMatch]) -> ModeResult:
    del match
    return _apply(context, motions.line_start, "line_start")


def line_end(context: ModeContext, match: Optional[ResolutionMatch]) -> ModeResult:
    del match
    normal = context.normal
    return _apply(context, lambda doc, cur: motions.line_end(doc, cur, normal=normal), "line_end")


def first_non_blank(context: ModeContext, match: Optional[ResolutionMatch]) -> ModeResult:
    del match
    return _apply(
        context,
        lambda doc, cur: motions.first_non_blank(doc, cur, normal=True),
        "first_non_blank",
    )


def first_line(context: ModeContext, match: Optional[ResolutionMatch]) -> ModeResult:
    del match
    return _apply(context, motions.first_line, "first_line")


def last_line(context: ModeContext, match: Optional[ResolutionMatch]) -> ModeResult:
    del match
    return _apply(context, motions.last_line, "last_line")


def word_forward(context: ModeContext, match: Optional[ResolutionMatch]) -> ModeResult:
    del match
    return _apply(context, motions.next_word_start, "word_forward")


def word_backward(context: ModeContext, match: Optional[ResolutionMatch]) -> ModeResult:
    del match
    return _apply(context, motions.prev_word_start, "word_backward")


def word_end(context: ModeContext, match: Optional[ResolutionMatch]) -> ModeResult:
    del match
    return _apply(context, motions.word_end, "word_end")


__all__ = [
    "cursor_down",
    "cursor_left",
    "cursor_right",
    "cursor_up",
    "first_line",
    "first_non_blank",
    "last_line",
    "line_end",
    "line_start",
    "page_down",
    "page_up",
    "word_backward",
    "word_end",
    "word_forward",
]
