"""Pure cursor motions over a :class:`Document`.

Every motion takes a cursor and returns the destination. ``normal`` selects
the rest-on-character clamp (``len - 1``) instead of the gap clamp (``len``).
"""

from __future__ import annotations

from .document import Document
from .state import Cursor

BLANKS = " \t"


def is_word_char(ch: str) -> bool:
    return ch.isalnum() or ch == "_"


def _is_punct(ch: str) -> bool:
    return not is_word_char(ch) and ch not in BLANKS


def move_left(document: Document, cursor: Cursor, *, normal: bool = False) -> Cursor:
    row, col = cursor
    if col > 0:
        return (row, col - 1)
    if not normal and row > 1:
        return (row - 1, document.line_length(row - 1))
    return (row, 0)


def move_right(document: Document, cursor: Cursor, *, normal: bool = False) -> Cursor:
    row, col = cursor
    if normal:
        return (row, min(col + 1, document.max_col(row, normal=True)))
    if col < document.line_length(row):
        return (row, col + 1)
    if row < document.line_count:
        return (row + 1, 0)
    return cursor


def move_vertical(
    document: Document, cursor: Cursor, delta: int, *, normal: bool = False
) -> Cursor:
    """Move ``delta`` rows, stopping at the document edges."""

    row, col = cursor
    target = max(1, min(document.line_count, row + delta))
    if target == row:
        return cursor
    return (target, document.clamp_col(target, col, normal=normal))


def move_up(document: Document, cursor: Cursor, *, normal: bool = False) -> Cursor:
    return move_vertical(document, cursor, -1, normal=normal)


def move_down(document: Document, cursor: Cursor, *, normal: bool = False) -> Cursor:
    return move_vertical(document, cursor, 1, normal=normal)


def line_start(document: Document, cursor: Cursor) -> Cursor:
    del document
    return (cursor[0], 0)


def line_end(document: Document, cursor: Cursor, *, normal: bool = False) -> Cursor:
    row = cursor[0]
    return (row, document.max_col(row, normal=normal))


def first_non_blank(
    document: Document, cursor: Cursor, *, normal: bool = False
) -> Cursor:
    row = cursor[0]
    return (row, min(document.leading_spaces(row), document.max_col(row, normal=normal)))


def first_line(document: Document, cursor: Cursor) -> Cursor:
    return (1, document.clamp_col(1, cursor[1], normal=True))


def last_line(document: Document, cursor: Cursor) -> Cursor:
    row = document.line_count
    return (row, document.clamp_col(row, cursor[1], normal=True))


def next_word_start(document: Document, cursor: Cursor) -> Cursor:
    """Skip the current word class and the blanks after it.

    Running off the end of a row lands on the first non-blank of the next one.
    The result is clamped for Normal mode.
    """

    row, col = cursor
    line = document.line(row)
    n = len(line)
    i = col
    if i < n:
        if is_word_char(line[i]):
            while i < n and is_word_char(line[i]):
                i += 1
        elif line[i] not in BLANKS:
            while i < n and _is_punct(line[i]):
                i += 1
        while i < n and line[i] in BLANKS:
            i += 1
    if i >= n and row < document.line_count:
        row += 1
        line = document.line(row)
        i = 0
        while i < len(line) and line[i] in BLANKS:
            i += 1
    return (row, document.clamp_col(row, i, normal=True))


def prev_word_start(document: Document, cursor: Cursor) -> Cursor:
    row, col = cursor
    if col <= 0:
        if row > 1:
            return (row - 1, document.max_col(row - 1, normal=True))
        return (row, 0)
    line = document.line(row)
    i = col - 1
    while i >= 0 and line[i] in BLANKS:
        i -= 1
    if i < 0:
        return (row, 0)
    if is_word_char(line[i]):
        while i > 0 and is_word_char(line[i - 1]):
            i -= 1
    else:
        while i > 0 and _is_punct(line[i - 1]):
            i -= 1
    return (row, i)


def word_end(document: Document, cursor: Cursor) -> Cursor:
    row, col = cursor
    line = document.line(row)
    n = len(line)
    i = col + 1
    if i >= n and row < document.line_count:
        row += 1
        line = document.line(row)
        n = len(line)
        i = 0
    while i < n and line[i] in BLANKS:
        i += 1
    if i < n:
        if is_word_char(line[i]):
            while i + 1 < n and is_word_char(line[i + 1]):
                i += 1
        else:
            while i + 1 < n and _is_punct(line[i + 1]):
                i += 1
    return (row, min(i, max(n - 1, 0)))


__all__ = [
    "first_line",
    "first_non_blank",
    "is_word_char",
    "last_line",
    "line_end",
    "line_start",
    "move_down",
    "move_left",
    "move_right",
    "move_up",
    "move_vertical",
    "next_word_start",
    "prev_word_start",
    "word_end",
]
