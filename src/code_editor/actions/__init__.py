"""Editing verbs invoked by keymap bindings."""

from .core import (
    append_after_cursor,
    append_at_line_end,
    begin_pending,
    enter_insert_mode,
    enter_search_mode,
    exit_to_normal_mode,
    insert_at_first_non_blank,
    redo,
    undo,
)
from .editing import insert_character, insert_newline
from .search import append_to_query, next_match, prev_match

__all__ = [
    "append_after_cursor",
    "append_at_line_end",
    "append_to_query",
    "begin_pending",
    "enter_insert_mode",
    "enter_search_mode",
    "exit_to_normal_mode",
    "insert_at_first_non_blank",
    "insert_character",
    "insert_newline",
    "next_match",
    "prev_match",
    "redo",
    "undo",
]
