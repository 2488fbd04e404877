"""Search-mode and search-navigation actions."""

from __future__ import annotations

from typing import Optional

from code_editor.keymaps.resolver import ResolutionMatch
from code_editor.modes.base_mode import EditorMode, ModeContext, ModeResult


def append_to_query(context: ModeContext, ch: str) -> ModeResult:
    """Fallback for printable keys in Search mode; not bound to a token."""

    context.buffer.search_append(ch)
    context.bus.emit("search.update", context.buffer.search.query)
    return ModeResult(consumed=True, status="search", message="search_update")


def delete_from_query(context: ModeContext, match: Optional[ResolutionMatch]) -> ModeResult:
    del match
    if context.buffer.search_backspace():
        context.bus.emit("search.update", context.buffer.search.query)
    return ModeResult(consumed=True, status="search", message="search_update")


def cancel_search(context: ModeContext, match: Optional[ResolutionMatch]) -> ModeResult:
    del match
    context.buffer.search.clear()
    return ModeResult(consumed=True, switch_to=EditorMode.NORMAL.value, message="search_cancel")


def confirm_search(context: ModeContext, match: Optional[ResolutionMatch]) -> ModeResult:
    del match
    buffer = context.buffer
    buffer.jump_to_match(buffer.search.current())
    return ModeResult(consumed=True, switch_to=EditorMode.NORMAL.value, message="search_confirm")


def next_match(context: ModeContext, match: Optional[ResolutionMatch]) -> ModeResult:
    del match
    moved = context.buffer.jump_to_match(context.buffer.search.next())
    return ModeResult(consumed=True, status="motion" if moved else "noop", message="next_match")


def prev_match(context: ModeContext, match: Optional[ResolutionMatch]) -> ModeResult:
    del match
    moved = context.buffer.jump_to_match(context.buffer.search.prev())
    return ModeResult(consumed=True, status="motion" if moved else "noop", message="prev_match")


__all__ = [
    "append_to_query",
    "cancel_search",
    "confirm_search",
    "delete_from_query",
    "next_match",
    "prev_match",
]
