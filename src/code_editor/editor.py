"""The modal code editor component a host drives with key events."""

from __future__ import annotations

from typing import Any, List, Optional, Tuple

from code_editor.buffer import EditBuffer, ensure_cursor
from code_editor.buffer.search import Match
from code_editor.buffer.state import Cursor
from code_editor.config import EditorConfig
from code_editor.keymaps import KeymapRegistry
from code_editor.modes import (
    EditorMode,
    InsertMode,
    KeyInput,
    ModeBus,
    ModeContext,
    NormalMode,
    PendingKey,
    SearchMode,
)
from code_editor.modes.mode_manager import ModeManager
from code_editor.runtime import telemetry
from code_editor.syntax import Token


class CodeEditor:
    """In-memory modal editor: ``(state, key) -> (new state, handled?)``.

    The host forwards key events to :meth:`handle_key` while the component has
    focus and reads the accessors below to render. Normal key handling never
    raises; a key the editor does not use returns ``False``.
    """

    def __init__(
        self,
        text: str = "",
        *,
        config: Optional[EditorConfig] = None,
        focused: bool = True,
        keymap_registry: Optional[KeymapRegistry] = None,
        name: str = "default",
        **overrides: Any,
    ) -> None:
        config = config or EditorConfig()
        if overrides:
            config = config.with_overrides(**overrides)
        self.config = config
        self.focused = focused
        self.logger = telemetry.get_logger("code_editor.editor")
        self.buffer = EditBuffer(
            text,
            name=name,
            language=config.language,
            tab_width=config.tab_width,
            page_size=config.page_size,
            history_limit=config.history_limit,
        )
        self.bus = ModeBus()
        self.context = ModeContext(buffer=self.buffer, bus=self.bus)
        self.manager = ModeManager(self.context, keymap_registry=keymap_registry)
        for mode_cls in (InsertMode, NormalMode, SearchMode):
            self.manager.register_mode(mode_cls)
        self.manager.switch_mode(config.initial_mode.value)

    # -- input ---------------------------------------------------------------

    def handle_key(self, event: KeyInput) -> bool:
        if not self.focused:
            return False
        result = self.manager.handle_key(event)
        return result.consumed

    # -- document ------------------------------------------------------------

    @property
    def text(self) -> str:
        return self.buffer.document.text

    @property
    def lines(self) -> Tuple[str, ...]:
        return tuple("".join(line) for line in self.buffer.document.lines)

    def line(self, row: int) -> str:
        return self.buffer.document.line_text(row)

    @property
    def line_count(self) -> int:
        return self.buffer.document.line_count

    def set_text(self, text: str) -> None:
        """Replace the whole document; history and search start over."""

        self.buffer.set_text(text)
        if self.context.normal:
            self.buffer.clamp_cursor(normal=True)

    def clear(self) -> None:
        self.buffer.clear()

    # -- cursor and mode -----------------------------------------------------

    @property
    def cursor(self) -> Cursor:
        return self.buffer.cursor

    def set_cursor(self, row: int, col: int) -> None:
        """Move the cursor; raises ``BufferValidationError`` when out of range."""

        ensure_cursor(self.buffer.document, (row, col), normal=self.context.normal)
        self.buffer.move_cursor((row, col))

    @property
    def mode(self) -> EditorMode:
        return EditorMode(self.context.mode)

    @property
    def pending_key(self) -> Optional[str]:
        pending = self.context.pending
        if pending is PendingKey.NONE:
            return None
        return pending.value

    # -- syntax --------------------------------------------------------------

    @property
    def language(self) -> Optional[str]:
        return self.buffer.language

    def set_language(self, language: Optional[str]) -> None:
        self.buffer.set_language(language)
        if self.buffer.tokens.lexer is None:
            self.logger.debug(f"no lexer for language {language!r}; tokens stay empty")

    def tokens(self, row: int) -> List[Token]:
        self.buffer.refresh_tokens()
        return list(self.buffer.tokens.tokens(row))

    # -- search --------------------------------------------------------------

    @property
    def search_query(self) -> str:
        return self.buffer.search.query

    @property
    def search_matches(self) -> Tuple[Match, ...]:
        return tuple(self.buffer.search.matches)

    @property
    def search_index(self) -> int:
        return self.buffer.search.index

    def in_search_match(self, row: int, col: int) -> bool:
        return self.buffer.search.in_match(row, col)

    # -- yank and history ----------------------------------------------------

    @property
    def yank_buffer(self) -> Tuple[str, ...]:
        return self.buffer.yank.lines

    @property
    def yank_linewise(self) -> bool:
        return self.buffer.yank.linewise

    @property
    def can_undo(self) -> bool:
        return self.buffer.history.can_undo()

    @property
    def can_redo(self) -> bool:
        return self.buffer.history.can_redo()


__all__ = ["CodeEditor"]
