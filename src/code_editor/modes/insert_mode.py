"""Insert mode: bound editing keys plus literal character input."""

from __future__ import annotations

from code_editor.actions.editing import insert_character
from code_editor.runtime import telemetry

from .base_mode import EditorMode, KeyInput, Mode, ModeContext, ModeResult
from .keymap_helpers import dispatch_binding


class InsertMode(Mode):
    name = EditorMode.INSERT.value

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger("code_editor.modes.insert")

    def on_exit(self, next_mode: str | None) -> None:
        del next_mode
        self.context.buffer.history.reset_coalescing()

    def handle_key(self, key: KeyInput) -> ModeResult:
        self.context.current_key = key
        result = dispatch_binding(self.context, self.name)
        if result is not None:
            return result
        if key.is_char and key.text is not None:
            return insert_character(self.context, key.text)
        self.logger.debug(f"unhandled key {key.token!r}")
        return ModeResult(consumed=False)
