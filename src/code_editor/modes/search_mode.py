"""Search mode: builds the query and recomputes matches on every key."""

from __future__ import annotations

from code_editor.actions.search import append_to_query
from code_editor.runtime import telemetry

from .base_mode import EditorMode, KeyInput, Mode, ModeContext, ModeResult
from .keymap_helpers import dispatch_binding, update_flag


class SearchMode(Mode):
    name = EditorMode.SEARCH.value

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger("code_editor.modes.search")

    def on_enter(self, previous: str | None) -> None:
        del previous
        self.context.buffer.search.reset()
        update_flag(self.context, "search_active", True)
        self.context.bus.emit("search.start", None)

    def on_exit(self, next_mode: str | None) -> None:
        del next_mode
        update_flag(self.context, "search_active", False)
        self.context.bus.emit("search.end", self.context.buffer.search.query)

    def handle_key(self, key: KeyInput) -> ModeResult:
        self.context.current_key = key
        result = dispatch_binding(self.context, self.name)
        if result is not None:
            return result
        if key.is_char and key.text is not None:
            return append_to_query(self.context, key.text)
        self.logger.debug(f"unhandled key {key.token!r}")
        return ModeResult(consumed=False)
