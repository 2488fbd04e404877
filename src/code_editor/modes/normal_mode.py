"""Normal mode: single-key commands and the two-key pending grammar."""

from __future__ import annotations

from code_editor.runtime import telemetry

from .base_mode import EditorMode, KeyInput, Mode, ModeContext, ModeResult, PendingKey
from .keymap_helpers import dispatch_binding, run_action
from .pending import transition


class NormalMode(Mode):
    name = EditorMode.NORMAL.value

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger("code_editor.modes.normal")

    def on_enter(self, previous: str | None) -> None:
        del previous
        self.context.buffer.clamp_cursor(normal=True)

    def on_exit(self, next_mode: str | None) -> None:
        del next_mode
        self.context.pending = PendingKey.NONE

    def handle_key(self, key: KeyInput) -> ModeResult:
        self.context.current_key = key
        pending = self.context.pending
        if pending is not PendingKey.NONE:
            self.context.pending = PendingKey.NONE
            return self._complete_pending(pending, key)

        result = dispatch_binding(self.context, self.name)
        if result is not None:
            return result
        return ModeResult(consumed=False)

    def _complete_pending(self, pending: PendingKey, key: KeyInput) -> ModeResult:
        action_id = transition(pending, key)
        if action_id is None:
            self.logger.debug(f"pending '{pending.value}' cancelled by {key.token!r}")
            return ModeResult(consumed=True, status="cancelled", message=pending.value)
        return run_action(self.context, action_id)
