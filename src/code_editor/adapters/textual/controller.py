"""Minimal Textual adapter that forwards key names to a CodeEditor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

from code_editor.editor import CodeEditor
from code_editor.modes.base_mode import (
    BACKSPACE,
    BACKTAB,
    DELETE,
    DOWN,
    END,
    ENTER,
    ESC,
    HOME,
    LEFT,
    PAGEDOWN,
    PAGEUP,
    RIGHT,
    TAB,
    UP,
    KeyInput,
)

TEXTUAL_KEYS: Dict[str, str] = {
    "escape": ESC,
    "enter": ENTER,
    "backspace": BACKSPACE,
    "delete": DELETE,
    "tab": TAB,
    "shift+tab": BACKTAB,
    "left": LEFT,
    "right": RIGHT,
    "up": UP,
    "down": DOWN,
    "home": HOME,
    "end": END,
    "pageup": PAGEUP,
    "pagedown": PAGEDOWN,
}

# Bus events forwarded to the host.
BUS_EVENTS = ("search.start", "search.update", "search.end", "yank")


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


def translate_key(key: str, text: Optional[str] = None) -> Optional[KeyInput]:
    """Map a Textual key name (plus its printable text) to a ``KeyInput``."""

    name = key.strip().lower()
    named = TEXTUAL_KEYS.get(name)
    if named is not None:
        return KeyInput.named(named)
    if name.startswith("ctrl+") and len(name) == len("ctrl+") + 1:
        return KeyInput.ctrl(name[-1])
    if text is not None and len(text) == 1 and text.isprintable():
        return KeyInput.char(text)
    if len(key) == 1 and key.isprintable():
        return KeyInput.char(key)
    return None


@dataclass(frozen=True, slots=True)
class EditorView:
    """Read-only snapshot handed to the host after every key."""

    text: str
    cursor: Tuple[int, int]
    mode: str
    search_query: str
    match_count: int

    @classmethod
    def of(cls, editor: CodeEditor) -> "EditorView":
        return cls(
            text=editor.text,
            cursor=editor.cursor,
            mode=editor.mode.value,
            search_query=editor.search_query,
            match_count=len(editor.search_matches),
        )


@dataclass(slots=True)
class EditorHooks:
    """Callbacks invoked by the adapter to update host widgets."""

    update_buffer: Callable[[EditorView], None]
    update_status: Callable[[str], None] = _noop
    handle_event: Callable[[str, object], None] = _noop
    # Optional realtime log callback a host may use to surface debug lines
    log: Callable[[str], None] = _noop


class TextualKeyAdapter:
    """Bridges Textual key events to a :class:`CodeEditor`."""

    def __init__(self, editor: CodeEditor, hooks: EditorHooks) -> None:
        self.editor = editor
        self.hooks = hooks
        self._subscribe_events()
        self._refresh()

    def handle_textual_key(self, key: str, text: Optional[str] = None) -> bool:
        """Translate and dispatch one key; ``False`` when the editor ignores it."""

        event = translate_key(key, text)
        if event is None:
            self.hooks.log(f"key -> {key!r} untranslated")
            return False
        self.hooks.log(f"key -> {event.token!r} mode={self.editor.mode.value}")
        handled = self.editor.handle_key(event)
        self.hooks.log(f"result <- handled={handled} cursor={self.editor.cursor}")
        if handled:
            self.hooks.update_status(self._status())
            self._refresh()
        return handled

    def _subscribe_events(self) -> None:
        for event in BUS_EVENTS:
            self.editor.bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self.hooks.log(f"event -> {name} payload={payload!r}")
        self.hooks.handle_event(name, payload)

    def _status(self) -> str:
        mode = self.editor.mode.value.upper()
        pending = self.editor.pending_key
        if pending:
            return f"{mode} {pending}"
        if self.editor.mode.value == "search":
            return f"/{self.editor.search_query}"
        return mode

    def _refresh(self) -> None:
        self.hooks.update_buffer(EditorView.of(self.editor))


__all__ = [
    "BUS_EVENTS",
    "EditorHooks",
    "EditorView",
    "TEXTUAL_KEYS",
    "TextualKeyAdapter",
    "translate_key",
]
