"""Base classes and shared types for editor modes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Optional, Tuple

from code_editor.buffer import EditBuffer


class EditorMode(str, Enum):
    INSERT = "insert"
    NORMAL = "normal"
    SEARCH = "search"


class PendingKey(str, Enum):
    """First half of a two-key Normal-mode command."""

    NONE = ""
    DELETE = "d"
    YANK = "y"
    CHANGE = "c"
    REPLACE = "r"
    GOTO = "g"


ESC = "ESC"
ENTER = "ENTER"
BACKSPACE = "BACKSPACE"
DELETE = "DELETE"
TAB = "TAB"
BACKTAB = "BACKTAB"
LEFT = "LEFT"
RIGHT = "RIGHT"
UP = "UP"
DOWN = "DOWN"
HOME = "HOME"
END = "END"
PAGEUP = "PAGEUP"
PAGEDOWN = "PAGEDOWN"

NAMED_KEYS = frozenset(
    {
        ESC, ENTER, BACKSPACE, DELETE, TAB, BACKTAB, LEFT, RIGHT, UP, DOWN,
        HOME, END, PAGEUP, PAGEDOWN,
    }
)


def _normalize_modifiers(modifiers: Tuple[str, ...]) -> Tuple[str, ...]:
    values = (m.strip().lower() for m in modifiers if m.strip())
    return tuple(sorted(dict.fromkeys(values)))


@dataclass(slots=True)
class KeyInput:
    """Normalized key event passed to modes.

    Character keys carry the character in both ``key`` and ``text``; named
    keys use the upper-case names in :data:`NAMED_KEYS`.
    """

    key: str
    modifiers: Tuple[str, ...] = ()
    text: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")
        self.modifiers = _normalize_modifiers(tuple(self.modifiers))

    @classmethod
    def char(cls, ch: str) -> "KeyInput":
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        return cls(key=ch, text=ch)

    @classmethod
    def named(cls, name: str) -> "KeyInput":
        key = name.upper()
        if key not in NAMED_KEYS:
            raise ValueError(f"Unknown named key '{name}'")
        return cls(key=key)

    @classmethod
    def ctrl(cls, ch: str) -> "KeyInput":
        return cls(key=ch.lower(), modifiers=("ctrl",))

    @property
    def is_char(self) -> bool:
        return not self.modifiers and self.text is not None and len(self.text) == 1

    @property
    def token(self) -> str:
        if self.modifiers:
            return "+".join((*self.modifiers, self.key))
        return self.key


@dataclass(slots=True)
class ModeResult:
    """Result returned from ``Mode.handle_key``."""

    consumed: bool
    switch_to: Optional[str] = None
    status: str = "ok"
    message: Optional[str] = None


class ModeBus:
    """Minimal event bus letting modes exchange structured signals."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


@dataclass(slots=True)
class ModeContext:
    """Shared services every mode and action can access."""

    buffer: EditBuffer
    bus: ModeBus = field(default_factory=ModeBus)
    mode: str = EditorMode.INSERT.value
    pending: PendingKey = PendingKey.NONE
    current_key: Optional[KeyInput] = None
    extras: Dict[str, object] = field(default_factory=dict)

    @property
    def normal(self) -> bool:
        return self.mode == EditorMode.NORMAL.value


class Mode:
    """Base class all concrete editor modes inherit from."""

    name: str = "mode"

    def __init__(self, context: ModeContext) -> None:
        self.context = context

    def on_enter(self, previous: Optional[str]) -> None:
        del previous

    def on_exit(self, next_mode: Optional[str]) -> None:
        del next_mode

    def handle_key(self, key: KeyInput) -> ModeResult:  # pragma: no cover - abstract override
        raise NotImplementedError


__all__ = [
    "EditorMode",
    "PendingKey",
    "KeyInput",
    "Mode",
    "ModeBus",
    "ModeContext",
    "ModeResult",
    "NAMED_KEYS",
]
