"""Editor modes, the pending-key grammar, and dispatch logic."""

from .base_mode import (
    EditorMode,
    KeyInput,
    Mode,
    ModeBus,
    ModeContext,
    ModeResult,
    NAMED_KEYS,
    PendingKey,
)
from .pending import ANY_CHAR, PENDING_TRANSITIONS, transition
from .insert_mode import InsertMode
from .normal_mode import NormalMode
from .search_mode import SearchMode

__all__ = [
    "ANY_CHAR",
    "EditorMode",
    "KeyInput",
    "Mode",
    "ModeBus",
    "ModeContext",
    "ModeResult",
    "NAMED_KEYS",
    "PENDING_TRANSITIONS",
    "PendingKey",
    "InsertMode",
    "NormalMode",
    "SearchMode",
    "transition",
]
