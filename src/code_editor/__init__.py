"""UI-agnostic modal code editor core."""

from .config import EditorConfig
from .editor import CodeEditor
from .modes import EditorMode, KeyInput, PendingKey
from .syntax import Token, TokenKind, TokenStyle, style_for, tokenize

__all__ = [
    "CodeEditor",
    "EditorConfig",
    "EditorMode",
    "KeyInput",
    "PendingKey",
    "Token",
    "TokenKind",
    "TokenStyle",
    "style_for",
    "tokenize",
]

__version__ = "0.1.0"
