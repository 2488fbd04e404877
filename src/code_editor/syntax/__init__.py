"""Lexers, language dispatch, token styling and the token cache."""

from .cache import TokenCache
from .indent import IndentRule, leading_spaces, rule_for
from .registry import (
    LexerConflictError,
    LexerRegistry,
    default_registry,
    get_lexer,
    normalize_language,
    tokenize,
)
from .styles import TokenStyle, style_for
from .tokens import Lexer, Token, TokenKind

__all__ = [
    "IndentRule",
    "Lexer",
    "LexerConflictError",
    "LexerRegistry",
    "Token",
    "TokenCache",
    "TokenKind",
    "TokenStyle",
    "default_registry",
    "get_lexer",
    "leading_spaces",
    "normalize_language",
    "rule_for",
    "style_for",
    "tokenize",
]
