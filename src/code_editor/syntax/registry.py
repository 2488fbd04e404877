"""Language tag -> lexer dispatch."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Sequence

from code_editor.runtime import telemetry

from .lexers import PythonLexer, ScriptLexer, ShellLexer, TypeScriptLexer
from .tokens import Lexer, Token

BUILTIN_ALIASES: tuple[tuple[Lexer, tuple[str, ...]], ...] = (
    (ScriptLexer(), ("julia", "jl", "script")),
    (PythonLexer(), ("python", "py")),
    (ShellLexer(), ("bash", "sh", "shell", "zsh", "console")),
    (TypeScriptLexer(), ("typescript", "ts", "javascript", "js", "tsx", "jsx")),
)


def normalize_language(tag: str) -> str:
    return str(tag).strip().lower()


class LexerConflictError(ValueError):
    """Raised when an alias is already claimed by another lexer."""

    def __init__(self, alias: str, existing: Lexer) -> None:
        super().__init__(f"Language alias '{alias}' already maps to '{existing.name}'")
        self.alias = alias
        self.existing = existing


@dataclass(slots=True)
class RegistryStats:
    lexer_count: int
    alias_count: int


class LexerRegistry:
    """Maps normalized language tags to lexers.

    Unknown tags resolve to ``None`` so callers can fall back to plain text.
    """

    def __init__(self, *, load_builtins: bool = True) -> None:
        self._by_alias: Dict[str, Lexer] = {}
        self.logger = telemetry.get_logger("code_editor.syntax")
        if load_builtins:
            for lexer, aliases in BUILTIN_ALIASES:
                self.register(lexer, aliases)

    def register(
        self, lexer: Lexer, aliases: Iterable[str], *, replace: bool = False
    ) -> Lexer:
        normalized = [normalize_language(alias) for alias in aliases]
        if not replace:
            for alias in normalized:
                existing = self._by_alias.get(alias)
                if existing is not None and existing is not lexer:
                    raise LexerConflictError(alias, existing)
        for alias in normalized:
            self._by_alias[alias] = lexer
        return lexer

    def get(self, language: Optional[str]) -> Optional[Lexer]:
        if language is None:
            return None
        return self._by_alias.get(normalize_language(language))

    def aliases(self, lexer_name: Optional[str] = None) -> tuple[str, ...]:
        return tuple(
            sorted(
                alias
                for alias, lexer in self._by_alias.items()
                if lexer_name is None or lexer.name == lexer_name
            )
        )

    def tokenize(self, language: Optional[str], line: Sequence[str]) -> Optional[list[Token]]:
        lexer = self.get(language)
        if lexer is None:
            self.logger.debug(f"no lexer for language {language!r}")
            return None
        return lexer.lex(line)

    def stats(self) -> RegistryStats:
        unique = {id(lexer) for lexer in self._by_alias.values()}
        return RegistryStats(lexer_count=len(unique), alias_count=len(self._by_alias))


default_registry = LexerRegistry()


def get_lexer(language: Optional[str]) -> Optional[Lexer]:
    return default_registry.get(language)


def tokenize(language: Optional[str], line: Sequence[str] | str) -> Optional[list[Token]]:
    """Tokenize one line in ``language``; ``None`` when the language is unknown."""

    return default_registry.tokenize(language, line)


__all__ = [
    "LexerRegistry",
    "LexerConflictError",
    "RegistryStats",
    "default_registry",
    "get_lexer",
    "normalize_language",
    "tokenize",
]
