"""Token taxonomy shared by every lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, Sequence


class TokenKind(str, Enum):
    """Closed set of highlight classes a lexer may emit."""

    KEYWORD = "keyword"
    TYPE = "type"
    NUMBER = "number"
    STRING = "string"
    COMMENT = "comment"
    OPERATOR = "operator"
    PUNCTUATION = "punctuation"
    MACRO = "macro"
    SYMBOL = "symbol"
    BOOLEAN = "boolean"
    BUILTIN = "builtin"
    IDENTIFIER = "identifier"


@dataclass(frozen=True, slots=True)
class Token:
    """Classified span of one line.

    ``start`` and ``stop`` are 1-based and inclusive, so ``line[start - 1:stop]``
    is the token text.
    """

    start: int
    stop: int
    kind: TokenKind

    def text(self, line: Sequence[str]) -> str:
        return "".join(line[self.start - 1 : self.stop])


class Lexer(Protocol):
    """Anything that turns one line of characters into tokens."""

    name: str

    def lex(self, line: Sequence[str]) -> list[Token]:
        ...


BLANKS = frozenset(" \t")
DIGITS = frozenset("0123456789")
HEX_DIGITS = frozenset("0123456789abcdefABCDEF_")


def is_ident_start(ch: str) -> bool:
    return ch.isalpha() or ch == "_"


def is_ident_char(ch: str) -> bool:
    return ch.isalpha() or ch in DIGITS or ch == "_"


def classify_word(
    word: str,
    *,
    keywords: frozenset[str],
    booleans: frozenset[str] = frozenset(),
    builtins: frozenset[str] = frozenset(),
    capitalized_types: bool = True,
) -> TokenKind:
    if word in keywords:
        return TokenKind.KEYWORD
    if word in booleans:
        return TokenKind.BOOLEAN
    if word in builtins:
        return TokenKind.BUILTIN
    if capitalized_types and word[:1].isupper():
        return TokenKind.TYPE
    return TokenKind.IDENTIFIER


def scan_quoted(line: Sequence[str], start: int, quote: str, *, escapes: bool = True) -> int:
    """Return the 0-based index just past a quoted run opened at ``start``.

    An unterminated string runs to the end of the line.
    """

    n = len(line)
    i = start + 1
    while i < n and line[i] != quote:
        if escapes and line[i] == "\\" and i + 1 < n:
            i += 1
        i += 1
    if i < n:
        i += 1
    return i


def scan_number(line: Sequence[str], start: int) -> int:
    """Scan a prefixed (``0x``/``0o``/``0b``) or decimal literal.

    Decimal literals may carry one fractional part and an exponent. Returns the
    0-based index just past the literal.
    """

    n = len(line)
    i = start
    if line[i] == "0" and i + 1 < n and line[i + 1] in "xXoObB":
        i += 2
        while i < n and line[i] in HEX_DIGITS:
            i += 1
        return i
    while i < n and (line[i] in DIGITS or line[i] == "_"):
        i += 1
    if i < n and line[i] == ".":
        i += 1
        while i < n and (line[i] in DIGITS or line[i] == "_"):
            i += 1
    if i < n and line[i] in "eE":
        i += 1
        if i < n and line[i] in "+-":
            i += 1
        while i < n and line[i] in DIGITS:
            i += 1
    return i


__all__ = [
    "TokenKind",
    "Token",
    "Lexer",
    "BLANKS",
    "DIGITS",
    "is_ident_start",
    "is_ident_char",
    "classify_word",
    "scan_quoted",
    "scan_number",
]
