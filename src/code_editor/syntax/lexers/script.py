"""Lexer for the editor's native script dialect (Julia flavoured)."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Sequence

from ..tokens import (
    BLANKS,
    DIGITS,
    HEX_DIGITS,
    Token,
    TokenKind,
    classify_word,
    is_ident_start,
)

KEYWORDS = frozenset(
    {
        "function", "end", "if", "else", "elseif", "for", "while", "do",
        "begin", "let", "try", "catch", "finally", "return", "break",
        "continue", "struct", "mutable", "abstract", "primitive", "type",
        "module", "baremodule", "using", "import", "export", "macro",
        "quote", "in", "isa", "where", "const", "local", "global",
        "outer", "new",
    }
)
BOOLEANS = frozenset({"true", "false"})
BUILTINS = frozenset({"nothing", "missing", "Inf", "NaN", "pi"})

OPERATOR_CHARS = frozenset("=+-*/<>!&|^~%\\÷")
PUNCTUATION_CHARS = frozenset("()[]{}.,;:")

# first char -> chars that may follow it to form one operator token
TWO_CHAR_OPERATORS: Mapping[str, frozenset[str]] = MappingProxyType(
    {
        "=": frozenset("=>"),
        "!": frozenset("="),
        "<": frozenset("=:"),
        ">": frozenset("=>"),
        "-": frozenset(">"),
        "|": frozenset(">|"),
        "&": frozenset("&"),
        ":": frozenset(":"),
        "+": frozenset("="),
        "*": frozenset("="),
        "/": frozenset("="),
        "^": frozenset("="),
        "%": frozenset("="),
        "÷": frozenset("="),
    }
)


def _word_char(ch: str) -> bool:
    return ch.isalpha() or ch in DIGITS or ch == "_" or ch == "!"


def _scan_number(line: Sequence[str], start: int) -> int:
    n = len(line)
    i = start
    if line[i] == "0" and i + 1 < n and line[i + 1] in "xob":
        i += 2
        while i < n and line[i] in HEX_DIGITS:
            i += 1
        return i
    saw_dot = line[i] == "."
    i += 1
    while i < n:
        ch = line[i]
        if ch in DIGITS or ch == "_":
            i += 1
        elif ch == "." and not saw_dot:
            saw_dot = True
            i += 1
        elif ch in "eE" and i + 1 < n:
            i += 1
            if line[i] in "+-":
                i += 1
        else:
            break
    return i


class ScriptLexer:
    """Single-pass scanner for the built-in scripting language."""

    name = "script"

    def lex(self, line: Sequence[str]) -> list[Token]:
        tokens: list[Token] = []
        n = len(line)
        i = 0
        while i < n:
            c = line[i]

            if c in BLANKS:
                i += 1
                continue

            if c == "#":
                tokens.append(Token(i + 1, n, TokenKind.COMMENT))
                break

            if c == '"':
                j = i + 1
                while j < n:
                    if line[j] == "\\" and j + 1 < n:
                        j += 2
                    elif line[j] == '"':
                        break
                    else:
                        j += 1
                stop = min(j + 1, n)
                tokens.append(Token(i + 1, stop, TokenKind.STRING))
                i = stop
                continue

            if c == "'":
                if i + 2 < n and line[i + 2] == "'":
                    tokens.append(Token(i + 1, i + 3, TokenKind.STRING))
                    i += 3
                elif i + 3 < n and line[i + 1] == "\\" and line[i + 3] == "'":
                    tokens.append(Token(i + 1, i + 4, TokenKind.STRING))
                    i += 4
                else:
                    tokens.append(Token(i + 1, i + 1, TokenKind.OPERATOR))
                    i += 1
                continue

            if c == "@" and i + 1 < n and is_ident_start(line[i + 1]):
                j = i + 1
                while j < n and _word_char(line[j]):
                    j += 1
                tokens.append(Token(i + 1, j, TokenKind.MACRO))
                i = j
                continue

            if c == ":" and i + 1 < n and line[i + 1].isalpha():
                if i > 0 and line[i - 1] == ":":
                    # second colon of a `::Type` annotation
                    tokens.append(Token(i + 1, i + 1, TokenKind.PUNCTUATION))
                    i += 1
                    continue
                j = i + 1
                while j < n and (line[j].isalpha() or line[j] in DIGITS or line[j] == "_"):
                    j += 1
                tokens.append(Token(i + 1, j, TokenKind.SYMBOL))
                i = j
                continue

            if c in DIGITS or (c == "." and i + 1 < n and line[i + 1] in DIGITS):
                j = _scan_number(line, i)
                tokens.append(Token(i + 1, j, TokenKind.NUMBER))
                i = j
                continue

            if is_ident_start(c):
                j = i + 1
                while j < n and _word_char(line[j]):
                    j += 1
                word = "".join(line[i:j])
                kind = classify_word(
                    word, keywords=KEYWORDS, booleans=BOOLEANS, builtins=BUILTINS
                )
                tokens.append(Token(i + 1, j, kind))
                i = j
                continue

            if c in OPERATOR_CHARS:
                stop = i
                if i + 1 < n and line[i + 1] in TWO_CHAR_OPERATORS.get(c, ()):
                    stop = i + 1
                tokens.append(Token(i + 1, stop + 1, TokenKind.OPERATOR))
                i = stop + 1
                continue

            if c in PUNCTUATION_CHARS:
                tokens.append(Token(i + 1, i + 1, TokenKind.PUNCTUATION))
                i += 1
                continue

            tokens.append(Token(i + 1, i + 1, TokenKind.IDENTIFIER))
            i += 1
        return tokens


__all__ = ["ScriptLexer", "KEYWORDS", "BOOLEANS", "BUILTINS", "TWO_CHAR_OPERATORS"]
