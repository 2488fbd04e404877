"""Python lexer."""

from __future__ import annotations

from typing import Sequence

from ..tokens import (
    BLANKS,
    DIGITS,
    Token,
    TokenKind,
    classify_word,
    is_ident_char,
    is_ident_start,
    scan_number,
)

KEYWORDS = frozenset(
    {
        "and", "as", "assert", "async", "await", "break", "class", "continue",
        "def", "del", "elif", "else", "except", "finally", "for", "from",
        "global", "if", "import", "in", "is", "lambda", "nonlocal", "not",
        "or", "pass", "raise", "return", "try", "while", "with", "yield",
    }
)
BOOLEANS = frozenset({"True", "False"})
BUILTINS = frozenset(
    {
        "None", "self", "cls", "print", "len", "range", "type", "int", "str",
        "float", "list", "dict", "set", "tuple", "isinstance", "super",
        "enumerate", "zip", "map", "filter", "sorted", "open", "input", "any",
        "all", "abs", "min", "max", "sum", "Exception", "ValueError",
        "TypeError", "KeyError", "IndexError", "RuntimeError", "StopIteration",
        "AttributeError", "ImportError", "OSError", "FileNotFoundError",
        "NotImplementedError",
    }
)
OPERATOR_CHARS = frozenset("=+-*/<>!&|^~%@:")
PUNCTUATION_CHARS = frozenset("()[]{},.;")


def _scan_string(line: Sequence[str], start: int) -> int:
    n = len(line)
    quote = line[start]
    if start + 2 < n and line[start + 1] == quote and line[start + 2] == quote:
        i = start + 3
        while i < n:
            if line[i] == quote and i + 2 < n and line[i + 1] == quote and line[i + 2] == quote:
                return i + 3
            if line[i] == "\\" and i + 1 < n:
                i += 1
            i += 1
        return n
    i = start + 1
    while i < n and line[i] != quote:
        if line[i] == "\\" and i + 1 < n:
            i += 1
        i += 1
    return i + 1 if i < n else n


class PythonLexer:
    name = "python"

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

            # `@` starts a decorator only at line start or after a blank, so
            # `a@b` stays an operator.
            if c == "@" and (i == 0 or line[i - 1] in BLANKS):
                j = i + 1
                while j < n and (is_ident_char(line[j]) or line[j] == "."):
                    j += 1
                tokens.append(Token(i + 1, j, TokenKind.MACRO))
                i = j
                continue

            if c in "\"'":
                j = _scan_string(line, i)
                tokens.append(Token(i + 1, j, TokenKind.STRING))
                i = j
                continue

            if c in DIGITS:
                j = scan_number(line, i)
                tokens.append(Token(i + 1, j, TokenKind.NUMBER))
                i = j
                continue

            if is_ident_start(c):
                j = i + 1
                while j < n and is_ident_char(line[j]):
                    j += 1
                word = "".join(line[i:j])
                kind = classify_word(
                    word, keywords=KEYWORDS, booleans=BOOLEANS, builtins=BUILTINS
                )
                tokens.append(Token(i + 1, j, kind))
                i = j
                continue

            if c in OPERATOR_CHARS:
                kind = TokenKind.OPERATOR
            elif c in PUNCTUATION_CHARS:
                kind = TokenKind.PUNCTUATION
            else:
                kind = TokenKind.IDENTIFIER
            tokens.append(Token(i + 1, i + 1, kind))
            i += 1
        return tokens


__all__ = ["PythonLexer", "KEYWORDS", "BOOLEANS", "BUILTINS"]
