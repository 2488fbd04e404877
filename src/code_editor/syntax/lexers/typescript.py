"""TypeScript / JavaScript lexer."""

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
    scan_quoted,
)

KEYWORDS = frozenset(
    {
        "async", "await", "break", "case", "catch", "class", "const",
        "continue", "debugger", "default", "delete", "do", "else", "enum",
        "export", "extends", "finally", "for", "function", "if", "import",
        "in", "instanceof", "let", "new", "of", "return", "super", "switch",
        "throw", "try", "typeof", "var", "void", "while", "with", "yield",
        # TypeScript additions
        "abstract", "as", "declare", "from", "get", "implements", "interface",
        "is", "keyof", "module", "namespace", "override", "private",
        "protected", "public", "readonly", "require", "set", "static", "type",
    }
)
BOOLEANS = frozenset({"true", "false"})
BUILTINS = frozenset(
    {
        "undefined", "null", "NaN", "Infinity", "console", "this",
        "globalThis", "window", "document", "Promise", "Array", "Object",
        "Map", "Set", "RegExp", "Error", "TypeError", "RangeError", "JSON",
        "Math", "Date", "String", "Number", "Boolean", "Symbol", "BigInt",
        "string", "number", "boolean", "any", "unknown", "never", "object",
    }
)
OPERATOR_CHARS = frozenset("=+-*/<>!&|^~%?:")
PUNCTUATION_CHARS = frozenset("()[]{},.;")


def _ident_char(ch: str) -> bool:
    return is_ident_char(ch) or ch == "$"


def _scan_block_comment(line: Sequence[str], start: int) -> int:
    """Block comments never continue onto the next line."""

    n = len(line)
    i = start + 2
    while i + 1 < n:
        if line[i] == "*" and line[i + 1] == "/":
            return i + 2
        i += 1
    return n


class TypeScriptLexer:
    name = "typescript"

    def lex(self, line: Sequence[str]) -> list[Token]:
        tokens: list[Token] = []
        n = len(line)
        i = 0
        while i < n:
            c = line[i]
            if c in BLANKS:
                i += 1
                continue

            nxt = line[i + 1] if i + 1 < n else ""
            if c == "/" and nxt == "/":
                tokens.append(Token(i + 1, n, TokenKind.COMMENT))
                break

            if c == "/" and nxt == "*":
                j = _scan_block_comment(line, i)
                tokens.append(Token(i + 1, j, TokenKind.COMMENT))
                i = j
                continue

            if c in "`\"'":
                j = scan_quoted(line, i, c)
                tokens.append(Token(i + 1, j, TokenKind.STRING))
                i = j
                continue

            if c == "@":
                j = i + 1
                while j < n and is_ident_char(line[j]):
                    j += 1
                tokens.append(Token(i + 1, j, TokenKind.MACRO))
                i = j
                continue

            if c in DIGITS:
                j = scan_number(line, i)
                if j < n and line[j] == "n":
                    j += 1
                tokens.append(Token(i + 1, j, TokenKind.NUMBER))
                i = j
                continue

            if is_ident_start(c) or c == "$":
                j = i + 1
                while j < n and _ident_char(line[j]):
                    j += 1
                word = "".join(line[i:j])
                kind = classify_word(
                    word, keywords=KEYWORDS, booleans=BOOLEANS, builtins=BUILTINS
                )
                tokens.append(Token(i + 1, j, kind))
                i = j
                continue

            if c == "=" and nxt == ">":
                tokens.append(Token(i + 1, i + 2, TokenKind.OPERATOR))
                i += 2
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


__all__ = ["TypeScriptLexer", "KEYWORDS", "BOOLEANS", "BUILTINS"]
