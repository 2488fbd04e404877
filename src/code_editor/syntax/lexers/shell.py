"""POSIX shell / bash lexer."""

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
    scan_quoted,
)

KEYWORDS = frozenset(
    {
        "if", "then", "else", "elif", "fi", "for", "do", "done", "while",
        "until", "case", "esac", "in", "function", "select", "return",
        "local", "export", "readonly", "declare", "typeset", "unset",
        "shift", "exit", "exec", "eval", "source", "trap",
    }
)
BUILTINS = frozenset(
    {
        "echo", "printf", "cd", "pwd", "test", "read", "set", "true", "false",
        "grep", "sed", "awk", "cat", "ls", "rm", "cp", "mv", "mkdir", "chmod",
        "chown", "find", "xargs", "sort", "uniq", "wc", "head", "tail", "cut",
        "tr", "tee", "diff", "tar", "curl", "wget", "git", "docker", "make",
        "pip", "npm", "julia", "python",
    }
)
SPECIAL_PARAMETERS = frozenset("?$!#@*0123456789")
OPERATOR_CHARS = frozenset("|&;><")
PUNCTUATION_CHARS = frozenset("()[]{}=")


def _scan_variable(line: Sequence[str], start: int) -> int:
    n = len(line)
    i = start + 1
    if i >= n:
        return i
    if line[i] == "{":
        while i < n and line[i] != "}":
            i += 1
        return i + 1 if i < n else n
    if is_ident_start(line[i]):
        while i < n and is_ident_char(line[i]):
            i += 1
        return i
    if line[i] in SPECIAL_PARAMETERS:
        return i + 1
    return i


class ShellLexer:
    name = "shell"

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

            if c == '"' or c == "'":
                j = scan_quoted(line, i, c, escapes=c == '"')
                tokens.append(Token(i + 1, j, TokenKind.STRING))
                i = j
                continue

            if c == "$":
                j = _scan_variable(line, i)
                tokens.append(Token(i + 1, j, TokenKind.SYMBOL))
                i = j
                continue

            if c in DIGITS:
                j = i
                while j < n and line[j] in DIGITS:
                    j += 1
                tokens.append(Token(i + 1, j, TokenKind.NUMBER))
                i = j
                continue

            if c == "-" and i + 1 < n and (line[i + 1].isalpha() or line[i + 1] == "-"):
                j = i + 1
                if line[j] == "-":
                    j += 1
                while j < n and (line[j].isalpha() or line[j] in DIGITS or line[j] in "-_"):
                    j += 1
                tokens.append(Token(i + 1, j, TokenKind.MACRO))
                i = j
                continue

            if is_ident_start(c):
                j = i + 1
                while j < n and (is_ident_char(line[j]) or line[j] == "-"):
                    j += 1
                word = "".join(line[i:j])
                kind = classify_word(
                    word, keywords=KEYWORDS, builtins=BUILTINS, capitalized_types=False
                )
                tokens.append(Token(i + 1, j, kind))
                i = j
                continue

            if c in OPERATOR_CHARS:
                j = i + 1
                if j < n and line[j] == c:
                    j += 1
                tokens.append(Token(i + 1, j, TokenKind.OPERATOR))
                i = j
                continue

            kind = TokenKind.PUNCTUATION if c in PUNCTUATION_CHARS else TokenKind.IDENTIFIER
            tokens.append(Token(i + 1, i + 1, kind))
            i += 1
        return tokens


__all__ = ["ShellLexer", "KEYWORDS", "BUILTINS"]
