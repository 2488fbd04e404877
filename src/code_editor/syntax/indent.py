"""Per-language auto-indent and auto-dedent rules."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Sequence

from .registry import get_lexer


@dataclass(frozen=True, slots=True)
class IndentRule:
    """When a line opens a block and which lone words close one.

    ``openers`` match the first word of the stripped line. ``trailing`` match
    its end; a word trailer must stand alone or follow a blank or ``;``.
    """

    openers: frozenset[str] = frozenset()
    trailing: tuple[str, ...] = ()
    dedent_words: frozenset[str] = frozenset()

    def opens_block(self, line: Sequence[str]) -> bool:
        stripped = "".join(line).strip()
        if not stripped:
            return False
        if any(_ends_with(stripped, trailer) for trailer in self.trailing):
            return True
        return stripped.split()[0] in self.openers

    def closes_block(self, line: Sequence[str]) -> bool:
        return "".join(line).strip() in self.dedent_words


def _ends_with(stripped: str, trailer: str) -> bool:
    if not stripped.endswith(trailer):
        return False
    if not trailer[0].isalnum():
        return True
    head = stripped[: -len(trailer)]
    return not head or head[-1] in " \t;"


INDENT_RULES: Mapping[str, IndentRule] = MappingProxyType(
    {
        "script": IndentRule(
            openers=frozenset(
                {
                    "function", "if", "for", "while", "do", "begin", "let",
                    "try", "struct", "module", "macro", "else", "elseif",
                    "catch", "finally", "quote", "baremodule", "mutable",
                    "abstract",
                }
            ),
            trailing=(" do",),
            dedent_words=frozenset({"end", "else", "elseif", "catch", "finally"}),
        ),
        "python": IndentRule(trailing=(":",)),
        "shell": IndentRule(
            trailing=("then", "do", "{"),
            dedent_words=frozenset({"fi", "done", "esac", "else", "}"}),
        ),
        "typescript": IndentRule(
            trailing=("{", "(", "["),
            dedent_words=frozenset({"}", ")", "]"}),
        ),
    }
)

PLAIN = IndentRule()


def leading_spaces(line: Sequence[str]) -> int:
    count = 0
    for ch in line:
        if ch != " ":
            break
        count += 1
    return count


def rule_for(language: Optional[str]) -> IndentRule:
    lexer = get_lexer(language)
    if lexer is None:
        return PLAIN
    return INDENT_RULES.get(lexer.name, PLAIN)


__all__ = ["IndentRule", "INDENT_RULES", "PLAIN", "leading_spaces", "rule_for"]
