"""Token kind -> abstract theme slot mapping."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping, Optional

from .tokens import TokenKind


@dataclass(frozen=True, slots=True)
class TokenStyle:
    """Theme slot plus text attributes; colours belong to the host theme."""

    slot: str
    bold: bool = False
    italic: bool = False

    def resolve(self, theme: Mapping[str, Any]) -> Any:
        if self.slot in theme:
            return theme[self.slot]
        return theme.get("text")


DEFAULT_STYLE = TokenStyle("text")

TOKEN_STYLES: Mapping[TokenKind, TokenStyle] = MappingProxyType(
    {
        TokenKind.KEYWORD: TokenStyle("primary", bold=True),
        TokenKind.TYPE: TokenStyle("warning"),
        TokenKind.NUMBER: TokenStyle("accent"),
        TokenKind.STRING: TokenStyle("success"),
        TokenKind.COMMENT: TokenStyle("text_dim", italic=True),
        TokenKind.MACRO: TokenStyle("secondary", bold=True),
        TokenKind.SYMBOL: TokenStyle("accent", italic=True),
        TokenKind.BOOLEAN: TokenStyle("accent", bold=True),
        TokenKind.BUILTIN: TokenStyle("text_dim", italic=True),
        TokenKind.OPERATOR: TokenStyle("text_bright"),
        TokenKind.PUNCTUATION: TokenStyle("text_dim"),
        TokenKind.IDENTIFIER: DEFAULT_STYLE,
    }
)


def style_for(kind: TokenKind, theme: Optional[Mapping[str, Any]] = None) -> Any:
    """Return the :class:`TokenStyle` for ``kind``, or its theme value."""

    style = TOKEN_STYLES.get(kind, DEFAULT_STYLE)
    if theme is None:
        return style
    return style.resolve(theme)


__all__ = ["TokenStyle", "TOKEN_STYLES", "DEFAULT_STYLE", "style_for"]
