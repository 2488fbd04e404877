"""Per-line token cache with dirty-row tracking."""

from __future__ import annotations

from typing import List, Optional, Sequence, Set

from code_editor.runtime import telemetry

from .tokens import Lexer, Token


class TokenCache:
    """Holds one token list per document line.

    Rows are 1-based. Edits only mark rows dirty; the next
    :meth:`ensure_fresh` re-lexes exactly those rows. Without a lexer every
    row tokenizes to an empty list.
    """

    def __init__(self, lexer: Optional[Lexer] = None) -> None:
        self.lexer = lexer
        self._rows: List[List[Token]] = []
        self._dirty: Set[int] = set()
        self.logger = telemetry.get_logger("code_editor.syntax")

    @property
    def dirty(self) -> frozenset[int]:
        return frozenset(self._dirty)

    def __len__(self) -> int:
        return len(self._rows)

    def set_lexer(self, lexer: Optional[Lexer], lines: Sequence[Sequence[str]]) -> None:
        self.lexer = lexer
        self.rebuild(lines)

    def mark_dirty(self, row: int) -> None:
        self._dirty.add(row)

    def ensure_fresh(self, lines: Sequence[Sequence[str]]) -> None:
        count = len(lines)
        current = len(self._rows)
        if current < count:
            for row in range(current + 1, count + 1):
                self._rows.append([])
                self._dirty.add(row)
        elif current > count:
            del self._rows[count:]

        if not self._dirty:
            return
        relexed = 0
        for row in sorted(self._dirty):
            if 1 <= row <= count:
                self._rows[row - 1] = self._lex(lines[row - 1])
                relexed += 1
        self._dirty.clear()
        self.logger.debug(f"token cache refreshed {relexed} row(s)")

    def rebuild(self, lines: Sequence[Sequence[str]]) -> None:
        self._rows = [self._lex(line) for line in lines]
        self._dirty.clear()
        self.logger.debug(f"token cache rebuilt {len(self._rows)} row(s)")

    def tokens(self, row: int) -> List[Token]:
        if 1 <= row <= len(self._rows):
            return self._rows[row - 1]
        return []

    def _lex(self, line: Sequence[str]) -> List[Token]:
        if self.lexer is None:
            return []
        return self.lexer.lex(line)


__all__ = ["TokenCache"]
