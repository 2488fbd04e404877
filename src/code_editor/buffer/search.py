"""Literal incremental search over the document."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

Match = Tuple[int, int]  # 1-based (row, column of the first matched char)


class SearchState:
    """Query, ordered match list and the selected match.

    ``index`` is 1-based; 0 means no match is selected.
    """

    def __init__(self) -> None:
        self._query: List[str] = []
        self.matches: List[Match] = []
        self.index = 0

    @property
    def query(self) -> str:
        return "".join(self._query)

    def append(self, ch: str) -> None:
        self._query.append(ch)

    def pop(self) -> bool:
        if not self._query:
            return False
        self._query.pop()
        return True

    def reset(self) -> None:
        self._query.clear()
        self.clear()

    def clear(self) -> None:
        """Drop matches but keep the query for display."""

        self.matches = []
        self.index = 0

    def recompute(self, lines: Sequence[Sequence[str]], row: int, col: int) -> None:
        self.clear()
        query = self._query
        size = len(query)
        if not size:
            return
        for line_no, line in enumerate(lines, start=1):
            for start in range(len(line) - size + 1):
                if list(line[start : start + size]) == query:
                    self.matches.append((line_no, start + 1))
        if not self.matches:
            return
        self.index = 1
        for position, (match_row, match_col) in enumerate(self.matches, start=1):
            if match_row > row or (match_row == row and match_col - 1 >= col):
                self.index = position
                break

    def current(self) -> Optional[Match]:
        if not self.matches or self.index < 1:
            return None
        return self.matches[self.index - 1]

    def next(self) -> Optional[Match]:
        if not self.matches:
            return None
        self.index = self.index % len(self.matches) + 1
        return self.current()

    def prev(self) -> Optional[Match]:
        if not self.matches:
            return None
        self.index = (self.index - 2) % len(self.matches) + 1
        return self.current()

    def in_match(self, row: int, col: int) -> bool:
        """True when 1-based ``(row, col)`` lies inside any match."""

        size = len(self._query)
        if not size:
            return False
        return any(
            match_row == row and match_col <= col < match_col + size
            for match_row, match_col in self.matches
        )


__all__ = ["SearchState", "Match"]
