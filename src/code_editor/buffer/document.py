"""Line storage for the editor document."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

Line = List[str]
LinesSnapshot = Tuple[Tuple[str, ...], ...]


def split_text(text: str) -> List[Line]:
    """Split on ``"\\n"`` keeping empty pieces, so ``"a\\n"`` is two lines."""

    return [list(piece) for piece in text.split("\n")]


class Document:
    """Ordered, never-empty list of lines, each a list of code points.

    Rows are 1-based; column arguments are 0-based gap positions. The
    primitives below do not clamp: callers hand in positions that are already
    valid for the row they touch.
    """

    __slots__ = ("_lines",)

    def __init__(self, lines: Optional[Iterable[Iterable[str]]] = None) -> None:
        self._lines: List[Line] = [list(line) for line in lines or ()]
        if not self._lines:
            self._lines = [[]]

    @classmethod
    def from_text(cls, text: str) -> "Document":
        return cls(split_text(text))

    @property
    def line_count(self) -> int:
        return len(self._lines)

    @property
    def lines(self) -> Sequence[Line]:
        return self._lines

    @property
    def text(self) -> str:
        return "\n".join("".join(line) for line in self._lines)

    def line(self, row: int) -> Line:
        return self._lines[row - 1]

    def line_text(self, row: int) -> str:
        return "".join(self._lines[row - 1])

    def line_length(self, row: int) -> int:
        return len(self._lines[row - 1])

    def leading_spaces(self, row: int) -> int:
        count = 0
        for ch in self._lines[row - 1]:
            if ch != " ":
                break
            count += 1
        return count

    def max_col(self, row: int, *, normal: bool = False) -> int:
        length = len(self._lines[row - 1])
        if normal:
            return max(length - 1, 0)
        return length

    def clamp_col(self, row: int, col: int, *, normal: bool = False) -> int:
        return max(0, min(col, self.max_col(row, normal=normal)))

    # -- whole-document -------------------------------------------------

    def set_text(self, text: str) -> None:
        self._lines = split_text(text)

    def clear(self) -> None:
        self._lines = [[]]

    def snapshot(self) -> LinesSnapshot:
        return tuple(tuple(line) for line in self._lines)

    def restore(self, lines: LinesSnapshot) -> None:
        self._lines = [list(line) for line in lines] or [[]]

    # -- character edits ------------------------------------------------

    def insert_text(self, row: int, col: int, chars: Iterable[str]) -> int:
        """Insert ``chars`` before column ``col``; return how many went in."""

        run = list(chars)
        self._lines[row - 1][col:col] = run
        return len(run)

    def delete_range(self, row: int, start: int, stop: int) -> Line:
        """Remove and return the characters in ``[start, stop)``."""

        line = self._lines[row - 1]
        removed = line[start:stop]
        del line[start:stop]
        return removed

    def replace_char(self, row: int, col: int, ch: str) -> None:
        self._lines[row - 1][col] = ch

    def strip_leading(self, row: int, count: int) -> int:
        """Drop up to ``count`` leading spaces; return how many were removed."""

        count = min(count, self.leading_spaces(row))
        if count:
            del self._lines[row - 1][:count]
        return count

    # -- structural edits -----------------------------------------------

    def split_line(self, row: int, col: int, indent: int = 0) -> None:
        line = self._lines[row - 1]
        right = line[col:]
        del line[col:]
        self._lines.insert(row, [" "] * indent + right)

    def merge_into_previous(self, row: int) -> int:
        """Append ``row`` onto ``row - 1``; return the join column."""

        previous = self._lines[row - 2]
        join_col = len(previous)
        previous.extend(self._lines.pop(row - 1))
        return join_col

    def join_next(self, row: int, *, strip: bool = False, separator: str = "") -> bool:
        """Pull the next row onto ``row``. No-op on the last row.

        With ``strip`` the next row loses its leading blanks, and ``separator``
        is only added when both halves are non-empty.
        """

        if row >= len(self._lines):
            return False
        following = self._lines.pop(row)
        if strip:
            start = 0
            while start < len(following) and following[start] in " \t":
                start += 1
            following = following[start:]
        current = self._lines[row - 1]
        if separator and current and following:
            current.extend(separator)
        current.extend(following)
        return True

    def insert_lines(self, row: int, lines: Iterable[Iterable[str]]) -> int:
        """Insert ``lines`` so the first lands at ``row``; return the count."""

        new_lines = [list(line) for line in lines]
        self._lines[row - 1 : row - 1] = new_lines
        return len(new_lines)

    def remove_line(self, row: int) -> Line:
        """Remove ``row``; the last remaining line is emptied instead."""

        if len(self._lines) == 1:
            removed = self._lines[0]
            self._lines[0] = []
            return removed
        return self._lines.pop(row - 1)

    def replace_line(self, row: int, chars: Iterable[str]) -> None:
        self._lines[row - 1] = list(chars)


__all__ = ["Document", "Line", "LinesSnapshot", "split_text"]
