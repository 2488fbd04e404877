"""Single-slot yank buffer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(slots=True)
class YankBuffer:
    """Linewise content holds whole lines; charwise holds one character run."""

    lines: tuple[str, ...] = ()
    linewise: bool = False

    def is_empty(self) -> bool:
        return not self.lines

    def yank_lines(self, lines: Iterable[Iterable[str]]) -> None:
        self.lines = tuple("".join(line) for line in lines)
        self.linewise = True

    def yank_chars(self, chars: Iterable[str]) -> None:
        self.lines = ("".join(chars),)
        self.linewise = False

    def clear(self) -> None:
        self.lines = ()
        self.linewise = False


__all__ = ["YankBuffer"]
