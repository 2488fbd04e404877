"""Dataclasses describing keymap bindings and action metadata."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Iterable, Mapping

MODES = ("global", "insert", "normal", "search")


def normalize_token(token: str) -> str:
    """Lower-case and sort modifier prefixes: ``"Ctrl+z"`` -> ``"ctrl+z"``."""

    if len(token) <= 1 or "+" not in token.rstrip("+"):
        return token
    *modifiers, key = token.split("+")
    cleaned = sorted(dict.fromkeys(m.strip().lower() for m in modifiers if m.strip()))
    return "+".join([*cleaned, key])


@dataclass(frozen=True, slots=True)
class WhenClause:
    """Simple boolean condition used to gate bindings."""

    flag: str
    expected: bool = True

    def __post_init__(self) -> None:
        if not self.flag:
            raise ValueError("flag cannot be empty")

    @classmethod
    def parse(cls, expression: str) -> "WhenClause":
        expr = expression.strip()
        if not expr:
            raise ValueError("expression cannot be empty")
        expected = True
        if expr.startswith("!"):
            expected = False
            expr = expr[1:]
        return cls(expr, expected)

    def evaluate(self, context: Mapping[str, bool]) -> bool:
        return bool(context.get(self.flag, False)) is self.expected


@dataclass(frozen=True, slots=True)
class ActionRef:
    """Editor verb plus the metadata a binding can read back at run time."""

    id: str
    handler: Callable[..., object]
    description: str = ""
    metadata: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ActionRef id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    def __call__(self, *args: object, **kwargs: object) -> object:
        return self.handler(*args, **kwargs)


@dataclass(frozen=True, slots=True)
class Binding:
    """Associates one key token in one mode with an action."""

    id: str
    mode: str
    token: str
    action_id: str
    description: str = ""
    when: tuple[WhenClause, ...] = ()
    priority: int = 0

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("binding id cannot be empty")
        if self.mode not in MODES:
            raise ValueError(f"binding mode must be one of {MODES}, got '{self.mode}'")
        if not self.token:
            raise ValueError("binding token cannot be empty")
        if not self.action_id:
            raise ValueError("binding action_id cannot be empty")
        object.__setattr__(self, "token", normalize_token(self.token))
        normalized_when = tuple(
            clause if isinstance(clause, WhenClause) else WhenClause.parse(str(clause))
            for clause in self.when
        )
        object.__setattr__(self, "when", normalized_when)

    @property
    def when_map(self) -> Mapping[str, bool]:
        return MappingProxyType({clause.flag: clause.expected for clause in self.when})

    def allows(self, context: Mapping[str, bool]) -> bool:
        return all(clause.evaluate(context) for clause in self.when)


def bindings_for(
    mode: str, entries: Iterable[tuple[str, str, str]]
) -> tuple[Binding, ...]:
    """Build ``Binding``s from ``(token, action_id, description)`` rows."""

    return tuple(
        Binding(
            id=f"{mode}.{token}",
            mode=mode,
            token=token,
            action_id=action_id,
            description=description,
        )
        for token, action_id, description in entries
    )


__all__ = [
    "MODES",
    "ActionRef",
    "Binding",
    "WhenClause",
    "bindings_for",
    "normalize_token",
]
