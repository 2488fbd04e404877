"""Key token -> action resolution for one mode at a time."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Literal, Mapping, Optional

from .models import ActionRef, Binding, normalize_token
from .registry import KeymapRegistry, KeySlot


@dataclass(frozen=True, slots=True)
class ResolutionMatch:
    binding: Binding
    action: ActionRef


@dataclass(frozen=True, slots=True)
class ResolutionResult:
    status: Literal["match", "miss"]
    match: Optional[ResolutionMatch] = None


MISS = ResolutionResult(status="miss")


class KeymapResolver:
    """Picks the binding a key triggers given the current ``when`` flags.

    Candidates per ``(mode, token)`` are cached until the registry revision
    moves. Among bindings whose flags hold, the highest priority wins and ties
    break on binding id.
    """

    def __init__(self, registry: KeymapRegistry) -> None:
        self._registry = registry
        self._revision = registry.revision()
        self._candidates: Dict[KeySlot, tuple[ResolutionMatch, ...]] = {}

    @property
    def registry(self) -> KeymapRegistry:
        return self._registry

    def resolve(
        self,
        mode: str,
        token: str,
        *,
        context: Optional[Mapping[str, bool]] = None,
    ) -> ResolutionResult:
        flags = context or {}
        for candidate in self._lookup((mode, normalize_token(token))):
            if candidate.binding.allows(flags):
                return ResolutionResult(status="match", match=candidate)
        return MISS

    def _lookup(self, slot: KeySlot) -> tuple[ResolutionMatch, ...]:
        if self._registry.revision() != self._revision:
            self._revision = self._registry.revision()
            self._candidates.clear()
        cached = self._candidates.get(slot)
        if cached is None:
            bindings = sorted(
                self._registry.bindings_for(*slot),
                key=lambda binding: (-binding.priority, binding.id),
            )
            cached = tuple(
                ResolutionMatch(binding, self._registry.get_action(binding.action_id))
                for binding in bindings
            )
            self._candidates[slot] = cached
        return cached


__all__ = [
    "KeymapResolver",
    "ResolutionMatch",
    "ResolutionResult",
]
