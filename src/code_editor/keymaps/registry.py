"""Action and binding storage for the editor keymaps."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Optional, Tuple

from code_editor.runtime.telemetry import span

from .models import ActionRef, Binding

KeySlot = Tuple[str, str]  # (mode, normalized token)


@dataclass(slots=True)
class RegistryStats:
    action_count: int
    binding_count: int
    modes: tuple[str, ...]


class KeymapConflictError(RuntimeError):
    """A binding would shadow another one for the same key and flags."""

    def __init__(self, binding: Binding, conflicts: Iterable[Binding]):
        self.binding = binding
        self.conflicts = tuple(conflicts)
        taken_by = ", ".join(existing.id for existing in self.conflicts)
        super().__init__(
            f"Key '{binding.token}' in {binding.mode} mode is already bound by "
            f"{taken_by} (while registering '{binding.id}')"
        )


class KeymapRegistry:
    """Actions by id plus bindings indexed by ``(mode, token)``.

    A key may carry several bindings only when their ``when`` flags can never
    hold at the same time. Every change bumps :meth:`revision`.
    """

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._actions: Dict[str, ActionRef] = {}
        self._bindings: Dict[str, Binding] = {}
        self._slots: Dict[KeySlot, list[str]] = {}
        self._logger_name = logger_name
        self._revision = 0

    def revision(self) -> int:
        return self._revision

    # -- actions -------------------------------------------------------------

    def has_action(self, action_id: str) -> bool:
        return action_id in self._actions

    def get_action(self, action_id: str) -> ActionRef:
        action = self._actions.get(action_id)
        if action is None:
            raise KeyError(f"Action '{action_id}' is not registered")
        return action

    def register_action(self, action: ActionRef, *, replace: bool = False) -> ActionRef:
        if action.id in self._actions and not replace:
            raise ValueError(f"Action '{action.id}' already registered")
        self._actions[action.id] = action
        self._revision += 1
        return action

    # -- bindings ------------------------------------------------------------

    def get_binding(self, binding_id: str) -> Binding:
        binding = self._bindings.get(binding_id)
        if binding is None:
            raise KeyError(f"Binding '{binding_id}' is not registered")
        return binding

    def register_binding(self, binding: Binding, *, replace: bool = False) -> Binding:
        """Bind a key; with ``replace`` the same id and any clashing bindings go first."""

        with span(
            "keymaps::bind",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"binding_id": binding.id, "mode": binding.mode, "key": binding.token},
        ) as handle:
            if binding.action_id not in self._actions:
                handle.add_metadata("missing_action", binding.action_id)
                raise KeyError(
                    f"Binding '{binding.id}' references unknown action '{binding.action_id}'"
                )

            if binding.id in self._bindings:
                if not replace:
                    raise ValueError(f"Binding id '{binding.id}' already registered")
                self._unlink(self._bindings.pop(binding.id))

            conflicts = self.detect_conflicts(binding)
            if conflicts:
                if not replace:
                    handle.add_metadata("conflicts", ",".join(c.id for c in conflicts))
                    raise KeymapConflictError(binding, conflicts)
                for conflict in conflicts:
                    self._unlink(self._bindings.pop(conflict.id))

            self._bindings[binding.id] = binding
            self._slots.setdefault((binding.mode, binding.token), []).append(binding.id)
            self._revision += 1
            return binding

    def unregister_binding(self, binding_id: str) -> Optional[Binding]:
        binding = self._bindings.pop(binding_id, None)
        if binding is None:
            return None
        self._unlink(binding)
        self._revision += 1
        return binding

    def bindings_for(self, mode: str, token: str) -> tuple[Binding, ...]:
        return tuple(self._bindings[i] for i in self._slots.get((mode, token), ()))

    def iter_bindings(self, mode: Optional[str] = None) -> Iterator[Binding]:
        """All bindings, or one mode's bindings grouped by key."""

        if mode is None:
            yield from self._bindings.values()
            return
        for (slot_mode, _token), ids in sorted(self._slots.items()):
            if slot_mode == mode:
                for binding_id in ids:
                    yield self._bindings[binding_id]

    def detect_conflicts(self, binding: Binding) -> list[Binding]:
        return [
            existing
            for existing in self.bindings_for(binding.mode, binding.token)
            if existing.id != binding.id and _contexts_overlap(binding, existing)
        ]

    def stats(self) -> RegistryStats:
        return RegistryStats(
            action_count=len(self._actions),
            binding_count=len(self._bindings),
            modes=tuple(sorted({mode for mode, _token in self._slots})),
        )

    def _unlink(self, binding: Binding) -> None:
        slot = (binding.mode, binding.token)
        ids = self._slots.get(slot)
        if ids is None:
            return
        if binding.id in ids:
            ids.remove(binding.id)
        if not ids:
            del self._slots[slot]


def _contexts_overlap(left: Binding, right: Binding) -> bool:
    """Two bindings on one key clash unless some shared flag disagrees."""

    right_map = right.when_map
    return not any(
        flag in right_map and right_map[flag] != expected
        for flag, expected in left.when_map.items()
    )


__all__ = [
    "KeySlot",
    "KeymapConflictError",
    "KeymapRegistry",
    "RegistryStats",
]
